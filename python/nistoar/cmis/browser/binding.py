"""
The Browser Binding session:  the entry point for talking to a CMIS repository server.

A :py:class:`BrowserBinding` is created from a configuration dictionary (see
:py:mod:`nistoar.cmis.config`) and exposes the nine CMIS services as attributes:

.. code-block:: python

   binding = BrowserBinding({"service_endpoint": "https://cmis.example.org/browser"})
   info = binding.repository.get_repository_info("A1")
   folder = binding.object.get_object_by_path("A1", "/reports")

All services of a session share its repository URL cache, type-definition cache, and HTTP
transport; a session may be used from several threads at once.
"""
import logging
from collections.abc import Mapping

from ..config import with_defaults
from ..exceptions import ConfigurationException
from .urls import RepositoryUrlCache
from .typecache import TypeDefinitionCache, ClientTypeCache
from .http import HttpInvoker
from .dispatch import RequestDispatcher
from .services import (RepositoryService, NavigationService, ObjectService, VersioningService,
                       DiscoveryService, RelationshipService, MultiFilingService, PolicyService,
                       AclService)

__all__ = [ "BrowserBinding" ]

class BrowserBinding(object):
    """
    a client session with a CMIS repository server via its Browser Binding
    """

    def __init__(self, config: Mapping, log: logging.Logger = None):
        """
        :param Mapping config:  the client configuration; ``service_endpoint`` is required
        :param Logger log:      the Logger to use; if not provided, the ``nistoar.cmis``
                                Logger is used
        :raises ConfigurationException:  if the configuration is missing or invalid
        """
        if config is None or not isinstance(config, Mapping):
            raise ConfigurationException("BrowserBinding: configuration is not a dictionary")
        self.config = with_defaults(config)

        self.service_endpoint = self.config.get("service_endpoint")
        if not self.service_endpoint:
            raise ConfigurationException(param="service_endpoint")

        if not log:
            log = logging.getLogger("nistoar.cmis")
        self.log = log

        cachecfg = self.config.get("cache") or {}
        try:
            self.type_cache = TypeDefinitionCache(int(cachecfg.get("repositories")),
                                                  int(cachecfg.get("types")))
        except (TypeError, ValueError) as ex:
            raise ConfigurationException("cache: bad cache size: " + str(ex), "cache",
                                         ex) from ex
        self.url_cache = RepositoryUrlCache()
        self.http = HttpInvoker(self.config, log.getChild("http"))
        self.dispatcher = RequestDispatcher(self.http, log.getChild("dispatch"))

        self.repository = RepositoryService(self)
        self.navigation = NavigationService(self)
        self.object = ObjectService(self)
        self.versioning = VersioningService(self)
        self.discovery = DiscoveryService(self)
        self.relationship = RelationshipService(self)
        self.multifiling = MultiFilingService(self)
        self.policy = PolicyService(self)
        self.acl = AclService(self)

    def get_type_cache(self, repo_id: str) -> ClientTypeCache:
        """
        return a TypeCache that resolves type definitions of the given repository through
        this session
        """
        return ClientTypeCache(repo_id, self.repository)

    def clear_all_caches(self):
        """
        forget all cached repository URLs and type definitions
        """
        self.url_cache.remove_repository(None)
        self.type_cache.clear()

    def clear_repository_cache(self, repo_id: str):
        """
        forget the cached URLs and type definitions of one repository
        """
        self.url_cache.remove_repository(repo_id)
        self.type_cache.remove(repo_id)
