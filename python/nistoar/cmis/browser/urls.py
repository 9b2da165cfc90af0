"""
URL construction for the Browser Binding and the session-scoped cache of repository URLs.

Each repository served by a Browser Binding endpoint has two URLs:  the *repository URL*,
to which repository-level requests (e.g. type queries) are sent, and the *root URL*, to which
object-level requests are sent (either with an ``objectId`` parameter or with the object's
path appended).  These are learned from the endpoint's repository descriptions and kept in a
:py:class:`RepositoryUrlCache`.
"""
import logging
import threading
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from urllib.parse import urlsplit, urlunsplit, quote

from ..exceptions import CmisConnectionException
from ..values import format_decimal
from . import constants as const

__all__ = [ "UrlBuilder", "normalize_parameter", "RepositoryUrlCache" ]

def normalize_parameter(value) -> str:
    """
    render a request parameter value as its wire token:  enumeration members by their wire
    values, booleans as "true" or "false", and numbers in plain notation
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format_decimal(value)
    return str(value)

# reserved characters that must be escaped within a path segment
_PATH_SAFE = "/!*'()~-._"

class UrlBuilder(object):
    """
    a helper for building request URLs by adding query parameters and path components to a
    base URL
    """

    def __init__(self, url: str):
        if url is None:
            raise ValueError("UrlBuilder: url must not be None")
        parts = urlsplit(url)
        self._scheme = parts.scheme
        self._netloc = parts.netloc
        self._path = parts.path
        self._query = parts.query
        self._fragment = parts.fragment

    def add_parameter(self, name: str, value):
        """
        append a query parameter.  Nothing is added if either the name or value is None.
        :return:  this builder
        """
        if name is None or value is None:
            return self
        param = name + "=" + quote(normalize_parameter(value), safe="")
        self._query = self._query + "&" + param if self._query else param
        return self

    def add_path(self, path: str):
        """
        append a path (which may contain several segments) to the URL's path
        :return:  this builder
        """
        if not path:
            return self
        if not self._path.endswith('/'):
            self._path += '/'
        if path.startswith('/'):
            path = path[1:]
        self._path += quote(path, safe=_PATH_SAFE)
        return self

    @property
    def url(self) -> str:
        return urlunsplit((self._scheme, self._netloc, self._path, self._query, self._fragment))

    def __str__(self):
        return self.url

    def __repr__(self):
        return "UrlBuilder(%r)" % self.url

class RepositoryUrlCache(object):
    """
    a thread-safe cache mapping repository identifiers to their repository and root URLs.

    All reads and writes are serialized by an internal lock.  Entries are only ever replaced
    as a whole.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._urls = {}
        self.log = logging.getLogger("nistoar.cmis").getChild("urlcache")

    def add_repository(self, repo_id: str, repository_url: str, root_url: str):
        """
        record (or replace) the URLs for a repository
        :raises ValueError:  if any of the inputs is not set
        """
        if not repo_id or not repository_url or not root_url:
            raise ValueError("Repository Id or Repository URL or Root URL is not set!")
        with self.lock:
            self._urls[repo_id] = (repository_url, root_url)

    def remove_repository(self, repo_id: str = None):
        """
        forget the URLs for a repository or, if ``repo_id`` is None, for all repositories
        """
        with self.lock:
            if repo_id is None:
                self._urls.clear()
            else:
                self._urls.pop(repo_id, None)

    def populate(self, repo_id: str, discover: Callable) -> list:
        """
        learn repository URLs by calling the given discovery function and caching the URLs
        of each repository it describes.  The discovery call is made without holding the lock.
        :param str repo_id:  the repository of interest (passed to ``discover``); may be None
        :param discover:     a function that accepts a repository identifier (or None) and
                             returns a list of :py:class:`~nistoar.cmis.data.RepositoryInfo`
        :return:  the list of repository descriptions returned by ``discover``
        :raises CmisConnectionException:  if a returned description lacks an identifier,
                                          repository URL, or root URL
        """
        infos = discover(repo_id) or []
        for info in infos:
            if not info.id or not info.repository_url or not info.root_url:
                self.log.warning("Discovery returned incomplete description for repository %s",
                                 info.id)
                raise CmisConnectionException("Found invalid Repository Info! (id: %s)" %
                                              info.id)
        for info in infos:
            self.add_repository(info.id, info.repository_url, info.root_url)
        self.log.debug("Cached URLs for %d repositories", len(infos))
        return infos

    def get_repository_base_url(self, repo_id: str) -> str:
        with self.lock:
            urls = self._urls.get(repo_id)
        return urls[0] if urls else None

    def get_root_url(self, repo_id: str) -> str:
        with self.lock:
            urls = self._urls.get(repo_id)
        return urls[1] if urls else None

    def get_repository_url(self, repo_id: str, selector: str = None) -> UrlBuilder:
        """
        return a builder for a repository-level URL, or None if the repository is not cached
        """
        url = self.get_repository_base_url(repo_id)
        if url is None:
            return None
        return UrlBuilder(url).add_parameter(const.PARAM_SELECTOR, selector)

    def get_object_url(self, repo_id: str, object_id: str, selector: str = None) -> UrlBuilder:
        """
        return a builder for an object URL (which identifies the object with an ``objectId``
        parameter), or None if the repository is not cached
        """
        url = self.get_root_url(repo_id)
        if url is None:
            return None
        return UrlBuilder(url).add_parameter(const.PARAM_OBJECT_ID, object_id) \
                              .add_parameter(const.PARAM_SELECTOR, selector)

    def get_path_url(self, repo_id: str, path: str, selector: str = None) -> UrlBuilder:
        """
        return a builder for a URL that identifies an object by its path, or None if the
        repository is not cached
        """
        url = self.get_root_url(repo_id)
        if url is None:
            return None
        return UrlBuilder(url).add_path(path).add_parameter(const.PARAM_SELECTOR, selector)

    def __contains__(self, repo_id):
        with self.lock:
            return repo_id in self._urls

    def __len__(self):
        with self.lock:
            return len(self._urls)
