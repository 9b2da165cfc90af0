"""
Caching of type definitions.

Decoding succinct properties requires the definitions of the types an object belongs to.  The
codecs look these up through the :py:class:`TypeCache` interface; a binding session provides a
:py:class:`ClientTypeCache`, which keeps definitions fetched from the repository in the
session-wide :py:class:`TypeDefinitionCache`.
"""
import threading
from abc import ABCMeta, abstractmethod
from collections import OrderedDict

from ..data import TypeDefinition, PropertyDefinition
from ..config import DEFAULT_CACHE_SIZE_REPOSITORIES, DEFAULT_CACHE_SIZE_TYPES

__all__ = [ "TypeCache", "ClientTypeCache", "TypeDefinitionCache" ]

class TypeCache(metaclass=ABCMeta):
    """
    an interface for looking up type definitions while decoding objects
    """

    @abstractmethod
    def get_type_definition(self, type_id: str) -> TypeDefinition:
        """
        return the definition of the type with the given identifier, preferring a previously
        cached version.  None is returned if the type is unknown.
        """
        raise NotImplementedError()

    @abstractmethod
    def reload_type_definition(self, type_id: str) -> TypeDefinition:
        """
        return a freshly retrieved definition of the type with the given identifier, bypassing
        (and then refreshing) any cached version.  None is returned if the type is unknown.
        """
        raise NotImplementedError()

    @abstractmethod
    def get_type_definition_for_object(self, object_id: str) -> TypeDefinition:
        """
        return the definition of the type of the object with the given identifier, or None
        if it cannot be determined
        """
        raise NotImplementedError()

    @abstractmethod
    def get_property_definition(self, prop_id: str) -> PropertyDefinition:
        """
        return the definition of the property with the given identifier, or None if it
        cannot be determined without knowing the type that defines it
        """
        raise NotImplementedError()

class TypeDefinitionCache(object):
    """
    a thread-safe, size-limited cache of type definitions organized by repository.  When
    either level fills up, the least recently used entry is evicted.
    """

    def __init__(self, max_repositories: int = DEFAULT_CACHE_SIZE_REPOSITORIES,
                 max_types: int = DEFAULT_CACHE_SIZE_TYPES):
        """
        :param int max_repositories:  the maximum number of repositories to hold types for
        :param int max_types:         the maximum number of types to hold per repository
        """
        if max_repositories < 1 or max_types < 1:
            raise ValueError("TypeDefinitionCache: cache sizes must be positive")
        self.max_repositories = max_repositories
        self.max_types = max_types
        self.lock = threading.RLock()
        self._repos = OrderedDict()

    def get(self, repo_id: str, type_id: str) -> TypeDefinition:
        """
        return the cached definition of a type or None if it is not cached
        """
        with self.lock:
            types = self._repos.get(repo_id)
            if types is None:
                return None
            self._repos.move_to_end(repo_id)
            typedef = types.get(type_id)
            if typedef is not None:
                types.move_to_end(type_id)
            return typedef

    def put(self, repo_id: str, typedef: TypeDefinition):
        """
        cache a type definition for the given repository
        """
        if typedef is None or typedef.id is None:
            return
        with self.lock:
            types = self._repos.get(repo_id)
            if types is None:
                types = OrderedDict()
                self._repos[repo_id] = types
                while len(self._repos) > self.max_repositories:
                    self._repos.popitem(last=False)
            self._repos.move_to_end(repo_id)
            types[typedef.id] = typedef
            types.move_to_end(typedef.id)
            while len(types) > self.max_types:
                types.popitem(last=False)

    def remove(self, repo_id: str, type_id: str = None):
        """
        remove a type definition from the cache or, if ``type_id`` is not given, all of the
        definitions for a repository
        """
        with self.lock:
            if type_id is None:
                self._repos.pop(repo_id, None)
            elif repo_id in self._repos:
                self._repos[repo_id].pop(type_id, None)

    def clear(self):
        with self.lock:
            self._repos.clear()

    def __len__(self):
        with self.lock:
            return sum(len(t) for t in self._repos.values())

class ClientTypeCache(TypeCache):
    """
    the TypeCache used by the binding services:  definitions are taken from the session's
    :py:class:`TypeDefinitionCache` when available and otherwise retrieved from the repository.
    """

    def __init__(self, repo_id: str, service):
        """
        :param str repo_id:  the repository the types belong to
        :param service:      the binding service used to retrieve definitions; it must provide
                             ``get_type_definition_internal(repo_id, type_id)`` and a
                             ``binding`` with a ``type_cache`` attribute
        """
        self.repo_id = repo_id
        self.service = service

    @property
    def _cache(self) -> TypeDefinitionCache:
        return self.service.binding.type_cache

    def get_type_definition(self, type_id: str) -> TypeDefinition:
        typedef = self._cache.get(self.repo_id, type_id)
        if typedef is None:
            typedef = self.service.get_type_definition_internal(self.repo_id, type_id)
            if typedef is not None:
                self._cache.put(self.repo_id, typedef)
        return typedef

    def reload_type_definition(self, type_id: str) -> TypeDefinition:
        typedef = self.service.get_type_definition_internal(self.repo_id, type_id)
        if typedef is not None:
            self._cache.put(self.repo_id, typedef)
        return typedef

    def get_type_definition_for_object(self, object_id: str) -> TypeDefinition:
        return None

    def get_property_definition(self, prop_id: str) -> PropertyDefinition:
        return None
