"""
The CMIS services as implemented over the Browser Binding.

Each service class groups the operations of one CMIS service (Repository, Navigation, Object,
etc.).  Service instances are created by, and share the state of, a
:py:class:`~nistoar.cmis.browser.binding.BrowserBinding` session:  its repository URL cache,
its type-definition cache, and its HTTP transport.

Read operations are sent as GET requests identifying the requested information with a
``cmisselector`` parameter; write operations are sent as form POSTs identifying the operation
with a ``cmisaction`` control.  Operations that create or modify an object return the
(possibly new) object identifier along with the object's new change token as a tuple.
"""
import logging
from collections.abc import Mapping

from ..data import (ContentStream, PartialContentStream, FailedToDeleteData, PropertiesBag,
                    ObjectData, TypeDefinition)
from ..constants import PROP_CHANGE_TOKEN
from ..enums import DateTimeFormat, PropertyType, ReturnVersion
from ..exceptions import (CmisConnectionException, CmisInvalidArgumentException,
                          CmisObjectNotFoundException)
from ..config import get_bool
from . import constants as const
from .dispatch import FormDataComposer, parse_object, parse_array
from .urls import UrlBuilder
from .typecache import ClientTypeCache
from .repository import convert_repository_info
from .types import (convert_type_definition, convert_type_children, convert_type_descendants,
                    type_definition_to_json)
from .properties import convert_properties, convert_succinct_properties
from .objects import (convert_object, convert_objects, convert_acl, convert_allowable_actions,
                      convert_renditions, convert_object_list, convert_object_in_folder_list,
                      convert_descendants, convert_object_parents, convert_failed_to_delete,
                      convert_bulk_update)
from .utils import dumps

__all__ = [ "AbstractBrowserBindingService", "RepositoryService", "NavigationService",
            "ObjectService", "VersioningService", "DiscoveryService", "RelationshipService",
            "MultiFilingService", "PolicyService", "AclService" ]

def _require_object_id(object_id):
    if not object_id:
        raise CmisInvalidArgumentException("Object ID must be set!")

def _change_token_of(obj: ObjectData):
    if obj is None or obj.properties is None:
        return None
    ct = obj.properties.get(PROP_CHANGE_TOKEN)
    if ct is not None and ct.property_type == PropertyType.STRING:
        return ct.first_value
    return None

class AbstractBrowserBindingService(object):
    """
    the base class for the Browser Binding services, providing URL resolution, request
    dispatch, and repository discovery.
    """

    def __init__(self, binding, log: logging.Logger = None):
        """
        :param binding:  the BrowserBinding session this service belongs to
        :param Logger log:  the Logger to use; if not provided, one is derived from the
                            binding's Logger
        """
        self.binding = binding
        if not log:
            log = binding.log.getChild(type(self).__name__)
        self.log = log

        config = binding.config
        self.succinct = get_bool(config, "succinct", True)
        self.datetime_format = DateTimeFormat.from_wire(config.get("datetime_format")) or \
                               DateTimeFormat.SIMPLE
        self.omit_change_tokens = get_bool(config, "omit_change_tokens", False)

    @property
    def succinct_parameter(self):
        return "true" if self.succinct else None

    @property
    def datetime_format_parameter(self):
        return None if self.datetime_format == DateTimeFormat.SIMPLE else self.datetime_format

    @property
    def service_url(self) -> str:
        return self.binding.service_endpoint

    @property
    def url_cache(self):
        return self.binding.url_cache

    def _change_token_param(self, change_token):
        return None if self.omit_change_tokens else change_token

    def _resolve(self, repo_id, lookup):
        url = lookup()
        if url is None:
            self.get_repositories_internal(repo_id)
            url = lookup()
        if url is None:
            raise CmisObjectNotFoundException("Unknown repository!")
        return url

    def get_repository_url(self, repo_id: str, selector: str = None) -> UrlBuilder:
        """
        return a builder for a repository-level URL.  If the repository is not yet known,
        the repository descriptions are fetched (once) to learn it.
        :raises CmisObjectNotFoundException:  if the repository is unknown to the server
        """
        return self._resolve(repo_id,
                             lambda: self.url_cache.get_repository_url(repo_id, selector))

    def get_object_url(self, repo_id: str, object_id: str, selector: str = None) -> UrlBuilder:
        """
        return a builder for an object URL
        :raises CmisObjectNotFoundException:  if the repository is unknown to the server
        """
        return self._resolve(repo_id,
                             lambda: self.url_cache.get_object_url(repo_id, object_id, selector))

    def get_path_url(self, repo_id: str, path: str, selector: str = None) -> UrlBuilder:
        """
        return a builder for a URL identifying an object by its path
        :raises CmisObjectNotFoundException:  if the repository is unknown to the server
        """
        return self._resolve(repo_id,
                             lambda: self.url_cache.get_path_url(repo_id, path, selector))

    def _type_cache(self, repo_id):
        return ClientTypeCache(repo_id, self)

    def _composer(self, action, with_succinct=False):
        out = FormDataComposer(action, self.datetime_format)
        out.succinct = with_succinct and self.succinct
        return out

    def _read(self, url):
        return self.binding.dispatcher.read(url)

    def _post(self, url, composer):
        return self.binding.dispatcher.post(url, composer)

    def _post_and_consume(self, url, composer):
        self.binding.dispatcher.post_and_consume(url, composer)

    def _read_object(self, url) -> Mapping:
        return parse_object(self._read(url))

    def _read_array(self, url) -> list:
        return parse_array(self._read(url))

    def _post_for_object(self, repo_id, url, composer) -> ObjectData:
        json = parse_object(self._post(url, composer))
        return convert_object(json, self._type_cache(repo_id))

    def _id_and_token(self, obj):
        return (obj.id if obj is not None else None, _change_token_of(obj))

    def _fetch_repository_infos(self, repo_id):
        url = None
        if repo_id is not None:
            url = self.url_cache.get_repository_url(repo_id, const.SELECTOR_REPOSITORY_INFO)
        if url is None:
            url = UrlBuilder(self.service_url)

        out = []
        for value in self._read_object(url).values():
            if not isinstance(value, Mapping):
                raise CmisConnectionException("Found invalid Repository Info!")
            out.append(convert_repository_info(value))
        return out

    def get_repositories_internal(self, repo_id: str = None) -> list:
        """
        retrieve the descriptions of the repositories available from the service endpoint,
        caching the URLs of each.  If ``repo_id`` names a repository whose URLs are already
        cached, only that repository's description is requested.
        :raises CmisConnectionException:  if the server returns an invalid description
        """
        out = self.url_cache.populate(repo_id, self._fetch_repository_infos)
        self.log.debug("Retrieved %d repository descriptions", len(out))
        return out

    def get_type_definition_internal(self, repo_id: str, type_id: str) -> TypeDefinition:
        """
        retrieve a type definition from the repository (bypassing the type cache)
        """
        url = self.get_repository_url(repo_id, const.SELECTOR_TYPE_DEFINITION)
        url.add_parameter(const.PARAM_TYPE_ID, type_id)
        return convert_type_definition(self._read_object(url))

class RepositoryService(AbstractBrowserBindingService):
    """
    the Repository service:  repository descriptions and type management
    """

    def get_repository_infos(self) -> list:
        """
        return the descriptions of all repositories available from the endpoint
        """
        return self.get_repositories_internal(None)

    def get_repository_info(self, repo_id: str):
        """
        return the description of the given repository
        :raises CmisObjectNotFoundException:  if the repository does not exist
        """
        infos = self.get_repositories_internal(repo_id)
        if len(infos) == 1:
            return infos[0]
        for info in infos:
            if info.id is not None and info.id == repo_id:
                return info
        raise CmisObjectNotFoundException("Repository '%s' not found!" % repo_id)

    def get_type_children(self, repo_id: str, type_id: str = None,
                          include_property_definitions: bool = None, max_items: int = None,
                          skip_count: int = None):
        url = self.get_repository_url(repo_id, const.SELECTOR_TYPE_CHILDREN)
        url.add_parameter(const.PARAM_TYPE_ID, type_id)
        url.add_parameter(const.PARAM_PROPERTY_DEFINITIONS, include_property_definitions)
        url.add_parameter(const.PARAM_MAX_ITEMS, max_items)
        url.add_parameter(const.PARAM_SKIP_COUNT, skip_count)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return convert_type_children(self._read_object(url))

    def get_type_descendants(self, repo_id: str, type_id: str = None, depth: int = None,
                             include_property_definitions: bool = None) -> list:
        url = self.get_repository_url(repo_id, const.SELECTOR_TYPE_DESCENDANTS)
        url.add_parameter(const.PARAM_TYPE_ID, type_id)
        url.add_parameter(const.PARAM_DEPTH, depth)
        url.add_parameter(const.PARAM_PROPERTY_DEFINITIONS, include_property_definitions)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return convert_type_descendants(self._read_array(url))

    def get_type_definition(self, repo_id: str, type_id: str) -> TypeDefinition:
        return self.get_type_definition_internal(repo_id, type_id)

    def _send_type(self, repo_id, action, typedef):
        url = self.get_repository_url(repo_id)
        composer = self._composer(action)
        if typedef is not None:
            composer.parameters[const.CONTROL_TYPE] = \
                dumps(type_definition_to_json(typedef, self.datetime_format))
        return convert_type_definition(parse_object(self._post(url, composer)))

    def create_type(self, repo_id: str, typedef: TypeDefinition) -> TypeDefinition:
        """
        create a new type, returning its definition as stored by the repository
        """
        return self._send_type(repo_id, const.CMISACTION_CREATE_TYPE, typedef)

    def update_type(self, repo_id: str, typedef: TypeDefinition) -> TypeDefinition:
        """
        update a type, returning its definition as stored by the repository
        """
        return self._send_type(repo_id, const.CMISACTION_UPDATE_TYPE, typedef)

    def delete_type(self, repo_id: str, type_id: str):
        url = self.get_repository_url(repo_id)
        composer = self._composer(const.CMISACTION_DELETE_TYPE)
        composer.parameters[const.CONTROL_TYPE_ID] = type_id
        self._post_and_consume(url, composer)
        self.binding.type_cache.remove(repo_id, type_id)

class NavigationService(AbstractBrowserBindingService):
    """
    the Navigation service:  traversal of the folder hierarchy
    """

    def _add_listing_params(self, url, filter, include_allowable_actions, include_relationships,
                            rendition_filter):
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_RELATIONSHIPS, include_relationships)
        url.add_parameter(const.PARAM_RENDITION_FILTER, rendition_filter)

    def _add_format_params(self, url):
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)

    def get_children(self, repo_id: str, folder_id: str, filter: str = None, order_by: str = None,
                     include_allowable_actions: bool = None, include_relationships=None,
                     rendition_filter: str = None, include_path_segment: bool = None,
                     max_items: int = None, skip_count: int = None):
        url = self.get_object_url(repo_id, folder_id, const.SELECTOR_CHILDREN)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ORDER_BY, order_by)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_RELATIONSHIPS, include_relationships)
        url.add_parameter(const.PARAM_RENDITION_FILTER, rendition_filter)
        url.add_parameter(const.PARAM_PATH_SEGMENT, include_path_segment)
        url.add_parameter(const.PARAM_MAX_ITEMS, max_items)
        url.add_parameter(const.PARAM_SKIP_COUNT, skip_count)
        self._add_format_params(url)
        return convert_object_in_folder_list(self._read_object(url), self._type_cache(repo_id))

    def _get_tree(self, selector, repo_id, folder_id, depth, filter, include_allowable_actions,
                  include_relationships, rendition_filter, include_path_segment):
        url = self.get_object_url(repo_id, folder_id, selector)
        url.add_parameter(const.PARAM_DEPTH, depth)
        self._add_listing_params(url, filter, include_allowable_actions, include_relationships,
                                 rendition_filter)
        url.add_parameter(const.PARAM_PATH_SEGMENT, include_path_segment)
        self._add_format_params(url)
        return convert_descendants(self._read_array(url), self._type_cache(repo_id))

    def get_descendants(self, repo_id: str, folder_id: str, depth: int = None, filter: str = None,
                        include_allowable_actions: bool = None, include_relationships=None,
                        rendition_filter: str = None, include_path_segment: bool = None) -> list:
        return self._get_tree(const.SELECTOR_DESCENDANTS, repo_id, folder_id, depth, filter,
                              include_allowable_actions, include_relationships, rendition_filter,
                              include_path_segment)

    def get_folder_tree(self, repo_id: str, folder_id: str, depth: int = None, filter: str = None,
                        include_allowable_actions: bool = None, include_relationships=None,
                        rendition_filter: str = None, include_path_segment: bool = None) -> list:
        return self._get_tree(const.SELECTOR_FOLDER_TREE, repo_id, folder_id, depth, filter,
                              include_allowable_actions, include_relationships, rendition_filter,
                              include_path_segment)

    def get_object_parents(self, repo_id: str, object_id: str, filter: str = None,
                           include_allowable_actions: bool = None, include_relationships=None,
                           rendition_filter: str = None,
                           include_relative_path_segment: bool = None) -> list:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_PARENTS)
        self._add_listing_params(url, filter, include_allowable_actions, include_relationships,
                                 rendition_filter)
        url.add_parameter(const.PARAM_RELATIVE_PATH_SEGMENT, include_relative_path_segment)
        self._add_format_params(url)
        return convert_object_parents(self._read_array(url), self._type_cache(repo_id))

    def get_folder_parent(self, repo_id: str, folder_id: str, filter: str = None) -> ObjectData:
        url = self.get_object_url(repo_id, folder_id, const.SELECTOR_PARENT)
        url.add_parameter(const.PARAM_FILTER, filter)
        self._add_format_params(url)
        return convert_object(self._read_object(url), self._type_cache(repo_id))

    def get_checked_out_docs(self, repo_id: str, folder_id: str = None, filter: str = None,
                             order_by: str = None, include_allowable_actions: bool = None,
                             include_relationships=None, rendition_filter: str = None,
                             max_items: int = None, skip_count: int = None):
        """
        list the checked-out documents within a folder or, if ``folder_id`` is None, within
        the whole repository
        """
        if folder_id is not None:
            url = self.get_object_url(repo_id, folder_id, const.SELECTOR_CHECKEDOUT)
        else:
            url = self.get_repository_url(repo_id, const.SELECTOR_CHECKEDOUT)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ORDER_BY, order_by)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_RELATIONSHIPS, include_relationships)
        url.add_parameter(const.PARAM_RENDITION_FILTER, rendition_filter)
        url.add_parameter(const.PARAM_MAX_ITEMS, max_items)
        url.add_parameter(const.PARAM_SKIP_COUNT, skip_count)
        self._add_format_params(url)
        return convert_object_list(self._read_object(url), self._type_cache(repo_id), False)

class ObjectService(AbstractBrowserBindingService):
    """
    the Object service:  creating, reading, updating, and deleting objects and their content
    """

    def _create(self, repo_id, action, folder_id, properties, policies, add_aces, remove_aces,
                parameters=None, content_stream=None, folder_required=False):
        if folder_id is not None or folder_required:
            url = self.get_object_url(repo_id, folder_id)
        else:
            url = self.get_repository_url(repo_id)

        composer = self._composer(action, True)
        if parameters:
            composer.parameters.update(parameters)
        composer.properties = properties
        composer.policies = policies
        composer.add_aces = add_aces
        composer.remove_aces = remove_aces
        composer.content_stream = content_stream

        obj = self._post_for_object(repo_id, url, composer)
        return obj.id if obj is not None else None

    def create_document(self, repo_id: str, properties: PropertiesBag, folder_id: str = None,
                        content_stream: ContentStream = None, versioning_state=None,
                        policies=None, add_aces=None, remove_aces=None) -> str:
        """
        create a document, filed in the given folder (or unfiled if ``folder_id`` is None)
        :return:  the identifier of the new document
        """
        return self._create(repo_id, const.CMISACTION_CREATE_DOCUMENT, folder_id, properties,
                            policies, add_aces, remove_aces,
                            { const.PARAM_VERSIONING_STATE: versioning_state }, content_stream)

    def create_document_from_source(self, repo_id: str, source_id: str,
                                    properties: PropertiesBag = None, folder_id: str = None,
                                    versioning_state=None, policies=None, add_aces=None,
                                    remove_aces=None) -> str:
        """
        create a document as a copy of an existing one
        :return:  the identifier of the new document
        """
        params = { const.PARAM_SOURCE_ID: source_id,
                   const.PARAM_VERSIONING_STATE: versioning_state }
        return self._create(repo_id, const.CMISACTION_CREATE_DOCUMENT_FROM_SOURCE, folder_id,
                            properties, policies, add_aces, remove_aces, params)

    def create_folder(self, repo_id: str, properties: PropertiesBag, folder_id: str,
                      policies=None, add_aces=None, remove_aces=None) -> str:
        return self._create(repo_id, const.CMISACTION_CREATE_FOLDER, folder_id, properties,
                            policies, add_aces, remove_aces, folder_required=True)

    def create_relationship(self, repo_id: str, properties: PropertiesBag, policies=None,
                            add_aces=None, remove_aces=None) -> str:
        return self._create(repo_id, const.CMISACTION_CREATE_RELATIONSHIP, None, properties,
                            policies, add_aces, remove_aces)

    def create_policy(self, repo_id: str, properties: PropertiesBag, folder_id: str = None,
                      policies=None, add_aces=None, remove_aces=None) -> str:
        return self._create(repo_id, const.CMISACTION_CREATE_POLICY, folder_id, properties,
                            policies, add_aces, remove_aces)

    def create_item(self, repo_id: str, properties: PropertiesBag, folder_id: str = None,
                    policies=None, add_aces=None, remove_aces=None) -> str:
        return self._create(repo_id, const.CMISACTION_CREATE_ITEM, folder_id, properties,
                            policies, add_aces, remove_aces)

    def get_allowable_actions(self, repo_id: str, object_id: str):
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_ALLOWABLE_ACTIONS)
        return convert_allowable_actions(self._read_object(url))

    def _read_properties(self, repo_id, url):
        json = self._read_object(url)
        if self.succinct:
            return convert_succinct_properties(json, None, self._type_cache(repo_id))
        return convert_properties(json, None)

    def get_properties(self, repo_id: str, object_id: str, filter: str = None) -> PropertiesBag:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_PROPERTIES)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return self._read_properties(repo_id, url)

    def get_renditions(self, repo_id: str, object_id: str, rendition_filter: str = None,
                       max_items: int = None, skip_count: int = None) -> list:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_RENDITIONS)
        url.add_parameter(const.PARAM_RENDITION_FILTER, rendition_filter)
        url.add_parameter(const.PARAM_MAX_ITEMS, max_items)
        url.add_parameter(const.PARAM_SKIP_COUNT, skip_count)
        return convert_renditions(self._read_array(url))

    def _add_object_params(self, url, filter, include_allowable_actions, include_relationships,
                           rendition_filter, include_policy_ids, include_acl):
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_RELATIONSHIPS, include_relationships)
        url.add_parameter(const.PARAM_RENDITION_FILTER, rendition_filter)
        url.add_parameter(const.PARAM_POLICY_IDS, include_policy_ids)
        url.add_parameter(const.PARAM_ACL, include_acl)
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)

    def get_object(self, repo_id: str, object_id: str, filter: str = None,
                   include_allowable_actions: bool = None, include_relationships=None,
                   rendition_filter: str = None, include_policy_ids: bool = None,
                   include_acl: bool = None) -> ObjectData:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_OBJECT)
        self._add_object_params(url, filter, include_allowable_actions, include_relationships,
                                rendition_filter, include_policy_ids, include_acl)
        return convert_object(self._read_object(url), self._type_cache(repo_id))

    def get_object_by_path(self, repo_id: str, path: str, filter: str = None,
                           include_allowable_actions: bool = None, include_relationships=None,
                           rendition_filter: str = None, include_policy_ids: bool = None,
                           include_acl: bool = None) -> ObjectData:
        url = self.get_path_url(repo_id, path, const.SELECTOR_OBJECT)
        self._add_object_params(url, filter, include_allowable_actions, include_relationships,
                                rendition_filter, include_policy_ids, include_acl)
        return convert_object(self._read_object(url), self._type_cache(repo_id))

    def get_content_stream(self, repo_id: str, object_id: str, stream_id: str = None,
                           offset: int = None, length: int = None) -> ContentStream:
        """
        retrieve a document's content (or one of its renditions).  If ``offset`` or ``length``
        is given, only the requested range of bytes is requested; a server that honors the
        range returns a :py:class:`~nistoar.cmis.data.PartialContentStream`.
        """
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_CONTENT)
        url.add_parameter(const.PARAM_STREAM_ID, stream_id)

        resp = self.binding.dispatcher.read_content(url, offset, length)
        cls = PartialContentStream if resp.status == 206 else ContentStream
        return cls(resp.stream, resp.filename, resp.content_type, resp.content_length)

    def update_properties(self, repo_id: str, object_id: str, properties: PropertiesBag,
                          change_token: str = None) -> tuple:
        """
        update the properties of an object
        :return:  the object's identifier (which may have changed) and its new change token
        """
        _require_object_id(object_id)
        url = self.get_object_url(repo_id, object_id)

        composer = self._composer(const.CMISACTION_UPDATE_PROPERTIES, True)
        composer.properties = properties
        composer.parameters[const.PARAM_CHANGE_TOKEN] = self._change_token_param(change_token)

        return self._id_and_token(self._post_for_object(repo_id, url, composer))

    def bulk_update_properties(self, repo_id: str, object_ids_and_change_tokens,
                               properties: PropertiesBag = None, add_secondary_type_ids=None,
                               remove_secondary_type_ids=None) -> list:
        """
        update the properties and secondary types of several objects at once
        :param object_ids_and_change_tokens:  a list of
                             :py:class:`~nistoar.cmis.data.BulkUpdateObjectIdAndChangeToken`
        :return:  a list of BulkUpdateObjectIdAndChangeToken describing the updated objects
        """
        if not object_ids_and_change_tokens:
            raise CmisInvalidArgumentException("Object IDs must be set!")
        url = self.get_repository_url(repo_id)

        composer = self._composer(const.CMISACTION_BULK_UPDATE, True)
        composer.object_ids_and_change_tokens = object_ids_and_change_tokens
        composer.properties = properties
        composer.add_secondary_type_ids = add_secondary_type_ids
        composer.remove_secondary_type_ids = remove_secondary_type_ids

        return convert_bulk_update(parse_array(self._post(url, composer)))

    def move_object(self, repo_id: str, object_id: str, target_folder_id: str,
                    source_folder_id: str = None) -> str:
        """
        move an object from one folder to another
        :return:  the object's identifier (which may have changed)
        """
        _require_object_id(object_id)
        url = self.get_object_url(repo_id, object_id)

        composer = self._composer(const.CMISACTION_MOVE, True)
        composer.parameters[const.PARAM_TARGET_FOLDER_ID] = target_folder_id
        composer.parameters[const.PARAM_SOURCE_FOLDER_ID] = source_folder_id

        obj = self._post_for_object(repo_id, url, composer)
        return obj.id if obj is not None else None

    def delete_object(self, repo_id: str, object_id: str, all_versions: bool = None):
        url = self.get_object_url(repo_id, object_id)
        composer = self._composer(const.CMISACTION_DELETE)
        composer.parameters[const.PARAM_ALL_VERSIONS] = all_versions
        self._post_and_consume(url, composer)

    def delete_tree(self, repo_id: str, folder_id: str, all_versions: bool = None,
                    unfile_objects=None, continue_on_failure: bool = None) -> FailedToDeleteData:
        """
        delete a folder and everything in it
        :return:  the identifiers of the objects that could not be deleted
        """
        url = self.get_object_url(repo_id, folder_id)
        composer = self._composer(const.CMISACTION_DELETE_TREE)
        composer.parameters[const.PARAM_ALL_VERSIONS] = all_versions
        composer.parameters[const.PARAM_UNFILE_OBJECTS] = unfile_objects
        composer.parameters[const.PARAM_CONTINUE_ON_FAILURE] = continue_on_failure

        resp = self._post(url, composer)
        if resp.status == 200 and resp.content:
            return convert_failed_to_delete(parse_object(resp))
        return FailedToDeleteData()

    def _change_content(self, repo_id, object_id, action, change_token, content_stream=None,
                        parameters=None):
        _require_object_id(object_id)
        url = self.get_object_url(repo_id, object_id)

        composer = self._composer(action, True)
        composer.content_stream = content_stream
        if parameters:
            composer.parameters.update(parameters)
        composer.parameters[const.PARAM_CHANGE_TOKEN] = self._change_token_param(change_token)

        return self._id_and_token(self._post_for_object(repo_id, url, composer))

    def set_content_stream(self, repo_id: str, object_id: str, content_stream: ContentStream,
                           overwrite: bool = None, change_token: str = None) -> tuple:
        """
        replace a document's content
        :return:  the document's identifier (which may have changed) and its new change token
        """
        return self._change_content(repo_id, object_id, const.CMISACTION_SET_CONTENT,
                                    change_token, content_stream,
                                    { const.PARAM_OVERWRITE_FLAG: overwrite })

    def append_content_stream(self, repo_id: str, object_id: str, content_stream: ContentStream,
                              is_last_chunk: bool = None, change_token: str = None) -> tuple:
        """
        append to a document's content
        :return:  the document's identifier (which may have changed) and its new change token
        """
        return self._change_content(repo_id, object_id, const.CMISACTION_APPEND_CONTENT,
                                    change_token, content_stream,
                                    { const.CONTROL_IS_LAST_CHUNK: is_last_chunk })

    def delete_content_stream(self, repo_id: str, object_id: str,
                              change_token: str = None) -> tuple:
        """
        remove a document's content
        :return:  the document's identifier (which may have changed) and its new change token
        """
        return self._change_content(repo_id, object_id, const.CMISACTION_DELETE_CONTENT,
                                    change_token)

class VersioningService(AbstractBrowserBindingService):
    """
    the Versioning service
    """

    def check_out(self, repo_id: str, object_id: str) -> str:
        """
        check out a document
        :return:  the identifier of the private working copy
        """
        _require_object_id(object_id)
        url = self.get_object_url(repo_id, object_id)
        composer = self._composer(const.CMISACTION_CHECK_OUT, True)
        obj = self._post_for_object(repo_id, url, composer)
        return obj.id if obj is not None else None

    def cancel_check_out(self, repo_id: str, object_id: str):
        url = self.get_object_url(repo_id, object_id)
        self._post_and_consume(url, self._composer(const.CMISACTION_CANCEL_CHECK_OUT))

    def check_in(self, repo_id: str, object_id: str, major: bool = None,
                 properties: PropertiesBag = None, content_stream: ContentStream = None,
                 checkin_comment: str = None, policies=None, add_aces=None,
                 remove_aces=None) -> str:
        """
        check in a private working copy
        :return:  the identifier of the new version
        """
        _require_object_id(object_id)
        url = self.get_object_url(repo_id, object_id)

        composer = self._composer(const.CMISACTION_CHECK_IN, True)
        composer.content_stream = content_stream
        composer.parameters[const.PARAM_MAJOR] = major
        composer.properties = properties
        composer.parameters[const.PARAM_CHECKIN_COMMENT] = checkin_comment
        composer.policies = policies
        composer.add_aces = add_aces
        composer.remove_aces = remove_aces

        obj = self._post_for_object(repo_id, url, composer)
        return obj.id if obj is not None else None

    @staticmethod
    def _return_version(major):
        return ReturnVersion.LATESTMAJOR if major else ReturnVersion.LATEST

    def get_object_of_latest_version(self, repo_id: str, object_id: str, major: bool = False,
                                     filter: str = None, include_allowable_actions: bool = None,
                                     include_relationships=None, rendition_filter: str = None,
                                     include_policy_ids: bool = None,
                                     include_acl: bool = None) -> ObjectData:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_OBJECT)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_RELATIONSHIPS, include_relationships)
        url.add_parameter(const.PARAM_RENDITION_FILTER, rendition_filter)
        url.add_parameter(const.PARAM_POLICY_IDS, include_policy_ids)
        url.add_parameter(const.PARAM_ACL, include_acl)
        url.add_parameter(const.PARAM_RETURN_VERSION, self._return_version(major))
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return convert_object(self._read_object(url), self._type_cache(repo_id))

    def get_properties_of_latest_version(self, repo_id: str, object_id: str, major: bool = False,
                                         filter: str = None) -> PropertiesBag:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_PROPERTIES)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_RETURN_VERSION, self._return_version(major))
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)

        json = self._read_object(url)
        if self.succinct:
            return convert_succinct_properties(json, None, self._type_cache(repo_id))
        return convert_properties(json, None)

    def get_all_versions(self, repo_id: str, object_id: str, filter: str = None,
                         include_allowable_actions: bool = None) -> list:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_VERSIONS)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return convert_objects(self._read_array(url), self._type_cache(repo_id))

class DiscoveryService(AbstractBrowserBindingService):
    """
    the Discovery service:  queries and the change log
    """

    def query(self, repo_id: str, statement: str, search_all_versions: bool = None,
              include_allowable_actions: bool = None, include_relationships=None,
              rendition_filter: str = None, max_items: int = None, skip_count: int = None):
        """
        execute a CMIS query.  Query results are always requested in the verbose property
        encoding.
        """
        url = self.get_repository_url(repo_id)

        composer = self._composer(const.CMISACTION_QUERY)
        composer.parameters[const.PARAM_STATEMENT] = statement
        composer.parameters[const.PARAM_SEARCH_ALL_VERSIONS] = search_all_versions
        composer.parameters[const.PARAM_ALLOWABLE_ACTIONS] = include_allowable_actions
        composer.parameters[const.PARAM_RELATIONSHIPS] = include_relationships
        composer.parameters[const.PARAM_RENDITION_FILTER] = rendition_filter
        composer.parameters[const.PARAM_MAX_ITEMS] = max_items
        composer.parameters[const.PARAM_SKIP_COUNT] = skip_count

        json = parse_object(self._post(url, composer))
        return convert_object_list(json, self._type_cache(repo_id), True)

    def get_content_changes(self, repo_id: str, change_log_token: str = None,
                            include_properties: bool = None, filter: str = None,
                            include_policy_ids: bool = None, include_acl: bool = None,
                            max_items: int = None) -> tuple:
        """
        retrieve entries from the repository's change log
        :return:  the list of changed objects and the change log token to use to request
                  the next batch of changes
        """
        url = self.get_repository_url(repo_id, const.SELECTOR_CONTENT_CHANGES)
        url.add_parameter(const.PARAM_CHANGE_LOG_TOKEN, change_log_token)
        url.add_parameter(const.PARAM_PROPERTIES, include_properties)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_POLICY_IDS, include_policy_ids)
        url.add_parameter(const.PARAM_ACL, include_acl)
        url.add_parameter(const.PARAM_MAX_ITEMS, max_items)
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)

        json = self._read_object(url)
        token = json.get(const.JSON_OBJECTLIST_CHANGE_LOG_TOKEN)
        if not isinstance(token, str):
            token = change_log_token
        return (convert_object_list(json, self._type_cache(repo_id), False), token)

class RelationshipService(AbstractBrowserBindingService):
    """
    the Relationship service
    """

    def get_object_relationships(self, repo_id: str, object_id: str,
                                 include_sub_relationship_types: bool = None,
                                 relationship_direction=None, type_id: str = None,
                                 filter: str = None, include_allowable_actions: bool = None,
                                 max_items: int = None, skip_count: int = None):
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_RELATIONSHIPS)
        url.add_parameter(const.PARAM_SUB_RELATIONSHIP_TYPES, include_sub_relationship_types)
        url.add_parameter(const.PARAM_RELATIONSHIP_DIRECTION, relationship_direction)
        url.add_parameter(const.PARAM_TYPE_ID, type_id)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_ALLOWABLE_ACTIONS, include_allowable_actions)
        url.add_parameter(const.PARAM_MAX_ITEMS, max_items)
        url.add_parameter(const.PARAM_SKIP_COUNT, skip_count)
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return convert_object_list(self._read_object(url), self._type_cache(repo_id), False)

class MultiFilingService(AbstractBrowserBindingService):
    """
    the MultiFiling service:  filing an object in additional folders
    """

    def add_object_to_folder(self, repo_id: str, object_id: str, folder_id: str,
                             all_versions: bool = None):
        url = self.get_object_url(repo_id, object_id)
        composer = self._composer(const.CMISACTION_ADD_OBJECT_TO_FOLDER)
        composer.parameters[const.PARAM_FOLDER_ID] = folder_id
        composer.parameters[const.PARAM_ALL_VERSIONS] = all_versions
        self._post_and_consume(url, composer)

    def remove_object_from_folder(self, repo_id: str, object_id: str, folder_id: str = None):
        url = self.get_object_url(repo_id, object_id)
        composer = self._composer(const.CMISACTION_REMOVE_OBJECT_FROM_FOLDER)
        composer.parameters[const.PARAM_FOLDER_ID] = folder_id
        self._post_and_consume(url, composer)

class PolicyService(AbstractBrowserBindingService):
    """
    the Policy service
    """

    def _policy_action(self, action, repo_id, policy_id, object_id):
        url = self.get_object_url(repo_id, object_id)
        composer = self._composer(action)
        composer.policy_id = policy_id
        self._post_and_consume(url, composer)

    def apply_policy(self, repo_id: str, policy_id: str, object_id: str):
        self._policy_action(const.CMISACTION_APPLY_POLICY, repo_id, policy_id, object_id)

    def remove_policy(self, repo_id: str, policy_id: str, object_id: str):
        self._policy_action(const.CMISACTION_REMOVE_POLICY, repo_id, policy_id, object_id)

    def get_applied_policies(self, repo_id: str, object_id: str, filter: str = None) -> list:
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_POLICIES)
        url.add_parameter(const.PARAM_FILTER, filter)
        url.add_parameter(const.PARAM_SUCCINCT, self.succinct_parameter)
        url.add_parameter(const.PARAM_DATETIME_FORMAT, self.datetime_format_parameter)
        return convert_objects(self._read_array(url), self._type_cache(repo_id))

class AclService(AbstractBrowserBindingService):
    """
    the ACL service
    """

    def get_acl(self, repo_id: str, object_id: str, only_basic_permissions: bool = None):
        url = self.get_object_url(repo_id, object_id, const.SELECTOR_ACL)
        url.add_parameter(const.PARAM_ONLY_BASIC_PERMISSIONS, only_basic_permissions)
        return convert_acl(self._read_object(url))

    def apply_acl(self, repo_id: str, object_id: str, add_aces=None, remove_aces=None,
                  acl_propagation=None):
        """
        add and remove access control entries
        :return:  the object's resulting ACL
        """
        url = self.get_object_url(repo_id, object_id)
        composer = self._composer(const.CMISACTION_APPLY_ACL)
        composer.add_aces = add_aces
        composer.remove_aces = remove_aces
        composer.parameters[const.PARAM_ACL_PROPAGATION] = acl_propagation
        return convert_acl(parse_object(self._post(url, composer)))
