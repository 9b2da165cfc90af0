"""
The CMIS data model:  the typed objects that the binding's codecs produce when decoding server
responses and consume when encoding requests.

Every class here descends from :py:class:`CmisData`, which carries a list of
:py:class:`~nistoar.cmis.extensions.ExtensionNode` for any data the server sent that the model
does not otherwise capture.  Instances compare equal when they are of the same class and all
their attributes are equal.
"""
from collections import OrderedDict
from typing import List, Mapping

from .enums import (BaseTypeId, PropertyType, Cardinality, Updatability, Action,
                    ContentStreamAllowed, ChangeType)
from .exceptions import CmisInvalidArgumentException
from . import constants as const

__all__ = [ "CmisData", "PropertyData", "PropertiesBag", "Choice", "PropertyDefinition",
            "TypeMutability", "TypeDefinition", "DocumentTypeDefinition", "FolderTypeDefinition",
            "RelationshipTypeDefinition", "PolicyTypeDefinition", "ItemTypeDefinition",
            "SecondaryTypeDefinition", "type_definition_class", "TypeDefinitionList",
            "TypeDefinitionContainer", "Ace", "Acl", "AllowableActions", "RenditionData",
            "ChangeEventInfo", "PolicyIdList", "ObjectData", "ObjectList", "ObjectInFolderData",
            "ObjectInFolderList", "ObjectInFolderContainer", "ObjectParentData",
            "FailedToDeleteData", "BulkUpdateObjectIdAndChangeToken", "ContentStream",
            "PartialContentStream", "CreatablePropertyTypes", "NewTypeSettableAttributes",
            "RepositoryCapabilities", "PermissionDefinition", "PermissionMapping",
            "AclCapabilities", "ExtensionFeature", "RepositoryInfo" ]

class CmisData(object):
    """
    a base class for all data model entities
    """

    def __init__(self, extensions=None):
        self.extensions = list(extensions) if extensions else []

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    __hash__ = None

    def __repr__(self):
        attrs = ", ".join("%s=%r" % (k, v) for k, v in self.__dict__.items()
                          if v is not None and k != "extensions")
        return "%s(%s)" % (type(self).__name__, attrs)

## Properties

class PropertyData(CmisData):
    """
    a property of an object:  its identity and its (possibly multiple) values.  The values are
    always held as a list of native Python values matching :py:attr:`property_type` (see
    :py:mod:`nistoar.cmis.values`).
    """

    def __init__(self, id: str, property_type: PropertyType, values=None, local_name: str = None,
                 display_name: str = None, query_name: str = None, extensions=None):
        super(PropertyData, self).__init__(extensions)
        self.id = id
        self.property_type = property_type
        self.values = list(values) if values else []
        self.local_name = local_name
        self.display_name = display_name
        self.query_name = query_name

    @property
    def first_value(self):
        """
        the first value of the property or None if it has no values
        """
        return self.values[0] if self.values else None

class PropertiesBag(CmisData):
    """
    the ordered set of properties of an object.  Properties can be looked up by their identifier.
    """

    def __init__(self, properties=None, extensions=None):
        super(PropertiesBag, self).__init__(extensions)
        self.properties = []
        if properties:
            for prop in properties:
                self.add(prop)

    def add(self, prop: PropertyData):
        """
        append a property.  A property with the same identifier as one already in the bag
        replaces it in place.
        """
        if prop.id is not None:
            for i, p in enumerate(self.properties):
                if p.id == prop.id:
                    self.properties[i] = prop
                    return
        self.properties.append(prop)

    def get(self, id: str, default=None) -> PropertyData:
        """
        return the property with the given identifier or ``default`` if it is not in the bag
        """
        for prop in self.properties:
            if prop.id == id:
                return prop
        return default

    def get_value(self, id: str, default=None):
        """
        return the first value of the property with the given identifier or ``default`` if the
        property is not set
        """
        prop = self.get(id)
        if prop is None or not prop.values:
            return default
        return prop.values[0]

    def ids(self) -> List[str]:
        return [p.id for p in self.properties]

    def __getitem__(self, id):
        out = self.get(id)
        if out is None:
            raise KeyError(id)
        return out

    def __contains__(self, id):
        return self.get(id) is not None

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)

## Type definitions

class Choice(object):
    """
    one of the allowed values of a property, possibly with a hierarchy of sub-choices
    """

    def __init__(self, display_name: str = None, values=None, choices=None):
        self.display_name = display_name
        self.values = list(values) if values else []
        self.choices = list(choices) if choices else []

    def __eq__(self, other):
        if not isinstance(other, Choice):
            return NotImplemented
        return self.__dict__ == other.__dict__

    __hash__ = None

    def __repr__(self):
        return "Choice(%r, %r, %r)" % (self.display_name, self.values, self.choices)

class PropertyDefinition(CmisData):
    """
    the definition of a property within a type.  The facets that apply only to certain
    property types are left as None for the others:  ``max_length`` for STRING; ``min_value``
    and ``max_value`` for INTEGER and DECIMAL; ``precision`` for DECIMAL; and ``resolution``
    for DATETIME.  ``default_value`` is a list of native values.
    """

    def __init__(self, id: str, property_type: PropertyType, cardinality: Cardinality,
                 local_name: str = None, local_namespace: str = None, display_name: str = None,
                 query_name: str = None, description: str = None,
                 updatability: Updatability = None, is_inherited: bool = None,
                 is_required: bool = None, is_queryable: bool = None, is_orderable: bool = None,
                 is_open_choice: bool = None, default_value=None, choices=None,
                 max_length: int = None, min_value=None, max_value=None, precision=None,
                 resolution=None, extensions=None):
        super(PropertyDefinition, self).__init__(extensions)
        self.id = id
        self.property_type = property_type
        self.cardinality = cardinality
        self.local_name = local_name
        self.local_namespace = local_namespace
        self.display_name = display_name
        self.query_name = query_name
        self.description = description
        self.updatability = updatability
        self.is_inherited = is_inherited
        self.is_required = is_required
        self.is_queryable = is_queryable
        self.is_orderable = is_orderable
        self.is_open_choice = is_open_choice
        self.default_value = list(default_value) if default_value else []
        self.choices = list(choices) if choices else []
        self.max_length = max_length
        self.min_value = min_value
        self.max_value = max_value
        self.precision = precision
        self.resolution = resolution

    @property
    def is_multi_valued(self) -> bool:
        return self.cardinality == Cardinality.MULTI

    def check_values(self, values):
        """
        ensure that the given list of values is consistent with this definition's cardinality
        :raises CmisInvalidArgumentException:  if this is a single-valued property and more than
                                               one value is given
        """
        if self.cardinality == Cardinality.SINGLE and values and len(values) > 1:
            raise CmisInvalidArgumentException("Property '%s' is single-valued but %d values "
                                               "were given!" % (self.id, len(values)))

class TypeMutability(CmisData):
    """
    the operations permitted on a type definition
    """

    def __init__(self, can_create: bool = None, can_update: bool = None, can_delete: bool = None,
                 extensions=None):
        super(TypeMutability, self).__init__(extensions)
        self.can_create = can_create
        self.can_update = can_update
        self.can_delete = can_delete

class TypeDefinition(CmisData):
    """
    the definition of an object type.  Each base type has its own subclass; use
    :py:func:`type_definition_class` to select the appropriate one.
    """
    base_type_id = None

    def __init__(self, id: str, local_name: str = None, local_namespace: str = None,
                 display_name: str = None, query_name: str = None, description: str = None,
                 parent_type_id: str = None, is_creatable: bool = None, is_fileable: bool = None,
                 is_queryable: bool = None, is_fulltext_indexed: bool = None,
                 is_included_in_supertype_query: bool = None, is_controllable_policy: bool = None,
                 is_controllable_acl: bool = None, type_mutability: TypeMutability = None,
                 property_definitions=None, extensions=None):
        super(TypeDefinition, self).__init__(extensions)
        self.id = id
        self.local_name = local_name
        self.local_namespace = local_namespace
        self.display_name = display_name
        self.query_name = query_name
        self.description = description
        self.parent_type_id = parent_type_id
        self.is_creatable = is_creatable
        self.is_fileable = is_fileable
        self.is_queryable = is_queryable
        self.is_fulltext_indexed = is_fulltext_indexed
        self.is_included_in_supertype_query = is_included_in_supertype_query
        self.is_controllable_policy = is_controllable_policy
        self.is_controllable_acl = is_controllable_acl
        self.type_mutability = type_mutability
        self.property_definitions = OrderedDict()
        if property_definitions:
            for pdef in property_definitions:
                self.add_property_definition(pdef)

    def add_property_definition(self, propdef: PropertyDefinition):
        self.property_definitions[propdef.id] = propdef

    def get_property_definition(self, id: str) -> PropertyDefinition:
        """
        return the definition of the property with the given identifier or None if this type
        does not define it
        """
        return self.property_definitions.get(id)

    def __contains__(self, id):
        return id in self.property_definitions

class DocumentTypeDefinition(TypeDefinition):
    base_type_id = BaseTypeId.DOCUMENT

    def __init__(self, id: str, is_versionable: bool = None,
                 content_stream_allowed: ContentStreamAllowed = None, **kw):
        super(DocumentTypeDefinition, self).__init__(id, **kw)
        self.is_versionable = is_versionable
        self.content_stream_allowed = content_stream_allowed

class FolderTypeDefinition(TypeDefinition):
    base_type_id = BaseTypeId.FOLDER

class RelationshipTypeDefinition(TypeDefinition):
    base_type_id = BaseTypeId.RELATIONSHIP

    def __init__(self, id: str, allowed_source_type_ids=None, allowed_target_type_ids=None, **kw):
        super(RelationshipTypeDefinition, self).__init__(id, **kw)
        self.allowed_source_type_ids = list(allowed_source_type_ids) \
                                       if allowed_source_type_ids else []
        self.allowed_target_type_ids = list(allowed_target_type_ids) \
                                       if allowed_target_type_ids else []

class PolicyTypeDefinition(TypeDefinition):
    base_type_id = BaseTypeId.POLICY

class ItemTypeDefinition(TypeDefinition):
    base_type_id = BaseTypeId.ITEM

class SecondaryTypeDefinition(TypeDefinition):
    base_type_id = BaseTypeId.SECONDARY

_type_classes = {
    BaseTypeId.DOCUMENT:     DocumentTypeDefinition,
    BaseTypeId.FOLDER:       FolderTypeDefinition,
    BaseTypeId.RELATIONSHIP: RelationshipTypeDefinition,
    BaseTypeId.POLICY:       PolicyTypeDefinition,
    BaseTypeId.ITEM:         ItemTypeDefinition,
    BaseTypeId.SECONDARY:    SecondaryTypeDefinition
}

def type_definition_class(base_type_id: BaseTypeId):
    """
    return the TypeDefinition subclass for the given base type or None if the base type is
    not recognized
    """
    return _type_classes.get(base_type_id)

class TypeDefinitionList(CmisData):
    def __init__(self, types=None, has_more_items: bool = None, num_items: int = None,
                 extensions=None):
        super(TypeDefinitionList, self).__init__(extensions)
        self.types = list(types) if types else []
        self.has_more_items = has_more_items
        self.num_items = num_items

class TypeDefinitionContainer(CmisData):
    def __init__(self, type_definition: TypeDefinition = None, children=None, extensions=None):
        super(TypeDefinitionContainer, self).__init__(extensions)
        self.type_definition = type_definition
        self.children = list(children) if children else []

## Objects

class Ace(CmisData):
    """
    an access control entry:  the permissions granted to a principal
    """

    def __init__(self, principal_id: str, permissions=None, is_direct: bool = True,
                 extensions=None, principal_extensions=None):
        super(Ace, self).__init__(extensions)
        self.principal_id = principal_id
        self.permissions = list(permissions) if permissions else []
        self.is_direct = is_direct
        self.principal_extensions = list(principal_extensions) if principal_extensions else []

class Acl(CmisData):
    """
    an access control list
    """

    def __init__(self, aces=None, is_exact: bool = None, extensions=None):
        super(Acl, self).__init__(extensions)
        self.aces = list(aces) if aces else []
        self.is_exact = is_exact

class AllowableActions(CmisData):
    """
    the set of actions that the current user may apply to an object
    """

    def __init__(self, actions=None, extensions=None):
        super(AllowableActions, self).__init__(extensions)
        self.actions = set(actions) if actions else set()

    def __contains__(self, action: Action):
        return action in self.actions

class RenditionData(CmisData):
    def __init__(self, stream_id: str = None, mime_type: str = None, length: int = None,
                 kind: str = None, title: str = None, height: int = None, width: int = None,
                 rendition_document_id: str = None, extensions=None):
        super(RenditionData, self).__init__(extensions)
        self.stream_id = stream_id
        self.mime_type = mime_type
        self.length = length
        self.kind = kind
        self.title = title
        self.height = height
        self.width = width
        self.rendition_document_id = rendition_document_id

class ChangeEventInfo(CmisData):
    def __init__(self, change_type: ChangeType = None, change_time=None, extensions=None):
        super(ChangeEventInfo, self).__init__(extensions)
        self.change_type = change_type
        self.change_time = change_time

class PolicyIdList(CmisData):
    def __init__(self, policy_ids=None, extensions=None):
        super(PolicyIdList, self).__init__(extensions)
        self.policy_ids = list(policy_ids) if policy_ids else []

class ObjectData(CmisData):
    """
    a repository object.  Only the properties are always present; the other parts are None
    when the server did not include them.
    """

    def __init__(self, properties: PropertiesBag = None, allowable_actions: AllowableActions = None,
                 relationships=None, change_event_info: ChangeEventInfo = None, acl: Acl = None,
                 is_exact_acl: bool = None, policy_ids: PolicyIdList = None, renditions=None,
                 extensions=None):
        super(ObjectData, self).__init__(extensions)
        self.properties = properties
        self.allowable_actions = allowable_actions
        self.relationships = list(relationships) if relationships else []
        self.change_event_info = change_event_info
        self.acl = acl
        self.is_exact_acl = is_exact_acl
        self.policy_ids = policy_ids
        self.renditions = list(renditions) if renditions else []

    def _get_value(self, propid):
        if self.properties is None:
            return None
        return self.properties.get_value(propid)

    @property
    def id(self) -> str:
        """
        the object's identifier (from its ``cmis:objectId`` property)
        """
        return self._get_value(const.PROP_OBJECT_ID)

    @property
    def type_id(self) -> str:
        return self._get_value(const.PROP_OBJECT_TYPE_ID)

    @property
    def base_type_id(self) -> BaseTypeId:
        return BaseTypeId.from_wire(self._get_value(const.PROP_BASE_TYPE_ID))

class ObjectList(CmisData):
    def __init__(self, objects=None, has_more_items: bool = None, num_items: int = None,
                 extensions=None):
        super(ObjectList, self).__init__(extensions)
        self.objects = list(objects) if objects else []
        self.has_more_items = has_more_items
        self.num_items = num_items

class ObjectInFolderData(CmisData):
    def __init__(self, object: ObjectData = None, path_segment: str = None, extensions=None):
        super(ObjectInFolderData, self).__init__(extensions)
        self.object = object
        self.path_segment = path_segment

class ObjectInFolderList(CmisData):
    def __init__(self, objects=None, has_more_items: bool = None, num_items: int = None,
                 extensions=None):
        super(ObjectInFolderList, self).__init__(extensions)
        self.objects = list(objects) if objects else []
        self.has_more_items = has_more_items
        self.num_items = num_items

class ObjectInFolderContainer(CmisData):
    def __init__(self, object: ObjectInFolderData = None, children=None, extensions=None):
        super(ObjectInFolderContainer, self).__init__(extensions)
        self.object = object
        self.children = list(children) if children else []

class ObjectParentData(CmisData):
    def __init__(self, object: ObjectData = None, relative_path_segment: str = None,
                 extensions=None):
        super(ObjectParentData, self).__init__(extensions)
        self.object = object
        self.relative_path_segment = relative_path_segment

class FailedToDeleteData(CmisData):
    """
    the identifiers of the objects that could not be deleted by a delete-tree request
    """
    def __init__(self, ids=None, extensions=None):
        super(FailedToDeleteData, self).__init__(extensions)
        self.ids = list(ids) if ids else []

class BulkUpdateObjectIdAndChangeToken(CmisData):
    def __init__(self, id: str, new_id: str = None, change_token: str = None, extensions=None):
        super(BulkUpdateObjectIdAndChangeToken, self).__init__(extensions)
        self.id = id
        self.new_id = new_id
        self.change_token = change_token

class ContentStream(CmisData):
    """
    the content of a document.  :py:attr:`stream` is a readable, binary file-like object (or
    a bytes instance when sending content).
    """

    def __init__(self, stream=None, filename: str = None, mime_type: str = None,
                 length: int = None, extensions=None):
        super(ContentStream, self).__init__(extensions)
        self.stream = stream
        self.filename = filename
        self.mime_type = mime_type
        self.length = length

    def read(self, size=-1) -> bytes:
        """
        read bytes from the underlying stream
        """
        if isinstance(self.stream, (bytes, bytearray)):
            return bytes(self.stream)
        return self.stream.read(size)

class PartialContentStream(ContentStream):
    """
    a content stream holding only a requested range of the document's bytes
    """
    pass

## Repository information

class CreatablePropertyTypes(CmisData):
    def __init__(self, can_create=None, extensions=None):
        super(CreatablePropertyTypes, self).__init__(extensions)
        self.can_create = set(can_create) if can_create else set()

class NewTypeSettableAttributes(CmisData):
    """
    the type definition attributes that may be set when creating a new type.  Each attribute
    is named after the corresponding TypeDefinition attribute (e.g. ``local_name``); its value
    is True, False, or None if unspecified.
    """
    ATTRIBUTES = ("id", "local_name", "local_namespace", "display_name", "query_name",
                  "description", "creatable", "fileable", "queryable", "fulltext_indexed",
                  "included_in_supertype_query", "controllable_policy", "controllable_acl")

    def __init__(self, extensions=None, **settable):
        super(NewTypeSettableAttributes, self).__init__(extensions)
        for attr in self.ATTRIBUTES:
            setattr(self, attr, settable.pop(attr, None))
        if settable:
            raise TypeError("NewTypeSettableAttributes(): unrecognized attributes: " +
                            ", ".join(settable.keys()))

class RepositoryCapabilities(CmisData):
    def __init__(self, content_stream_updates=None, changes=None, renditions=None,
                 get_descendants: bool = None, get_folder_tree: bool = None,
                 multifiling: bool = None, unfiling: bool = None,
                 version_specific_filing: bool = None, pwc_searchable: bool = None,
                 pwc_updatable: bool = None, all_versions_searchable: bool = None,
                 order_by=None, query=None, join=None, acl=None,
                 creatable_property_types: CreatablePropertyTypes = None,
                 new_type_settable_attributes: NewTypeSettableAttributes = None,
                 extensions=None):
        super(RepositoryCapabilities, self).__init__(extensions)
        self.content_stream_updates = content_stream_updates
        self.changes = changes
        self.renditions = renditions
        self.get_descendants = get_descendants
        self.get_folder_tree = get_folder_tree
        self.multifiling = multifiling
        self.unfiling = unfiling
        self.version_specific_filing = version_specific_filing
        self.pwc_searchable = pwc_searchable
        self.pwc_updatable = pwc_updatable
        self.all_versions_searchable = all_versions_searchable
        self.order_by = order_by
        self.query = query
        self.join = join
        self.acl = acl
        self.creatable_property_types = creatable_property_types
        self.new_type_settable_attributes = new_type_settable_attributes

class PermissionDefinition(CmisData):
    def __init__(self, id: str, description: str = None, extensions=None):
        super(PermissionDefinition, self).__init__(extensions)
        self.id = id
        self.description = description

class PermissionMapping(CmisData):
    def __init__(self, key: str, permissions=None, extensions=None):
        super(PermissionMapping, self).__init__(extensions)
        self.key = key
        self.permissions = list(permissions) if permissions else []

class AclCapabilities(CmisData):
    """
    the repository's ACL support.  :py:attr:`permission_mapping` maps an allowable-action key
    (e.g. "canDelete.Object") to a :py:class:`PermissionMapping`.
    """
    def __init__(self, supported_permissions=None, acl_propagation=None, permissions=None,
                 permission_mapping: Mapping = None, extensions=None):
        super(AclCapabilities, self).__init__(extensions)
        self.supported_permissions = supported_permissions
        self.acl_propagation = acl_propagation
        self.permissions = list(permissions) if permissions else []
        self.permission_mapping = OrderedDict(permission_mapping) \
                                  if permission_mapping else OrderedDict()

class ExtensionFeature(CmisData):
    def __init__(self, id: str, url: str = None, common_name: str = None,
                 version_label: str = None, description: str = None, feature_data=None,
                 extensions=None):
        super(ExtensionFeature, self).__init__(extensions)
        self.id = id
        self.url = url
        self.common_name = common_name
        self.version_label = version_label
        self.description = description
        self.feature_data = OrderedDict(feature_data) if feature_data else OrderedDict()

class RepositoryInfo(CmisData):
    """
    a description of a repository and its capabilities.  Besides the standard CMIS
    information, this carries the two URLs that the Browser Binding uses to address the
    repository:  :py:attr:`repository_url` and :py:attr:`root_url` (the URL of the root folder).
    """

    def __init__(self, id: str, name: str = None, description: str = None,
                 vendor_name: str = None, product_name: str = None, product_version: str = None,
                 root_folder_id: str = None, capabilities: RepositoryCapabilities = None,
                 acl_capabilities: AclCapabilities = None, latest_change_log_token: str = None,
                 cmis_version_supported: str = None, thin_client_uri: str = None,
                 changes_incomplete: bool = None, changes_on_type=None,
                 principal_id_anonymous: str = None, principal_id_anyone: str = None,
                 extension_features=None, repository_url: str = None, root_url: str = None,
                 extensions=None):
        super(RepositoryInfo, self).__init__(extensions)
        self.id = id
        self.name = name
        self.description = description
        self.vendor_name = vendor_name
        self.product_name = product_name
        self.product_version = product_version
        self.root_folder_id = root_folder_id
        self.capabilities = capabilities
        self.acl_capabilities = acl_capabilities
        self.latest_change_log_token = latest_change_log_token
        self.cmis_version_supported = cmis_version_supported
        self.thin_client_uri = thin_client_uri
        self.changes_incomplete = changes_incomplete
        self.changes_on_type = list(changes_on_type) if changes_on_type else []
        self.principal_id_anonymous = principal_id_anonymous
        self.principal_id_anyone = principal_id_anyone
        self.extension_features = list(extension_features) if extension_features else []
        self.repository_url = repository_url
        self.root_url = root_url
