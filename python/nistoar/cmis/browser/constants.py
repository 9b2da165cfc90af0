"""
the names used on the wire by the CMIS Browser Binding:  JSON member names, URL selectors,
form actions, form controls, and request parameters.

The ``*_KEYS`` sets list the JSON members that the codecs model for each kind of entity; any
other member found while decoding is preserved as an extension.
"""
from ..enums import Action

# error responses
ERROR_EXCEPTION = "exception"
ERROR_MESSAGE = "message"
ERROR_STACKTRACE = "stacktrace"

# repository info
JSON_REPINFO_ID = "repositoryId"
JSON_REPINFO_NAME = "repositoryName"
JSON_REPINFO_DESCRIPTION = "repositoryDescription"
JSON_REPINFO_VENDOR = "vendorName"
JSON_REPINFO_PRODUCT = "productName"
JSON_REPINFO_PRODUCT_VERSION = "productVersion"
JSON_REPINFO_ROOT_FOLDER_ID = "rootFolderId"
JSON_REPINFO_REPOSITORY_URL = "repositoryUrl"
JSON_REPINFO_ROOT_FOLDER_URL = "rootFolderUrl"
JSON_REPINFO_CAPABILITIES = "capabilities"
JSON_REPINFO_ACL_CAPABILITIES = "aclCapabilities"
JSON_REPINFO_CHANGE_LOG_TOKEN = "latestChangeLogToken"
JSON_REPINFO_CMIS_VERSION_SUPPORTED = "cmisVersionSupported"
JSON_REPINFO_THIN_CLIENT_URI = "thinClientURI"
JSON_REPINFO_CHANGES_INCOMPLETE = "changesIncomplete"
JSON_REPINFO_CHANGES_ON_TYPE = "changesOnType"
JSON_REPINFO_PRINCIPAL_ID_ANONYMOUS = "principalIdAnonymous"
JSON_REPINFO_PRINCIPAL_ID_ANYONE = "principalIdAnyone"
JSON_REPINFO_EXTENDED_FEATURES = "extendedFeatures"

REPINFO_KEYS = frozenset([
    JSON_REPINFO_ID, JSON_REPINFO_NAME, JSON_REPINFO_DESCRIPTION, JSON_REPINFO_VENDOR,
    JSON_REPINFO_PRODUCT, JSON_REPINFO_PRODUCT_VERSION, JSON_REPINFO_ROOT_FOLDER_ID,
    JSON_REPINFO_REPOSITORY_URL, JSON_REPINFO_ROOT_FOLDER_URL, JSON_REPINFO_CAPABILITIES,
    JSON_REPINFO_ACL_CAPABILITIES, JSON_REPINFO_CHANGE_LOG_TOKEN,
    JSON_REPINFO_CMIS_VERSION_SUPPORTED, JSON_REPINFO_THIN_CLIENT_URI,
    JSON_REPINFO_CHANGES_INCOMPLETE, JSON_REPINFO_CHANGES_ON_TYPE,
    JSON_REPINFO_PRINCIPAL_ID_ANONYMOUS, JSON_REPINFO_PRINCIPAL_ID_ANYONE,
    JSON_REPINFO_EXTENDED_FEATURES
])

# repository capabilities
JSON_CAP_CONTENT_STREAM_UPDATABILITY = "capabilityContentStreamUpdatability"
JSON_CAP_CHANGES = "capabilityChanges"
JSON_CAP_RENDITIONS = "capabilityRenditions"
JSON_CAP_GET_DESCENDANTS = "capabilityGetDescendants"
JSON_CAP_GET_FOLDER_TREE = "capabilityGetFolderTree"
JSON_CAP_MULTIFILING = "capabilityMultifiling"
JSON_CAP_UNFILING = "capabilityUnfiling"
JSON_CAP_VERSION_SPECIFIC_FILING = "capabilityVersionSpecificFiling"
JSON_CAP_PWC_SEARCHABLE = "capabilityPWCSearchable"
JSON_CAP_PWC_UPDATABLE = "capabilityPWCUpdatable"
JSON_CAP_ALL_VERSIONS_SEARCHABLE = "capabilityAllVersionsSearchable"
JSON_CAP_ORDER_BY = "capabilityOrderBy"
JSON_CAP_QUERY = "capabilityQuery"
JSON_CAP_JOIN = "capabilityJoin"
JSON_CAP_ACL = "capabilityACL"
JSON_CAP_CREATABLE_PROPERTY_TYPES = "capabilityCreatablePropertyTypes"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES = "capabilityNewTypeSettableAttributes"

CAP_KEYS = frozenset([
    JSON_CAP_CONTENT_STREAM_UPDATABILITY, JSON_CAP_CHANGES, JSON_CAP_RENDITIONS,
    JSON_CAP_GET_DESCENDANTS, JSON_CAP_GET_FOLDER_TREE, JSON_CAP_MULTIFILING, JSON_CAP_UNFILING,
    JSON_CAP_VERSION_SPECIFIC_FILING, JSON_CAP_PWC_SEARCHABLE, JSON_CAP_PWC_UPDATABLE,
    JSON_CAP_ALL_VERSIONS_SEARCHABLE, JSON_CAP_ORDER_BY, JSON_CAP_QUERY, JSON_CAP_JOIN,
    JSON_CAP_ACL, JSON_CAP_CREATABLE_PROPERTY_TYPES, JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES
])

JSON_CAP_CREATABLE_PROPERTY_TYPES_CANCREATE = "canCreate"
CAP_CREATABLE_PROPERTY_TYPES_KEYS = frozenset([JSON_CAP_CREATABLE_PROPERTY_TYPES_CANCREATE])

JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_ID = "id"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_LOCAL_NAME = "localName"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_LOCAL_NAMESPACE = "localNamespace"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_DISPLAY_NAME = "displayName"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_QUERY_NAME = "queryName"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_DESCRIPTION = "description"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_CREATABLE = "creatable"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_FILEABLE = "fileable"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_QUERYABLE = "queryable"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_FULLTEXT_INDEXED = "fulltextIndexed"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_INCLUDED_IN_SUPERTYPE_QUERY = "includedInSupertypeQuery"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_CONTROLLABLE_POLICY = "controllablePolicy"
JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_CONTROLLABLE_ACL = "controllableACL"

# ordered: these are also the names of the corresponding NewTypeSettableAttributes fields
CAP_NEW_TYPE_SETTABLE_ATTRIBUTES = (
    ("id", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_ID),
    ("local_name", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_LOCAL_NAME),
    ("local_namespace", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_LOCAL_NAMESPACE),
    ("display_name", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_DISPLAY_NAME),
    ("query_name", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_QUERY_NAME),
    ("description", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_DESCRIPTION),
    ("creatable", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_CREATABLE),
    ("fileable", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_FILEABLE),
    ("queryable", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_QUERYABLE),
    ("fulltext_indexed", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_FULLTEXT_INDEXED),
    ("included_in_supertype_query",
     JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_INCLUDED_IN_SUPERTYPE_QUERY),
    ("controllable_policy", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_CONTROLLABLE_POLICY),
    ("controllable_acl", JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_CONTROLLABLE_ACL)
)
CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_KEYS = frozenset(k for a, k in CAP_NEW_TYPE_SETTABLE_ATTRIBUTES)

# ACL capabilities
JSON_ACLCAP_SUPPORTED_PERMISSIONS = "supportedPermissions"
JSON_ACLCAP_ACL_PROPAGATION = "propagation"
JSON_ACLCAP_PERMISSIONS = "permissions"
JSON_ACLCAP_PERMISSION_MAPPING = "permissionMapping"

ACLCAP_KEYS = frozenset([
    JSON_ACLCAP_SUPPORTED_PERMISSIONS, JSON_ACLCAP_ACL_PROPAGATION, JSON_ACLCAP_PERMISSIONS,
    JSON_ACLCAP_PERMISSION_MAPPING
])

JSON_ACLCAP_PERMISSION_PERMISSION = "permission"
JSON_ACLCAP_PERMISSION_DESCRIPTION = "description"
ACLCAP_PERMISSION_KEYS = frozenset([JSON_ACLCAP_PERMISSION_PERMISSION,
                                    JSON_ACLCAP_PERMISSION_DESCRIPTION])

JSON_ACLCAP_MAPPING_KEY = "key"
JSON_ACLCAP_MAPPING_PERMISSION = "permission"
ACLCAP_MAPPING_KEYS = frozenset([JSON_ACLCAP_MAPPING_KEY, JSON_ACLCAP_MAPPING_PERMISSION])

# extension features
JSON_FEATURE_ID = "id"
JSON_FEATURE_URL = "url"
JSON_FEATURE_COMMON_NAME = "commonName"
JSON_FEATURE_VERSION_LABEL = "versionLabel"
JSON_FEATURE_DESCRIPTION = "description"
JSON_FEATURE_DATA = "featureData"

FEATURE_KEYS = frozenset([
    JSON_FEATURE_ID, JSON_FEATURE_URL, JSON_FEATURE_COMMON_NAME, JSON_FEATURE_VERSION_LABEL,
    JSON_FEATURE_DESCRIPTION, JSON_FEATURE_DATA
])

# objects
JSON_OBJECT_PROPERTIES = "properties"
JSON_OBJECT_SUCCINCT_PROPERTIES = "succinctProperties"
JSON_OBJECT_PROPERTIES_EXTENSION = "propertiesExtension"
JSON_OBJECT_ALLOWABLE_ACTIONS = "allowableActions"
JSON_OBJECT_RELATIONSHIPS = "relationships"
JSON_OBJECT_CHANGE_EVENT_INFO = "changeEventInfo"
JSON_OBJECT_ACL = "acl"
JSON_OBJECT_EXACT_ACL = "exactACL"
JSON_OBJECT_POLICY_IDS = "policyIds"
JSON_OBJECT_POLICY_IDS_IDS = "ids"
JSON_OBJECT_RENDITIONS = "renditions"

OBJECT_KEYS = frozenset([
    JSON_OBJECT_PROPERTIES, JSON_OBJECT_SUCCINCT_PROPERTIES, JSON_OBJECT_PROPERTIES_EXTENSION,
    JSON_OBJECT_ALLOWABLE_ACTIONS, JSON_OBJECT_RELATIONSHIPS, JSON_OBJECT_CHANGE_EVENT_INFO,
    JSON_OBJECT_ACL, JSON_OBJECT_EXACT_ACL, JSON_OBJECT_POLICY_IDS, JSON_OBJECT_RENDITIONS
])

ALLOWABLE_ACTIONS_KEYS = frozenset(a.value for a in Action)

POLICY_IDS_KEYS = frozenset([JSON_OBJECT_POLICY_IDS_IDS])

JSON_OBJECTINFOLDER_OBJECT = "object"
JSON_OBJECTINFOLDER_PATH_SEGMENT = "pathSegment"
OBJECTINFOLDER_KEYS = frozenset([JSON_OBJECTINFOLDER_OBJECT, JSON_OBJECTINFOLDER_PATH_SEGMENT])

JSON_OBJECTPARENTS_OBJECT = "object"
JSON_OBJECTPARENTS_RELATIVE_PATH_SEGMENT = "relativePathSegment"
OBJECTPARENTS_KEYS = frozenset([JSON_OBJECTPARENTS_OBJECT,
                                JSON_OBJECTPARENTS_RELATIVE_PATH_SEGMENT])

# properties
JSON_PROPERTY_ID = "id"
JSON_PROPERTY_LOCAL_NAME = "localName"
JSON_PROPERTY_DISPLAY_NAME = "displayName"
JSON_PROPERTY_QUERY_NAME = "queryName"
JSON_PROPERTY_VALUE = "value"
JSON_PROPERTY_DATATYPE = "type"
JSON_PROPERTY_CARDINALITY = "cardinality"

PROPERTY_KEYS = frozenset([
    JSON_PROPERTY_ID, JSON_PROPERTY_LOCAL_NAME, JSON_PROPERTY_DISPLAY_NAME,
    JSON_PROPERTY_QUERY_NAME, JSON_PROPERTY_VALUE, JSON_PROPERTY_DATATYPE,
    JSON_PROPERTY_CARDINALITY
])

# change events
JSON_CHANGE_EVENT_TYPE = "changeType"
JSON_CHANGE_EVENT_TIME = "changeTime"
CHANGE_EVENT_KEYS = frozenset([JSON_CHANGE_EVENT_TYPE, JSON_CHANGE_EVENT_TIME])

# access control
JSON_ACL_ACES = "aces"
JSON_ACL_IS_EXACT = "isExact"
ACL_KEYS = frozenset([JSON_ACL_ACES, JSON_ACL_IS_EXACT])

JSON_ACE_PRINCIPAL = "principal"
JSON_ACE_PRINCIPAL_ID = "principalId"
JSON_ACE_PERMISSIONS = "permissions"
JSON_ACE_IS_DIRECT = "isDirect"
ACE_KEYS = frozenset([JSON_ACE_PRINCIPAL, JSON_ACE_PRINCIPAL_ID, JSON_ACE_PERMISSIONS,
                      JSON_ACE_IS_DIRECT])
PRINCIPAL_KEYS = frozenset([JSON_ACE_PRINCIPAL_ID])

# renditions
JSON_RENDITION_STREAM_ID = "streamId"
JSON_RENDITION_MIMETYPE = "mimeType"
JSON_RENDITION_LENGTH = "length"
JSON_RENDITION_KIND = "kind"
JSON_RENDITION_TITLE = "title"
JSON_RENDITION_HEIGHT = "height"
JSON_RENDITION_WIDTH = "width"
JSON_RENDITION_DOCUMENT_ID = "renditionDocumentId"

RENDITION_KEYS = frozenset([
    JSON_RENDITION_STREAM_ID, JSON_RENDITION_MIMETYPE, JSON_RENDITION_LENGTH,
    JSON_RENDITION_KIND, JSON_RENDITION_TITLE, JSON_RENDITION_HEIGHT, JSON_RENDITION_WIDTH,
    JSON_RENDITION_DOCUMENT_ID
])

# lists and containers of objects
JSON_OBJECTLIST_OBJECTS = "objects"
JSON_OBJECTLIST_HAS_MORE_ITEMS = "hasMoreItems"
JSON_OBJECTLIST_NUM_ITEMS = "numItems"
JSON_OBJECTLIST_CHANGE_LOG_TOKEN = "changeLogToken"
OBJECTLIST_KEYS = frozenset([JSON_OBJECTLIST_OBJECTS, JSON_OBJECTLIST_HAS_MORE_ITEMS,
                             JSON_OBJECTLIST_NUM_ITEMS, JSON_OBJECTLIST_CHANGE_LOG_TOKEN])

JSON_OBJECTINFOLDERLIST_OBJECTS = "objects"
JSON_OBJECTINFOLDERLIST_HAS_MORE_ITEMS = "hasMoreItems"
JSON_OBJECTINFOLDERLIST_NUM_ITEMS = "numItems"
OBJECTINFOLDERLIST_KEYS = frozenset([JSON_OBJECTINFOLDERLIST_OBJECTS,
                                     JSON_OBJECTINFOLDERLIST_HAS_MORE_ITEMS,
                                     JSON_OBJECTINFOLDERLIST_NUM_ITEMS])

JSON_OBJECTINFOLDERCONTAINER_OBJECT = "object"
JSON_OBJECTINFOLDERCONTAINER_CHILDREN = "children"
OBJECTINFOLDERCONTAINER_KEYS = frozenset([JSON_OBJECTINFOLDERCONTAINER_OBJECT,
                                          JSON_OBJECTINFOLDERCONTAINER_CHILDREN])

JSON_QUERYRESULTLIST_RESULTS = "results"
JSON_QUERYRESULTLIST_HAS_MORE_ITEMS = "hasMoreItems"
JSON_QUERYRESULTLIST_NUM_ITEMS = "numItems"
QUERYRESULTLIST_KEYS = frozenset([JSON_QUERYRESULTLIST_RESULTS,
                                  JSON_QUERYRESULTLIST_HAS_MORE_ITEMS,
                                  JSON_QUERYRESULTLIST_NUM_ITEMS])

# type definitions
JSON_TYPE_ID = "id"
JSON_TYPE_LOCAL_NAME = "localName"
JSON_TYPE_LOCAL_NAMESPACE = "localNamespace"
JSON_TYPE_DISPLAY_NAME = "displayName"
JSON_TYPE_QUERY_NAME = "queryName"
JSON_TYPE_DESCRIPTION = "description"
JSON_TYPE_BASE_ID = "baseId"
JSON_TYPE_PARENT_ID = "parentId"
JSON_TYPE_CREATABLE = "creatable"
JSON_TYPE_FILEABLE = "fileable"
JSON_TYPE_QUERYABLE = "queryable"
JSON_TYPE_FULLTEXT_INDEXED = "fulltextIndexed"
JSON_TYPE_INCLUDE_IN_SUPERTYPE_QUERY = "includedInSupertypeQuery"
JSON_TYPE_CONTROLLABLE_POLICY = "controllablePolicy"
JSON_TYPE_CONTROLLABLE_ACL = "controllableACL"
JSON_TYPE_PROPERTY_DEFINITIONS = "propertyDefinitions"
JSON_TYPE_TYPE_MUTABILITY = "typeMutability"
JSON_TYPE_VERSIONABLE = "versionable"                      # document
JSON_TYPE_CONTENTSTREAM_ALLOWED = "contentStreamAllowed"   # document
JSON_TYPE_ALLOWED_SOURCE_TYPES = "allowedSourceTypes"      # relationship
JSON_TYPE_ALLOWED_TARGET_TYPES = "allowedTargetTypes"      # relationship

TYPE_KEYS = frozenset([
    JSON_TYPE_ID, JSON_TYPE_LOCAL_NAME, JSON_TYPE_LOCAL_NAMESPACE, JSON_TYPE_DISPLAY_NAME,
    JSON_TYPE_QUERY_NAME, JSON_TYPE_DESCRIPTION, JSON_TYPE_BASE_ID, JSON_TYPE_PARENT_ID,
    JSON_TYPE_CREATABLE, JSON_TYPE_FILEABLE, JSON_TYPE_QUERYABLE, JSON_TYPE_FULLTEXT_INDEXED,
    JSON_TYPE_INCLUDE_IN_SUPERTYPE_QUERY, JSON_TYPE_CONTROLLABLE_POLICY,
    JSON_TYPE_CONTROLLABLE_ACL, JSON_TYPE_PROPERTY_DEFINITIONS, JSON_TYPE_VERSIONABLE,
    JSON_TYPE_CONTENTSTREAM_ALLOWED, JSON_TYPE_ALLOWED_SOURCE_TYPES,
    JSON_TYPE_ALLOWED_TARGET_TYPES, JSON_TYPE_TYPE_MUTABILITY
])

JSON_PROPERTY_TYPE_ID = "id"
JSON_PROPERTY_TYPE_LOCAL_NAME = "localName"
JSON_PROPERTY_TYPE_LOCAL_NAMESPACE = "localNamespace"
JSON_PROPERTY_TYPE_DISPLAY_NAME = "displayName"
JSON_PROPERTY_TYPE_QUERY_NAME = "queryName"
JSON_PROPERTY_TYPE_DESCRIPTION = "description"
JSON_PROPERTY_TYPE_PROPERTY_TYPE = "propertyType"
JSON_PROPERTY_TYPE_CARDINALITY = "cardinality"
JSON_PROPERTY_TYPE_UPDATABILITY = "updatability"
JSON_PROPERTY_TYPE_INHERITED = "inherited"
JSON_PROPERTY_TYPE_REQUIRED = "required"
JSON_PROPERTY_TYPE_QUERYABLE = "queryable"
JSON_PROPERTY_TYPE_ORDERABLE = "orderable"
JSON_PROPERTY_TYPE_OPENCHOICE = "openChoice"
JSON_PROPERTY_TYPE_DEFAULT_VALUE = "defaultValue"
JSON_PROPERTY_TYPE_MAX_LENGTH = "maxLength"
JSON_PROPERTY_TYPE_MIN_VALUE = "minValue"
JSON_PROPERTY_TYPE_MAX_VALUE = "maxValue"
JSON_PROPERTY_TYPE_PRECISION = "precision"
JSON_PROPERTY_TYPE_RESOLUTION = "resolution"
JSON_PROPERTY_TYPE_CHOICE = "choice"
JSON_PROPERTY_TYPE_CHOICE_DISPLAY_NAME = "displayName"
JSON_PROPERTY_TYPE_CHOICE_VALUE = "value"
JSON_PROPERTY_TYPE_CHOICE_CHOICE = "choice"

PROPERTY_TYPE_KEYS = frozenset([
    JSON_PROPERTY_TYPE_ID, JSON_PROPERTY_TYPE_LOCAL_NAME, JSON_PROPERTY_TYPE_LOCAL_NAMESPACE,
    JSON_PROPERTY_TYPE_DISPLAY_NAME, JSON_PROPERTY_TYPE_QUERY_NAME,
    JSON_PROPERTY_TYPE_DESCRIPTION, JSON_PROPERTY_TYPE_PROPERTY_TYPE,
    JSON_PROPERTY_TYPE_CARDINALITY, JSON_PROPERTY_TYPE_UPDATABILITY,
    JSON_PROPERTY_TYPE_INHERITED, JSON_PROPERTY_TYPE_REQUIRED, JSON_PROPERTY_TYPE_QUERYABLE,
    JSON_PROPERTY_TYPE_ORDERABLE, JSON_PROPERTY_TYPE_OPENCHOICE,
    JSON_PROPERTY_TYPE_DEFAULT_VALUE, JSON_PROPERTY_TYPE_MAX_LENGTH,
    JSON_PROPERTY_TYPE_MIN_VALUE, JSON_PROPERTY_TYPE_MAX_VALUE, JSON_PROPERTY_TYPE_PRECISION,
    JSON_PROPERTY_TYPE_RESOLUTION, JSON_PROPERTY_TYPE_CHOICE
])

JSON_TYPE_MUTABILITY_CREATE = "create"
JSON_TYPE_MUTABILITY_UPDATE = "update"
JSON_TYPE_MUTABILITY_DELETE = "delete"
TYPE_MUTABILITY_KEYS = frozenset([JSON_TYPE_MUTABILITY_CREATE, JSON_TYPE_MUTABILITY_UPDATE,
                                  JSON_TYPE_MUTABILITY_DELETE])

JSON_TYPELIST_TYPES = "types"
JSON_TYPELIST_HAS_MORE_ITEMS = "hasMoreItems"
JSON_TYPELIST_NUM_ITEMS = "numItems"
TYPELIST_KEYS = frozenset([JSON_TYPELIST_TYPES, JSON_TYPELIST_HAS_MORE_ITEMS,
                           JSON_TYPELIST_NUM_ITEMS])

JSON_TYPESCONTAINER_TYPE = "type"
JSON_TYPESCONTAINER_CHILDREN = "children"
TYPESCONTAINER_KEYS = frozenset([JSON_TYPESCONTAINER_TYPE, JSON_TYPESCONTAINER_CHILDREN])

# results of delete-tree and bulk-update
JSON_FAILEDTODELETE_ID = "ids"
FAILEDTODELETE_KEYS = frozenset([JSON_FAILEDTODELETE_ID])

JSON_BULK_UPDATE_ID = "id"
JSON_BULK_UPDATE_NEW_ID = "newId"
JSON_BULK_UPDATE_CHANGE_TOKEN = "changeToken"
BULK_UPDATE_KEYS = frozenset([JSON_BULK_UPDATE_ID, JSON_BULK_UPDATE_NEW_ID,
                              JSON_BULK_UPDATE_CHANGE_TOKEN])

# URL selectors
SELECTOR_LAST_RESULT = "lastResult"
SELECTOR_REPOSITORY_INFO = "repositoryInfo"
SELECTOR_TYPE_CHILDREN = "typeChildren"
SELECTOR_TYPE_DESCENDANTS = "typeDescendants"
SELECTOR_TYPE_DEFINITION = "typeDefinition"
SELECTOR_CONTENT = "content"
SELECTOR_OBJECT = "object"
SELECTOR_PROPERTIES = "properties"
SELECTOR_ALLOWABLE_ACTIONS = "allowableActions"
SELECTOR_RENDITIONS = "renditions"
SELECTOR_CHILDREN = "children"
SELECTOR_DESCENDANTS = "descendants"
SELECTOR_PARENTS = "parents"
SELECTOR_PARENT = "parent"
SELECTOR_FOLDER_TREE = "folderTree"
SELECTOR_QUERY = "query"
SELECTOR_VERSIONS = "versions"
SELECTOR_RELATIONSHIPS = "relationships"
SELECTOR_CHECKEDOUT = "checkedout"
SELECTOR_POLICIES = "policies"
SELECTOR_ACL = "acl"
SELECTOR_CONTENT_CHANGES = "contentChanges"

# form actions
CMISACTION_CREATE_TYPE = "createType"
CMISACTION_UPDATE_TYPE = "updateType"
CMISACTION_DELETE_TYPE = "deleteType"
CMISACTION_CREATE_DOCUMENT = "createDocument"
CMISACTION_CREATE_DOCUMENT_FROM_SOURCE = "createDocumentFromSource"
CMISACTION_CREATE_FOLDER = "createFolder"
CMISACTION_CREATE_RELATIONSHIP = "createRelationship"
CMISACTION_CREATE_POLICY = "createPolicy"
CMISACTION_CREATE_ITEM = "createItem"
CMISACTION_UPDATE_PROPERTIES = "update"
CMISACTION_BULK_UPDATE = "bulkUpdate"
CMISACTION_DELETE_CONTENT = "deleteContent"
CMISACTION_SET_CONTENT = "setContent"
CMISACTION_APPEND_CONTENT = "appendContent"
CMISACTION_DELETE = "delete"
CMISACTION_DELETE_TREE = "deleteTree"
CMISACTION_MOVE = "move"
CMISACTION_ADD_OBJECT_TO_FOLDER = "addObjectToFolder"
CMISACTION_REMOVE_OBJECT_FROM_FOLDER = "removeObjectFromFolder"
CMISACTION_QUERY = "query"
CMISACTION_CHECK_OUT = "checkOut"
CMISACTION_CANCEL_CHECK_OUT = "cancelCheckOut"
CMISACTION_CHECK_IN = "checkIn"
CMISACTION_APPLY_POLICY = "applyPolicy"
CMISACTION_REMOVE_POLICY = "removePolicy"
CMISACTION_APPLY_ACL = "applyACL"

# form controls
CONTROL_CMISACTION = "cmisaction"
CONTROL_SUCCINCT = "succinct"
CONTROL_TOKEN = "token"
CONTROL_OBJECT_ID = "objectId"
CONTROL_PROP_ID = "propertyId"
CONTROL_PROP_VALUE = "propertyValue"
CONTROL_POLICY = "policy"
CONTROL_POLICY_ID = "policyId"
CONTROL_ADD_ACE_PRINCIPAL = "addACEPrincipal"
CONTROL_ADD_ACE_PERMISSION = "addACEPermission"
CONTROL_REMOVE_ACE_PRINCIPAL = "removeACEPrincipal"
CONTROL_REMOVE_ACE_PERMISSION = "removeACEPermission"
CONTROL_CONTENT_TYPE = "contenttype"
CONTROL_FILENAME = "filename"
CONTROL_IS_LAST_CHUNK = "isLastChunk"
CONTROL_TYPE = "type"
CONTROL_TYPE_ID = "typeId"
CONTROL_CHANGE_TOKEN = "changeToken"
CONTROL_ADD_SECONDARY_TYPE = "addSecondaryTypeId"
CONTROL_REMOVE_SECONDARY_TYPE = "removeSecondaryTypeId"

# request parameters
PARAM_ACL = "includeACL"
PARAM_ALLOWABLE_ACTIONS = "includeAllowableActions"
PARAM_ALL_VERSIONS = "allVersions"
PARAM_CHANGE_LOG_TOKEN = "changeLogToken"
PARAM_CHANGE_TOKEN = "changeToken"
PARAM_CHECKIN_COMMENT = "checkinComment"
PARAM_CONTINUE_ON_FAILURE = "continueOnFailure"
PARAM_DEPTH = "depth"
PARAM_FILTER = "filter"
PARAM_SUCCINCT = "succinct"
PARAM_DATETIME_FORMAT = "dateTimeFormat"
PARAM_FOLDER_ID = "folderId"
PARAM_MAJOR = "major"
PARAM_MAX_ITEMS = "maxItems"
PARAM_OBJECT_ID = "objectId"
PARAM_ONLY_BASIC_PERMISSIONS = "onlyBasicPermissions"
PARAM_ORDER_BY = "orderBy"
PARAM_OVERWRITE_FLAG = "overwriteFlag"
PARAM_PATH_SEGMENT = "includePathSegment"
PARAM_POLICY_ID = "policyId"
PARAM_POLICY_IDS = "includePolicyIds"
PARAM_PROPERTIES = "includeProperties"
PARAM_PROPERTY_DEFINITIONS = "includePropertyDefinitions"
PARAM_RELATIONSHIPS = "includeRelationships"
PARAM_RELATIONSHIP_DIRECTION = "relationshipDirection"
PARAM_RELATIVE_PATH_SEGMENT = "includeRelativePathSegment"
PARAM_RENDITION_FILTER = "renditionFilter"
PARAM_RETURN_VERSION = "returnVersion"
PARAM_SKIP_COUNT = "skipCount"
PARAM_SOURCE_FOLDER_ID = "sourceFolderId"
PARAM_TARGET_FOLDER_ID = "targetFolderId"
PARAM_STREAM_ID = "streamId"
PARAM_SUB_RELATIONSHIP_TYPES = "includeSubRelationshipTypes"
PARAM_TYPE_ID = "typeId"
PARAM_UNFILE_OBJECTS = "unfileObjects"
PARAM_VERSIONING_STATE = "versioningState"
PARAM_STATEMENT = "statement"
PARAM_SEARCH_ALL_VERSIONS = "searchAllVersions"
PARAM_ACL_PROPAGATION = "ACLPropagation"
PARAM_SOURCE_ID = "sourceId"
PARAM_SELECTOR = "cmisselector"
