"""
The closed vocabularies of the CMIS data model.  The value of each member is the token
used to represent it on the wire.
"""
from enum import Enum

class CmisEnum(str, Enum):
    """
    a base for enumerations whose values are CMIS wire tokens
    """

    @classmethod
    def from_wire(cls, token):
        """
        return the member represented by the given wire token or None if the token is
        None or not recognized.
        """
        if token is None:
            return None
        try:
            return cls(str(token))
        except ValueError:
            return None

    def __str__(self):
        return self.value

class BaseTypeId(CmisEnum):
    DOCUMENT = "cmis:document"
    FOLDER = "cmis:folder"
    RELATIONSHIP = "cmis:relationship"
    POLICY = "cmis:policy"
    ITEM = "cmis:item"
    SECONDARY = "cmis:secondary"

class PropertyType(CmisEnum):
    BOOLEAN = "boolean"
    ID = "id"
    INTEGER = "integer"
    DATETIME = "datetime"
    DECIMAL = "decimal"
    HTML = "html"
    STRING = "string"
    URI = "uri"

class Cardinality(CmisEnum):
    SINGLE = "single"
    MULTI = "multi"

class Updatability(CmisEnum):
    READONLY = "readonly"
    READWRITE = "readwrite"
    WHENCHECKEDOUT = "whencheckedout"
    ONCREATE = "oncreate"

class DateTimeResolution(CmisEnum):
    YEAR = "year"
    DATE = "date"
    TIME = "time"

class DecimalPrecision(CmisEnum):
    BITS32 = "32"
    BITS64 = "64"

class ContentStreamAllowed(CmisEnum):
    NOTALLOWED = "notallowed"
    ALLOWED = "allowed"
    REQUIRED = "required"

class CapabilityContentStreamUpdates(CmisEnum):
    ANYTIME = "anytime"
    PWCONLY = "pwconly"
    NONE = "none"

class CapabilityChanges(CmisEnum):
    NONE = "none"
    OBJECTIDSONLY = "objectidsonly"
    PROPERTIES = "properties"
    ALL = "all"

class CapabilityRenditions(CmisEnum):
    NONE = "none"
    READ = "read"

class CapabilityQuery(CmisEnum):
    NONE = "none"
    METADATAONLY = "metadataonly"
    FULLTEXTONLY = "fulltextonly"
    BOTHSEPARATE = "bothseparate"
    BOTHCOMBINED = "bothcombined"

class CapabilityJoin(CmisEnum):
    NONE = "none"
    INNERONLY = "inneronly"
    INNERANDOUTER = "innerandouter"

class CapabilityAcl(CmisEnum):
    NONE = "none"
    DISCOVER = "discover"
    MANAGE = "manage"

class CapabilityOrderBy(CmisEnum):
    NONE = "none"
    COMMON = "common"
    CUSTOM = "custom"

class SupportedPermissions(CmisEnum):
    BASIC = "basic"
    REPOSITORY = "repository"
    BOTH = "both"

class AclPropagation(CmisEnum):
    REPOSITORYDETERMINED = "repositorydetermined"
    OBJECTONLY = "objectonly"
    PROPAGATE = "propagate"

class IncludeRelationships(CmisEnum):
    NONE = "none"
    SOURCE = "source"
    TARGET = "target"
    BOTH = "both"

class VersioningState(CmisEnum):
    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    CHECKEDOUT = "checkedout"

class UnfileObject(CmisEnum):
    UNFILE = "unfile"
    DELETESINGLEFILED = "deletesinglefiled"
    DELETE = "delete"

class RelationshipDirection(CmisEnum):
    SOURCE = "source"
    TARGET = "target"
    EITHER = "either"

class ReturnVersion(CmisEnum):
    THIS = "this"
    LATEST = "latest"
    LATESTMAJOR = "latestmajor"

class ChangeType(CmisEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    SECURITY = "security"

class DateTimeFormat(CmisEnum):
    SIMPLE = "simple"
    EXTENDED = "extended"

class CmisVersion(CmisEnum):
    CMIS_1_0 = "1.0"
    CMIS_1_1 = "1.1"

class Action(CmisEnum):
    """
    the allowable actions; iteration order is the order actions are written to the wire
    """
    CAN_DELETE_OBJECT = "canDeleteObject"
    CAN_UPDATE_PROPERTIES = "canUpdateProperties"
    CAN_GET_FOLDER_TREE = "canGetFolderTree"
    CAN_GET_PROPERTIES = "canGetProperties"
    CAN_GET_OBJECT_RELATIONSHIPS = "canGetObjectRelationships"
    CAN_GET_OBJECT_PARENTS = "canGetObjectParents"
    CAN_GET_FOLDER_PARENT = "canGetFolderParent"
    CAN_GET_DESCENDANTS = "canGetDescendants"
    CAN_MOVE_OBJECT = "canMoveObject"
    CAN_DELETE_CONTENT_STREAM = "canDeleteContentStream"
    CAN_CHECK_OUT = "canCheckOut"
    CAN_CANCEL_CHECK_OUT = "canCancelCheckOut"
    CAN_CHECK_IN = "canCheckIn"
    CAN_SET_CONTENT_STREAM = "canSetContentStream"
    CAN_GET_ALL_VERSIONS = "canGetAllVersions"
    CAN_ADD_OBJECT_TO_FOLDER = "canAddObjectToFolder"
    CAN_REMOVE_OBJECT_FROM_FOLDER = "canRemoveObjectFromFolder"
    CAN_GET_CONTENT_STREAM = "canGetContentStream"
    CAN_APPLY_POLICY = "canApplyPolicy"
    CAN_GET_APPLIED_POLICIES = "canGetAppliedPolicies"
    CAN_REMOVE_POLICY = "canRemovePolicy"
    CAN_GET_CHILDREN = "canGetChildren"
    CAN_CREATE_DOCUMENT = "canCreateDocument"
    CAN_CREATE_FOLDER = "canCreateFolder"
    CAN_CREATE_RELATIONSHIP = "canCreateRelationship"
    CAN_CREATE_ITEM = "canCreateItem"
    CAN_DELETE_TREE = "canDeleteTree"
    CAN_GET_RENDITIONS = "canGetRenditions"
    CAN_GET_ACL = "canGetAcl"
    CAN_APPLY_ACL = "canApplyAcl"

class PropertyMode(Enum):
    """
    the context in which an object is being encoded:  a plain object, a query result (keyed
    by query name, without ACL or policies), or a change-log entry (with change-event info)
    """
    OBJECT = "object"
    QUERY = "query"
    CHANGE = "change"
