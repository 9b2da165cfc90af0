"""
some constants of the CMIS data model
"""

# well-known property identifiers
PROP_NAME = "cmis:name"
PROP_DESCRIPTION = "cmis:description"
PROP_OBJECT_ID = "cmis:objectId"
PROP_OBJECT_TYPE_ID = "cmis:objectTypeId"
PROP_BASE_TYPE_ID = "cmis:baseTypeId"
PROP_SECONDARY_OBJECT_TYPE_IDS = "cmis:secondaryObjectTypeIds"
PROP_CREATED_BY = "cmis:createdBy"
PROP_CREATION_DATE = "cmis:creationDate"
PROP_LAST_MODIFIED_BY = "cmis:lastModifiedBy"
PROP_LAST_MODIFICATION_DATE = "cmis:lastModificationDate"
PROP_CHANGE_TOKEN = "cmis:changeToken"
PROP_PARENT_ID = "cmis:parentId"
PROP_PATH = "cmis:path"
PROP_CONTENT_STREAM_LENGTH = "cmis:contentStreamLength"
PROP_CONTENT_STREAM_MIME_TYPE = "cmis:contentStreamMimeType"
PROP_CONTENT_STREAM_FILE_NAME = "cmis:contentStreamFileName"
PROP_VERSION_SERIES_ID = "cmis:versionSeriesId"
PROP_SOURCE_ID = "cmis:sourceId"
PROP_TARGET_ID = "cmis:targetId"

# the wire format for date-time values assumed when none is configured
DEFAULT_DATETIME_FORMAT = "simple"
