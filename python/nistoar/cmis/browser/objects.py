"""
Encoding and decoding of repository objects and the structures built from them:  ACLs, allowable
actions, renditions, policy lists, and the lists and trees of objects returned by the navigation,
discovery, and versioning services.
"""
from collections.abc import Mapping

from ..data import (ObjectData, Acl, Ace, AllowableActions, RenditionData, ChangeEventInfo,
                    PolicyIdList, ObjectList, ObjectInFolderData, ObjectInFolderList,
                    ObjectInFolderContainer, ObjectParentData, FailedToDeleteData,
                    BulkUpdateObjectIdAndChangeToken)
from ..enums import Action, ChangeType, DateTimeFormat, PropertyMode
from ..extensions import convert_extensions, add_extensions_to_json, extensions_to_json
from ..values import encode_value
from . import constants as const
from .properties import convert_properties, convert_succinct_properties, properties_to_json
from .utils import (get_string, get_boolean, get_integer, get_datetime, get_enum,
                    get_json_object, get_json_array, as_json_object, enum_value,
                    set_if_not_none, new_json_object)

__all__ = [ "convert_object", "convert_objects", "convert_acl", "convert_allowable_actions",
            "convert_policy_ids", "convert_rendition", "convert_renditions",
            "convert_change_event_info", "convert_object_list", "convert_object_in_folder",
            "convert_object_in_folder_list", "convert_descendants", "convert_object_parents",
            "convert_failed_to_delete", "convert_bulk_update", "object_to_json", "acl_to_json",
            "allowable_actions_to_json", "rendition_to_json", "object_list_to_json",
            "object_in_folder_to_json", "object_in_folder_list_to_json",
            "object_in_folder_container_to_json", "object_parent_to_json",
            "failed_to_delete_to_json", "bulk_update_to_json" ]

## Decoding

def convert_object(jsonobj: Mapping, type_cache=None) -> ObjectData:
    """
    decode a repository object
    :param Mapping jsonobj:  the JSON encoding of the object
    :param TypeCache type_cache:  the source of type definitions, needed if the properties are
                             given in the succinct encoding
    """
    if jsonobj is None:
        return None

    out = ObjectData()
    out.acl = convert_acl(get_json_object(jsonobj, const.JSON_OBJECT_ACL))
    out.allowable_actions = convert_allowable_actions(
        get_json_object(jsonobj, const.JSON_OBJECT_ALLOWABLE_ACTIONS))
    out.change_event_info = convert_change_event_info(
        get_json_object(jsonobj, const.JSON_OBJECT_CHANGE_EVENT_INFO))
    out.is_exact_acl = get_boolean(jsonobj, const.JSON_OBJECT_EXACT_ACL)
    out.policy_ids = convert_policy_ids(get_json_object(jsonobj, const.JSON_OBJECT_POLICY_IDS))

    extjson = get_json_object(jsonobj, const.JSON_OBJECT_PROPERTIES_EXTENSION)
    props = get_json_object(jsonobj, const.JSON_OBJECT_PROPERTIES)
    if props is not None:
        out.properties = convert_properties(props, extjson)
    else:
        props = get_json_object(jsonobj, const.JSON_OBJECT_SUCCINCT_PROPERTIES)
        if props is not None:
            out.properties = convert_succinct_properties(props, extjson, type_cache)

    out.relationships = convert_objects(get_json_array(jsonobj, const.JSON_OBJECT_RELATIONSHIPS),
                                        type_cache)
    out.renditions = convert_renditions(get_json_array(jsonobj, const.JSON_OBJECT_RENDITIONS))

    out.extensions = convert_extensions(jsonobj, const.OBJECT_KEYS)
    return out

def convert_objects(jsonarray, type_cache=None) -> list:
    """
    decode an array of objects
    """
    if jsonarray is None:
        return []
    out = []
    for item in jsonarray:
        obj = convert_object(as_json_object(item), type_cache)
        if obj is not None:
            out.append(obj)
    return out

def convert_change_event_info(jsonobj: Mapping) -> ChangeEventInfo:
    if jsonobj is None:
        return None
    return ChangeEventInfo(get_enum(jsonobj, const.JSON_CHANGE_EVENT_TYPE, ChangeType),
                           get_datetime(jsonobj, const.JSON_CHANGE_EVENT_TIME),
                           extensions=convert_extensions(jsonobj, const.CHANGE_EVENT_KEYS))

def convert_acl(jsonobj: Mapping) -> Acl:
    """
    decode an access control list.  An entry that does not say whether it was applied
    directly is assumed to be direct.
    """
    if jsonobj is None:
        return None

    aces = []
    for entry in get_json_array(jsonobj, const.JSON_ACL_ACES) or []:
        entry = as_json_object(entry)
        if entry is None:
            continue

        is_direct = get_boolean(entry, const.JSON_ACE_IS_DIRECT)
        perms = get_json_array(entry, const.JSON_ACE_PERMISSIONS)
        principal = get_json_object(entry, const.JSON_ACE_PRINCIPAL)
        principal_id = None
        principal_ext = None
        if principal is not None:
            principal_id = get_string(principal, const.JSON_ACE_PRINCIPAL_ID)
            principal_ext = convert_extensions(principal, const.PRINCIPAL_KEYS)

        aces.append(Ace(principal_id,
                        [str(p) for p in perms if p is not None] if perms else [],
                        is_direct if is_direct is not None else True,
                        extensions=convert_extensions(entry, const.ACE_KEYS),
                        principal_extensions=principal_ext))

    return Acl(aces, get_boolean(jsonobj, const.JSON_ACL_IS_EXACT),
               extensions=convert_extensions(jsonobj, const.ACL_KEYS))

def convert_allowable_actions(jsonobj: Mapping) -> AllowableActions:
    """
    decode the set of allowable actions.  Only actions flagged as true are included; members
    that do not name a known action are kept as extensions.
    """
    if jsonobj is None:
        return None
    actions = set(a for a in Action if get_boolean(jsonobj, a.value) is True)
    return AllowableActions(actions,
                            extensions=convert_extensions(jsonobj, const.ALLOWABLE_ACTIONS_KEYS))

def convert_policy_ids(jsonobj: Mapping) -> PolicyIdList:
    if jsonobj is None:
        return None
    ids = get_json_array(jsonobj, const.JSON_OBJECT_POLICY_IDS_IDS) or []
    return PolicyIdList([i for i in ids if isinstance(i, str)],
                        extensions=convert_extensions(jsonobj, const.POLICY_IDS_KEYS))

def convert_rendition(jsonobj: Mapping) -> RenditionData:
    if jsonobj is None:
        return None
    return RenditionData(stream_id=get_string(jsonobj, const.JSON_RENDITION_STREAM_ID),
                         mime_type=get_string(jsonobj, const.JSON_RENDITION_MIMETYPE),
                         length=get_integer(jsonobj, const.JSON_RENDITION_LENGTH),
                         kind=get_string(jsonobj, const.JSON_RENDITION_KIND),
                         title=get_string(jsonobj, const.JSON_RENDITION_TITLE),
                         height=get_integer(jsonobj, const.JSON_RENDITION_HEIGHT),
                         width=get_integer(jsonobj, const.JSON_RENDITION_WIDTH),
                         rendition_document_id=get_string(jsonobj,
                                                          const.JSON_RENDITION_DOCUMENT_ID),
                         extensions=convert_extensions(jsonobj, const.RENDITION_KEYS))

def convert_renditions(jsonarray) -> list:
    if jsonarray is None:
        return []
    out = []
    for item in jsonarray:
        rend = convert_rendition(as_json_object(item))
        if rend is not None:
            out.append(rend)
    return out

def convert_object_list(jsonobj: Mapping, type_cache=None, is_query_result: bool = False) \
        -> ObjectList:
    """
    decode a list of objects.  Query results list their objects under ``results``; all other
    lists use ``objects``.
    """
    if jsonobj is None:
        return None

    if is_query_result:
        key, keys = const.JSON_QUERYRESULTLIST_RESULTS, const.QUERYRESULTLIST_KEYS
    else:
        key, keys = const.JSON_OBJECTLIST_OBJECTS, const.OBJECTLIST_KEYS

    objects = [convert_object(o, type_cache) for o in get_json_array(jsonobj, key) or []
               if isinstance(o, Mapping)]
    return ObjectList(objects,
                      get_boolean(jsonobj, const.JSON_OBJECTLIST_HAS_MORE_ITEMS),
                      get_integer(jsonobj, const.JSON_OBJECTLIST_NUM_ITEMS),
                      extensions=convert_extensions(jsonobj, keys))

def convert_object_in_folder(jsonobj: Mapping, type_cache=None) -> ObjectInFolderData:
    if jsonobj is None:
        return None
    return ObjectInFolderData(
        convert_object(get_json_object(jsonobj, const.JSON_OBJECTINFOLDER_OBJECT), type_cache),
        get_string(jsonobj, const.JSON_OBJECTINFOLDER_PATH_SEGMENT),
        extensions=convert_extensions(jsonobj, const.OBJECTINFOLDER_KEYS)
    )

def convert_object_in_folder_list(jsonobj: Mapping, type_cache=None) -> ObjectInFolderList:
    if jsonobj is None:
        return None
    objects = [convert_object_in_folder(o, type_cache)
               for o in get_json_array(jsonobj, const.JSON_OBJECTINFOLDERLIST_OBJECTS) or []
               if isinstance(o, Mapping)]
    return ObjectInFolderList(objects,
                              get_boolean(jsonobj, const.JSON_OBJECTINFOLDERLIST_HAS_MORE_ITEMS),
                              get_integer(jsonobj, const.JSON_OBJECTINFOLDERLIST_NUM_ITEMS),
                              extensions=convert_extensions(jsonobj,
                                                            const.OBJECTINFOLDERLIST_KEYS))

def _convert_descendant(jsonobj, type_cache):
    return ObjectInFolderContainer(
        convert_object_in_folder(get_json_object(jsonobj,
                                                 const.JSON_OBJECTINFOLDERCONTAINER_OBJECT),
                                 type_cache),
        convert_descendants(get_json_array(jsonobj, const.JSON_OBJECTINFOLDERCONTAINER_CHILDREN),
                            type_cache) or [],
        extensions=convert_extensions(jsonobj, const.OBJECTINFOLDERCONTAINER_KEYS)
    )

def convert_descendants(jsonarray, type_cache=None) -> list:
    """
    decode a tree of objects (as returned for descendants and folder trees) into a list of
    :py:class:`~nistoar.cmis.data.ObjectInFolderContainer` instances
    """
    if jsonarray is None:
        return None
    return [_convert_descendant(d, type_cache) for d in jsonarray if isinstance(d, Mapping)]

def convert_object_parents(jsonarray, type_cache=None) -> list:
    if jsonarray is None:
        return None
    out = []
    for item in jsonarray:
        if not isinstance(item, Mapping):
            continue
        out.append(ObjectParentData(
            convert_object(get_json_object(item, const.JSON_OBJECTPARENTS_OBJECT), type_cache),
            get_string(item, const.JSON_OBJECTPARENTS_RELATIVE_PATH_SEGMENT),
            extensions=convert_extensions(item, const.OBJECTPARENTS_KEYS)
        ))
    return out

def convert_failed_to_delete(jsonobj: Mapping) -> FailedToDeleteData:
    if jsonobj is None:
        return None
    ids = get_json_array(jsonobj, const.JSON_FAILEDTODELETE_ID) or []
    return FailedToDeleteData([str(i) for i in ids if i is not None],
                              extensions=convert_extensions(jsonobj, const.FAILEDTODELETE_KEYS))

def _convert_bulk_update_item(jsonobj):
    return BulkUpdateObjectIdAndChangeToken(
        get_string(jsonobj, const.JSON_BULK_UPDATE_ID),
        get_string(jsonobj, const.JSON_BULK_UPDATE_NEW_ID),
        get_string(jsonobj, const.JSON_BULK_UPDATE_CHANGE_TOKEN),
        extensions=convert_extensions(jsonobj, const.BULK_UPDATE_KEYS)
    )

def convert_bulk_update(jsonarray) -> list:
    """
    decode the results of a bulk update:  a list of
    :py:class:`~nistoar.cmis.data.BulkUpdateObjectIdAndChangeToken`
    """
    if jsonarray is None:
        return None
    out = []
    for item in jsonarray:
        item = as_json_object(item)
        if item is not None:
            out.append(_convert_bulk_update_item(item))
    return out

## Encoding

def object_to_json(obj: ObjectData, type_cache=None, mode: PropertyMode = PropertyMode.OBJECT,
                   succinct: bool = False, datetime_format=DateTimeFormat.SIMPLE) -> dict:
    """
    encode a repository object
    :param ObjectData obj:       the object to encode
    :param TypeCache type_cache: the source of definitions for the object's properties
    :param PropertyMode mode:    the encoding context; change-event info is only written in
                                 CHANGE mode, and ACLs and policies are omitted in QUERY mode
    :param bool succinct:        if True, use the succinct property encoding
    :param datetime_format:      the encoding for date-time values
    """
    if obj is None:
        return None

    out = new_json_object()

    if obj.properties is not None:
        props = properties_to_json(obj.properties, obj.id, type_cache, mode, succinct,
                                   datetime_format)
        if props is not None:
            out[const.JSON_OBJECT_SUCCINCT_PROPERTIES if succinct
                else const.JSON_OBJECT_PROPERTIES] = props
        if obj.properties.extensions:
            out[const.JSON_OBJECT_PROPERTIES_EXTENSION] = \
                extensions_to_json(obj.properties.extensions)

    if obj.allowable_actions is not None:
        out[const.JSON_OBJECT_ALLOWABLE_ACTIONS] = allowable_actions_to_json(obj.allowable_actions)

    if obj.relationships:
        out[const.JSON_OBJECT_RELATIONSHIPS] = [object_to_json(r, type_cache, mode, succinct,
                                                               datetime_format)
                                                for r in obj.relationships]

    if obj.change_event_info is not None and mode == PropertyMode.CHANGE:
        cei = new_json_object()
        cei[const.JSON_CHANGE_EVENT_TYPE] = enum_value(obj.change_event_info.change_type)
        cei[const.JSON_CHANGE_EVENT_TIME] = encode_value(obj.change_event_info.change_time,
                                                         datetime_format)
        out[const.JSON_OBJECT_CHANGE_EVENT_INFO] = \
            add_extensions_to_json(obj.change_event_info.extensions, cei)

    if obj.acl is not None and mode != PropertyMode.QUERY:
        out[const.JSON_OBJECT_ACL] = acl_to_json(obj.acl)
    set_if_not_none(out, const.JSON_OBJECT_EXACT_ACL, obj.is_exact_acl)

    if obj.policy_ids is not None and mode != PropertyMode.QUERY:
        pids = new_json_object()
        pids[const.JSON_OBJECT_POLICY_IDS_IDS] = list(obj.policy_ids.policy_ids)
        out[const.JSON_OBJECT_POLICY_IDS] = add_extensions_to_json(obj.policy_ids.extensions,
                                                                   pids)

    if obj.renditions:
        out[const.JSON_OBJECT_RENDITIONS] = [rendition_to_json(r) for r in obj.renditions]

    return add_extensions_to_json(obj.extensions, out)

def allowable_actions_to_json(actions: AllowableActions) -> dict:
    """
    encode allowable actions, writing an explicit true or false for every known action
    """
    if actions is None:
        return None
    out = new_json_object()
    for action in Action:
        out[action.value] = action in actions.actions
    return add_extensions_to_json(actions.extensions, out)

def acl_to_json(acl: Acl) -> dict:
    if acl is None:
        return None

    aces = []
    for ace in acl.aces:
        principal = new_json_object()
        principal[const.JSON_ACE_PRINCIPAL_ID] = ace.principal_id
        add_extensions_to_json(ace.principal_extensions, principal)

        jace = new_json_object()
        jace[const.JSON_ACE_PRINCIPAL] = principal
        jace[const.JSON_ACE_PERMISSIONS] = list(ace.permissions)
        jace[const.JSON_ACE_IS_DIRECT] = ace.is_direct
        aces.append(add_extensions_to_json(ace.extensions, jace))

    out = new_json_object()
    out[const.JSON_ACL_ACES] = aces
    set_if_not_none(out, const.JSON_ACL_IS_EXACT, acl.is_exact)
    return add_extensions_to_json(acl.extensions, out)

def rendition_to_json(rendition: RenditionData) -> dict:
    if rendition is None:
        return None
    out = new_json_object()
    out[const.JSON_RENDITION_STREAM_ID] = rendition.stream_id
    out[const.JSON_RENDITION_MIMETYPE] = rendition.mime_type
    out[const.JSON_RENDITION_LENGTH] = rendition.length
    out[const.JSON_RENDITION_KIND] = rendition.kind
    set_if_not_none(out, const.JSON_RENDITION_TITLE, rendition.title)
    set_if_not_none(out, const.JSON_RENDITION_HEIGHT, rendition.height)
    set_if_not_none(out, const.JSON_RENDITION_WIDTH, rendition.width)
    set_if_not_none(out, const.JSON_RENDITION_DOCUMENT_ID, rendition.rendition_document_id)
    return add_extensions_to_json(rendition.extensions, out)

def object_list_to_json(objlist: ObjectList, type_cache=None,
                        mode: PropertyMode = PropertyMode.OBJECT, succinct: bool = False,
                        datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if objlist is None:
        return None
    out = new_json_object()
    key = const.JSON_QUERYRESULTLIST_RESULTS if mode == PropertyMode.QUERY \
          else const.JSON_OBJECTLIST_OBJECTS
    out[key] = [object_to_json(o, type_cache, mode, succinct, datetime_format)
                for o in objlist.objects]
    set_if_not_none(out, const.JSON_OBJECTLIST_HAS_MORE_ITEMS, objlist.has_more_items)
    set_if_not_none(out, const.JSON_OBJECTLIST_NUM_ITEMS, objlist.num_items)
    return add_extensions_to_json(objlist.extensions, out)

def object_in_folder_to_json(oif: ObjectInFolderData, type_cache=None, succinct: bool = False,
                             datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if oif is None or oif.object is None:
        return None
    out = new_json_object()
    out[const.JSON_OBJECTINFOLDER_OBJECT] = object_to_json(oif.object, type_cache,
                                                           PropertyMode.OBJECT, succinct,
                                                           datetime_format)
    set_if_not_none(out, const.JSON_OBJECTINFOLDER_PATH_SEGMENT, oif.path_segment)
    return add_extensions_to_json(oif.extensions, out)

def object_in_folder_list_to_json(oiflist: ObjectInFolderList, type_cache=None,
                                  succinct: bool = False,
                                  datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if oiflist is None:
        return None
    out = new_json_object()
    out[const.JSON_OBJECTINFOLDERLIST_OBJECTS] = \
        [object_in_folder_to_json(o, type_cache, succinct, datetime_format)
         for o in oiflist.objects]
    set_if_not_none(out, const.JSON_OBJECTINFOLDERLIST_HAS_MORE_ITEMS, oiflist.has_more_items)
    set_if_not_none(out, const.JSON_OBJECTINFOLDERLIST_NUM_ITEMS, oiflist.num_items)
    return add_extensions_to_json(oiflist.extensions, out)

def object_in_folder_container_to_json(container: ObjectInFolderContainer, type_cache=None,
                                       succinct: bool = False,
                                       datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if container is None:
        return None
    out = new_json_object()
    out[const.JSON_OBJECTINFOLDERCONTAINER_OBJECT] = \
        object_in_folder_to_json(container.object, type_cache, succinct, datetime_format)
    if container.children:
        out[const.JSON_OBJECTINFOLDERCONTAINER_CHILDREN] = \
            [object_in_folder_container_to_json(c, type_cache, succinct, datetime_format)
             for c in container.children]
    return add_extensions_to_json(container.extensions, out)

def object_parent_to_json(parent: ObjectParentData, type_cache=None, succinct: bool = False,
                          datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if parent is None or parent.object is None:
        return None
    out = new_json_object()
    out[const.JSON_OBJECTPARENTS_OBJECT] = object_to_json(parent.object, type_cache,
                                                          PropertyMode.OBJECT, succinct,
                                                          datetime_format)
    set_if_not_none(out, const.JSON_OBJECTPARENTS_RELATIVE_PATH_SEGMENT,
                    parent.relative_path_segment)
    return add_extensions_to_json(parent.extensions, out)

def failed_to_delete_to_json(ftd: FailedToDeleteData) -> dict:
    if ftd is None:
        return None
    out = new_json_object()
    out[const.JSON_FAILEDTODELETE_ID] = list(ftd.ids)
    return add_extensions_to_json(ftd.extensions, out)

def bulk_update_to_json(result: BulkUpdateObjectIdAndChangeToken) -> dict:
    if result is None:
        return None
    out = new_json_object()
    set_if_not_none(out, const.JSON_BULK_UPDATE_ID, result.id)
    set_if_not_none(out, const.JSON_BULK_UPDATE_NEW_ID, result.new_id)
    set_if_not_none(out, const.JSON_BULK_UPDATE_CHANGE_TOKEN, result.change_token)
    return add_extensions_to_json(result.extensions, out)
