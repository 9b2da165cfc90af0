"""
Encoding and decoding of repository information:  the description of a repository and its
capabilities returned by the Browser Binding's service document and ``repositoryInfo`` selector.
"""
from collections.abc import Mapping

from ..data import (RepositoryInfo, RepositoryCapabilities, CreatablePropertyTypes,
                    NewTypeSettableAttributes, AclCapabilities, PermissionDefinition,
                    PermissionMapping, ExtensionFeature)
from ..enums import (BaseTypeId, PropertyType, CapabilityContentStreamUpdates, CapabilityChanges,
                     CapabilityRenditions, CapabilityOrderBy, CapabilityQuery, CapabilityJoin,
                     CapabilityAcl, SupportedPermissions, AclPropagation)
from ..extensions import convert_extensions, add_extensions_to_json
from . import constants as const
from .utils import (get_string, get_boolean, get_json_object, get_json_array, get_enum,
                    as_json_object, enum_value, set_if_not_none, new_json_object)

__all__ = [ "convert_repository_info", "convert_repository_capabilities",
            "convert_acl_capabilities", "repository_info_to_json", "capabilities_to_json",
            "acl_capabilities_to_json" ]

# (attribute, wire key, enum class or None for a boolean)
_CAPABILITIES = (
    ("content_stream_updates",  const.JSON_CAP_CONTENT_STREAM_UPDATABILITY,
                                CapabilityContentStreamUpdates),
    ("changes",                 const.JSON_CAP_CHANGES,                  CapabilityChanges),
    ("renditions",              const.JSON_CAP_RENDITIONS,               CapabilityRenditions),
    ("get_descendants",         const.JSON_CAP_GET_DESCENDANTS,          None),
    ("get_folder_tree",         const.JSON_CAP_GET_FOLDER_TREE,          None),
    ("multifiling",             const.JSON_CAP_MULTIFILING,              None),
    ("unfiling",                const.JSON_CAP_UNFILING,                 None),
    ("version_specific_filing", const.JSON_CAP_VERSION_SPECIFIC_FILING,  None),
    ("pwc_searchable",          const.JSON_CAP_PWC_SEARCHABLE,           None),
    ("pwc_updatable",           const.JSON_CAP_PWC_UPDATABLE,            None),
    ("all_versions_searchable", const.JSON_CAP_ALL_VERSIONS_SEARCHABLE,  None),
    ("order_by",                const.JSON_CAP_ORDER_BY,                 CapabilityOrderBy),
    ("query",                   const.JSON_CAP_QUERY,                    CapabilityQuery),
    ("join",                    const.JSON_CAP_JOIN,                     CapabilityJoin),
    ("acl",                     const.JSON_CAP_ACL,                      CapabilityAcl)
)

def convert_repository_info(jsonobj: Mapping) -> RepositoryInfo:
    """
    decode a repository info JSON object
    """
    if jsonobj is None:
        return None

    out = RepositoryInfo(
        get_string(jsonobj, const.JSON_REPINFO_ID),
        name=get_string(jsonobj, const.JSON_REPINFO_NAME),
        description=get_string(jsonobj, const.JSON_REPINFO_DESCRIPTION),
        vendor_name=get_string(jsonobj, const.JSON_REPINFO_VENDOR),
        product_name=get_string(jsonobj, const.JSON_REPINFO_PRODUCT),
        product_version=get_string(jsonobj, const.JSON_REPINFO_PRODUCT_VERSION),
        root_folder_id=get_string(jsonobj, const.JSON_REPINFO_ROOT_FOLDER_ID),
        repository_url=get_string(jsonobj, const.JSON_REPINFO_REPOSITORY_URL),
        root_url=get_string(jsonobj, const.JSON_REPINFO_ROOT_FOLDER_URL),
        capabilities=convert_repository_capabilities(
            get_json_object(jsonobj, const.JSON_REPINFO_CAPABILITIES)),
        acl_capabilities=convert_acl_capabilities(
            get_json_object(jsonobj, const.JSON_REPINFO_ACL_CAPABILITIES)),
        latest_change_log_token=get_string(jsonobj, const.JSON_REPINFO_CHANGE_LOG_TOKEN),
        cmis_version_supported=get_string(jsonobj, const.JSON_REPINFO_CMIS_VERSION_SUPPORTED),
        thin_client_uri=get_string(jsonobj, const.JSON_REPINFO_THIN_CLIENT_URI),
        changes_incomplete=get_boolean(jsonobj, const.JSON_REPINFO_CHANGES_INCOMPLETE),
        principal_id_anonymous=get_string(jsonobj, const.JSON_REPINFO_PRINCIPAL_ID_ANONYMOUS),
        principal_id_anyone=get_string(jsonobj, const.JSON_REPINFO_PRINCIPAL_ID_ANYONE)
    )

    changes = get_json_array(jsonobj, const.JSON_REPINFO_CHANGES_ON_TYPE)
    if changes:
        out.changes_on_type = [BaseTypeId.from_wire(t) for t in changes if t is not None]

    features = get_json_array(jsonobj, const.JSON_REPINFO_EXTENDED_FEATURES)
    if features:
        out.extension_features = [_convert_feature(as_json_object(f)) for f in features
                                  if f is not None]

    out.extensions = convert_extensions(jsonobj, const.REPINFO_KEYS)
    return out

def _convert_feature(jsonobj):
    out = ExtensionFeature(get_string(jsonobj, const.JSON_FEATURE_ID),
                           url=get_string(jsonobj, const.JSON_FEATURE_URL),
                           common_name=get_string(jsonobj, const.JSON_FEATURE_COMMON_NAME),
                           version_label=get_string(jsonobj, const.JSON_FEATURE_VERSION_LABEL),
                           description=get_string(jsonobj, const.JSON_FEATURE_DESCRIPTION))
    data = get_json_object(jsonobj, const.JSON_FEATURE_DATA)
    if data:
        for key, val in data.items():
            out.feature_data[key] = None if val is None else str(val)
    out.extensions = convert_extensions(jsonobj, const.FEATURE_KEYS)
    return out

def convert_repository_capabilities(jsonobj: Mapping) -> RepositoryCapabilities:
    """
    decode a repository capabilities JSON object
    """
    if jsonobj is None:
        return None

    out = RepositoryCapabilities()
    for attr, key, enumcls in _CAPABILITIES:
        if enumcls:
            setattr(out, attr, get_enum(jsonobj, key, enumcls))
        else:
            setattr(out, attr, get_boolean(jsonobj, key))

    cpt = get_json_object(jsonobj, const.JSON_CAP_CREATABLE_PROPERTY_TYPES)
    if cpt is not None:
        cancreate = get_json_array(cpt, const.JSON_CAP_CREATABLE_PROPERTY_TYPES_CANCREATE) or []
        cancreate = [PropertyType.from_wire(t) for t in cancreate if t is not None]
        out.creatable_property_types = CreatablePropertyTypes(
            [t for t in cancreate if t is not None],
            extensions=convert_extensions(cpt, const.CAP_CREATABLE_PROPERTY_TYPES_KEYS)
        )

    ntsa = get_json_object(jsonobj, const.JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES)
    if ntsa is not None:
        settable = dict((attr, get_boolean(ntsa, key))
                        for attr, key in const.CAP_NEW_TYPE_SETTABLE_ATTRIBUTES)
        out.new_type_settable_attributes = NewTypeSettableAttributes(
            extensions=convert_extensions(ntsa, const.CAP_NEW_TYPE_SETTABLE_ATTRIBUTES_KEYS),
            **settable
        )

    out.extensions = convert_extensions(jsonobj, const.CAP_KEYS)
    return out

def convert_acl_capabilities(jsonobj: Mapping) -> AclCapabilities:
    """
    decode an ACL capabilities JSON object
    """
    if jsonobj is None:
        return None

    out = AclCapabilities(
        supported_permissions=get_enum(jsonobj, const.JSON_ACLCAP_SUPPORTED_PERMISSIONS,
                                       SupportedPermissions),
        acl_propagation=get_enum(jsonobj, const.JSON_ACLCAP_ACL_PROPAGATION, AclPropagation)
    )

    for perm in get_json_array(jsonobj, const.JSON_ACLCAP_PERMISSIONS) or []:
        perm = as_json_object(perm)
        if perm is None:
            continue
        out.permissions.append(PermissionDefinition(
            get_string(perm, const.JSON_ACLCAP_PERMISSION_PERMISSION),
            get_string(perm, const.JSON_ACLCAP_PERMISSION_DESCRIPTION),
            extensions=convert_extensions(perm, const.ACLCAP_PERMISSION_KEYS)
        ))

    for mapping in get_json_array(jsonobj, const.JSON_ACLCAP_PERMISSION_MAPPING) or []:
        mapping = as_json_object(mapping)
        if mapping is None:
            continue
        key = get_string(mapping, const.JSON_ACLCAP_MAPPING_KEY)
        perms = get_json_array(mapping, const.JSON_ACLCAP_MAPPING_PERMISSION) or []
        out.permission_mapping[key] = PermissionMapping(
            key, [str(p) for p in perms if p is not None],
            extensions=convert_extensions(mapping, const.ACLCAP_MAPPING_KEYS)
        )

    out.extensions = convert_extensions(jsonobj, const.ACLCAP_KEYS)
    return out

def repository_info_to_json(info: RepositoryInfo) -> dict:
    """
    encode repository information as a JSON object
    """
    if info is None:
        return None

    out = new_json_object()
    out[const.JSON_REPINFO_ID] = info.id
    out[const.JSON_REPINFO_NAME] = info.name
    out[const.JSON_REPINFO_DESCRIPTION] = info.description
    out[const.JSON_REPINFO_VENDOR] = info.vendor_name
    out[const.JSON_REPINFO_PRODUCT] = info.product_name
    out[const.JSON_REPINFO_PRODUCT_VERSION] = info.product_version
    out[const.JSON_REPINFO_ROOT_FOLDER_ID] = info.root_folder_id
    out[const.JSON_REPINFO_CAPABILITIES] = capabilities_to_json(info.capabilities)
    set_if_not_none(out, const.JSON_REPINFO_ACL_CAPABILITIES,
                    acl_capabilities_to_json(info.acl_capabilities))
    out[const.JSON_REPINFO_CHANGE_LOG_TOKEN] = info.latest_change_log_token
    out[const.JSON_REPINFO_CMIS_VERSION_SUPPORTED] = info.cmis_version_supported
    set_if_not_none(out, const.JSON_REPINFO_THIN_CLIENT_URI, info.thin_client_uri)
    set_if_not_none(out, const.JSON_REPINFO_CHANGES_INCOMPLETE, info.changes_incomplete)
    out[const.JSON_REPINFO_CHANGES_ON_TYPE] = [enum_value(t) for t in info.changes_on_type
                                               if t is not None]
    set_if_not_none(out, const.JSON_REPINFO_PRINCIPAL_ID_ANONYMOUS, info.principal_id_anonymous)
    set_if_not_none(out, const.JSON_REPINFO_PRINCIPAL_ID_ANYONE, info.principal_id_anyone)

    if info.extension_features:
        out[const.JSON_REPINFO_EXTENDED_FEATURES] = [_feature_to_json(f)
                                                     for f in info.extension_features]

    out[const.JSON_REPINFO_REPOSITORY_URL] = info.repository_url
    out[const.JSON_REPINFO_ROOT_FOLDER_URL] = info.root_url
    return add_extensions_to_json(info.extensions, out)

def _feature_to_json(feature):
    out = new_json_object()
    set_if_not_none(out, const.JSON_FEATURE_ID, feature.id)
    set_if_not_none(out, const.JSON_FEATURE_URL, feature.url)
    set_if_not_none(out, const.JSON_FEATURE_COMMON_NAME, feature.common_name)
    set_if_not_none(out, const.JSON_FEATURE_VERSION_LABEL, feature.version_label)
    set_if_not_none(out, const.JSON_FEATURE_DESCRIPTION, feature.description)
    if feature.feature_data:
        out[const.JSON_FEATURE_DATA] = dict(feature.feature_data)
    return add_extensions_to_json(feature.extensions, out)

def capabilities_to_json(caps: RepositoryCapabilities) -> dict:
    """
    encode repository capabilities as a JSON object
    """
    if caps is None:
        return None

    out = new_json_object()
    for attr, key, enumcls in _CAPABILITIES:
        out[key] = enum_value(getattr(caps, attr))

    if caps.creatable_property_types is not None:
        cpt = new_json_object()
        cpt[const.JSON_CAP_CREATABLE_PROPERTY_TYPES_CANCREATE] = \
            sorted(enum_value(t) for t in caps.creatable_property_types.can_create)
        out[const.JSON_CAP_CREATABLE_PROPERTY_TYPES] = \
            add_extensions_to_json(caps.creatable_property_types.extensions, cpt)

    if caps.new_type_settable_attributes is not None:
        ntsa = new_json_object()
        for attr, key in const.CAP_NEW_TYPE_SETTABLE_ATTRIBUTES:
            ntsa[key] = getattr(caps.new_type_settable_attributes, attr)
        out[const.JSON_CAP_NEW_TYPE_SETTABLE_ATTRIBUTES] = \
            add_extensions_to_json(caps.new_type_settable_attributes.extensions, ntsa)

    return add_extensions_to_json(caps.extensions, out)

def acl_capabilities_to_json(caps: AclCapabilities) -> dict:
    """
    encode ACL capabilities as a JSON object
    """
    if caps is None:
        return None

    out = new_json_object()
    out[const.JSON_ACLCAP_SUPPORTED_PERMISSIONS] = enum_value(caps.supported_permissions)
    out[const.JSON_ACLCAP_ACL_PROPAGATION] = enum_value(caps.acl_propagation)

    perms = []
    for perm in caps.permissions:
        jperm = new_json_object()
        jperm[const.JSON_ACLCAP_PERMISSION_PERMISSION] = perm.id
        jperm[const.JSON_ACLCAP_PERMISSION_DESCRIPTION] = perm.description
        perms.append(add_extensions_to_json(perm.extensions, jperm))
    out[const.JSON_ACLCAP_PERMISSIONS] = perms

    mappings = []
    for mapping in caps.permission_mapping.values():
        jmap = new_json_object()
        jmap[const.JSON_ACLCAP_MAPPING_KEY] = mapping.key
        jmap[const.JSON_ACLCAP_MAPPING_PERMISSION] = list(mapping.permissions)
        mappings.append(add_extensions_to_json(mapping.extensions, jmap))
    out[const.JSON_ACLCAP_PERMISSION_MAPPING] = mappings

    return add_extensions_to_json(caps.extensions, out)
