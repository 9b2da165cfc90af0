"""
Encoding and decoding of type definitions, including their property definitions and the
(possibly nested) lists of choices that constrain property values.
"""
from collections.abc import Mapping

from ..data import (TypeDefinition, DocumentTypeDefinition, RelationshipTypeDefinition,
                    TypeMutability, PropertyDefinition, Choice, TypeDefinitionList,
                    TypeDefinitionContainer, type_definition_class)
from ..enums import (BaseTypeId, PropertyType, Cardinality, Updatability, ContentStreamAllowed,
                     DecimalPrecision, DateTimeResolution, DateTimeFormat)
from ..exceptions import CmisRuntimeException, CmisInvalidArgumentException
from ..extensions import convert_extensions, add_extensions_to_json
from ..values import decode_value, encode_value
from . import constants as const
from .utils import (get_string, get_boolean, get_integer, get_decimal, get_enum,
                    get_json_object, get_json_array, as_json_object, enum_value,
                    set_if_not_none, new_json_object)

__all__ = [ "convert_type_definition", "convert_property_definition", "convert_type_children",
            "convert_type_descendants", "type_definition_to_json", "property_definition_to_json",
            "type_definition_list_to_json", "type_definition_container_to_json" ]

def convert_type_definition(jsonobj: Mapping) -> TypeDefinition:
    """
    decode a type definition
    :raises CmisInvalidArgumentException:  if the definition does not name a recognized base type
    :raises CmisRuntimeException:  if any of its property definitions is invalid
    """
    if jsonobj is None:
        return None

    id = get_string(jsonobj, const.JSON_TYPE_ID)
    base = get_enum(jsonobj, const.JSON_TYPE_BASE_ID, BaseTypeId)
    cls = type_definition_class(base)
    if cls is None:
        raise CmisInvalidArgumentException("Invalid base type: " + str(id))

    kw = {}
    if base == BaseTypeId.DOCUMENT:
        kw['content_stream_allowed'] = get_enum(jsonobj, const.JSON_TYPE_CONTENTSTREAM_ALLOWED,
                                                ContentStreamAllowed)
        kw['is_versionable'] = get_boolean(jsonobj, const.JSON_TYPE_VERSIONABLE)
    elif base == BaseTypeId.RELATIONSHIP:
        kw['allowed_source_type_ids'] = _string_list(
            get_json_array(jsonobj, const.JSON_TYPE_ALLOWED_SOURCE_TYPES))
        kw['allowed_target_type_ids'] = _string_list(
            get_json_array(jsonobj, const.JSON_TYPE_ALLOWED_TARGET_TYPES))

    out = cls(id,
              local_name=get_string(jsonobj, const.JSON_TYPE_LOCAL_NAME),
              local_namespace=get_string(jsonobj, const.JSON_TYPE_LOCAL_NAMESPACE),
              display_name=get_string(jsonobj, const.JSON_TYPE_DISPLAY_NAME),
              query_name=get_string(jsonobj, const.JSON_TYPE_QUERY_NAME),
              description=get_string(jsonobj, const.JSON_TYPE_DESCRIPTION),
              parent_type_id=get_string(jsonobj, const.JSON_TYPE_PARENT_ID),
              is_creatable=get_boolean(jsonobj, const.JSON_TYPE_CREATABLE),
              is_fileable=get_boolean(jsonobj, const.JSON_TYPE_FILEABLE),
              is_queryable=get_boolean(jsonobj, const.JSON_TYPE_QUERYABLE),
              is_fulltext_indexed=get_boolean(jsonobj, const.JSON_TYPE_FULLTEXT_INDEXED),
              is_included_in_supertype_query=get_boolean(jsonobj,
                                                 const.JSON_TYPE_INCLUDE_IN_SUPERTYPE_QUERY),
              is_controllable_policy=get_boolean(jsonobj, const.JSON_TYPE_CONTROLLABLE_POLICY),
              is_controllable_acl=get_boolean(jsonobj, const.JSON_TYPE_CONTROLLABLE_ACL),
              **kw)

    mut = get_json_object(jsonobj, const.JSON_TYPE_TYPE_MUTABILITY)
    if mut is not None:
        out.type_mutability = TypeMutability(
            get_boolean(mut, const.JSON_TYPE_MUTABILITY_CREATE),
            get_boolean(mut, const.JSON_TYPE_MUTABILITY_UPDATE),
            get_boolean(mut, const.JSON_TYPE_MUTABILITY_DELETE),
            extensions=convert_extensions(mut, const.TYPE_MUTABILITY_KEYS)
        )

    propdefs = get_json_object(jsonobj, const.JSON_TYPE_PROPERTY_DEFINITIONS)
    if propdefs:
        for pdef in propdefs.values():
            pdef = convert_property_definition(as_json_object(pdef))
            if pdef is not None:
                out.add_property_definition(pdef)

    out.extensions = convert_extensions(jsonobj, const.TYPE_KEYS)
    return out

def _string_list(jsonarray):
    if not jsonarray:
        return []
    return [str(v) for v in jsonarray if v is not None]

def convert_property_definition(jsonobj: Mapping) -> PropertyDefinition:
    """
    decode a property definition
    :raises CmisRuntimeException:  if the definition lacks a valid property type or cardinality,
                                   or if its default value or choices are of the wrong type
    """
    if jsonobj is None:
        return None

    id = get_string(jsonobj, const.JSON_PROPERTY_TYPE_ID)
    ptype = get_enum(jsonobj, const.JSON_PROPERTY_TYPE_PROPERTY_TYPE, PropertyType)
    if ptype is None:
        raise CmisRuntimeException("Invalid property type '%s'! Data type not set!" % id)
    card = get_enum(jsonobj, const.JSON_PROPERTY_TYPE_CARDINALITY, Cardinality)
    if card is None:
        raise CmisRuntimeException("Invalid property type '%s'! Cardinality not set!" % id)

    out = PropertyDefinition(
        id, ptype, card,
        local_name=get_string(jsonobj, const.JSON_PROPERTY_TYPE_LOCAL_NAME),
        local_namespace=get_string(jsonobj, const.JSON_PROPERTY_TYPE_LOCAL_NAMESPACE),
        query_name=get_string(jsonobj, const.JSON_PROPERTY_TYPE_QUERY_NAME),
        description=get_string(jsonobj, const.JSON_PROPERTY_TYPE_DESCRIPTION),
        display_name=get_string(jsonobj, const.JSON_PROPERTY_TYPE_DISPLAY_NAME),
        is_inherited=get_boolean(jsonobj, const.JSON_PROPERTY_TYPE_INHERITED),
        is_open_choice=get_boolean(jsonobj, const.JSON_PROPERTY_TYPE_OPENCHOICE),
        is_orderable=get_boolean(jsonobj, const.JSON_PROPERTY_TYPE_ORDERABLE),
        is_queryable=get_boolean(jsonobj, const.JSON_PROPERTY_TYPE_QUERYABLE),
        is_required=get_boolean(jsonobj, const.JSON_PROPERTY_TYPE_REQUIRED),
        updatability=get_enum(jsonobj, const.JSON_PROPERTY_TYPE_UPDATABILITY, Updatability)
    )

    # type-specific facets
    if ptype == PropertyType.STRING:
        out.max_length = get_integer(jsonobj, const.JSON_PROPERTY_TYPE_MAX_LENGTH)
    elif ptype == PropertyType.INTEGER:
        out.min_value = get_integer(jsonobj, const.JSON_PROPERTY_TYPE_MIN_VALUE)
        out.max_value = get_integer(jsonobj, const.JSON_PROPERTY_TYPE_MAX_VALUE)
    elif ptype == PropertyType.DECIMAL:
        out.min_value = get_decimal(jsonobj, const.JSON_PROPERTY_TYPE_MIN_VALUE)
        out.max_value = get_decimal(jsonobj, const.JSON_PROPERTY_TYPE_MAX_VALUE)
        out.precision = get_enum(jsonobj, const.JSON_PROPERTY_TYPE_PRECISION, DecimalPrecision)
    elif ptype == PropertyType.DATETIME:
        out.resolution = get_enum(jsonobj, const.JSON_PROPERTY_TYPE_RESOLUTION,
                                  DateTimeResolution)

    out.default_value = _decode_value_list(jsonobj.get(const.JSON_PROPERTY_TYPE_DEFAULT_VALUE),
                                           ptype)
    out.choices = _convert_choices(get_json_array(jsonobj, const.JSON_PROPERTY_TYPE_CHOICE), ptype)

    out.extensions = convert_extensions(jsonobj, const.PROPERTY_TYPE_KEYS)
    return out

def _decode_value_list(value, ptype):
    # a wire value that may be a single scalar or an array of them
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    return [decode_value(v, ptype) for v in value if v is not None]

def _convert_choices(choices, ptype):
    out = []
    if not choices:
        return out
    for choice in choices:
        if not isinstance(choice, Mapping):
            continue
        out.append(Choice(
            get_string(choice, const.JSON_PROPERTY_TYPE_CHOICE_DISPLAY_NAME),
            _decode_value_list(choice.get(const.JSON_PROPERTY_TYPE_CHOICE_VALUE), ptype),
            _convert_choices(get_json_array(choice, const.JSON_PROPERTY_TYPE_CHOICE_CHOICE), ptype)
        ))
    return out

def convert_type_children(jsonobj: Mapping) -> TypeDefinitionList:
    """
    decode a list of type definitions, as returned by the ``typeChildren`` selector
    """
    if jsonobj is None:
        return None

    types = [convert_type_definition(t)
             for t in get_json_array(jsonobj, const.JSON_TYPELIST_TYPES) or []
             if isinstance(t, Mapping)]
    return TypeDefinitionList(types,
                              get_boolean(jsonobj, const.JSON_TYPELIST_HAS_MORE_ITEMS),
                              get_integer(jsonobj, const.JSON_TYPELIST_NUM_ITEMS),
                              extensions=convert_extensions(jsonobj, const.TYPELIST_KEYS))

def convert_type_descendants(jsonarray) -> list:
    """
    decode a tree of type definitions, as returned by the ``typeDescendants`` selector, into
    a list of :py:class:`~nistoar.cmis.data.TypeDefinitionContainer` instances
    """
    if jsonarray is None:
        return None

    out = []
    for item in jsonarray:
        if not isinstance(item, Mapping):
            continue
        children = get_json_array(item, const.JSON_TYPESCONTAINER_CHILDREN)
        out.append(TypeDefinitionContainer(
            convert_type_definition(get_json_object(item, const.JSON_TYPESCONTAINER_TYPE)),
            convert_type_descendants(children) if children is not None else [],
            extensions=convert_extensions(item, const.TYPESCONTAINER_KEYS)
        ))
    return out

def type_definition_to_json(typedef: TypeDefinition,
                            datetime_format=DateTimeFormat.SIMPLE) -> dict:
    """
    encode a type definition as a JSON object
    :param TypeDefinition typedef:  the definition to encode
    :param datetime_format:  the format for date-time default and choice values
    """
    if typedef is None:
        return None

    out = new_json_object()
    out[const.JSON_TYPE_ID] = typedef.id
    out[const.JSON_TYPE_LOCAL_NAME] = typedef.local_name
    out[const.JSON_TYPE_LOCAL_NAMESPACE] = typedef.local_namespace
    set_if_not_none(out, const.JSON_TYPE_DISPLAY_NAME, typedef.display_name)
    set_if_not_none(out, const.JSON_TYPE_QUERY_NAME, typedef.query_name)
    set_if_not_none(out, const.JSON_TYPE_DESCRIPTION, typedef.description)
    out[const.JSON_TYPE_BASE_ID] = enum_value(typedef.base_type_id)
    set_if_not_none(out, const.JSON_TYPE_PARENT_ID, typedef.parent_type_id)
    out[const.JSON_TYPE_CREATABLE] = typedef.is_creatable
    out[const.JSON_TYPE_FILEABLE] = typedef.is_fileable
    out[const.JSON_TYPE_QUERYABLE] = typedef.is_queryable
    out[const.JSON_TYPE_FULLTEXT_INDEXED] = typedef.is_fulltext_indexed
    out[const.JSON_TYPE_INCLUDE_IN_SUPERTYPE_QUERY] = typedef.is_included_in_supertype_query
    out[const.JSON_TYPE_CONTROLLABLE_POLICY] = typedef.is_controllable_policy
    out[const.JSON_TYPE_CONTROLLABLE_ACL] = typedef.is_controllable_acl

    if typedef.type_mutability is not None:
        mut = new_json_object()
        mut[const.JSON_TYPE_MUTABILITY_CREATE] = typedef.type_mutability.can_create
        mut[const.JSON_TYPE_MUTABILITY_UPDATE] = typedef.type_mutability.can_update
        mut[const.JSON_TYPE_MUTABILITY_DELETE] = typedef.type_mutability.can_delete
        out[const.JSON_TYPE_TYPE_MUTABILITY] = \
            add_extensions_to_json(typedef.type_mutability.extensions, mut)

    if isinstance(typedef, DocumentTypeDefinition):
        out[const.JSON_TYPE_VERSIONABLE] = typedef.is_versionable
        out[const.JSON_TYPE_CONTENTSTREAM_ALLOWED] = enum_value(typedef.content_stream_allowed)
    if isinstance(typedef, RelationshipTypeDefinition):
        out[const.JSON_TYPE_ALLOWED_SOURCE_TYPES] = list(typedef.allowed_source_type_ids)
        out[const.JSON_TYPE_ALLOWED_TARGET_TYPES] = list(typedef.allowed_target_type_ids)

    if typedef.property_definitions:
        pdefs = new_json_object()
        for pdef in typedef.property_definitions.values():
            pdefs[pdef.id] = property_definition_to_json(pdef, datetime_format)
        out[const.JSON_TYPE_PROPERTY_DEFINITIONS] = pdefs

    return add_extensions_to_json(typedef.extensions, out)

def property_definition_to_json(propdef: PropertyDefinition,
                                datetime_format=DateTimeFormat.SIMPLE) -> dict:
    """
    encode a property definition as a JSON object
    """
    if propdef is None:
        return None

    out = new_json_object()
    ptype = propdef.property_type

    # type-specific facets
    if ptype == PropertyType.STRING:
        set_if_not_none(out, const.JSON_PROPERTY_TYPE_MAX_LENGTH, propdef.max_length)
    elif ptype in (PropertyType.INTEGER, PropertyType.DECIMAL):
        set_if_not_none(out, const.JSON_PROPERTY_TYPE_MIN_VALUE, propdef.min_value)
        set_if_not_none(out, const.JSON_PROPERTY_TYPE_MAX_VALUE, propdef.max_value)
        if ptype == PropertyType.DECIMAL:
            set_if_not_none(out, const.JSON_PROPERTY_TYPE_PRECISION, enum_value(propdef.precision))
    elif ptype == PropertyType.DATETIME:
        set_if_not_none(out, const.JSON_PROPERTY_TYPE_RESOLUTION, enum_value(propdef.resolution))

    single = propdef.cardinality == Cardinality.SINGLE
    if propdef.default_value:
        if single:
            out[const.JSON_PROPERTY_TYPE_DEFAULT_VALUE] = \
                encode_value(propdef.default_value[0], datetime_format)
        else:
            out[const.JSON_PROPERTY_TYPE_DEFAULT_VALUE] = \
                [encode_value(v, datetime_format) for v in propdef.default_value]
    if propdef.choices:
        out[const.JSON_PROPERTY_TYPE_CHOICE] = _choices_to_json(propdef.choices, single,
                                                                datetime_format)

    # generic
    out[const.JSON_PROPERTY_TYPE_ID] = propdef.id
    out[const.JSON_PROPERTY_TYPE_LOCAL_NAME] = propdef.local_name
    set_if_not_none(out, const.JSON_PROPERTY_TYPE_LOCAL_NAMESPACE, propdef.local_namespace)
    set_if_not_none(out, const.JSON_PROPERTY_TYPE_DISPLAY_NAME, propdef.display_name)
    set_if_not_none(out, const.JSON_PROPERTY_TYPE_QUERY_NAME, propdef.query_name)
    set_if_not_none(out, const.JSON_PROPERTY_TYPE_DESCRIPTION, propdef.description)
    out[const.JSON_PROPERTY_TYPE_PROPERTY_TYPE] = enum_value(ptype)
    out[const.JSON_PROPERTY_TYPE_CARDINALITY] = enum_value(propdef.cardinality)
    out[const.JSON_PROPERTY_TYPE_UPDATABILITY] = enum_value(propdef.updatability)
    set_if_not_none(out, const.JSON_PROPERTY_TYPE_INHERITED, propdef.is_inherited)
    out[const.JSON_PROPERTY_TYPE_REQUIRED] = propdef.is_required
    out[const.JSON_PROPERTY_TYPE_QUERYABLE] = propdef.is_queryable
    out[const.JSON_PROPERTY_TYPE_ORDERABLE] = propdef.is_orderable
    set_if_not_none(out, const.JSON_PROPERTY_TYPE_OPENCHOICE, propdef.is_open_choice)

    return add_extensions_to_json(propdef.extensions, out)

def _choices_to_json(choices, single, datetime_format):
    out = []
    for choice in choices:
        jchoice = new_json_object()
        jchoice[const.JSON_PROPERTY_TYPE_CHOICE_DISPLAY_NAME] = choice.display_name
        if single:
            if choice.values:
                jchoice[const.JSON_PROPERTY_TYPE_CHOICE_VALUE] = \
                    encode_value(choice.values[0], datetime_format)
        else:
            jchoice[const.JSON_PROPERTY_TYPE_CHOICE_VALUE] = \
                [encode_value(v, datetime_format) for v in choice.values]
        if choice.choices:
            jchoice[const.JSON_PROPERTY_TYPE_CHOICE_CHOICE] = \
                _choices_to_json(choice.choices, single, datetime_format)
        out.append(jchoice)
    return out

def type_definition_list_to_json(typelist: TypeDefinitionList,
                                 datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if typelist is None:
        return None
    out = new_json_object()
    out[const.JSON_TYPELIST_TYPES] = [type_definition_to_json(t, datetime_format)
                                      for t in typelist.types]
    set_if_not_none(out, const.JSON_TYPELIST_HAS_MORE_ITEMS, typelist.has_more_items)
    set_if_not_none(out, const.JSON_TYPELIST_NUM_ITEMS, typelist.num_items)
    return add_extensions_to_json(typelist.extensions, out)

def type_definition_container_to_json(container: TypeDefinitionContainer,
                                      datetime_format=DateTimeFormat.SIMPLE) -> dict:
    if container is None:
        return None
    out = new_json_object()
    out[const.JSON_TYPESCONTAINER_TYPE] = type_definition_to_json(container.type_definition,
                                                                  datetime_format)
    if container.children:
        out[const.JSON_TYPESCONTAINER_CHILDREN] = \
            [type_definition_container_to_json(c, datetime_format) for c in container.children]
    return add_extensions_to_json(container.extensions, out)
