"""
Encoding and decoding of object properties.

The Browser Binding offers two encodings of an object's properties.  The verbose encoding
(the ``properties`` member of an object) describes each property fully, including its data
type and cardinality.  The succinct encoding (``succinctProperties``) maps each property
identifier directly to its value(s); the data type must then be recovered from the
definitions of the object's types, which :py:class:`SuccinctPropertyResolver` looks up through
a :py:class:`~nistoar.cmis.browser.typecache.TypeCache`.
"""
import logging
from collections.abc import Mapping
from decimal import Decimal

from ..data import PropertyData, PropertiesBag, PropertyDefinition, TypeDefinition
from ..enums import PropertyType, Cardinality, BaseTypeId, DateTimeFormat, PropertyMode
from ..exceptions import CmisRuntimeException
from ..extensions import convert_extensions, add_extensions_to_json
from ..values import decode_values, encode_value, check_values
from .. import constants as cmisconst
from . import constants as const
from .utils import get_string, new_json_object, set_if_not_none

__all__ = [ "convert_properties", "convert_succinct_properties", "SuccinctPropertyResolver",
            "properties_to_json", "property_to_json", "infer_property_type" ]

log = logging.getLogger("nistoar.cmis").getChild("properties")

def _as_value_list(value):
    if value is None:
        return None
    if isinstance(value, list):
        return value
    return [value]

def convert_properties(jsonobj: Mapping, extjson: Mapping = None) -> PropertiesBag:
    """
    decode properties given in the verbose encoding
    :param Mapping jsonobj:  the ``properties`` member of an object
    :param Mapping extjson:  the ``propertiesExtension`` member of the object, if present
    :raises CmisRuntimeException:  if a property lacks both an ID and a query name, has an
                                   unrecognized data type, or has values of the wrong type
    """
    if jsonobj is None:
        return None

    out = PropertiesBag()
    for jprop in jsonobj.values():
        if not isinstance(jprop, Mapping):
            continue

        id = get_string(jprop, const.JSON_PROPERTY_ID)
        query_name = get_string(jprop, const.JSON_PROPERTY_QUERY_NAME)
        if id is None and query_name is None:
            raise CmisRuntimeException("Invalid property! Neither a property ID nor a query "
                                       "name is provided!")

        ptype = PropertyType.from_wire(get_string(jprop, const.JSON_PROPERTY_DATATYPE))
        if ptype is None:
            raise CmisRuntimeException("Invalid property datatype: " + str(id))

        out.add(PropertyData(id, ptype,
                             decode_values(_as_value_list(jprop.get(const.JSON_PROPERTY_VALUE)),
                                           ptype),
                             local_name=get_string(jprop, const.JSON_PROPERTY_LOCAL_NAME),
                             display_name=get_string(jprop, const.JSON_PROPERTY_DISPLAY_NAME),
                             query_name=query_name,
                             extensions=convert_extensions(jprop, const.PROPERTY_KEYS)))

    if extjson is not None:
        out.extensions = convert_extensions(extjson)
    return out

def infer_property_type(values) -> PropertyType:
    """
    guess the data type of a property from the JSON type of its first value.  Only the
    BOOLEAN, INTEGER, DECIMAL, and STRING types can be recognized this way; ID, HTML, URI,
    and DATETIME values all look like strings or integers.
    """
    if not values:
        return PropertyType.STRING
    first = values[0]
    if isinstance(first, bool):
        return PropertyType.BOOLEAN
    if isinstance(first, int):
        return PropertyType.INTEGER
    if isinstance(first, (Decimal, float)):
        return PropertyType.DECIMAL
    return PropertyType.STRING

class SuccinctPropertyResolver(object):
    """
    a resolver of the property definitions needed to decode one object's succinct properties.

    A property is looked up, in order, in the object's primary type, in each of its secondary
    types, in the base document type, and in the base folder type.  If it still cannot be
    found, the primary and then the secondary types are reloaded from the repository in case
    the cached definitions are stale; each type is reloaded at most once over the life of the
    resolver.  A property that is never found gets a type inferred from its value.
    """

    def __init__(self, type_cache, type_id: str = None, secondary_type_ids=None):
        """
        :param TypeCache type_cache:  the source of type definitions; if None, every property's
                                      type will be inferred
        :param str type_id:           the identifier of the object's primary type
        :param secondary_type_ids:    the identifiers of the object's secondary types
        """
        self.type_cache = type_cache
        self._typedef = None
        self._sectypedefs = []
        self._reloaded = {}
        self._bases = {}

        if type_cache is not None:
            if type_id:
                self._typedef = type_cache.get_type_definition(type_id)
            for stid in secondary_type_ids or []:
                if isinstance(stid, str):
                    self._sectypedefs.append(type_cache.get_type_definition(stid))

    @property
    def reload_count(self) -> int:
        """
        the number of types that have been reloaded so far
        """
        return len(self._reloaded)

    def _base_type(self, base: BaseTypeId):
        if base not in self._bases:
            self._bases[base] = self.type_cache.get_type_definition(base.value)
        return self._bases[base]

    def _reload(self, typedef: TypeDefinition):
        if typedef.id not in self._reloaded:
            log.debug("Reloading type %s to find a property definition", typedef.id)
            self._reloaded[typedef.id] = self.type_cache.reload_type_definition(typedef.id)
        return self._reloaded[typedef.id]

    def find_property_definition(self, prop_id: str) -> PropertyDefinition:
        """
        return the definition of the property with the given identifier or None if it
        cannot be found in any of the object's types
        """
        if self.type_cache is None:
            return None

        if self._typedef is not None:
            propdef = self._typedef.get_property_definition(prop_id)
            if propdef is not None:
                return propdef

        for typedef in self._sectypedefs:
            if typedef is not None:
                propdef = typedef.get_property_definition(prop_id)
                if propdef is not None:
                    return propdef

        for base in (BaseTypeId.DOCUMENT, BaseTypeId.FOLDER):
            typedef = self._base_type(base)
            if typedef is not None:
                propdef = typedef.get_property_definition(prop_id)
                if propdef is not None:
                    return propdef

        if self._typedef is not None:
            typedef = self._reload(self._typedef)
            if typedef is not None:
                propdef = typedef.get_property_definition(prop_id)
                if propdef is not None:
                    return propdef

        for typedef in self._sectypedefs:
            if typedef is not None:
                typedef = self._reload(typedef)
                if typedef is not None:
                    propdef = typedef.get_property_definition(prop_id)
                    if propdef is not None:
                        return propdef

        return None

    def resolve(self, prop_id: str, value) -> PropertyData:
        """
        decode the succinct value of a property
        :raises CmisRuntimeException:  if a value is not of the property's type
        """
        values = _as_value_list(value)
        propdef = self.find_property_definition(prop_id)

        if propdef is not None:
            return PropertyData(prop_id, propdef.property_type,
                                decode_values(values, propdef.property_type),
                                local_name=propdef.local_name,
                                display_name=propdef.display_name,
                                query_name=propdef.query_name)

        # no definition available; this may misclassify ID, HTML, URI, and DATETIME values
        ptype = infer_property_type(values)
        return PropertyData(prop_id, ptype, decode_values(values, ptype), display_name=prop_id)

def convert_succinct_properties(jsonobj: Mapping, extjson: Mapping = None,
                                type_cache=None) -> PropertiesBag:
    """
    decode properties given in the succinct encoding
    :param Mapping jsonobj:  the ``succinctProperties`` member of an object
    :param Mapping extjson:  the ``propertiesExtension`` member of the object, if present
    :param TypeCache type_cache:  the source of the type definitions needed to determine the
                             properties' data types
    :raises CmisRuntimeException:  if a property value is not of the property's type
    """
    if jsonobj is None:
        return None

    type_id = jsonobj.get(cmisconst.PROP_OBJECT_TYPE_ID)
    if not isinstance(type_id, str):
        type_id = None
    sectypes = jsonobj.get(cmisconst.PROP_SECONDARY_OBJECT_TYPE_IDS)
    if not isinstance(sectypes, list):
        sectypes = None

    resolver = SuccinctPropertyResolver(type_cache, type_id, sectypes)
    out = PropertiesBag()
    for id, value in jsonobj.items():
        out.add(resolver.resolve(id, value))

    if extjson is not None:
        out.extensions = convert_extensions(extjson)
    return out

def _find_property_definition(prop: PropertyData, typedefs, object_id, type_cache, mode):
    propdef = None
    if type_cache is not None:
        propdef = type_cache.get_property_definition(prop.id)
    for typedef in typedefs:
        if propdef is not None:
            break
        propdef = typedef.get_property_definition(prop.id)
    if propdef is None and type_cache is not None and object_id is not None and \
       mode != PropertyMode.CHANGE:
        type_cache.get_type_definition_for_object(object_id)
        propdef = type_cache.get_property_definition(prop.id)
    return propdef

def _object_types(properties: PropertiesBag, type_cache) -> list:
    # the primary type followed by the secondary types
    out = []
    typeprop = properties.get(cmisconst.PROP_OBJECT_TYPE_ID)
    if typeprop is not None and typeprop.property_type == PropertyType.ID and \
       typeprop.first_value is not None:
        out.append(type_cache.get_type_definition(str(typeprop.first_value)))

    secprop = properties.get(cmisconst.PROP_SECONDARY_OBJECT_TYPE_IDS)
    if secprop is not None and secprop.property_type == PropertyType.ID:
        for stid in secprop.values:
            out.append(type_cache.get_type_definition(str(stid)))

    return [t for t in out if t is not None]

def properties_to_json(properties: PropertiesBag, object_id: str = None, type_cache=None,
                       mode: PropertyMode = PropertyMode.OBJECT, succinct: bool = False,
                       datetime_format=DateTimeFormat.SIMPLE) -> dict:
    """
    encode a set of properties.  Where a property's definition can be found via the object's
    primary or secondary types, the definition's cardinality determines whether a single value
    or an array is written.
    :param PropertiesBag properties:  the properties to encode
    :param str object_id:        the identifier of the object the properties belong to
    :param TypeCache type_cache: the source of type definitions (optional)
    :param PropertyMode mode:    the encoding context; in QUERY mode, properties are keyed by
                                 their query names
    :param bool succinct:        if True, use the succinct encoding
    :param datetime_format:      the encoding for date-time values
    :raises CmisRuntimeException:  in QUERY mode, if a property has no query name
    :raises CmisInvalidArgumentException:  if a single-valued property is given multiple values
                                           or a value is null or not of the property's type
    """
    if properties is None:
        return None

    typedefs = _object_types(properties, type_cache) if type_cache is not None else []

    out = new_json_object()
    for prop in properties:
        propdef = _find_property_definition(prop, typedefs, object_id, type_cache, mode)
        key = prop.query_name if mode == PropertyMode.QUERY else prop.id
        if key is None:
            raise CmisRuntimeException("No query name or alias for property '%s'!" % prop.id)
        out[key] = property_to_json(prop, propdef, succinct, datetime_format)

    return out

def _encode_values(prop, propdef, datetime_format):
    values = prop.values
    if not values:
        return None
    check_values(values, prop.property_type, prop.id)
    if propdef is not None:
        propdef.check_values(values)
        if propdef.cardinality == Cardinality.SINGLE:
            return encode_value(values[0], datetime_format)
    return [encode_value(v, datetime_format) for v in values]

def property_to_json(prop: PropertyData, propdef: PropertyDefinition = None,
                     succinct: bool = False, datetime_format=DateTimeFormat.SIMPLE):
    """
    encode a single property.  In the succinct encoding, only the value (a scalar, an array,
    or None) is returned.
    """
    if prop is None:
        return None

    if succinct:
        return _encode_values(prop, propdef, datetime_format)

    out = new_json_object()
    out[const.JSON_PROPERTY_ID] = prop.id
    set_if_not_none(out, const.JSON_PROPERTY_LOCAL_NAME, prop.local_name)
    set_if_not_none(out, const.JSON_PROPERTY_DISPLAY_NAME, prop.display_name)
    set_if_not_none(out, const.JSON_PROPERTY_QUERY_NAME, prop.query_name)

    if propdef is not None:
        out[const.JSON_PROPERTY_DATATYPE] = propdef.property_type.value
        out[const.JSON_PROPERTY_CARDINALITY] = propdef.cardinality.value
    else:
        out[const.JSON_PROPERTY_DATATYPE] = prop.property_type.value
    out[const.JSON_PROPERTY_VALUE] = _encode_values(prop, propdef, datetime_format)

    return add_extensions_to_json(prop.extensions, out)
