"""
Helper functions for pulling typed values out of (and putting them into) decoded JSON objects.

The getters are lenient in the way the Browser Binding requires:  a member that is missing or of
an unexpected scalar type yields None.  A member that should hold a JSON object or array but
holds something else is an error, however, because it means the response is not structured the
way the codecs expect.
"""
from collections import OrderedDict
from collections.abc import Mapping
from decimal import Decimal

import simplejson as json

from ..exceptions import CmisRuntimeException
from ..values import parse_datetime

def _describe(value):
    if isinstance(value, Mapping):
        return "JSON object"
    if isinstance(value, list):
        return "JSON array"
    return type(value).__name__

def as_json_object(value):
    """
    return the value if it is a JSON object, None if it is None
    :raises CmisRuntimeException:  if the value is anything else
    """
    if value is None or isinstance(value, Mapping):
        return value
    raise CmisRuntimeException("Expected a JSON object but found a %s: %s" %
                               (_describe(value), str(value)))

def get_json_object(jsonobj: Mapping, key: str):
    """
    return the JSON object stored under the given key, or None if the key is not set
    :raises CmisRuntimeException:  if the value is not a JSON object
    """
    return as_json_object(jsonobj.get(key))

def get_json_array(jsonobj: Mapping, key: str):
    """
    return the JSON array stored under the given key, or None if the key is not set
    :raises CmisRuntimeException:  if the value is not a JSON array
    """
    value = jsonobj.get(key)
    if value is None or isinstance(value, list):
        return value
    raise CmisRuntimeException("Expected a JSON array but found a %s: %s" %
                               (_describe(value), str(value)))

def get_string(jsonobj: Mapping, key: str):
    value = jsonobj.get(key)
    return value if isinstance(value, str) else None

def get_boolean(jsonobj: Mapping, key: str):
    value = jsonobj.get(key)
    return value if isinstance(value, bool) else None

def get_integer(jsonobj: Mapping, key: str):
    value = jsonobj.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None

def get_decimal(jsonobj: Mapping, key: str):
    value = jsonobj.get(key)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    return None

def get_datetime(jsonobj: Mapping, key: str):
    """
    return the date-time stored under the given key in either wire format
    :raises CmisRuntimeException:  if the value is a string that is not a valid date-time
    """
    try:
        return parse_datetime(jsonobj.get(key))
    except ValueError as ex:
        raise CmisRuntimeException("Invalid DateTime value!", cause=ex) from ex

def get_enum(jsonobj: Mapping, key: str, enumcls):
    """
    return the enumeration member represented by the string stored under the given key, or
    None if the key is not set to a recognized token
    """
    return enumcls.from_wire(get_string(jsonobj, key))

def enum_value(member):
    """
    return the wire token for an enumeration member (or None)
    """
    if member is None:
        return None
    return getattr(member, "value", member)

def set_if_not_none(jsonobj: dict, key: str, value):
    if value is not None:
        jsonobj[key] = value

def new_json_object():
    return OrderedDict()

def loads(text: str):
    """
    parse JSON text, reading non-integer numbers as Decimals and preserving member order
    """
    return json.loads(text, use_decimal=True, object_pairs_hook=OrderedDict)

def dumps(obj, **kw) -> str:
    """
    serialize a JSON-compatible object (which may contain Decimal numbers) to text.  Extra
    keyword arguments (e.g. ``indent``) are passed to the serializer.
    """
    return json.dumps(obj, use_decimal=True, **kw)
