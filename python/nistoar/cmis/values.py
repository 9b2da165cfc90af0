"""
Conversion of single property values between their native Python representation and their
JSON wire representation.

The native types are:

=================================  ===========================================
:py:class:`~nistoar.cmis.enums.PropertyType`  Python type
=================================  ===========================================
STRING, ID, HTML, URI              ``str``
BOOLEAN                            ``bool``
INTEGER                            ``int``
DECIMAL                            ``decimal.Decimal``
DATETIME                           ``datetime.datetime`` (timezone-aware, UTC)
=================================  ===========================================

On the wire, date-times are either the number of milliseconds since the epoch (the "simple"
format) or an ISO-8601 string (the "extended" format); both are accepted when decoding.
"""
import datetime as dt
from decimal import Decimal

from .enums import PropertyType, DateTimeFormat
from .exceptions import CmisRuntimeException, CmisInvalidArgumentException

__all__ = [ "encode_value", "encode_values", "decode_value", "decode_values", "parse_datetime",
            "datetime_to_millis", "millis_to_datetime", "format_iso8601", "parse_iso8601",
            "format_decimal", "check_values" ]

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_ONE_MS = dt.timedelta(milliseconds=1)

def _as_utc(when: dt.datetime) -> dt.datetime:
    if when.tzinfo is None:
        # naive date-times are taken to be in UTC
        return when.replace(tzinfo=dt.timezone.utc)
    return when.astimezone(dt.timezone.utc)

def datetime_to_millis(when: dt.datetime) -> int:
    """
    return the number of milliseconds between the epoch and the given date-time
    """
    return (_as_utc(when) - EPOCH) // _ONE_MS

def millis_to_datetime(millis: int) -> dt.datetime:
    """
    return the UTC date-time that is the given number of milliseconds after the epoch
    """
    return EPOCH + dt.timedelta(milliseconds=int(millis))

def format_iso8601(when: dt.datetime) -> str:
    """
    render a date-time as an ISO-8601 string in UTC with millisecond precision
    """
    out = _as_utc(when).isoformat(timespec="milliseconds")
    if out.endswith("+00:00"):
        out = out[:-len("+00:00")] + "Z"
    return out

def parse_iso8601(text: str) -> dt.datetime:
    """
    parse an ISO-8601 date-time string, returning a UTC date-time.
    :raises ValueError:  if the string is not a recognizable date-time
    """
    text = text.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    if '.' in text:
        # fromisoformat() accepts exactly 3 or 6 fractional digits on older Pythons
        head, frac = text.split('.', 1)
        digits = len(frac) - len(frac.lstrip("0123456789"))
        text = head + '.' + frac[:min(digits, 6)].ljust(6, '0') + frac[digits:]
    return _as_utc(dt.datetime.fromisoformat(text))

def parse_datetime(value):
    """
    convert either wire form of a date-time--an integer number of milliseconds or an ISO-8601
    string--into a datetime.  None is returned if the value is neither.
    :raises ValueError:  if the value is a string that cannot be parsed
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return millis_to_datetime(value)
    if isinstance(value, str):
        return parse_iso8601(value)
    return None

def format_decimal(value: Decimal) -> str:
    """
    render a decimal number in plain (non-exponent, locale-independent) notation
    """
    return format(value, 'f')

def encode_value(value, datetime_format=DateTimeFormat.SIMPLE):
    """
    convert a native property value into its JSON wire representation.  Date-times are
    rendered according to the given format; all other values pass through unchanged.
    """
    if isinstance(value, dt.datetime):
        if DateTimeFormat.from_wire(datetime_format) == DateTimeFormat.EXTENDED:
            return format_iso8601(value)
        return datetime_to_millis(value)
    return value

def encode_values(values, datetime_format=DateTimeFormat.SIMPLE) -> list:
    """
    convert a list of native property values into their wire representations
    """
    if values is None:
        return []
    return [encode_value(v, datetime_format) for v in values]

def _to_str(value):
    if isinstance(value, str):
        return value
    raise TypeError(type(value).__name__)

def _to_bool(value):
    if isinstance(value, bool):
        return value
    raise TypeError(type(value).__name__)

def _to_int(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(type(value).__name__)

def _to_decimal(value):
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    raise TypeError(type(value).__name__)

def _to_datetime(value):
    out = parse_datetime(value)
    if out is None:
        raise TypeError(type(value).__name__)
    return out

_decoders = {
    PropertyType.STRING:   (_to_str,      "String"),
    PropertyType.ID:       (_to_str,      "String"),
    PropertyType.HTML:     (_to_str,      "String"),
    PropertyType.URI:      (_to_str,      "String"),
    PropertyType.BOOLEAN:  (_to_bool,     "Boolean"),
    PropertyType.INTEGER:  (_to_int,      "Integer"),
    PropertyType.DECIMAL:  (_to_decimal,  "Decimal"),
    PropertyType.DATETIME: (_to_datetime, "DateTime")
}

def decode_value(value, property_type: PropertyType):
    """
    convert a JSON wire value into its native representation for the given property type.
    None is returned for a null value.
    :raises CmisRuntimeException:  if the wire value is not of a type that can represent a
                                   value of the given property type
    """
    if value is None:
        return None
    try:
        conv, label = _decoders[property_type]
    except KeyError:
        raise CmisRuntimeException("Unknown property type!")
    try:
        return conv(value)
    except (TypeError, ValueError) as ex:
        raise CmisRuntimeException("Invalid %s value!" % label, cause=ex) from ex

def decode_values(values, property_type: PropertyType) -> list:
    """
    convert a list of JSON wire values into native values of the given property type.
    :raises CmisRuntimeException:  if any wire value is null or of the wrong type
    """
    if values is None:
        return []
    try:
        conv = _decoders[property_type][0]
    except KeyError:
        raise CmisRuntimeException("Unknown property type!")

    out = []
    for value in values:
        try:
            out.append(conv(value))
        except (TypeError, ValueError) as ex:
            raise CmisRuntimeException("Invalid property value: " + str(value), cause=ex) from ex
    return out

_natives = {
    PropertyType.STRING:   ((str,),          "String"),
    PropertyType.ID:       ((str,),          "String"),
    PropertyType.HTML:     ((str,),          "String"),
    PropertyType.URI:      ((str,),          "String"),
    PropertyType.BOOLEAN:  ((bool,),         "Boolean"),
    PropertyType.INTEGER:  ((int,),          "Integer"),
    PropertyType.DECIMAL:  ((Decimal, int),  "Decimal"),
    PropertyType.DATETIME: ((dt.datetime,),  "DateTime")
}

def check_values(values, property_type: PropertyType, prop_id: str = None):
    """
    ensure that a list of native values can be sent as the values of a property of the given
    type.
    :raises CmisInvalidArgumentException:  if any value is None or is not of the native type
                                           for the property type
    """
    try:
        types, label = _natives[property_type]
    except KeyError:
        raise CmisInvalidArgumentException("Unknown property type: " + str(property_type))

    for value in values or []:
        if value is None:
            raise CmisInvalidArgumentException("Property '%s' has a null value!" % prop_id)
        if not isinstance(value, types) or \
           (isinstance(value, bool) and property_type != PropertyType.BOOLEAN):
            raise CmisInvalidArgumentException("Property '%s' has an invalid %s value: %r" %
                                               (prop_id, label, value))
