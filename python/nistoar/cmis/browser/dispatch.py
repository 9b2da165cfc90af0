"""
Sending requests to a Browser Binding server and reading its replies.

Read requests are GETs that carry all of their parameters in the URL.  Write requests are form
POSTs that name the requested operation in a ``cmisaction`` control; the form is URL-encoded
unless it carries a content stream, in which case it is sent as multipart form data.
:py:class:`FormDataComposer` assembles these forms, and :py:class:`RequestDispatcher` sends
requests, checks the status of each response, and parses JSON bodies.
"""
import codecs
import datetime as dt
import logging
from collections import namedtuple
from collections.abc import Mapping
from decimal import Decimal

from ..data import ContentStream, PropertiesBag, Acl
from ..enums import DateTimeFormat
from ..exceptions import CmisConnectionException
from ..values import datetime_to_millis, format_iso8601, format_decimal
from . import constants as const
from .faults import convert_status_code
from .urls import normalize_parameter
from .utils import loads

__all__ = [ "FormData", "FormDataComposer", "RequestDispatcher", "parse_json", "parse_object",
            "parse_array", "DEFAULT_FILENAME", "DEFAULT_MIME_TYPE" ]

DEFAULT_FILENAME = "content"
DEFAULT_MIME_TYPE = "application/octet-stream"

FormData = namedtuple("FormData", "data files")
FormData.__doc__ = """
the body of a POST request:  ``data`` is the ordered list of (name, value) form fields;
``files`` is None for a URL-encoded form, or a dict holding the ``content`` part of a
multipart form.
"""

def _index(*idx):
    return "".join("[%d]" % i for i in idx)

class FormDataComposer(object):
    """
    a builder for the form sent with a POST request.  After construction, set whichever
    attributes the operation needs and call :py:meth:`create_form`.
    """

    def __init__(self, action: str, datetime_format=DateTimeFormat.SIMPLE):
        """
        :param str action:       the value of the ``cmisaction`` control
        :param datetime_format:  the encoding for date-time property values
        """
        self.action = action
        self.datetime_format = DateTimeFormat.from_wire(datetime_format) or DateTimeFormat.SIMPLE
        self.parameters = {}
        self.succinct = False
        self.properties = None
        self.add_aces = None
        self.remove_aces = None
        self.policies = None
        self.policy_id = None
        self.add_secondary_type_ids = None
        self.remove_secondary_type_ids = None
        self.object_ids_and_change_tokens = None
        self.content_stream = None

    def convert_property_value(self, value) -> str:
        """
        render a property value as form text
        """
        if value is None:
            return None
        if isinstance(value, dt.datetime):
            if self.datetime_format == DateTimeFormat.EXTENDED:
                return format_iso8601(value)
            return str(datetime_to_millis(value))
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Decimal):
            return format_decimal(value)
        return str(value)

    def create_content(self) -> list:
        """
        return the form fields as an ordered list of (name, value) pairs
        """
        out = [(const.CONTROL_CMISACTION, self.action)]

        for name, value in self.parameters.items():
            if value is not None:
                out.append((name, normalize_parameter(value)))

        if self.succinct:
            out.append((const.CONTROL_SUCCINCT, "true"))

        self._add_properties(self.properties, out)
        self._add_aces(self.add_aces, const.CONTROL_ADD_ACE_PRINCIPAL,
                       const.CONTROL_ADD_ACE_PERMISSION, out)
        self._add_aces(self.remove_aces, const.CONTROL_REMOVE_ACE_PRINCIPAL,
                       const.CONTROL_REMOVE_ACE_PERMISSION, out)

        if self.policies:
            for i, policy in enumerate(p for p in self.policies if p is not None):
                out.append((const.CONTROL_POLICY + _index(i), policy))
        if self.policy_id is not None:
            out.append((const.CONTROL_POLICY_ID, self.policy_id))

        self._add_ids(self.add_secondary_type_ids, const.CONTROL_ADD_SECONDARY_TYPE, out)
        self._add_ids(self.remove_secondary_type_ids, const.CONTROL_REMOVE_SECONDARY_TYPE, out)

        if self.object_ids_and_change_tokens:
            i = 0
            for oc in self.object_ids_and_change_tokens:
                if oc is None or not oc.id:
                    continue
                out.append((const.CONTROL_OBJECT_ID + _index(i), oc.id))
                out.append((const.CONTROL_CHANGE_TOKEN + _index(i), oc.change_token or ""))
                i += 1

        return out

    def _add_properties(self, properties: PropertiesBag, out):
        if properties is None:
            return
        i = 0
        for prop in properties:
            if prop is None:
                continue
            out.append((const.CONTROL_PROP_ID + _index(i), prop.id))
            if len(prop.values) == 1:
                out.append((const.CONTROL_PROP_VALUE + _index(i),
                            self.convert_property_value(prop.values[0])))
            else:
                for j, value in enumerate(prop.values):
                    out.append((const.CONTROL_PROP_VALUE + _index(i, j),
                                self.convert_property_value(value)))
            i += 1

    def _add_aces(self, acl: Acl, principal_control, permission_control, out):
        if acl is None:
            return
        i = 0
        for ace in acl.aces:
            if ace.principal_id is None or not ace.permissions:
                continue
            out.append((principal_control + _index(i), ace.principal_id))
            for j, perm in enumerate(p for p in ace.permissions if p is not None):
                out.append((permission_control + _index(i, j), perm))
            i += 1

    def _add_ids(self, ids, control, out):
        if not ids:
            return
        for i, id in enumerate(t for t in ids if t):
            out.append((control + _index(i), id))

    def create_form(self) -> FormData:
        """
        return the complete form, ready for sending
        """
        files = None
        cs = self.content_stream
        if cs is not None and cs.stream is not None:
            files = { DEFAULT_FILENAME: (cs.filename or DEFAULT_FILENAME, cs.stream,
                                         cs.mime_type or DEFAULT_MIME_TYPE) }
        return FormData(self.create_content(), files)

def parse_json(response):
    """
    parse the body of a response as JSON
    :raises CmisConnectionException:  if the response's charset is not supported or the body
                                      is not valid JSON
    """
    charset = response.charset or "utf-8"
    try:
        codecs.lookup(charset)
    except LookupError as ex:
        raise CmisConnectionException("Unsupported charset: " + charset, cause=ex) from ex

    try:
        return loads(response.content.decode(charset))
    except ValueError as ex:
        # includes decoding errors
        raise CmisConnectionException("Parsing exception!", cause=ex) from ex

def parse_object(response) -> Mapping:
    """
    parse the body of a response as a JSON object
    :raises CmisConnectionException:  if the body cannot be parsed or is not a JSON object
    """
    out = parse_json(response)
    if not isinstance(out, Mapping):
        raise CmisConnectionException("Unexpected object!")
    return out

def parse_array(response) -> list:
    """
    parse the body of a response as a JSON array
    :raises CmisConnectionException:  if the body cannot be parsed or is not a JSON array
    """
    out = parse_json(response)
    if not isinstance(out, list):
        raise CmisConnectionException("Unexpected object!")
    return out

class RequestDispatcher(object):
    """
    the sender of binding requests:  it sends them via an
    :py:class:`~nistoar.cmis.browser.http.HttpInvoker` and converts unsuccessful responses
    into exceptions.
    """

    def __init__(self, invoker, log: logging.Logger = None):
        self.invoker = invoker
        if not log:
            log = logging.getLogger("nistoar.cmis").getChild("dispatch")
        self.log = log

    def _check(self, resp, accepted):
        if resp.status not in accepted:
            self.log.debug("Request failed with status %s: %s", resp.status, resp.message)
            raise convert_status_code(resp.status, resp.message, resp.error_content)
        return resp

    def read(self, url):
        """
        GET the given URL
        :raises CmisBaseException:  if the response status is not 200
        """
        return self._check(self.invoker.invoke_get(url), (200,))

    def read_content(self, url, offset: int = None, length: int = None):
        """
        GET a (possibly partial) content stream
        :raises CmisBaseException:  if the response status is not 200 or 206
        """
        return self._check(self.invoker.invoke_get(url, offset, length), (200, 206))

    def post(self, url, form: FormDataComposer):
        """
        POST a form to the given URL
        :raises CmisBaseException:  if the response status is not 200 or 201
        """
        return self._check(self.invoker.invoke_post(url, form.create_form()), (200, 201))

    def post_and_consume(self, url, form: FormDataComposer):
        """
        POST a form to the given URL, discarding the response body
        """
        resp = self.post(url, form)
        resp.close()
