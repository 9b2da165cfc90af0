"""
The HTTP transport used by the Browser Binding, built on the ``requests`` package.

:py:class:`HttpInvoker` sends GET and POST requests on behalf of the binding services, adding
the configured authentication, headers, and timeouts; it returns each server reply as a
:py:class:`Response`, leaving the interpretation of the status code to the caller.

The ``auth`` configuration parameter selects the authentication method via its ``type``
property:

``none``
    no authentication (the default when ``auth`` is not set)
``userpass``
    HTTP Basic authentication using the ``user`` and ``pass`` properties
``bearer``
    a bearer token given by the ``token`` property
``cert``
    a client certificate given by the ``client_cert_path`` and ``client_key_path`` properties
"""
import io
import logging
from collections.abc import Mapping
from email.message import Message

import requests

from ..exceptions import ConfigurationException, CmisConnectionException
from ..version import __version__

__all__ = [ "HttpInvoker", "Response", "DEFAULT_USER_AGENT" ]

DEFAULT_USER_AGENT = "nistoar-cmis/" + __version__

# statuses whose bodies are content rather than an error description
_CONTENT_STATUSES = (200, 201, 203, 206)
_NO_CONTENT = 204

def _is_textual(content_type):
    if not content_type:
        return False
    content_type = content_type.lower()
    return content_type.startswith("text/") or content_type.endswith("+xml") or \
           content_type.startswith("application/xml") or \
           content_type.startswith("application/json")

def _parse_header(name, value):
    msg = Message()
    msg[name] = value
    return msg

class Response(object):
    """
    a server's reply to a request.  The body is available via :py:attr:`stream` for successful
    responses; for error responses with a textual body, the body is available as
    :py:attr:`error_content`.
    """

    def __init__(self, resp: requests.Response):
        self.status = resp.status_code
        self.message = resp.reason
        self.content_type = None
        self.charset = None
        self.filename = None
        self.content_length = None
        self.error_content = None
        self._resp = resp

        ctype = resp.headers.get("Content-Type")
        if ctype:
            hdr = _parse_header("Content-Type", ctype)
            self.content_type = hdr.get_content_type()
            self.charset = hdr.get_param("charset")

        clen = resp.headers.get("Content-Length")
        if clen:
            try:
                self.content_length = int(clen)
            except ValueError:
                self.content_length = None

        disp = resp.headers.get("Content-Disposition")
        if disp:
            self.filename = _parse_header("Content-Disposition", disp).get_filename()

        if self.status not in _CONTENT_STATUSES and self.status != _NO_CONTENT and \
           _is_textual(self.content_type):
            self.error_content = resp.text

    @property
    def ok(self) -> bool:
        return self.status in _CONTENT_STATUSES

    @property
    def stream(self):
        """
        a binary file-like object delivering the response body, or None if this is an
        error response
        """
        if not self.ok:
            return None
        return io.BytesIO(self._resp.content)

    @property
    def content(self) -> bytes:
        """
        the raw bytes of the response body
        """
        return self._resp.content

    def close(self):
        self._resp.close()

class HttpInvoker(object):
    """
    the sender of HTTP requests for a binding session
    """

    def __init__(self, config: Mapping = None, log: logging.Logger = None):
        """
        :param Mapping config:  the binding configuration; the ``auth``, ``user_agent``,
                                ``headers``, ``compression``, ``connect_timeout``, and
                                ``read_timeout`` parameters are used.
        :param Logger log:      the Logger to send debug messages to
        """
        if config is None:
            config = {}
        if not log:
            log = logging.getLogger("nistoar.cmis").getChild("http")
        self.log = log

        self._headers = {
            "User-Agent": config.get("user_agent") or DEFAULT_USER_AGENT,
            "Accept-Encoding": "gzip, deflate" if config.get("compression") else "identity"
        }
        if config.get("headers"):
            if not isinstance(config["headers"], Mapping):
                raise ConfigurationException("headers: must be a dictionary", "headers")
            self._headers.update(config["headers"])

        self._timeout = None
        if config.get("connect_timeout") is not None or config.get("read_timeout") is not None:
            self._timeout = (config.get("connect_timeout"), config.get("read_timeout"))

        self._authkw = {}
        self._authhdr = {}
        self._setup_auth(config.get("auth"))

    def _setup_auth(self, config: Mapping = None):
        self._authkw = {}
        self._authhdr = {}

        if not config or config.get('type', '') is None:
            return      # no authentication required

        authtype = config.get('type', 'none')
        if isinstance(authtype, str):
            authtype = authtype.lower()

        if authtype == "none":
            pass

        elif authtype == "userpass":
            self._authkw = { "auth": (config.get('user'), config.get('pass')) }
            if not all(self._authkw["auth"]):
                raise ConfigurationException("HttpInvoker: authentication type userpass requires "
                                             "both 'user' and 'pass' config parameters", "auth")

        elif authtype == "bearer":
            token = config.get("token")
            if not token:
                raise ConfigurationException("HttpInvoker: authentication type bearer requires "
                                             "'token' config parameter", "auth.token")
            self._authhdr = { "Authorization": f"Bearer {token}" }

        elif authtype == "cert":
            self._authkw = { 'cert': (config.get('client_cert_path'),
                                      config.get('client_key_path')) }
            if not all(self._authkw["cert"]):
                raise ConfigurationException("HttpInvoker: authentication type cert requires both "
                                             "'client_cert_path' and 'client_key_path' config "
                                             "parameters", "auth")

            unreadable = []
            for cfile in self._authkw['cert']:
                try:
                    with open(cfile):
                        pass
                except OSError as ex:
                    unreadable.append(f"{cfile} ({str(ex)})")
            if unreadable:
                s = "s" if len(unreadable) > 1 else ""
                raise ConfigurationException("HttpInvoker: certificate file%s unreadable:\n  %s" %
                                             (s, "\n  ".join(unreadable)), "auth")

        else:
            raise ConfigurationException("HttpInvoker: authentication 'type' param value not "
                                         "supported: " + str(authtype), "auth.type")

    def _request_headers(self, extra=None):
        hdrs = dict(self._headers)
        hdrs.update(self._authhdr)
        if extra:
            hdrs.update(extra)
        return hdrs

    @staticmethod
    def range_header(offset: int = None, length: int = None) -> str:
        """
        return the value of the Range header needed to request part of a content stream, or
        None if the whole stream is wanted
        """
        if offset is not None and length is not None:
            offset = max(offset, 0)
            if length > 0:
                return "bytes=%d-%d" % (offset, offset + length - 1)
            return "bytes=%d-" % offset
        if offset is not None and offset > 0:
            return "bytes=%d-" % offset
        return None

    def invoke_get(self, url, offset: int = None, length: int = None) -> Response:
        """
        send a GET request
        :param url:         the URL (a str or a UrlBuilder)
        :param int offset:  the index of the first byte wanted (for partial content)
        :param int length:  the number of bytes wanted (for partial content)
        :raises CmisConnectionException:  if the server cannot be reached
        """
        url = str(url)
        extra = None
        rng = self.range_header(offset, length)
        if rng:
            extra = { "Range": rng }

        self.log.debug("HTTP: GET %s", url)
        try:
            resp = requests.get(url, headers=self._request_headers(extra), allow_redirects=False,
                                timeout=self._timeout, **self._authkw)
        except requests.RequestException as ex:
            raise CmisConnectionException("Cannot access %s: %s" % (url, str(ex)),
                                          cause=ex) from ex
        return Response(resp)

    def invoke_post(self, url, content) -> Response:
        """
        send a POST request
        :param url:      the URL (a str or a UrlBuilder)
        :param content:  the form to send; it must provide ``data`` (a list of name-value
                         pairs) and ``files`` (a dict of file parts, or None)
        :raises CmisConnectionException:  if the server cannot be reached
        """
        url = str(url)
        self.log.debug("HTTP: POST %s", url)
        try:
            resp = requests.post(url, data=content.data, files=content.files,
                                 headers=self._request_headers(), allow_redirects=False,
                                 timeout=self._timeout, **self._authkw)
        except requests.RequestException as ex:
            raise CmisConnectionException("Cannot access %s: %s" % (url, str(ex)),
                                          cause=ex) from ex
        return Response(resp)
