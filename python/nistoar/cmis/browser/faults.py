"""
Translation of failed HTTP responses into CMIS exceptions.

A Browser Binding server describes a failure with a JSON body of the form
``{"exception": "<name>", "message": "...", "stacktrace": "..."}``.  When such a body names a
recognized exception, that exception is raised; otherwise, the exception is chosen based on
the HTTP status code.
"""
from collections.abc import Mapping

from ..exceptions import (CmisBaseException, CmisConnectionException, CmisConstraintException,
                          CmisContentAlreadyExistsException, CmisFilterNotValidException,
                          CmisInvalidArgumentException, CmisNameConstraintViolationException,
                          CmisNotSupportedException, CmisObjectNotFoundException,
                          CmisPermissionDeniedException, CmisRuntimeException,
                          CmisStorageException, CmisStreamNotSupportedException,
                          CmisUpdateConflictException, CmisVersioningException,
                          CmisUnauthorizedException, CmisProxyAuthenticationException,
                          CmisServiceUnavailableException)
from . import constants as const
from .utils import loads

__all__ = [ "convert_status_code", "exception_for_name", "exception_for_status" ]

_by_name = dict((cls.name.lower(), cls) for cls in [
    CmisConstraintException, CmisContentAlreadyExistsException, CmisFilterNotValidException,
    CmisInvalidArgumentException, CmisNameConstraintViolationException,
    CmisNotSupportedException, CmisObjectNotFoundException, CmisPermissionDeniedException,
    CmisStorageException, CmisStreamNotSupportedException, CmisUpdateConflictException,
    CmisVersioningException
])

_by_status = {
    400: CmisInvalidArgumentException,
    401: CmisUnauthorizedException,
    403: CmisPermissionDeniedException,
    404: CmisObjectNotFoundException,
    405: CmisNotSupportedException,
    407: CmisProxyAuthenticationException,
    409: CmisConstraintException,
    503: CmisServiceUnavailableException
}

_REDIRECTS = (301, 302, 303, 307)

def exception_for_name(name: str):
    """
    return the exception class for the given wire exception name (ignoring case) or None if
    the name is not recognized
    """
    if not isinstance(name, str):
        return None
    return _by_name.get(name.lower())

def exception_for_status(code: int):
    """
    return the exception class used for the given HTTP status when the response body does not
    name an exception
    """
    if code in _REDIRECTS:
        return CmisConnectionException
    return _by_status.get(code, CmisRuntimeException)

def _parse_error(error_content):
    if not error_content:
        return None
    try:
        out = loads(error_content)
    except ValueError:
        # not JSON; fall back to the status code
        return None
    return out if isinstance(out, Mapping) else None

def convert_status_code(code: int, message: str = None, error_content: str = None,
                        cause: Exception = None) -> CmisBaseException:
    """
    create the exception that represents a failed request.
    :param int code:            the HTTP status code of the response
    :param str message:         the HTTP status message
    :param str error_content:   the body of the response, if it was textual
    :param Exception cause:     an underlying exception, if any
    :return:  the exception (which the caller should raise)
    """
    err = _parse_error(error_content)
    if err is not None and isinstance(err.get(const.ERROR_EXCEPTION), str):
        if err.get(const.ERROR_MESSAGE) is not None:
            message = str(err.get(const.ERROR_MESSAGE))

        cls = exception_for_name(err[const.ERROR_EXCEPTION])
        if cls is not None:
            return cls(message, error_content, cause, code)
        if code == 503:
            return CmisServiceUnavailableException(message, error_content, cause, code)

    if code in _REDIRECTS:
        return CmisConnectionException("Redirects are not supported (HTTP status code %s): %s" %
                                       (code, message), error_content, cause, code)
    return exception_for_status(code)(message, error_content, cause, code)
