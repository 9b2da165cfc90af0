"""
Exceptions raised by the CMIS client.

All failures reported by a repository server (or detected while talking to one) are raised
as a subclass of :py:class:`CmisBaseException`; which subclass is determined by the
``exception`` field of the server's JSON error response or, failing that, by the HTTP status
code (see :py:mod:`nistoar.cmis.browser.faults`).
"""

__all__ = [ "CMISException", "ConfigurationException", "CmisBaseException",
            "CmisConnectionException", "CmisConstraintException", "CmisContentAlreadyExistsException",
            "CmisFilterNotValidException", "CmisInvalidArgumentException",
            "CmisNameConstraintViolationException", "CmisNotSupportedException",
            "CmisObjectNotFoundException", "CmisPermissionDeniedException", "CmisRuntimeException",
            "CmisStorageException", "CmisStreamNotSupportedException", "CmisUpdateConflictException",
            "CmisVersioningException", "CmisUnauthorizedException", "CmisProxyAuthenticationException",
            "CmisServiceUnavailableException" ]

class CMISException(Exception):
    """
    a general base class for exceptions raised by the nistoar.cmis package
    """
    pass

class ConfigurationException(CMISException):
    """
    an exception indicating that the client configuration is missing a required
    parameter or contains an illegal value.
    """

    def __init__(self, message=None, param=None, cause=None):
        if not message:
            if param:
                message = "Missing or illegal config parameter: " + param
            else:
                message = "Configuration error"
            if cause:
                message += ": " + str(cause)
        super(ConfigurationException, self).__init__(message)
        self.param = param
        self.cause = cause

class CmisBaseException(CMISException):
    """
    a base class for exceptions reflecting a failed interaction with a CMIS repository.

    This exception includes extra public properties: ``code``, the HTTP status code of the
    response that triggered the exception (if any); ``error_content``, the raw body of the
    error response; and ``cause``, the underlying exception (if any).  The class attribute
    ``name`` gives the CMIS exception name used on the wire.
    """
    name = None

    def __init__(self, message=None, error_content=None, cause=None, code=None):
        if not message:
            message = "CMIS error"
            if self.name:
                message += " (%s)" % self.name
            if cause:
                message += ": " + str(cause)
        super(CmisBaseException, self).__init__(message)
        self.message = message
        self.error_content = error_content
        self.cause = cause
        self.code = code

class CmisConnectionException(CmisBaseException):
    """
    the server could not be reached, answered with a redirect, or returned a response
    that could not be read.
    """
    name = "connection"

class CmisConstraintException(CmisBaseException):
    """
    the operation violates a repository or object-level constraint
    """
    name = "constraint"

class CmisContentAlreadyExistsException(CmisBaseException):
    """
    the object already has a content stream and overwriting was not requested
    """
    name = "contentAlreadyExists"

class CmisFilterNotValidException(CmisBaseException):
    """
    a property filter or rendition filter was not valid
    """
    name = "filterNotValid"

class CmisInvalidArgumentException(CmisBaseException):
    """
    one or more input parameters were missing or not valid
    """
    name = "invalidArgument"

class CmisNameConstraintViolationException(CmisBaseException):
    """
    the requested object name violates a naming constraint (e.g. it is already used
    within the target folder)
    """
    name = "nameConstraintViolation"

class CmisNotSupportedException(CmisBaseException):
    """
    the repository does not support the requested operation
    """
    name = "notSupported"

class CmisObjectNotFoundException(CmisBaseException):
    """
    the requested object, type, or repository does not exist
    """
    name = "objectNotFound"

class CmisPermissionDeniedException(CmisBaseException):
    """
    the caller is not permitted to perform the operation
    """
    name = "permissionDenied"

class CmisRuntimeException(CmisBaseException):
    """
    a catch-all for errors that do not fit another category, including responses that
    could not be decoded into the CMIS data model.
    """
    name = "runtime"

class CmisStorageException(CmisBaseException):
    """
    the repository failed to store or retrieve data
    """
    name = "storage"

class CmisStreamNotSupportedException(CmisBaseException):
    """
    the object's type does not allow a content stream
    """
    name = "streamNotSupported"

class CmisUpdateConflictException(CmisBaseException):
    """
    the object was updated by someone else since the caller's change token was issued
    """
    name = "updateConflict"

class CmisVersioningException(CmisBaseException):
    """
    the operation is not allowed given the object's versioning state
    """
    name = "versioning"

class CmisUnauthorizedException(CmisRuntimeException):
    """
    the server requires (valid) authentication credentials (HTTP 401)
    """
    name = "unauthorized"

class CmisProxyAuthenticationException(CmisRuntimeException):
    """
    an intermediate proxy requires authentication (HTTP 407)
    """
    name = "proxyAuthentication"

class CmisServiceUnavailableException(CmisRuntimeException):
    """
    the service is temporarily unavailable (HTTP 503)
    """
    name = "serviceUnavailable"
