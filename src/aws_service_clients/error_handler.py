"""
Error types, error marshalling and centralized exception handling for the service clients.
"""
import json
import logging
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type

logger = logging.getLogger(__name__)

# Service specific error codes start here, core codes sit below it.
SERVICE_EXTENSION_START_INDEX = 128


class ErrorType(Enum):
    """Broad error categories for exceptions raised by this package."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    ENDPOINT_ERROR = "ENDPOINT_ERROR"
    SIGNING_ERROR = "SIGNING_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    SERVICE_ERROR = "SERVICE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CoreErrors(Enum):
    """Error codes shared by every service client."""
    INCOMPLETE_SIGNATURE = 0
    INTERNAL_FAILURE = 1
    INVALID_ACTION = 2
    INVALID_CLIENT_TOKEN_ID = 3
    INVALID_PARAMETER_COMBINATION = 4
    INVALID_QUERY_PARAMETER = 5
    INVALID_PARAMETER_VALUE = 6
    MISSING_ACTION = 7
    MISSING_AUTHENTICATION_TOKEN = 8
    MISSING_PARAMETER = 9
    OPT_IN_REQUIRED = 10
    REQUEST_EXPIRED = 11
    SERVICE_UNAVAILABLE = 12
    THROTTLING = 13
    VALIDATION = 14
    ACCESS_DENIED = 15
    RESOURCE_NOT_FOUND = 16
    UNRECOGNIZED_CLIENT = 17
    MALFORMED_QUERY_STRING = 18
    SLOW_DOWN = 19
    REQUEST_TIME_TOO_SKEWED = 20
    INVALID_SIGNATURE = 21
    SIGNATURE_DOES_NOT_MATCH = 22
    INVALID_ACCESS_KEY_ID = 23
    REQUEST_TIMEOUT = 24
    NETWORK_CONNECTION = 99
    UNKNOWN = 100
    ENDPOINT_RESOLUTION_FAILURE = 101
    CLIENT_SIGNING_FAILURE = 102


CORE_EXCEPTION_NAMES: Dict[str, CoreErrors] = {
    "IncompleteSignature": CoreErrors.INCOMPLETE_SIGNATURE,
    "IncompleteSignatureException": CoreErrors.INCOMPLETE_SIGNATURE,
    "InternalFailure": CoreErrors.INTERNAL_FAILURE,
    "InternalServerError": CoreErrors.INTERNAL_FAILURE,
    "InvalidAction": CoreErrors.INVALID_ACTION,
    "InvalidClientTokenId": CoreErrors.INVALID_CLIENT_TOKEN_ID,
    "InvalidParameterCombination": CoreErrors.INVALID_PARAMETER_COMBINATION,
    "InvalidParameterValue": CoreErrors.INVALID_PARAMETER_VALUE,
    "InvalidQueryParameter": CoreErrors.INVALID_QUERY_PARAMETER,
    "MalformedQueryString": CoreErrors.MALFORMED_QUERY_STRING,
    "MissingAction": CoreErrors.MISSING_ACTION,
    "MissingAuthenticationToken": CoreErrors.MISSING_AUTHENTICATION_TOKEN,
    "MissingParameter": CoreErrors.MISSING_PARAMETER,
    "OptInRequired": CoreErrors.OPT_IN_REQUIRED,
    "RequestExpired": CoreErrors.REQUEST_EXPIRED,
    "ServiceUnavailable": CoreErrors.SERVICE_UNAVAILABLE,
    "ServiceUnavailableException": CoreErrors.SERVICE_UNAVAILABLE,
    "Throttling": CoreErrors.THROTTLING,
    "ThrottlingException": CoreErrors.THROTTLING,
    "ThrottledException": CoreErrors.THROTTLING,
    "RequestThrottledException": CoreErrors.THROTTLING,
    "TooManyRequestsException": CoreErrors.THROTTLING,
    "RequestLimitExceeded": CoreErrors.THROTTLING,
    "BandwidthLimitExceeded": CoreErrors.THROTTLING,
    "RequestThrottled": CoreErrors.THROTTLING,
    "PriorRequestNotComplete": CoreErrors.THROTTLING,
    "ValidationError": CoreErrors.VALIDATION,
    "ValidationException": CoreErrors.VALIDATION,
    "AccessDenied": CoreErrors.ACCESS_DENIED,
    "AccessDeniedException": CoreErrors.ACCESS_DENIED,
    "ResourceNotFound": CoreErrors.RESOURCE_NOT_FOUND,
    "ResourceNotFoundException": CoreErrors.RESOURCE_NOT_FOUND,
    "UnrecognizedClientException": CoreErrors.UNRECOGNIZED_CLIENT,
    "SlowDown": CoreErrors.SLOW_DOWN,
    "RequestTimeTooSkewed": CoreErrors.REQUEST_TIME_TOO_SKEWED,
    "InvalidSignatureException": CoreErrors.INVALID_SIGNATURE,
    "SignatureDoesNotMatch": CoreErrors.SIGNATURE_DOES_NOT_MATCH,
    "InvalidAccessKeyId": CoreErrors.INVALID_ACCESS_KEY_ID,
    "RequestTimeout": CoreErrors.REQUEST_TIMEOUT,
    "RequestTimeoutException": CoreErrors.REQUEST_TIMEOUT,
}

RETRYABLE_CORE_ERRORS = frozenset({
    CoreErrors.INTERNAL_FAILURE,
    CoreErrors.SERVICE_UNAVAILABLE,
    CoreErrors.THROTTLING,
    CoreErrors.SLOW_DOWN,
    CoreErrors.REQUEST_TIMEOUT,
    CoreErrors.NETWORK_CONNECTION,
})


def build_service_errors(enum_name: str, modeled: Mapping[str, Tuple[str, bool]]) -> Type[Enum]:
    """
    Build a service error enum holding every core code plus the modeled service codes.

    Args:
        enum_name: Name of the enum class (e.g. "ConnectCasesErrors")
        modeled: Exception name -> (error code name, retryable)

    Returns:
        Enum class
    """
    members = [(member.name, member.value) for member in CoreErrors]
    known = {name for name, _ in members}
    index = SERVICE_EXTENSION_START_INDEX
    for code_name, _ in modeled.values():
        if code_name in known:
            continue
        index += 1
        members.append((code_name, index))
        known.add(code_name)
    return Enum(enum_name, members)


@dataclass
class AWSError:
    """Error half of an operation outcome."""
    error_type: Enum
    exception_name: str
    message: str
    retryable: bool = False
    response_code: Optional[int] = None
    request_id: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.exception_name}: {self.message}"

    def raise_for_error(self):
        """Raise this error as a ServiceError."""
        raise ServiceError(self)


class AWSClientError(Exception):
    """Base exception class for all errors raised by this package."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL_ERROR,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_type = error_type
        self.original_error = original_error
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)


class ConfigurationError(AWSClientError):
    """Exception raised for invalid client configuration."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.CONFIGURATION_ERROR, original_error, context)


class EndpointResolutionError(AWSClientError):
    """Exception raised when no endpoint can be built for a request."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.ENDPOINT_ERROR, original_error, context)


class SigningError(AWSClientError):
    """Exception raised for request signing errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.SIGNING_ERROR, original_error, context)


class ServiceError(AWSClientError):
    """Exception carrying the AWSError of a failed operation."""

    def __init__(self, error: AWSError):
        self.error = error
        super().__init__(
            str(error),
            ErrorType.SERVICE_ERROR,
            context={
                "error_code": error.error_type.name,
                "response_code": error.response_code,
                "request_id": error.request_id,
            },
        )


def missing_parameter_error(error_enum: Type[Enum], member: str) -> AWSError:
    """Build the outcome error for a required member that was not set."""
    return AWSError(
        error_enum.MISSING_PARAMETER,
        "MISSING_PARAMETER",
        f"Missing required field [{member}]",
        False,
    )


def invalid_parameter_error(error_enum: Type[Enum], member: str) -> AWSError:
    """Build the outcome error for a member with an invalid value."""
    return AWSError(
        error_enum.INVALID_PARAMETER_VALUE,
        "INVALID_PARAMETER",
        f"{member} is invalid",
        False,
    )


class ErrorMarshaller:
    """Turns error responses into AWSError values for one service."""

    def __init__(self, error_enum: Type[Enum], modeled: Optional[Mapping[str, Tuple[str, bool]]] = None):
        self.error_enum = error_enum
        self.modeled = dict(modeled or {})

    def find_error(self, exception_name: str) -> Tuple[Enum, bool]:
        """
        Look up the error code for an exception name.

        Returns:
            Tuple of (error code, retryable)
        """
        if exception_name in self.modeled:
            code_name, retryable = self.modeled[exception_name]
            return self.error_enum[code_name], retryable

        core = CORE_EXCEPTION_NAMES.get(exception_name)
        if core is not None:
            return self.error_enum[core.name], core in RETRYABLE_CORE_ERRORS

        return self.error_enum.UNKNOWN, False

    def marshall(self, status_code: int, headers: Mapping[str, str], body: bytes) -> AWSError:
        """
        Build an AWSError from an HTTP error response.

        Args:
            status_code: HTTP status code
            headers: Response headers
            body: Raw response body

        Returns:
            AWSError for the response
        """
        payload = _load_error_payload(body)
        exception_name = _extract_exception_name(headers, payload)
        message = (
            payload.get("message")
            or payload.get("Message")
            or payload.get("errorMessage")
            or ""
        )
        request_id = headers.get("x-amzn-RequestId") or headers.get("x-amz-request-id")

        if exception_name:
            error_type, retryable = self.find_error(exception_name)
        else:
            error_type, retryable = self._error_for_status(status_code)
            exception_name = error_type.name

        if status_code == 429 or status_code >= 500:
            retryable = True

        error = AWSError(
            error_type,
            exception_name,
            message,
            retryable,
            response_code=status_code,
            request_id=request_id,
            headers=dict(headers),
        )
        logger.debug(f"Marshalled error response {status_code}: {error}")
        return error

    def network_error(self, exception: Exception) -> AWSError:
        """Build a retryable NETWORK_CONNECTION error for a transport failure."""
        return AWSError(
            self.error_enum.NETWORK_CONNECTION,
            type(exception).__name__,
            str(exception),
            True,
        )

    def _error_for_status(self, status_code: int) -> Tuple[Enum, bool]:
        if status_code in (401, 403):
            return self.error_enum.ACCESS_DENIED, False
        if status_code == 404:
            return self.error_enum.RESOURCE_NOT_FOUND, False
        if status_code == 429:
            return self.error_enum.THROTTLING, True
        if status_code == 503:
            return self.error_enum.SERVICE_UNAVAILABLE, True
        if status_code >= 500:
            return self.error_enum.INTERNAL_FAILURE, True
        return self.error_enum.UNKNOWN, False


def _load_error_payload(body: bytes) -> Dict[str, Any]:
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return {}
    return payload if isinstance(payload, dict) else {}


def _extract_exception_name(headers: Mapping[str, str], payload: Mapping[str, Any]) -> str:
    raw = (
        headers.get("x-amzn-ErrorType")
        or payload.get("__type")
        or payload.get("code")
        or payload.get("Code")
        or ""
    )
    # "ValidationException:http://internal.amazon.com/..." or "aws.protocols#ValidationException"
    raw = raw.split(":", 1)[0]
    return raw.rsplit("#", 1)[-1]


def handle_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    log_level: int = logging.ERROR
) -> AWSClientError:
    """
    Centralized error handling function.

    Args:
        error: The original exception
        context: Additional context information
        log_level: Logging level for the error

    Returns:
        Standardized AWSClientError
    """
    if isinstance(error, AWSClientError):
        logger.log(log_level, f"[{error.error_type.value}] {error.message}", extra={
            "error_type": error.error_type.value,
            "context": error.context,
            "original_error": str(error.original_error) if error.original_error else None
        })
        return error

    error_type = _classify_error(error)

    error_context = dict(context or {})
    error_context.update({
        "exception_type": type(error).__name__,
        "traceback": traceback.format_exc()
    })

    client_error = AWSClientError(
        message=str(error),
        error_type=error_type,
        original_error=error,
        context=error_context
    )

    logger.log(log_level, f"[{error_type.value}] {error}", extra={
        "error_type": error_type.value,
        "context": error_context,
        "original_error": str(error)
    })

    return client_error


def _classify_error(error: Exception) -> ErrorType:
    """Classify error based on exception type and message."""
    error_name = type(error).__name__
    error_message = str(error).lower()

    if any(name in error_name for name in ['NoCredentialsError', 'PartialCredentialsError']):
        return ErrorType.SIGNING_ERROR

    if any(name in error_name for name in ['ConnectionError', 'Timeout', 'SSLError', 'ProxyError']):
        return ErrorType.NETWORK_ERROR

    if any(name in error_name for name in ['ClientError', 'BotoCoreError']):
        return ErrorType.SERVICE_ERROR

    if 'endpoint' in error_message or 'region' in error_message:
        return ErrorType.ENDPOINT_ERROR

    if 'validation' in error_message or 'invalid' in error_message:
        return ErrorType.VALIDATION_ERROR

    if any(term in error_message for term in ['signature', 'signing', 'sigv4', 'credential']):
        return ErrorType.SIGNING_ERROR

    return ErrorType.INTERNAL_ERROR
