"""Exception classes for the Eversend SDK."""

from typing import Any, Optional


class EversendError(Exception):
    """Base exception for all Eversend SDK errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationFailed(EversendError):
    """Raised when the credential exchange fails or a refreshed token is rejected."""

    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"


class TransportError(EversendError):
    """Raised when no response was obtained (DNS, refused connection, timeout)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class DecodeError(EversendError):
    """Raised when a response body cannot be parsed into the expected type."""

    def __init__(
        self,
        message: str,
        body: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.body = body
        self.status_code = status_code
        super().__init__(message)


class ApiError(EversendError):
    """Raised when the API answers with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.error_code or 'ERROR'}: {self.message}"


class BadRequest(ApiError):
    """Raised on 400 responses, usually a rejected parameter."""


class Forbidden(ApiError):
    """Raised on 403 responses."""


class NotFound(ApiError):
    """Raised on 404 responses."""


class Conflict(ApiError):
    """Raised on 409 responses."""


class UnprocessableEntity(ApiError):
    """Raised on 422 responses."""


class RateLimitExceeded(ApiError):
    """Raised on 429 responses."""


class ServerError(ApiError):
    """Raised on 5xx responses."""


# Mapping from HTTP status codes to exception classes
STATUS_CODE_MAP: dict[int, type[ApiError]] = {
    400: BadRequest,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
    422: UnprocessableEntity,
    429: RateLimitExceeded,
}


def raise_for_error_response(status_code: int, response_data: Any) -> None:
    """Raise the appropriate exception based on the API error response.

    ``response_data`` is the decoded JSON body when there was one, otherwise
    the raw response text.
    """
    message = "Unknown error"
    error_code = None
    details: dict[str, Any] = {}

    if isinstance(response_data, dict):
        message = str(
            response_data.get("message")
            or response_data.get("error")
            or message
        )
        raw_code = response_data.get("error_code") or response_data.get("errorCode")
        error_code = str(raw_code) if raw_code else None
        if isinstance(response_data.get("details"), dict):
            details = response_data["details"]
        elif isinstance(response_data.get("errors"), dict):
            details = response_data["errors"]
    elif response_data:
        message = str(response_data)

    if status_code >= 500:
        exception_class: type[ApiError] = ServerError
    else:
        exception_class = STATUS_CODE_MAP.get(status_code, ApiError)

    raise exception_class(
        message=message,
        status_code=status_code,
        error_code=error_code,
        details=details,
        body=response_data,
    )
