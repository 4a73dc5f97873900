"""
Rural Sports Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the different error scenarios.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and a structured JSON body.
Who:   Raised by services, dependencies and middleware.

Exception Hierarchy:
    RuralSportsError (base)
    ├── ValidationError          → 400 Bad Request
    ├── AuthenticationError      → 401 Unauthorized
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict
    ├── RateLimitExceededError   → 429 Too Many Requests
    ├── FileStorageError         → 500 Internal Server Error
    ├── DatabaseError            → 500 Internal Server Error
    ├── LLMServiceError          → 503 Service Unavailable
    └── CircuitBreakerOpenError  → 503 Service Unavailable
"""

from typing import Any, Dict, Optional


class RuralSportsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only some handlers return it)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RuralSportsError):
    """
    Raised when client input fails a business check the schema cannot express.

    When:    A referenced user/event id does not exist, an unknown status or
             interaction type is sent, an upload has the wrong type or size.
    HTTP:    400 Bad Request (FastAPI keeps 422 for schema violations)
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(RuralSportsError):
    """
    Raised when a request has no valid session or login credentials are wrong.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(RuralSportsError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None into
    NotFoundError so the route layer stays free of status-code logic.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)
        self.resource = resource


class ConflictError(RuralSportsError):
    """
    Raised when a write collides with an existing unique value.

    When:    Registering or renaming a user onto a taken username.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "The resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(RuralSportsError):
    """
    Raised when file system operations fail (disk full, permission denied).

    HTTP:    500 Internal Server Error; the path is logged, never returned.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class LLMServiceError(RuralSportsError):
    """
    Raised when the Gemini consultation call fails after all retries.

    HTTP:    503 Service Unavailable, with Retry-After when known.
    """

    def __init__(
        self,
        message: str = "The sports expert service is temporarily unavailable",
        retry_after: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if retry_after:
            ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after


class CircuitBreakerOpenError(RuralSportsError):
    """
    Raised when the circuit breaker around Gemini is OPEN.

    How circuit breaker works:
        CLOSED (normal) → failures increment counter
        → After threshold failures → OPEN (reject calls for recovery_time)
        → After recovery_time → HALF-OPEN (allow one test call)
        → Test succeeds → CLOSED; test fails → OPEN again
    HTTP:    503 Service Unavailable
    """

    def __init__(
        self,
        recovery_time: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            "The sports expert service is temporarily unavailable due to repeated failures. "
            f"It will be retried in approximately {recovery_time} seconds."
        )
        ctx = context or {}
        ctx["recovery_time"] = recovery_time
        super().__init__(message=message, context=ctx)
        self.recovery_time = recovery_time


class DatabaseError(RuralSportsError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic. SQL text and
        constraint names are logged server-side only.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(RuralSportsError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
