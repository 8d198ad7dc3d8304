"""EmailListChecker SDK Exceptions."""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Discriminant shared by every SDK failure."""

    AUTHENTICATION = "authentication"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    API = "api"
    TRANSPORT = "transport"


class EmailListCheckerError(Exception):
    """Base exception for all EmailListChecker SDK errors.

    Catch this to handle every failure in one place and branch on ``kind``,
    or catch one of the subclasses below.

    Attributes:
        message: Human readable description.
        status_code: HTTP status code, or None when no response was received.
        response_body: Decoded JSON error body, or None when absent or undecodable.
    """

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r})"


class AuthenticationError(EmailListCheckerError):
    """Invalid or missing API key (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION


class InsufficientCreditsError(EmailListCheckerError):
    """Account balance exhausted (HTTP 402)."""

    kind = ErrorKind.INSUFFICIENT_CREDITS


class RateLimitError(EmailListCheckerError):
    """Request throttled (HTTP 429).

    ``retry_after`` is the number of seconds the service asked callers to wait.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str,
        retry_after: int = 60,
        status_code: Optional[int] = 429,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, status_code, response_body)
        self.retry_after = retry_after


class ValidationError(EmailListCheckerError):
    """Request parameters rejected (HTTP 422) or malformed locally."""

    kind = ErrorKind.VALIDATION


class ApiError(EmailListCheckerError):
    """Any other non-2xx response."""

    kind = ErrorKind.API


class TransportError(EmailListCheckerError):
    """No response was obtained from the API."""

    kind = ErrorKind.TRANSPORT


class TimeoutError(TransportError):
    """The request timed out before a response arrived."""
