"""EmailListChecker Python SDK for email verification and email finding."""

import logging

from .client import AsyncEmailListChecker, EmailListChecker
from .exceptions import (
    ApiError,
    AuthenticationError,
    EmailListCheckerError,
    ErrorKind,
    InsufficientCreditsError,
    RateLimitError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from .types import (
    BatchDescriptor,
    BatchProgress,
    BatchStatus,
    ClientConfig,
    CompanySearchResult,
    CreditsResponse,
    DomainSearchResult,
    FoundEmail,
    ListSummary,
    ResultFilter,
    ResultFormat,
    UsageResponse,
    VerificationOutcome,
    VerificationResult,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Clients
    "EmailListChecker",
    "AsyncEmailListChecker",
    "ClientConfig",
    # Types
    "VerificationResult",
    "VerificationOutcome",
    "BatchDescriptor",
    "BatchProgress",
    "BatchStatus",
    "ResultFormat",
    "ResultFilter",
    "FoundEmail",
    "ListSummary",
    "DomainSearchResult",
    "CompanySearchResult",
    "CreditsResponse",
    "UsageResponse",
    # Exceptions
    "EmailListCheckerError",
    "ErrorKind",
    "AuthenticationError",
    "InsufficientCreditsError",
    "RateLimitError",
    "ValidationError",
    "ApiError",
    "TransportError",
    "TimeoutError",
]
