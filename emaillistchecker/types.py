"""EmailListChecker SDK Types."""

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, TypedDict

from .exceptions import AuthenticationError

DEFAULT_BASE_URL = "https://platform.emaillistchecker.io/api/v1"
DEFAULT_TIMEOUT = 30

VerificationOutcome = Literal["deliverable", "undeliverable", "risky", "unknown"]
BatchStatus = Literal["pending", "processing", "completed", "failed"]
ResultFormat = Literal["json", "csv", "txt"]
ResultFilter = Literal["all", "valid", "invalid", "risky", "unknown"]


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.api_key:
            raise AuthenticationError("API key is required")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int) or self.timeout <= 0:
            raise ValueError(f"timeout must be a positive integer, got {self.timeout!r}")
        # frozen dataclass
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, prefix: str = "EMAILLISTCHECKER_") -> "ClientConfig":
        """Build a config from ``<prefix>API_KEY``, ``<prefix>BASE_URL`` and ``<prefix>TIMEOUT``."""
        timeout = os.getenv(f"{prefix}TIMEOUT")
        try:
            parsed_timeout = int(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"{prefix}TIMEOUT must be an integer, got {timeout!r}") from None

        return cls(
            api_key=os.getenv(f"{prefix}API_KEY", ""),
            base_url=os.getenv(f"{prefix}BASE_URL") or DEFAULT_BASE_URL,
            timeout=parsed_timeout,
        )


# The shapes below describe what the service documents. Payloads are returned
# as plain dicts and are never checked against them.


class VerificationResult(TypedDict, total=False):
    """Single email verification result."""

    email: str
    result: VerificationOutcome
    reason: str
    score: float
    disposable: bool
    role: bool
    free: bool
    smtp_provider: Optional[str]
    domain: str
    mx_records: List[str]


class BatchDescriptor(TypedDict, total=False):
    """Batch returned on submission."""

    id: int
    name: Optional[str]
    status: BatchStatus
    total_emails: int


class BatchProgress(TypedDict, total=False):
    """Batch status snapshot."""

    id: int
    status: BatchStatus
    progress: int
    total_emails: int
    processed_emails: int
    valid_emails: int
    invalid_emails: int
    unknown_emails: int


class FoundEmail(TypedDict, total=False):
    """Best guess for a person's address."""

    email: str
    confidence: int
    pattern: str
    verified: bool
    alternatives: List[str]


class DomainSearchResult(TypedDict, total=False):
    """Emails discovered on a domain."""

    domain: str
    total_found: int
    patterns: List[str]
    emails: List[Dict[str, Any]]


class CompanySearchResult(TypedDict, total=False):
    """Emails discovered for a company."""

    company: str
    total_found: int
    possible_domains: List[str]
    emails: List[Dict[str, Any]]


class CreditsResponse(TypedDict, total=False):
    """Credit balance."""

    balance: int
    used_this_month: int
    plan: str


class UsageResponse(TypedDict, total=False):
    """API usage counters."""

    total_requests: int
    successful_requests: int
    failed_requests: int


class ListSummary(TypedDict, total=False):
    """Verification list (batch) as returned by the lists endpoint."""

    id: int
    name: Optional[str]
    status: BatchStatus
    total_emails: int
    created_at: str
