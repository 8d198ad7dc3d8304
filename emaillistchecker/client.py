"""EmailListChecker SDK Client."""

from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import quote

from .exceptions import ValidationError
from .transport import AsyncTransport, Transport
from .types import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    ResultFilter,
    ResultFormat,
)

Id = Union[int, str]


def _segment(value: Id) -> str:
    """Escape an ID so it always stays a single path segment."""
    return quote(str(value), safe="")


def _unwrap(body: Any) -> Any:
    """Return ``body["data"]`` for ``{data: ...}`` envelopes, else ``body`` unchanged."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def _batch_payload(
    emails: Sequence[str],
    name: Optional[str],
    callback_url: Optional[str],
    auto_start: bool,
) -> Dict[str, Any]:
    if isinstance(emails, str) or not emails:
        raise ValidationError("emails must be a non-empty list of email addresses")
    if not all(isinstance(email, str) for email in emails):
        raise ValidationError("emails must contain only strings")

    payload: Dict[str, Any] = {"emails": list(emails), "auto_start": auto_start}
    if name is not None:
        payload["name"] = name
    if callback_url is not None:
        payload["callback_url"] = callback_url
    return payload


def _verify_payload(email: str, timeout: Optional[int], smtp_check: bool) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"email": email, "smtp_check": smtp_check}
    if timeout is not None:
        payload["timeout"] = timeout
    return payload


class EmailListChecker:
    """EmailListChecker API Client."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the EmailListChecker client.

        Args:
            api_key: Your EmailListChecker API key.
            base_url: API base URL (default: https://platform.emaillistchecker.io/api/v1).
            timeout: Request timeout in seconds (default: 30).
        """
        self.config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        self._transport = Transport(self.config)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "EmailListChecker":
        return cls(config.api_key, config.base_url, config.timeout)

    @classmethod
    def from_env(cls) -> "EmailListChecker":
        """Build a client from ``EMAILLISTCHECKER_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env())

    def __enter__(self) -> "EmailListChecker":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._transport.close()

    def verify(
        self,
        email: str,
        timeout: Optional[int] = None,
        smtp_check: bool = True,
    ) -> Dict[str, Any]:
        """Verify a single email address.

        Args:
            email: The email address to verify.
            timeout: Server-side verification timeout in seconds (5-60).
            smtp_check: Whether to perform SMTP verification (default: True).

        Returns:
            Verification result (see ``types.VerificationResult``).
        """
        data = self._transport.execute("POST", "/verify", json=_verify_payload(email, timeout, smtp_check))
        return _unwrap(data)

    def verify_batch(
        self,
        emails: Sequence[str],
        name: Optional[str] = None,
        callback_url: Optional[str] = None,
        auto_start: bool = True,
    ) -> Dict[str, Any]:
        """Submit emails for batch verification.

        Args:
            emails: Email addresses to verify (max 10,000).
            name: Name for this batch.
            callback_url: Webhook URL notified on completion.
            auto_start: Start verification immediately (default: True).

        Returns:
            The created batch (id, status, total_emails, ...).
        """
        payload = _batch_payload(emails, name, callback_url, auto_start)
        return _unwrap(self._transport.execute("POST", "/verify/batch", json=payload))

    def get_batch_status(self, batch_id: Id) -> Dict[str, Any]:
        """Get the current status of a batch.

        The call returns immediately; poll again to follow progress.
        """
        return _unwrap(self._transport.execute("GET", f"/verify/batch/{_segment(batch_id)}"))

    def get_batch_results(
        self,
        batch_id: Id,
        format: ResultFormat = "json",
        filter: ResultFilter = "all",
    ) -> Any:
        """Download batch verification results.

        Args:
            batch_id: The batch ID.
            format: Output format: 'json', 'csv' or 'txt' (default: 'json').
            filter: 'all', 'valid', 'invalid', 'risky' or 'unknown' (default: 'all').

        Returns:
            For 'json' the unwrapped results. For other formats the full
            response as returned: decoded JSON, or raw text when the body is
            not JSON.
        """
        data = self._transport.execute(
            "GET",
            f"/verify/batch/{_segment(batch_id)}/results",
            params={"format": format, "filter": filter},
            allow_text=format != "json",
        )
        if format == "json":
            return _unwrap(data)
        return data

    def find_email(self, first_name: str, last_name: str, domain: str) -> Dict[str, Any]:
        """Find an email address by name and domain.

        Args:
            first_name: First name.
            last_name: Last name.
            domain: Domain (e.g. 'example.com').

        Returns:
            Best guess with confidence, pattern, verified flag and alternatives.
        """
        payload = {"first_name": first_name, "last_name": last_name, "domain": domain}
        return _unwrap(self._transport.execute("POST", "/finder/email", json=payload))

    def find_by_domain(self, domain: str, limit: int = 10, offset: int = 0) -> Dict[str, Any]:
        """Find emails on a domain.

        Args:
            domain: Domain to search.
            limit: Results per request (1-100, default: 10).
            offset: Pagination offset (default: 0).
        """
        payload = {"domain": domain, "limit": limit, "offset": offset}
        return _unwrap(self._transport.execute("POST", "/finder/domain", json=payload))

    def find_by_company(self, company: str, limit: int = 10) -> Dict[str, Any]:
        """Find emails by company name.

        Args:
            company: Company name.
            limit: Results limit (1-100, default: 10).
        """
        payload = {"company": company, "limit": limit}
        return _unwrap(self._transport.execute("POST", "/finder/company", json=payload))

    def get_credits(self) -> Dict[str, Any]:
        """Get current credit balance."""
        return _unwrap(self._transport.execute("GET", "/credits"))

    def get_usage(self) -> Dict[str, Any]:
        """Get API usage statistics."""
        return _unwrap(self._transport.execute("GET", "/usage"))

    def get_lists(self) -> List[Dict[str, Any]]:
        """Get all verification lists."""
        return _unwrap(self._transport.execute("GET", "/lists"))

    def delete_list(self, list_id: Id) -> Any:
        """Delete a verification list.

        Returns:
            The deletion confirmation exactly as returned by the API.
        """
        return self._transport.execute("DELETE", f"/lists/{_segment(list_id)}")


class AsyncEmailListChecker:
    """Async EmailListChecker API Client."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the async EmailListChecker client."""
        self.config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        self._transport = AsyncTransport(self.config)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "AsyncEmailListChecker":
        return cls(config.api_key, config.base_url, config.timeout)

    @classmethod
    def from_env(cls) -> "AsyncEmailListChecker":
        return cls.from_config(ClientConfig.from_env())

    async def __aenter__(self) -> "AsyncEmailListChecker":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._transport.close()

    async def verify(
        self,
        email: str,
        timeout: Optional[int] = None,
        smtp_check: bool = True,
    ) -> Dict[str, Any]:
        """Verify a single email address."""
        data = await self._transport.execute("POST", "/verify", json=_verify_payload(email, timeout, smtp_check))
        return _unwrap(data)

    async def verify_batch(
        self,
        emails: Sequence[str],
        name: Optional[str] = None,
        callback_url: Optional[str] = None,
        auto_start: bool = True,
    ) -> Dict[str, Any]:
        """Submit emails for batch verification."""
        payload = _batch_payload(emails, name, callback_url, auto_start)
        return _unwrap(await self._transport.execute("POST", "/verify/batch", json=payload))

    async def get_batch_status(self, batch_id: Id) -> Dict[str, Any]:
        """Get the current status of a batch."""
        return _unwrap(await self._transport.execute("GET", f"/verify/batch/{_segment(batch_id)}"))

    async def get_batch_results(
        self,
        batch_id: Id,
        format: ResultFormat = "json",
        filter: ResultFilter = "all",
    ) -> Any:
        """Download batch verification results."""
        data = await self._transport.execute(
            "GET",
            f"/verify/batch/{_segment(batch_id)}/results",
            params={"format": format, "filter": filter},
            allow_text=format != "json",
        )
        if format == "json":
            return _unwrap(data)
        return data

    async def find_email(self, first_name: str, last_name: str, domain: str) -> Dict[str, Any]:
        """Find an email address by name and domain."""
        payload = {"first_name": first_name, "last_name": last_name, "domain": domain}
        return _unwrap(await self._transport.execute("POST", "/finder/email", json=payload))

    async def find_by_domain(self, domain: str, limit: int = 10, offset: int = 0) -> Dict[str, Any]:
        """Find emails on a domain."""
        payload = {"domain": domain, "limit": limit, "offset": offset}
        return _unwrap(await self._transport.execute("POST", "/finder/domain", json=payload))

    async def find_by_company(self, company: str, limit: int = 10) -> Dict[str, Any]:
        """Find emails by company name."""
        payload = {"company": company, "limit": limit}
        return _unwrap(await self._transport.execute("POST", "/finder/company", json=payload))

    async def get_credits(self) -> Dict[str, Any]:
        """Get current credit balance."""
        return _unwrap(await self._transport.execute("GET", "/credits"))

    async def get_usage(self) -> Dict[str, Any]:
        """Get API usage statistics."""
        return _unwrap(await self._transport.execute("GET", "/usage"))

    async def get_lists(self) -> List[Dict[str, Any]]:
        """Get all verification lists."""
        return _unwrap(await self._transport.execute("GET", "/lists"))

    async def delete_list(self, list_id: Id) -> Any:
        """Delete a verification list."""
        return await self._transport.execute("DELETE", f"/lists/{_segment(list_id)}")
