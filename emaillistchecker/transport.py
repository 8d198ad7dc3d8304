"""HTTP transport for the EmailListChecker API.

Performs one authenticated exchange per call and turns the outcome into
either the decoded JSON body or one of the SDK exceptions. Envelope
unwrapping is left to the client.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import (
    ApiError,
    AuthenticationError,
    EmailListCheckerError,
    InsufficientCreditsError,
    RateLimitError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from .types import ClientConfig

logger = logging.getLogger(__name__)

USER_AGENT = "emaillistchecker-python/1.0.0"
DEFAULT_RETRY_AFTER = 60


def build_headers(api_key: str) -> Dict[str, str]:
    """Default headers sent with every request."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }


def normalize_path(path: str) -> str:
    """Return ``path`` with exactly one leading slash."""
    return "/" + path.lstrip("/")


def parse_retry_after(value: Optional[str]) -> int:
    """Seconds from a ``Retry-After`` header, or the default when missing or not an integer."""
    if value is None:
        return DEFAULT_RETRY_AFTER
    value = value.strip()
    # delta-seconds only: no sign, underscores or HTTP-dates
    if not (value.isascii() and value.isdigit()):
        return DEFAULT_RETRY_AFTER
    return int(value)


def _is_json(response: httpx.Response) -> bool:
    content_type = response.headers.get("Content-Type", "")
    return content_type.split(";")[0].strip().lower() == "application/json"


def decode_success(response: httpx.Response, allow_text: bool = False) -> Any:
    """Decode a 2xx body.

    Empty, ``null`` and undecodable bodies become ``{}``. With ``allow_text``
    any body not labelled ``application/json`` is returned as a string, and
    an undecodable JSON body is returned as a string too.
    """
    if allow_text and not _is_json(response):
        return response.text
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        if allow_text:
            return response.text
        logger.debug("Discarding non-JSON success body (%d bytes)", len(response.content))
        return {}
    return {} if data is None else data


def _decode_error_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _body_field(body: Any, field: str) -> Optional[str]:
    if isinstance(body, dict):
        value = body.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def build_error(response: httpx.Response) -> EmailListCheckerError:
    """Map a non-2xx response onto the matching exception."""
    status = response.status_code
    body = _decode_error_body(response)

    if status == 429:
        retry_after = parse_retry_after(response.headers.get("Retry-After"))
        return RateLimitError(
            f"Rate limit exceeded. Retry after {retry_after} seconds",
            retry_after,
            status,
            body,
        )

    if status == 401:
        return AuthenticationError(_body_field(body, "error") or "Invalid API key", status, body)

    if status == 402:
        return InsufficientCreditsError(_body_field(body, "error") or "Insufficient credits", status, body)

    if status == 422:
        return ValidationError(_body_field(body, "message") or "Validation error", status, body)

    return ApiError(_body_field(body, "error") or f"API error: {status}", status, body)


def _handle_response(method: str, path: str, response: httpx.Response, allow_text: bool) -> Any:
    logger.debug("%s %s -> %d", method, path, response.status_code)

    if response.is_success:
        return decode_success(response, allow_text)

    error = build_error(response)
    logger.debug("%s %s failed: %s", method, path, error.message)
    raise error


def _transport_error(method: str, path: str, exc: Exception) -> TransportError:
    logger.warning("%s %s failed without a response: %s", method, path, exc)
    if isinstance(exc, httpx.TimeoutException):
        return TimeoutError(f"Request failed: {exc}")
    return TransportError(f"Request failed: {exc}")


class Transport:
    """Blocking transport backed by ``httpx.Client``."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=build_headers(config.api_key),
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def execute(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        allow_text: bool = False,
    ) -> Any:
        """Make an HTTP request to the API and return the decoded body."""
        path = normalize_path(path)
        try:
            response = self._client.request(method, path, params=params, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _transport_error(method, path, e) from e

        return _handle_response(method, path, response, allow_text)


class AsyncTransport:
    """Async transport backed by ``httpx.AsyncClient``."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=build_headers(config.api_key),
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def execute(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        allow_text: bool = False,
    ) -> Any:
        """Make an async HTTP request to the API and return the decoded body."""
        path = normalize_path(path)
        try:
            response = await self._client.request(method, path, params=params, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _transport_error(method, path, e) from e

        return _handle_response(method, path, response, allow_text)
