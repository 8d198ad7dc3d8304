"""Unit tests for request execution and error classification."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from respx import MockRouter

from emaillistchecker import (
    ApiError,
    AuthenticationError,
    ClientConfig,
    EmailListCheckerError,
    ErrorKind,
    InsufficientCreditsError,
    RateLimitError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from emaillistchecker.transport import (
    Transport,
    normalize_path,
    parse_retry_after,
)

BASE_URL = "https://platform.emaillistchecker.io/api/v1"


@pytest.fixture
def transport() -> Iterator[Transport]:
    t = Transport(ClientConfig(api_key="secret-key"))
    yield t
    t.close()


def test_sends_default_headers(transport: Transport, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/credits").mock(return_value=httpx.Response(200, json={}))

    transport.execute("GET", "/credits")

    headers = route.calls[0].request.headers
    assert headers["authorization"] == "Bearer secret-key"
    assert headers["content-type"] == "application/json"
    assert headers["accept"] == "application/json"
    assert headers["user-agent"].startswith("emaillistchecker-python/")


@pytest.mark.parametrize("path", ["/credits", "credits", "//credits"])
def test_path_normalization(transport: Transport, respx_mock: MockRouter, path: str) -> None:
    route = respx_mock.get(f"{BASE_URL}/credits").mock(return_value=httpx.Response(200, json={"ok": True}))

    assert transport.execute("GET", path) == {"ok": True}
    assert str(route.calls[0].request.url) == f"{BASE_URL}/credits"


def test_normalize_path() -> None:
    assert normalize_path("verify") == "/verify"
    assert normalize_path("/verify") == "/verify"
    assert normalize_path("///verify/batch") == "/verify/batch"


def test_success_body_is_returned_without_unwrapping(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/usage").mock(return_value=httpx.Response(200, json={"data": {"x": 1}}))

    assert transport.execute("GET", "/usage") == {"data": {"x": 1}}


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200),
        httpx.Response(204),
        httpx.Response(200, content=b"null"),
        httpx.Response(200, content=b"<html>oops</html>"),
    ],
)
def test_empty_or_undecodable_success_body_is_empty_mapping(
    transport: Transport, respx_mock: MockRouter, response: httpx.Response
) -> None:
    respx_mock.get(f"{BASE_URL}/lists").mock(return_value=response)

    assert transport.execute("GET", "/lists") == {}


def test_allow_text_returns_raw_body(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/export").mock(
        return_value=httpx.Response(200, text="email,result\na@x.com,deliverable\n")
    )

    assert transport.execute("GET", "/export", allow_text=True) == "email,result\na@x.com,deliverable\n"


@pytest.mark.parametrize("text", ["12345", "null", "[1, 2]"])
def test_allow_text_keeps_json_looking_text(transport: Transport, respx_mock: MockRouter, text: str) -> None:
    respx_mock.get(f"{BASE_URL}/export").mock(
        return_value=httpx.Response(200, text=text, headers={"Content-Type": "text/plain; charset=utf-8"})
    )

    assert transport.execute("GET", "/export", allow_text=True) == text


def test_allow_text_still_decodes_json_content(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/export").mock(
        return_value=httpx.Response(200, json={"data": [1]}, headers={"Content-Type": "application/json; charset=utf-8"})
    )

    assert transport.execute("GET", "/export", allow_text=True) == {"data": [1]}


@pytest.mark.parametrize(
    "status, body, error_cls, message",
    [
        (401, {"error": "Key revoked"}, AuthenticationError, "Key revoked"),
        (401, {}, AuthenticationError, "Invalid API key"),
        (402, {"error": "Out of credits"}, InsufficientCreditsError, "Out of credits"),
        (402, None, InsufficientCreditsError, "Insufficient credits"),
        (422, {"message": "The email field is required."}, ValidationError, "The email field is required."),
        (422, {"error": "ignored"}, ValidationError, "Validation error"),
        (500, {"error": "Server exploded"}, ApiError, "Server exploded"),
        (404, {}, ApiError, "API error: 404"),
        (503, None, ApiError, "API error: 503"),
    ],
)
def test_status_classification(
    transport: Transport,
    respx_mock: MockRouter,
    status: int,
    body: dict | None,
    error_cls: type[EmailListCheckerError],
    message: str,
) -> None:
    response = httpx.Response(status, json=body) if body is not None else httpx.Response(status)
    respx_mock.post(f"{BASE_URL}/verify").mock(return_value=response)

    with pytest.raises(error_cls) as exc_info:
        transport.execute("POST", "/verify", json={"email": "a@x.com"})

    error = exc_info.value
    assert type(error) is error_cls
    assert error.message == message
    assert str(error) == message
    assert error.status_code == status
    assert error.response_body == body


def test_undecodable_error_body_is_none(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(return_value=httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(ApiError) as exc_info:
        transport.execute("GET", "/credits")

    assert exc_info.value.message == "API error: 502"
    assert exc_info.value.response_body is None


def test_non_mapping_error_body_uses_default_message(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(return_value=httpx.Response(401, json=["nope"]))

    with pytest.raises(AuthenticationError) as exc_info:
        transport.execute("GET", "/credits")

    assert exc_info.value.message == "Invalid API key"
    assert exc_info.value.response_body == ["nope"]


def test_rate_limit_uses_retry_after_header(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(
        return_value=httpx.Response(429, json={"error": "Too many requests"}, headers={"Retry-After": "17"})
    )

    with pytest.raises(RateLimitError) as exc_info:
        transport.execute("GET", "/credits")

    error = exc_info.value
    assert error.retry_after == 17
    assert error.status_code == 429
    assert error.message == "Rate limit exceeded. Retry after 17 seconds"
    assert error.response_body == {"error": "Too many requests"}
    assert error.kind is ErrorKind.RATE_LIMIT


@pytest.mark.parametrize("headers", [{}, {"Retry-After": "soon"}, {"Retry-After": "2.5"}])
def test_rate_limit_defaults_to_sixty_seconds(
    transport: Transport, respx_mock: MockRouter, headers: dict[str, str]
) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(return_value=httpx.Response(429, headers=headers))

    with pytest.raises(RateLimitError) as exc_info:
        transport.execute("GET", "/credits")

    assert exc_info.value.retry_after == 60
    assert exc_info.value.response_body is None


def test_parse_retry_after() -> None:
    assert parse_retry_after(None) == 60
    assert parse_retry_after("0") == 0
    assert parse_retry_after(" 30 ") == 30
    assert parse_retry_after("-5") == 60
    assert parse_retry_after("+5") == 60
    assert parse_retry_after("1_0") == 60
    assert parse_retry_after("") == 60
    assert parse_retry_after("Wed, 21 Oct 2026 07:28:00 GMT") == 60


def test_rate_limit_rejects_underscored_retry_after(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(return_value=httpx.Response(429, headers={"Retry-After": "1_0"}))

    with pytest.raises(RateLimitError) as exc_info:
        transport.execute("GET", "/credits")

    assert exc_info.value.retry_after == 60


def test_invalid_url_is_transport_error(transport: Transport, respx_mock: MockRouter) -> None:
    with pytest.raises(TransportError) as exc_info:
        transport.execute("GET", "/verify/batch/1\x01")

    error = exc_info.value
    assert error.status_code is None
    assert error.response_body is None
    assert isinstance(error.__cause__, httpx.InvalidURL)
    assert len(respx_mock.calls) == 0


def test_connection_failure_is_transport_error(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(side_effect=httpx.ConnectError("Connection refused"))

    with pytest.raises(TransportError) as exc_info:
        transport.execute("GET", "/credits")

    error = exc_info.value
    assert not isinstance(error, ApiError)
    assert error.kind is ErrorKind.TRANSPORT
    assert error.status_code is None
    assert error.response_body is None
    assert "Connection refused" in error.message
    assert isinstance(error.__cause__, httpx.ConnectError)


def test_timeout_is_transport_error(transport: Transport, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/credits").mock(side_effect=httpx.ReadTimeout("timed out"))

    with pytest.raises(TimeoutError) as exc_info:
        transport.execute("GET", "/credits")

    assert isinstance(exc_info.value, TransportError)
    assert exc_info.value.status_code is None
