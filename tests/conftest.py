"""Shared fixtures for EmailListChecker SDK tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest

from emaillistchecker import AsyncEmailListChecker, EmailListChecker

API_KEY = "test-api-key"
BASE_URL = "https://platform.emaillistchecker.io/api/v1"


@pytest.fixture
def client() -> Iterator[EmailListChecker]:
    """Blocking client pointed at the default base URL."""
    with EmailListChecker(api_key=API_KEY) as c:
        yield c


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncEmailListChecker]:
    """Async client pointed at the default base URL."""
    async with AsyncEmailListChecker(api_key=API_KEY) as c:
        yield c
