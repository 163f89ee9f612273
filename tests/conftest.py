"""Shared fixtures for the High Systems client test suite."""

from unittest.mock import AsyncMock

import httpx
import pytest

from highsystems.config.options import HighSystemsOptions, ProxyAuth, ProxyConfig
from highsystems.config.settings import get_settings


@pytest.fixture
def sample_options() -> HighSystemsOptions:
    """A typical client configuration for testing."""
    return HighSystemsOptions(
        instance="demo",
        user_token="ut-test-token-1234",
        user_agent="Testing",
        connection_limit=10,
        connection_limit_period=1000,
        error_on_connection_limit=False,
    )


@pytest.fixture
def proxy_options() -> HighSystemsOptions:
    return HighSystemsOptions(
        instance="demo",
        user_token="ut-test-token-1234",
        proxy=ProxyConfig(host="proxy.local", port=3128, auth=ProxyAuth("bob", "s3cret")),
    )


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(HS_INSTANCE="demo", HS_LOG_LEVEL="DEBUG")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        # Clear lru_cache so Settings re-reads env
        get_settings.cache_clear()

    yield _override

    # Always clear cache on teardown so other tests get fresh settings
    get_settings.cache_clear()


def make_response(status_code: int = 200, json=None, content: bytes | None = None,
                  method: str = "GET", url: str = "https://demo.highsystems.io/api/rest/v1/x"):
    """Build a real httpx.Response bound to a request."""
    request = httpx.Request(method, url)
    if content is not None:
        return httpx.Response(status_code, content=content, request=request)
    return httpx.Response(status_code, json=json, request=request)


def mock_http_client(*responses, side_effect=None) -> AsyncMock:
    """AsyncMock standing in for httpx.AsyncClient."""
    client = AsyncMock()
    client.is_closed = False
    if side_effect is not None:
        client.request.side_effect = side_effect
    elif len(responses) == 1:
        client.request.return_value = responses[0]
    else:
        client.request.side_effect = list(responses)
    return client
