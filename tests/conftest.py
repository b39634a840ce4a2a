"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - gemini_config: Client configuration with a fake API key
    - reply_body: Factory for well-formed generateContent bodies
    - make_client: Factory for GeminiClient backed by an httpx.MockTransport
    - captured_requests: Requests seen by clients from make_client
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from gemini_chat.api.app import create_app
from gemini_chat.client.config import GeminiConfig
from gemini_chat.client.gemini_client import GeminiClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Return configuration with a predictable key and model.

    Returns:
        GeminiConfig pointing at the default endpoint.
    """
    return GeminiConfig(api_key="test-key-12345", model_name="gemini-2.0-flash")


@pytest.fixture
def reply_body() -> Callable[[str], dict[str, Any]]:
    """Return a factory for well-formed generateContent response bodies."""

    def _body(text: str) -> dict[str, Any]:
        return {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": text}]},
                    "finishReason": "STOP",
                }
            ],
            "usageMetadata": {"totalTokenCount": 12},
        }

    return _body


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    """Collect requests sent through clients built by make_client."""
    return []


@pytest.fixture
def make_client(
    gemini_config: GeminiConfig,
    captured_requests: list[httpx.Request],
) -> Callable[[Handler], GeminiClient]:
    """Return a factory that builds a GeminiClient over a mock transport.

    Args:
        gemini_config: Configuration used by every built client.
        captured_requests: List each outgoing request is appended to.

    Returns:
        Function taking a request handler and returning a GeminiClient.
    """

    def _make(handler: Handler) -> GeminiClient:
        def _record(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return handler(request)

        return GeminiClient(config=gemini_config, transport=httpx.MockTransport(_record))

    return _make


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
