"""HTTP client for the Gemini generateContent endpoint.

Sends the whole conversation as `contents` and hands the decoded JSON body
back to the caller. Shape checking of that body lives in
`extract_reply_text` so the caller can tell a transport failure from an
unexpected response.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from gemini_chat.client.config import GeminiConfig, get_gemini_config
from gemini_chat.models.schemas import (
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
)

logger = logging.getLogger(__name__)


class GeminiTransportError(Exception):
    """Raised when the request fails or the body is not valid JSON."""

    pass


class MalformedResponseError(Exception):
    """Raised when a response body does not carry a reply text."""

    pass


class GeminiClient:
    """Client for a single Gemini model.

    A new httpx.AsyncClient is opened per request, so the client holds no
    connection state and needs no shutdown.
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config or get_gemini_config()
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def build_request(self, contents: list[Content]) -> GenerateContentRequest:
        """Wrap conversation entries in a request with the configured sampling options."""
        return GenerateContentRequest(
            contents=contents,
            generation_config=self._config.generation_config(),
        )

    async def generate_content(self, contents: list[Content]) -> Any:
        """POST the conversation to the model and return the decoded body.

        Args:
            contents: Conversation entries, oldest first, ending with the
                      current user turn.

        Returns:
            The decoded JSON body. Error bodies from non-2xx responses are
            returned as well; they fail the shape check downstream.

        Raises:
            GeminiTransportError: On network errors, timeouts, or a body that
                                  is not valid JSON.
        """
        payload = self.build_request(contents).to_payload()

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self._config.api_key},
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.HTTPError as e:
            raise GeminiTransportError(f"Gemini request failed: {e}") from e

        if response.is_error:
            logger.warning(
                f"Gemini API returned HTTP {response.status_code} for model {self._config.model_name}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise GeminiTransportError(
                f"Gemini response is not valid JSON (HTTP {response.status_code})"
            ) from e


def extract_reply_text(body: Any) -> str:
    """Read the reply text from a generateContent response body.

    Only `candidates[0].content.parts[0].text` is used; everything else is
    ignored.

    Args:
        body: Decoded JSON body.

    Returns:
        The first text part of the first candidate.

    Raises:
        MalformedResponseError: If any step of that path is missing or empty.
    """
    try:
        response = GenerateContentResponse.model_validate(body)
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected response body: {e}") from e

    if not response.candidates:
        raise MalformedResponseError("Response has no candidates")

    content = response.candidates[0].content
    if content is None:
        raise MalformedResponseError("First candidate has no content")

    if not content.parts:
        raise MalformedResponseError("First candidate has no parts")

    text = content.parts[0].text
    if text is None:
        raise MalformedResponseError("First part has no text")

    return text


# Module-level singleton instance
_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Get or create the global Gemini client.

    Returns:
        The GeminiClient instance.

    Raises:
        ValidationError: If GEMINI_API_KEY is not set.
    """
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client
