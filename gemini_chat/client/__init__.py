"""Gemini API access.

Handles the single remote operation the chat depends on: sending the
conversation to generateContent and reading the reply.

Responsibilities:
    - Configuration from environment and .env
    - Request payload construction
    - Transport and JSON decoding errors
    - Reply extraction and response shape checks

Keeps the HTTP details out of the session logic.
"""

from gemini_chat.client.config import GeminiConfig, get_gemini_config
from gemini_chat.client.gemini_client import (
    GeminiClient,
    GeminiTransportError,
    MalformedResponseError,
    extract_reply_text,
    get_gemini_client,
)

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "GeminiTransportError",
    "MalformedResponseError",
    "extract_reply_text",
    "get_gemini_client",
    "get_gemini_config",
]
