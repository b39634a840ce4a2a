"""Chat session logic.

Owns the conversation transcript and the busy flag, and applies the
two-phase update (user turn first, reply or fallback after the call).
"""

from gemini_chat.session.chat_session import (
    MALFORMED_RESPONSE_FALLBACK,
    TRANSPORT_ERROR_FALLBACK,
    ChatSession,
    build_request_contents,
)

__all__ = [
    "MALFORMED_RESPONSE_FALLBACK",
    "TRANSPORT_ERROR_FALLBACK",
    "ChatSession",
    "build_request_contents",
]
