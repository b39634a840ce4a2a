"""Pydantic models for chat state and Gemini API payloads.

Provides type safety and validation for everything that crosses the
session or network boundary.

Models:
    - Message: Individual turn in the conversation
    - SessionState: Transcript, busy flag and pending input
    - Content / Part: Request conversation entries
    - GenerationConfig: Optional sampling options
    - GenerateContentRequest: Outgoing request body
    - GenerateContentResponse: Incoming response body
"""

from gemini_chat.models.schemas import (
    Candidate,
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerationConfig,
    Message,
    Part,
    ResponseContent,
    ResponsePart,
    Sender,
    SessionState,
)

__all__ = [
    "Candidate",
    "Content",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GenerationConfig",
    "Message",
    "Part",
    "ResponseContent",
    "ResponsePart",
    "Sender",
    "SessionState",
]
