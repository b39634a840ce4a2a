from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Sender = Literal["user", "model"]


class Message(BaseModel):
    """A single turn in the conversation.

    Attributes:
        sender: Who produced the turn (user or model).
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class SessionState(BaseModel):
    """Mutable state of one chat session, observed by the UI.

    Attributes:
        transcript: Ordered conversation, oldest first.
        busy: Whether a request to the model is in flight.
        pending_input: Current contents of the input field.
    """

    transcript: list[Message] = Field(default_factory=list)
    busy: bool = False
    pending_input: str = ""


class Part(BaseModel):
    """A text part of a content entry."""

    text: str


class Content(BaseModel):
    """One conversation entry in a generateContent request.

    Attributes:
        role: Speaker role expected by the API (user or model).
        parts: Text parts of the entry.
    """

    role: Sender
    parts: list[Part]

    @classmethod
    def from_message(cls, message: Message) -> "Content":
        """Map a transcript message to a single-part content entry."""
        role: Sender = "user" if message.sender == "user" else "model"
        return cls(role=role, parts=[Part(text=message.text)])


class GenerationConfig(BaseModel):
    """Sampling options sent as generationConfig.

    Unset options are omitted, so the default serializes to an empty object.
    """

    model_config = ConfigDict(populate_by_name=True)

    temperature: float | None = None
    top_p: float | None = Field(None, alias="topP")
    top_k: int | None = Field(None, alias="topK")
    max_output_tokens: int | None = Field(None, alias="maxOutputTokens")


class GenerateContentRequest(BaseModel):
    """Request body for the generateContent endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    contents: list[Content]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, alias="generationConfig"
    )

    def to_payload(self) -> dict:
        """Serialize to the JSON body the API expects."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResponsePart(BaseModel):
    text: str | None = None


class ResponseContent(BaseModel):
    parts: list[ResponsePart] | None = None


class Candidate(BaseModel):
    content: ResponseContent | None = None


class GenerateContentResponse(BaseModel):
    """Subset of the generateContent response read by the client.

    Unknown fields are ignored; missing fields stay None so the caller can
    tell a malformed body from a valid one.
    """

    candidates: list[Candidate] | None = None
