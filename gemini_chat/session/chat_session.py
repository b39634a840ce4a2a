"""Chat session: transcript state and turn handling.

Core module for the chat widget. A session owns one SessionState and turns
each user message into exactly two transcript entries: the user turn, then
either the model reply or a fixed fallback text.

Flow of `send`:

1. Append the user turn, clear the input and mark the session busy. This
   happens before any network activity so the UI can render the turn
   immediately.
2. Map the transcript, which now ends with the new user turn, to request
   contents and await the model.
3. Append the reply, or a fallback turn if the call failed or the body had
   an unexpected shape.
4. Clear the busy flag on every path.

Only one request may be in flight. The UI enforces this through `can_send`;
`send` itself does not reject calls made while busy.
"""

import logging
from collections.abc import Callable

from gemini_chat.client.gemini_client import (
    GeminiClient,
    MalformedResponseError,
    extract_reply_text,
    get_gemini_client,
)
from gemini_chat.models.schemas import Content, Message, Sender, SessionState

logger = logging.getLogger(__name__)

MALFORMED_RESPONSE_FALLBACK = "Sorry, I couldn't get a response. Please try again."
TRANSPORT_ERROR_FALLBACK = "An error occurred while fetching the response."


def build_request_contents(transcript: list[Message]) -> list[Content]:
    """Map transcript messages to generateContent entries, one text part each."""
    return [Content.from_message(message) for message in transcript]


class ChatSession:
    """Manages chat state for one page."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            client: Optional Gemini client. The shared client is created
                    on first send if not provided.
            on_change: Optional callback run after each transcript or busy
                       change made by `send`, used by the UI to re-render.
        """
        self._client = client
        self._on_change = on_change
        self.state = SessionState()

    def _get_client(self) -> GeminiClient:
        # Lazy so a missing GEMINI_API_KEY surfaces as a fallback turn, not a page error.
        if self._client is None:
            self._client = get_gemini_client()
        return self._client

    @property
    def transcript(self) -> list[Message]:
        return self.state.transcript

    @property
    def busy(self) -> bool:
        return self.state.busy

    @property
    def can_send(self) -> bool:
        """Whether the UI should allow submitting the pending input."""
        return not self.state.busy and bool(self.state.pending_input.strip())

    def set_pending_input(self, text: str | None) -> None:
        self.state.pending_input = text or ""

    def _append(self, sender: Sender, text: str) -> None:
        self.state.transcript.append(Message(sender=sender, text=text))

    def _notify(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change()
        except Exception:
            logger.exception("Session change callback failed")

    async def send(self, text: str) -> None:
        """Send a user message and append the model's reply.

        Blank input is ignored. Never raises: failures become a fallback
        model turn and a logged error.

        Args:
            text: The user's message.
        """
        if not text or not text.strip():
            return

        self._append("user", text)
        self.state.pending_input = ""
        self.state.busy = True
        self._notify()

        try:
            contents = build_request_contents(self.state.transcript)
            body = await self._get_client().generate_content(contents)
            reply = extract_reply_text(body)
            self._append("model", reply)
        except MalformedResponseError as e:
            logger.error(f"Unexpected API response structure: {e}")
            self._append("model", MALFORMED_RESPONSE_FALLBACK)
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            self._append("model", TRANSPORT_ERROR_FALLBACK)
        finally:
            self.state.busy = False
            self._notify()
