"""NiceGUI chat page rendering a ChatSession."""

from nicegui import ui

from gemini_chat.models.schemas import Message
from gemini_chat.session.chat_session import ChatSession

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #111827; min-height: 100vh; }

    .app-container {
        background: #f3f4f6;
        border-radius: 2rem;
        box-shadow: 0 10px 25px rgba(0, 0, 0, 0.3);
        overflow: hidden;
    }

    .header { background: linear-gradient(90deg, #2563eb 0%, #9333ea 100%); }

    .message-user {
        background: #3b82f6;
        color: white;
        border-radius: 12px 12px 0 12px;
    }

    .message-model {
        background: white;
        color: #1f2937;
        border-radius: 12px 12px 12px 0;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #9ca3af;
        border-radius: 50%;
        animation: bounce 1s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.1s; }
    .typing-dot:nth-child(3) { animation-delay: 0.2s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .send-btn { background: #2563eb !important; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input

    def render_message(msg: Message) -> None:
        is_user = msg.sender == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-model"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[75%] p-3 shadow-md {bubble}"):
                ui.label(msg.text).classes("text-sm whitespace-pre-wrap")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-model p-3 shadow-md"):
                with ui.row().classes("items-center gap-2"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not session.transcript:
                with ui.column().classes("w-full h-64 items-center justify-center"):
                    ui.label("Start a conversation!").classes("text-lg text-gray-500")
            else:
                for msg in session.transcript:
                    render_message(msg)
            if session.busy:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    session = ChatSession(on_change=refresh_messages)

    async def submit() -> None:
        if not session.can_send:
            return
        text = session.state.pending_input
        input_field.set_value("")
        await session.send(text)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen flex items-center justify-center"),
        ui.column().classes("w-[400px] app-container gap-0").style("height: 650px"),
    ):
        # Header
        with ui.row().classes("w-full header p-4 justify-center"):
            ui.label("Gemini Chatbot").classes("text-2xl font-bold text-white")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-4 gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center bg-white no-wrap"):
            input_field = (
                ui.input(
                    placeholder="Type your message...",
                    on_change=lambda e: session.set_pending_input(e.value),
                )
                .props("rounded outlined dense")
                .classes("flex-grow")
                .on("keydown.enter", submit)
            )
            input_field.bind_enabled_from(session, "busy", backward=lambda busy: not busy)
            (
                ui.button(icon="send", on_click=submit)
                .props("round unelevated color=white")
                .classes("send-btn")
                .bind_enabled_from(session, "can_send")
            )

    refresh_messages()
