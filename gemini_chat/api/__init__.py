"""FastAPI application serving the chat page.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted at startup)
"""

from gemini_chat.api.app import create_app

__all__ = ["create_app"]
