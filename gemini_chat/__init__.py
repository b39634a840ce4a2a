"""Gemini Chat - a single-page chat widget over the Gemini generateContent API.

Combines httpx for the remote call, Pydantic for data validation,
NiceGUI for the chat page, and FastAPI for serving it.

Components:
    - client: Gemini API configuration and HTTP client
    - session: Chat session state and turn handling
    - models: Message, session state and wire schemas
    - ui: Web interface for chat interactions
    - api: FastAPI application hosting the UI
"""

__version__ = "0.1.0"
