"""Test package for Gemini Chat.

Structure:
    - unit/: Schema, config, client and session tests with mocked transport
    - integration/: FastAPI app tests and live API round trips

Leverages pytest with pytest-check for soft assertions.
"""
