"""Integration tests for components working together as a system.

No mocks for core functionality - tests real interactions.

Coverage:
    - API endpoints with real HTTP requests
    - Chat session round trips with the live Gemini API (when configured)

Slower than unit tests. Live tests require GEMINI_API_KEY.
"""
