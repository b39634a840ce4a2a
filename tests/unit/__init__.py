"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - client/: Configuration, request building and response shape checks
    - session/: Transcript updates, fallbacks and the busy flag

Uses httpx.MockTransport and AsyncMock in place of the remote API.
"""
