"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with user and model bubbles
    - Typing indicator while a request is in flight
    - Input field and send button gated on the session busy flag

Contains no business logic. Delegates every state change to ChatSession.
"""
