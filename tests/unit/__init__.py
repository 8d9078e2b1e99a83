"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation of messages and wire schemas
    - conversation/: Store mutations and observer notification
    - completion/: Configuration, prompts and the HTTP client
    - attachments/: Image validation and encoding
"""
