"""Aiko - a single-page chat interface over a hosted chat-completion API.

Combines NiceGUI for the page, HTTPX for completion calls, Pydantic for the
data model and configuration, and FastAPI as the host application.

Components:
    - models: Conversation messages, state snapshot and wire schemas
    - conversation: Observable conversation store and call sequencing
    - completion: Completion client, prompts and configuration
    - attachments: Image file validation and data-URI encoding
    - ui: Web interface for chat interactions
    - api: Host application and health endpoint
"""

__version__ = "0.1.0"
