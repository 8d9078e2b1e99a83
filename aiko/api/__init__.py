"""Host application for the chat page.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI)
"""

from aiko.api.app import create_app

__all__ = ["create_app"]
