"""Conversation state and the sequencing of completion calls.

Responsibilities:
    - Append-only message log with transient UI flags
    - Observer notification on every mutation
    - Send, suggestion and summary flows against the completion client

Contains no rendering code; the UI subscribes to the store and calls the
controller.
"""

from aiko.conversation.controller import ChatController
from aiko.conversation.store import ConversationStore

__all__ = ["ChatController", "ConversationStore"]
