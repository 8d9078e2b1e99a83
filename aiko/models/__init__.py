"""Pydantic models for the conversation and the completion wire format.

Provides type safety and validation for everything that crosses a boundary:
the conversation log shown on the page and the JSON exchanged with the
completion endpoint.

Models:
    - Role: Message speaker (user, assistant, summary-note)
    - Message: Individual entry in the conversation log
    - ConversationState: Read-only snapshot of the log and UI flags
    - CompletionMessage / CompletionRequest: Outgoing request payload
    - CompletionResponse / ErrorEnvelope: Incoming response envelopes
"""

from aiko.models.conversation import ConversationState, Message, Role
from aiko.models.schemas import (
    CompletionMessage,
    CompletionRequest,
    CompletionResponse,
    ErrorEnvelope,
)

__all__ = [
    "CompletionMessage",
    "CompletionRequest",
    "CompletionResponse",
    "ConversationState",
    "ErrorEnvelope",
    "Message",
    "Role",
]
