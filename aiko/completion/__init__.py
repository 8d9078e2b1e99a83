"""Completion client for the hosted language model.

Responsibilities:
    - Configuration from environment (API key, base URL, model, timeout)
    - Single request/response exchanges with the chat-completion endpoint
    - Prompt construction for replies, suggestions and summaries
    - Error taxonomy with user-facing messages

Maintains clean separation from the conversation state and the UI.
"""

from aiko.completion.client import CompletionClient, get_completion_client
from aiko.completion.config import CompletionConfig, get_completion_config
from aiko.completion.errors import (
    CompletionError,
    CompletionHTTPError,
    CompletionTimeoutError,
    CompletionTransportError,
    InvalidCompletionError,
)

__all__ = [
    "CompletionClient",
    "CompletionConfig",
    "CompletionError",
    "CompletionHTTPError",
    "CompletionTimeoutError",
    "CompletionTransportError",
    "InvalidCompletionError",
    "get_completion_client",
    "get_completion_config",
]
