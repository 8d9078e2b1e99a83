from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Role(str, Enum):
    """Speaker of a message in the conversation log."""

    USER = "user"
    ASSISTANT = "assistant"
    SUMMARY = "summary-note"


class Message(BaseModel):
    """A single entry in the append-only conversation log.

    Attributes:
        role: Who produced the message.
        text: The message text, if any.
        image: Attached image as a data URI, if any.
        time: Display timestamp captured when the message was created.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str | None = None
    image: str | None = None
    time: str = Field(default_factory=lambda: datetime.now().strftime("%I:%M %p"))

    @model_validator(mode="after")
    def require_user_content(self) -> "Message":
        """Reject user messages that carry neither text nor an image."""
        if self.role is Role.USER and not self.text and not self.image:
            raise ValueError("A user message must carry text or an image")
        return self


class ConversationState(BaseModel):
    """Read-only snapshot of a conversation and its transient UI flags.

    Attributes:
        messages: The ordered message log.
        pending_image: Image waiting to be sent with the next message.
        suggestions: Suggested replies for the latest assistant message.
        is_busy: Whether a primary completion request is in flight.
        last_error: User-visible error from the last failed action.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    pending_image: str | None = None
    suggestions: tuple[str, ...] = ()
    is_busy: bool = False
    last_error: str | None = None
