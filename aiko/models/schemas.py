from typing import Literal

from pydantic import BaseModel, Field


class CompletionMessage(BaseModel):
    """One entry of the message history sent to the completion endpoint."""

    role: Literal["user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    """Request body for POST /chat/completions.

    Attributes:
        model: Model identifier understood by the provider.
        messages: Ordered prompt history.
        temperature: Optional sampling temperature.
        max_tokens: Optional cap on generated tokens.
    """

    model: str
    messages: list[CompletionMessage] = Field(..., min_length=1)
    temperature: float | None = None
    max_tokens: int | None = None


class ChoiceMessage(BaseModel):
    content: str | None = None


class Choice(BaseModel):
    message: ChoiceMessage


class CompletionResponse(BaseModel):
    """Success envelope returned by the completion endpoint.

    Only the fields this application reads are modelled; anything else the
    provider sends is ignored.
    """

    choices: list[Choice] = Field(default_factory=list)

    @property
    def content(self) -> str | None:
        """Text of the first choice, or None when absent."""
        if not self.choices:
            return None
        return self.choices[0].message.content


class ErrorDetail(BaseModel):
    message: str | None = None


class ErrorEnvelope(BaseModel):
    """Failure body optionally returned alongside a non-2xx status."""

    error: ErrorDetail | None = None
