"""HTTPX client for an OpenAI-compatible chat-completion endpoint.

Every call is a single request/response exchange: the full prompt history
goes out as JSON, and the text of the first choice comes back. There is no
streaming and no retry; each failure is raised as a CompletionError whose
message is fit to show to the user.
"""

import logging

import httpx
from pydantic import ValidationError

from aiko.completion.config import CompletionConfig, get_completion_config
from aiko.completion.errors import (
    CompletionHTTPError,
    CompletionTimeoutError,
    CompletionTransportError,
    InvalidCompletionError,
)
from aiko.models.schemas import (
    CompletionMessage,
    CompletionRequest,
    CompletionResponse,
    ErrorEnvelope,
)

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/chat/completions"


def _error_message(response: httpx.Response) -> str | None:
    """Extract the server-provided error message, if the body carries one."""
    try:
        envelope = ErrorEnvelope.model_validate_json(response.content)
    except ValidationError:
        return None
    if envelope.error and envelope.error.message:
        return envelope.error.message
    return None


class CompletionClient:
    """Issues completion calls against the configured provider.

    A fresh AsyncClient is opened per call, so an instance holds no network
    resources between calls and can be shared freely.
    """

    def __init__(
        self,
        config: CompletionConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional HTTPX transport, used by tests to stub the server.
        """
        self._config = config or get_completion_config()
        self._transport = transport

    @property
    def config(self) -> CompletionConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "X-Title": self._config.app_title,
        }

    def build_request(self, messages: list[CompletionMessage]) -> CompletionRequest:
        """Wrap a prompt history in a request for the configured model."""
        return CompletionRequest(
            model=self._config.model_name,
            messages=messages,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

    async def complete(self, messages: list[CompletionMessage]) -> str:
        """Send a prompt history and return the assistant's reply text.

        Args:
            messages: Ordered prompt history, oldest first.

        Returns:
            The non-empty content of the first choice.

        Raises:
            CompletionTimeoutError: The request exceeded the configured timeout.
            CompletionTransportError: The server could not be reached.
            CompletionHTTPError: The server answered with a non-success status.
            InvalidCompletionError: The body carried no completion text.
        """
        payload = self.build_request(messages).model_dump(exclude_none=True)

        async with httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    COMPLETIONS_PATH, json=payload, headers=self._headers()
                )
            except httpx.TimeoutException as e:
                raise CompletionTimeoutError(self._config.timeout) from e
            except httpx.RequestError as e:
                raise CompletionTransportError(f"Connection failed: {e}") from e

        if not response.is_success:
            raise CompletionHTTPError(response.status_code, _error_message(response))

        try:
            body = CompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise InvalidCompletionError() from e

        content = body.content
        if not content or not content.strip():
            raise InvalidCompletionError()

        logger.debug(f"Completion from {self._config.model_name}: {len(content)} chars")
        return content


# Module-level singleton instance
_completion_client: CompletionClient | None = None


def get_completion_client() -> CompletionClient:
    """Get or create the global completion client.

    Returns:
        The CompletionClient instance.

    Raises:
        ValueError: If the configuration is invalid (e.g. no API key).
    """
    global _completion_client
    if _completion_client is None:
        _completion_client = CompletionClient()
    return _completion_client
