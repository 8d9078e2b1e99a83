"""Failures of a single completion call.

The string form of every error is the message shown to the user.
"""


class CompletionError(Exception):
    """Raised when a completion call does not produce usable text."""

    pass


class CompletionTransportError(CompletionError):
    """Raised when the request never got an HTTP response."""

    pass


class CompletionTimeoutError(CompletionTransportError):
    """Raised when the request exceeded the configured timeout."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Request timed out after {timeout:g}s")
        self.timeout = timeout


class CompletionHTTPError(CompletionError):
    """Raised on a non-success HTTP status.

    Attributes:
        status_code: The HTTP status returned by the server.
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"API request failed with status {status_code}")
        self.status_code = status_code


class InvalidCompletionError(CompletionError):
    """Raised when the response body carries no completion text."""

    def __init__(self, message: str = "Received an invalid response from the AI.") -> None:
        super().__init__(message)
