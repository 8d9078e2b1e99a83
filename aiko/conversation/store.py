"""Observable conversation state for one page session.

The store is the single owner of the message log and the transient flags.
All mutations go through the named setters below; each one notifies the
subscribed observers so the page can re-render.
"""

import logging
from collections.abc import Callable, Iterable

from aiko.completion.prompts import GREETING
from aiko.models.conversation import ConversationState, Message, Role

logger = logging.getLogger(__name__)

Observer = Callable[[], None]

# Summarizing is offered once the log holds more than the greeting and one turn.
MIN_MESSAGES_TO_SUMMARIZE = 3


class ConversationStore:
    """Holds the append-only message log and the UI flags.

    Attributes are read through properties; the message log and suggestions
    are exposed as tuples so callers cannot mutate them in place.
    """

    def __init__(self, messages: Iterable[Message] | None = None) -> None:
        """Initialize the store.

        Args:
            messages: Initial log. Defaults to the assistant greeting.
        """
        if messages is None:
            messages = [Message(role=Role.ASSISTANT, text=GREETING)]
        self._messages: list[Message] = list(messages)
        self._pending_image: str | None = None
        self._suggestions: list[str] = []
        self._is_busy: bool = False
        self._last_error: str | None = None
        self._observers: list[Observer] = []

    # --- observers ---

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer()

    # --- read-only projection ---

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def pending_image(self) -> str | None:
        return self._pending_image

    @property
    def suggestions(self) -> tuple[str, ...]:
        return tuple(self._suggestions)

    @property
    def is_busy(self) -> bool:
        return self._is_busy

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def can_summarize(self) -> bool:
        return len(self._messages) >= MIN_MESSAGES_TO_SUMMARIZE

    @property
    def state(self) -> ConversationState:
        """Frozen snapshot of everything the page renders."""
        return ConversationState(
            messages=tuple(self._messages),
            pending_image=self._pending_image,
            suggestions=tuple(self._suggestions),
            is_busy=self._is_busy,
            last_error=self._last_error,
        )

    # --- mutations ---

    def append(self, message: Message) -> None:
        """Add a message to the end of the log.

        Suggestions always refer to the latest message, so they are cleared.
        """
        self._messages.append(message)
        self._suggestions = []
        logger.debug(f"Appended {message.role.value} message ({len(self._messages)} total)")
        self._notify()

    def set_busy(self, busy: bool) -> None:
        self._is_busy = busy
        self._notify()

    def set_error(self, error: str | None) -> None:
        self._last_error = error or None
        self._notify()

    def set_suggestions(self, suggestions: Iterable[str]) -> None:
        self._suggestions = list(suggestions)
        self._notify()

    def set_pending_image(self, image: str | None) -> None:
        self._pending_image = image
        self._notify()
