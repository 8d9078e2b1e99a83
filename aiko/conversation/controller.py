"""Sequencing of user actions, completion calls and store mutations.

Every operation follows the same shape: mutate the store optimistically,
await a single completion call, then record the result or the error. The
page only ever calls into this module; it never talks to the client itself.

Call sites:
    - send_message: reply generation, followed by suggestions when the
      triggering message carried no image
    - get_suggestions: best-effort, never surfaces an error or toggles busy
    - summarize: appends a summary-note on success only
"""

import logging

from aiko.attachments.images import ImageAttachmentError, load_image
from aiko.completion.client import CompletionClient
from aiko.completion.errors import CompletionError
from aiko.completion.prompts import (
    build_history,
    build_suggestion_prompt,
    build_summary_prompt,
    parse_suggestions,
)
from aiko.conversation.store import ConversationStore
from aiko.models.conversation import Message, Role

logger = logging.getLogger(__name__)

SUMMARY_ERROR = "Sorry, I couldn't create a summary."


class ChatController:
    """Drives one conversation against a completion client."""

    def __init__(self, store: ConversationStore, client: CompletionClient) -> None:
        self._store = store
        self._client = client
        # Bumped whenever a primary request starts; stale suggestions are dropped.
        self._generation = 0

    @property
    def store(self) -> ConversationStore:
        return self._store

    # --- attachments ---

    def attach_image(
        self,
        content: bytes,
        content_type: str | None,
        filename: str | None = None,
    ) -> None:
        """Validate a selected file and make it the pending image.

        A rejected file only sets the error; the pending image is left as is.
        """
        try:
            attachment = load_image(content, content_type, filename)
        except ImageAttachmentError as e:
            logger.warning(f"Rejected attachment {filename or '<unnamed>'}: {e}")
            self._store.set_error(str(e))
            return

        if self._store.last_error:
            self._store.set_error(None)
        self._store.set_pending_image(attachment.data_uri)

    def clear_image(self) -> None:
        self._store.set_pending_image(None)

    # --- completion call sites ---

    def _begin_request(self) -> None:
        self._generation += 1
        self._store.set_busy(True)
        self._store.set_error(None)
        self._store.set_suggestions([])

    async def send_message(self, text: str, image: str | None = None) -> None:
        """Send a user message and append the assistant's reply.

        Args:
            text: Message text; surrounding whitespace is ignored.
            image: Image data URI. Defaults to the store's pending image.
        """
        text = text.strip()
        if image is None:
            image = self._store.pending_image
        if not text and not image:
            return
        if self._store.is_busy:
            logger.debug("Ignoring send while a request is in flight")
            return

        self._store.append(Message(role=Role.USER, text=text or None, image=image))
        self._begin_request()

        reply: str | None = None
        try:
            reply = await self._client.complete(build_history(self._store.messages))
        except CompletionError as e:
            logger.error(f"Error sending message: {e}")
            self._store.set_error(str(e))
        else:
            self._store.append(Message(role=Role.ASSISTANT, text=reply))
        finally:
            self._store.set_busy(False)
            self._store.set_pending_image(None)

        if reply is not None and not image:
            await self.get_suggestions(reply)

    async def get_suggestions(self, last_assistant_text: str) -> None:
        """Fetch up to three suggested replies.

        Any failure leaves the suggestions empty and is only logged.
        """
        generation = self._generation
        log_length = len(self._store.messages)

        try:
            raw = await self._client.complete(build_suggestion_prompt(last_assistant_text))
        except CompletionError as e:
            logger.warning(f"Error fetching suggestions: {e}")
            return

        suggestions = parse_suggestions(raw)
        if not suggestions:
            return

        if (
            self._store.is_busy
            or generation != self._generation
            or log_length != len(self._store.messages)
        ):
            logger.debug("Discarding suggestions for an outdated message")
            return

        self._store.set_suggestions(suggestions)

    async def summarize(self) -> None:
        """Append a one-paragraph summary of the whole log as a summary-note."""
        if self._store.is_busy:
            return

        self._begin_request()
        prompt = build_summary_prompt(self._store.messages)

        try:
            summary = await self._client.complete(prompt)
        except CompletionError as e:
            logger.error(f"Error summarizing conversation: {e}")
            self._store.set_error(SUMMARY_ERROR)
        else:
            self._store.append(Message(role=Role.SUMMARY, text=summary))
        finally:
            self._store.set_busy(False)
