"""Prompt construction for the reply, suggestion and summary calls."""

import json
import logging
import re
from collections.abc import Iterable

from aiko.models.conversation import Message, Role
from aiko.models.schemas import CompletionMessage

logger = logging.getLogger(__name__)

ASSISTANT_NAME = "Aiko"
GREETING = "Hi! I'm Aiko. I'm now powered by OpenRouter! How can I help you today? 💋"

# The transport carries text only; the model is told an image was attached.
IMAGE_MARKER = "[Image is present]"

MAX_SUGGESTIONS = 3

SUGGESTION_PROMPT = (
    'Based on this message from a chatbot named {name}: "{message}", suggest three '
    "short, distinct, and relevant replies for the user. IMPORTANT: Respond ONLY "
    "with a valid JSON array of strings and nothing else. Example: "
    '["That\'s interesting!", "Tell me more.", "Can you explain that?"]'
)

SUMMARY_PROMPT = (
    "Please provide a concise, one-paragraph summary of the following conversation:"
    "\n\n{transcript}"
)

_CODE_FENCE = re.compile(r"^```[\w-]*\s*(.*?)\s*```$", re.DOTALL)


def _content_of(message: Message) -> str:
    text = message.text or ""
    if message.image:
        return f"{IMAGE_MARKER} {text}"
    return text


def build_history(messages: Iterable[Message]) -> list[CompletionMessage]:
    """Turn the visible log into the prompt history for a reply.

    Summary-notes are local recaps and never sent. Messages carrying an image
    are prefixed with IMAGE_MARKER.
    """
    history: list[CompletionMessage] = []
    for message in messages:
        if message.role is Role.SUMMARY:
            continue
        role = "assistant" if message.role is Role.ASSISTANT else "user"
        history.append(CompletionMessage(role=role, content=_content_of(message)))
    return history


def build_suggestion_prompt(last_assistant_text: str) -> list[CompletionMessage]:
    prompt = SUGGESTION_PROMPT.format(name=ASSISTANT_NAME, message=last_assistant_text)
    return [CompletionMessage(role="user", content=prompt)]


def _speaker(role: Role) -> str:
    if role is Role.ASSISTANT:
        return ASSISTANT_NAME
    if role is Role.SUMMARY:
        return "Summary"
    return "User"


def build_transcript(messages: Iterable[Message]) -> str:
    """Render the whole log as 'Speaker: text' lines."""
    return "\n".join(f"{_speaker(m.role)}: {_content_of(m)}" for m in messages)


def build_summary_prompt(messages: Iterable[Message]) -> list[CompletionMessage]:
    prompt = SUMMARY_PROMPT.format(transcript=build_transcript(messages))
    return [CompletionMessage(role="user", content=prompt)]


def parse_suggestions(raw: str) -> list[str]:
    """Parse the model's suggestion reply into at most three strings.

    Returns an empty list for anything that is not a JSON array of strings.
    """
    text = raw.strip()
    fenced = _CODE_FENCE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        logger.warning(f"Suggestions were not valid JSON: {raw[:80]!r}")
        return []

    if not isinstance(parsed, list):
        logger.warning(f"Suggestions were not a JSON array: {type(parsed).__name__}")
        return []

    suggestions = [item.strip() for item in parsed if isinstance(item, str) and item.strip()]
    return suggestions[:MAX_SUGGESTIONS]
