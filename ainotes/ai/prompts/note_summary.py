"""Summary prompt: a brief free-text summary of a single note."""

from __future__ import annotations

from ainotes.ai.schemas import Message

SYSTEM_PROMPT = (
    "You are a helpful assistant that creates concise summaries of notes. "
    "Keep summaries brief (1-2 sentences) and capture the main point."
)

USER_PROMPT_TEMPLATE = "Summarize this note:\n\n{note_content}"

# Maximum characters to send to AI for summary generation
MAX_CONTENT_LENGTH = 12000


def build_messages(note_content: str, max_length: int = MAX_CONTENT_LENGTH) -> list[Message]:
    """Build message list for note summary generation.

    Args:
        note_content: The note content to summarize (truncated to
            *max_length* characters).
        max_length: Character cap applied to the note content.

    Returns:
        A list of Message objects (system + user).

    Raises:
        ValueError: If note_content is empty or whitespace-only.
    """
    if not note_content or not note_content.strip():
        raise ValueError("note_content must not be empty")

    return [
        Message(role="system", content=SYSTEM_PROMPT),
        Message(
            role="user",
            content=USER_PROMPT_TEMPLATE.format(note_content=note_content[:max_length]),
        ),
    ]
