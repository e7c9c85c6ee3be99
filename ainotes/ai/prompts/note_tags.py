"""Tag prompt: 3-5 lowercase keyword tags as a comma-separated list."""

from __future__ import annotations

from ainotes.ai.schemas import Message

SYSTEM_PROMPT = (
    "You are a helpful assistant that generates relevant tags for notes. "
    "Generate 3-5 relevant, specific tags that categorize the content. "
    "Return ONLY the tags as a comma-separated list with no extra text. "
    "Use lowercase, keep tags concise (1-3 words each)."
)

USER_PROMPT_TEMPLATE = "Generate tags for this note:\n\nTitle: {title}\n\nContent: {content}"

MAX_CONTENT_LENGTH = 12000


def build_messages(title: str, content: str, max_length: int = MAX_CONTENT_LENGTH) -> list[Message]:
    """Build message list for tag generation.

    Raises:
        ValueError: If both title and content are empty or whitespace-only.
    """
    title = title or ""
    content = content or ""
    if not title.strip() and not content.strip():
        raise ValueError("title or content must not be empty")

    return [
        Message(role="system", content=SYSTEM_PROMPT),
        Message(
            role="user",
            content=USER_PROMPT_TEMPLATE.format(title=title, content=content[:max_length]),
        ),
    ]


def clean_tags(raw: str) -> str:
    """Normalise a model response into ``"tag1, tag2, tag3"``.

    Quotes are stripped, items are trimmed and empty items dropped.
    """
    cleaned = raw.replace('"', "").replace("'", "").strip()
    items = [item.strip() for item in cleaned.split(",")]
    return ", ".join(item for item in items if item)
