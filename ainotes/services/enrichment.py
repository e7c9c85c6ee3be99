"""Content enrichment: summaries, tags, embeddings and related notes.

Empty input short-circuits without a provider call. The ``request_*``
methods raise ``ProviderError`` when the provider fails; the
``generate_*`` methods log the failure and degrade to an empty result,
so creating or updating a note never fails on a provider outage.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from ainotes.ai.ports import ChatCompletionPort, EmbeddingPort
from ainotes.ai.prompts import note_summary, note_tags
from ainotes.ai.retry import with_retry
from ainotes.ai.schemas import ChatOptions
from ainotes.config import Settings
from ainotes.services import similarity
from ainotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)


class EnrichmentOptions(BaseModel):
    """Immutable tuning knobs for the enrichment service and batch workflows.

    Attributes:
        max_summary_tokens: Output cap for summaries.
        summary_temperature: Sampling temperature for summaries.
        max_tag_tokens: Output cap for tag lists.
        tag_temperature: Sampling temperature for tag lists.
        related_notes_count: Default top-N for related-note lookups.
        similarity_threshold: Optional minimum cosine score; None disables it.
        max_content_chars: Content is truncated to this many characters
            before prompting.
        retry_attempts: Total attempts per provider call (1 = no retry).
        retry_base_delay: Backoff before the first retry, in seconds.
        batch_concurrency: Concurrent enrichment calls in batch workflows.
        backfill_flush_every: Backfill flushes after this many updates.
        seed_batch_size: Seed adds notes to the session in groups of this size.
        default_seed_count: Notes generated when no seed count is given.
    """

    model_config = ConfigDict(frozen=True)

    max_summary_tokens: int = Field(default=150, gt=0)
    summary_temperature: float = 0.5
    max_tag_tokens: int = Field(default=50, gt=0)
    tag_temperature: float = 0.3
    related_notes_count: int = Field(default=5, gt=0)
    similarity_threshold: float | None = None
    max_content_chars: int = Field(default=12000, gt=0)
    retry_attempts: int = Field(default=2, ge=1)
    retry_base_delay: float = Field(default=0.5, ge=0.0)
    batch_concurrency: int = Field(default=1, ge=1)
    backfill_flush_every: int = Field(default=5, ge=1)
    seed_batch_size: int = Field(default=10, ge=1)
    default_seed_count: int = Field(default=50, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> EnrichmentOptions:
        return cls(
            max_summary_tokens=settings.MAX_SUMMARY_TOKENS,
            related_notes_count=settings.RELATED_NOTES_COUNT,
            similarity_threshold=settings.SIMILARITY_THRESHOLD,
            retry_attempts=settings.AI_RETRY_ATTEMPTS,
            retry_base_delay=settings.AI_RETRY_BASE_DELAY,
            batch_concurrency=settings.BATCH_CONCURRENCY,
        )


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


class ContentEnrichmentService:
    """Generates AI enrichment for notes and finds semantically related notes.

    Args:
        chat: Chat completion port used for summaries and tags.
        embedder: Embedding port.
        store: Note store used by ``find_related_notes``.
        options: Tuning constants; defaults apply when omitted.
    """

    def __init__(
        self,
        chat: ChatCompletionPort,
        embedder: EmbeddingPort,
        store: NoteStore | None = None,
        options: EnrichmentOptions | None = None,
    ) -> None:
        self._chat = chat
        self._embedder = embedder
        self._store = store
        self._options = options or EnrichmentOptions()

    @property
    def options(self) -> EnrichmentOptions:
        return self._options

    async def request_summary(self, content: str | None) -> str:
        """Summarize *content*, letting provider errors propagate.

        Blank content returns ``""`` without a provider call.
        """
        if _is_blank(content):
            return ""

        messages = note_summary.build_messages(content, max_length=self._options.max_content_chars)
        chat_options = ChatOptions(
            max_tokens=self._options.max_summary_tokens,
            temperature=self._options.summary_temperature,
        )
        text = await self._call(lambda: self._chat.complete_chat(messages, chat_options))
        return text.strip()

    async def request_tags(self, title: str | None, content: str | None) -> str:
        """Tag a note, letting provider errors propagate."""
        if _is_blank(title) and _is_blank(content):
            return ""

        messages = note_tags.build_messages(
            title or "", content or "", max_length=self._options.max_content_chars
        )
        chat_options = ChatOptions(
            max_tokens=self._options.max_tag_tokens,
            temperature=self._options.tag_temperature,
        )
        text = await self._call(lambda: self._chat.complete_chat(messages, chat_options))
        return note_tags.clean_tags(text)

    async def request_embedding(self, content: str | None) -> list[float]:
        """Embed *content*, letting provider errors propagate."""
        if _is_blank(content):
            return []

        vector = await self._call(lambda: self._embedder.generate_embedding(content))
        return list(vector or [])

    async def generate_summary(self, content: str | None) -> str:
        """Return a 1-2 sentence summary of *content*, or ``""`` on failure."""
        try:
            return await self.request_summary(content)
        except Exception:
            logger.exception("Failed to generate summary")
            return ""

    async def generate_tags(self, title: str | None, content: str | None) -> str:
        """Return comma-separated tags for a note, or ``""`` on failure."""
        try:
            return await self.request_tags(title, content)
        except Exception:
            logger.exception("Failed to generate tags")
            return ""

    async def generate_embedding(self, content: str | None) -> list[float]:
        """Return the embedding of *content*, or ``[]`` on failure."""
        try:
            return await self.request_embedding(content)
        except Exception:
            logger.exception("Failed to generate embedding")
            return []

    async def find_related_notes(
        self,
        query_embedding: Sequence[float] | None,
        owner_id: str,
        exclude_note_id: str | None = None,
        top_n: int | None = None,
    ) -> list[str]:
        """Return ids of the owner's notes most similar to *query_embedding*.

        Notes without an embedding are skipped. ``top_n`` falls back to
        ``related_notes_count`` when None or non-positive.
        """
        scored = await self.score_related_notes(query_embedding, owner_id, exclude_note_id, top_n)
        return [note_id for note_id, _ in scored]

    async def score_related_notes(
        self,
        query_embedding: Sequence[float] | None,
        owner_id: str,
        exclude_note_id: str | None = None,
        top_n: int | None = None,
    ) -> list[tuple[str, float]]:
        """Like ``find_related_notes`` but keeps the similarity scores."""
        if not query_embedding or not owner_id:
            return []
        if self._store is None:
            raise RuntimeError("ContentEnrichmentService needs a NoteStore to find related notes")

        limit = top_n if top_n is not None and top_n > 0 else self._options.related_notes_count
        try:
            candidates = await self._store.embeddings_for_owner(owner_id)
        except Exception:
            logger.exception("Failed to load embeddings for owner %s", owner_id)
            return []

        return similarity.score(
            query_embedding,
            candidates,
            exclude_id=exclude_note_id,
            top_n=limit,
            min_similarity=self._options.similarity_threshold,
        )

    async def _call(self, call):
        return await with_retry(
            call,
            attempts=self._options.retry_attempts,
            base_delay=self._options.retry_base_delay,
        )
