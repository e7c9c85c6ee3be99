"""Note create/update with AI enrichment, and related-note lookup."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from ainotes.models import Note
from ainotes.services.enrichment import ContentEnrichmentService
from ainotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RelatedNoteItem:
    note_id: str
    title: str
    ai_summary: str | None
    similarity: float
    updated_at: datetime


class NoteService:
    """Writes notes together with their enrichment.

    Provider failures never fail a write: missing enrichment is stored as
    None and can be filled in later by the backfill workflow.
    """

    def __init__(self, enrichment: ContentEnrichmentService, store: NoteStore) -> None:
        self._enrichment = enrichment
        self._store = store

    async def create_note(self, owner_id: str, title: str, content: str) -> Note:
        note = Note(owner_id=owner_id, title=title, content=content)
        await self._apply_enrichment(note)
        self._store.add(note)
        await self._store.flush()
        return note

    async def update_note(self, owner_id: str, note_id: str, title: str, content: str) -> Note | None:
        note = await self._store.get(note_id, owner_id=owner_id)
        if note is None:
            return None

        note.title = title
        note.content = content
        await self._apply_enrichment(note)
        note.updated_at = datetime.now(UTC)
        await self._store.flush()
        return note

    async def get_related_notes(
        self, owner_id: str, note_id: str, top_n: int | None = None
    ) -> list[RelatedNoteItem]:
        """Return the notes most similar to *note_id*, best match first.

        A missing note, or one without an embedding, has no related notes.
        """
        note = await self._store.get(note_id, owner_id=owner_id)
        if note is None or not note.embedding:
            logger.debug("No embedding for note %s; no related notes", note_id)
            return []

        scored = await self._enrichment.score_related_notes(
            note.embedding, owner_id, exclude_note_id=note.id, top_n=top_n
        )
        if not scored:
            return []

        by_id = await self._store.get_many([nid for nid, _ in scored], owner_id)
        return [
            RelatedNoteItem(
                note_id=nid,
                title=by_id[nid].title,
                ai_summary=by_id[nid].ai_summary,
                similarity=round(similarity, 4),
                updated_at=by_id[nid].updated_at,
            )
            for nid, similarity in scored
            if nid in by_id
        ]

    async def _apply_enrichment(self, note: Note) -> None:
        summary, tags, embedding = await asyncio.gather(
            self._enrichment.generate_summary(note.content),
            self._enrichment.generate_tags(note.title, note.content),
            self._enrichment.generate_embedding(note.content),
        )
        note.ai_summary = summary or None
        note.tags = tags or None
        note.embedding = embedding or None
