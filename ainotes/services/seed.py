"""Bulk-create synthetic notes with full AI enrichment.

Each note is an all-or-nothing unit: if its summary, tags or embedding
generation raises, the note is not created and an error is recorded,
and the workflow moves on to the next note.
"""

from __future__ import annotations

import asyncio
import logging
import random
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from ainotes.models import Note
from ainotes.services.batch import ItemFailure, SeedOutcome, run_isolated
from ainotes.services.enrichment import ContentEnrichmentService
from ainotes.services.note_store import NoteStore
from ainotes.services.seed_data import SEED_NOTES

logger = logging.getLogger(__name__)

MAX_AGE_DAYS = 90


@dataclass(frozen=True, slots=True)
class SeedNoteDraft:
    title: str
    content: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class _Enrichment:
    summary: str
    tags: str
    embedding: list[float]


def build_drafts(count: int, *, rng: random.Random | None = None) -> list[SeedNoteDraft]:
    """Return *count* drafts with unique titles and past creation dates."""
    rng = rng or random.Random()
    now = datetime.now(UTC)
    drafts: list[SeedNoteDraft] = []
    for i in range(count):
        title, content = SEED_NOTES[i % len(SEED_NOTES)]
        round_no = i // len(SEED_NOTES)
        if round_no:
            title = f"{title} ({round_no + 1})"
        created_at = now - timedelta(
            days=rng.randint(1, MAX_AGE_DAYS),
            minutes=rng.randint(0, 24 * 60 - 1),
        )
        drafts.append(SeedNoteDraft(title=title, content=content, created_at=created_at))
    return drafts


class SeedNotesWorkflow:
    """Creates a batch of enriched sample notes for one owner."""

    def __init__(
        self,
        enrichment: ContentEnrichmentService,
        store: NoteStore,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._enrichment = enrichment
        self._store = store
        self._rng = rng

    async def run(self, owner_id: str, count: int | None = None) -> SeedOutcome:
        """Seed *count* notes (default from options) for *owner_id*."""
        outcome = SeedOutcome()
        if not owner_id:
            return outcome

        options = self._enrichment.options
        if count is None or count <= 0:
            count = options.default_seed_count

        drafts = build_drafts(count, rng=self._rng)
        results = await run_isolated(
            drafts,
            self._enrich,
            label=lambda draft: draft.title,
            concurrency=options.batch_concurrency,
        )

        now = datetime.now(UTC)
        pending: list[Note] = []
        for draft, result in zip(drafts, results, strict=True):
            if isinstance(result, ItemFailure):
                outcome.errors.append(f"Failed to create note '{result.label}': {result.message}")
                continue

            enrichment: _Enrichment = result.value
            note = Note(
                id=str(uuid.uuid4()),
                title=draft.title,
                content=draft.content,
                ai_summary=enrichment.summary or None,
                tags=enrichment.tags or None,
                embedding=enrichment.embedding or None,
                owner_id=owner_id,
                created_at=draft.created_at,
                updated_at=now,
            )
            pending.append(note)
            if len(pending) >= options.seed_batch_size:
                await self._add_batch(pending, outcome)
                pending = []

        if pending:
            await self._add_batch(pending, outcome)
        await self._store.save()

        logger.info(
            "Seeded %d/%d notes for owner %s (%d errors)",
            outcome.created_count,
            count,
            owner_id,
            len(outcome.errors),
        )
        return outcome

    async def _enrich(self, draft: SeedNoteDraft) -> _Enrichment:
        summary, tags, embedding = await asyncio.gather(
            self._enrichment.request_summary(draft.content),
            self._enrichment.request_tags(draft.title, draft.content),
            self._enrichment.request_embedding(draft.content),
        )
        return _Enrichment(summary=summary, tags=tags, embedding=embedding)

    async def _add_batch(self, notes: list[Note], outcome: SeedOutcome) -> None:
        self._store.add_all(notes)
        await self._store.flush()
        outcome.created_count += len(notes)
        outcome.created_note_ids.extend(note.id for note in notes)
