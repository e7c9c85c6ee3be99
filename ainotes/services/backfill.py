"""Backfill AI tags for an owner's existing notes."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from ainotes.models import Note
from ainotes.services.batch import BatchOutcome, ItemFailure, run_isolated
from ainotes.services.enrichment import ContentEnrichmentService
from ainotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)


class BackfillTagsWorkflow:
    """Regenerates tags for notes, optionally only those without tags.

    A note whose tag generation raises is left untouched and reported in
    ``BatchOutcome.errors``; the remaining notes are still processed.
    """

    def __init__(self, enrichment: ContentEnrichmentService, store: NoteStore) -> None:
        self._enrichment = enrichment
        self._store = store

    async def run(self, owner_id: str, only_missing: bool = True) -> BatchOutcome:
        """Backfill tags for *owner_id*'s notes.

        Args:
            owner_id: Opaque owner identifier; empty means nothing to do.
            only_missing: Only process notes whose tags are null or empty.

        Returns:
            BatchOutcome with totals and one error string per failed note.
        """
        outcome = BatchOutcome()
        if not owner_id:
            return outcome

        notes = await self._store.list_for_owner(owner_id, only_missing_tags=only_missing)
        outcome.total_notes = len(notes)
        if not notes:
            return outcome

        options = self._enrichment.options
        results = await run_isolated(
            notes,
            self._tags_for,
            label=lambda note: note.title,
            concurrency=options.batch_concurrency,
        )

        for note, result in zip(notes, results, strict=True):
            if isinstance(result, ItemFailure):
                outcome.errors.append(
                    f"Failed to generate tags for note '{result.label}': {result.message}"
                )
                continue

            note.tags = result.value or None
            note.updated_at = datetime.now(UTC)
            outcome.processed_count += 1
            if outcome.processed_count % options.backfill_flush_every == 0:
                await self._store.flush()

        await self._store.save()
        logger.info(
            "Backfilled tags for owner %s: %d/%d processed, %d errors",
            owner_id,
            outcome.processed_count,
            outcome.total_notes,
            len(outcome.errors),
        )
        return outcome

    async def _tags_for(self, note: Note) -> str:
        return await self._enrichment.request_tags(note.title, note.content)
