"""Admin API: batch tag backfill and sample-note seeding."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ainotes.api.deps import get_enrichment_service, get_note_store
from ainotes.services.auth_service import get_current_owner
from ainotes.services.backfill import BackfillTagsWorkflow
from ainotes.services.enrichment import ContentEnrichmentService
from ainotes.services.note_store import NoteStore
from ainotes.services.seed import SeedNotesWorkflow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


class BackfillTagsRequest(BaseModel):
    only_missing: bool = True


class BackfillTagsResponse(BaseModel):
    total_notes: int
    processed_count: int
    errors: list[str]


class SeedNotesRequest(BaseModel):
    count: int | None = Field(default=None, le=500)


class SeedNotesResponse(BaseModel):
    created_count: int
    created_note_ids: list[str]
    errors: list[str]


@router.post("/backfill-tags", response_model=BackfillTagsResponse)
async def backfill_tags(
    body: BackfillTagsRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    enrichment: Annotated[ContentEnrichmentService, Depends(get_enrichment_service)],
    store: Annotated[NoteStore, Depends(get_note_store)],
) -> BackfillTagsResponse:
    outcome = await BackfillTagsWorkflow(enrichment, store).run(owner_id, only_missing=body.only_missing)
    return BackfillTagsResponse(
        total_notes=outcome.total_notes,
        processed_count=outcome.processed_count,
        errors=outcome.errors,
    )


@router.post("/seed", response_model=SeedNotesResponse)
async def seed_notes(
    body: SeedNotesRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    enrichment: Annotated[ContentEnrichmentService, Depends(get_enrichment_service)],
    store: Annotated[NoteStore, Depends(get_note_store)],
) -> SeedNotesResponse:
    outcome = await SeedNotesWorkflow(enrichment, store).run(owner_id, count=body.count)
    return SeedNotesResponse(
        created_count=outcome.created_count,
        created_note_ids=outcome.created_note_ids,
        errors=outcome.errors,
    )
