"""Notes API: create and update with AI enrichment, related notes."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from ainotes.api.deps import get_enrichment_service, get_note_store
from ainotes.models import Note
from ainotes.services.auth_service import get_current_owner
from ainotes.services.enrichment import ContentEnrichmentService
from ainotes.services.note_service import NoteService
from ainotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


class NoteWriteRequest(BaseModel):
    title: str = Field(default="", max_length=500)
    content: str = ""


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: str
    ai_summary: str | None = None
    tags: str | None = None
    has_embedding: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_note(cls, note: Note) -> NoteResponse:
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            ai_summary=note.ai_summary,
            tags=note.tags,
            has_embedding=bool(note.embedding),
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class RelatedNoteResponse(BaseModel):
    id: str
    title: str
    ai_summary: str | None = None
    similarity: float
    updated_at: datetime


class RelatedNotesResponse(BaseModel):
    related_notes: list[RelatedNoteResponse]


def get_note_service(
    enrichment: ContentEnrichmentService = Depends(get_enrichment_service),
    store: NoteStore = Depends(get_note_store),
) -> NoteService:
    return NoteService(enrichment, store)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    body: NoteWriteRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    service: Annotated[NoteService, Depends(get_note_service)],
) -> NoteResponse:
    note = await service.create_note(owner_id, body.title, body.content)
    return NoteResponse.from_note(note)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    body: NoteWriteRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    service: Annotated[NoteService, Depends(get_note_service)],
) -> NoteResponse:
    note = await service.update_note(owner_id, note_id, body.title, body.content)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteResponse.from_note(note)


@router.get("/{note_id}/related", response_model=RelatedNotesResponse)
async def get_related_notes(
    note_id: str,
    owner_id: Annotated[str, Depends(get_current_owner)],
    service: Annotated[NoteService, Depends(get_note_service)],
    top_n: Annotated[int | None, Query(ge=1, le=50)] = None,
) -> RelatedNotesResponse:
    items = await service.get_related_notes(owner_id, note_id, top_n=top_n)
    return RelatedNotesResponse(
        related_notes=[
            RelatedNoteResponse(
                id=item.note_id,
                title=item.title,
                ai_summary=item.ai_summary,
                similarity=item.similarity,
                updated_at=item.updated_at,
            )
            for item in items
        ]
    )
