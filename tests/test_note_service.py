"""Tests for NoteService against a real SQLite store and fake AI ports."""

from __future__ import annotations

import pytest

from ainotes.models import Note
from ainotes.services.enrichment import ContentEnrichmentService, EnrichmentOptions
from ainotes.services.note_service import NoteService
from ainotes.services.note_store import NoteStore
from tests.fakes import FakeChatPort, FakeEmbeddingPort


def _service(test_db, chat=None, embedder=None) -> NoteService:
    store = NoteStore(test_db)
    enrichment = ContentEnrichmentService(
        chat or FakeChatPort(reply="a summary"),
        embedder or FakeEmbeddingPort(),
        store=store,
        options=EnrichmentOptions(retry_attempts=1),
    )
    return NoteService(enrichment, store)


@pytest.mark.asyncio
async def test_create_note_enriches_and_persists(test_db):
    service = _service(test_db)

    note = await service.create_note("alice", "Title", "Body text")

    assert note.id
    assert note.ai_summary == "a summary"
    assert note.tags == "a summary"
    assert note.embedding is not None and len(note.embedding) == 8
    assert await test_db.get(Note, note.id) is note


@pytest.mark.asyncio
async def test_create_note_stores_none_when_enrichment_degrades(test_db):
    service = _service(
        test_db,
        chat=FakeChatPort(fail_on={"Body"}),
        embedder=FakeEmbeddingPort(fail_on={"Body"}),
    )

    note = await service.create_note("alice", "Title", "Body text")

    assert note.ai_summary is None
    assert note.tags is None
    assert note.embedding is None


@pytest.mark.asyncio
async def test_update_note_checks_owner(test_db):
    service = _service(test_db)
    note = await service.create_note("alice", "Title", "Body")

    assert await service.update_note("bob", note.id, "x", "y") is None
    assert note.title == "Title"

    updated = await service.update_note("alice", note.id, "New", "Changed body")
    assert updated is note
    assert note.title == "New"
    assert note.content == "Changed body"


@pytest.mark.asyncio
async def test_related_notes_ranked_and_excluding_self(test_db):
    test_db.add_all(
        [
            Note(id="a", title="A", content="", owner_id="u1", embedding=[1.0, 0.0]),
            Note(id="b", title="B", content="", owner_id="u1", embedding=[0.9, 0.1], ai_summary="bee"),
            Note(id="c", title="C", content="", owner_id="u1", embedding=[0.0, 1.0]),
            Note(id="d", title="D", content="", owner_id="u2", embedding=[1.0, 0.0]),
        ]
    )
    await test_db.flush()
    service = _service(test_db)

    related = await service.get_related_notes("u1", "a")

    assert [item.note_id for item in related] == ["b", "c"]
    assert related[0].title == "B"
    assert related[0].ai_summary == "bee"
    assert related[0].similarity == pytest.approx(0.9939, abs=1e-4)
    assert related[1].similarity == 0.0

    top_one = await service.get_related_notes("u1", "a", top_n=1)
    assert [item.note_id for item in top_one] == ["b"]


@pytest.mark.asyncio
async def test_related_notes_empty_without_embedding_or_note(test_db):
    test_db.add_all(
        [
            Note(id="plain", title="P", content="", owner_id="u1", embedding=None),
            Note(id="other", title="O", content="", owner_id="u1", embedding=[1.0]),
        ]
    )
    await test_db.flush()
    service = _service(test_db)

    assert await service.get_related_notes("u1", "plain") == []
    assert await service.get_related_notes("u1", "missing") == []
    assert await service.get_related_notes("u2", "other") == []
