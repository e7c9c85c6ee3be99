"""Tests for the notes and admin API endpoints.

AI ports are replaced by fakes through dependency overrides (see conftest).

Covers:
- POST /api/notes: enrichment stored; provider outage still creates the note
- PUT /api/notes/{id}: re-enrichment, 404 for missing / foreign notes
- GET /api/notes/{id}/related: ordering, top_n, unenriched notes
- POST /api/admin/backfill-tags and /api/admin/seed
- Auth: 401 without token
"""

from __future__ import annotations

import pytest

from tests.conftest import make_auth_headers


async def _create(client, title: str, content: str, sub: str = "testuser") -> dict:
    response = await client.post(
        "/api/notes",
        json={"title": title, "content": content},
        headers=make_auth_headers(sub),
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_health(test_client):
    response = await test_client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_requires_authentication(test_client):
    response = await test_client.post("/api/notes", json={"title": "t", "content": "c"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_rejects_invalid_token(test_client):
    response = await test_client.post(
        "/api/notes",
        json={"title": "t", "content": "c"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_note_stores_enrichment(test_client, chat_port, embedding_port):
    chat_port.reply = "python, testing"

    body = await _create(test_client, "Pytest tips", "Use fixtures and parametrize.")

    assert body["title"] == "Pytest tips"
    assert body["ai_summary"] == "python, testing"
    assert body["tags"] == "python, testing"
    assert body["has_embedding"] is True
    assert embedding_port.calls == ["Use fixtures and parametrize."]


@pytest.mark.asyncio
async def test_create_note_survives_provider_outage(test_client, chat_port, embedding_port):
    chat_port.fail_on = {"outage"}
    embedding_port.fail_on = {"outage"}

    body = await _create(test_client, "Offline", "written during an outage")

    assert body["ai_summary"] is None
    assert body["tags"] is None
    assert body["has_embedding"] is False


@pytest.mark.asyncio
async def test_update_note_re_enriches(test_client, chat_port):
    created = await _create(test_client, "Draft", "first version")
    chat_port.reply = "updated"

    response = await test_client.put(
        f"/api/notes/{created['id']}",
        json={"title": "Final", "content": "second version"},
        headers=make_auth_headers(),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Final"
    assert body["content"] == "second version"
    assert body["tags"] == "updated"


@pytest.mark.asyncio
async def test_update_missing_note_returns_404(test_client):
    response = await test_client.put(
        "/api/notes/does-not-exist",
        json={"title": "x", "content": "y"},
        headers=make_auth_headers(),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_other_owners_note_returns_404(test_client):
    created = await _create(test_client, "Private", "alice only", sub="alice")

    response = await test_client.put(
        f"/api/notes/{created['id']}",
        json={"title": "hijack", "content": "nope"},
        headers=make_auth_headers("mallory"),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_related_notes_excludes_self_and_respects_top_n(test_client):
    first = await _create(test_client, "One", "alpha")
    second = await _create(test_client, "Two", "beta")
    third = await _create(test_client, "Three", "gamma")
    await _create(test_client, "Elsewhere", "delta", sub="someone-else")

    response = await test_client.get(f"/api/notes/{first['id']}/related", headers=make_auth_headers())
    assert response.status_code == 200
    related = response.json()["related_notes"]
    ids = [item["id"] for item in related]
    assert set(ids) == {second["id"], third["id"]}
    sims = [item["similarity"] for item in related]
    assert sims == sorted(sims, reverse=True)

    response = await test_client.get(
        f"/api/notes/{first['id']}/related", params={"top_n": 1}, headers=make_auth_headers()
    )
    assert len(response.json()["related_notes"]) == 1


@pytest.mark.asyncio
async def test_related_notes_empty_when_note_has_no_embedding(test_client, embedding_port):
    embedding_port.fail_on = {"no-vector"}
    await _create(test_client, "Has vector", "some text")
    lonely = await _create(test_client, "No vector", "no-vector here")

    response = await test_client.get(f"/api/notes/{lonely['id']}/related", headers=make_auth_headers())

    assert response.status_code == 200
    assert response.json() == {"related_notes": []}


@pytest.mark.asyncio
async def test_backfill_tags_endpoint(test_client, chat_port):
    chat_port.fail_on = {"untagged"}
    await _create(test_client, "Needs tags", "untagged content")
    await _create(test_client, "Has tags", "normal content")
    chat_port.fail_on = set()
    chat_port.reply = "backfilled"

    response = await test_client.post(
        "/api/admin/backfill-tags", json={"only_missing": True}, headers=make_auth_headers()
    )

    assert response.status_code == 200
    assert response.json() == {"total_notes": 1, "processed_count": 1, "errors": []}


@pytest.mark.asyncio
async def test_seed_endpoint(test_client):
    response = await test_client.post("/api/admin/seed", json={"count": 3}, headers=make_auth_headers())

    assert response.status_code == 200
    body = response.json()
    assert body["created_count"] == 3
    assert len(body["created_note_ids"]) == 3
    assert body["errors"] == []


@pytest.mark.asyncio
async def test_rejects_non_bearer_scheme(test_client):
    response = await test_client.post(
        "/api/notes",
        json={"title": "t", "content": "c"},
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_openapi_declares_http_bearer_security(test_client):
    response = await test_client.get("/openapi.json")

    schemes = response.json()["components"]["securitySchemes"]
    assert list(schemes.values()) == [{"type": "http", "scheme": "bearer"}]
