"""Note persistence over an async SQLAlchemy session.

The enrichment core only needs a handful of record-store operations: add,
find by id, query an owner's notes with a filter, and save. Everything
else about transactions belongs to the session owner (``get_db``).
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.models import Note


class NoteStore:
    """Thin record store for ``Note`` rows."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, note_id: str, owner_id: str | None = None) -> Note | None:
        """Return the note, or None when missing or owned by someone else."""
        stmt = select(Note).where(Note.id == note_id)
        if owner_id is not None:
            stmt = stmt.where(Note.owner_id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_owner(
        self,
        owner_id: str,
        *,
        only_missing_tags: bool = False,
        with_embedding: bool = False,
    ) -> list[Note]:
        """Load an owner's notes in creation order.

        Args:
            owner_id: Opaque owner identifier.
            only_missing_tags: Keep only notes whose tags are null or empty.
            with_embedding: Keep only notes that have an embedding.
        """
        stmt = select(Note).where(Note.owner_id == owner_id)
        if only_missing_tags:
            stmt = stmt.where(or_(Note.tags.is_(None), Note.tags == ""))
        if with_embedding:
            stmt = stmt.where(Note.embedding.is_not(None))
        stmt = stmt.order_by(Note.created_at, Note.id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def embeddings_for_owner(self, owner_id: str) -> list[tuple[str, list[float]]]:
        """Return ``(note_id, embedding)`` pairs for notes that have one."""
        stmt = (
            select(Note.id, Note.embedding)
            .where(Note.owner_id == owner_id)
            .where(Note.embedding.is_not(None))
            .order_by(Note.created_at, Note.id)
        )
        result = await self._session.execute(stmt)
        # JSON null may still come back as None on some backends.
        return [(note_id, list(embedding)) for note_id, embedding in result.all() if embedding]

    async def get_many(self, note_ids: Iterable[str], owner_id: str) -> dict[str, Note]:
        ids = list(note_ids)
        if not ids:
            return {}
        stmt = select(Note).where(Note.owner_id == owner_id).where(Note.id.in_(ids))
        result = await self._session.execute(stmt)
        return {note.id: note for note in result.scalars().all()}

    def add(self, note: Note) -> None:
        self._session.add(note)

    def add_all(self, notes: Iterable[Note]) -> None:
        self._session.add_all(list(notes))

    async def flush(self) -> None:
        await self._session.flush()

    async def save(self) -> None:
        """Commit pending changes."""
        await self._session.commit()
