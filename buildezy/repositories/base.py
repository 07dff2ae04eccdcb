"""Generic async repository: every method is exactly one SQL statement."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import String, Table, cast, delete, insert, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from buildezy.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Single-statement CRUD over one table.

    Writes use ``RETURNING`` so the affected row comes back from the same
    statement, and each write is committed on its own.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def table(self) -> Table:
        return self.model.__table__

    def _id_matches(self, entity_id: str):
        # Path ids arrive as text and are cast by the database, so a
        # malformed id fails there like any other bad input.
        id_col = self.table.c.id
        return id_col == cast(literal(entity_id, String), id_col.type)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_newest_first(self) -> list[dict[str, Any]]:
        t = self.table
        result = await self._session.execute(
            select(t).order_by(t.c.created_at.desc(), t.c.id.desc())
        )
        return [dict(row) for row in result.mappings()]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **values: Any) -> dict[str, Any]:
        t = self.table
        result = await self._session.execute(insert(t).values(**values).returning(*t.c))
        row = dict(result.mappings().one())
        await self._session.commit()
        return row

    async def update(self, entity_id: str, **values: Any) -> dict[str, Any] | None:
        t = self.table
        result = await self._session.execute(
            update(t).where(self._id_matches(entity_id)).values(**values).returning(*t.c)
        )
        row = result.mappings().first()
        await self._session.commit()
        return dict(row) if row is not None else None

    async def delete(self, entity_id: str) -> dict[str, Any] | None:
        t = self.table
        result = await self._session.execute(
            delete(t).where(self._id_matches(entity_id)).returning(*t.c)
        )
        row = result.mappings().first()
        await self._session.commit()
        return dict(row) if row is not None else None
