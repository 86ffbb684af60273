"""Shared plumbing for the SQLAlchemy repositories.

Each ORM model exposes ``from_entity``, ``to_entity`` and ``apply``; the
base class turns those into the common IRepository operations. Rows are
flushed, never committed: the unit of work owns the transaction.
"""

from typing import Any, ClassVar, Generic, List, Optional, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

E = TypeVar("E")


class SQLAlchemyRepository(Generic[E]):
    model: ClassVar[Any]

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, id: UUID) -> Optional[E]:
        row = await self._session.get(self.model, id)
        return row.to_entity() if row is not None else None

    async def add(self, entity: E) -> E:
        row = self.model.from_entity(entity)

        self._session.add(row)
        await self._session.flush()
        # Pick up database defaults (timestamps) and eager relationships
        await self._session.refresh(row)

        return row.to_entity()

    async def update(self, entity: E) -> E:
        entity_id = getattr(entity, "id", None)
        name = type(entity).__name__

        if entity_id is None:
            raise ValueError(f"Cannot update {name} without ID")

        row = await self._session.get(self.model, entity_id)

        if row is None:
            raise ValueError(f"{name} with ID {entity_id} not found")

        row.apply(entity)
        await self._session.flush()
        await self._session.refresh(row)

        return row.to_entity()

    async def exists(self, id: UUID) -> bool:
        result = await self._session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None

    async def _one(self, query: Select) -> Optional[E]:
        result = await self._session.execute(query)
        row = result.scalar_one_or_none()
        return row.to_entity() if row is not None else None

    async def _many(self, query: Select) -> List[E]:
        result = await self._session.execute(query)
        return [row.to_entity() for row in result.scalars().all()]
