"""Audit repository implementation using SQLAlchemy."""

from typing import List, Optional

from sqlalchemy import select

from admissions.domain.entities.audit_record import AuditRecord
from admissions.domain.repositories.audit_repository import IAuditRepository
from admissions.infrastructure.persistence.models.audit_model import AuditModel
from admissions.infrastructure.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)


class AuditRepository(SQLAlchemyRepository[AuditRecord], IAuditRepository):
    """Append-only: ``update`` is refused."""

    model = AuditModel

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[AuditRecord]:
        return await self.find(skip=skip, limit=limit)

    async def find(
        self,
        entity: Optional[str] = None,
        record_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[AuditRecord]:
        query = select(AuditModel)
        if entity is not None:
            query = query.where(AuditModel.entity == entity)
        if record_id is not None:
            query = query.where(AuditModel.record_id == record_id)

        return await self._many(
            query.order_by(AuditModel.created_at.desc()).offset(skip).limit(limit)
        )

    async def update(self, entity: AuditRecord) -> AuditRecord:
        raise NotImplementedError("Audit records are append-only")
