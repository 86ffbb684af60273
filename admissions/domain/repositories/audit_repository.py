"""Audit trail repository interface."""

from abc import abstractmethod
from typing import List, Optional

from admissions.domain.entities.audit_record import AuditRecord
from admissions.domain.repositories.base import IRepository


class IAuditRepository(IRepository[AuditRecord]):
    """
    Audit records are append-only; ``update`` is part of the base contract
    but implementations refuse it.
    """

    @abstractmethod
    async def find(
        self,
        entity: Optional[str] = None,
        record_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[AuditRecord]:
        """List audit records, newest first, optionally for one entity/record."""
        pass
