"""Audit trail entry."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.domain.entities.user import User
from admissions.domain.enums import Operation
from admissions.domain.exceptions import InvalidEntityStateException


@dataclass
class AuditRecord:
    """
    One change made by a user to a record.

    ``previous_values`` holds a JSON snapshot of the fields before the change
    (empty object for creations).
    """

    entity: str
    record_id: str
    user_id: UUID
    previous_values: str
    operation: Operation
    detail: str = ""
    user: Optional[User] = None
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.entity:
            raise InvalidEntityStateException("Audit record must name the audited entity.")

        if not self.record_id:
            raise InvalidEntityStateException("Audit record must reference a record id.")

        self.operation = Operation(self.operation)
