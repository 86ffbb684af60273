"""Audit trail ORM model. Rows are insert-only."""

import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admissions.domain.entities.audit_record import AuditRecord
from admissions.domain.enums import Operation
from admissions.infrastructure.persistence.database import Base, enum_type
from admissions.infrastructure.persistence.models.user_model import UserModel


class AuditModel(Base):
    __tablename__ = "audits"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    entity: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    record_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), nullable=False)
    previous_values: Mapped[str] = mapped_column(Text, nullable=False)
    detail: Mapped[str] = mapped_column(Text, default="", nullable=False)
    operation: Mapped[Operation] = mapped_column(enum_type(Operation), nullable=False)
    created_at: Mapped[datetime] = mapped_column(insert_default=func.now(), nullable=False)

    user: Mapped[UserModel] = relationship(lazy="selectin")

    def to_entity(self) -> AuditRecord:
        return AuditRecord(
            id=self.id,
            entity=self.entity,
            record_id=self.record_id,
            user_id=self.user_id,
            previous_values=self.previous_values,
            detail=self.detail,
            operation=self.operation,
            user=self.user.to_entity() if self.user is not None else None,
            created_at=self.created_at,
        )

    @staticmethod
    def from_entity(record: AuditRecord) -> "AuditModel":
        return AuditModel(
            entity=record.entity,
            record_id=record.record_id,
            user_id=record.user_id,
            previous_values=record.previous_values,
            detail=record.detail,
            operation=record.operation,
        )
