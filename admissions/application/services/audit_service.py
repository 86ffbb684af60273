"""Audit trail: recording changes and listing them back."""

import json
import logging
from collections.abc import Callable, Iterable
from typing import Any
from uuid import UUID

from admissions.application.dtos.audit_dto import AuditDTO, AuditFilterDTO, CreateAuditDTO
from admissions.domain.entities.audit_record import AuditRecord
from admissions.domain.enums import Operation
from admissions.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


def snapshot(entity: Any, fields: Iterable[str]) -> str:
    """
    Serialize the named attributes of ``entity`` to a JSON object string.

    Dotted names follow nested objects: ``"user.email"``.
    """
    values = {name: _resolve(entity, name) for name in fields}
    return json.dumps(values, default=_json_default, sort_keys=True)


def _resolve(entity: Any, path: str) -> Any:
    for part in path.split("."):
        entity = getattr(entity, part)
    return entity


def _json_default(value: Any) -> Any:
    if hasattr(value, "value"):
        return value.value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


async def record_audit(
    uow: IUnitOfWork,
    *,
    entity: str,
    record_id: UUID,
    actor_id: UUID,
    operation: Operation,
    previous_values: str = "{}",
    detail: str = "",
) -> AuditRecord:
    """
    Write one audit entry through ``uow``.

    The caller commits; the entry shares the transaction of the change it
    describes.
    """
    payload = CreateAuditDTO(
        entity=entity,
        record_id=str(record_id),
        user_id=actor_id,
        previous_values=previous_values,
        detail=detail,
        operation=operation,
    )
    record = await uow.audits.add(
        AuditRecord(
            entity=payload.entity,
            record_id=payload.record_id,
            user_id=payload.user_id,
            previous_values=payload.previous_values,
            operation=payload.operation,
            detail=payload.detail,
        )
    )
    logger.info(
        "Audit %s %s %s by user %s",
        payload.operation.value,
        payload.entity,
        payload.record_id,
        payload.user_id,
    )
    return record


class AuditService:
    """Read side of the audit trail."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        self._uow_factory = uow_factory

    async def list_audits(
        self, filters: AuditFilterDTO, skip: int = 0, limit: int = 100
    ) -> list[AuditDTO]:
        """
        List audit records, newest first.

        Args:
            filters: Optional entity name and record id to narrow the trail
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        async with self._uow_factory() as uow:
            records = await uow.audits.find(
                entity=filters.entity,
                record_id=filters.record_id,
                skip=skip,
                limit=limit,
            )
            return [AuditDTO.model_validate(record) for record in records]
