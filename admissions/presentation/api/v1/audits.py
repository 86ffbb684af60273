"""Audit trail API endpoints (Admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from admissions.application.dtos.audit_dto import AuditDTO, AuditFilterDTO
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.services.audit_service import AuditService
from admissions.presentation.dependencies import get_audit_service, require_admin

router = APIRouter(prefix="/audits", tags=["audits"])


@router.get(
    "",
    response_model=list[AuditDTO],
    summary="List audit records",
    description="Newest first. Filter by entity name and record id.",
)
async def list_audits(
    filters: Annotated[AuditFilterDTO, Query()],
    current_user: UserDTO = Depends(require_admin),
    service: AuditService = Depends(get_audit_service),
) -> list[AuditDTO]:
    return await service.list_audits(filters, skip=filters.skip, limit=filters.limit)
