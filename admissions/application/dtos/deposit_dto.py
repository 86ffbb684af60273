"""Tuition deposit DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import IsoDateTime, RequestDTO, ResponseDTO
from admissions.domain.enums import PaymentStatus


class CreateDepositDTO(RequestDTO):
    status: PaymentStatus = PaymentStatus.PENDING
    is_deposited: bool = False
    is_blocked: bool = False
    expiration: IsoDateTime


class EditDepositDTO(RequestDTO):
    status: Optional[PaymentStatus] = PaymentStatus.PENDING
    is_deposited: bool
    is_blocked: bool
    expiration: Optional[IsoDateTime] = None
    application_id: UUID


class DepositDTO(ResponseDTO):
    status: PaymentStatus
    is_deposited: bool
    is_blocked: bool
    expiration: datetime
