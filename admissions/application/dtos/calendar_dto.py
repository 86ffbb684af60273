"""Calendar event DTOs (deposits, interviews, fee deadlines)."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import (
    IsoDateTime,
    NonEmptyStr,
    RequestDTO,
    ResponseDTO,
)
from admissions.application.dtos.shared_dto import ApplicationSummaryDTO
from admissions.domain.enums import EventCategory


class CreateCalendarDTO(RequestDTO):
    start_date: IsoDateTime
    end_date: IsoDateTime
    event_category: EventCategory
    title: NonEmptyStr
    description: NonEmptyStr
    application_id: UUID
    external_id: NonEmptyStr
    color: NonEmptyStr
    google_color: Optional[str] = None
    google_calender_event_id: Optional[str] = None
    employee_id: UUID


class EditCalendarDTO(RequestDTO):
    id: NonEmptyStr
    start_date: Optional[IsoDateTime] = None
    end_date: Optional[IsoDateTime] = None
    title: Optional[str] = None
    description: Optional[str] = None
    application_id: Optional[str] = None
    external_id: Optional[str] = None
    is_attended: Optional[bool] = None
    google_calender_event_id: Optional[str] = None


class CalendarDTO(ResponseDTO):
    id: UUID
    start_date: datetime
    end_date: datetime
    title: str
    description: str
    color: str
    application: Optional[ApplicationSummaryDTO] = None
