"""Application repository implementation using SQLAlchemy."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from admissions.domain.entities.application import Application
from admissions.domain.enums import (
    AdmissionStatus,
    ApplicationStatus,
    Country,
    Season,
)
from admissions.domain.repositories.application_repository import (
    IApplicationRepository,
)
from admissions.infrastructure.persistence.models.application_model import (
    ApplicationModel,
)
from admissions.infrastructure.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)


class ApplicationRepository(SQLAlchemyRepository[Application], IApplicationRepository):
    model = ApplicationModel

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[Application]:
        return await self.find(skip=skip, limit=limit)

    async def find(
        self,
        student_id: Optional[UUID] = None,
        country: Optional[Country] = None,
        intake: Optional[Season] = None,
        application_status: Optional[ApplicationStatus] = None,
        admission_status: Optional[AdmissionStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Application]:
        query = select(ApplicationModel)

        if student_id is not None:
            query = query.where(ApplicationModel.student_id == student_id)
        if country is not None:
            query = query.where(ApplicationModel.country == country)
        if intake is not None:
            query = query.where(ApplicationModel.intake == intake)
        if application_status is not None:
            query = query.where(ApplicationModel.application_status == application_status)
        if admission_status is not None:
            query = query.where(ApplicationModel.admission_status == admission_status)

        return await self._many(
            query.order_by(ApplicationModel.created_at.desc()).offset(skip).limit(limit)
        )
