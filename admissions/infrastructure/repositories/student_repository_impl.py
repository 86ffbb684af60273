"""Student repository implementation using SQLAlchemy."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_, select

from admissions.domain.entities.student import Student
from admissions.domain.enums import Country, Gender, Season
from admissions.domain.repositories.student_repository import IStudentRepository
from admissions.infrastructure.persistence.models.application_model import (
    ApplicationModel,
)
from admissions.infrastructure.persistence.models.student_model import StudentModel
from admissions.infrastructure.persistence.models.user_model import UserModel
from admissions.infrastructure.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)


class StudentRepository(SQLAlchemyRepository[Student], IStudentRepository):
    model = StudentModel

    async def get_by_user_id(self, user_id: UUID) -> Optional[Student]:
        return await self._one(select(StudentModel).where(StudentModel.user_id == user_id))

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[Student]:
        return await self.find(skip=skip, limit=limit)

    async def find(
        self,
        gender: Optional[Gender] = None,
        country: Optional[Country] = None,
        intake: Optional[Season] = None,
        is_active: Optional[bool] = None,
        is_client: Optional[bool] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Student]:
        query = select(StudentModel)

        if gender is not None:
            query = query.where(StudentModel.gender == gender)
        if is_active is not None:
            query = query.where(StudentModel.is_active == is_active)
        if is_client is not None:
            query = query.where(StudentModel.is_client == is_client)
        if country is not None or intake is not None:
            applications = select(ApplicationModel.student_id)
            if country is not None:
                applications = applications.where(ApplicationModel.country == country)
            if intake is not None:
                applications = applications.where(ApplicationModel.intake == intake)
            query = query.where(StudentModel.id.in_(applications))
        if search:
            pattern = f"%{search.lower()}%"
            query = query.join(UserModel, StudentModel.user_id == UserModel.id).where(
                or_(
                    StudentModel.first_name.ilike(pattern),
                    StudentModel.last_name.ilike(pattern),
                    UserModel.email.ilike(pattern),
                )
            )

        return await self._many(
            query.order_by(StudentModel.created_at.desc()).offset(skip).limit(limit)
        )
