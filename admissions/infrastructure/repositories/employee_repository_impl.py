"""Employee repository implementation using SQLAlchemy."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from admissions.domain.entities.employee import Employee
from admissions.domain.enums import Gender, Role
from admissions.domain.repositories.employee_repository import IEmployeeRepository
from admissions.infrastructure.persistence.models.employee_model import EmployeeModel
from admissions.infrastructure.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)


class EmployeeRepository(SQLAlchemyRepository[Employee], IEmployeeRepository):
    model = EmployeeModel

    async def get_by_user_id(self, user_id: UUID) -> Optional[Employee]:
        return await self._one(select(EmployeeModel).where(EmployeeModel.user_id == user_id))

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[Employee]:
        return await self.find(skip=skip, limit=limit)

    async def find(
        self,
        gender: Optional[Gender] = None,
        role: Optional[Role] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Employee]:
        query = select(EmployeeModel).order_by(EmployeeModel.created_at)
        if gender is not None:
            query = query.where(EmployeeModel.gender == gender)

        if role is None:
            return await self._many(query.offset(skip).limit(limit))

        # Roles live in a JSON column; filter in Python to stay portable
        employees = [e for e in await self._many(query) if role in e.user.roles]
        return employees[skip : skip + limit]
