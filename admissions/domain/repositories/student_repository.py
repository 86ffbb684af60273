"""Student repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from admissions.domain.entities.student import Student
from admissions.domain.enums import Country, Gender, Season
from admissions.domain.repositories.base import IRepository


class IStudentRepository(IRepository[Student]):
    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Student]:
        pass

    @abstractmethod
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
        """
        List students matching every supplied filter.

        Args:
            country: Only students with an application to this country
            intake: Only students with an application for this intake
            search: Case-insensitive match on first name, last name or email
        """
        pass
