"""Employee repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from admissions.domain.entities.employee import Employee
from admissions.domain.enums import Gender, Role
from admissions.domain.repositories.base import IRepository


class IEmployeeRepository(IRepository[Employee]):
    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Employee]:
        pass

    @abstractmethod
    async def find(
        self,
        gender: Optional[Gender] = None,
        role: Optional[Role] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Employee]:
        """
        List employees matching every supplied filter.

        Args:
            gender: Only employees of this gender
            role: Only employees whose account holds this role
        """
        pass
