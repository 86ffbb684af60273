"""Application repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from admissions.domain.entities.application import Application
from admissions.domain.enums import (
    AdmissionStatus,
    ApplicationStatus,
    Country,
    Season,
)
from admissions.domain.repositories.base import IRepository


class IApplicationRepository(IRepository[Application]):
    """Applications are returned with their student attached."""

    @abstractmethod
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
        """List applications matching every supplied filter, newest first."""
        pass
