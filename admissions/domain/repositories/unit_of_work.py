"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from admissions.domain.repositories.application_repository import (
        IApplicationRepository,
    )
    from admissions.domain.repositories.audit_repository import IAuditRepository
    from admissions.domain.repositories.employee_repository import IEmployeeRepository
    from admissions.domain.repositories.student_repository import IStudentRepository
    from admissions.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    The UoW acts as a facade providing access to all repositories
    within a single transactional boundary.
    """

    users: "IUserRepository"
    employees: "IEmployeeRepository"
    students: "IStudentRepository"
    applications: "IApplicationRepository"
    audits: "IAuditRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Start a database session."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        Rolls back if an exception escaped the block. Commits are explicit.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
