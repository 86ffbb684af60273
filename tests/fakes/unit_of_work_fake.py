"""Fake Unit of Work for testing without a database.

This fake UoW provides the same interface as the real one but uses
fake repositories that store data in memory.
"""

from typing import Optional

from admissions.domain.entities.employee import Employee
from admissions.domain.entities.user import User
from admissions.domain.repositories.unit_of_work import IUnitOfWork
from tests.fakes.repositories_fake import (
    FakeApplicationRepository,
    FakeAuditRepository,
    FakeEmployeeRepository,
    FakeStudentRepository,
    FakeUserRepository,
)


class FakeUnitOfWork(IUnitOfWork):
    """
    In-memory fake implementation of IUnitOfWork.

    Changes are visible immediately; ``commit``/``rollback`` only record
    that they were called.

    Usage:
        async with FakeUnitOfWork() as uow:
            user = await uow.users.add(User(...))
            await uow.commit()
    """

    def __init__(
        self,
        initial_users: Optional[list[User]] = None,
        initial_employees: Optional[list[Employee]] = None,
    ):
        self.users = FakeUserRepository(initial_data=initial_users)
        self.employees = FakeEmployeeRepository(initial_data=initial_employees)
        self.applications = FakeApplicationRepository()
        self.students = FakeStudentRepository(applications=self.applications)
        self.audits = FakeAuditRepository()

        self.committed = False
        self.rolled_back = False
        self._is_active = False

    async def __aenter__(self) -> "FakeUnitOfWork":
        self._is_active = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back if the block raised; commits are explicit like the real UoW."""
        if exc_type is not None:
            await self.rollback()

        self._is_active = False

    async def commit(self) -> None:
        if not self._is_active:
            raise RuntimeError("Cannot commit: UoW is not active")

        self.committed = True
        self.rolled_back = False

    async def rollback(self) -> None:
        if not self._is_active:
            raise RuntimeError("Cannot rollback: UoW is not active")

        self.rolled_back = True
        self.committed = False

    # Helper methods for testing

    def was_committed(self) -> bool:
        return self.committed

    def was_rolled_back(self) -> bool:
        return self.rolled_back
