"""Unit of Work implementation using SQLAlchemy."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admissions.domain.repositories.unit_of_work import IUnitOfWork
from admissions.infrastructure.repositories.application_repository_impl import (
    ApplicationRepository,
)
from admissions.infrastructure.repositories.audit_repository_impl import AuditRepository
from admissions.infrastructure.repositories.employee_repository_impl import (
    EmployeeRepository,
)
from admissions.infrastructure.repositories.student_repository_impl import (
    StudentRepository,
)
from admissions.infrastructure.repositories.user_repository_impl import UserRepository

logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    One session per ``async with`` block, shared by all five repositories.

    Nothing is committed implicitly: services call ``commit()`` once their
    writes (including the audit entry) are in place. Leaving the block with
    an exception rolls back.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()

        self.users = UserRepository(self._session)
        self.employees = EmployeeRepository(self._session)
        self.students = StudentRepository(self._session)
        self.applications = ApplicationRepository(self._session)
        self.audits = AuditRepository(self._session)

        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is not None:
            logger.debug("Rolling back after %s", exc_type.__name__)
            await self.rollback()

        if self._session is not None:
            await self._session.close()
            self._session = None

    def _active_session(self, action: str) -> AsyncSession:
        if self._session is None:
            raise RuntimeError(f"Cannot {action}: no active session")
        return self._session

    async def commit(self) -> None:
        await self._active_session("commit").commit()

    async def rollback(self) -> None:
        await self._active_session("rollback").rollback()
