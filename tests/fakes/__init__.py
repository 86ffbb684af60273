"""Fake implementations for testing."""

from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.repositories_fake import (
    FakeApplicationRepository,
    FakeAuditRepository,
    FakeEmployeeRepository,
    FakeStudentRepository,
    FakeUserRepository,
)
from tests.fakes.token_service_fake import FakeTokenService
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

__all__ = [
    "FakeApplicationRepository",
    "FakeAuditRepository",
    "FakeEmployeeRepository",
    "FakePasswordHasher",
    "FakeStudentRepository",
    "FakeTokenService",
    "FakeUnitOfWork",
    "FakeUserRepository",
]
