"""Pytest configuration and shared fixtures.

Unit fixtures wire services to fakes (FakePasswordHasher, FakeTokenService,
FakeUnitOfWork): no crypto, no database, fresh state per test.
"""

import os
from datetime import UTC, datetime
from uuid import uuid4

import pytest

# Settings are read at import time of admissions.main
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
os.environ.setdefault("ENVIRONMENT", "test")

from admissions.application.services import (  # noqa: E402
    ApplicationService,
    AuditService,
    AuthService,
    EmployeeService,
    StudentService,
)
from admissions.domain.entities.employee import Employee  # noqa: E402
from admissions.domain.entities.user import User  # noqa: E402
from admissions.domain.enums import Gender, Role  # noqa: E402
from tests.fakes.password_hasher_fake import FakePasswordHasher  # noqa: E402
from tests.fakes.token_service_fake import FakeTokenService  # noqa: E402
from tests.fakes.unit_of_work_fake import FakeUnitOfWork  # noqa: E402


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def fake_token_service() -> FakeTokenService:
    return FakeTokenService()


def make_user(email: str, roles: list[Role], password: str = "Passw0rd!") -> User:
    """Build a persisted-looking user; the hash uses the FakePasswordHasher format."""
    now = datetime.now(UTC)
    return User(
        id=uuid4(),
        email=email,
        first_name="Test",
        last_name="User",
        password_hash=f"HASHED:{password}",
        roles=roles,
        phone_number="+251911000000",
        created_at=now,
        updated_at=now,
    )


def make_employee(user: User, gender: Gender = Gender.FEMALE) -> Employee:
    now = datetime.now(UTC)
    return Employee(
        id=uuid4(),
        first_name=user.first_name,
        last_name=user.last_name,
        gender=gender,
        user=user,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def admin_user() -> User:
    return make_user("admin@example.com", [Role.ADMIN])


@pytest.fixture
def agent_user() -> User:
    return make_user("agent@example.com", [Role.AGENT])


@pytest.fixture
def admin_employee(admin_user) -> Employee:
    return make_employee(admin_user)


@pytest.fixture
def agent_employee(agent_user) -> Employee:
    return make_employee(agent_user, gender=Gender.MALE)


@pytest.fixture
def fake_uow(admin_user, agent_user, admin_employee, agent_employee) -> FakeUnitOfWork:
    """
    A fresh FakeUnitOfWork seeded with one admin and one agent.

    Every service built from these fixtures shares this instance, so tests
    can inspect what a use case stored.
    """
    return FakeUnitOfWork(
        initial_users=[admin_user, agent_user],
        initial_employees=[admin_employee, agent_employee],
    )


@pytest.fixture
def uow_factory(fake_uow):
    def factory():
        return fake_uow

    return factory


@pytest.fixture
def auth_service(uow_factory, fake_token_service, fake_password_hasher) -> AuthService:
    return AuthService(
        uow_factory=uow_factory,
        token_service=fake_token_service,
        password_hasher=fake_password_hasher,
    )


@pytest.fixture
def employee_service(uow_factory, fake_password_hasher) -> EmployeeService:
    return EmployeeService(uow_factory=uow_factory, password_hasher=fake_password_hasher)


@pytest.fixture
def student_service(uow_factory, fake_password_hasher) -> StudentService:
    return StudentService(
        uow_factory=uow_factory,
        password_hasher=fake_password_hasher,
        generated_password_length=12,
    )


@pytest.fixture
def application_service(uow_factory) -> ApplicationService:
    return ApplicationService(uow_factory=uow_factory)


@pytest.fixture
def audit_service(uow_factory) -> AuditService:
    return AuditService(uow_factory=uow_factory)
