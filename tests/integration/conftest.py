"""Integration test fixtures.

Runs the real application against a SQLite in-memory database: real
repositories, real Argon2 hashing, real JWTs.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from admissions.domain.entities.employee import Employee
from admissions.domain.entities.user import User
from admissions.domain.enums import Gender, Role
from admissions.infrastructure.persistence import models  # noqa: F401  registers tables
from admissions.infrastructure.persistence.database import Base
from admissions.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from admissions.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from admissions.main import app
from admissions.presentation.dependencies import get_session_factory
from tests.integration.helpers import ADMIN_EMAIL, ADMIN_PASSWORD, bearer, login

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def seeded_admin(test_session_factory) -> Employee:
    """An Admin employee written through the real repositories."""
    async with UnitOfWork(test_session_factory) as uow:
        user = await uow.users.add(
            User(
                email=ADMIN_EMAIL,
                first_name="Root",
                last_name="Admin",
                password_hash=Argon2PasswordHasher().hash(ADMIN_PASSWORD),
                roles=[Role.ADMIN],
                phone_number="+251911000000",
            )
        )
        employee = await uow.employees.add(
            Employee(first_name="Root", last_name="Admin", gender=Gender.FEMALE, user=user)
        )
        await uow.commit()
        return employee


@pytest.fixture
def client(test_session_factory, seeded_admin) -> Generator[TestClient]:
    """FastAPI test client backed by the in-memory database."""

    def override_get_session_factory():
        return test_session_factory

    app.dependency_overrides[get_session_factory] = override_get_session_factory

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client) -> dict[str, str]:
    return bearer(login(client, ADMIN_EMAIL, ADMIN_PASSWORD)["token"]["access_token"])


@pytest.fixture
def agent_headers(client, admin_headers) -> dict[str, str]:
    """Headers of an Agent created through the API by the seeded admin."""
    response = client.post(
        "/api/v1/employees",
        json={
            "email": "agent@example.com",
            "roles": ["Agent"],
            "password": "Ag3nt!pass",
            "firstName": "Dawit",
            "lastName": "Alemu",
            "gender": "Male",
            "phoneNumber": "+251922000000",
            "dateOfBirth": "1990-05-20T00:00:00Z",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return bearer(login(client, "agent@example.com", "Ag3nt!pass")["token"]["access_token"])
