"""Unit tests for AuthService.

Tests authentication use cases:
1. Student self-registration
2. Login (credential validation + token generation)
3. Get current user from token
4. Password change
"""

from uuid import uuid4

import pytest

from admissions.application.dtos.auth_dto import (
    ChangePasswordDTO,
    EmployeeUserDTO,
    LoginDTO,
    StudentSignupDTO,
    StudentUserDTO,
)
from admissions.application.exceptions import (
    AccountSuspendedError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from admissions.domain.enums import Role

pytestmark = pytest.mark.unit


def signup_dto(**overrides) -> StudentSignupDTO:
    payload = {
        "email": "Abebe@Example.com",
        "password": "S3cure!pass",
        "firstName": "Abebe",
        "lastName": "Kebede",
        "gender": "Male",
        "region": "Addis Ababa",
        "city": "Addis Ababa",
        "subCity": "Bole",
        "woreda": "03",
        "kebele": "12",
        "houseNumber": "1123",
    }
    payload.update(overrides)
    return StudentSignupDTO.model_validate(payload)


# === SIGNUP TESTS ===


@pytest.mark.asyncio
async def test_student_signup_creates_account_and_profile(auth_service, fake_uow):
    result = await auth_service.student_signup(signup_dto())

    assert isinstance(result, StudentUserDTO)
    assert result.email == "abebe@example.com"
    assert result.roles == [Role.STUDENT]
    assert result.student is not None
    assert result.student.first_name == "Abebe"

    student = await fake_uow.students.get_by_user_id(result.id)
    assert student.is_client is False
    assert student.student_address.sub_city == "Bole"
    assert student.user.password_hash == "HASHED:S3cure!pass"
    assert fake_uow.was_committed()


@pytest.mark.asyncio
async def test_student_signup_duplicate_email_raises(auth_service):
    with pytest.raises(EmailAlreadyExistsError):
        await auth_service.student_signup(signup_dto(email="ADMIN@example.com"))


# === LOGIN TESTS ===


@pytest.mark.asyncio
async def test_login_employee_returns_profile_and_token(auth_service, agent_employee):
    result = await auth_service.login(
        LoginDTO(email="agent@example.com", password="Passw0rd!")
    )

    assert isinstance(result.user, EmployeeUserDTO)
    assert result.user.employee is not None
    assert result.user.employee.id == agent_employee.id
    assert result.token.access_token.startswith("access_")
    assert result.token.token_type == "bearer"
    assert result.token.expires_in == 30 * 60


@pytest.mark.asyncio
async def test_login_student_returns_student_profile(auth_service):
    await auth_service.student_signup(signup_dto())

    result = await auth_service.login(
        LoginDTO(email="abebe@example.com", password="S3cure!pass")
    )

    assert isinstance(result.user, StudentUserDTO)
    assert result.user.student.last_name == "Kebede"


@pytest.mark.asyncio
async def test_login_email_is_case_insensitive(auth_service):
    result = await auth_service.login(
        LoginDTO.model_validate({"email": "AGENT@EXAMPLE.COM", "password": "Passw0rd!"})
    )

    assert result.user.email == "agent@example.com"


@pytest.mark.asyncio
async def test_login_wrong_password_raises(auth_service):
    with pytest.raises(InvalidCredentialsError):
        await auth_service.login(LoginDTO(email="agent@example.com", password="wrong"))


@pytest.mark.asyncio
async def test_login_unknown_email_raises_same_error(auth_service):
    with pytest.raises(InvalidCredentialsError) as exc_info:
        await auth_service.login(LoginDTO(email="nobody@example.com", password="Passw0rd!"))

    assert exc_info.value.message == "Credentials incorrect"


@pytest.mark.asyncio
async def test_login_suspended_account_raises(auth_service, agent_user):
    agent_user.suspend()

    with pytest.raises(AccountSuspendedError):
        await auth_service.login(LoginDTO(email="agent@example.com", password="Passw0rd!"))


# === CURRENT USER TESTS ===


@pytest.mark.asyncio
async def test_get_current_user_with_valid_token(auth_service, admin_user):
    login = await auth_service.login(LoginDTO(email="admin@example.com", password="Passw0rd!"))

    user = await auth_service.get_current_user(login.token.access_token)

    assert user.id == admin_user.id
    assert user.roles == [Role.ADMIN]


@pytest.mark.asyncio
async def test_get_current_user_with_unknown_token_raises(auth_service):
    with pytest.raises(InvalidTokenError):
        await auth_service.get_current_user("garbage")


@pytest.mark.asyncio
async def test_get_current_user_with_expired_token_raises(auth_service, fake_token_service):
    login = await auth_service.login(LoginDTO(email="admin@example.com", password="Passw0rd!"))
    fake_token_service.expire_token(login.token.access_token)

    with pytest.raises(InvalidTokenError):
        await auth_service.get_current_user(login.token.access_token)


@pytest.mark.asyncio
async def test_get_current_user_suspended_after_login_raises(auth_service, admin_user):
    login = await auth_service.login(LoginDTO(email="admin@example.com", password="Passw0rd!"))
    admin_user.suspend()

    with pytest.raises(InvalidTokenError):
        await auth_service.get_current_user(login.token.access_token)


@pytest.mark.asyncio
async def test_get_current_user_deleted_account_raises(auth_service, fake_token_service):
    token = fake_token_service.generate_access_token(uuid4(), "gone@example.com", [Role.AGENT])

    with pytest.raises(UserNotFoundError):
        await auth_service.get_current_user(token)


# === CHANGE PASSWORD TESTS ===


@pytest.mark.asyncio
async def test_change_password(auth_service, agent_user):
    await auth_service.change_password(
        agent_user.id,
        ChangePasswordDTO(
            email="agent@example.com", current_password="Passw0rd!", new_password="N3w!passw"
        ),
    )

    assert agent_user.password_hash == "HASHED:N3w!passw"


@pytest.mark.asyncio
async def test_change_password_wrong_current_password_raises(auth_service, agent_user):
    with pytest.raises(InvalidCredentialsError):
        await auth_service.change_password(
            agent_user.id,
            ChangePasswordDTO(
                email="agent@example.com", current_password="Wr0ng!pass", new_password="N3w!passw"
            ),
        )

    assert agent_user.password_hash == "HASHED:Passw0rd!"


@pytest.mark.asyncio
async def test_change_password_for_other_email_raises(auth_service, agent_user):
    with pytest.raises(InvalidCredentialsError):
        await auth_service.change_password(
            agent_user.id,
            ChangePasswordDTO(
                email="admin@example.com", current_password="Passw0rd!", new_password="N3w!passw"
            ),
        )
