"""Authentication service - application layer business logic.

Use cases:
1. Student self-registration
2. Login (credential validation + token generation)
3. Resolving the current user from a bearer token
4. Password change
"""

import logging
from collections.abc import Callable
from uuid import UUID

from admissions.application.dtos.auth_dto import (
    ChangePasswordDTO,
    EmployeeSummaryDTO,
    EmployeeUserDTO,
    LoginDTO,
    LoginResponseDTO,
    StudentSignupDTO,
    StudentUserDTO,
    TokenDTO,
)
from admissions.application.dtos.shared_dto import StudentSummaryDTO
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.exceptions.exceptions import (
    AccountSuspendedError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from admissions.domain.entities.student import Student, StudentAddress
from admissions.domain.entities.user import User
from admissions.domain.enums import Role
from admissions.domain.repositories.unit_of_work import IUnitOfWork
from admissions.domain.services.password_hasher import IPasswordHasher
from admissions.domain.services.token_service import ITokenService

logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service encapsulating auth-related use cases.

    Depends only on abstractions (ITokenService, IPasswordHasher,
    IUnitOfWork); unit tests run it against fakes.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
    ):
        self._uow_factory = uow_factory
        self._token_service = token_service
        self._password_hasher = password_hasher

    async def student_signup(self, dto: StudentSignupDTO) -> StudentUserDTO:
        """
        Register a prospective student and their login account.

        Self-registered students are not clients until an agent takes them on.

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        async with self._uow_factory() as uow:
            if await uow.users.email_exists(dto.email):
                raise EmailAlreadyExistsError(f"Email {dto.email} already registered")

            user = await uow.users.add(
                User(
                    email=dto.email,
                    first_name=dto.first_name,
                    last_name=dto.last_name,
                    password_hash=self._password_hasher.hash(dto.password),
                    roles=[Role.STUDENT],
                    phone_number=dto.phone_number,
                )
            )
            student = await uow.students.add(
                Student(
                    first_name=dto.first_name,
                    last_name=dto.last_name,
                    gender=dto.gender,
                    user=user,
                    date_of_birth=dto.date_of_birth,
                    is_client=False,
                    student_address=StudentAddress(
                        region=dto.region,
                        city=dto.city,
                        sub_city=dto.sub_city,
                        woreda=dto.woreda,
                        kebele=dto.kebele,
                        house_number=dto.house_number,
                    ),
                )
            )
            await uow.commit()

            logger.info("Student %s signed up", student.id)
            return self._student_user(user, student)

    async def login(self, dto: LoginDTO) -> LoginResponseDTO:
        """
        Authenticate a user and issue an access token.

        Raises:
            InvalidCredentialsError: If email or password is incorrect
            AccountSuspendedError: If the account has been suspended
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(dto.email)

            # Same error for unknown email and wrong password
            if user is None or not self._password_hasher.verify(
                dto.password, user.password_hash
            ):
                logger.warning("Failed login attempt for %s", dto.email)
                raise InvalidCredentialsError()

            if user.is_suspended:
                logger.warning("Suspended account %s attempted to log in", user.id)
                raise AccountSuspendedError()

            assert user.id is not None
            access_token = self._token_service.generate_access_token(
                user_id=user.id,
                email=user.email,
                roles=user.roles,
            )
            token = TokenDTO(
                access_token=access_token,
                token_type="bearer",
                expires_in=self._token_service.expires_in,
            )

            if user.is_employee:
                employee = await uow.employees.get_by_user_id(user.id)
                profile = EmployeeUserDTO.model_validate(user)
                if employee is not None:
                    profile = profile.model_copy(
                        update={"employee": EmployeeSummaryDTO.model_validate(employee)}
                    )
                return LoginResponseDTO(user=profile, token=token)

            student = await uow.students.get_by_user_id(user.id)
            return LoginResponseDTO(user=self._student_user(user, student), token=token)

    async def get_current_user(self, access_token: str) -> UserDTO:
        """
        Resolve the account behind a bearer token.

        Raises:
            InvalidTokenError: If token is invalid/expired or the account is suspended
            UserNotFoundError: If user no longer exists
        """
        token_data = self._token_service.verify_token(access_token)

        if token_data is None or token_data.is_expired:
            raise InvalidTokenError("Invalid or expired access token")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(token_data.user_id)

            if user is None:
                raise UserNotFoundError(f"User {token_data.user_id} not found")

            if user.is_suspended:
                raise InvalidTokenError("Account is suspended")

            return UserDTO.model_validate(user)

    async def change_password(self, user_id: UUID, dto: ChangePasswordDTO) -> None:
        """
        Replace the password of the calling user.

        The email in the payload must be the caller's own and the current
        password must verify.

        Raises:
            InvalidCredentialsError: On email mismatch or wrong current password
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)

            if user is None:
                raise UserNotFoundError(f"User {user_id} not found")

            if user.email != dto.email or not self._password_hasher.verify(
                dto.current_password, user.password_hash
            ):
                logger.warning("Rejected password change for user %s", user_id)
                raise InvalidCredentialsError()

            user.change_password_hash(self._password_hasher.hash(dto.new_password))
            await uow.users.update(user)
            await uow.commit()

            logger.info("Password changed for user %s", user_id)

    @staticmethod
    def _student_user(user: User, student: Student | None) -> StudentUserDTO:
        dto = StudentUserDTO.model_validate(user)
        if student is None:
            return dto
        return dto.model_copy(update={"student": StudentSummaryDTO.model_validate(student)})
