"""FastAPI dependency injection setup.

This module is the composition root: concrete implementations are created
here and handed to services that only know the domain interfaces.

Dependency chain:
    get_settings() -> get_database_engine() -> get_session_factory()
        -> get_uow_factory() -> get_*_service()
"""

from collections.abc import Awaitable, Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from admissions.application.dtos.user_dto import UserDTO
from admissions.application.exceptions import (
    InsufficientPermissionsError,
    InvalidTokenError,
)
from admissions.application.services import (
    ApplicationService,
    AuditService,
    AuthService,
    EmployeeService,
    StudentService,
)
from admissions.domain.enums import EMPLOYEE_ROLES, Role
from admissions.domain.repositories.unit_of_work import IUnitOfWork
from admissions.domain.services.password_hasher import IPasswordHasher
from admissions.domain.services.token_service import ITokenService
from admissions.infrastructure.config.settings import Settings, get_settings
from admissions.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from admissions.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from admissions.infrastructure.security.argon2_password_hasher import (
    Argon2PasswordHasher,
)
from admissions.infrastructure.security.jwt_token_service import JWTTokenService

UowFactory = Callable[[], IUnitOfWork]

# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None
_password_hasher: IPasswordHasher | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create the session factory singleton.

    Integration tests override this dependency with a SQLite-backed factory.
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


async def dispose_database_engine() -> None:
    """Close pooled connections; called when the application shuts down."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def get_uow_factory(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> UowFactory:
    """
    Provide a factory of Unit of Work instances.

    Services open one UoW per use case, so they receive the factory rather
    than a live UoW.
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return uow_factory


def get_password_hasher() -> IPasswordHasher:
    """
    Password hasher singleton.

    Argon2 hashers are stateless, so one instance serves every request.
    """
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = Argon2PasswordHasher()
    return _password_hasher


def get_token_service(settings: Settings = Depends(get_settings)) -> ITokenService:
    return JWTTokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


def get_auth_service(
    uow_factory: UowFactory = Depends(get_uow_factory),
    token_service: ITokenService = Depends(get_token_service),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(
        uow_factory=uow_factory,
        token_service=token_service,
        password_hasher=password_hasher,
    )


def get_employee_service(
    uow_factory: UowFactory = Depends(get_uow_factory),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> EmployeeService:
    return EmployeeService(uow_factory=uow_factory, password_hasher=password_hasher)


def get_student_service(
    uow_factory: UowFactory = Depends(get_uow_factory),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> StudentService:
    return StudentService(
        uow_factory=uow_factory,
        password_hasher=password_hasher,
        generated_password_length=settings.generated_password_length,
    )


def get_application_service(
    uow_factory: UowFactory = Depends(get_uow_factory),
) -> ApplicationService:
    return ApplicationService(uow_factory=uow_factory)


def get_audit_service(uow_factory: UowFactory = Depends(get_uow_factory)) -> AuditService:
    return AuditService(uow_factory=uow_factory)


# auto_error=False so a missing header yields our 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserDTO:
    """
    Resolve the authenticated account from the Bearer token.

    Usage in endpoints:
        @router.get("/me")
        async def get_me(current_user: UserDTO = Depends(get_current_user)):
            return current_user

    Raises:
        InvalidTokenError: If the header is missing or the token is invalid
    """
    if credentials is None:
        raise InvalidTokenError("Missing authorization credentials")

    return await auth_service.get_current_user(credentials.credentials)


def require_roles(*roles: Role) -> Callable[..., Awaitable[UserDTO]]:
    """
    Build a dependency that admits only users holding one of ``roles``.

    Usage:
        @router.get("/audits")
        async def list_audits(user: UserDTO = Depends(require_roles(Role.ADMIN))):
            ...
    """
    allowed = frozenset(roles)

    async def dependency(current_user: UserDTO = Depends(get_current_user)) -> UserDTO:
        if allowed.isdisjoint(current_user.roles):
            raise InsufficientPermissionsError(
                "Requires one of the roles: "
                + ", ".join(sorted(role.value for role in allowed))
            )
        return current_user

    return dependency


require_admin = require_roles(Role.ADMIN)
require_student_staff = require_roles(Role.ADMIN, Role.AGENT)
require_employee = require_roles(*EMPLOYEE_ROLES)
