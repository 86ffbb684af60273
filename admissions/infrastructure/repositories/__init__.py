"""Repository implementations using SQLAlchemy."""

from admissions.infrastructure.repositories.application_repository_impl import (
    ApplicationRepository,
)
from admissions.infrastructure.repositories.audit_repository_impl import AuditRepository
from admissions.infrastructure.repositories.employee_repository_impl import (
    EmployeeRepository,
)
from admissions.infrastructure.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)
from admissions.infrastructure.repositories.student_repository_impl import (
    StudentRepository,
)
from admissions.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from admissions.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = [
    "ApplicationRepository",
    "AuditRepository",
    "EmployeeRepository",
    "SQLAlchemyRepository",
    "StudentRepository",
    "UnitOfWork",
    "UserRepository",
]
