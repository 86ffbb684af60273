"""Repository interfaces - define contracts for data access."""

from admissions.domain.repositories.application_repository import (
    IApplicationRepository,
)
from admissions.domain.repositories.audit_repository import IAuditRepository
from admissions.domain.repositories.base import IRepository
from admissions.domain.repositories.employee_repository import IEmployeeRepository
from admissions.domain.repositories.student_repository import IStudentRepository
from admissions.domain.repositories.unit_of_work import IUnitOfWork
from admissions.domain.repositories.user_repository import IUserRepository

__all__ = [
    "IApplicationRepository",
    "IAuditRepository",
    "IEmployeeRepository",
    "IRepository",
    "IStudentRepository",
    "IUnitOfWork",
    "IUserRepository",
]
