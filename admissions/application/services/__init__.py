"""Application services - use case orchestration."""

from admissions.application.services.application_service import ApplicationService
from admissions.application.services.audit_service import AuditService
from admissions.application.services.auth_service import AuthService
from admissions.application.services.employee_service import EmployeeService
from admissions.application.services.student_service import StudentService

__all__ = [
    "ApplicationService",
    "AuditService",
    "AuthService",
    "EmployeeService",
    "StudentService",
]
