"""Domain entities."""

from admissions.domain.entities.application import Application
from admissions.domain.entities.audit_record import AuditRecord
from admissions.domain.entities.employee import Employee
from admissions.domain.entities.student import Student, StudentAddress
from admissions.domain.entities.user import User

__all__ = [
    "Application",
    "AuditRecord",
    "Employee",
    "Student",
    "StudentAddress",
    "User",
]
