"""ORM models. Importing this package registers every table on ``Base.metadata``."""

from admissions.infrastructure.persistence.models.application_model import (
    ApplicationModel,
)
from admissions.infrastructure.persistence.models.audit_model import AuditModel
from admissions.infrastructure.persistence.models.employee_model import EmployeeModel
from admissions.infrastructure.persistence.models.student_model import StudentModel
from admissions.infrastructure.persistence.models.user_model import UserModel

__all__ = [
    "ApplicationModel",
    "AuditModel",
    "EmployeeModel",
    "StudentModel",
    "UserModel",
]
