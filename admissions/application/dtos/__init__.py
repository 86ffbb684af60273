"""Data Transfer Objects for application layer."""

from admissions.application.dtos.application_dto import (
    ApplicationDTO,
    ApplicationFilterDTO,
    CreateApplicationDTO,
    EditApplicationDTO,
)
from admissions.application.dtos.audit_dto import AuditDTO, AuditFilterDTO
from admissions.application.dtos.auth_dto import (
    ChangePasswordDTO,
    EmployeeUserDTO,
    LoginDTO,
    LoginResponseDTO,
    StudentSignupDTO,
    StudentUserDTO,
    TokenDTO,
)
from admissions.application.dtos.employee_dto import (
    CreateEmployeeDTO,
    EditEmployeeDTO,
    EmployeeDTO,
    EmployeeFilterDTO,
)
from admissions.application.dtos.student_dto import (
    CreateStudentDTO,
    EditPassportDTO,
    EditStudentAddressDTO,
    EditStudentDTO,
    StudentDTO,
    StudentFilterDTO,
)
from admissions.application.dtos.user_dto import UserDTO

__all__ = [
    "ApplicationDTO",
    "ApplicationFilterDTO",
    "AuditDTO",
    "AuditFilterDTO",
    "ChangePasswordDTO",
    "CreateApplicationDTO",
    "CreateEmployeeDTO",
    "CreateStudentDTO",
    "EditApplicationDTO",
    "EditEmployeeDTO",
    "EditPassportDTO",
    "EditStudentAddressDTO",
    "EditStudentDTO",
    "EmployeeDTO",
    "EmployeeFilterDTO",
    "EmployeeUserDTO",
    "LoginDTO",
    "LoginResponseDTO",
    "StudentDTO",
    "StudentFilterDTO",
    "StudentSignupDTO",
    "StudentUserDTO",
    "TokenDTO",
    "UserDTO",
]
