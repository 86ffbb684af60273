"""Dashboard counters. Every counter starts at zero."""

from admissions.application.dtos.common import ResponseDTO


class ApplicationCountsDTO(ResponseDTO):
    deposit_status: int = 0
    admission_status: int = 0
    visa_status: int = 0
    total: int = 0


class DepositCountsDTO(ResponseDTO):
    deposited: int = 0
    blocked: int = 0
    total: int = 0


class VisaCountsDTO(ResponseDTO):
    us: int = 0
    canada: int = 0
    hungary: int = 0
    italy: int = 0
    total: int = 0


class AdmissionCountsDTO(ResponseDTO):
    admission_pending: int = 0
    admission_applying: int = 0
    admission_rejected: int = 0
    admission_accepted: int = 0
    total: int = 0


class EmployeeRoleCountDTO(ResponseDTO):
    admin: int = 0
    agent: int = 0
    admission: int = 0
    finance: int = 0
    visa: int = 0
    total: int = 0


class GenderCountDTO(ResponseDTO):
    male: int = 0
    female: int = 0
    total: int = 0


class StudentActiveStatusCountDTO(ResponseDTO):
    active: int = 0
    inactive: int = 0
    total: int = 0
