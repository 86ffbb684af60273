"""Employee service - staff management use cases."""

import logging
from collections.abc import Callable
from uuid import UUID

from admissions.application.dtos.employee_dto import (
    CreateEmployeeDTO,
    EditEmployeeDTO,
    EmployeeDTO,
    EmployeeFilterDTO,
)
from admissions.application.exceptions import (
    EmailAlreadyExistsError,
    EmployeeNotFoundError,
)
from admissions.application.services.audit_service import record_audit, snapshot
from admissions.domain.entities.employee import Employee
from admissions.domain.entities.user import User
from admissions.domain.enums import Operation, Role
from admissions.domain.exceptions import ForbiddenRoleAssignmentException
from admissions.domain.repositories.unit_of_work import IUnitOfWork
from admissions.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

AUDITED_FIELDS = (
    "first_name",
    "last_name",
    "gender",
    "date_of_birth",
    "user.email",
    "user.phone_number",
    "user.roles",
    "user.is_suspended",
)


class EmployeeService:
    """
    Staff accounts: creation, lookup, filtering and edits.

    Business rules:
    - The Admin role is never granted through this service
    - Every create/edit writes an audit entry in the same transaction
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
    ):
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher

    async def create_employee(self, dto: CreateEmployeeDTO, actor_id: UUID) -> EmployeeDTO:
        """
        Create an employee and their login account.

        Raises:
            ForbiddenRoleAssignmentException: If Admin is among the roles
            EmailAlreadyExistsError: If the email is already registered
        """
        if Role.ADMIN in dto.roles:
            raise ForbiddenRoleAssignmentException()

        async with self._uow_factory() as uow:
            if await uow.users.email_exists(dto.email):
                raise EmailAlreadyExistsError(f"Email {dto.email} already registered")

            user = User(
                email=dto.email,
                first_name=dto.first_name,
                last_name=dto.last_name,
                password_hash=self._password_hasher.hash(dto.password),
                roles=list(dict.fromkeys(dto.roles)),
                phone_number=dto.phone_number,
            )
            # Validate the employee before anything is written
            employee = Employee(
                first_name=dto.first_name,
                last_name=dto.last_name,
                gender=dto.gender,
                user=user,
                date_of_birth=dto.date_of_birth,
            )
            employee.user = await uow.users.add(user)
            employee = await uow.employees.add(employee)

            assert employee.id is not None
            await record_audit(
                uow,
                entity="employee",
                record_id=employee.id,
                actor_id=actor_id,
                operation=Operation.CREATE,
            )
            await uow.commit()

            return EmployeeDTO.model_validate(employee)

    async def get_employee(self, employee_id: UUID) -> EmployeeDTO:
        """
        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        async with self._uow_factory() as uow:
            employee = await uow.employees.get_by_id(employee_id)

            if employee is None:
                raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

            return EmployeeDTO.model_validate(employee)

    async def list_employees(
        self, filters: EmployeeFilterDTO, skip: int = 0, limit: int = 100
    ) -> list[EmployeeDTO]:
        async with self._uow_factory() as uow:
            employees = await uow.employees.find(
                gender=filters.gender,
                role=filters.role,
                skip=skip,
                limit=limit,
            )
            return [EmployeeDTO.model_validate(employee) for employee in employees]

    async def edit_employee(self, dto: EditEmployeeDTO, actor_id: UUID) -> EmployeeDTO:
        """
        Apply a partial update to an employee and their account.

        Only fields present in ``dto`` change. Admin may be kept by someone
        who already holds it but never added.

        Raises:
            EmployeeNotFoundError: If no employee has ``dto.id``
            ForbiddenRoleAssignmentException: If the update would add Admin
            EmailAlreadyExistsError: If the new email belongs to another account
        """
        async with self._uow_factory() as uow:
            employee = await uow.employees.get_by_id(dto.id)

            if employee is None:
                raise EmployeeNotFoundError(f"Employee with ID {dto.id} not found")

            user = employee.user
            previous = snapshot(employee, AUDITED_FIELDS)

            if dto.roles is not None:
                if Role.ADMIN in dto.roles and Role.ADMIN not in user.roles:
                    raise ForbiddenRoleAssignmentException()
                user.assign_roles(dto.roles)

            if dto.email is not None and dto.email != user.email:
                if await uow.users.email_exists(dto.email):
                    raise EmailAlreadyExistsError(f"Email {dto.email} already registered")
                user.change_email(dto.email)

            if dto.password is not None:
                user.change_password_hash(self._password_hasher.hash(dto.password))

            if dto.phone_number is not None:
                user.change_phone_number(dto.phone_number)

            if dto.is_suspended is not None:
                if dto.is_suspended:
                    user.suspend()
                else:
                    user.reinstate()

            employee.rename(dto.first_name, dto.last_name)

            if dto.gender is not None:
                employee.gender = dto.gender

            if dto.date_of_birth is not None:
                employee.date_of_birth = dto.date_of_birth

            await uow.users.update(user)
            employee = await uow.employees.update(employee)

            assert employee.id is not None
            await record_audit(
                uow,
                entity="employee",
                record_id=employee.id,
                actor_id=actor_id,
                operation=Operation.UPDATE,
                previous_values=previous,
            )
            await uow.commit()

            return EmployeeDTO.model_validate(employee)
