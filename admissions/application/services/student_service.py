"""Student service - student records managed by agents and admins."""

import logging
import secrets
import string
from collections.abc import Callable
from uuid import UUID

from admissions.application.dtos.student_dto import (
    CreateStudentDTO,
    CreatedStudentDTO,
    EditPassportDTO,
    EditStudentAddressDTO,
    EditStudentDTO,
    StudentDTO,
    StudentFilterDTO,
)
from admissions.application.exceptions import (
    EmailAlreadyExistsError,
    StudentNotFoundError,
)
from admissions.application.services.audit_service import record_audit, snapshot
from admissions.domain.entities.application import Application
from admissions.domain.entities.student import Student, StudentAddress
from admissions.domain.entities.user import User
from admissions.domain.enums import Operation, Role
from admissions.domain.repositories.unit_of_work import IUnitOfWork
from admissions.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "gender",
    "date_of_birth",
    "admission_email",
    "branch",
    "image",
    "user.phone_number",
)
ADDRESS_FIELDS = (
    "student_address.region",
    "student_address.city",
    "student_address.sub_city",
    "student_address.woreda",
    "student_address.kebele",
    "student_address.house_number",
)
PASSPORT_FIELDS = ("passport_number", "issue_date", "expiry_date", "passport_attachment")

_SYMBOLS = "!@#$%^&*"


def generate_password(length: int) -> str:
    """
    Random password that satisfies the strong-password rule.

    One character of each required class is guaranteed, the rest drawn from
    the full alphabet, then shuffled.
    """
    alphabet = string.ascii_letters + string.digits + _SYMBOLS
    chars = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
        secrets.choice(_SYMBOLS),
    ]
    chars += [secrets.choice(alphabet) for _ in range(max(length, 8) - len(chars))]
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


class StudentService:
    """Create, read and edit student records."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
        generated_password_length: int = 12,
    ):
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher
        self._generated_password_length = generated_password_length

    async def create_student(
        self, dto: CreateStudentDTO, actor_id: UUID
    ) -> CreatedStudentDTO:
        """
        Register a client student, their account and first application.

        The acting employee becomes the student's agent. The account gets a
        generated password, returned once in the response.

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        password = generate_password(self._generated_password_length)

        async with self._uow_factory() as uow:
            if await uow.users.email_exists(dto.email):
                raise EmailAlreadyExistsError(f"Email {dto.email} already registered")

            agent = await uow.employees.get_by_user_id(actor_id)

            user = await uow.users.add(
                User(
                    email=dto.email,
                    first_name=dto.first_name,
                    last_name=dto.last_name,
                    password_hash=self._password_hasher.hash(password),
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
                    branch=dto.branch,
                    is_client=True if dto.is_client is None else dto.is_client,
                    agent=agent,
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
            assert student.id is not None

            application = await uow.applications.add(
                Application(
                    student_id=student.id,
                    country=dto.country,
                    educational_level=dto.educational_level,
                    field_of_study=dto.field_of_study,
                    intake=dto.intake,
                )
            )
            assert application.id is not None
            student.applications = [application]

            if agent is not None:
                agent.student_assignment_count += 1
                await uow.employees.update(agent)

            await record_audit(
                uow,
                entity="student",
                record_id=student.id,
                actor_id=actor_id,
                operation=Operation.CREATE,
            )
            await record_audit(
                uow,
                entity="application",
                record_id=application.id,
                actor_id=actor_id,
                operation=Operation.CREATE,
            )
            await uow.commit()

            return CreatedStudentDTO.model_validate(student).model_copy(
                update={"temporary_password": password}
            )

    async def get_student(self, student_id: UUID) -> StudentDTO:
        """
        Raises:
            StudentNotFoundError: If no student has this id
        """
        async with self._uow_factory() as uow:
            student = await self._load(uow, student_id)
            return StudentDTO.model_validate(student)

    async def list_students(
        self, filters: StudentFilterDTO, skip: int = 0, limit: int = 100
    ) -> list[StudentDTO]:
        async with self._uow_factory() as uow:
            students = await uow.students.find(
                gender=filters.gender,
                country=filters.country,
                intake=filters.intake,
                is_active=filters.is_active,
                is_client=filters.is_client,
                search=filters.search,
                skip=skip,
                limit=limit,
            )
            return [StudentDTO.model_validate(student) for student in students]

    async def edit_student(self, dto: EditStudentDTO, actor_id: UUID) -> StudentDTO:
        """
        Apply a partial update to a student's profile and passport.

        Raises:
            StudentNotFoundError: If no student has ``dto.id``
            BusinessRuleViolationException: If passport dates are inconsistent
        """
        async with self._uow_factory() as uow:
            student = await self._load(uow, dto.id)
            previous = snapshot(student, PROFILE_FIELDS + PASSPORT_FIELDS)

            if dto.first_name is not None or dto.last_name is not None:
                student.user.rename(dto.first_name, dto.last_name)
                student.first_name = dto.first_name or student.first_name
                student.last_name = dto.last_name or student.last_name

            if dto.phone_number is not None:
                student.user.change_phone_number(dto.phone_number)

            for name in ("gender", "date_of_birth", "admission_email", "branch", "image"):
                value = getattr(dto, name)
                if value is not None:
                    setattr(student, name, value)

            student.update_passport(
                passport_number=dto.passport_number,
                issue_date=dto.issue_date,
                expiry_date=dto.expiry_date,
                passport_attachment=dto.passport_attachment,
            )

            await uow.users.update(student.user)
            return await self._save(uow, student, actor_id, previous, "profile")

    async def edit_address(
        self, dto: EditStudentAddressDTO, actor_id: UUID
    ) -> StudentDTO:
        async with self._uow_factory() as uow:
            student = await self._load(uow, dto.student_id)
            previous = snapshot(student, ADDRESS_FIELDS)

            student.update_address(
                region=dto.region,
                city=dto.city,
                sub_city=dto.sub_city,
                woreda=dto.woreda,
                kebele=dto.kebele,
                house_number=dto.house_number,
            )
            return await self._save(uow, student, actor_id, previous, "address")

    async def edit_passport(self, dto: EditPassportDTO, actor_id: UUID) -> StudentDTO:
        """
        Raises:
            BusinessRuleViolationException: If expiry is not after issue
        """
        async with self._uow_factory() as uow:
            student = await self._load(uow, dto.student_id)
            previous = snapshot(student, PASSPORT_FIELDS)

            student.update_passport(
                passport_number=dto.passport_number,
                issue_date=dto.issue_date,
                expiry_date=dto.expiry_date,
                passport_attachment=dto.passport_attachment,
            )
            return await self._save(uow, student, actor_id, previous, "passport")

    @staticmethod
    async def _load(uow: IUnitOfWork, student_id: UUID) -> Student:
        student = await uow.students.get_by_id(student_id)

        if student is None:
            raise StudentNotFoundError(f"Student with ID {student_id} not found")

        return student

    @staticmethod
    async def _save(
        uow: IUnitOfWork,
        student: Student,
        actor_id: UUID,
        previous: str,
        detail: str,
    ) -> StudentDTO:
        student = await uow.students.update(student)

        assert student.id is not None
        await record_audit(
            uow,
            entity="student",
            record_id=student.id,
            actor_id=actor_id,
            operation=Operation.UPDATE,
            previous_values=previous,
            detail=detail,
        )
        await uow.commit()

        return StudentDTO.model_validate(student)
