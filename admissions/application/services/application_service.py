"""Application service - study applications and their stages."""

import logging
from collections.abc import Callable
from uuid import UUID

from admissions.application.dtos.application_dto import (
    ApplicationDTO,
    ApplicationFilterDTO,
    CreateApplicationDTO,
    EditApplicationDTO,
)
from admissions.application.exceptions import (
    ApplicationNotFoundError,
    StudentNotFoundError,
)
from admissions.application.services.audit_service import record_audit, snapshot
from admissions.domain.entities.application import Application
from admissions.domain.enums import Operation
from admissions.domain.exceptions import BusinessRuleViolationException
from admissions.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "educational_level",
    "field_of_study",
    "institute",
    "intake",
    "english_test_required",
    "application_status",
    "admission_status",
)


class ApplicationService:
    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        self._uow_factory = uow_factory

    async def create_application(
        self, dto: CreateApplicationDTO, actor_id: UUID
    ) -> ApplicationDTO:
        """
        Open a new application for an existing student.

        Raises:
            StudentNotFoundError: If ``dto.student_id`` does not exist
        """
        async with self._uow_factory() as uow:
            student = await uow.students.get_by_id(dto.student_id)

            if student is None:
                raise StudentNotFoundError(f"Student with ID {dto.student_id} not found")

            application = await uow.applications.add(
                Application(
                    student_id=dto.student_id,
                    country=dto.country,
                    educational_level=dto.educational_level,
                    field_of_study=dto.field_of_study,
                    intake=dto.intake,
                )
            )
            application.student = student

            assert application.id is not None
            await record_audit(
                uow,
                entity="application",
                record_id=application.id,
                actor_id=actor_id,
                operation=Operation.CREATE,
            )
            await uow.commit()

            return ApplicationDTO.model_validate(application)

    async def get_application(self, application_id: UUID) -> ApplicationDTO:
        async with self._uow_factory() as uow:
            application = await uow.applications.get_by_id(application_id)

            if application is None:
                raise ApplicationNotFoundError(
                    f"Application with ID {application_id} not found"
                )

            return ApplicationDTO.model_validate(application)

    async def list_applications(
        self, filters: ApplicationFilterDTO, skip: int = 0, limit: int = 100
    ) -> list[ApplicationDTO]:
        async with self._uow_factory() as uow:
            applications = await uow.applications.find(
                student_id=filters.student_id,
                country=filters.country,
                intake=filters.intake,
                application_status=filters.application_status,
                admission_status=filters.admission_status,
                skip=skip,
                limit=limit,
            )
            return [ApplicationDTO.model_validate(a) for a in applications]

    async def edit_application(
        self, dto: EditApplicationDTO, actor_id: UUID
    ) -> ApplicationDTO:
        """
        Apply a partial update to an application.

        Raises:
            ApplicationNotFoundError: If no application has ``dto.id``
            BusinessRuleViolationException: If nothing would change
        """
        changes = dto.model_dump(include=set(EDITABLE_FIELDS), exclude_none=True)
        if not changes:
            raise BusinessRuleViolationException("No application fields to update.")

        async with self._uow_factory() as uow:
            application = await uow.applications.get_by_id(dto.id)

            if application is None:
                raise ApplicationNotFoundError(f"Application with ID {dto.id} not found")

            previous = snapshot(application, changes.keys())

            for name, value in changes.items():
                setattr(application, name, value)
            application.touch()

            application = await uow.applications.update(application)

            await record_audit(
                uow,
                entity="application",
                record_id=dto.id,
                actor_id=actor_id,
                operation=Operation.UPDATE,
                previous_values=previous,
                detail=", ".join(sorted(changes)),
            )
            await uow.commit()

            logger.info("Application %s updated: %s", dto.id, sorted(changes))
            return ApplicationDTO.model_validate(application)
