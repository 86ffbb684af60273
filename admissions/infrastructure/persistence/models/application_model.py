"""Application ORM model."""

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admissions.domain.entities.application import Application
from admissions.domain.enums import (
    AdmissionStatus,
    ApplicationStatus,
    Country,
    EnglishTestRequiredStatus,
    Season,
)
from admissions.infrastructure.persistence.database import Base, TimestampMixin, enum_type
from admissions.infrastructure.persistence.models.student_model import StudentModel


class ApplicationModel(TimestampMixin, Base):
    __tablename__ = "applications"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    student_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), index=True, nullable=False
    )
    country: Mapped[Country] = mapped_column(enum_type(Country), nullable=False)
    educational_level: Mapped[str] = mapped_column(String(255), nullable=False)
    field_of_study: Mapped[str] = mapped_column(String(255), nullable=False)
    intake: Mapped[Optional[Season]] = mapped_column(enum_type(Season))
    application_status: Mapped[ApplicationStatus] = mapped_column(
        enum_type(ApplicationStatus), nullable=False
    )
    admission_status: Mapped[AdmissionStatus] = mapped_column(
        enum_type(AdmissionStatus), nullable=False
    )
    english_test_required: Mapped[EnglishTestRequiredStatus] = mapped_column(
        enum_type(EnglishTestRequiredStatus), nullable=False
    )
    institute: Mapped[Optional[str]] = mapped_column(String(255))

    student: Mapped[StudentModel] = relationship(
        back_populates="applications", lazy="selectin"
    )

    def to_entity(self, with_student: bool = True) -> Application:
        return Application(
            id=self.id,
            student_id=self.student_id,
            country=self.country,
            educational_level=self.educational_level,
            field_of_study=self.field_of_study,
            intake=self.intake,
            application_status=self.application_status,
            admission_status=self.admission_status,
            english_test_required=self.english_test_required,
            institute=self.institute,
            student=(
                self.student.to_entity(with_applications=False)
                if with_student
                else None
            ),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def apply(self, application: Application) -> None:
        self.country = application.country
        self.educational_level = application.educational_level
        self.field_of_study = application.field_of_study
        self.intake = application.intake
        self.application_status = application.application_status
        self.admission_status = application.admission_status
        self.english_test_required = application.english_test_required
        self.institute = application.institute

    @staticmethod
    def from_entity(application: Application) -> "ApplicationModel":
        model = ApplicationModel(student_id=application.student_id)
        model.apply(application)
        if application.id is not None:
            model.id = application.id
        return model
