"""Student ORM model; the address is stored inline on the student row."""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admissions.domain.entities.student import Student, StudentAddress
from admissions.domain.enums import Gender
from admissions.infrastructure.persistence.database import Base, TimestampMixin, enum_type
from admissions.infrastructure.persistence.models.employee_model import EmployeeModel
from admissions.infrastructure.persistence.models.user_model import UserModel

if TYPE_CHECKING:
    from admissions.infrastructure.persistence.models.application_model import (
        ApplicationModel,
    )


class StudentModel(TimestampMixin, Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    agent_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"), index=True
    )

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[Gender] = mapped_column(enum_type(Gender), nullable=False)
    date_of_birth: Mapped[Optional[datetime]] = mapped_column()
    admission_email: Mapped[Optional[str]] = mapped_column(String(255))
    branch: Mapped[Optional[str]] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)
    is_client: Mapped[bool] = mapped_column(default=True, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(1024))

    # Passport
    passport_number: Mapped[Optional[str]] = mapped_column(String(64))
    issue_date: Mapped[Optional[datetime]] = mapped_column()
    expiry_date: Mapped[Optional[datetime]] = mapped_column()
    passport_attachment: Mapped[Optional[str]] = mapped_column(String(1024))

    # Address
    region: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String(255))
    sub_city: Mapped[Optional[str]] = mapped_column(String(255))
    woreda: Mapped[Optional[str]] = mapped_column(String(64))
    kebele: Mapped[Optional[str]] = mapped_column(String(64))
    house_number: Mapped[str] = mapped_column(String(64), nullable=False)

    user: Mapped[UserModel] = relationship(lazy="selectin")
    agent: Mapped[Optional[EmployeeModel]] = relationship(lazy="selectin")
    applications: Mapped[list["ApplicationModel"]] = relationship(
        back_populates="student",
        lazy="selectin",
        order_by="ApplicationModel.created_at",
    )

    def to_entity(self, with_applications: bool = True) -> Student:
        student = Student(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            user=self.user.to_entity(),
            student_address=StudentAddress(
                region=self.region,
                city=self.city,
                sub_city=self.sub_city,
                woreda=self.woreda,
                kebele=self.kebele,
                house_number=self.house_number,
            ),
            date_of_birth=self.date_of_birth,
            admission_email=self.admission_email,
            branch=self.branch,
            is_active=self.is_active,
            is_client=self.is_client,
            image=self.image,
            passport_number=self.passport_number,
            issue_date=self.issue_date,
            expiry_date=self.expiry_date,
            passport_attachment=self.passport_attachment,
            agent=self.agent.to_entity() if self.agent is not None else None,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        if with_applications:
            student.applications = [
                application.to_entity(with_student=False)
                for application in self.applications
            ]
        return student

    def apply(self, student: Student) -> None:
        self.first_name = student.first_name
        self.last_name = student.last_name
        self.gender = student.gender
        self.date_of_birth = student.date_of_birth
        self.admission_email = student.admission_email
        self.branch = student.branch
        self.is_active = student.is_active
        self.is_client = student.is_client
        self.image = student.image
        self.passport_number = student.passport_number
        self.issue_date = student.issue_date
        self.expiry_date = student.expiry_date
        self.passport_attachment = student.passport_attachment
        self.agent_id = student.agent.id if student.agent is not None else None

        address = student.student_address
        self.region = address.region
        self.city = address.city
        self.sub_city = address.sub_city
        self.woreda = address.woreda
        self.kebele = address.kebele
        self.house_number = address.house_number

    @staticmethod
    def from_entity(student: Student) -> "StudentModel":
        if student.user.id is None:
            raise ValueError("Student user must be persisted before the student")

        model = StudentModel(user_id=student.user.id)
        model.apply(student)
        if student.id is not None:
            model.id = student.id
        return model
