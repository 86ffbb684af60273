"""Employee ORM model."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admissions.domain.entities.employee import Employee
from admissions.domain.enums import Gender
from admissions.infrastructure.persistence.database import Base, TimestampMixin, enum_type
from admissions.infrastructure.persistence.models.user_model import UserModel


class EmployeeModel(TimestampMixin, Base):
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[Gender] = mapped_column(enum_type(Gender), nullable=False)
    date_of_birth: Mapped[Optional[datetime]] = mapped_column()
    # Used to spread new students across agents
    student_assignment_count: Mapped[int] = mapped_column(default=0, nullable=False)

    user: Mapped[UserModel] = relationship(lazy="selectin")

    def to_entity(self) -> Employee:
        return Employee(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            user=self.user.to_entity(),
            date_of_birth=self.date_of_birth,
            student_assignment_count=self.student_assignment_count,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def apply(self, employee: Employee) -> None:
        self.first_name = employee.first_name
        self.last_name = employee.last_name
        self.gender = employee.gender
        self.date_of_birth = employee.date_of_birth
        self.student_assignment_count = employee.student_assignment_count

    @staticmethod
    def from_entity(employee: Employee) -> "EmployeeModel":
        if employee.user.id is None:
            raise ValueError("Employee user must be persisted before the employee")

        model = EmployeeModel(user_id=employee.user.id)
        model.apply(employee)
        if employee.id is not None:
            model.id = employee.id
        return model
