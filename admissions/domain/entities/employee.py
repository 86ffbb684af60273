"""Employee domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.domain.entities.user import User
from admissions.domain.enums import Gender
from admissions.domain.exceptions import InvalidEntityStateException


@dataclass
class Employee:
    """Staff member of the consultancy, owning exactly one user account."""

    first_name: str
    last_name: str
    gender: Gender
    user: User
    date_of_birth: Optional[datetime] = None
    student_assignment_count: int = 0
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.first_name or not self.first_name.strip():
            raise InvalidEntityStateException("Employee first name cannot be empty.")

        if not self.last_name or not self.last_name.strip():
            raise InvalidEntityStateException("Employee last name cannot be empty.")

        if not self.user.is_employee:
            raise InvalidEntityStateException(
                "Employee account must hold at least one staff role."
            )

        self.gender = Gender(self.gender)

    def rename(self, first_name: Optional[str] = None, last_name: Optional[str] = None) -> None:
        """Rename the employee and keep the account name in sync."""
        self.user.rename(first_name, last_name)
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
