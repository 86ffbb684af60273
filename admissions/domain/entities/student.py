"""Student domain entity and its value objects."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from admissions.domain.entities.employee import Employee
from admissions.domain.entities.user import User
from admissions.domain.enums import Gender
from admissions.domain.exceptions import (
    BusinessRuleViolationException,
    InvalidEntityStateException,
)

if TYPE_CHECKING:
    from admissions.domain.entities.application import Application


def _as_utc(value: datetime) -> datetime:
    # Rows read back from SQLite carry no tzinfo
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


@dataclass
class StudentAddress:
    """Ethiopian-style postal address: region down to house number."""

    region: str
    house_number: str
    city: Optional[str] = None
    sub_city: Optional[str] = None
    woreda: Optional[str] = None
    kebele: Optional[str] = None


@dataclass
class Student:
    """
    A (prospective) student handled by the consultancy.

    Non-client students signed up on their own and have not yet been taken
    on by an agent.
    """

    first_name: str
    last_name: str
    gender: Gender
    user: User
    student_address: StudentAddress
    date_of_birth: Optional[datetime] = None
    admission_email: Optional[str] = None
    branch: Optional[str] = None
    is_active: bool = True
    is_client: bool = True
    image: Optional[str] = None
    passport_number: Optional[str] = None
    issue_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    passport_attachment: Optional[str] = None
    agent: Optional[Employee] = None
    applications: list["Application"] = field(default_factory=list, repr=False)
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.first_name or not self.first_name.strip():
            raise InvalidEntityStateException("Student first name cannot be empty.")

        if not self.last_name or not self.last_name.strip():
            raise InvalidEntityStateException("Student last name cannot be empty.")

        self.gender = Gender(self.gender)

    def update_passport(
        self,
        passport_number: Optional[str] = None,
        issue_date: Optional[datetime] = None,
        expiry_date: Optional[datetime] = None,
        passport_attachment: Optional[str] = None,
    ) -> None:
        """
        Update passport details.

        Business rule: a passport must expire after it was issued.

        Raises:
            BusinessRuleViolationException: If expiry is not after issue
        """
        new_issue = issue_date if issue_date is not None else self.issue_date
        new_expiry = expiry_date if expiry_date is not None else self.expiry_date
        if (
            new_issue is not None
            and new_expiry is not None
            and _as_utc(new_expiry) <= _as_utc(new_issue)
        ):
            raise BusinessRuleViolationException(
                "Passport expiry date must be after its issue date."
            )

        if passport_number is not None:
            self.passport_number = passport_number
        self.issue_date = new_issue
        self.expiry_date = new_expiry
        if passport_attachment is not None:
            self.passport_attachment = passport_attachment
        self._touch()

    def update_address(self, **changes: Optional[str]) -> None:
        """Apply the non-None address fields in ``changes``."""
        for name, value in changes.items():
            if value is None:
                continue
            if not hasattr(self.student_address, name):
                raise BusinessRuleViolationException(f"Unknown address field: {name}")
            setattr(self.student_address, name, value)
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
