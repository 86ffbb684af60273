"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from admissions.domain.enums import EMPLOYEE_ROLES, Role
from admissions.domain.exceptions import (
    BusinessRuleViolationException,
    InvalidEntityStateException,
)


@dataclass
class User:
    """
    A login account: either a student or an employee of the consultancy.

    Profile data that belongs to the person (gender, date of birth, address)
    lives on the Student or Employee entity that owns the account.
    """

    email: str
    first_name: str
    last_name: str
    password_hash: str
    roles: list[Role] = field(default_factory=list)
    phone_number: Optional[str] = None
    is_suspended: bool = False
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate structural invariants at construction time."""
        if not self.email or "@" not in self.email:
            raise InvalidEntityStateException(
                f"Invalid email address: '{self.email}'. Email must contain '@' symbol."
            )

        if not self.first_name or not self.first_name.strip():
            raise InvalidEntityStateException("First name cannot be empty.")

        if not self.last_name or not self.last_name.strip():
            raise InvalidEntityStateException("Last name cannot be empty.")

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )

        if not self.roles:
            raise InvalidEntityStateException("User must hold at least one role.")

        self.roles = [Role(role) for role in self.roles]

    @property
    def is_employee(self) -> bool:
        """True if the user holds any staff role."""
        return any(role in EMPLOYEE_ROLES for role in self.roles)

    def change_email(self, new_email: str) -> None:
        """
        Change the login email.

        Raises:
            BusinessRuleViolationException: If the email is invalid
        """
        if not new_email or "@" not in new_email:
            raise BusinessRuleViolationException(
                f"Cannot change email to invalid address: '{new_email}'. Email must contain '@' symbol."
            )

        self.email = new_email
        self._touch()

    def change_phone_number(self, phone_number: str) -> None:
        if not phone_number:
            raise BusinessRuleViolationException("Phone number cannot be empty.")

        self.phone_number = phone_number
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            raise BusinessRuleViolationException("Password hash cannot be empty.")

        self.password_hash = password_hash
        self._touch()

    def rename(self, first_name: Optional[str] = None, last_name: Optional[str] = None) -> None:
        """
        Change first and/or last name.

        Raises:
            BusinessRuleViolationException: If a supplied name is blank
        """
        for value in (first_name, last_name):
            if value is not None and not value.strip():
                raise BusinessRuleViolationException(
                    "Cannot change name to empty value. Names must contain at least one character."
                )

        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        self._touch()

    def assign_roles(self, roles: list[Role]) -> None:
        """
        Replace the user's roles.

        Raises:
            BusinessRuleViolationException: If the new role list is empty
        """
        if not roles:
            raise BusinessRuleViolationException("User must hold at least one role.")

        self.roles = list(dict.fromkeys(Role(role) for role in roles))
        self._touch()

    def suspend(self) -> None:
        self.is_suspended = True
        self._touch()

    def reinstate(self) -> None:
        self.is_suspended = False
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
