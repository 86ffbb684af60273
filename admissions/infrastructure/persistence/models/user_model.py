"""Login accounts shared by employees and students."""

import uuid
from typing import Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from admissions.domain.entities.user import User
from admissions.domain.enums import Role
from admissions.infrastructure.persistence.database import Base, TimestampMixin


class UserModel(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    # Always stored lower-cased
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(255))
    last_name: Mapped[str] = mapped_column(String(255))
    phone_number: Mapped[Optional[str]] = mapped_column(String(32))
    # Role values, e.g. ["Agent", "Admission"]
    roles: Mapped[list[str]] = mapped_column(JSON, default=list)
    is_suspended: Mapped[bool] = mapped_column(default=False)
    password_hash: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, email={self.email!r})"

    def to_entity(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            password_hash=self.password_hash,
            roles=[Role(role) for role in self.roles],
            phone_number=self.phone_number,
            is_suspended=self.is_suspended,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def apply(self, user: User) -> None:
        """Copy mutable entity state onto this row."""
        self.email = user.email
        self.first_name = user.first_name
        self.last_name = user.last_name
        self.password_hash = user.password_hash
        self.roles = [role.value for role in user.roles]
        self.phone_number = user.phone_number
        self.is_suspended = user.is_suspended

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        model = UserModel()
        model.apply(user)
        if user.id is not None:
            model.id = user.id
        return model
