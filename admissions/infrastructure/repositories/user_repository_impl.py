"""User repository implementation using SQLAlchemy."""

from typing import List, Optional

from sqlalchemy import select

from admissions.domain.entities.user import User
from admissions.domain.repositories.user_repository import IUserRepository
from admissions.infrastructure.persistence.models.user_model import UserModel
from admissions.infrastructure.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)


class UserRepository(SQLAlchemyRepository[User], IUserRepository):
    model = UserModel

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[User]:
        return await self._many(
            select(UserModel).order_by(UserModel.created_at).offset(skip).limit(limit)
        )

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._one(select(UserModel).where(UserModel.email == email.lower()))

    async def email_exists(self, email: str) -> bool:
        result = await self._session.execute(
            select(UserModel.id).where(UserModel.email == email.lower())
        )
        return result.scalar_one_or_none() is not None
