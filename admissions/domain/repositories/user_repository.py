"""User repository interface."""

from abc import abstractmethod

from admissions.domain.entities.user import User
from admissions.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """User-specific queries on top of the base contract."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """
        Find a user by their (lower-cased) email address.

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        pass
