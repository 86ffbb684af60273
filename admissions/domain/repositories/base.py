"""Generic repository contract shared by every aggregate."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List
from uuid import UUID

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface shared by every aggregate.

    Identifiers are UUIDs generated by the persistence layer on insert.

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def get_by_id(self, id: UUID) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        """Retrieve entities with pagination."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Add a new entity.

        Returns:
            The added entity with generated fields (id, timestamps)
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        pass

    @abstractmethod
    async def exists(self, id: UUID) -> bool:
        pass
