"""Password hashing interface - domain service abstraction.

Passwords are hashed before storage and verified at login. Which algorithm
and library do the work is an infrastructure detail.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Hash and verify passwords without naming an algorithm."""

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Returns:
            Hash string embedding its own salt and parameters
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Return True if ``plain_password`` matches ``hashed_password``."""
        pass
