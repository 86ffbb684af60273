"""Token service interface - domain layer abstraction.

Authenticated users receive a bearer access token that identifies them and
carries their roles until it expires.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from uuid import UUID

from admissions.domain.enums import Role


class TokenData:
    """Decoded access token claims."""

    def __init__(
        self,
        user_id: UUID,
        email: str,
        roles: list[Role],
        issued_at: datetime,
        expires_at: datetime,
        token_id: str | None = None,
    ):
        self.user_id = user_id
        self.email = email
        self.roles = roles
        self.issued_at = issued_at
        self.expires_at = expires_at
        self.token_id = token_id

    @property
    def is_expired(self) -> bool:
        return datetime.now(timezone.utc) > self.expires_at


class ITokenService(ABC):
    """Issue and verify access tokens."""

    @property
    @abstractmethod
    def expires_in(self) -> int:
        """Lifetime of issued tokens in seconds."""
        pass

    @abstractmethod
    def generate_access_token(
        self, user_id: UUID, email: str, roles: list[Role]
    ) -> str:
        """
        Generate an access token for a user.

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def verify_token(self, token: str) -> TokenData | None:
        """
        Verify and decode a token.

        Returns:
            TokenData if the token is valid, None if invalid or expired
        """
        pass
