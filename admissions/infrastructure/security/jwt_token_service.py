"""JWT token service implementation using PyJWT.

Dependency flow:
    AuthService (application) -> ITokenService (domain) <- JWTTokenService (infrastructure)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid

import jwt
from jwt.exceptions import InvalidTokenError

from admissions.domain.enums import Role
from admissions.domain.services.token_service import ITokenService, TokenData


class JWTTokenService(ITokenService):
    """
    Access tokens as HS256-signed JWTs.

    Payload claims:
    - sub: user id (UUID string)
    - email, roles
    - exp, iat, jti
    - type: always "access"
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 30,
    ):
        """
        Raises:
            ValueError: If secret_key is shorter than 32 characters
        """
        if len(secret_key) < 32:
            raise ValueError("Secret key must be at least 32 characters long")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_token_expire_minutes = access_token_expire_minutes

    @property
    def expires_in(self) -> int:
        return self._access_token_expire_minutes * 60

    def generate_access_token(
        self, user_id: uuid.UUID, email: str, roles: list[Role]
    ) -> str:
        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=self._access_token_expire_minutes)

        payload = {
            "sub": str(user_id),
            "email": email,
            "roles": [Role(role).value for role in roles],
            "exp": expires_at,
            "iat": now,
            "jti": str(uuid.uuid4()),
            "type": "access",
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify_token(self, token: str) -> Optional[TokenData]:
        """
        Verify signature and expiry, then decode the claims.

        Returns:
            TokenData if valid, None if invalid/expired/wrong type
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )

            if payload.get("type") != "access":
                return None

            return TokenData(
                user_id=uuid.UUID(payload["sub"]),
                email=payload["email"],
                roles=[Role(role) for role in payload.get("roles", [])],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_id=payload.get("jti"),
            )

        except (InvalidTokenError, ValueError, KeyError):
            # Invalid signature, expired, or malformed claims
            return None
