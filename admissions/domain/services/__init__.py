"""Domain service interfaces."""

from admissions.domain.services.password_hasher import IPasswordHasher
from admissions.domain.services.token_service import ITokenService, TokenData

__all__ = ["IPasswordHasher", "ITokenService", "TokenData"]
