"""Argon2 password hasher implementation using pwdlib.

pwdlib is only imported here; services depend on IPasswordHasher and unit
tests swap in a fake.
"""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher

from admissions.domain.services.password_hasher import IPasswordHasher


class Argon2PasswordHasher(IPasswordHasher):
    """
    Password hasher using Argon2id via pwdlib, with pwdlib's defaults
    (64 MB memory, 3 iterations, 4 lanes).

    Usage:
        hasher = Argon2PasswordHasher()
        hashed = hasher.hash("S3cure!pass")
        # "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"
        hasher.verify("S3cure!pass", hashed)  # True
    """

    def __init__(self):
        self._password_hash = PasswordHash((Argon2Hasher(),))

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password using Argon2id.

        Each call draws a fresh salt, so equal passwords hash differently.
        """
        return self._password_hash.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against an Argon2 hash.

        Returns False for hashes pwdlib does not recognise instead of raising.
        """
        try:
            return self._password_hash.verify(plain_password, hashed_password)
        except UnknownHashError:
            return False
