"""Unit tests for password hashers.

These tests verify both the fake and real password hasher implementations.
"""

import pytest

from admissions.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from tests.fakes.password_hasher_fake import FakePasswordHasher

pytestmark = pytest.mark.unit


class TestFakePasswordHasher:
    def test_hash_adds_prefix(self):
        hasher = FakePasswordHasher()

        result = hasher.hash("S3cure!pass")

        assert result == "HASHED:S3cure!pass"
        assert hasher.is_fake_hash(result)

    def test_verify_correct_password(self):
        hasher = FakePasswordHasher()

        assert hasher.verify("S3cure!pass", hasher.hash("S3cure!pass")) is True

    def test_verify_wrong_password(self):
        hasher = FakePasswordHasher()

        assert hasher.verify("Wr0ng!pass", hasher.hash("S3cure!pass")) is False

    def test_verify_invalid_hash_format(self):
        assert FakePasswordHasher().verify("S3cure!pass", "no-prefix") is False

    def test_records_hashed_passwords(self):
        hasher = FakePasswordHasher()

        hasher.hash("First!pass1")
        hasher.hash("Second!pass2")

        assert hasher.hashed == ["First!pass1", "Second!pass2"]


class TestArgon2PasswordHasher:
    """Real Argon2id hashing through pwdlib."""

    @pytest.fixture(scope="class")
    def hasher(self) -> Argon2PasswordHasher:
        return Argon2PasswordHasher()

    def test_hash_creates_argon2id_hash(self, hasher):
        hashed = hasher.hash("S3cure!pass")

        assert hashed.startswith("$argon2id$")
        assert "S3cure!pass" not in hashed

    def test_same_password_hashes_differently(self, hasher):
        # Fresh salt per call
        assert hasher.hash("S3cure!pass") != hasher.hash("S3cure!pass")

    def test_verify_correct_password(self, hasher):
        hashed = hasher.hash("S3cure!pass")

        assert hasher.verify("S3cure!pass", hashed) is True

    def test_verify_wrong_password(self, hasher):
        hashed = hasher.hash("S3cure!pass")

        assert hasher.verify("Wr0ng!pass", hashed) is False

    def test_verify_unknown_hash_format_returns_false(self, hasher):
        assert hasher.verify("S3cure!pass", "HASHED:S3cure!pass") is False
