"""Unit tests for PasswordHashingService."""

import pytest

from myhome_auth import PasswordHashingService, WeakPasswordError


class TestPasswordHashing:
    def setup_method(self):
        # Minimum bcrypt work factor keeps the tests fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_is_bcrypt_and_not_plaintext(self):
        hashed = self.service.hash("secure_password_123")

        assert hashed != "secure_password_123"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self):
        assert self.service.hash("secure_password_123") != self.service.hash(
            "secure_password_123",
        )

    def test_verify_correct_password(self):
        hashed = self.service.hash("secure_password_123")

        assert self.service.verify("secure_password_123", hashed)

    def test_verify_wrong_password(self):
        hashed = self.service.hash("secure_password_123")

        assert not self.service.verify("wrong_password_123", hashed)

    def test_verify_malformed_hash_returns_false(self):
        assert not self.service.verify("secure_password_123", "not-a-bcrypt-hash")

    def test_verify_dummy_never_matches(self):
        assert self.service.verify_dummy("secure_password_123") is False
        assert self.service.verify_dummy("x" * 100) is False


class TestPasswordStrength:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    @pytest.mark.parametrize("password", ["", "short", "1234567"])
    def test_too_short_rejected(self, password):
        with pytest.raises(WeakPasswordError):
            self.service.validate_strength(password)

    def test_longer_than_bcrypt_limit_rejected(self):
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.validate_strength("a" * 73)

    def test_hash_validates_strength(self):
        with pytest.raises(WeakPasswordError):
            self.service.hash("short")

    def test_minimum_length_accepted(self):
        self.service.validate_strength("12345678")
