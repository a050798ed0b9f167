"""Unit tests for password hashing."""

import pytest

from forum.util.password import MAX_PASSWORD_BYTES, hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_round_trip(self):
        hashed = hash_password("correct horse")

        assert verify_password("correct horse", hashed)
        assert not verify_password("battery staple", hashed)

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_password_at_byte_limit_accepted(self):
        password = "x" * MAX_PASSWORD_BYTES

        assert verify_password(password, hash_password(password))

    def test_password_over_byte_limit_rejected(self):
        # Multi-byte characters count by encoded length
        with pytest.raises(ValueError):
            hash_password("é" * 40)

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("pw", "not-a-bcrypt-hash")
