"""Unit tests for password hashing."""

from backend.security.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password / verify_password."""

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("mysecretpassword")
        assert hashed != "mysecretpassword"
        assert hashed.startswith("$2")

    def test_verify_matching_password(self):
        hashed = hash_password("mysecretpassword")
        assert verify_password("mysecretpassword", hashed)

    def test_verify_wrong_password(self):
        hashed = hash_password("mysecretpassword")
        assert not verify_password("wrongpassword", hashed)

    def test_unrecognised_hash_is_a_mismatch(self):
        assert not verify_password("mysecretpassword", "plaintext-not-a-hash")

    def test_long_passwords_are_supported(self):
        long_password = "ü" * 60  # 120 bytes in UTF-8
        hashed = hash_password(long_password)
        assert verify_password(long_password, hashed)

    def test_new_hashes_use_bcrypt(self):
        assert hash_password("mysecretpassword").startswith("$2b$")
