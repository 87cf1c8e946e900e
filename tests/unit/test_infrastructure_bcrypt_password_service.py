"""Unit tests for BcryptPasswordService."""

import pytest

from src.infrastructure.security import BcryptPasswordService


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.mark.unit
class TestBcryptPasswordService:
    """Test hashing and verification."""

    def test_hash_verifies(self, password_service):
        password_hash = password_service.hash_password("s3cret-Pass")

        assert password_hash.startswith("$2b$04$")
        assert password_service.verify_password("s3cret-Pass", password_hash)

    def test_wrong_password_fails(self, password_service):
        password_hash = password_service.hash_password("s3cret-Pass")

        assert not password_service.verify_password("wrong-Pass", password_hash)

    def test_same_password_gets_different_salts(self, password_service):
        assert password_service.hash_password("pw") != password_service.hash_password(
            "pw"
        )

    def test_malformed_hash_fails_closed(self, password_service):
        assert not password_service.verify_password("s3cret-Pass", "not-a-bcrypt-hash")

    def test_72_byte_password_hashes(self, password_service):
        password = "x" * 72
        password_hash = password_service.hash_password(password)

        assert password_service.verify_password(password, password_hash)

    def test_password_over_72_bytes_is_refused_not_truncated(self, password_service):
        base = "x" * 72

        with pytest.raises(ValueError):
            password_service.hash_password(base + "tail-one")

        password_hash = password_service.hash_password(base)
        assert not password_service.verify_password(base + "tail-two", password_hash)

    def test_multibyte_characters_count_as_bytes(self, password_service):
        # 25 characters, 75 bytes
        with pytest.raises(ValueError):
            password_service.hash_password("€" * 25)

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_cost_factor_out_of_range(self, cost_factor):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost_factor)
