import bcrypt
import pytest

from showroom.utils.security import CredentialError, hash_password


def test_hash_is_opaque_bcrypt():
    hashed = hash_password("password123")
    assert hashed != "password123"
    assert hashed.startswith("$2")
    assert bcrypt.checkpw(b"password123", hashed.encode("utf-8"))
    assert not bcrypt.checkpw(b"wrong", hashed.encode("utf-8"))


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_empty_password_is_rejected():
    with pytest.raises(CredentialError):
        hash_password("")
