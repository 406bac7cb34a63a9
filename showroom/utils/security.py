"""
Credential helpers.

Passwords are stored as bcrypt hashes; the hash is opaque to every other
layer and never serialized back to clients.
"""

from __future__ import annotations

import bcrypt


class CredentialError(ValueError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise CredentialError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")

