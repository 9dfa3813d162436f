"""
Security Helpers

Password hashing through passlib and random tokens for sessions and
password resets.
"""

import secrets

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # unrecognized hash format
        return False


def generate_reset_token() -> str:
    return secrets.token_hex(32)


def generate_session_token() -> str:
    return secrets.token_urlsafe(32)
