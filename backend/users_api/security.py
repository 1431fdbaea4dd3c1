"""Hashing for the passwords stored in ``password_hash``.

Nothing in this service authenticates against the hash; it is stored
for whichever login service reads the tenant tables.
"""
from passlib.context import CryptContext

# PBKDF2-SHA256 needs no native bcrypt backend
password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return password_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a hash produced by ``hash_password``."""
    return password_context.verify(password, password_hash)
