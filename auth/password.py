"""
Password hashing and verification.

bcrypt with automatic salting. The work factor comes from
``config.bcrypt_rounds``; hashes made with a different factor are
upgraded on the next successful login (see ``needs_rehash``).
"""

from __future__ import annotations

import bcrypt

from config.settings import config

# bcrypt only reads the first 72 bytes; newer releases reject anything longer
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode()) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    if password_too_long(password):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds or config.bcrypt_rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash; False for malformed hashes."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


def needs_rehash(password_hash: str) -> bool:
    """True when ``password_hash`` was produced with a different work factor."""
    # $2b$<cost>$<salt+digest>
    parts = password_hash.split("$")
    if len(parts) != 4 or not parts[2].isdigit():
        return True
    return int(parts[2]) != config.bcrypt_rounds
