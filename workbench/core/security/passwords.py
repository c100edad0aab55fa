"""
Password hashing.

Dependencies: bcrypt
System role: Credential storage and verification
"""

import bcrypt


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh bcrypt salt.

    Args:
        password: Plain-text password

    Returns:
        str: bcrypt hash suitable for storage
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Args:
        password: Plain-text password supplied at login
        password_hash: Stored hash

    Returns:
        bool: True if the password matches
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
