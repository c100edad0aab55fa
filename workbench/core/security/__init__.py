"""Password hashing and signed session tokens."""

from workbench.core.security.passwords import hash_password, verify_password
from workbench.core.security.session_tokens import SessionTokenSigner

__all__ = ["SessionTokenSigner", "hash_password", "verify_password"]
