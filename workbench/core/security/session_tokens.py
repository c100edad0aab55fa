"""
Signed session tokens.

Session cookies carry the user id signed and timestamped with
itsdangerous, so no server-side session table is needed.

Dependencies: itsdangerous
System role: Session token issue and verification
"""

import logging
from uuid import UUID

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

logger = logging.getLogger(__name__)

TOKEN_SALT = "workbench-session"


class SessionTokenSigner:
    """Issue and verify expiring session tokens for user ids."""

    def __init__(self, secret: str, max_age: int) -> None:
        """
        Initialize signer.

        Args:
            secret: Signing key
            max_age: Token lifetime in seconds
        """
        self._serializer = URLSafeTimedSerializer(secret, salt=TOKEN_SALT)
        self.max_age = max_age

    def issue(self, user_id: UUID) -> str:
        """Sign a token for the given user."""
        return self._serializer.dumps({"user_id": str(user_id)})

    def verify(self, token: str) -> UUID | None:
        """
        Verify a token and return the user id it carries.

        Args:
            token: Value of the session cookie

        Returns:
            UUID | None: User id, or None if the token is expired, tampered or malformed
        """
        try:
            payload = self._serializer.loads(token, max_age=self.max_age)
        except SignatureExpired:
            logger.info("Session token expired")
            return None
        except BadSignature:
            logger.warning("Session token signature invalid")
            return None

        try:
            return UUID(payload["user_id"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Session token payload malformed")
            return None
