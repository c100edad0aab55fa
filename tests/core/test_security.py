"""Tests for password hashing and session tokens."""

import time
import uuid

from workbench.core.security import SessionTokenSigner, hash_password, verify_password


class TestPasswords:
    def test_hash_verifies(self) -> None:
        hashed = hash_password("correct horse")

        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)

    def test_wrong_password_fails(self) -> None:
        assert not verify_password("wrong", hash_password("correct horse"))

    def test_malformed_hash_fails(self) -> None:
        assert not verify_password("anything", "not-a-bcrypt-hash")


class TestSessionTokenSigner:
    def test_round_trip(self) -> None:
        signer = SessionTokenSigner(secret="s3cret", max_age=60)
        user_id = uuid.uuid4()

        assert signer.verify(signer.issue(user_id)) == user_id

    def test_rejects_token_from_other_secret(self) -> None:
        token = SessionTokenSigner(secret="one", max_age=60).issue(uuid.uuid4())

        assert SessionTokenSigner(secret="two", max_age=60).verify(token) is None

    def test_rejects_garbage(self) -> None:
        signer = SessionTokenSigner(secret="s3cret", max_age=60)

        assert signer.verify("garbage") is None

    def test_rejects_expired_token(self, monkeypatch) -> None:
        signer = SessionTokenSigner(secret="s3cret", max_age=10)
        token = signer.issue(uuid.uuid4())

        real_time = time.time
        monkeypatch.setattr(time, "time", lambda: real_time() + 3600)

        assert signer.verify(token) is None
