"""Unit tests for app.core.security and app.services.auth.authenticate."""

import unittest
from datetime import timedelta
from unittest.mock import MagicMock

import jwt

from app.core.config import settings
from app.core.errors import Unauthenticated
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.services.auth import authenticate


class TestPasswordHashing(unittest.TestCase):
    def test_round_trip(self) -> None:
        hashed = hash_password("p")
        self.assertNotEqual(hashed, "p")
        self.assertTrue(verify_password("p", hashed))
        self.assertFalse(verify_password("q", hashed))

    def test_hashes_are_salted(self) -> None:
        self.assertNotEqual(hash_password("p"), hash_password("p"))

    def test_malformed_hash_is_false(self) -> None:
        self.assertFalse(verify_password("p", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    def test_payload_claims(self) -> None:
        payload = decode_access_token(create_access_token(user_id=7, role="admin", email="a@x.com"))
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["role"], "admin")
        self.assertEqual(payload["email"], "a@x.com")
        self.assertEqual(payload["exp"] - payload["iat"], settings.JWT_EXPIRE_MINUTES * 60)

    def test_same_second_tokens_differ(self) -> None:
        first = create_access_token(user_id=1, role="user", email="a@x.com")
        second = create_access_token(user_id=1, role="user", email="a@x.com")
        self.assertNotEqual(first, second)

    def test_expired_token_raises(self) -> None:
        token = create_access_token(1, "user", "a@x.com", expires_delta=timedelta(seconds=-1))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_foreign_signature_raises(self) -> None:
        token = jwt.encode({"sub": "1", "role": "admin", "email": "x"}, "other-secret", algorithm="HS256")
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token)


class TestAuthenticate(unittest.TestCase):
    """authenticate needs a valid signature AND a ledger row."""

    def ledger(self, present: bool) -> MagicMock:
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = (1,) if present else None
        return db

    def test_valid_and_live(self) -> None:
        token = create_access_token(user_id=3, role="user", email="u@x.com")
        principal = authenticate(self.ledger(present=True), token)
        self.assertEqual((principal.id, principal.role, principal.email), (3, "user", "u@x.com"))

    def test_valid_but_revoked(self) -> None:
        token = create_access_token(user_id=3, role="user", email="u@x.com")
        with self.assertRaises(Unauthenticated):
            authenticate(self.ledger(present=False), token)

    def test_invalid_signature_skips_ledger(self) -> None:
        db = self.ledger(present=True)
        with self.assertRaises(Unauthenticated):
            authenticate(db, "garbage")
        db.query.assert_not_called()

    def test_missing_claims(self) -> None:
        secret = settings.JWT_SECRET.get_secret_value()
        token = jwt.encode({"sub": "abc", "role": "user", "email": "e"}, secret, algorithm=settings.JWT_ALGORITHM)
        with self.assertRaises(Unauthenticated):
            authenticate(self.ledger(present=True), token)


if __name__ == "__main__":
    unittest.main()
