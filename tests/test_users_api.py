"""API tests for /users: password hashing, profile image, and token revocation on delete."""

import unittest

from helpers import PNG_BYTES, ApiTestCase

from app.core.security import verify_password
from app.models import Token, User


class UsersApiTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.admin_headers()

    def create_member(self, with_image: bool = False) -> dict:
        files = {"image": ("me.png", PNG_BYTES, "image/png")} if with_image else None
        response = self.client.post(
            "/users",
            data={"name": "Member", "email": "member@x.com", "password": "pw"},
            files=files,
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def ledger_count(self, user_id: int) -> int:
        db = self.SessionLocal()
        try:
            return db.query(Token).filter(Token.user_id == user_id).count()
        finally:
            db.close()


class TestCreateAndUpdate(UsersApiTestCase):
    def test_password_is_hashed_and_never_returned(self) -> None:
        member = self.create_member()
        self.assertNotIn("password", member)
        self.assertNotIn("password_hash", member)
        self.assertEqual(member["role"], "user")

        db = self.SessionLocal()
        try:
            row = db.get(User, member["id"])
            self.assertNotEqual(row.password_hash, "pw")
            self.assertTrue(verify_password("pw", row.password_hash))
        finally:
            db.close()
        self.login("member@x.com", "pw")

    def test_password_change_takes_effect(self) -> None:
        member = self.create_member()
        response = self.client.put(
            f"/users/{member['id']}", data={"password": "new-pw"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            self.client.post("/auth/login", json={"email": "member@x.com", "password": "pw"}).status_code,
            401,
        )
        self.login("member@x.com", "new-pw")

    def test_duplicate_email_is_400(self) -> None:
        self.create_member()
        response = self.client.post(
            "/users",
            data={"name": "Again", "email": "member@x.com", "password": "pw"},
            files={"image": ("x.png", PNG_BYTES, "image/png")},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.stored_names(), set())

    def test_invalid_role_is_400(self) -> None:
        member = self.create_member()
        response = self.client.put(f"/users/{member['id']}", data={"role": "owner"}, headers=self.headers)
        self.assertEqual(response.status_code, 400)


class TestDelete(UsersApiTestCase):
    def test_soft_delete_revokes_tokens_and_blocks_login(self) -> None:
        member = self.create_member(with_image=True)
        token = self.login("member@x.com", "pw")
        self.assertEqual(self.ledger_count(member["id"]), 1)

        response = self.client.put(f"/users/delete/{member['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)

        self.assertEqual(self.ledger_count(member["id"]), 0)
        self.assertEqual(
            self.client.get("/auth/me", headers={"Authorization": f"Bearer {token}"}).status_code, 401
        )
        self.assertEqual(
            self.client.post("/auth/login", json={"email": "member@x.com", "password": "pw"}).status_code,
            404,
        )
        self.assertEqual(len(self.stored_names()), 1)

    def test_soft_delete_unknown_user_is_404(self) -> None:
        response = self.client.put("/users/delete/999", headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_hard_delete_removes_row_tokens_and_image(self) -> None:
        member = self.create_member(with_image=True)
        self.login("member@x.com", "pw")

        response = self.client.delete(f"/users/{member['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Deleted"})

        db = self.SessionLocal()
        try:
            self.assertIsNone(db.get(User, member["id"]))
        finally:
            db.close()
        self.assertEqual(self.ledger_count(member["id"]), 0)
        self.assertEqual(self.stored_names(), set())

    def test_hard_delete_unknown_user_is_404(self) -> None:
        self.assertEqual(self.client.delete("/users/999", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
