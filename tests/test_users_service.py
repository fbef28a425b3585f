"""User management service tests: self-or-admin rules, role changes, existence checks."""

import unittest

from inputly.core.errors import DuplicateAccount, Forbidden, NotFound, ValidationFailed
from inputly.core.security import verify_password
from inputly.models import User
from inputly.schemas.auth import CurrentUser
from inputly.services import accounts
from inputly.services import users as users_service
from tests.support import DatabaseTestCase


def _requester(user: User) -> CurrentUser:
    return CurrentUser(**user.identity())


class UsersServiceTestCase(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.ann = accounts.register(self.db, "Ann Lee", "ann@x.com", "password1", "user")
        self.bob = accounts.register(self.db, "Bob Ray", "bob@x.com", "password1", "user")
        self.root = accounts.register(self.db, "Root Admin", "root@x.com", "password1", "admin")


class TestCanModify(unittest.TestCase):
    def test_rules(self) -> None:
        user = CurrentUser(id=5, email="a@x.com", role="user", name="Ann")
        admin = CurrentUser(id=9, email="r@x.com", role="admin", name="Root")
        self.assertTrue(users_service.can_modify(user, 5))
        self.assertFalse(users_service.can_modify(user, 7))
        self.assertTrue(users_service.can_modify(admin, 7))


class TestListAndGet(UsersServiceTestCase):
    def test_list_newest_first_and_bounded(self) -> None:
        rows = users_service.list_users(self.db, limit=2)
        self.assertEqual([u.id for u in rows], [self.root.id, self.bob.id])

    def test_get_missing(self) -> None:
        with self.assertRaises(NotFound):
            users_service.get_user(self.db, 9999)

    def test_create_user_hashes_password(self) -> None:
        user = users_service.create_user(
            self.db,
            {"name": "Cy Dee", "email": "cy@x.com", "password": "password1", "role": "admin"},
        )
        self.assertEqual(user.role, "admin")
        self.assertTrue(verify_password("password1", user.password_hash))

    def test_create_user_duplicate(self) -> None:
        with self.assertRaises(DuplicateAccount):
            users_service.create_user(
                self.db,
                {"name": "Ann Again", "email": "ann@x.com", "password": "password1"},
            )


class TestUpdate(UsersServiceTestCase):
    def test_self_can_edit_own_fields(self) -> None:
        updated = users_service.update_user(
            self.db, self.ann.id, {"name": "Ann X"}, _requester(self.ann)
        )
        self.assertEqual(updated.name, "Ann X")

    def test_self_cannot_self_promote(self) -> None:
        with self.assertRaises(Forbidden):
            users_service.update_user(
                self.db, self.ann.id, {"role": "admin"}, _requester(self.ann)
            )
        self.db.refresh(self.ann)
        self.assertEqual(self.ann.role, "user")

    def test_user_cannot_edit_others(self) -> None:
        with self.assertRaises(Forbidden):
            users_service.update_user(
                self.db, self.bob.id, {"name": "Hacked"}, _requester(self.ann)
            )

    def test_admin_can_change_role(self) -> None:
        updated = users_service.update_user(
            self.db, self.bob.id, {"role": "admin"}, _requester(self.root)
        )
        self.assertEqual(updated.role, "admin")

    def test_admin_update_missing_is_not_found(self) -> None:
        with self.assertRaises(NotFound):
            users_service.update_user(self.db, 9999, {"name": "Ghost"}, _requester(self.root))

    def test_password_change_is_hashed(self) -> None:
        users_service.update_user(
            self.db, self.ann.id, {"password": "new-password"}, _requester(self.ann)
        )
        self.assertTrue(accounts.authenticate(self.db, "ann@x.com", "new-password"))

    def test_email_taken_by_another_account(self) -> None:
        with self.assertRaises(DuplicateAccount):
            users_service.update_user(
                self.db, self.ann.id, {"email": "BOB@x.com"}, _requester(self.ann)
            )

    def test_unknown_field_rejected(self) -> None:
        with self.assertRaises(ValidationFailed):
            users_service.update_user(
                self.db, self.ann.id, {"nickname": "annie"}, _requester(self.root)
            )

    def test_email_change_normalized(self) -> None:
        updated = users_service.update_user(
            self.db, self.ann.id, {"email": "Ann.Lee@X.com"}, _requester(self.ann)
        )
        self.assertEqual(updated.email, "ann.lee@x.com")


class TestDelete(UsersServiceTestCase):
    def test_user_cannot_delete_others(self) -> None:
        with self.assertRaises(Forbidden):
            users_service.delete_user(self.db, self.bob.id, _requester(self.ann))
        self.assertIsNotNone(self.db.get(User, self.bob.id))

    def test_admin_deletes_existing(self) -> None:
        bob_id = self.bob.id
        deleted = users_service.delete_user(self.db, bob_id, _requester(self.root))
        self.assertEqual(deleted.id, bob_id)
        self.assertEqual(deleted.email, "bob@x.com")
        self.assertIsNone(self.db.get(User, bob_id))

    def test_admin_delete_missing_is_not_found(self) -> None:
        with self.assertRaises(NotFound):
            users_service.delete_user(self.db, 9999, _requester(self.root))

    def test_self_delete(self) -> None:
        users_service.delete_user(self.db, self.ann.id, _requester(self.ann))
        with self.assertRaises(NotFound):
            users_service.get_user(self.db, self.ann.id)


if __name__ == "__main__":
    unittest.main()
