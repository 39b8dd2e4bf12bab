import unittest
from datetime import datetime, timezone

from sqlmodel import Session

from recipes_book.core.database import build_engine, create_db_and_tables
from recipes_book.core.store import ConstraintKind, ConstraintViolationError, NotFoundError, Store


class TestStore(unittest.TestCase):

    def setUp(self):
        self.engine = build_engine("sqlite://")
        create_db_and_tables(self.engine)
        self.session = Session(self.engine)
        self.store = Store(self.session)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

    def create_author(self, username: str):
        return self.store.create_author(username=username, hashed_password="hash", email=f"{username}@mail.com")

    def test_create_and_get_author(self):
        self.create_author("alice")

        author = self.store.get_author("alice")
        self.assertEqual(author.email, "alice@mail.com")
        self.assertIsNotNone(author.created_at)

    def test_get_missing_author(self):
        with self.assertRaises(NotFoundError):
            self.store.get_author("ghost")

    def test_duplicate_username(self):
        self.create_author("alice")

        with self.assertRaises(ConstraintViolationError) as ctx:
            self.store.create_author(username="alice", hashed_password="hash", email="other@mail.com")
        self.assertEqual(ctx.exception.kind, ConstraintKind.UNIQUE)

    def test_duplicate_email(self):
        self.create_author("alice")

        with self.assertRaises(ConstraintViolationError) as ctx:
            self.store.create_author(username="bob", hashed_password="hash", email="alice@mail.com")
        self.assertEqual(ctx.exception.kind, ConstraintKind.UNIQUE)

    def test_update_author(self):
        self.create_author("alice")
        now = datetime.now(timezone.utc)

        author = self.store.update_author(username="alice", email="new@mail.com", hashed_password="hash2", updated_at=now)

        self.assertEqual(author.email, "new@mail.com")
        self.assertEqual(author.hashed_password, "hash2")

    def test_update_author_to_taken_email(self):
        self.create_author("alice")
        self.create_author("bob")

        with self.assertRaises(ConstraintViolationError) as ctx:
            self.store.update_author(
                username="alice",
                email="bob@mail.com",
                hashed_password="hash",
                updated_at=datetime.now(timezone.utc),
            )
        self.assertEqual(ctx.exception.kind, ConstraintKind.UNIQUE)

    def test_list_authors(self):
        for name in ["carol", "alice", "bob", "dave", "erin", "frank"]:
            self.create_author(name)

        first_page = self.store.list_authors(limit=5, offset=0)
        second_page = self.store.list_authors(limit=5, offset=5)

        self.assertEqual([a.username for a in first_page], ["alice", "bob", "carol", "dave", "erin"])
        self.assertEqual([a.username for a in second_page], ["frank"])

    def test_recipe_for_missing_author(self):
        with self.assertRaises(ConstraintViolationError) as ctx:
            self.store.create_recipe(author="ghost", ingredients=["egg"], steps=["boil"])
        self.assertEqual(ctx.exception.kind, ConstraintKind.FOREIGN_KEY)

    def test_recipe_lifecycle(self):
        self.create_author("alice")
        recipe = self.store.create_recipe(author="alice", ingredients=["egg"], steps=["boil"])
        self.assertIsNotNone(recipe.id)

        fetched = self.store.get_recipe(recipe.id)
        self.assertEqual(fetched.author, "alice")
        self.assertEqual(fetched.ingredients, ["egg"])

        updated = self.store.update_recipe(
            recipe_id=recipe.id,
            ingredients=["egg", "salt"],
            steps=["boil", "peel"],
            updated_at=datetime.now(timezone.utc),
        )
        self.assertEqual(updated.ingredients, ["egg", "salt"])
        self.assertEqual(self.store.get_recipe(recipe.id).steps, ["boil", "peel"])

        self.store.delete_recipe(recipe.id)
        with self.assertRaises(NotFoundError):
            self.store.get_recipe(recipe.id)

    def test_list_recipes(self):
        self.create_author("alice")
        for i in range(7):
            self.store.create_recipe(author="alice", ingredients=[f"item{i}"], steps=["cook"])

        self.assertEqual(len(self.store.list_recipes(limit=5, offset=0)), 5)
        self.assertEqual(len(self.store.list_recipes(limit=5, offset=5)), 2)

    def test_delete_author_with_recipes(self):
        self.create_author("alice")
        self.store.create_recipe(author="alice", ingredients=["egg"], steps=["boil"])

        with self.assertRaises(ConstraintViolationError) as ctx:
            self.store.delete_author("alice")
        self.assertEqual(ctx.exception.kind, ConstraintKind.FOREIGN_KEY)
        self.assertEqual(self.store.get_author("alice").username, "alice")

    def test_delete_author(self):
        self.create_author("alice")
        self.store.delete_author("alice")

        with self.assertRaises(NotFoundError):
            self.store.get_author("alice")

    def test_delete_missing_recipe(self):
        with self.assertRaises(NotFoundError):
            self.store.delete_recipe(99)
