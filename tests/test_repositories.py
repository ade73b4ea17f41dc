"""
Repository tests against an in-memory SQLite database.
"""

import pytest

from database.task_repository import TaskRepository
from database.user_repository import UserRepository


async def _make_user(session, email="alice@example.com", name="Alice"):
    return await UserRepository(session).create(name, email, "hash")


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_create_and_lookup(self, session):
        repo = UserRepository(session)
        user = await repo.create("Alice", "alice@example.com", "hash")

        assert user.id is not None
        assert user.created_at is not None
        assert (await repo.get_by_email("alice@example.com")).id == user.id
        assert (await repo.get_by_id(user.id)).email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_missing_user_returns_none(self, session):
        repo = UserRepository(session)
        assert await repo.get_by_email("nobody@example.com") is None
        assert await repo.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_email_exists(self, session):
        repo = UserRepository(session)
        assert not await repo.email_exists("alice@example.com")
        await repo.create("Alice", "alice@example.com", "hash")
        assert await repo.email_exists("alice@example.com")


class TestTaskRepository:
    @pytest.mark.asyncio
    async def test_create_sets_defaults(self, session):
        user = await _make_user(session)
        task = await TaskRepository(session).create(user.id, "Write docs")

        assert task.id is not None
        assert task.description == ""
        assert task.done is False
        assert task.created_at is not None
        assert task.updated_at is not None

    @pytest.mark.asyncio
    async def test_list_is_scoped_and_newest_first(self, session):
        alice = await _make_user(session)
        bob = await _make_user(session, "bob@example.com", "Bob")
        repo = TaskRepository(session)

        first = await repo.create(alice.id, "first")
        second = await repo.create(alice.id, "second")
        await repo.create(bob.id, "bob's")

        tasks = await repo.list_by_user(alice.id)
        assert [t.id for t in tasks] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_get_for_user_hides_foreign_tasks(self, session):
        alice = await _make_user(session)
        bob = await _make_user(session, "bob@example.com", "Bob")
        repo = TaskRepository(session)
        task = await repo.create(alice.id, "private")

        assert (await repo.get_for_user(task.id, alice.id)).id == task.id
        assert await repo.get_for_user(task.id, bob.id) is None
        assert await repo.get_for_user(12345, alice.id) is None

    @pytest.mark.asyncio
    async def test_update_fields(self, session):
        user = await _make_user(session)
        repo = TaskRepository(session)
        task = await repo.create(user.id, "old")

        await repo.update(task, title="new", done=True)
        reloaded = await repo.get_for_user(task.id, user.id)
        assert reloaded.title == "new"
        assert reloaded.done is True

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_field(self, session):
        user = await _make_user(session)
        repo = TaskRepository(session)
        task = await repo.create(user.id, "task")

        with pytest.raises(ValueError, match="user_id"):
            await repo.update(task, user_id=42)

    @pytest.mark.asyncio
    async def test_delete(self, session):
        user = await _make_user(session)
        repo = TaskRepository(session)
        task = await repo.create(user.id, "gone soon")

        await repo.delete(task)
        assert await repo.get_for_user(task.id, user.id) is None
