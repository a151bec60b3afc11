"""Unit tests for the in-memory repositories."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from threadtree.domain.error import StoreError
from threadtree.domain.model import Thread
from threadtree.domain.value import ThreadId, UserId
from threadtree.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from tests.conftest import seed_user


@pytest.fixture
def store():
    return InMemoryStore()


class TestInMemoryThreadRepository:
    """Tests for InMemoryThreadRepository."""

    @pytest.mark.asyncio
    async def test_append_child_is_append_unique(self, store):
        """Appending an id twice leaves one entry and reports the no-op."""
        repo = InMemoryThreadRepository(store)
        author = seed_user(store)
        parent = await repo.insert(
            Thread(id=ThreadId(uuid4()), text="parent", author_id=author.id)
        )
        child_id = ThreadId(uuid4())

        assert await repo.append_child(parent.id, child_id) is True
        assert await repo.append_child(parent.id, child_id) is False

        stored = await repo.find_by_id(parent.id)
        assert stored.children == (child_id,)

    @pytest.mark.asyncio
    async def test_append_child_to_missing_parent_returns_false(self, store):
        repo = InMemoryThreadRepository(store)

        assert await repo.append_child(ThreadId(uuid4()), ThreadId(uuid4())) is False

    @pytest.mark.asyncio
    async def test_insert_child_creates_and_links(self, store):
        repo = InMemoryThreadRepository(store)
        author = seed_user(store)
        parent = await repo.insert(
            Thread(id=ThreadId(uuid4()), text="parent", author_id=author.id)
        )
        comment = Thread(
            id=ThreadId(uuid4()), text="reply", author_id=author.id, parent_id=parent.id
        )

        await repo.insert_child(comment)

        assert (await repo.find_by_id(comment.id)) == comment
        assert (await repo.find_by_id(parent.id)).children == (comment.id,)

    @pytest.mark.asyncio
    async def test_insert_child_without_parent_id_raises(self, store):
        repo = InMemoryThreadRepository(store)
        author = seed_user(store)

        with pytest.raises(StoreError):
            await repo.insert_child(
                Thread(id=ThreadId(uuid4()), text="orphan", author_id=author.id)
            )

    @pytest.mark.asyncio
    async def test_insert_rejects_unknown_author_and_duplicate_id(self, store):
        repo = InMemoryThreadRepository(store)
        author = seed_user(store)
        thread = Thread(id=ThreadId(uuid4()), text="post", author_id=author.id)
        await repo.insert(thread)

        with pytest.raises(StoreError, match="Duplicate"):
            await repo.insert(thread)
        with pytest.raises(StoreError, match="Author"):
            await repo.insert(
                Thread(id=ThreadId(uuid4()), text="post", author_id=UserId(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_find_top_level_breaks_timestamp_ties_by_insert_order(self, store):
        repo = InMemoryThreadRepository(store)
        author = seed_user(store)
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        threads = [
            Thread(
                id=ThreadId(uuid4()),
                text=f"post {i}",
                author_id=author.id,
                created_at=created_at,
            )
            for i in range(3)
        ]
        for thread in threads:
            await repo.insert(thread)

        found = await repo.find_top_level(limit=2, offset=1)

        assert [t.id for t in found] == [threads[1].id, threads[0].id]
        assert await repo.count_top_level() == 3


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_add_thread_to_missing_user_raises(self, store):
        repo = InMemoryUserRepository(store)

        with pytest.raises(StoreError):
            await repo.add_thread(UserId(uuid4()), ThreadId(uuid4()))

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_unknown(self, store):
        repo = InMemoryUserRepository(store)
        user = seed_user(store)

        found = await repo.find_by_ids([user.id, UserId(uuid4())])

        assert found == {user.id: user}
