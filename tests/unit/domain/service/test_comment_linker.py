"""Unit tests for CommentLinker."""

import asyncio
from uuid import uuid4

import pytest

from threadtree.adapter.invalidation import RecordingInvalidationSignal
from threadtree.domain.error import NotFoundError, PersistenceError, ValidationError
from threadtree.domain.model import Thread
from threadtree.domain.service import CommentLinker, ThreadService
from threadtree.domain.value import ThreadId, UserId
from threadtree.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_add_comment_links_into_parent(self, unit_env):
        """New comment should point at its parent and appear in children."""
        # Arrange
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")

        # Act
        comment_id = await linker.add_comment(post_id, "reply", author.id, "/posts/1")

        # Assert
        comment = store.threads[comment_id]
        assert comment.parent_id == post_id
        assert comment.community_id is None
        assert comment.text == "reply"
        assert store.threads[post_id].children == (comment_id,)

    @pytest.mark.asyncio
    async def test_add_comment_keeps_reply_order(self, unit_env):
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")

        ids = [
            await linker.add_comment(post_id, f"reply {i}", author.id, "/p")
            for i in range(3)
        ]

        assert store.threads[post_id].children == tuple(ids)

    @pytest.mark.asyncio
    async def test_add_comment_does_not_index_commenter(self, unit_env):
        """Only top-level posts go into the author's authored set."""
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        alice = seed_user(store, "alice")
        bob = seed_user(store, "bob")
        post_id = await service.create_post("post", alice.id, None, "/")

        await linker.add_comment(post_id, "reply", bob.id, "/p")

        assert store.users[bob.id].threads == frozenset()
        assert store.users[alice.id].threads == frozenset({post_id})

    @pytest.mark.asyncio
    async def test_add_comment_signals_topic(self, unit_env):
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        signal = await unit_env.get(RecordingInvalidationSignal)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")

        await linker.add_comment(post_id, "reply", author.id, "/posts/1")

        assert signal.topics == ["/", "/posts/1"]

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found_without_writes(self, unit_env):
        """A missing parent should fail before anything is written."""
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        signal = await unit_env.get(RecordingInvalidationSignal)
        author = seed_user(store)
        writes_before = store.writes

        with pytest.raises(NotFoundError):
            await linker.add_comment(ThreadId(uuid4()), "reply", author.id, "/p")

        assert store.writes == writes_before
        assert store.threads == {}
        assert signal.topics == []

    @pytest.mark.asyncio
    async def test_blank_text_raises_validation_error(self, unit_env):
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")

        with pytest.raises(ValidationError):
            await linker.add_comment(post_id, "  ", author.id, "/p")

        assert store.threads[post_id].children == ()

    @pytest.mark.asyncio
    async def test_missing_commenter_raises_persistence_error(self, unit_env):
        """Nothing is linked when the comment itself cannot be stored."""
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")

        with pytest.raises(PersistenceError) as exc_info:
            await linker.add_comment(post_id, "reply", UserId(uuid4()), "/p")

        assert exc_info.value.operation == "creating comment"
        assert store.threads[post_id].children == ()

    @pytest.mark.asyncio
    async def test_concurrent_comments_are_all_linked(self, unit_env):
        """Concurrent replies to one parent must not lose each other."""
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")

        ids = await asyncio.gather(
            *(
                linker.add_comment(post_id, f"reply {i}", author.id, "/p")
                for i in range(10)
            )
        )

        children = store.threads[post_id].children
        assert len(children) == 10
        assert set(children) == set(ids)


class TestReconcile:
    """Tests for reconcile method."""

    @pytest.mark.asyncio
    async def test_reconcile_links_orphaned_comments_once(self, unit_env):
        """Comments written without a link are appended exactly once."""
        service = await unit_env.get(ThreadService)
        linker = await unit_env.get(CommentLinker)
        store = await unit_env.get(InMemoryStore)
        author = seed_user(store)
        post_id = await service.create_post("post", author.id, None, "/")
        linked_id = await linker.add_comment(post_id, "linked", author.id, "/p")

        # A writer that stored the comment and stopped before linking it
        orphan = Thread(
            id=ThreadId(uuid4()), text="orphan", author_id=author.id, parent_id=post_id
        )
        store.put_thread(orphan)

        first = await linker.reconcile(post_id)
        second = await linker.reconcile(post_id)

        assert first == [orphan.id]
        assert second == []
        assert store.threads[post_id].children == (linked_id, orphan.id)

    @pytest.mark.asyncio
    async def test_reconcile_missing_parent_raises_not_found(self, unit_env):
        linker = await unit_env.get(CommentLinker)

        with pytest.raises(NotFoundError):
            await linker.reconcile(ThreadId(uuid4()))
