"""Unit tests for ThreadExpander."""

from uuid import uuid4

import pytest

from threadtree.domain.error import ValidationError
from threadtree.domain.model import ExpandedThread, Thread
from threadtree.domain.service import ThreadExpander
from threadtree.domain.value import ThreadId
from threadtree.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from tests.conftest import seed_user


class CountingThreadRepository(InMemoryThreadRepository):
    """Counts batched lookups."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.find_by_ids_calls = 0

    async def find_by_ids(self, thread_ids):
        self.find_by_ids_calls += 1
        return await super().find_by_ids(thread_ids)


def _build_tree(store: InMemoryStore, author_id, fanout: int, depth: int) -> Thread:
    """Store a full tree of the given fanout and depth, return its root."""

    def add(parent_id, level):
        thread = Thread(
            id=ThreadId(uuid4()),
            text=f"level {level}",
            author_id=author_id,
            parent_id=parent_id,
        )
        store.put_thread(thread)
        if parent_id is not None:
            store.append_child(parent_id, thread.id)
        if level < depth:
            for _ in range(fanout):
                add(thread.id, level + 1)
        return thread.id

    root_id = add(None, 0)
    return store.threads[root_id]


class TestExpand:
    """Tests for expand method."""

    @pytest.mark.asyncio
    async def test_one_thread_query_per_level(self):
        """Expansion cost grows with depth, not with the number of threads."""
        store = InMemoryStore()
        author = seed_user(store)
        root = _build_tree(store, author.id, fanout=3, depth=4)
        thread_repo = CountingThreadRepository(store)
        expander = ThreadExpander(thread_repo, InMemoryUserRepository(store))

        [expanded] = await expander.expand([root], max_depth=2)

        assert thread_repo.find_by_ids_calls == 2
        assert len(expanded.children) == 3
        for child in expanded.children:
            assert isinstance(child, ExpandedThread)
            for grandchild in child.children:
                assert isinstance(grandchild, ExpandedThread)
                assert all(not isinstance(c, ExpandedThread) for c in grandchild.children)
                assert len(grandchild.children) == 3

    @pytest.mark.asyncio
    async def test_dangling_child_stays_an_id(self):
        store = InMemoryStore()
        author = seed_user(store)
        root = Thread(id=ThreadId(uuid4()), text="root", author_id=author.id)
        store.put_thread(root)
        dangling = ThreadId(uuid4())
        store.append_child(root.id, dangling)
        expander = ThreadExpander(
            InMemoryThreadRepository(store), InMemoryUserRepository(store)
        )

        [expanded] = await expander.expand([store.threads[root.id]], max_depth=2)

        assert expanded.children == [dangling]

    @pytest.mark.asyncio
    async def test_keeps_input_order(self):
        store = InMemoryStore()
        author = seed_user(store)
        threads = [
            Thread(id=ThreadId(uuid4()), text=f"t{i}", author_id=author.id)
            for i in range(5)
        ]
        for thread in threads:
            store.put_thread(thread)
        expander = ThreadExpander(
            InMemoryThreadRepository(store), InMemoryUserRepository(store)
        )

        expanded = await expander.expand(threads, max_depth=1)

        assert [t.id for t in expanded] == [t.id for t in threads]

    @pytest.mark.asyncio
    async def test_negative_depth_rejected(self):
        expander = ThreadExpander(InMemoryThreadRepository(), InMemoryUserRepository())

        with pytest.raises(ValidationError):
            await expander.expand([], max_depth=-1)
