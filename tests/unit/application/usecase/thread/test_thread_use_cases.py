"""Unit tests for the thread use cases."""

from uuid import uuid4

import pytest

from threadtree.application.usecase.thread import (
    AddCommentRequest,
    AddCommentUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsUseCase,
    ReconcileChildrenRequest,
    ReconcileChildrenUseCase,
    ThreadView,
)
from threadtree.application.usecase.user import (
    GetAuthoredThreadsRequest,
    GetAuthoredThreadsUseCase,
)
from threadtree.adapter.invalidation import RecordingInvalidationSignal
from threadtree.config import ThreadSettings
from threadtree.domain.error import NotFoundError, ValidationError
from threadtree.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestThreadScenario:
    """A post with a reply chain, read back through every view."""

    @pytest.mark.asyncio
    async def test_post_reply_chain(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        signal = await unit_env.get(RecordingInvalidationSignal)
        create_post = await unit_env.get(CreatePostUseCase)
        add_comment = await unit_env.get(AddCommentUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)
        list_threads = await unit_env.get(ListThreadsUseCase)
        get_authored = await unit_env.get(GetAuthoredThreadsUseCase)
        u1 = seed_user(store, "u1")
        u2 = seed_user(store, "u2")

        # Act
        post = await create_post.execute(
            CreatePostRequest(text="P", author_id=str(u1.id), invalidation_topic="/")
        )
        c1 = await add_comment.execute(
            AddCommentRequest(
                parent_id=post.thread_id,
                text="C1",
                author_id=str(u2.id),
                invalidation_topic="/thread/P",
            )
        )
        c2 = await add_comment.execute(
            AddCommentRequest(
                parent_id=c1.thread_id,
                text="C2",
                author_id=str(u1.id),
                invalidation_topic="/thread/P",
            )
        )
        c3 = await add_comment.execute(
            AddCommentRequest(
                parent_id=c2.thread_id,
                text="C3",
                author_id=str(u2.id),
                invalidation_topic="/thread/P",
            )
        )

        # Assert - detail view is bounded at two levels
        detail = await get_thread.execute(GetThreadRequest(thread_id=post.thread_id))
        [level1] = detail.children
        assert isinstance(level1, ThreadView)
        assert level1.thread_id == c1.thread_id
        assert level1.author.user_id == str(u2.id)
        [level2] = level1.children
        assert isinstance(level2, ThreadView)
        assert level2.thread_id == c2.thread_id
        assert level2.children == [c3.thread_id]

        # Listing expands one level only
        listing = await list_threads.execute(ListThreadsRequest(page=1, page_size=20))
        [item] = listing.items
        assert item.thread_id == post.thread_id
        [preview] = item.children
        assert isinstance(preview, ThreadView)
        assert preview.children == [c2.thread_id]

        # Only the post is indexed for its author
        authored = await get_authored.execute(
            GetAuthoredThreadsRequest(user_id=str(u1.id))
        )
        assert [t.thread_id for t in authored.threads] == [post.thread_id]
        assert signal.topics == ["/", "/thread/P", "/thread/P", "/thread/P"]

    @pytest.mark.asyncio
    async def test_views_serialize_children_as_ids_or_objects(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        create_post = await unit_env.get(CreatePostUseCase)
        add_comment = await unit_env.get(AddCommentUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)
        author = seed_user(store)
        post = await create_post.execute(
            CreatePostRequest(text="P", author_id=str(author.id))
        )
        reply = await add_comment.execute(
            AddCommentRequest(
                parent_id=post.thread_id,
                text="R",
                author_id=str(author.id),
                invalidation_topic="/",
            )
        )

        detail = await get_thread.execute(
            GetThreadRequest(thread_id=post.thread_id, max_depth=0)
        )

        assert detail.model_dump(mode="json")["children"] == [reply.thread_id]


class TestListThreadsUseCase:
    """Tests for ListThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_page_size_defaults_to_configuration(self, unit_env):
        list_threads = await unit_env.get(ListThreadsUseCase)
        settings = await unit_env.get(ThreadSettings)

        response = await list_threads.execute(ListThreadsRequest())

        assert response.page == 1
        assert response.page_size == settings.page_size

    @pytest.mark.asyncio
    async def test_page_size_above_limit_rejected(self, unit_env):
        list_threads = await unit_env.get(ListThreadsUseCase)
        settings = await unit_env.get(ThreadSettings)

        with pytest.raises(ValidationError):
            await list_threads.execute(
                ListThreadsRequest(page_size=settings.max_page_size + 1)
            )


class TestDepthLimit:
    """Caller-supplied depths are capped by configuration."""

    @pytest.mark.asyncio
    async def test_detail_depth_above_limit_rejected(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        create_post = await unit_env.get(CreatePostUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)
        settings = await unit_env.get(ThreadSettings)
        author = seed_user(store)
        post = await create_post.execute(
            CreatePostRequest(text="P", author_id=str(author.id))
        )

        with pytest.raises(ValidationError):
            await get_thread.execute(
                GetThreadRequest(
                    thread_id=post.thread_id,
                    max_depth=settings.max_depth_limit + 1,
                )
            )

    @pytest.mark.asyncio
    async def test_detail_depth_at_limit_allowed(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        create_post = await unit_env.get(CreatePostUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)
        settings = await unit_env.get(ThreadSettings)
        author = seed_user(store)
        post = await create_post.execute(
            CreatePostRequest(text="P", author_id=str(author.id))
        )

        detail = await get_thread.execute(
            GetThreadRequest(
                thread_id=post.thread_id, max_depth=settings.max_depth_limit
            )
        )

        assert detail.thread_id == post.thread_id

    @pytest.mark.asyncio
    async def test_authored_depth_above_limit_rejected(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        get_authored = await unit_env.get(GetAuthoredThreadsUseCase)
        settings = await unit_env.get(ThreadSettings)
        author = seed_user(store)

        with pytest.raises(ValidationError):
            await get_authored.execute(
                GetAuthoredThreadsRequest(
                    user_id=str(author.id), max_depth=settings.max_depth_limit + 1
                )
            )


class TestReconcileChildrenUseCase:
    """Tests for ReconcileChildrenUseCase."""

    @pytest.mark.asyncio
    async def test_nothing_to_link(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        create_post = await unit_env.get(CreatePostUseCase)
        reconcile = await unit_env.get(ReconcileChildrenUseCase)
        author = seed_user(store)
        post = await create_post.execute(
            CreatePostRequest(text="P", author_id=str(author.id))
        )

        response = await reconcile.execute(
            ReconcileChildrenRequest(thread_id=post.thread_id)
        )

        assert response.thread_id == post.thread_id
        assert response.linked == []

    @pytest.mark.asyncio
    async def test_malformed_id_raises_value_error(self, unit_env):
        reconcile = await unit_env.get(ReconcileChildrenUseCase)

        with pytest.raises(ValueError):
            await reconcile.execute(ReconcileChildrenRequest(thread_id="not-a-uuid"))


class TestGetAuthoredThreadsUseCase:
    """Tests for GetAuthoredThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        get_authored = await unit_env.get(GetAuthoredThreadsUseCase)

        with pytest.raises(NotFoundError):
            await get_authored.execute(GetAuthoredThreadsRequest(user_id=str(uuid4())))
