"""End-to-end tests for CommentsController against the served API."""

from uuid import uuid4

import pytest
import pytest_asyncio

from board.client import (
    ApiError,
    CommentCountRegistry,
    CommentsApiClient,
    CommentsController,
    LikedItemsStore,
)
from board.domain.model import DELETED_COMMENT_CONTENT
from board.domain.value import CommentId, ItemType
from tests.conftest import COMMENT_PASSWORD


@pytest_asyncio.fixture
async def controller_env(served_app, tmp_path):
    """Controller talking to the app, with a shared registry and liked store."""
    transport, post = served_app
    registry = CommentCountRegistry()
    store = LikedItemsStore(tmp_path / "liked.json")
    async with CommentsApiClient("http://test", transport=transport) as api:
        controller = CommentsController(post.id, api, store, registry)
        yield controller, registry, store


async def _comment(controller, content="Hello"):
    return await controller.create_comment(content, "tester", COMMENT_PASSWORD)


class TestFetchAndCreate:
    """Loading and growing the cached tree."""

    @pytest.mark.asyncio
    async def test_fetch_loads_cache_and_registry(self, controller_env):
        # Arrange
        controller, registry, _ = controller_env
        root = await _comment(controller, "Root")
        await controller.create_reply(root.id, "Reply", "tester", COMMENT_PASSWORD)
        controller.cache.load([], 0)

        # Act
        roots = await controller.fetch()

        # Assert
        assert [node.id for node in roots] == [root.id]
        assert roots[0].replies[0].content == "Reply"
        assert controller.total == 2
        assert registry.get(controller.post_id) == 2

    @pytest.mark.asyncio
    async def test_new_root_goes_first(self, controller_env):
        controller, registry, _ = controller_env
        older = await _comment(controller, "Older")
        newer = await _comment(controller, "Newer")

        assert [node.id for node in controller.comments] == [newer.id, older.id]
        assert registry.get(controller.post_id) == 2

    @pytest.mark.asyncio
    async def test_reply_is_attached_under_parent(self, controller_env):
        controller, _, _ = controller_env
        root = await _comment(controller, "Root")

        reply = await controller.create_reply(
            root.id, "Reply", "tester", COMMENT_PASSWORD
        )

        [cached_root] = controller.comments
        assert cached_root.replies == [reply]
        assert cached_root.reply_count == 1
        assert reply.depth == 1
        assert controller.total == 2

    @pytest.mark.asyncio
    async def test_failed_create_leaves_cache_untouched(self, controller_env):
        controller, _, _ = controller_env
        await _comment(controller)

        with pytest.raises(ApiError) as exc_info:
            await controller.create_reply(
                CommentId(uuid4()), "Orphan", "tester", COMMENT_PASSWORD
            )

        assert exc_info.value.status_code == 404
        assert controller.total == 1
        assert len(controller.comments) == 1


class TestMutations:
    """Edits, deletes and likes mirrored into the cache."""

    @pytest.mark.asyncio
    async def test_edit_updates_cached_content(self, controller_env):
        controller, _, _ = controller_env
        comment = await _comment(controller)

        edited = await controller.edit_comment(comment.id, "Edited", COMMENT_PASSWORD)

        assert edited.content == "Edited"
        assert controller.comments[0].content == "Edited"

    @pytest.mark.asyncio
    async def test_wrong_password_edit_is_rejected(self, controller_env):
        controller, _, _ = controller_env
        comment = await _comment(controller, "Original")

        with pytest.raises(ApiError) as exc_info:
            await controller.edit_comment(comment.id, "Edited", "wrong-pass")

        assert exc_info.value.status_code == 401
        assert controller.comments[0].content == "Original"

    @pytest.mark.asyncio
    async def test_delete_mirrors_server_branch(self, controller_env):
        # Arrange
        controller, registry, _ = controller_env
        parent = await _comment(controller, "Parent")
        reply = await controller.create_reply(
            parent.id, "Reply", "tester", COMMENT_PASSWORD
        )

        # Act
        soft = await controller.delete_comment(parent.id, COMMENT_PASSWORD)
        hard = await controller.delete_comment(reply.id, COMMENT_PASSWORD)

        # Assert
        assert soft.soft_deleted is True
        assert hard.soft_deleted is False
        [cached_parent] = controller.comments
        assert cached_parent.is_deleted is True
        assert cached_parent.content == DELETED_COMMENT_CONTENT
        assert cached_parent.replies == []
        assert cached_parent.reply_count == 0
        assert controller.total == 1
        assert registry.get(controller.post_id) == 1

    @pytest.mark.asyncio
    async def test_toggle_like_round_trip(self, controller_env):
        controller, _, store = controller_env
        comment = await _comment(controller)

        liked = await controller.toggle_like(comment.id)
        assert liked is not None
        assert liked.liked is True
        assert liked.like_count == 1
        assert controller.is_liked(comment.id)
        assert controller.comments[0].like_count == 1

        unliked = await controller.toggle_like(comment.id)
        assert unliked is not None
        assert unliked.like_count == 0
        assert not store.is_liked(ItemType.COMMENT, comment.id)

    @pytest.mark.asyncio
    async def test_verify_password(self, controller_env):
        controller, _, _ = controller_env
        comment = await _comment(controller)

        assert await controller.verify_password(comment.id, COMMENT_PASSWORD) is True
        assert await controller.verify_password(comment.id, "wrong-pass") is False
