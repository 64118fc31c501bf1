"""Unit tests for LikeCoordinator."""

import asyncio
from uuid import uuid4

import pytest

from board.client.cache import CommentTreeCache
from board.client.error import ApiError
from board.client.likes import LikeCoordinator, LikeState
from board.client.store import LikedItemsStore
from board.domain.model import CommentNode
from board.domain.value import ItemType, PostId
from tests.conftest import make_comment


class FakeLikeServer:
    """Records like requests and answers like the API would."""

    def __init__(self, like_count: int = 0) -> None:
        self.like_count = like_count
        self.calls: list[bool] = []
        self.fail_with: Exception | None = None
        self.gate: asyncio.Event | None = None

    async def send(self, item_id, liked: bool) -> int:
        self.calls.append(liked)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        self.like_count = max(0, self.like_count + (1 if liked else -1))
        return self.like_count


def _setup(tmp_path, like_count: int = 0, server_count: int | None = None):
    post_id = PostId(uuid4())
    node = CommentNode.from_comment(make_comment(post_id, like_count=like_count))
    cache = CommentTreeCache(post_id)
    cache.load([node], total=1)
    store = LikedItemsStore(tmp_path / "liked.json")
    server = FakeLikeServer(like_count if server_count is None else server_count)
    coordinator = LikeCoordinator(store, cache, server.send)
    return coordinator, cache, store, server, node


class TestLikeCoordinator:
    """Tests for optimistic toggling."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, tmp_path):
        coordinator, cache, store, server, node = _setup(tmp_path, like_count=2)

        liked = await coordinator.toggle(node.id, 2)
        unliked = await coordinator.toggle(node.id, liked.like_count)

        assert (liked.liked, liked.like_count) == (True, 3)
        assert (unliked.liked, unliked.like_count) == (False, 2)
        assert server.calls == [True, False]
        assert not store.is_liked(ItemType.COMMENT, node.id)
        assert cache.like_count(node.id) == 2

    @pytest.mark.asyncio
    async def test_server_count_wins(self, tmp_path):
        """Others' likes arriving meanwhile replace the optimistic guess."""
        coordinator, cache, _, _, node = _setup(tmp_path, like_count=1, server_count=9)

        result = await coordinator.toggle(node.id, 1)

        assert result.like_count == 10
        assert cache.like_count(node.id) == 10

    @pytest.mark.asyncio
    async def test_optimistic_count_visible_while_pending(self, tmp_path):
        # Arrange
        coordinator, cache, store, server, node = _setup(tmp_path, like_count=4)
        server.gate = asyncio.Event()

        # Act
        task = asyncio.create_task(coordinator.toggle(node.id, 4))
        await asyncio.sleep(0)

        # Assert
        assert coordinator.state(node.id) is LikeState.PENDING
        assert cache.like_count(node.id) == 5
        assert store.is_liked(ItemType.COMMENT, node.id)

        server.gate.set()
        await task
        assert coordinator.state(node.id) is LikeState.IDLE

    @pytest.mark.asyncio
    async def test_second_toggle_while_pending_is_ignored(self, tmp_path):
        """Double click sends exactly one request."""
        # Arrange
        coordinator, cache, _, server, node = _setup(tmp_path)
        server.gate = asyncio.Event()

        # Act
        first = asyncio.create_task(coordinator.toggle(node.id, 0))
        await asyncio.sleep(0)
        second = await coordinator.toggle(node.id, 1)
        server.gate.set()
        result = await first

        # Assert
        assert second is None
        assert server.calls == [True]
        assert result.like_count == 1
        assert cache.like_count(node.id) == 1

    @pytest.mark.asyncio
    async def test_failure_restores_exact_previous_state(self, tmp_path):
        # Arrange
        coordinator, cache, store, server, node = _setup(tmp_path, like_count=3)
        server.fail_with = ApiError(500, "Failed to update comment like")

        # Act & Assert
        with pytest.raises(ApiError):
            await coordinator.toggle(node.id, 3)

        assert cache.like_count(node.id) == 3
        assert not store.is_liked(ItemType.COMMENT, node.id)
        assert coordinator.state(node.id) is LikeState.IDLE

    @pytest.mark.asyncio
    async def test_failed_unlike_keeps_membership(self, tmp_path):
        coordinator, cache, store, server, node = _setup(tmp_path, like_count=1)
        store.set_liked(ItemType.COMMENT, node.id, True)
        server.fail_with = ApiError(0, "HTTP error: connection refused")

        with pytest.raises(ApiError):
            await coordinator.toggle(node.id, 1)

        assert store.is_liked(ItemType.COMMENT, node.id)
        assert cache.like_count(node.id) == 1

    @pytest.mark.asyncio
    async def test_unlike_from_zero_clamps(self, tmp_path):
        coordinator, cache, store, server, node = _setup(tmp_path, like_count=0)
        store.set_liked(ItemType.COMMENT, node.id, True)
        server.gate = asyncio.Event()

        task = asyncio.create_task(coordinator.toggle(node.id, 0))
        await asyncio.sleep(0)
        assert cache.like_count(node.id) == 0

        server.gate.set()
        result = await task
        assert result.liked is False
        assert result.like_count == 0

    @pytest.mark.asyncio
    async def test_cancelled_toggle_rolls_back(self, tmp_path):
        """A cancelled request leaves neither the count nor the membership flipped."""
        # Arrange
        coordinator, cache, store, server, node = _setup(tmp_path, like_count=2)
        server.gate = asyncio.Event()
        task = asyncio.create_task(coordinator.toggle(node.id, 2))
        await asyncio.sleep(0)
        assert cache.like_count(node.id) == 3

        # Act
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # Assert
        assert cache.like_count(node.id) == 2
        assert not store.is_liked(ItemType.COMMENT, node.id)
        assert coordinator.state(node.id) is LikeState.IDLE
