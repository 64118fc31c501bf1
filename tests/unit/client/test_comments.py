"""Unit tests for building CommentsController from configuration."""

from uuid import uuid4

import httpx
import pytest

from board.client import CommentCountRegistry, CommentsController
from board.config import ClientSettings
from board.domain.value import ItemType, PostId


class TestControllerFromSettings:
    """The client settings section drives the API client and the liked store."""

    @pytest.mark.asyncio
    async def test_wires_client_settings(self, tmp_path):
        # Arrange
        liked_path = tmp_path / "state" / "liked.json"
        settings = ClientSettings(
            api_base_url="http://board.test",
            liked_items_path=liked_path,
            timeout_seconds=3.0,
        )
        registry = CommentCountRegistry()
        post_id = PostId(uuid4())

        # Act
        controller = CommentsController.from_settings(post_id, settings, registry)

        # Assert
        try:
            assert controller.post_id == post_id
            assert controller.store.path == liked_path
            assert controller.api._client.base_url == httpx.URL("http://board.test/")
            assert controller.api._client.timeout == httpx.Timeout(3.0)
            assert controller.cache.registry is registry
        finally:
            await controller.api.aclose()

    @pytest.mark.asyncio
    async def test_liked_ids_persist_at_configured_path(self, tmp_path):
        """A second controller on the same settings sees earlier likes."""
        settings = ClientSettings(liked_items_path=tmp_path / "liked.json")
        comment_id = uuid4()

        first = CommentsController.from_settings(PostId(uuid4()), settings)
        first.store.set_liked(ItemType.COMMENT, comment_id, True)
        await first.api.aclose()

        second = CommentsController.from_settings(PostId(uuid4()), settings)
        try:
            assert second.is_liked(comment_id)
            assert (tmp_path / "liked.json").exists()
        finally:
            await second.api.aclose()
