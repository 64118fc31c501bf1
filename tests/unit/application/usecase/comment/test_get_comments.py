"""Unit tests for GetCommentsUseCase and GetRecentCommentsUseCase."""

import pytest

from board.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRecentCommentsRequest,
    GetRecentCommentsUseCase,
)
from board.domain.repository import CommentRepository, PostRepository
from tests.conftest import make_comment, make_post, minutes
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_items_and_total(self, unit_env):
        # Arrange
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, created_at=minutes(0)))
        reply = await comment_repo.save(
            make_comment(post.id, parent=root, created_at=minutes(1))
        )

        # Act
        response = await get_comments_use_case.execute(
            GetCommentsRequest(post_id=str(post.id))
        )

        # Assert
        assert response.total == 2
        assert len(response.comments) == 1
        assert response.comments[0].id == str(root.id)
        assert response.comments[0].replies[0].id == str(reply.id)
        assert response.comments[0].replies[0].replies == []


class TestGetRecentCommentsUseCase:
    """Tests for GetRecentCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_items_carry_post_title(self, unit_env):
        # Arrange
        get_recent_use_case = await unit_env.get(GetRecentCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post("Weekend plans"))
        comment = await comment_repo.save(make_comment(post.id, content="Hiking"))

        # Act
        response = await get_recent_use_case.execute(GetRecentCommentsRequest(limit=5))

        # Assert
        assert len(response.comments) == 1
        item = response.comments[0]
        assert item.id == str(comment.id)
        assert item.post_title == "Weekend plans"
        assert item.content == "Hiking"
