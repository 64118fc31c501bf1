"""Post domain service."""

import logfire

from board.domain.error import NotFoundError
from board.domain.model.post import Post
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for the post side of comment operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository, source of the comment count
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def refresh_comment_count(self, post_id: PostId) -> int:
        """Re-derive a post's comment count from the stored rows.

        Recounting instead of incrementing lets a missed or duplicated
        write correct itself on the next structural change.

        Args:
            post_id: Post ID

        Returns:
            The new comment count
        """
        with logfire.span("post_service.refresh_comment_count", post_id=str(post_id)):
            count = await self.comment_repository.count_by_post(post_id)
            await self.post_repository.set_comment_count(post_id, count)
            logfire.info("Comment count refreshed", post_id=str(post_id), count=count)
            return count

    async def get_titles(self, post_ids: list[PostId]) -> dict[PostId, str]:
        """Resolve titles for a batch of posts."""
        if not post_ids:
            return {}
        return await self.post_repository.find_titles(set(post_ids))
