"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    The flat comment store: one row per comment, linked to its parent.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (deleted or not), None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every stored comment of a post, oldest first.

        Soft-deleted comments are included so threads keep their shape.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int) -> List[Comment]:
        """Find the newest comments across all posts.

        Args:
            limit: Maximum number of comments to return

        Returns:
            Non-deleted comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_children(self, parent_id: CommentId) -> int:
        """Count the direct replies currently stored under a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Number of stored child rows, soft-deleted ones included
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count the comment rows stored for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of stored rows, soft-deleted ones included
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Physically remove a comment row.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def set_reply_count(self, comment_id: CommentId, reply_count: int) -> None:
        """Overwrite a comment's denormalized reply count.

        Args:
            comment_id: The comment ID
            reply_count: Re-derived number of direct replies
        """
        pass

    @abstractmethod
    async def adjust_like_count(self, comment_id: CommentId, delta: int) -> int | None:
        """Atomically add ``delta`` to a comment's like count, never below zero.

        Args:
            comment_id: The comment ID
            delta: +1 or -1

        Returns:
            The new like count, or None if the comment does not exist
        """
        pass
