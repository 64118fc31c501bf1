"""In-memory comment repository for testing."""

from typing import Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find every stored comment of a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_recent(self, limit: int) -> list[Comment]:
        """Find the newest live comments across all posts."""
        comments = [c for c in self._comments.values() if not c.is_deleted]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[:limit]

    async def count_children(self, parent_id: CommentId) -> int:
        """Count the direct replies stored under a comment."""
        return sum(1 for c in self._comments.values() if c.parent_id == parent_id)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count the comment rows stored for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def set_reply_count(self, comment_id: CommentId, reply_count: int) -> None:
        """Overwrite a comment's reply count."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"reply_count": reply_count}
            )

    async def adjust_like_count(self, comment_id: CommentId, delta: int) -> int | None:
        """Add delta to the like count, clamped at zero."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        like_count = max(0, comment.like_count + delta)
        self._comments[comment_id] = comment.model_copy(
            update={"like_count": like_count}
        )
        return like_count
