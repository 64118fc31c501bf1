"""Shared request parsing and response items for comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.domain.error import ValidationError
from board.domain.model.comment import Comment, CommentNode


def parse_uuid(value: str, label: str) -> UUID:
    """Parse an identifier from a request.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} format: {value}")


class CommentItem(BaseModel):
    """Comment in a response, with its nested replies.

    The password hash is never exposed.
    """

    id: str
    post_id: str
    parent_id: str | None
    content: str
    nickname: str
    depth: int
    like_count: int
    reply_count: int
    is_author: bool
    is_deleted: bool
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        """Convert a tree node, replies included."""
        return cls(
            id=str(node.id),
            post_id=str(node.post_id),
            parent_id=str(node.parent_id) if node.parent_id else None,
            content=node.content,
            nickname=node.nickname,
            depth=node.depth,
            like_count=node.like_count,
            reply_count=node.reply_count,
            is_author=node.is_author,
            is_deleted=node.is_deleted,
            deleted_at=node.deleted_at,
            created_at=node.created_at,
            updated_at=node.updated_at,
            replies=[cls.from_node(reply) for reply in node.replies],
        )

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Convert a stored comment into a leaf item."""
        return cls.from_node(CommentNode.from_comment(comment))
