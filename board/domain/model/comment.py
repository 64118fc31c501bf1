"""Comment entity and its tree view.

Comments are stored flat, one row per comment with a link to the parent
comment. Threads are materialized on read as ``CommentNode`` trees.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, PostId

# Content shown in place of a soft-deleted comment
DELETED_COMMENT_CONTENT = "This comment has been deleted."


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)
    - reply_count: Number of direct replies currently stored
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1)
    nickname: str = Field(min_length=1)
    password_hash: str
    depth: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    is_author: bool = False
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


@dataclass
class CommentNode:
    """Node in a comment thread.

    Carries the public fields of a comment plus its ordered replies.
    Nodes are mutable so a client can patch a cached tree in place.
    """

    id: CommentId
    post_id: PostId
    parent_id: CommentId | None
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
    replies: list["CommentNode"] = field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        """Create a leaf node from a stored comment."""
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            content=comment.content,
            nickname=comment.nickname,
            depth=comment.depth,
            like_count=comment.like_count,
            reply_count=comment.reply_count,
            is_author=comment.is_author,
            is_deleted=comment.is_deleted,
            deleted_at=comment.deleted_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=[],
        )
