"""Domain model entities for the board."""

from board.domain.model.comment import DELETED_COMMENT_CONTENT, Comment, CommentNode
from board.domain.model.post import Post

__all__ = [
    "Post",
    "Comment",
    "CommentNode",
    "DELETED_COMMENT_CONTENT",
]
