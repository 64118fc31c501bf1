"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Comment, Post
from board.domain.value import CommentId, PostId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        password_hash=row["password_hash"],
        like_count=row.get("like_count") or 0,
        comment_count=row.get("comment_count") or 0,
        is_deleted=bool(row.get("is_deleted")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        parent_id=CommentId(_as_uuid(row["parent_id"])) if row.get("parent_id") else None,
        content=row["content"],
        nickname=row["nickname"],
        password_hash=row["password_hash"],
        depth=row.get("depth") or 0,
        like_count=row.get("like_count") or 0,
        reply_count=row.get("reply_count") or 0,
        is_author=bool(row.get("is_author")),
        is_deleted=bool(row.get("is_deleted")),
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()
