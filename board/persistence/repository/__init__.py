"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
