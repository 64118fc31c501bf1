"""Domain value objects for the board."""

from board.domain.value.identifiers import CommentId, PostId
from board.domain.value.types import CommentDeletion, DeleteOutcome, ItemType

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Types
    "ItemType",
    "DeleteOutcome",
    "CommentDeletion",
]
