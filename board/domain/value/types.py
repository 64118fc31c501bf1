"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from board.domain.value.common import ValueObject
from board.domain.value.identifiers import CommentId


class ItemType(str, Enum):
    """Kind of item a client can like."""

    POST = "post"
    COMMENT = "comment"


class DeleteOutcome(str, Enum):
    """Which branch of the delete cascade ran."""

    # Row removed, the comment had no stored replies
    DELETED = "deleted"
    # Row kept with sentinel content because replies hang off it
    SOFT_DELETED = "soft_deleted"


class CommentDeletion(ValueObject):
    """Result of deleting a comment."""

    comment_id: CommentId
    outcome: DeleteOutcome

    @property
    def soft_deleted(self) -> bool:
        return self.outcome is DeleteOutcome.SOFT_DELETED
