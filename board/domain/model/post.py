"""Post aggregate root.

Posts are written outside the comment subsystem. Comments only need the
author password hash (for author claims) and the denormalized comment count.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import PostId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    password_hash: str
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
