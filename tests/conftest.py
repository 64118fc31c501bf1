"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from board.adapter.bcrypt import MockPasswordHasher
from board.domain.model import Comment, Post
from board.domain.value import CommentId, PostId

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

AUTHOR_PASSWORD = "author-pass"
COMMENT_PASSWORD = "comment-pass"

_hasher = MockPasswordHasher()


def make_post(title: str = "Test Post", password: str = AUTHOR_PASSWORD) -> Post:
    """Build a post whose author password is known to the mock hasher."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        password_hash=_hasher.hash(password),
    )


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    content: str = "Test comment",
    created_at: datetime | None = None,
    password: str = COMMENT_PASSWORD,
    **overrides,
) -> Comment:
    """Build a stored comment row, nested under ``parent`` if given."""
    created = created_at or datetime.now()
    fields = dict(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent_id=parent.id if parent else None,
        content=content,
        nickname="tester",
        password_hash=_hasher.hash(password),
        depth=parent.depth + 1 if parent else 0,
        created_at=created,
        updated_at=created,
    )
    fields.update(overrides)
    return Comment(**fields)


def minutes(n: int) -> datetime:
    """A fixed point in time, ``n`` minutes after a base instant."""
    return datetime(2026, 1, 1, 12, 0) + timedelta(minutes=n)
