"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, PostId
from board.persistence.mappers import comment_to_dict, row_to_comment
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every stored comment of a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_recent(self, limit: int) -> List[Comment]:
        """Find the newest live comments across all posts."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.is_deleted.is_(False))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_children(self, parent_id: CommentId) -> int:
        """Count the direct replies stored under a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == parent_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_post(self, post_id: PostId) -> int:
        """Count the comment rows stored for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Physically remove a comment row."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_reply_count(self, comment_id: CommentId, reply_count: int) -> None:
        """Overwrite a comment's reply count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=reply_count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_like_count(self, comment_id: CommentId, delta: int) -> int | None:
        """Atomically add delta to the like count, clamped at zero."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                like_count=func.greatest(comments_table.c.like_count + delta, 0)
            )
            .returning(comments_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row.like_count if row else None
