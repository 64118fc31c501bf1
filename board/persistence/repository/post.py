"""PostgreSQL implementation of Post repository."""

from typing import Dict, Iterable, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId
from board.persistence.mappers import post_to_dict, row_to_post
from board.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_titles(self, post_ids: Iterable[PostId]) -> Dict[PostId, str]:
        """Look up titles for a batch of posts."""
        ids = list(post_ids)
        if not ids:
            return {}
        stmt = select(posts_table.c.id, posts_table.c.title).where(
            posts_table.c.id.in_(ids)
        )
        result = await self.session.execute(stmt)
        return {PostId(row.id): row.title for row in result.fetchall()}

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def set_comment_count(self, post_id: PostId, comment_count: int) -> None:
        """Overwrite a post's comment count."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=comment_count)
        )
        await self.session.execute(stmt)
        await self.session.flush()
