"""In-memory post repository for testing."""

from typing import Iterable, Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_titles(self, post_ids: Iterable[PostId]) -> dict[PostId, str]:
        """Look up titles for a batch of posts."""
        return {
            post_id: self._posts[post_id].title
            for post_id in post_ids
            if post_id in self._posts
        }

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def set_comment_count(self, post_id: PostId, comment_count: int) -> None:
        """Overwrite a post's comment count."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": comment_count}
            )
