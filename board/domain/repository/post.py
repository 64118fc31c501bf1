"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from board.domain.model.post import Post
from board.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Only the reads and counter writes the comment subsystem needs.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_titles(self, post_ids: Iterable[PostId]) -> Dict[PostId, str]:
        """Look up titles for a batch of posts.

        Args:
            post_ids: Post IDs to resolve

        Returns:
            Mapping of post ID to title for the posts that exist
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def set_comment_count(self, post_id: PostId, comment_count: int) -> None:
        """Overwrite a post's denormalized comment count.

        Args:
            post_id: The post ID
            comment_count: Re-derived number of stored comments
        """
        pass
