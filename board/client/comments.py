"""Per-post comment controller for client applications."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire

from board.client.api import CommentsApiClient, DeleteResult, EditedComment
from board.client.cache import CommentTreeCache, Found
from board.client.counts import CommentCountRegistry
from board.client.error import ApiError
from board.client.likes import LikeCoordinator, LikeResult
from board.client.store import LikedItemsStore
from board.config import ClientSettings
from board.domain.model.comment import CommentNode
from board.domain.value import CommentId, ItemType, PostId


class CommentsController:
    """Keeps a cached comment tree in step with the comments API.

    Every mutation goes to the server first; the cache is patched only
    with what the server acknowledged. A failed call leaves the cache as
    it was and the ``ApiError`` propagates to the caller.
    """

    def __init__(
        self,
        post_id: PostId,
        api: CommentsApiClient,
        store: LikedItemsStore,
        registry: CommentCountRegistry | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            post_id: Post whose comments are managed
            api: Comments API client
            store: Record of liked comments
            registry: Shared per-post totals, updated as the tree changes
        """
        self.post_id = post_id
        self.api = api
        self.store = store
        self.cache = CommentTreeCache(post_id, registry)
        self.likes = LikeCoordinator(store, self.cache, self._send_like)

    @classmethod
    def from_settings(
        cls,
        post_id: PostId,
        settings: ClientSettings,
        registry: CommentCountRegistry | None = None,
    ) -> "CommentsController":
        """Build a controller from the ``client`` settings section.

        The API client is traced, and liked ids persist at
        ``settings.liked_items_path``. Close it with ``await
        controller.api.aclose()``.
        """
        return cls(
            post_id,
            CommentsApiClient.from_settings(settings),
            LikedItemsStore(settings.liked_items_path),
            registry,
        )

    @property
    def comments(self) -> list[CommentNode]:
        return self.cache.roots

    @property
    def total(self) -> int:
        return self.cache.total

    async def fetch(self) -> list[CommentNode]:
        """Load the post's comment tree into the cache."""
        with self._api_call("fetch comments"):
            roots, total = await self.api.get_comments(self.post_id)
        self.cache.load(roots, total)
        return roots

    async def create_comment(
        self, content: str, nickname: str, password: str, is_author: bool = False
    ) -> CommentNode:
        """Post a top-level comment."""
        with self._api_call("create comment"):
            node = await self.api.create_comment(
                self.post_id, content, nickname, password, is_author=is_author
            )
        self.cache.attach(node)
        return node

    async def create_reply(
        self,
        parent_id: CommentId,
        content: str,
        nickname: str,
        password: str,
        is_author: bool = False,
    ) -> CommentNode:
        """Reply to a comment.

        Raises:
            ApiError: 400 when the parent is already at the maximum depth
        """
        with self._api_call("create reply"):
            node = await self.api.create_comment(
                self.post_id,
                content,
                nickname,
                password,
                parent_id=parent_id,
                is_author=is_author,
            )
        self.cache.attach(node, parent_id=parent_id)
        return node

    async def edit_comment(
        self, comment_id: CommentId, content: str, password: str
    ) -> EditedComment:
        with self._api_call("edit comment"):
            edited = await self.api.edit_comment(comment_id, content, password)
        self.cache.update_content(comment_id, edited.content, edited.updated_at)
        return edited

    async def delete_comment(self, comment_id: CommentId, password: str) -> DeleteResult:
        """Delete a comment and mirror the branch the server took."""
        with self._api_call("delete comment"):
            result = await self.api.delete_comment(comment_id, password)

        if result.soft_deleted:
            self.cache.mark_deleted(comment_id)
        elif result.deleted:
            self.cache.remove(comment_id)
        return result

    async def toggle_like(self, comment_id: CommentId) -> LikeResult | None:
        """Optimistically like or unlike a comment.

        Returns:
            The settled like state, or None while a previous toggle is pending
        """
        found = self.cache.find(comment_id)
        current = found.node.like_count if isinstance(found, Found) else 0
        with self._api_call("toggle comment like"):
            return await self.likes.toggle(comment_id, current)

    async def verify_password(self, comment_id: CommentId, password: str) -> bool:
        with self._api_call("verify comment password"):
            return await self.api.verify_password(comment_id, password)

    def is_liked(self, comment_id: CommentId) -> bool:
        return self.store.is_liked(ItemType.COMMENT, comment_id)

    async def _send_like(self, comment_id: CommentId, liked: bool) -> int:
        status = await self.api.like_comment(comment_id, liked)
        return status.like_count

    @contextmanager
    def _api_call(self, action: str) -> Iterator[None]:
        try:
            yield
        except ApiError as e:
            logfire.warn(
                f"Failed to {action}",
                post_id=str(self.post_id),
                status_code=e.status_code,
                error=e.message,
            )
            raise
