"""Optimistic like toggling.

The count shown to the user changes immediately; the server's answer then
replaces it, or the previous state is restored if the request fails.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

import logfire

from board.client.cache import CommentTreeCache
from board.client.store import LikedItemsStore
from board.domain.value import ItemType

# Sends the desired like state and returns the authoritative count
SendLike = Callable[[UUID, bool], Awaitable[int]]


class LikeState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"


@dataclass(frozen=True)
class LikeResult:
    item_id: UUID
    liked: bool
    like_count: int


class LikeCoordinator:
    """Serializes like toggles per item.

    A toggle on an item whose previous toggle has not settled is ignored,
    so a double click sends one request.
    """

    def __init__(
        self,
        store: LikedItemsStore,
        cache: CommentTreeCache,
        send: SendLike,
        item_type: ItemType = ItemType.COMMENT,
    ) -> None:
        """Initialize the coordinator.

        Args:
            store: Record of what this client has liked
            cache: Cached tree whose like counts are updated
            send: Coroutine function performing the like request
            item_type: Namespace used in the store
        """
        self.store = store
        self.cache = cache
        self.send = send
        self.item_type = item_type
        self._pending: set[UUID] = set()

    def state(self, item_id: UUID) -> LikeState:
        return LikeState.PENDING if item_id in self._pending else LikeState.IDLE

    async def toggle(self, item_id: UUID, current_count: int) -> LikeResult | None:
        """Flip this client's like on an item.

        Args:
            item_id: Liked item
            current_count: Like count currently shown

        Returns:
            The settled state, or None if a toggle was already in flight

        Raises:
            Exception: Whatever the request raised, after rolling back
        """
        if item_id in self._pending:
            logfire.info("Like toggle ignored while pending", item_id=str(item_id))
            return None

        self._pending.add(item_id)
        try:
            was_liked = self.store.is_liked(self.item_type, item_id)
            liked = not was_liked

            previous_count = self.cache.like_count(item_id)
            if previous_count is None:
                previous_count = current_count

            optimistic = current_count + 1 if liked else max(0, current_count - 1)
            self.cache.update_like_count(item_id, optimistic)
            self.store.set_liked(self.item_type, item_id, liked)

            try:
                like_count = await self.send(item_id, liked)
            except BaseException as e:
                # Cancellation rolls back too
                self.store.set_liked(self.item_type, item_id, was_liked)
                self.cache.update_like_count(item_id, previous_count)
                logfire.warn(
                    "Like request failed, rolled back",
                    item_id=str(item_id),
                    liked=liked,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            self.cache.update_like_count(item_id, like_count)
            logfire.info(
                "Like settled",
                item_id=str(item_id),
                liked=liked,
                like_count=like_count,
            )
            return LikeResult(item_id=item_id, liked=liked, like_count=like_count)
        finally:
            self._pending.discard(item_id)
