"""Per-post comment totals shared between client views."""

from collections.abc import Callable

from board.domain.value import PostId

CountListener = Callable[[PostId, int], None]


class CommentCountRegistry:
    """Comment totals keyed by post.

    One registry is created by the caller and handed to every cache and
    view that needs the totals, so a post list sees the count a comment
    thread just changed.
    """

    def __init__(self) -> None:
        self._counts: dict[PostId, int] = {}
        self._listeners: list[CountListener] = []

    def get(self, post_id: PostId) -> int:
        return self._counts.get(post_id, 0)

    def set(self, post_id: PostId, count: int) -> int:
        count = max(0, count)
        self._counts[post_id] = count
        for listener in list(self._listeners):
            listener(post_id, count)
        return count

    def increment(self, post_id: PostId, by: int = 1) -> int:
        return self.set(post_id, self.get(post_id) + by)

    def decrement(self, post_id: PostId, by: int = 1) -> int:
        return self.set(post_id, self.get(post_id) - by)

    def subscribe(self, listener: CountListener) -> Callable[[], None]:
        """Register a listener called on every change.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
