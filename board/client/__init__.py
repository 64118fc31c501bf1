"""Client-side comment state for applications talking to the board API."""

from board.client.api import CommentsApiClient
from board.client.cache import CommentTreeCache, Found, NotFound
from board.client.comments import CommentsController
from board.client.counts import CommentCountRegistry
from board.client.error import ApiError, ClientError
from board.client.likes import LikeCoordinator, LikeResult, LikeState
from board.client.store import LikedItemsStore

__all__ = [
    "ApiError",
    "ClientError",
    "CommentCountRegistry",
    "CommentTreeCache",
    "CommentsApiClient",
    "CommentsController",
    "Found",
    "LikeCoordinator",
    "LikeResult",
    "LikeState",
    "LikedItemsStore",
    "NotFound",
]
