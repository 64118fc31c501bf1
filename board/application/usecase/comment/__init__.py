"""Comment use cases."""

from .common import CommentItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .edit_comment import EditCommentRequest, EditCommentResponse, EditCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_recent_comments import (
    GetRecentCommentsRequest,
    GetRecentCommentsResponse,
    GetRecentCommentsUseCase,
    RecentCommentItem,
)
from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .verify_password import (
    VerifyPasswordRequest,
    VerifyPasswordResponse,
    VerifyPasswordUseCase,
)

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentResponse",
    "EditCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRecentCommentsRequest",
    "GetRecentCommentsResponse",
    "GetRecentCommentsUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "RecentCommentItem",
    "VerifyPasswordRequest",
    "VerifyPasswordResponse",
    "VerifyPasswordUseCase",
]
