"""Domain services."""

from .base import Service
from .comment_service import CommentService, RecentComment
from .comment_tree import build_comment_tree, count_nodes
from .password import PasswordHasher
from .post_service import PostService

__all__ = [
    "CommentService",
    "PasswordHasher",
    "PostService",
    "RecentComment",
    "Service",
    "build_comment_tree",
    "count_nodes",
]
