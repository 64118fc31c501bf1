"""Create comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId, PostId

from .common import CommentItem, parse_uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    nickname: str
    password: str
    parent_id: str | None = None  # Parent comment ID for replies
    is_author: bool = False  # Commenter claims to be the post author


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        The service validates the post, the parent and the author claim,
        and re-derives the parent's reply count and the post's comment count.

        Args:
            request: Create comment request

        Returns:
            The created comment with no replies
        """
        post_id = PostId(parse_uuid(request.post_id, "post ID"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent comment ID"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            content=request.content,
            nickname=request.nickname,
            password=request.password,
            parent_id=parent_id,
            claims_author=request.is_author,
        )
        return CommentItem.from_comment(comment)
