"""Like comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId

from .common import parse_uuid


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str  # UUID string
    liked: bool  # Desired state declared by the client


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    id: str
    like_count: int
    liked: bool


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize like comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like comment flow.

        Returns:
            The authoritative like count after the change
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment ID"))

        like_count = await self.comment_service.like_comment(comment_id, request.liked)

        return LikeCommentResponse(
            id=request.comment_id, like_count=like_count, liked=request.liked
        )
