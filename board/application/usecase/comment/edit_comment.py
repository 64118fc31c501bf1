"""Edit comment use case."""

from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId

from .common import parse_uuid


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str  # UUID string
    content: str
    password: str


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    id: str
    content: str
    updated_at: datetime


class EditCommentUseCase(BaseUseCase):
    """Use case for replacing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Raises:
            NotFoundError: If comment not found
            CommentDeletedError: If comment was deleted
            AuthError: If password does not match
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment ID"))

        comment = await self.comment_service.edit_comment(
            comment_id, request.content, request.password
        )

        return EditCommentResponse(
            id=str(comment.id),
            content=comment.content,
            updated_at=comment.updated_at,
        )
