"""Delete comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId

from .common import parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    password: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response.

    ``soft_deleted`` tells the client to show the sentinel content instead
    of removing the comment from its tree.
    """

    deleted: bool
    soft_deleted: bool
    comment_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found
            CommentDeletedError: If comment was already deleted
            AuthError: If password does not match
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment ID"))

        deletion = await self.comment_service.delete_comment(
            comment_id, request.password
        )

        return DeleteCommentResponse(
            deleted=True,
            soft_deleted=deletion.soft_deleted,
            comment_id=str(deletion.comment_id),
        )
