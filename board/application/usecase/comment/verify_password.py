"""Verify comment password use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId

from .common import parse_uuid


class VerifyPasswordRequest(BaseModel):
    """Verify comment password request."""

    comment_id: str  # UUID string
    password: str


class VerifyPasswordResponse(BaseModel):
    """Verify comment password response."""

    valid: bool


class VerifyPasswordUseCase(BaseUseCase):
    """Use case for checking a comment password before edit or delete."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: VerifyPasswordRequest) -> VerifyPasswordResponse:
        comment_id = CommentId(parse_uuid(request.comment_id, "comment ID"))
        valid = await self.comment_service.verify_password(comment_id, request.password)
        return VerifyPasswordResponse(valid=valid)
