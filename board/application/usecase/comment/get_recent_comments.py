"""Get recent comments use case."""

from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService


class GetRecentCommentsRequest(BaseModel):
    """Get recent comments request."""

    limit: int | None = None


class RecentCommentItem(BaseModel):
    """Recent comment with the title of its post."""

    id: str
    content: str
    nickname: str
    post_id: str
    post_title: str
    is_author: bool
    depth: int
    created_at: datetime


class GetRecentCommentsResponse(BaseModel):
    """Get recent comments response."""

    comments: list[RecentCommentItem]


class GetRecentCommentsUseCase(BaseUseCase):
    """Use case for the newest comments across the board."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetRecentCommentsRequest
    ) -> GetRecentCommentsResponse:
        recent = await self.comment_service.get_recent_comments(request.limit)
        return GetRecentCommentsResponse(
            comments=[
                RecentCommentItem(
                    id=str(item.comment.id),
                    content=item.comment.content,
                    nickname=item.comment.nickname,
                    post_id=str(item.comment.post_id),
                    post_title=item.post_title,
                    is_author=item.comment.is_author,
                    depth=item.comment.depth,
                    created_at=item.comment.created_at,
                )
                for item in recent
            ]
        )
