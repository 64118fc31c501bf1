"""Get comments use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import PostId

from .common import CommentItem, parse_uuid


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting the reply tree of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Soft-deleted comments stay in the tree so their replies keep a
        parent; ``total`` counts them too.

        Args:
            request: Get comments request with post ID

        Returns:
            Root comments (newest thread first) with nested replies
        """
        post_id = PostId(parse_uuid(request.post_id, "post ID"))

        roots, total = await self.comment_service.get_comment_tree(post_id)

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_node(root) for root in roots],
            total=total,
        )
