"""Comment routes."""

from typing import Generic, TypeVar

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, ConfigDict, Field

from board.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentResponse,
    EditCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRecentCommentsRequest,
    GetRecentCommentsUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    RecentCommentItem,
    VerifyPasswordRequest,
    VerifyPasswordResponse,
    VerifyPasswordUseCase,
)
from board.interface.error import domain_errors

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope shared by comment endpoints."""

    success: bool = True
    data: T
    message: str | None = None


class CommentListMeta(BaseModel):
    """Metadata of a comment listing."""

    total: int


class CommentListResponse(BaseModel):
    """Reply tree of a post."""

    success: bool = True
    data: list[CommentItem]
    meta: CommentListMeta


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(populate_by_name=True)

    post_id: str = Field(alias="postId")
    parent_id: str | None = Field(default=None, alias="parentId")
    content: str
    nickname: str
    password: str = Field(min_length=1, max_length=100)
    is_author: bool = Field(default=False, alias="isAuthor")


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str
    password: str = Field(min_length=1, max_length=100)


class PasswordAPIRequest(BaseModel):
    """API request carrying a comment password."""

    password: str = Field(min_length=1, max_length=100)


class LikeCommentAPIRequest(BaseModel):
    """API request for liking or unliking a comment."""

    liked: bool


@router.get("/recent", response_model=ApiResponse[list[RecentCommentItem]])
async def get_recent_comments(
    get_recent_comments_use_case: FromDishka[GetRecentCommentsUseCase],
    limit: int | None = Query(default=None),
) -> ApiResponse[list[RecentCommentItem]]:
    """Get the newest comments across all posts.

    Args:
        get_recent_comments_use_case: Use case from DI
        limit: Number of comments (clamped server side)

    Returns:
        Recent comments with their post titles
    """
    with domain_errors("fetch recent comments"):
        result = await get_recent_comments_use_case.execute(
            GetRecentCommentsRequest(limit=limit)
        )
        return ApiResponse(data=result.comments)


@router.get("/{post_id}", response_model=CommentListResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> CommentListResponse:
    """Get the reply tree of a post.

    Roots are ordered newest first, replies oldest first. Soft-deleted
    comments are included with their sentinel content.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Root comments with nested replies and the total comment count
    """
    with domain_errors("fetch comments"):
        result = await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
        return CommentListResponse(
            data=result.comments, meta=CommentListMeta(total=result.total)
        )


@router.post(
    "",
    response_model=ApiResponse[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> ApiResponse[CommentItem]:
    """Create a comment on a post or reply to another comment.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment with an empty reply list

    Raises:
        HTTPException: 400 on invalid input or depth limit, 401 on a failed
            author claim, 404 if the post or parent is missing
    """
    with domain_errors("create comment"):
        comment = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=request.post_id,
                parent_id=request.parent_id,
                content=request.content,
                nickname=request.nickname,
                password=request.password,
                is_author=request.is_author,
            )
        )
        return ApiResponse(data=comment, message="Comment created")


@router.post("/{comment_id}/edit", response_model=ApiResponse[EditCommentResponse])
async def edit_comment(
    comment_id: str,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
) -> ApiResponse[EditCommentResponse]:
    """Edit a comment's content.

    Args:
        comment_id: Comment UUID
        request: New content and the comment password
        edit_comment_use_case: Edit comment use case from DI

    Returns:
        Updated content and timestamp
    """
    with domain_errors("edit comment"):
        result = await edit_comment_use_case.execute(
            EditCommentRequest(
                comment_id=comment_id,
                content=request.content,
                password=request.password,
            )
        )
        return ApiResponse(data=result, message="Comment updated")


@router.post("/{comment_id}/delete", response_model=ApiResponse[DeleteCommentResponse])
async def delete_comment(
    comment_id: str,
    request: PasswordAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> ApiResponse[DeleteCommentResponse]:
    """Delete a comment.

    Comments with replies are soft-deleted, others are removed.

    Args:
        comment_id: Comment UUID
        request: Comment password
        delete_comment_use_case: Delete comment use case from DI

    Returns:
        Which delete branch ran
    """
    with domain_errors("delete comment"):
        result = await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, password=request.password)
        )
        return ApiResponse(data=result, message="Comment deleted")


@router.post("/{comment_id}/like", response_model=ApiResponse[LikeCommentResponse])
async def like_comment(
    comment_id: str,
    request: LikeCommentAPIRequest,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
) -> ApiResponse[LikeCommentResponse]:
    """Like or unlike a comment.

    Args:
        comment_id: Comment UUID
        request: Desired like state
        like_comment_use_case: Like comment use case from DI

    Returns:
        The authoritative like count
    """
    with domain_errors("update comment like"):
        result = await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, liked=request.liked)
        )
        return ApiResponse(
            data=result,
            message="Comment liked" if request.liked else "Comment like removed",
        )


@router.post("/{comment_id}/verify", response_model=ApiResponse[VerifyPasswordResponse])
async def verify_comment_password(
    comment_id: str,
    request: PasswordAPIRequest,
    verify_password_use_case: FromDishka[VerifyPasswordUseCase],
) -> ApiResponse[VerifyPasswordResponse]:
    """Check a comment password before showing edit or delete forms.

    Args:
        comment_id: Comment UUID
        request: Password to check
        verify_password_use_case: Use case from DI

    Returns:
        Whether the password matches
    """
    with domain_errors("verify comment password"):
        result = await verify_password_use_case.execute(
            VerifyPasswordRequest(comment_id=comment_id, password=request.password)
        )
        return ApiResponse(data=result)
