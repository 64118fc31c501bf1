"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentsUseCase,
    GetRecentCommentsUseCase,
    LikeCommentUseCase,
    VerifyPasswordUseCase,
)
from board.domain.service import CommentService
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    @provide
    def get_verify_password_use_case(
        self, comment_service: CommentService
    ) -> VerifyPasswordUseCase:
        """Provide verify password use case."""
        return VerifyPasswordUseCase(comment_service=comment_service)

    @provide
    def get_get_recent_comments_use_case(
        self, comment_service: CommentService
    ) -> GetRecentCommentsUseCase:
        """Provide recent comments use case."""
        return GetRecentCommentsUseCase(comment_service=comment_service)
