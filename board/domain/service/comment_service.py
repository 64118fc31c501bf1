"""Comment domain service."""

import re
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from board.config import CommentSettings
from board.domain.error import (
    AuthError,
    AuthorPasswordMismatchError,
    CommentDeletedError,
    DepthLimitExceededError,
    NotFoundError,
    ValidationError,
)
from board.domain.model.comment import DELETED_COMMENT_CONTENT, Comment, CommentNode
from board.domain.repository import CommentRepository
from board.domain.value import CommentDeletion, CommentId, DeleteOutcome, PostId

from .base import Service
from .comment_tree import build_comment_tree
from .password import PasswordHasher
from .post_service import PostService

# Hangul syllables, latin letters, digits and spaces
NICKNAME_PATTERN = re.compile(r"^[가-힣a-zA-Z0-9 ]+$")


@dataclass
class RecentComment:
    """A recent comment together with the title of its post."""

    comment: Comment
    post_title: str


class CommentService(Service):
    """Domain service for comment operations.

    Enforces password ownership, the nesting depth limit and the delete
    cascade, and keeps reply and comment counters re-derived from the
    stored rows.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        password_hasher: PasswordHasher,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            password_hasher: Hashes and checks passwords
            settings: Comment policy (depth and length limits)
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.password_hasher = password_hasher
        self.settings = settings

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        nickname: str,
        password: str,
        parent_id: CommentId | None = None,
        claims_author: bool = False,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            content: Comment text
            nickname: Display name of the commenter
            password: Plaintext password protecting edit and delete
            parent_id: Parent comment ID for replies (None for top-level)
            claims_author: Whether the commenter claims to be the post author,
                proven by ``password`` matching the post password

        Returns:
            Created comment

        Raises:
            ValidationError: If content or nickname is invalid, or the
                reply would nest too deep
            NotFoundError: If the post or parent comment does not exist
            AuthorPasswordMismatchError: If the author claim fails
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
            claims_author=claims_author,
        ):
            content = self._validate_content(content)
            nickname = self._validate_nickname(nickname)
            self._require_password(password)

            post = await self.post_service.require_post(post_id)

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")
                depth = parent.depth + 1
                if depth > self.settings.max_depth:
                    logfire.warn(
                        "Reply depth limit exceeded",
                        parent_id=str(parent_id),
                        depth=depth,
                        max_depth=self.settings.max_depth,
                    )
                    raise DepthLimitExceededError(depth, self.settings.max_depth)

            if claims_author and not self.password_hasher.verify(
                password, post.password_hash
            ):
                logfire.warn("Author claim rejected", post_id=str(post_id))
                raise AuthorPasswordMismatchError()

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_id=parent_id,
                content=content,
                nickname=nickname,
                password_hash=self.password_hasher.hash(password),
                depth=depth,
                like_count=0,
                reply_count=0,
                is_author=claims_author,
                is_deleted=False,
                deleted_at=None,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            if parent_id:
                await self._refresh_reply_count(parent_id)
            await self.post_service.refresh_comment_count(post_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
                is_author=saved.is_author,
            )
            return saved

    async def edit_comment(
        self, comment_id: CommentId, content: str, password: str
    ) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content
            password: Plaintext password given at creation

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment not found
            CommentDeletedError: If comment was deleted
            AuthError: If password does not match
            ValidationError: If content is invalid
        """
        with logfire.span("comment_service.edit_comment", comment_id=str(comment_id)):
            comment = await self._require_live_comment(comment_id)
            self._check_password(comment, password)
            content = self._validate_content(content)

            updated = comment.model_copy(
                update={"content": content, "updated_at": datetime.now()}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                content_length=len(saved.content),
            )
            return saved

    async def delete_comment(
        self, comment_id: CommentId, password: str
    ) -> CommentDeletion:
        """Delete a comment, keeping the thread intact.

        A comment with stored replies is soft-deleted: its content is
        replaced by a sentinel and the row stays, so the replies keep their
        parent. A comment without replies is removed, and the counters of
        its parent and post are re-derived.

        Args:
            comment_id: Comment ID
            password: Plaintext password given at creation

        Returns:
            Which delete branch ran

        Raises:
            NotFoundError: If comment not found
            CommentDeletedError: If comment was already deleted
            AuthError: If password does not match
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self._require_live_comment(comment_id)
            self._check_password(comment, password)

            children = await self.comment_repository.count_children(comment_id)
            if children > 0:
                now = datetime.now()
                await self.comment_repository.save(
                    comment.model_copy(
                        update={
                            "content": DELETED_COMMENT_CONTENT,
                            "is_deleted": True,
                            "deleted_at": now,
                        }
                    )
                )
                logfire.info(
                    "Comment soft-deleted",
                    comment_id=str(comment_id),
                    replies=children,
                )
                return CommentDeletion(
                    comment_id=comment_id, outcome=DeleteOutcome.SOFT_DELETED
                )

            await self.comment_repository.delete(comment_id)
            if comment.parent_id:
                await self._refresh_reply_count(comment.parent_id)
            await self.post_service.refresh_comment_count(comment.post_id)

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
            return CommentDeletion(comment_id=comment_id, outcome=DeleteOutcome.DELETED)

    async def like_comment(self, comment_id: CommentId, liked: bool) -> int:
        """Apply a like or unlike declared by the client.

        The client states the direction; the server does not track who
        liked what.

        Args:
            comment_id: Comment ID
            liked: True to add a like, False to remove one

        Returns:
            The authoritative like count after the change

        Raises:
            NotFoundError: If comment not found
            CommentDeletedError: If comment was deleted
        """
        with logfire.span(
            "comment_service.like_comment", comment_id=str(comment_id), liked=liked
        ):
            await self._require_live_comment(comment_id)

            like_count = await self.comment_repository.adjust_like_count(
                comment_id, 1 if liked else -1
            )
            if like_count is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment like updated",
                comment_id=str(comment_id),
                liked=liked,
                like_count=like_count,
            )
            return like_count

    async def verify_password(self, comment_id: CommentId, password: str) -> bool:
        """Check a password against a comment before editing or deleting it.

        Raises:
            NotFoundError: If comment not found
            CommentDeletedError: If comment was deleted
        """
        with logfire.span("comment_service.verify_password", comment_id=str(comment_id)):
            comment = await self._require_live_comment(comment_id)
            valid = self.password_hasher.verify(password, comment.password_hash)
            if not valid:
                logfire.warn("Comment password mismatch", comment_id=str(comment_id))
            return valid

    async def get_comment_tree(
        self, post_id: PostId
    ) -> tuple[list[CommentNode], int]:
        """Get the reply tree of a post.

        Args:
            post_id: Post ID

        Returns:
            Root nodes (newest thread first) and the number of stored comments

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("comment_service.get_comment_tree", post_id=str(post_id)):
            await self.post_service.require_post(post_id)

            comments = await self.comment_repository.find_by_post(post_id)
            roots = build_comment_tree(comments)
            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                count=len(comments),
                threads=len(roots),
            )
            return roots, len(comments)

    async def get_recent_comments(self, limit: int | None = None) -> list[RecentComment]:
        """Get the newest live comments across all posts.

        Args:
            limit: Number of comments, clamped to the configured maximum

        Returns:
            Recent comments with their post titles, newest first
        """
        if limit is None or limit < 1:
            limit = self.settings.recent_limit_default
        limit = min(limit, self.settings.recent_limit_max)

        with logfire.span("comment_service.get_recent_comments", limit=limit):
            comments = await self.comment_repository.find_recent(limit)
            titles = await self.post_service.get_titles([c.post_id for c in comments])
            return [
                RecentComment(comment=comment, post_title=titles[comment.post_id])
                for comment in comments
                if comment.post_id in titles
            ]

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def _require_live_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        if comment.is_deleted:
            logfire.warn("Comment already deleted", comment_id=str(comment_id))
            raise CommentDeletedError(str(comment_id))
        return comment

    async def _refresh_reply_count(self, parent_id: CommentId) -> int:
        reply_count = await self.comment_repository.count_children(parent_id)
        await self.comment_repository.set_reply_count(parent_id, reply_count)
        return reply_count

    def _check_password(self, comment: Comment, password: str) -> None:
        if not self.password_hasher.verify(password, comment.password_hash):
            logfire.warn("Comment password mismatch", comment_id=str(comment.id))
            raise AuthError()

    def _validate_content(self, content: str) -> str:
        content = content.strip()
        if not content:
            raise ValidationError("Comment content is required")
        if len(content) > self.settings.max_content_length:
            raise ValidationError(
                f"Comment content must be at most {self.settings.max_content_length} characters"
            )
        return content

    def _validate_nickname(self, nickname: str) -> str:
        nickname = nickname.strip()
        if not nickname:
            raise ValidationError("Nickname is required")
        if len(nickname) > self.settings.max_nickname_length:
            raise ValidationError(
                f"Nickname must be at most {self.settings.max_nickname_length} characters"
            )
        if not NICKNAME_PATTERN.match(nickname):
            raise ValidationError("Nickname may contain only letters, digits and spaces")
        return nickname

    @staticmethod
    def _require_password(password: str) -> None:
        if not password:
            raise ValidationError("Password is required")
