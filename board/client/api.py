"""HTTP client for the comments API.

Responses are decoded exactly once, here, into typed models whose
defaults fill in fields an older server may leave out.
"""

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

import httpx
import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from board.client.error import ApiError
from board.config import ClientSettings
from board.domain.model.comment import CommentNode
from board.domain.service.comment_tree import count_nodes
from board.domain.value import CommentId, PostId
from board.util.observability import instrument_httpx

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class CommentPayload(BaseModel):
    """Comment as returned by the API, replies included."""

    id: UUID
    post_id: UUID
    parent_id: UUID | None = None
    content: str = ""
    nickname: str = ""
    depth: int = 0
    like_count: int = 0
    reply_count: int = 0
    is_author: bool = False
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    replies: list["CommentPayload"] = Field(default_factory=list)

    def to_node(self) -> CommentNode:
        return CommentNode(
            id=CommentId(self.id),
            post_id=PostId(self.post_id),
            parent_id=CommentId(self.parent_id) if self.parent_id else None,
            content=self.content,
            nickname=self.nickname,
            depth=self.depth,
            like_count=self.like_count,
            reply_count=self.reply_count,
            is_author=self.is_author,
            is_deleted=self.is_deleted,
            deleted_at=self.deleted_at,
            created_at=self.created_at,
            updated_at=self.updated_at,
            replies=[reply.to_node() for reply in self.replies],
        )


class EditedComment(BaseModel):
    id: UUID
    content: str
    updated_at: datetime = Field(default_factory=datetime.now)


class DeleteResult(BaseModel):
    deleted: bool = False
    soft_deleted: bool = False
    comment_id: UUID


class LikeStatus(BaseModel):
    id: UUID
    like_count: int = 0
    liked: bool = False


class PasswordCheck(BaseModel):
    valid: bool = False


class RecentCommentPayload(BaseModel):
    id: UUID
    content: str = ""
    nickname: str = ""
    post_id: UUID
    post_title: str = ""
    is_author: bool = False
    depth: int = 0
    created_at: datetime = Field(default_factory=datetime.now)


class Envelope(BaseModel, Generic[T]):
    """Success envelope wrapping every response."""

    success: bool = True
    data: T
    message: str | None = None


class ListMeta(BaseModel):
    total: int | None = None


class CommentListEnvelope(BaseModel):
    success: bool = True
    data: list[CommentPayload] = Field(default_factory=list)
    meta: ListMeta = Field(default_factory=ListMeta)


class CommentsApiClient:
    """Async client for the comments endpoints.

    Every failure surfaces as ``ApiError``. Nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:8000
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (tests use MockTransport)
        """
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "CommentsApiClient":
        """Build a traced client from configuration."""
        client = cls(base_url=settings.api_base_url, timeout=settings.timeout_seconds)
        instrument_httpx(client._client)
        return client

    async def __aenter__(self) -> "CommentsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_comments(self, post_id: PostId) -> tuple[list[CommentNode], int]:
        """Fetch the reply tree of a post.

        Returns:
            Root nodes and the post's comment total
        """
        result = await self._request("GET", f"/comments/{post_id}", CommentListEnvelope)
        roots = [payload.to_node() for payload in result.data]
        total = result.meta.total
        if total is None:
            total = count_nodes(roots)
        return roots, total

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        nickname: str,
        password: str,
        parent_id: CommentId | None = None,
        is_author: bool = False,
    ) -> CommentNode:
        body = {
            "postId": str(post_id),
            "parentId": str(parent_id) if parent_id else None,
            "content": content,
            "nickname": nickname,
            "password": password,
            "isAuthor": is_author,
        }
        result = await self._request(
            "POST", "/comments", Envelope[CommentPayload], json=body
        )
        return result.data.to_node()

    async def edit_comment(
        self, comment_id: CommentId, content: str, password: str
    ) -> EditedComment:
        result = await self._request(
            "POST",
            f"/comments/{comment_id}/edit",
            Envelope[EditedComment],
            json={"content": content, "password": password},
        )
        return result.data

    async def delete_comment(self, comment_id: CommentId, password: str) -> DeleteResult:
        result = await self._request(
            "POST",
            f"/comments/{comment_id}/delete",
            Envelope[DeleteResult],
            json={"password": password},
        )
        return result.data

    async def like_comment(self, comment_id: CommentId, liked: bool) -> LikeStatus:
        """Declare the desired like state; the server answers with the count."""
        result = await self._request(
            "POST",
            f"/comments/{comment_id}/like",
            Envelope[LikeStatus],
            json={"liked": liked},
        )
        return result.data

    async def verify_password(self, comment_id: CommentId, password: str) -> bool:
        result = await self._request(
            "POST",
            f"/comments/{comment_id}/verify",
            Envelope[PasswordCheck],
            json={"password": password},
        )
        return result.data.valid

    async def get_recent_comments(
        self, limit: int | None = None
    ) -> list[RecentCommentPayload]:
        params = {"limit": limit} if limit is not None else None
        result = await self._request(
            "GET", "/comments/recent", Envelope[list[RecentCommentPayload]], params=params
        )
        return result.data

    async def _request(
        self,
        method: str,
        path: str,
        model: type[M],
        json: dict | None = None,
        params: dict | None = None,
    ) -> M:
        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            logfire.error(
                "Comments API request failed",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ApiError(0, f"HTTP error: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            logfire.warn(
                "Comments API returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
                error=detail,
            )
            raise ApiError(response.status_code, detail)

        try:
            return model.model_validate_json(response.content)
        except PydanticValidationError as e:
            logfire.error(
                "Malformed comments API response",
                method=method,
                path=path,
                error=str(e),
            )
            raise ApiError(response.status_code, "Malformed response") from e


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str):
        return detail
    return str(detail) if detail else response.reason_phrase
