"""Client-side copy of a post's comment tree.

The cache is only changed after the server has acknowledged the matching
mutation. Lookups walk the tree depth first and stop at the first match.
"""

from dataclasses import dataclass
from datetime import datetime

import logfire

from board.client.counts import CommentCountRegistry
from board.domain.model.comment import DELETED_COMMENT_CONTENT, CommentNode
from board.domain.value import CommentId, PostId


@dataclass(frozen=True)
class Found:
    """A located node, the list holding it and its parent (None for roots)."""

    node: CommentNode
    siblings: list[CommentNode]
    parent: CommentNode | None


@dataclass(frozen=True)
class NotFound:
    comment_id: CommentId


Lookup = Found | NotFound


def find_node(roots: list[CommentNode], comment_id: CommentId) -> Lookup:
    """Depth-first search in document order."""
    stack: list[tuple[CommentNode, list[CommentNode], CommentNode | None]] = [
        (node, roots, None) for node in reversed(roots)
    ]
    while stack:
        node, siblings, parent = stack.pop()
        if node.id == comment_id:
            return Found(node=node, siblings=siblings, parent=parent)
        stack.extend((reply, node.replies, node) for reply in reversed(node.replies))
    return NotFound(comment_id=comment_id)


class CommentTreeCache:
    """Comment tree and total of one post."""

    def __init__(
        self, post_id: PostId, registry: CommentCountRegistry | None = None
    ) -> None:
        self.post_id = post_id
        self.registry = registry
        self._roots: list[CommentNode] = []
        self._total = 0

    @property
    def roots(self) -> list[CommentNode]:
        return self._roots

    @property
    def total(self) -> int:
        return self._total

    def find(self, comment_id: CommentId) -> Lookup:
        return find_node(self._roots, comment_id)

    def load(self, roots: list[CommentNode], total: int) -> None:
        """Replace the cached view with a freshly fetched tree."""
        self._roots = roots
        self._set_total(total)

    def attach(self, node: CommentNode, parent_id: CommentId | None = None) -> bool:
        """Place a newly created comment.

        Roots go first (newest thread first); replies are appended to
        their parent, whose reply count then follows its replies.

        Returns:
            False if the parent is not in the cache
        """
        if parent_id is None:
            self._roots.insert(0, node)
        else:
            found = self.find(parent_id)
            if isinstance(found, NotFound):
                logfire.warn(
                    "Parent comment not in cache",
                    post_id=str(self.post_id),
                    parent_id=str(parent_id),
                )
                return False
            found.node.replies.append(node)
            found.node.reply_count = len(found.node.replies)

        self._set_total(self._total + 1)
        return True

    def update_content(
        self,
        comment_id: CommentId,
        content: str,
        updated_at: datetime | None = None,
    ) -> bool:
        """Replace the content of a cached comment."""
        found = self.find(comment_id)
        if isinstance(found, NotFound):
            return False
        found.node.content = content
        if updated_at is not None:
            found.node.updated_at = updated_at
        return True

    def mark_deleted(self, comment_id: CommentId) -> bool:
        """Show a soft-deleted comment with the sentinel content.

        The node keeps its replies and the total is unchanged.
        """
        found = self.find(comment_id)
        if isinstance(found, NotFound):
            return False
        found.node.content = DELETED_COMMENT_CONTENT
        found.node.is_deleted = True
        found.node.deleted_at = datetime.now()
        return True

    def remove(self, comment_id: CommentId) -> bool:
        """Drop a hard-deleted comment from the tree."""
        found = self.find(comment_id)
        if isinstance(found, NotFound):
            return False

        found.siblings[:] = [n for n in found.siblings if n.id != comment_id]
        if found.parent is not None:
            found.parent.reply_count = len(found.parent.replies)
        self._set_total(self._total - 1)
        return True

    def update_like_count(self, comment_id: CommentId, like_count: int) -> bool:
        found = self.find(comment_id)
        if isinstance(found, NotFound):
            return False
        found.node.like_count = like_count
        return True

    def like_count(self, comment_id: CommentId) -> int | None:
        found = self.find(comment_id)
        return found.node.like_count if isinstance(found, Found) else None

    def _set_total(self, total: int) -> None:
        self._total = max(0, total)
        if self.registry is not None:
            self.registry.set(self.post_id, self._total)
