"""Materialize flat comment rows into reply trees."""

from collections.abc import Iterable

from board.domain.model.comment import Comment, CommentNode
from board.domain.value import CommentId


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the reply tree of one post.

    Algorithm:
    1. Create a node (with empty replies) for every row, keyed by id
    2. Append each node to its parent's replies, or to the roots when it
       has no parent
    3. Sort roots newest first, and every replies list oldest first

    New threads surface at the top while each thread reads in
    conversational order. Rows whose parent is not in the input are left
    out of the tree.

    Args:
        comments: Rows of one post, soft-deleted rows included, ideally
            ordered by created_at ascending

    Returns:
        Root nodes with replies populated recursively
    """
    rows = list(comments)
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode.from_comment(comment) for comment in rows
    }

    roots: list[CommentNode] = []
    for comment in rows:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
            continue
        parent = nodes.get(comment.parent_id)
        if parent is not None:
            parent.replies.append(node)

    roots.sort(key=lambda node: node.created_at, reverse=True)

    # Iterative walk; depth is bounded but there is no need to recurse
    stack = list(roots)
    while stack:
        node = stack.pop()
        node.replies.sort(key=lambda reply: reply.created_at)
        stack.extend(node.replies)

    return roots


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Count every node in a forest of comment trees."""
    return sum(1 + count_nodes(node.replies) for node in roots)
