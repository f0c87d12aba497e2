"""
AVL balance maintenance.

Heights follow the leaf = 0, empty = -1 convention. Skew is measured as
``height(right) - height(left)``, so a positive skew means right-heavy.
Rotations keep parent pointers consistent and hand the rotated subtree's
position in the parent over to the pivot; callers only need to notice when
the pivot became the new root (its parent is None).
"""

import logging
from typing import Optional, TypeVar

from .node import Node

logger = logging.getLogger(__name__)

T = TypeVar('T')


def height(node: Optional[Node[T]]) -> int:
    if node is None:
        return -1
    return node.height


def update_height(node: Node[T]) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def skew(node: Optional[Node[T]]) -> int:
    if node is None:
        return 0
    return height(node.right) - height(node.left)


def _replace_child(parent: Optional[Node[T]], old: Node[T], new: Node[T]) -> None:
    new.parent = parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(top: Node[T], pivot: Node[T]) -> Node[T]:
    """
    Rotate ``pivot`` (top's right child) up into top's position.

    Returns the pivot, which is now the root of the rotated subtree.
    """
    assert top.right is pivot
    logger.debug("rotate left: top=%r pivot=%r", top.key, pivot.key)

    _replace_child(top.parent, top, pivot)

    top.right = pivot.left
    if top.right is not None:
        top.right.parent = top

    pivot.left = top
    top.parent = pivot

    update_height(top)
    update_height(pivot)
    return pivot


def rotate_right(top: Node[T], pivot: Node[T]) -> Node[T]:
    """Mirror of :func:`rotate_left`; ``pivot`` must be top's left child."""
    assert top.left is pivot
    logger.debug("rotate right: top=%r pivot=%r", top.key, pivot.key)

    _replace_child(top.parent, top, pivot)

    top.left = pivot.right
    if top.left is not None:
        top.left.parent = top

    pivot.right = top
    top.parent = pivot

    update_height(top)
    update_height(pivot)
    return pivot


def rebalance(node: Node[T]) -> Node[T]:
    """
    Refresh ``node``'s height and restore the AVL property at it.

    Children must already hold current heights. Returns the root of the
    subtree that now occupies ``node``'s former position.
    """
    update_height(node)
    balance = skew(node)

    if balance >= 2:
        right = node.right
        assert right is not None
        if skew(right) < 0:
            assert right.left is not None
            logger.debug("right-left case at %r", node.key)
            rotate_right(right, right.left)
        assert node.right is not None
        return rotate_left(node, node.right)

    if balance <= -2:
        left = node.left
        assert left is not None
        if skew(left) > 0:
            assert left.right is not None
            logger.debug("left-right case at %r", node.key)
            rotate_left(left, left.right)
        assert node.left is not None
        return rotate_right(node, node.left)

    return node
