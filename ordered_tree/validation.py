"""
Structural invariant checks for trees built from :class:`Node`.

Everything is checked iteratively so the unbalanced tree, whose height can
be linear in its size, is checked without deep recursion.
"""

import logging
from typing import List, Optional, TypeVar

from .balance import height, skew
from .errors import InvariantViolation
from .node import Node
from .traversal import in_order

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _fail(message: str) -> None:
    logger.debug("invariant violated: %s", message)
    raise InvariantViolation(message)


def check_tree(root: Optional[Node[T]], size: int, balanced: bool = True) -> None:
    """
    Raise :class:`InvariantViolation` unless the tree rooted at ``root`` is
    a consistent binary search tree holding exactly ``size`` keys.

    Checks strict in-order ascent (which also rules out duplicate keys),
    parent back-references, stored heights and, when ``balanced`` is set,
    that no node's skew exceeds one in magnitude.
    """
    if root is not None and root.parent is not None:
        _fail(f"root {root.key!r} has a parent")

    count = 0
    stack: List[Node[T]] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                _fail(f"child {child.key!r} does not point back to parent {node.key!r}")
            stack.append(child)

        expected = 1 + max(height(node.left), height(node.right))
        if node.height != expected:
            _fail(f"node {node.key!r} stores height {node.height}, expected {expected}")
        if balanced and abs(skew(node)) > 1:
            _fail(f"node {node.key!r} has skew {skew(node)}")

    if count != size:
        _fail(f"tree reports size {size} but holds {count} nodes")

    previous = None
    first = True
    for key in in_order(root):
        if not first and not previous < key:
            _fail(f"keys out of order: {previous!r} before {key!r}")
        previous = key
        first = False


def is_balanced(root: Optional[Node[T]]) -> bool:
    stack: List[Node[T]] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if abs(skew(node)) > 1:
            return False
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return True
