"""Lazy depth-first walks over a subtree, driven by an explicit stack."""

from typing import Iterator, List, Optional, TypeVar

from .node import Node

T = TypeVar('T')


def in_order(root: Optional[Node[T]]) -> Iterator[T]:
    stack: List[Node[T]] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


def pre_order(root: Optional[Node[T]]) -> Iterator[T]:
    if root is None:
        return
    stack: List[Node[T]] = [root]
    while stack:
        node = stack.pop()
        yield node.key
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def post_order(root: Optional[Node[T]]) -> Iterator[T]:
    # Walks with a cursor to the last emitted node so nothing is buffered.
    stack: List[Node[T]] = []
    last: Optional[Node[T]] = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        peek = stack[-1]
        if peek.right is not None and last is not peek.right:
            node = peek.right
        else:
            yield peek.key
            last = stack.pop()

