import logging
from typing import Optional, Tuple, TypeVar

from .balance import rebalance
from .base import OrderedSet, check_key, compare
from .node import Node, minimum
from .validation import check_tree

logger = logging.getLogger(__name__)

T = TypeVar('T')


class AVLTree(OrderedSet[T]):
    """
    Ordered set of unique keys stored in an AVL tree.

    Insertions and removals recurse down to the affected slot and rebalance
    every ancestor on the way back up, so the height stays logarithmic in
    the number of keys. With ``validate=True`` every successful mutation is
    followed by a full invariant check.
    """

    def _insert(self, node: Optional[Node[T]], key: T) -> Tuple[Node[T], bool]:
        if node is None:
            return Node(key), True

        order = compare(key, node.key)
        if order < 0:
            child, added = self._insert(node.left, key)
            node.left = child
            child.parent = node
        elif order > 0:
            child, added = self._insert(node.right, key)
            node.right = child
            child.parent = node
        else:
            return node, False

        return rebalance(node), added

    def add(self, key: T) -> bool:
        check_key(key)
        root, added = self._insert(self._root, key)
        self._set_root(root)
        if added:
            self._size += 1
            self._after_mutation()
        return added

    def _remove(self, node: Optional[Node[T]], key: T) -> Tuple[Optional[Node[T]], bool]:
        if node is None:
            return None, False

        order = compare(key, node.key)
        if order < 0:
            child, removed = self._remove(node.left, key)
            node.left = child
        elif order > 0:
            child, removed = self._remove(node.right, key)
            node.right = child
        elif node.left is not None and node.right is not None:
            successor = minimum(node.right)
            node.key = successor.key
            child, removed = self._remove(node.right, successor.key)
            node.right = child
        else:
            child = node.left if node.left is not None else node.right
            if child is not None:
                child.parent = node.parent
            node.detach()
            return child, True

        if child is not None:
            child.parent = node
        return rebalance(node), removed

    def remove(self, key: T) -> bool:
        check_key(key)
        root, removed = self._remove(self._root, key)
        self._set_root(root)
        if removed:
            self._size -= 1
            self._after_mutation()
        return removed

    def contains(self, key: T) -> bool:
        check_key(key)
        node = self._root
        while node is not None:
            order = compare(key, node.key)
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                return True
        return False

    def _set_root(self, root: Optional[Node[T]]) -> None:
        if root is not self._root:
            logger.debug("root replaced: %r -> %r",
                         None if self._root is None else self._root.key,
                         None if root is None else root.key)
        self._root = root
        if root is not None:
            root.parent = None

    def validate(self) -> None:
        check_tree(self._root, self._size, balanced=True)
