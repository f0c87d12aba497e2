from typing import Optional, TypeVar

from .balance import update_height
from .base import OrderedSet, check_key, compare
from .node import Node, minimum
from .validation import check_tree

T = TypeVar('T')


class BinarySearchTree(OrderedSet[T]):
    """
    Unbalanced binary search tree with the same interface as AVLTree.

    Never rotates, so sorted input degrades it into a chain. Heights are
    still tracked so it can be compared against the balanced tree.
    """

    def add(self, key: T) -> bool:
        check_key(key)
        if self._root is None:
            self._root = Node(key)
            self._size += 1
            self._after_mutation()
            return True

        node = self._root
        while True:
            order = compare(key, node.key)
            if order < 0:
                if node.left is None:
                    node.left = Node(key, parent=node)
                    break
                node = node.left
            elif order > 0:
                if node.right is None:
                    node.right = Node(key, parent=node)
                    break
                node = node.right
            else:
                return False

        self._size += 1
        self._retrace(node)
        self._after_mutation()
        return True

    def remove(self, key: T) -> bool:
        node = self._find_node(key)
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor = minimum(node.right)
            node.key = successor.key
            node = successor

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.detach()

        self._size -= 1
        self._retrace(parent)
        self._after_mutation()
        return True

    def contains(self, key: T) -> bool:
        return self._find_node(key) is not None

    def _find_node(self, key: T) -> Optional[Node[T]]:
        check_key(key)
        node = self._root
        while node is not None:
            order = compare(key, node.key)
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                return node
        return None

    def _retrace(self, node: Optional[Node[T]]) -> None:
        while node is not None:
            before = node.height
            update_height(node)
            if node.height == before:
                return
            node = node.parent

    def validate(self) -> None:
        check_tree(self._root, self._size, balanced=False)
