from typing import Iterable, List, TypeVar

from .avl_tree import AVLTree

T = TypeVar('T')


def tree_sort(values: Iterable[T]) -> List[T]:
    """
    Sort ``values`` by loading them into an AVL tree and reading it back.

    Duplicates collapse, so the result is strictly ascending.
    """
    tree: AVLTree[T] = AVLTree()
    for value in values:
        tree.add(value)
    return list(tree.in_order())
