from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class Node(Generic[T]):
    """
    A single tree node.

    ``height`` is the height of the subtree rooted here: 0 for a leaf, with
    empty subtrees counted as -1. ``parent`` is a back-reference used only
    for walking upward; the tree owns nodes through ``left``/``right``.
    """

    def __init__(self, key: T, parent: Optional['Node[T]'] = None) -> None:
        self.key: T = key
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None
        self.parent: Optional[Node[T]] = parent
        self.height: int = 0

    def detach(self) -> None:
        self.left = None
        self.right = None
        self.parent = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, height={self.height})"


def minimum(node: Node[T]) -> Node[T]:
    while node.left is not None:
        node = node.left
    return node


def maximum(node: Node[T]) -> Node[T]:
    while node.right is not None:
        node = node.right
    return node
