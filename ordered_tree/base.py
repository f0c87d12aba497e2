from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

from . import traversal
from .balance import height
from .errors import InvalidKeyError
from .node import Node, maximum, minimum
from .validation import is_balanced

T = TypeVar('T')


def check_key(key: object) -> None:
    """Reject keys that cannot take part in ordering comparisons."""
    if key is None:
        raise InvalidKeyError("key must not be None")
    try:
        key < key  # type: ignore[operator]
    except TypeError as exc:
        raise InvalidKeyError(f"key {key!r} is not orderable") from exc
    # NaN compares False against everything, itself included.
    if not key == key:
        raise InvalidKeyError(f"key {key!r} is not equal to itself")


def compare(key: T, other: T) -> int:
    """Three-way comparison; -1, 0 or 1 as ``key`` sorts before, with or after ``other``."""
    try:
        if key < other:  # type: ignore[operator]
            return -1
        if key > other:  # type: ignore[operator]
            return 1
    except TypeError as exc:
        raise InvalidKeyError(f"key {key!r} is not comparable with {other!r}") from exc
    return 0


class OrderedSet(ABC, Generic[T]):
    """
    Interface shared by the balanced and unbalanced trees.

    Subclasses own the mutation logic; reads, traversals and the debug
    check hook operate on the ``_root``/``_size`` pair kept here.
    """

    def __init__(self, validate: bool = False) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        self._validate: bool = validate

    @abstractmethod
    def add(self, key: T) -> bool:
        """Insert ``key``; return False if it was already present."""
        pass

    @abstractmethod
    def remove(self, key: T) -> bool:
        """Delete ``key``; return False if it was not present."""
        pass

    @abstractmethod
    def contains(self, key: T) -> bool:
        pass

    @abstractmethod
    def validate(self) -> None:
        """Raise InvariantViolation if the structure is inconsistent."""
        pass

    def _after_mutation(self) -> None:
        if self._validate:
            self.validate()

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return minimum(self._root).key

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return maximum(self._root).key

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        return height(self._root)

    def in_order(self) -> Iterator[T]:
        return traversal.in_order(self._root)

    def pre_order(self) -> Iterator[T]:
        return traversal.pre_order(self._root)

    def post_order(self) -> Iterator[T]:
        return traversal.post_order(self._root)

    def copy(self) -> 'OrderedSet[T]':
        clone = type(self)(validate=self._validate)
        for key in self.pre_order():
            clone.add(key)
        return clone

    def is_balanced(self) -> bool:
        return is_balanced(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.in_order())})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, height={self.height()})"
