"""Ordered sets backed by binary search trees."""

import logging

from .avl_tree import AVLTree
from .base import OrderedSet
from .binary_search_tree import BinarySearchTree
from .errors import InvalidKeyError, InvariantViolation
from .sorting import tree_sort

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AVLTree",
    "BinarySearchTree",
    "InvalidKeyError",
    "InvariantViolation",
    "OrderedSet",
    "tree_sort",
]
