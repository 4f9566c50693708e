from .exceptions import InvariantError, LinkError, RedBlackTreeError
from .iterator import TreeIterator
from .node import Colour, Direction, Node
from .rbtree import RedBlackTree, rotate

__all__ = [
    "Colour",
    "Direction",
    "InvariantError",
    "LinkError",
    "Node",
    "RedBlackTree",
    "RedBlackTreeError",
    "TreeIterator",
    "rotate",
]
