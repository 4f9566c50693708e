import enum
from typing import Optional

from .exceptions import LinkError


class Direction(enum.IntEnum):
    LEFT = 0
    RIGHT = 1

    def opposite(self) -> "Direction":
        return Direction(1 - self)


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Node:
    """A coloured value owning up to two children.

    Nodes keep no parent reference; the engines reach ancestors through
    their own call frames.
    """

    __slots__ = ("colour", "value", "left", "right")

    def __init__(self, value):
        self.colour = Colour.RED
        self.value = value
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def get_child(self, direction: Direction) -> Optional["Node"]:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def __repr__(self):
        return f"{self.colour.name[0]}.{self.value!r}"


def is_red(node: Optional[Node]) -> bool:
    return node is not None and node.colour == Colour.RED


def is_black(node: Optional[Node]) -> bool:
    # absent children are the implicit black leaves
    return node is None or node.colour == Colour.BLACK


def follow(node: Node, *directions: Direction) -> Node:
    """Walks down from node along directions and returns the node reached.

    Raises LinkError if any step lands on an absent child.
    """
    for direction in directions:
        child = node.get_child(direction)
        if child is None:
            raise LinkError(node.value, direction)
        node = child
    return node
