from typing import List, Optional

from .node import Direction, Node


class TreeIterator:
    """In-order walk over a subtree using an explicit ancestor stack.

    With ``first=Direction.LEFT`` values come out ascending, with
    ``Direction.RIGHT`` descending. The iterator is single-pass: once it is
    exhausted it stays exhausted. Inserting into or removing from the tree
    while an iterator is live invalidates it, since rotations move the nodes
    held on the stack.
    """

    def __init__(self, root: Optional[Node], first: Direction = Direction.LEFT):
        self._first = first
        self._last = first.opposite()
        self._parents: List[Node] = []
        self._current = self._descend(root)

    def _descend(self, node: Optional[Node]) -> Optional[Node]:
        # land on the extreme node of the subtree, stacking everything above it
        if node is None:
            return None
        child = node.get_child(self._first)
        while child is not None:
            self._parents.append(node)
            node = child
            child = node.get_child(self._first)
        return node

    def __iter__(self):
        return self

    def __next__(self):
        node = self._current
        if node is None:
            raise StopIteration

        after = node.get_child(self._last)
        if after is None:
            self._current = self._parents.pop() if self._parents else None
        else:
            self._current = self._descend(after)
        return node.value
