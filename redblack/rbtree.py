import enum
import logging
from typing import Iterable, Optional, Tuple

from .iterator import TreeIterator
from .node import Colour, Direction, Node, follow, is_black, is_red

logger = logging.getLogger(__name__)

# a failed search inside the removal engine, distinct from any stored value
_NOT_FOUND = object()


class Fixup(enum.Enum):
    """Work left for the caller one level up after an insertion step."""
    DONE = 0
    # the returned subtree root is red; its parent must check its own colour
    CONTINUE_AT_PARENT = 1
    # the returned subtree root is red with a red child; its parent is the
    # grandparent of the violation and has to repair it
    CONTINUE_AT_GRANDPARENT = 2


def rotate(sub: Node, direction: Direction) -> Node:
    """Rotates sub towards direction and returns the new subtree root.

    The child opposite to direction is promoted, its inner subtree moves
    across to sub, and sub becomes the promoted node's child on the
    direction side. In-order sequence and colours are left untouched; the
    caller stores the returned node in the position sub came from.
    """
    new_root = follow(sub, direction.opposite())
    sub.set_child(direction.opposite(), new_root.get_child(direction))
    new_root.set_child(direction, sub)
    return new_root


def _splice(node: Node) -> Tuple[Optional[Node], object, bool]:
    """Unlinks a node with at most one child.

    Returns the child taking its place, the removed value, and whether the
    path through this position is now one black node short.
    """
    child = node.left if node.right is None else node.right
    deficient = False
    if node.colour == Colour.BLACK:
        if is_red(child):
            child.colour = Colour.BLACK
        else:
            deficient = True
    node.left = node.right = None
    return child, node.value, deficient


class RedBlackTree:

    def __init__(self, values: Optional[Iterable] = None):
        self.root: Optional[Node] = None
        self.count = 0
        if values is not None:
            for value in values:
                self.insert(value)
            logger.debug("built tree with %d values", self.count)

    def __len__(self):
        return self.count

    def __iter__(self):
        return self.iter()

    def __reversed__(self):
        return TreeIterator(self.root, Direction.RIGHT)

    def __contains__(self, value):
        return self._find(value) is not None

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self):
        return not self.root

    def iter(self) -> TreeIterator:
        """Returns an iterator over the stored values in ascending order"""
        return TreeIterator(self.root, Direction.LEFT)

    def insert(self, value):
        """Adds value to the tree. Equal values are kept side by side."""
        self.root, _ = self._insert(self.root, value)
        # recolouring may have propagated red all the way up
        self.root.colour = Colour.BLACK
        self.count += 1

    def _insert(self, node: Optional[Node], value) -> Tuple[Node, Fixup]:
        if node is None:
            return Node(value), Fixup.CONTINUE_AT_PARENT

        # equal values route right
        direction = Direction.LEFT if value < node.value else Direction.RIGHT
        child, fixup = self._insert(node.get_child(direction), value)
        node.set_child(direction, child)

        if fixup == Fixup.DONE:
            return node, Fixup.DONE

        if fixup == Fixup.CONTINUE_AT_PARENT:
            # a red child under a black node breaks nothing
            if node.colour == Colour.BLACK:
                return node, Fixup.DONE
            return node, Fixup.CONTINUE_AT_GRANDPARENT

        # node is the grandparent: its child on this side and one of that
        # child's children are both red
        parent = child
        uncle = node.get_child(direction.opposite())

        if is_red(uncle):
            # push the blackness down a level, then recheck from here
            parent.colour = Colour.BLACK
            uncle.colour = Colour.BLACK
            node.colour = Colour.RED
            return node, Fixup.CONTINUE_AT_PARENT

        # if the red grandchild sits on the inner side, rotate it above its
        # parent first so both reds lean the same way
        if is_red(parent.get_child(direction.opposite())):
            parent = rotate(parent, direction)
            node.set_child(direction, parent)

        parent.colour = Colour.BLACK
        node.colour = Colour.RED
        return rotate(node, direction.opposite()), Fixup.DONE

    def remove(self, value):
        """Removes one value equal to value and returns it, or None if absent"""
        self.root, removed, _ = self._remove(self.root, value)
        if removed is _NOT_FOUND:
            logger.debug("remove: %r not found", value)
            return None

        if self.root is not None:
            self.root.colour = Colour.BLACK
        self.count -= 1
        return removed

    def _remove(self, node: Optional[Node], value) -> Tuple[Optional[Node], object, bool]:
        if node is None:
            return None, _NOT_FOUND, False

        if node.value == value:
            if node.left is None or node.right is None:
                return _splice(node)

            # two children: keep this node in place, move its in-order
            # predecessor's value up and unlink the predecessor instead
            removed = node.value
            node.left, node.value, deficient = self._remove_largest(node.left)
            if deficient:
                node, deficient = self._remove_fixup(node, Direction.LEFT)
            return node, removed, deficient

        # mirror of the insertion rule: values not less than a node sit right
        direction = Direction.RIGHT if node.value < value else Direction.LEFT
        child, removed, deficient = self._remove(node.get_child(direction), value)
        node.set_child(direction, child)
        if deficient:
            node, deficient = self._remove_fixup(node, direction)
        return node, removed, deficient

    def _remove_largest(self, node: Node) -> Tuple[Optional[Node], object, bool]:
        if node.right is None:
            return _splice(node)

        node.right, removed, deficient = self._remove_largest(node.right)
        if deficient:
            node, deficient = self._remove_fixup(node, Direction.RIGHT)
        return node, removed, deficient

    def _remove_fixup(self, parent: Node, direction: Direction) -> Tuple[Node, bool]:
        """Repairs a subtree whose direction side is one black node short.

        Returns the new subtree root and whether the whole subtree is still
        short, in which case the caller repeats the repair one level up.
        """
        sibling = follow(parent, direction.opposite())
        if sibling.colour == Colour.BLACK:
            return self._fix_black_sibling(parent, direction)

        # a red sibling: rotate it above the parent so the deficient side
        # gets a black sibling. the parent is now red, which guarantees one
        # of the following cases absorbs the deficiency
        sibling.colour = Colour.BLACK
        parent.colour = Colour.RED
        new_root = rotate(parent, direction)
        fixed, _ = self._fix_black_sibling(parent, direction)
        new_root.set_child(direction, fixed)
        return new_root, False

    def _fix_black_sibling(self, parent: Node, direction: Direction) -> Tuple[Node, bool]:
        far_side = direction.opposite()
        sibling = follow(parent, far_side)
        near = sibling.get_child(direction)
        far = sibling.get_child(far_side)

        if is_black(near) and is_black(far):
            sibling.colour = Colour.RED
            if parent.colour == Colour.BLACK:
                # both sides are short now, hand the problem upwards
                return parent, True
            parent.colour = Colour.BLACK
            return parent, False

        if is_black(far):
            # near nephew is red: turn it into the sibling so the red
            # nephew ends up on the far side
            sibling.colour = Colour.RED
            near.colour = Colour.BLACK
            sibling = rotate(sibling, far_side)
            parent.set_child(far_side, sibling)
            far = follow(sibling, far_side)

        sibling.colour = parent.colour
        parent.colour = Colour.BLACK
        far.colour = Colour.BLACK
        return rotate(parent, direction), False

    def search(self, value):
        """Returns the stored value equal to value, or None"""
        node = self._find(value)
        return None if node is None else node.value

    def _find(self, value) -> Optional[Node]:
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.right if node.value < value else node.left
        return None

    def smallest(self):
        """Returns the leftmost value in the tree, or None if it is empty"""
        return self._extreme(Direction.LEFT)

    def largest(self):
        """Returns the rightmost value in the tree, or None if it is empty"""
        return self._extreme(Direction.RIGHT)

    def _extreme(self, direction: Direction):
        node = self.root
        if node is None:
            return None
        while node.get_child(direction) is not None:
            node = node.get_child(direction)
        return node.value

    def clear(self):
        logger.debug("clearing tree of %d values", self.count)
        self.root = None
        self.count = 0

    def height(self) -> int:
        """Edges on the longest root-to-leaf path, -1 for an empty tree"""
        return _height(self.root)


def _height(node: Optional[Node]) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))
