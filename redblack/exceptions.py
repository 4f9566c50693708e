"""
Exceptions raised by the red-black tree.

A missing value is never an error: ``remove`` and ``search`` return ``None``.
The classes here report broken structure, which means a bug in the tree code
or in code that edited nodes by hand.
"""


class RedBlackTreeError(Exception):
    """Base class for tree errors."""


class LinkError(RedBlackTreeError, AssertionError):
    """
    Raised when an absent child link is dereferenced.

    The balancing code only follows links it knows exist, so this always
    indicates a fixup bug.
    """

    def __init__(self, value, direction):
        """
        Initialize link error.

        Args:
            value: Value held by the node whose child was missing.
            direction: Side of the missing child.
        """
        self.value = value
        self.direction = direction
        super().__init__(f"node {value!r} has no {direction.name.lower()} child")


class InvariantError(RedBlackTreeError, AssertionError):
    """Raised by ``diagnostics.validate`` when a red-black rule is broken."""
