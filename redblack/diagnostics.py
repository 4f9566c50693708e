"""
Inspection helpers for red-black trees.

None of this is needed to use the tree. ``validate`` is what the test-suite
leans on after every mutation; ``pprint`` and ``to_graph`` are for looking
at a tree's shape while debugging.
"""
import itertools
from typing import Optional

import networkx as nx

from .exceptions import InvariantError
from .node import Colour, Node, is_red
from .rbtree import RedBlackTree


def black_height(node: Optional[Node]) -> int:
    """Black nodes on every path from node down to an absent child.

    The starting node is not counted. Raises InvariantError if the paths
    disagree.
    """
    if node is None:
        return 0
    left = _blacks_through(node.left)
    right = _blacks_through(node.right)
    if left != right:
        raise InvariantError(
            f"black-height differs under {node.value!r}: left {left}, right {right}"
        )
    return left


def _blacks_through(child: Optional[Node]) -> int:
    if child is None:
        return 0
    return black_height(child) + (child.colour == Colour.BLACK)


def validate(tree: RedBlackTree) -> int:
    """Checks every red-black rule on tree and returns its black-height.

    Args:
        tree: the tree to check.

    Returns:
        int: black nodes on any root-to-leaf path, counting the root.

    Raises:
        InvariantError: naming the first broken rule found.
    """
    if tree.root is None:
        if tree.count != 0:
            raise InvariantError(f"empty tree reports count {tree.count}")
        return 0

    if tree.root.colour != Colour.BLACK:
        raise InvariantError(f"root {tree.root.value!r} is red")

    size = 0
    stack = [tree.root]
    while stack:
        node = stack.pop()
        size += 1
        for child in (node.left, node.right):
            if child is None:
                continue
            if is_red(node) and is_red(child):
                raise InvariantError(f"red node {node.value!r} has red child {child.value!r}")
            stack.append(child)

    if size != tree.count:
        raise InvariantError(f"tree holds {size} nodes but reports count {tree.count}")

    for prev, value in _pairwise(tree):
        if value < prev:
            raise InvariantError(f"{value!r} follows {prev!r} in traversal")

    return black_height(tree.root) + 1


def _pairwise(values):
    a, b = itertools.tee(values)
    next(b, None)
    return zip(a, b)


def pprint(tree: RedBlackTree) -> str:
    """Draws the tree as indented text, one node per line"""
    return _pprint(tree.root, "ROOT", 0)


def _pprint(node: Optional[Node], label: str, depth: int) -> str:
    if node is None:
        return "\t" * depth + "|_ null\n"
    # recursively draw a tree
    return ("\t" * depth + f"|_ {label} | {node.value}: {node.colour.name}\n"
            + _pprint(node.left, "LEFT", depth + 1)
            + _pprint(node.right, "RIGHT", depth + 1))


def to_graph(tree: RedBlackTree) -> nx.DiGraph:
    """Exports the shape of tree as a directed graph.

    Nodes are numbered in pre-order from 0 and carry ``value`` and
    ``colour`` attributes; edges point from parent to child and carry a
    ``direction`` attribute. Absent children are not represented.
    """
    graph = nx.DiGraph()
    if tree.root is None:
        return graph

    counter = itertools.count()
    stack = [(tree.root, None, None)]
    while stack:
        node, parent_id, direction = stack.pop()
        node_id = next(counter)
        graph.add_node(node_id, value=node.value, colour=node.colour.name)
        if parent_id is not None:
            graph.add_edge(parent_id, node_id, direction=direction)
        # push right first so the left subtree is numbered first
        if node.right is not None:
            stack.append((node.right, node_id, "RIGHT"))
        if node.left is not None:
            stack.append((node.left, node_id, "LEFT"))
    return graph
