"""Locate the first structural difference between two trees."""

from __future__ import annotations

from rose_tree.tree.nodes import RoseTree

__all__ = ["first_difference"]


def first_difference(left: RoseTree, right: RoseTree) -> tuple[int, ...] | None:
    """Index path of the first node where ``left`` and ``right`` disagree.

    Nodes are visited in pre-order.  A node disagrees when its value differs
    or when the two sides have a different number of children.  Returns
    ``None`` for structurally equal trees; ``()`` means the roots differ.
    """
    stack: list[tuple[tuple[int, ...], RoseTree, RoseTree]] = [((), left, right)]
    while stack:
        path, a, b = stack.pop()
        if a.value != b.value or len(a.children) != len(b.children):
            return path
        for index in reversed(range(len(a.children))):
            stack.append(((*path, index), a.children[index], b.children[index]))
    return None
