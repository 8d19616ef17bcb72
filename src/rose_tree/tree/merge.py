"""Value-based child matching and merging.

Children are matched by value alone: two subtrees whose roots hold equal
values are "the same child" no matter how their descendants differ, and
adding one next to the other merges them instead of producing a duplicate.
"""

from __future__ import annotations

import logging
from typing import Any

from rose_tree.tree.config import MergeStrategy
from rose_tree.tree.nodes import RoseTree

__all__ = ["add_child", "is_child", "merge_nodes"]

_LOG = logging.getLogger(__name__)


def is_child(tree: RoseTree, candidate: RoseTree) -> bool:
    """True if some direct child of ``tree`` has ``candidate``'s value."""
    return any(child.value == candidate.value for child in tree.children)


def _find_child(tree: RoseTree, value: Any) -> int | None:
    for index, child in enumerate(tree.children):
        if child.value == value:
            return index
    return None


def add_child(
    tree: RoseTree,
    child: RoseTree,
    strategy: MergeStrategy = MergeStrategy.FOLD,
) -> RoseTree:
    """Add ``child`` to ``tree``, merging with a same-valued child if there is one.

    Without a match, ``child`` is placed in front of the existing children so
    the most recently added child sits at index 0.  With a match, the existing
    child is merged in place (its position does not change); see
    ``MergeStrategy`` for the two merge rules.

    Example::

        hello = RoseTree("hello")
        tree = add_child(hello, RoseTree("world", [RoseTree("wide")]))
        tree = add_child(tree, RoseTree("world", [RoseTree("champ")]))
        # hello(world(champ, wide))
    """
    index = _find_child(tree, child.value)
    if index is None:
        return tree.with_children((child, *tree.children))

    existing = tree.children[index]
    _LOG.debug("merging child %r into %r (%s)", child.value, tree.value, strategy)
    if strategy is MergeStrategy.UNION:
        merged = merge_nodes(existing, child)
    else:
        merged = existing
        for grandchild in child.children:
            merged = add_child(merged, grandchild, strategy)

    children = tree.children
    return tree.with_children(children[:index] + (merged,) + children[index + 1 :])


def merge_nodes(tree_a: RoseTree, tree_b: RoseTree) -> RoseTree:
    """Merge two trees rooted at the same value.

    - Disjoint child values: ``tree_a``'s children followed by ``tree_b``'s.
    - Overlapping child values: every child of ``tree_a`` that also appears in
      ``tree_b`` is replaced by the recursive merge of the pair; children of
      ``tree_b`` with no counterpart in ``tree_a`` are appended unchanged.

    Raises:
        ValueError: If the two roots hold different values.
    """
    if tree_a.value != tree_b.value:
        msg = f"cannot merge nodes with different values: {tree_a.value!r} != {tree_b.value!r}"
        raise ValueError(msg)

    a_values = [child.value for child in tree_a.children]
    merged: list[RoseTree] = []
    for child in tree_a.children:
        match = _find_child(tree_b, child.value)
        if match is None:
            merged.append(child)
        else:
            merged.append(merge_nodes(child, tree_b.children[match]))
    merged.extend(child for child in tree_b.children if child.value not in a_values)
    return tree_a.with_children(merged)
