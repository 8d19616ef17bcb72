"""Construction, positional and projection primitives over RoseTree values.

All functions are pure: they return new trees and never modify their inputs.
``pop_child_at`` and ``insert_child_at`` are deliberately total; the zipper
decides which out-of-range situations are failures.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from rose_tree.errors import ErrorKind
from rose_tree.result import Err, Ok, Result
from rose_tree.tree.nodes import RoseTree

__all__ = [
    "child_values",
    "elem_at",
    "insert_child_at",
    "new",
    "paths",
    "pop_child",
    "pop_child_at",
    "to_list",
    "update_children",
    "update_node",
]


def new(value: Any, children: Any = ()) -> Result[RoseTree]:
    """Build a tree, validating its children instead of raising.

    Args:
        value:    The root value.
        children: One of:
                  - a single ``RoseTree`` (becomes the only child),
                  - any other iterable of ``RoseTree`` (list, tuple, generator;
                    kept in order),
                  - a ``str``, ``bytes``, mapping or any non-iterable value,
                    wrapped as a single leaf child.

    Returns:
        ``Ok(tree)``, or ``Err(ErrorKind.BAD_CHILDREN)`` when an iterable
        of children contains something that is not a ``RoseTree``.
    """
    if isinstance(children, RoseTree):
        return Ok(RoseTree(value, (children,)))
    if isinstance(children, Iterable) and not isinstance(
        children, (str, bytes, Mapping)
    ):
        children = tuple(children)
        for index, child in enumerate(children):
            if not isinstance(child, RoseTree):
                return Err(
                    ErrorKind.BAD_CHILDREN,
                    f"child {index} is {type(child).__name__}, not RoseTree",
                )
        return Ok(RoseTree(value, children))
    return Ok(RoseTree(value, (RoseTree(children),)))


def child_values(tree: RoseTree) -> list[Any]:
    """Values of the direct children, in order."""
    return [child.value for child in tree.children]


def pop_child_at(tree: RoseTree, index: int) -> tuple[RoseTree | None, RoseTree]:
    """Remove the child at ``index``.

    Returns:
        ``(child, parent_without_child)``.  When ``index`` is negative or out of
        range the result is ``(None, tree)`` with ``tree`` returned unchanged.
    """
    children = tree.children
    if not 0 <= index < len(children):
        return None, tree
    remaining = children[:index] + children[index + 1 :]
    return children[index], tree.with_children(remaining)


def pop_child(tree: RoseTree) -> tuple[RoseTree | None, RoseTree]:
    return pop_child_at(tree, 0)


def insert_child_at(tree: RoseTree, index: int, child: RoseTree) -> RoseTree:
    """Insert ``child`` before position ``index``.

    Past-the-end indices append; negative indices are clamped to 0 and prepend.
    """
    index = max(index, 0)
    children = tree.children
    return tree.with_children(children[:index] + (child,) + children[index:])


def paths(tree: RoseTree) -> list[Any]:
    """Every root-to-leaf path, nested the same way the tree branches.

    A leaf yields ``[value]``.  An internal node yields one entry per child, each
    being the child's own ``paths`` with this node's value prepended::

        a(b, c(d, z))  ->  [["a", "b"], [["a", "c", "d"], ["a", "c", "z"]]]
    """
    return _paths(tree, [])


def _paths(tree: RoseTree, prefix: list[Any]) -> list[Any]:
    here = [*prefix, tree.value]
    if not tree.children:
        return here
    return [_paths(child, here) for child in tree.children]


def to_list(tree: RoseTree) -> list[Any]:
    """All node values in pre-order."""
    return list(tree)


def elem_at(tree: RoseTree, index_path: Sequence[int]) -> Result[Any]:
    """Value at the end of ``index_path``, each index selecting a child.

    An empty path selects the root.  Fails with ``ErrorKind.BAD_PATH`` as soon
    as an index is negative or out of range.
    """
    node = tree
    for depth, index in enumerate(index_path):
        if not 0 <= index < len(node.children):
            return Err(
                ErrorKind.BAD_PATH,
                f"index {index} at depth {depth} out of range "
                f"({len(node.children)} children)",
            )
        node = node.children[index]
    return Ok(node.value)


def update_node(tree: RoseTree, value: Any, new_value: Any) -> RoseTree:
    """Replace the value of every node equal to ``value``.

    A replaced node keeps its children as they are; nodes below it are not
    searched.
    """
    if tree.value == value:
        return tree.with_value(new_value)
    if not tree.children:
        return tree
    return tree.with_children(
        update_node(child, value, new_value) for child in tree.children
    )


def update_children(
    tree: RoseTree, value: Any, new_children: Sequence[RoseTree]
) -> RoseTree:
    """Replace the children of every internal node equal to ``value``.

    Leaves are returned unchanged even when their value matches: only a node
    that already has children gets them replaced.
    """
    if not tree.children:
        return tree
    if tree.value == value:
        return tree.with_children(new_children)
    return tree.with_children(
        update_children(child, value, new_children) for child in tree.children
    )
