"""Breadcrumb: one frame of zipper context.

A breadcrumb records what was left behind when the zipper stepped from a
parent into one of its children: the parent's value and the siblings on
either side of the focused child.  Frames link outward through ``parent``,
forming a persistent stack that successive zippers share.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from rose_tree.tree.nodes import RoseTree


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Breadcrumb:
    """Context needed to put a focused child back into its parent.

    Attributes:
        parent_value: Value of the parent node.
        left:         Siblings before the focus, nearest first (reversed).
        right:        Siblings after the focus, in original order.
        parent:       The next breadcrumb outward, or None when the parent is
                      the root.
    """

    parent_value: Any
    left: tuple[RoseTree, ...] = ()
    right: tuple[RoseTree, ...] = ()
    parent: Breadcrumb | None = None

    def rebuild(self, focus: RoseTree) -> RoseTree:
        """Parent tree with ``focus`` back in its original position."""
        return RoseTree(self.parent_value, (*reversed(self.left), focus, *self.right))

    def rebuild_without_focus(self) -> RoseTree:
        """Parent tree with the focused child dropped."""
        return RoseTree(self.parent_value, (*reversed(self.left), *self.right))

    def iter_outward(self) -> Iterator[Breadcrumb]:
        crumb: Breadcrumb | None = self
        while crumb is not None:
            yield crumb
            crumb = crumb.parent

    # Iterative over the parent chain: zippers may sit deeper than the
    # recursion limit.

    def _frame(self) -> tuple[Any, tuple[RoseTree, ...], tuple[RoseTree, ...]]:
        return self.parent_value, self.left, self.right

    def __eq__(self, other: object) -> bool:
        if type(other) is not Breadcrumb:
            return NotImplemented
        a: Breadcrumb | None = self
        b: Breadcrumb | None = other
        while a is not None and b is not None:
            if a is b:
                return True
            if a._frame() != b._frame():
                return False
            a, b = a.parent, b.parent
        return a is None and b is None

    def __hash__(self) -> int:
        return hash(tuple(crumb._frame() for crumb in self.iter_outward()))

    def __repr__(self) -> str:
        outer = sum(1 for _ in self.iter_outward()) - 1
        return (
            f"Breadcrumb(parent_value={self.parent_value!r}, left={self.left!r}, "
            f"right={self.right!r}, outer_frames={outer})"
        )
