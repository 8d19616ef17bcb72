"""Zipper: a cursor over a RoseTree that can rebuild the whole tree from any focus.

A zipper pairs the focused subtree with a stack of breadcrumbs, one per level
between the focus and the root.  Moving and editing never walks back down from
the root: each step only touches the focus and the innermost breadcrumb.

Every step that can fail returns ``Ok(zipper)`` or ``Err(kind)``; chain steps
with ``lift`` so the first failure short-circuits the rest::

    from rose_tree import RoseTree, Zipper, lift

    tree = RoseTree("a", [RoseTree("b"), RoseTree("c", [RoseTree("d"), RoseTree("z")])])
    z = Zipper.from_tree(tree)

    d = z.nth_child(1).lift(Zipper.first_child)
    d.unwrap().value                               # "d"
    d.map(Zipper.to_root).unwrap().to_tree() == tree  # True

Zippers are immutable.  Each operation returns a new zipper and leaves the
receiver valid, so earlier positions can be kept and revisited.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from rose_tree.errors import ErrorKind
from rose_tree.result import Err, Ok, Result, lift
from rose_tree.tree.nodes import RoseTree
from rose_tree.tree.operations import insert_child_at, pop_child_at
from rose_tree.zipper.breadcrumb import Breadcrumb

__all__ = ["Zipper"]


def _require_tree(tree: object) -> None:
    if not isinstance(tree, RoseTree):
        msg = f"can only insert RoseTree instances, got {type(tree)!r}"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class Zipper:
    """A focused subtree plus the breadcrumbs leading back to the root.

    Attributes:
        focus: The subtree under the cursor.
        crumb: Innermost breadcrumb, or None when ``focus`` is the root.
    """

    focus: RoseTree
    crumb: Breadcrumb | None = None

    @classmethod
    def from_tree(cls, tree: RoseTree) -> Zipper:
        """Zipper focused on the root of ``tree``."""
        return cls(tree)

    def to_tree(self) -> RoseTree:
        """The focused subtree.  Ancestors are discarded; use ``to_root`` first
        to get the whole tree back."""
        return self.focus

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self.focus.value

    @property
    def breadcrumbs(self) -> tuple[Breadcrumb, ...]:
        """Breadcrumb stack, innermost (nearest ancestor) first."""
        if self.crumb is None:
            return ()
        return tuple(self.crumb.iter_outward())

    @property
    def depth(self) -> int:
        """Distance from the root; 0 at the root."""
        return len(self.breadcrumbs)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_root(self) -> bool:
        return self.crumb is None

    def has_parent(self) -> bool:
        return not self.is_root()

    def is_leaf(self) -> bool:
        return not self.focus.children

    def has_children(self) -> bool:
        return not self.is_leaf()

    def is_first(self) -> bool:
        """True when nothing precedes the focus among its siblings.  The root
        has no siblings and is therefore first, last and an only child."""
        return self.crumb is None or not self.crumb.left

    def is_last(self) -> bool:
        return self.crumb is None or not self.crumb.right

    def is_only_child(self) -> bool:
        return self.is_first() and self.is_last()

    # ------------------------------------------------------------------
    # Downward navigation
    # ------------------------------------------------------------------

    def descend(self, index: int) -> Result[Zipper]:
        """Focus the child at ``index`` directly.

        Returns:
            ``Err(NO_CHILDREN)`` on a leaf, ``Err(BAD_PATH)`` when ``index`` is
            negative or out of range, otherwise the zipper focused on the child.
        """
        if not self.focus.children:
            return Err(ErrorKind.NO_CHILDREN, f"{self.focus.value!r} is a leaf")
        child, rest = pop_child_at(self.focus, index)
        if child is None:
            return Err(
                ErrorKind.BAD_PATH,
                f"no child {index} under {self.focus.value!r} "
                f"({len(self.focus.children)} children)",
            )
        crumb = Breadcrumb(
            parent_value=self.focus.value,
            left=tuple(reversed(rest.children[:index])),
            right=rest.children[index:],
            parent=self.crumb,
        )
        return Ok(Zipper(child, crumb))

    def nth_child(self, index: int) -> Result[Zipper]:
        """Focus the child at ``index`` by entering the first child and
        stepping right ``index`` times.

        Returns:
            - ``Err(NO_CHILDREN)`` when the focus is a leaf,
            - ``Err(BAD_PATH)`` when ``index`` is negative,
            - ``Err(NO_NEXT_SIBLING)`` when ``index`` is past the last child,
            - otherwise the zipper focused on that child.
        """
        if not self.focus.children:
            return Err(ErrorKind.NO_CHILDREN, f"{self.focus.value!r} is a leaf")
        if index < 0:
            return Err(ErrorKind.BAD_PATH, f"negative child index {index}")
        result = self.descend(0)
        for _ in range(index):
            result = lift(result, Zipper.next_sibling)
            if isinstance(result, Err):
                break
        return result

    def first_child(self) -> Result[Zipper]:
        if not self.focus.children:
            return Err(ErrorKind.BAD_PATH, f"{self.focus.value!r} has no first child")
        return self.nth_child(0)

    def last_child(self) -> Result[Zipper]:
        if not self.focus.children:
            return Err(ErrorKind.BAD_PATH, f"{self.focus.value!r} has no last child")
        return self.nth_child(len(self.focus.children) - 1)

    def find_child(self, predicate: Callable[[RoseTree], bool]) -> Result[Zipper]:
        """Focus the first direct child for which ``predicate(child)`` is true."""
        for index, child in enumerate(self.focus.children):
            if predicate(child):
                return self.nth_child(index)
        return Err(
            ErrorKind.NO_CHILD_MATCH, f"no child of {self.focus.value!r} matches"
        )

    def to_leaf(self) -> Zipper:
        """Follow first children down until the focus is a leaf."""
        zipper = self
        while zipper.focus.children:
            zipper = zipper.first_child().unwrap()
        return zipper

    # ------------------------------------------------------------------
    # Upward navigation
    # ------------------------------------------------------------------

    def ascend(self) -> Result[Zipper]:
        """Focus the parent, rebuilt with the current focus in place."""
        if self.crumb is None:
            return Err(ErrorKind.NO_PARENT, "already at the root")
        return Ok(Zipper(self.crumb.rebuild(self.focus), self.crumb.parent))

    def to_root(self) -> Zipper:
        """Ascend until the focus is the root.  A root zipper is returned as is."""
        zipper = self
        while zipper.crumb is not None:
            crumb = zipper.crumb
            zipper = Zipper(crumb.rebuild(zipper.focus), crumb.parent)
        return zipper

    # ------------------------------------------------------------------
    # Sideways navigation
    # ------------------------------------------------------------------

    def next_sibling(self) -> Result[Zipper]:
        crumb = self.crumb
        if crumb is None:
            return Err(ErrorKind.NO_SIBLINGS, "the root has no siblings")
        if not crumb.right:
            return Err(ErrorKind.NO_NEXT_SIBLING, f"{self.focus.value!r} is last")
        focus, *right = crumb.right
        return Ok(
            Zipper(
                focus,
                replace(crumb, left=(self.focus, *crumb.left), right=tuple(right)),
            )
        )

    def previous_sibling(self) -> Result[Zipper]:
        crumb = self.crumb
        if crumb is None:
            return Err(ErrorKind.NO_SIBLINGS, "the root has no siblings")
        if not crumb.left:
            return Err(ErrorKind.NO_PREVIOUS_SIBLING, f"{self.focus.value!r} is first")
        focus, *left = crumb.left
        return Ok(
            Zipper(
                focus,
                replace(crumb, left=tuple(left), right=(self.focus, *crumb.right)),
            )
        )

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def modify(self, f: Callable[[Any], Any]) -> Zipper:
        """Replace the focus's value with ``f(value)``; children are kept."""
        return Zipper(self.focus.with_value(f(self.focus.value)), self.crumb)

    def prune(self) -> Result[Zipper]:
        """Drop the focused subtree and focus its parent.

        Returns ``Err(NO_PARENT)`` at the root, which cannot be removed.
        """
        if self.crumb is None:
            return Err(ErrorKind.NO_PARENT, "cannot prune the root")
        return Ok(Zipper(self.crumb.rebuild_without_focus(), self.crumb.parent))

    def insert_left(self, tree: RoseTree) -> Result[Zipper]:
        """Insert ``tree`` just before the focus and move onto it."""
        _require_tree(tree)
        crumb = self.crumb
        if crumb is None:
            return Err(ErrorKind.ROOT_CANNOT_HAVE_SIBLINGS, "cannot insert beside the root")
        shifted = Zipper(self.focus, replace(crumb, left=(tree, *crumb.left)))
        return shifted.previous_sibling()

    def insert_right(self, tree: RoseTree) -> Result[Zipper]:
        """Insert ``tree`` just after the focus and move onto it."""
        _require_tree(tree)
        crumb = self.crumb
        if crumb is None:
            return Err(ErrorKind.ROOT_CANNOT_HAVE_SIBLINGS, "cannot insert beside the root")
        shifted = Zipper(self.focus, replace(crumb, right=(tree, *crumb.right)))
        return shifted.next_sibling()

    def insert_first_child(self, tree: RoseTree) -> Zipper:
        """Prepend ``tree`` to the focus's children and move onto it."""
        _require_tree(tree)
        parent = Zipper(insert_child_at(self.focus, 0, tree), self.crumb)
        return parent.first_child().unwrap()

    def insert_last_child(self, tree: RoseTree) -> Zipper:
        """Append ``tree`` to the focus's children and move onto it."""
        _require_tree(tree)
        children = self.focus.children
        parent = Zipper(insert_child_at(self.focus, len(children), tree), self.crumb)
        return parent.last_child().unwrap()

    def insert_nth_child(self, index: int, tree: RoseTree) -> Result[Zipper]:
        """Insert ``tree`` at position ``index`` among the children and move onto it.

        ``index`` may equal the current child count (append) but not exceed it.

        Raises:
            TypeError: If ``tree`` is not a ``RoseTree``.  The whole insert
                family raises this at the call, before touching the zipper.
        """
        _require_tree(tree)
        count = len(self.focus.children)
        if not 0 <= index <= count:
            return Err(
                ErrorKind.BAD_INSERTION_INDEX,
                f"index {index} outside 0..{count}",
            )
        parent = Zipper(insert_child_at(self.focus, index, tree), self.crumb)
        return parent.nth_child(index)
