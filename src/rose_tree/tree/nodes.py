"""RoseTree frozen dataclass: a value plus an ordered tuple of child trees.

Trees are immutable values.  Every operation in ``rose_tree.tree`` and
``rose_tree.zipper`` returns a new tree and shares untouched subtrees with its
input, so holding on to an old tree is always safe.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RoseTree:
    """A node in a rose tree.

    Attributes:
        value:    The node's payload.  Any object supporting ``==``; it does not
                  need to be hashable.
        children: Child trees, in order.  Any iterable of ``RoseTree`` is
                  accepted and stored as a tuple.

    Raises:
        TypeError: If any element of ``children`` is not a ``RoseTree``.  Use
            ``rose_tree.tree.operations.new`` for a non-raising constructor.

    Example::

        tree = RoseTree("a", [RoseTree("b"), RoseTree("c", [RoseTree("d")])])
        list(tree)        # ["a", "b", "c", "d"]
        len(tree)         # 4
        "d" in tree       # True
    """

    value: Any
    children: tuple[RoseTree, ...] = field(default=())

    def __post_init__(self) -> None:
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, RoseTree):
                msg = f"children must be RoseTree instances, got {type(child)!r}"
                raise TypeError(msg)
        object.__setattr__(self, "children", children)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __iter__(self) -> Iterator[Any]:
        """Yield node values in pre-order (node first, then children left to right)."""
        stack: list[RoseTree] = [self]
        while stack:
            node = stack.pop()
            yield node.value
            stack.extend(reversed(node.children))

    def __len__(self) -> int:
        """Number of nodes in the tree, the root included."""
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return any(v == value for v in self)

    def __bool__(self) -> bool:
        # A tree always has a root; don't let __len__ decide truthiness.
        return True

    # ------------------------------------------------------------------
    # Equality, hashing, repr
    #
    # Iterative: trees may be deeper than the recursion limit.
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not RoseTree:
            return NotImplemented
        stack: list[tuple[RoseTree, RoseTree]] = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if len(a.children) != len(b.children) or a.value != b.value:
                return False
            stack.extend(zip(a.children, b.children))
        return True

    def __hash__(self) -> int:
        """Hash of the pre-order (value, child count) sequence.

        Raises TypeError when any value is unhashable.
        """
        shape: list[tuple[Any, int]] = []
        stack: list[RoseTree] = [self]
        while stack:
            node = stack.pop()
            shape.append((node.value, len(node.children)))
            stack.extend(reversed(node.children))
        return hash(tuple(shape))

    def __repr__(self) -> str:
        parts: list[str] = []
        stack: list[RoseTree | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            if not item.children:
                parts.append(f"RoseTree({item.value!r})")
                continue
            parts.append(f"RoseTree({item.value!r}, (")
            stack.append(",))" if len(item.children) == 1 else "))")
            for index in reversed(range(len(item.children))):
                stack.append(item.children[index])
                if index:
                    stack.append(", ")
        return "".join(parts)

    # ------------------------------------------------------------------
    # Copy helpers
    # ------------------------------------------------------------------

    def with_value(self, value: Any) -> RoseTree:
        return RoseTree(value, self.children)

    def with_children(self, children: Iterable[RoseTree]) -> RoseTree:
        return RoseTree(self.value, children)
