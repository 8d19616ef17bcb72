"""Ok / Err result values and the ``lift`` combinator.

Every fallible operation in this package returns one of the two frozen
dataclasses below instead of raising.  Steps are chained with ``lift``, which
short-circuits on the first ``Err``::

    from rose_tree import RoseTree, Zipper, lift

    tree = RoseTree("a", [RoseTree("b"), RoseTree("c", [RoseTree("d")])])
    result = lift(Zipper.from_tree(tree).nth_child(1), Zipper.first_child)
    result.unwrap().value   # "d"

The same chain reads left-to-right with the method form::

    Zipper.from_tree(tree).nth_child(1).lift(Zipper.first_child)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from rose_tree.errors import ErrorKind, RoseTreeError

__all__ = ["Err", "Ok", "Result", "lift"]

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome wrapping ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def lift(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Apply a fallible step to the wrapped value."""
        return f(self.value)

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a total function to the wrapped value and re-wrap it."""
        return Ok(f(self.value))

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome.

    Attributes:
        kind:   Which structural failure occurred.
        detail: Human-readable context, e.g. the index that was out of range.
                Not part of the failure's identity for control flow; match on
                ``kind``.
    """

    kind: ErrorKind
    detail: str = ""

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def lift(self, f: Callable[[Any], Any]) -> Err:
        return self

    def map(self, f: Callable[[Any], Any]) -> Err:
        return self

    def unwrap(self) -> NoReturn:
        raise RoseTreeError(self.kind, self.detail)

    def unwrap_or(self, default: U) -> U:
        return default


Result = Ok[T] | Err


def lift(result: Result[T], f: Callable[[T], Result[U]]) -> Result[U]:
    """Thread a successful result into the next fallible step.

    Args:
        result: Outcome of the previous step.
        f:      Next step; receives the unwrapped value and returns a Result.

    Returns:
        ``result`` unchanged when it is an ``Err`` (``f`` is not called),
        otherwise whatever ``f`` returns.
    """
    if isinstance(result, Err):
        return result
    return f(result.value)
