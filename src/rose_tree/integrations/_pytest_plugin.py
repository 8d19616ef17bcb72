"""pytest plugin for rose-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from rose_tree import RoseTree, Zipper, first_difference


def _as_tree(obj: Any) -> RoseTree:
    if isinstance(obj, Zipper):
        return obj.to_tree()
    if isinstance(obj, RoseTree):
        return obj
    raise TypeError(f"expected RoseTree or Zipper, got {type(obj)!r}")


def _node_at(tree: RoseTree, path: tuple[int, ...]) -> RoseTree:
    for index in path:
        tree = tree.children[index]
    return tree


@pytest.fixture(scope="session")
def assert_tree_equal() -> Any:
    """Fixture that returns a callable structural tree asserter.

    Usage in tests::

        def test_round_trip(assert_tree_equal):
            z = Zipper.from_tree(tree)
            assert_tree_equal(z.nth_child(0).lift(Zipper.ascend).unwrap(), tree)

    Returns:
        A callable ``_assert(actual, expected) -> None``.  Both arguments may be
        a ``RoseTree`` or a ``Zipper`` (its focus is compared).  On mismatch it
        raises ``AssertionError`` naming the index path of the first diverging
        node and the two nodes found there.
    """

    def _assert(actual: Any, expected: Any) -> None:
        left = _as_tree(actual)
        right = _as_tree(expected)
        path = first_difference(left, right)
        if path is None:
            return
        a = _node_at(left, path)
        b = _node_at(right, path)
        raise AssertionError(
            f"trees differ at path={list(path)}\n"
            f"  actual:   value={a.value!r} children={len(a.children)}\n"
            f"  expected: value={b.value!r} children={len(b.children)}"
        )

    return _assert
