"""Shared fixtures: the reference tree and a seeded random-tree factory.

The reference tree used throughout is::

    a
    ├── b
    └── c
        ├── d
        └── z
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from rose_tree import RoseTree

NODE_VALUES = ["a", "b", "c", 0, 1, 2, 3, "hello", "world"]


@pytest.fixture
def sample_tree() -> RoseTree:
    """a(b, c(d, z))"""
    return RoseTree(
        "a",
        [RoseTree("b"), RoseTree("c", [RoseTree("d"), RoseTree("z")])],
    )


@pytest.fixture
def numeric_tree() -> RoseTree:
    """0(1, 10(11, 12))"""
    return RoseTree(0, [RoseTree(1), RoseTree(10, [RoseTree(11), RoseTree(12)])])


def _random_tree(rng: random.Random, max_depth: int) -> RoseTree:
    value = rng.choice(NODE_VALUES)
    if max_depth == 0:
        return RoseTree(value)
    child_count = rng.choice([0, 1, 2])
    return RoseTree(value, [_random_tree(rng, max_depth - 1) for _ in range(child_count)])


@pytest.fixture
def random_tree() -> Callable[[int, int], RoseTree]:
    """Factory ``random_tree(seed, max_depth=4)`` returning a reproducible tree."""

    def _make(seed: int, max_depth: int = 4) -> RoseTree:
        return _random_tree(random.Random(seed), max_depth)

    return _make
