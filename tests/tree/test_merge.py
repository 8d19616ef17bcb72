"""Tests for value-based child matching and merging.

Children match on value alone, so two structurally different subtrees whose
roots hold equal values are merged rather than kept side by side.
"""

from __future__ import annotations

import pytest

from rose_tree import MergeStrategy, RoseTree, add_child, child_values, is_child, merge_nodes


class TestIsChild:
    def test_direct_child(self, sample_tree: RoseTree) -> None:
        assert is_child(sample_tree, RoseTree("b"))

    def test_not_a_child(self, sample_tree: RoseTree) -> None:
        assert not is_child(sample_tree, RoseTree("x"))

    def test_grandchild_is_not_a_direct_child(self, sample_tree: RoseTree) -> None:
        assert not is_child(sample_tree, RoseTree("d"))

    def test_match_is_by_value_not_structure(self, sample_tree: RoseTree) -> None:
        assert is_child(sample_tree, RoseTree("c", [RoseTree("other")]))


class TestAddChild:
    def test_add_to_leaf(self) -> None:
        assert add_child(RoseTree("hello"), RoseTree("world")) == RoseTree(
            "hello", [RoseTree("world")]
        )

    def test_new_child_is_prepended(self) -> None:
        tree = add_child(RoseTree("p", [RoseTree(1)]), RoseTree(2))
        assert child_values(tree) == [2, 1]

    def test_same_value_merges_instead_of_duplicating(self) -> None:
        tree = add_child(RoseTree("hello"), RoseTree("world"))
        tree = add_child(tree, RoseTree("world"))
        assert tree == RoseTree("hello", [RoseTree("world")])

    def test_fold_merge_unions_grandchildren(self) -> None:
        tree = add_child(RoseTree("hello"), RoseTree("world", [RoseTree("wide")]))
        tree = add_child(tree, RoseTree("world", [RoseTree("champ")]))
        tree = add_child(tree, RoseTree("dave"))
        assert tree == RoseTree(
            "hello",
            [
                RoseTree("dave"),
                RoseTree("world", [RoseTree("champ"), RoseTree("wide")]),
            ],
        )

    def test_merged_child_keeps_its_position(self) -> None:
        tree = RoseTree("p", [RoseTree("x"), RoseTree("y"), RoseTree("z")])
        merged = add_child(tree, RoseTree("y", [RoseTree("q")]))
        assert child_values(merged) == ["x", "y", "z"]
        assert merged.children[1] == RoseTree("y", [RoseTree("q")])

    def test_fold_merge_is_recursive(self) -> None:
        tree = RoseTree("r", [RoseTree("a", [RoseTree("b", [RoseTree(1)])])])
        added = RoseTree("a", [RoseTree("b", [RoseTree(2)])])
        assert add_child(tree, added) == RoseTree(
            "r", [RoseTree("a", [RoseTree("b", [RoseTree(2), RoseTree(1)])])]
        )

    def test_union_strategy_appends_new_grandchildren(self) -> None:
        tree = add_child(RoseTree("hello"), RoseTree("world", [RoseTree("wide")]))
        tree = add_child(
            tree, RoseTree("world", [RoseTree("champ")]), strategy=MergeStrategy.UNION
        )
        assert tree == RoseTree(
            "hello", [RoseTree("world", [RoseTree("wide"), RoseTree("champ")])]
        )

    def test_input_trees_are_not_modified(self) -> None:
        parent = RoseTree("p", [RoseTree("x")])
        child = RoseTree("x", [RoseTree("y")])
        add_child(parent, child)
        assert parent == RoseTree("p", [RoseTree("x")])
        assert child == RoseTree("x", [RoseTree("y")])


class TestMergeNodes:
    def test_disjoint_children_concatenate(self) -> None:
        champ = RoseTree("world", [RoseTree("champ")])
        wide = RoseTree("world", [RoseTree("wide")])
        assert merge_nodes(champ, wide) == RoseTree(
            "world", [RoseTree("champ"), RoseTree("wide")]
        )

    def test_shared_children_are_merged_recursively(self) -> None:
        a = RoseTree("r", [RoseTree("x", [RoseTree(1)]), RoseTree("y")])
        b = RoseTree("r", [RoseTree("z"), RoseTree("x", [RoseTree(2)])])
        assert merge_nodes(a, b) == RoseTree(
            "r",
            [
                RoseTree("x", [RoseTree(1), RoseTree(2)]),
                RoseTree("y"),
                RoseTree("z"),
            ],
        )

    def test_unique_b_children_keep_their_subtrees(self) -> None:
        a = RoseTree("r", [RoseTree("x")])
        b = RoseTree("r", [RoseTree("x"), RoseTree("n", [RoseTree("deep")])])
        assert merge_nodes(a, b).children[1] == RoseTree("n", [RoseTree("deep")])

    def test_merge_with_leaf(self) -> None:
        a = RoseTree("r", [RoseTree("x")])
        assert merge_nodes(a, RoseTree("r")) == a
        assert merge_nodes(RoseTree("r"), a) == a

    def test_different_roots_raise(self) -> None:
        with pytest.raises(ValueError, match="different values"):
            merge_nodes(RoseTree("a"), RoseTree("b"))
