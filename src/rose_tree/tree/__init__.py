"""Tree subpackage: the immutable RoseTree value and its primitives.

Re-exports the public API for the tree module:
- RoseTree: frozen dataclass holding a value and a tuple of child trees
- MergeStrategy: StrEnum selecting how add_child merges same-valued children
- TreeBuilder / from_map: build a tree from a single-key nested mapping
- add_child, is_child, merge_nodes: value-based child matching and merging
- new, child_values, pop_child(_at), insert_child_at, paths, to_list, elem_at,
  update_node, update_children: construction, positional and projection helpers
- first_difference: index path of the first structural mismatch
"""

from rose_tree.tree.builder import TreeBuilder, from_map
from rose_tree.tree.compare import first_difference
from rose_tree.tree.config import MergeStrategy
from rose_tree.tree.merge import add_child, is_child, merge_nodes
from rose_tree.tree.nodes import RoseTree
from rose_tree.tree.operations import (
    child_values,
    elem_at,
    insert_child_at,
    new,
    paths,
    pop_child,
    pop_child_at,
    to_list,
    update_children,
    update_node,
)

__all__ = [
    "MergeStrategy",
    "RoseTree",
    "TreeBuilder",
    "add_child",
    "child_values",
    "elem_at",
    "first_difference",
    "from_map",
    "insert_child_at",
    "is_child",
    "merge_nodes",
    "new",
    "paths",
    "pop_child",
    "pop_child_at",
    "to_list",
    "update_children",
    "update_node",
]
