"""rose-tree - immutable n-ary trees with a zipper for navigation and editing."""

from __future__ import annotations

import logging

from rose_tree.errors import ErrorKind, RoseTreeError
from rose_tree.result import Err, Ok, Result, lift
from rose_tree.tree import (
    MergeStrategy,
    RoseTree,
    TreeBuilder,
    add_child,
    child_values,
    elem_at,
    first_difference,
    from_map,
    insert_child_at,
    is_child,
    merge_nodes,
    new,
    paths,
    pop_child,
    pop_child_at,
    to_list,
    update_children,
    update_node,
)
from rose_tree.zipper import Breadcrumb, Zipper

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.3.0"
__all__: list[str] = [
    "Breadcrumb",
    "Err",
    "ErrorKind",
    "MergeStrategy",
    "Ok",
    "Result",
    "RoseTree",
    "RoseTreeError",
    "TreeBuilder",
    "Zipper",
    "add_child",
    "child_values",
    "elem_at",
    "first_difference",
    "from_map",
    "insert_child_at",
    "is_child",
    "lift",
    "merge_nodes",
    "new",
    "paths",
    "pop_child",
    "pop_child_at",
    "to_list",
    "update_children",
    "update_node",
]
