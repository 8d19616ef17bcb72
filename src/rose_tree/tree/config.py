"""MergeStrategy for add_child.

Two ways of merging a new child into an existing child with the same value:

- FOLD:  Each grandchild of the new child is added to the existing child
         with ``add_child`` itself, one at a time.  New grandchildren end up
         in front, exactly as if they had been added individually.
- UNION: The existing child is replaced by ``merge_nodes(existing, new)``:
         existing grandchildren keep their place, same-valued ones are merged
         recursively and unseen ones are appended.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["MergeStrategy"]


class MergeStrategy(StrEnum):
    """How ``add_child`` merges a child whose value is already present."""

    FOLD = auto()
    UNION = auto()
