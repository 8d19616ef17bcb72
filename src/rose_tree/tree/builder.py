"""TreeBuilder: converts a single-key nested mapping into a RoseTree.

The top-level mapping must have exactly one key, which becomes the root
value.  Below the root, each value is dispatched on its type:

- mapping:        one child per key, built recursively
- list / tuple:   one child per item; mapping items contribute one child per key,
                  every other item becomes a leaf
- None:           no children
- anything else:  a single leaf child holding that value

Example::

    from_map({"a": {"b": ["c"]}}).unwrap()
    # RoseTree("a", [RoseTree("b", [RoseTree("c")])])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rose_tree.errors import ErrorKind
from rose_tree.result import Err, Ok, Result
from rose_tree.tree.nodes import RoseTree

__all__ = ["TreeBuilder", "from_map"]

_LOG = logging.getLogger(__name__)


@dataclass
class TreeBuilder:
    """Builds RoseTree values from nested Python containers.

    Stateless; one instance can be reused for any number of inputs.
    """

    def build(self, mapping: Mapping[Any, Any]) -> Result[RoseTree]:
        """Convert a single-key mapping into a tree.

        Args:
            mapping: ``{root_value: children_spec}``.

        Returns:
            ``Ok(tree)``, or ``Err(ErrorKind.ONE_NODE_ROOT)`` if ``mapping``
            does not have exactly one key.

        Raises:
            TypeError: If ``mapping`` is not a Mapping.
        """
        if not isinstance(mapping, Mapping):
            raise TypeError(f"from_map expects a mapping, got {type(mapping)!r}")
        if len(mapping) != 1:
            _LOG.debug("rejecting map with %d top-level keys", len(mapping))
            return Err(
                ErrorKind.ONE_NODE_ROOT,
                f"a tree has exactly one root, got {len(mapping)} top-level keys",
            )
        ((value, spec),) = mapping.items()
        return Ok(RoseTree(value, self._build_children(spec)))

    def _build_children(self, spec: Any) -> list[RoseTree]:
        if spec is None:
            return []
        if isinstance(spec, Mapping):
            return self._build_mapping(spec)
        if isinstance(spec, (list, tuple)):
            children: list[RoseTree] = []
            for item in spec:
                if isinstance(item, Mapping):
                    children.extend(self._build_mapping(item))
                else:
                    children.append(RoseTree(item))
            return children
        return [RoseTree(spec)]

    def _build_mapping(self, spec: Mapping[Any, Any]) -> list[RoseTree]:
        return [RoseTree(key, self._build_children(val)) for key, val in spec.items()]


_builder = TreeBuilder()


def from_map(mapping: Mapping[Any, Any]) -> Result[RoseTree]:
    """Module-level shortcut for ``TreeBuilder().build(mapping)``."""
    return _builder.build(mapping)
