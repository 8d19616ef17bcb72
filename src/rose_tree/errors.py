"""Error kinds reported by fallible tree and zipper operations.

Ordinary misuse (descending into a leaf, ascending past the root, stepping
beyond the last sibling) is never raised: it comes back as an ``Err`` carrying
one of the ``ErrorKind`` members below.  ``RoseTreeError`` only surfaces when a
caller explicitly unwraps a failed result.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["ErrorKind", "RoseTreeError"]


class ErrorKind(StrEnum):
    """Structural failures a navigation or construction step can report.

    Values are the lowercased member names, e.g. ``ErrorKind.NO_PARENT == "no_parent"``.
    """

    NO_CHILDREN = auto()
    NO_PARENT = auto()
    BAD_PATH = auto()
    NO_SIBLINGS = auto()
    NO_NEXT_SIBLING = auto()
    NO_PREVIOUS_SIBLING = auto()
    NO_CHILD_MATCH = auto()
    ROOT_CANNOT_HAVE_SIBLINGS = auto()
    BAD_INSERTION_INDEX = auto()
    BAD_CHILDREN = auto()
    ONE_NODE_ROOT = auto()


class RoseTreeError(Exception):
    """Raised by ``Err.unwrap()``.

    Attributes:
        kind:   The ``ErrorKind`` of the failed result.
        detail: Free-form description supplied by the failing operation.
    """

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        message = f"{kind}: {detail}" if detail else str(kind)
        super().__init__(message)
