"""Zipper subpackage: cursor navigation and editing over RoseTree values."""

from rose_tree.zipper.breadcrumb import Breadcrumb
from rose_tree.zipper.zipper import Zipper

__all__ = ["Breadcrumb", "Zipper"]
