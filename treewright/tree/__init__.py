# treewright/tree/__init__.py
"""
Tree package
------------
The element capability consumed by the matcher, an in-memory implementation
of it, and snapshot file loading.
"""

from .element import Element, iter_descendants, render_tree
from .memory import MemoryDispatcher, MemoryElement
from .snapshot import SnapshotError, load_tree, parse_tree

__all__ = [
    "Element",
    "iter_descendants",
    "render_tree",
    "MemoryDispatcher",
    "MemoryElement",
    "SnapshotError",
    "load_tree",
    "parse_tree",
]
