# treewright/tree/element.py
"""Element capability
---------------------
The read-only surface the selector engine needs from a tree provider. Any
object with these attributes works; nothing is ever written through it.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Element(Protocol):
    @property
    def role(self) -> Optional[str]: ...

    @property
    def title(self) -> Optional[str]: ...

    @property
    def label(self) -> Optional[str]: ...

    @property
    def identifier(self) -> Optional[str]: ...

    @property
    def string_value(self) -> Optional[str]: ...

    @property
    def is_enabled(self) -> bool: ...

    @property
    def is_focused(self) -> bool: ...

    @property
    def children(self) -> Sequence["Element"]: ...


def iter_descendants(node: Element) -> Iterator[Element]:
    """Depth-first, parents before their descendants, siblings in order. Excludes `node`."""
    stack: List[Element] = list(reversed(node.children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def text_of(node: Element) -> str:
    """Title, else label, else value, else the empty string."""
    for candidate in (node.title, node.label, node.string_value):
        if candidate is not None:
            return candidate
    return ""


def describe(node: Element) -> str:
    parts = []
    if node.role is not None:
        parts.append(f"role={node.role}")
    if node.title is not None:
        parts.append(f"title={node.title}")
    if node.identifier is not None:
        parts.append(f"#{node.identifier}")
    if node.string_value is not None:
        parts.append(f"value={node.string_value}")
    return "[" + " ".join(parts) + "]"


def render_tree(node: Element, indent: int = 0) -> str:
    """Indented text dump of `node` and its subtree, one element per line."""
    lines = []
    for depth, current in _walk_with_depth(node, indent):
        lines.append("  " * depth + describe(current))
    return "\n".join(lines)


def _walk_with_depth(node: Element, depth: int) -> Iterator[tuple]:
    yield depth, node
    for child in node.children:
        yield from _walk_with_depth(child, depth + 1)
