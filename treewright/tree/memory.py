# treewright/tree/memory.py
from __future__ import annotations

"""In-memory element tree
-------------------------
A plain data tree satisfying the Element capability, plus a dispatcher that
applies actions to it. Used by tests, by snapshot files, and as a dry-run
backend for the CLI.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from treewright.core.keys import KeyChord, parse_key
from treewright.errors import ActionFailed
from treewright.tree.element import iter_descendants


class MemoryElement(BaseModel):
    """
    One node. Snapshot files may use the short keys `value`, `enabled` and
    `focused`; Python code may use either spelling.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    role: Optional[str] = None
    title: Optional[str] = None
    label: Optional[str] = Field(default=None, alias="description")
    identifier: Optional[str] = Field(default=None, alias="id")
    string_value: Optional[str] = Field(default=None, alias="value")
    is_enabled: bool = Field(default=True, alias="enabled")
    is_focused: bool = Field(default=False, alias="focused")
    children: List["MemoryElement"] = Field(default_factory=list)


MemoryElement.model_rebuild()


@dataclass(frozen=True)
class DispatchedAction:
    action: str
    target: MemoryElement
    argument: Any = None


class MemoryDispatcher:
    """Applies actions to a MemoryElement tree and keeps a history of them."""

    def __init__(self, root: MemoryElement) -> None:
        self.root = root
        self.history: List[DispatchedAction] = []

    def _record(self, action: str, target: MemoryElement, argument: Any = None) -> None:
        self.history.append(DispatchedAction(action, target, argument))

    @staticmethod
    def _require_enabled(action: str, element: MemoryElement) -> None:
        if not element.is_enabled:
            raise ActionFailed(action, "element is disabled")

    def click(self, element: MemoryElement) -> None:
        self._require_enabled("click", element)
        self._record("click", element)

    def double_click(self, element: MemoryElement) -> None:
        self._require_enabled("double_click", element)
        self._record("double_click", element)

    def type(self, element: MemoryElement, text: str) -> None:
        self._require_enabled("type", element)
        element.string_value = (element.string_value or "") + text
        self._record("type", element, text)

    def clear(self, element: MemoryElement) -> None:
        self._require_enabled("clear", element)
        element.string_value = ""
        self._record("clear", element)

    def focus(self, element: MemoryElement) -> None:
        self.root.is_focused = self.root is element
        for node in iter_descendants(self.root):
            node.is_focused = node is element
        self._record("focus", element)

    def press_key(self, element: MemoryElement, key: str) -> KeyChord:
        chord = parse_key(key)
        self.focus(element)
        self._record("press_key", element, chord)
        return chord

    def actions(self, name: Optional[str] = None) -> List[DispatchedAction]:
        return [a for a in self.history if name is None or a.action == name]
