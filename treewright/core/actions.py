# treewright/core/actions.py
from __future__ import annotations

"""Action dispatch
------------------
The input backend is an external collaborator; the core only hands it an
element that has already been resolved and validated. Anything the backend
raises that is not already a WrightError is wrapped as ActionFailed.
"""

from typing import Any, Callable, Protocol, TypeVar

from treewright.errors import ActionFailed, WrightError
from treewright.tree.element import Element
from treewright.utils.timing import measure

__all__ = ["ActionDispatcher", "dispatch"]

T = TypeVar("T")


class ActionDispatcher(Protocol):
    def click(self, element: Element) -> Any: ...

    def double_click(self, element: Element) -> Any: ...

    def type(self, element: Element, text: str) -> Any: ...

    def clear(self, element: Element) -> Any: ...

    def focus(self, element: Element) -> Any: ...

    def press_key(self, element: Element, key: str) -> Any: ...


def dispatch(action: str, op: Callable[[], T]) -> T:
    """Run one dispatcher call, normalizing its failures."""

    @measure(action)
    def _run() -> T:
        return op()

    try:
        return _run()
    except WrightError:
        raise
    except Exception as exc:
        raise ActionFailed(action, str(exc) or type(exc).__name__) from exc
