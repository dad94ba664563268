# treewright/core/page.py
from __future__ import annotations

"""Page
-------
Entry point binding a tree source and an action dispatcher. Locators created
here are lazy: no tree access happens until an action or assertion runs.
"""

from typing import Callable, Optional, Union

from treewright.core.actions import ActionDispatcher
from treewright.core.locator import Locator
from treewright.tree.element import Element, render_tree
from treewright.utils.config import Settings, get_settings

TreeSource = Union[Element, Callable[[], Element]]


class Page:
    """
    Wraps a tree root. `source` is either an element whose accessors read the
    live tree, or a zero-argument callable returning the current root (e.g. a
    provider that takes a fresh snapshot on every call).
    """

    def __init__(
        self,
        source: TreeSource,
        dispatcher: ActionDispatcher,
        settings: Optional[Settings] = None,
    ) -> None:
        self._source = source
        self.dispatcher = dispatcher
        self.settings = settings or get_settings()

    @property
    def root(self) -> Element:
        if callable(self._source):
            return self._source()
        return self._source

    def locator(self, selector: str, timeout_ms: Optional[int] = None) -> Locator:
        return Locator(
            selector=selector,
            page=self,
            timeout_ms=self.settings.WAIT_TIMEOUT_MS if timeout_ms is None else timeout_ms,
            interval_ms=self.settings.POLL_INTERVAL_MS,
        )

    def tree_snapshot(self) -> str:
        """Indented text dump of the current tree, handy when writing selectors."""
        return render_tree(self.root)
