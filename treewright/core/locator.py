# treewright/core/locator.py
from __future__ import annotations

"""Locator
----------
Immutable (selector, page, timeout) handle. Every resolution re-parses the
selector and re-runs the matcher on the current tree; nothing is cached
between polls.
"""

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable, List, Optional, TypeVar

from treewright.core.actions import dispatch
from treewright.core.waiter import DEFAULT_INTERVAL_MS, DEFAULT_TIMEOUT_MS, wait_for
from treewright.errors import ElementNotFound
from treewright.selectors.matcher import find, find_first
from treewright.selectors.parser import parse
from treewright.tree.element import Element, text_of
from treewright.utils.logger import get_logger, log_with_context

if TYPE_CHECKING:
    from treewright.core.page import Page

T = TypeVar("T")

log = get_logger(__name__)


def _is_enabled(element: Element) -> bool:
    return element.is_enabled


@dataclass(frozen=True)
class Locator:
    selector: str
    page: "Page" = field(repr=False)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    interval_ms: int = DEFAULT_INTERVAL_MS

    def with_timeout(self, timeout_ms: int) -> "Locator":
        return replace(self, timeout_ms=timeout_ms)

    # ---------- Resolution ----------

    def resolve(self) -> Element:
        """First match in the current tree. Raises ElementNotFound or InvalidSelector."""
        found = find_first(parse(self.selector), self.page.root)
        if found is None:
            raise ElementNotFound(self.selector)
        return found

    def try_resolve(self) -> Optional[Element]:
        """resolve(), with absence reported as None. Other errors propagate."""
        try:
            return self.resolve()
        except ElementNotFound:
            return None

    def wait_for_element(
        self,
        condition: Callable[[Element], bool] = lambda _: True,
        description: Optional[str] = None,
    ) -> Element:
        """Poll until the selector resolves to an element satisfying `condition`."""
        # malformed selectors never become valid by waiting
        parse(self.selector)

        def attempt() -> Optional[Element]:
            element = self.try_resolve()
            if element is not None and condition(element):
                return element
            return None

        return wait_for(
            attempt,
            timeout_ms=self.timeout_ms,
            interval_ms=self.interval_ms,
            label=self.selector,
            condition=description,
        )

    # ---------- Actions (auto-waiting) ----------

    def _act(self, action: str, op: Callable[[Element], object], require_enabled: bool = True) -> None:
        element = self.wait_for_element(
            _is_enabled if require_enabled else (lambda _: True),
            description="enabled" if require_enabled else "exists",
        )
        log_with_context(log, selector=self.selector, action=action).info(f"{action} -> {self.selector}")
        dispatch(action, lambda: op(element))

    def click(self) -> None:
        self._act("click", self.page.dispatcher.click)

    def double_click(self) -> None:
        self._act("double_click", self.page.dispatcher.double_click)

    def type(self, text: str) -> None:
        """Type `text` into the element. Existing content is not cleared first."""
        self._act("type", lambda e: self.page.dispatcher.type(e, text))

    def clear(self) -> None:
        self._act("clear", self.page.dispatcher.clear)

    def focus(self) -> None:
        self._act("focus", self.page.dispatcher.focus, require_enabled=False)

    def press_key(self, key: str) -> None:
        """Send a key chord such as "Return" or "Command+A" to the element."""
        self._act("press_key", lambda e: self.page.dispatcher.press_key(e, key))

    # ---------- Values (auto-waiting) ----------

    def text_content(self) -> str:
        return text_of(self.wait_for_element(description="exists"))

    def get_value(self) -> Optional[str]:
        return self.wait_for_element(description="exists").string_value

    # ---------- Queries (single attempt, never raise) ----------

    def _single_shot(self, query: Callable[[], T], fallback: T) -> T:
        try:
            return query()
        except Exception as exc:
            log.debug(f"{self.selector!r} query failed, treating as empty: {exc!r}")
            return fallback

    def is_visible(self) -> bool:
        return self._single_shot(lambda: self.try_resolve() is not None, False)

    def is_enabled(self) -> bool:
        def query() -> bool:
            element = self.try_resolve()
            return element is not None and element.is_enabled

        return self._single_shot(query, False)

    def all(self) -> List[Element]:
        return self._single_shot(lambda: find(parse(self.selector), self.page.root), [])

    def count(self) -> int:
        return len(self.all())
