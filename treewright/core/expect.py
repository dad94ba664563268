# treewright/core/expect.py
from __future__ import annotations

"""Expectations
---------------
Declarative assertions that poll a locator until the condition holds.

    expect(page.locator("button#submit")).to_be_enabled()
    expect(page.locator("#status")).with_timeout(2000).to_have_text("Success")

Absence during polling is never an error by itself, and neither is a tree
provider failing to resolve the selector on some tick: both read as "no
element". Only running out of time is (WaitTimeout naming the selector and
the awaited condition).
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional

from treewright.core.locator import Locator
from treewright.core.waiter import wait_until
from treewright.selectors.parser import parse
from treewright.tree.element import Element, text_of
from treewright.utils.logger import get_logger

__all__ = ["Expectation", "expect"]

log = get_logger(__name__)


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.casefold() in haystack.casefold()


@dataclass(frozen=True)
class Expectation:
    locator: Locator
    timeout_ms: Optional[int] = None
    interval_ms: Optional[int] = None

    def __post_init__(self) -> None:
        if self.timeout_ms is None:
            object.__setattr__(self, "timeout_ms", self.locator.timeout_ms)
        if self.interval_ms is None:
            object.__setattr__(self, "interval_ms", self.locator.interval_ms)

    def with_timeout(self, timeout_ms: int) -> "Expectation":
        return replace(self, timeout_ms=timeout_ms)

    # ---------- Existence ----------

    def to_exist(self) -> None:
        self._poll("exists", lambda e: e is not None)

    def to_not_exist(self) -> None:
        self._poll("not exists", lambda e: e is None)

    # ---------- State ----------

    def to_be_enabled(self) -> None:
        self._poll("enabled", lambda e: e is not None and e.is_enabled)

    def to_be_disabled(self) -> None:
        self._poll("disabled", lambda e: e is not None and not e.is_enabled)

    def to_be_focused(self) -> None:
        self._poll("focused", lambda e: e is not None and e.is_focused)

    # ---------- Text / value ----------

    def to_have_text(self, text: str) -> None:
        """Title, label or value contains `text`, ignoring case."""
        self._poll(f"text contains {text!r}", lambda e: e is not None and _contains(text_of(e), text))

    def to_have_exact_text(self, text: str) -> None:
        self._poll(f"text equals {text!r}", lambda e: e is not None and text_of(e) == text)

    def to_have_value(self, value: str) -> None:
        self._poll(f"value equals {value!r}", lambda e: e is not None and e.string_value == value)

    def to_contain_value(self, value: str) -> None:
        self._poll(f"value contains {value!r}", lambda e: e is not None and _contains(e.string_value, value))

    # ---------- Polling ----------

    def _current(self) -> Optional[Element]:
        try:
            return self.locator.try_resolve()
        except Exception as exc:
            log.debug(f"Resolving {self.locator.selector!r} failed, treating as absent: {exc!r}")
            return None

    def _poll(self, description: str, condition: Callable[[Optional[Element]], bool]) -> None:
        # fail fast on malformed selectors instead of polling until the deadline
        parse(self.locator.selector)
        wait_until(
            lambda: condition(self._current()),
            timeout_ms=self.timeout_ms,
            interval_ms=self.interval_ms,
            label=self.locator.selector,
            condition=description,
        )


def expect(locator: Locator, timeout_ms: Optional[int] = None) -> Expectation:
    return Expectation(locator=locator, timeout_ms=timeout_ms)
