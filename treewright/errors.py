# treewright/errors.py
"""Error taxonomy
-----------------
Every failure surfaced to callers derives from ``WrightError``. Parse errors
are terminal and never retried; ``ElementNotFound`` is absorbed by the
auto-waiter until the deadline passes.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "WrightError",
    "InvalidSelector",
    "ElementNotFound",
    "WaitTimeout",
    "ActionFailed",
    "InvalidKey",
    "PermissionDenied",
]


class WrightError(RuntimeError):
    pass


class InvalidSelector(WrightError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid selector: {message}")


class ElementNotFound(WrightError):
    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Element not found: {selector}")


class WaitTimeout(WrightError, TimeoutError):
    """The deadline passed without success and no richer error was recorded."""

    def __init__(self, selector: str, timeout_ms: int, condition: Optional[str] = None) -> None:
        self.selector = selector
        self.timeout_ms = timeout_ms
        self.condition = condition
        what = f"{selector} ({condition})" if condition else selector
        super().__init__(f"Timeout after {timeout_ms} ms waiting for: {what}")


class ActionFailed(WrightError):
    def __init__(self, action: str, reason: str) -> None:
        self.action = action
        self.reason = reason
        super().__init__(f"Action '{action}' failed: {reason}")


class InvalidKey(ActionFailed):
    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__("press_key", reason)


class PermissionDenied(WrightError):
    def __init__(self, message: str = "Accessibility permission denied") -> None:
        super().__init__(message)
