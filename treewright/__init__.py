# treewright/__init__.py
"""
treewright
----------
Selector-driven, auto-waiting automation over UI element trees.

    page = Page(root, dispatcher)
    page.locator("window dialog button#confirm").click()
    expect(page.locator("#status")).to_have_text("Saved")
"""

from treewright.core.expect import Expectation, expect
from treewright.core.keys import KeyChord, parse_key
from treewright.core.locator import Locator
from treewright.core.page import Page
from treewright.errors import (
    ActionFailed,
    ElementNotFound,
    InvalidKey,
    InvalidSelector,
    PermissionDenied,
    WaitTimeout,
    WrightError,
)
from treewright.selectors import ParsedSelector, find, find_first, parse, resolve_role
from treewright.tree.element import Element
from treewright.tree.memory import MemoryDispatcher, MemoryElement

__version__ = "0.1.0"

__all__ = [
    "ActionFailed",
    "Element",
    "ElementNotFound",
    "Expectation",
    "InvalidKey",
    "InvalidSelector",
    "KeyChord",
    "Locator",
    "MemoryDispatcher",
    "MemoryElement",
    "Page",
    "ParsedSelector",
    "PermissionDenied",
    "WaitTimeout",
    "WrightError",
    "expect",
    "find",
    "find_first",
    "parse",
    "parse_key",
    "resolve_role",
]
