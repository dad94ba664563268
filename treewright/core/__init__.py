# treewright/core/__init__.py
"""
Core package: auto-waiter, locators, expectations and action dispatch.
Lightweight package init to avoid import cycles.

Consumers should import submodules directly, e.g.:
  from treewright.core.locator import Locator
  from treewright.core.waiter import wait_for
"""

__all__: list[str] = []
