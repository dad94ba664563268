# treewright/selectors/matcher.py
"""Selector matcher
-------------------
Resolves a ``ParsedSelector`` against any tree exposing the ``Element``
capability. Pure function of its inputs; the tree is only read.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, TypeVar

from treewright.selectors.ast import AttrFilter, AttrOp, ParsedSelector, SelectorStep
from treewright.selectors.roles import resolve_role
from treewright.tree.element import Element, iter_descendants

__all__ = ["find", "find_first", "matches"]

E = TypeVar("E", bound=Element)

_ATTRIBUTE_READERS: Dict[str, Callable[[Element], Optional[str]]] = {
    "title": lambda e: e.title,
    "label": lambda e: e.label,
    "description": lambda e: e.label,
    "identifier": lambda e: e.identifier,
    "value": lambda e: e.string_value,
    "role": lambda e: e.role,
}


def _attribute_value(key: str, element: Element) -> Optional[str]:
    reader = _ATTRIBUTE_READERS.get(key.lower())
    # unknown keys read as absent
    return reader(element) if reader else None


def _filter_matches(flt: AttrFilter, element: Element) -> bool:
    actual = _attribute_value(flt.key, element)
    if actual is None:
        return False
    if flt.op is AttrOp.contains:
        return flt.value.casefold() in actual.casefold()
    return actual == flt.value


def matches(step: SelectorStep, element: Element) -> bool:
    """True if `element` satisfies every constraint of `step`."""
    if step.role is not None and (element.role or "").casefold() != resolve_role(step.role).casefold():
        return False
    if step.identifier is not None and element.identifier != step.identifier:
        return False
    return all(_filter_matches(flt, element) for flt in step.attributes)


def find(selector: ParsedSelector, root: E) -> List[E]:
    """
    All elements under `root` (never `root` itself) that satisfy `selector`.

    Each step searches the strict descendants of every element matched by the
    previous step, so chaining is transitive through any number of
    intermediate levels. Results keep depth-first discovery order.
    """
    generation: List[E] = [root]
    for step in selector.steps:
        generation = [
            candidate
            for parent in generation
            for candidate in iter_descendants(parent)
            if matches(step, candidate)
        ]
        if not generation:
            break
    return generation


def find_first(selector: ParsedSelector, root: E) -> Optional[E]:
    found = find(selector, root)
    return found[0] if found else None
