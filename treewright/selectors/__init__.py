# treewright/selectors/__init__.py
"""
Selectors package
-----------------
Selector grammar, its AST, role aliases and the tree matcher.
"""

from .ast import AttrFilter, AttrOp, ParsedSelector, SelectorStep
from .matcher import find, find_first, matches
from .parser import parse
from .roles import ROLE_ALIASES, resolve_role

__all__ = [
    "AttrFilter",
    "AttrOp",
    "ParsedSelector",
    "SelectorStep",
    "ROLE_ALIASES",
    "find",
    "find_first",
    "matches",
    "parse",
    "resolve_role",
]
