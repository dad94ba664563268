# treewright/selectors/ast.py
"""Selector AST
---------------
Immutable value types produced by the parser. Consecutive steps imply a
strict descendant relationship (any depth).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AttrOp(str, Enum):
    equals = "="
    contains = "~="


class AttrFilter(BaseModel):
    """`[key=value]` (exact) or `[key~=value]` (case-insensitive substring)."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str
    op: AttrOp = AttrOp.equals


class SelectorStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Optional[str] = Field(default=None, description="Lowercased role name or alias")
    identifier: Optional[str] = None
    attributes: Tuple[AttrFilter, ...] = ()

    @model_validator(mode="after")
    def _has_constraint(self) -> "SelectorStep":
        if self.role is None and self.identifier is None and not self.attributes:
            raise ValueError("a selector step needs a role, an identifier or an attribute filter")
        return self


class ParsedSelector(BaseModel):
    model_config = ConfigDict(frozen=True)

    steps: Tuple[SelectorStep, ...] = Field(..., min_length=1)
    raw: str = Field(..., description="Original input, kept for error messages")
