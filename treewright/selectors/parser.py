# treewright/selectors/parser.py
from __future__ import annotations

"""Selector parser
------------------
Turns selector text into a ``ParsedSelector``.

Grammar::

    selector      = step (WS+ step)*
    step          = role? ('#' identifier)? attr_filter*
    role          = LETTER (LETTER | DIGIT | '-' | '_')*
    identifier    = (LETTER|DIGIT|'_') (LETTER|DIGIT|'-'|'_')*
    attr_filter   = '[' key ('~=' | '=') value ']'
    key           = LETTER (LETTER|DIGIT|'-'|'_')*
    value         = '"' [^"]* '"' | [^\\]]+

Examples:
    button                          any button
    button#login                    button with identifier "login"
    textfield[title=Username]       text field titled exactly "Username"
    window dialog button#confirm    confirm button somewhere under a dialog
    button[title~=save]             button whose title contains "save" (any case)
"""

from typing import List, Optional

from treewright.errors import InvalidSelector
from treewright.selectors.ast import AttrFilter, AttrOp, ParsedSelector, SelectorStep

__all__ = ["parse"]

_CONTEXT_CHARS = 10


def _is_word_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdigit() or ch in "-_"


class _Scanner:
    """Forward-only cursor over the selector text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        return None if self.at_end else self.text[self.pos]

    def advance(self) -> None:
        self.pos += 1

    def skip_whitespace(self) -> int:
        start = self.pos
        while not self.at_end and self.text[self.pos].isspace():
            self.pos += 1
        return self.pos - start

    def scan(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def scan_word(self, first_ok) -> Optional[str]:
        ch = self.peek()
        if ch is None or not first_ok(ch):
            return None
        start = self.pos
        self.advance()
        while not self.at_end and _is_word_char(self.text[self.pos]):
            self.advance()
        return self.text[start:self.pos]

    def context(self) -> str:
        """A few characters around the cursor, for error messages."""
        lo = max(0, self.pos - _CONTEXT_CHARS)
        hi = min(len(self.text), self.pos + _CONTEXT_CHARS)
        return self.text[lo:hi]

    def error(self, message: str) -> InvalidSelector:
        return InvalidSelector(f"{message} at position {self.pos} near {self.context()!r}")


def _parse_value(sc: _Scanner, key: str) -> str:
    if sc.peek() == '"':
        sc.advance()
        end = sc.text.find('"', sc.pos)
        if end < 0:
            raise sc.error(f"Unterminated quoted value for attribute '{key}'")
        value = sc.text[sc.pos:end]
        sc.pos = end + 1
        return value

    start = sc.pos
    while not sc.at_end and sc.peek() != "]":
        sc.advance()
    if sc.pos == start:
        raise sc.error(f"Empty value for attribute '{key}'")
    return sc.text[start:sc.pos]


def _parse_attr_filter(sc: _Scanner) -> AttrFilter:
    open_pos = sc.pos
    sc.advance()  # '['

    key = sc.scan_word(str.isalpha)
    if key is None:
        raise sc.error("Expected attribute key after '['")

    # two-character operator first
    if sc.scan("~="):
        op = AttrOp.contains
    elif sc.scan("="):
        op = AttrOp.equals
    else:
        raise sc.error(f"Expected '=' or '~=' after attribute key '{key}'")

    value = _parse_value(sc, key)

    if sc.peek() != "]":
        if sc.at_end:
            raise InvalidSelector(
                f"Unterminated '[' opened at position {open_pos} near {sc.text[open_pos:open_pos + 2 * _CONTEXT_CHARS]!r}"
            )
        raise sc.error(f"Expected ']' to close attribute filter '{key}'")
    sc.advance()
    return AttrFilter(key=key, value=value, op=op)


def _parse_step(sc: _Scanner) -> SelectorStep:
    start = sc.pos
    role = sc.scan_word(str.isalpha)

    identifier = None
    if sc.peek() == "#":
        sc.advance()
        identifier = sc.scan_word(lambda ch: ch.isalpha() or ch.isdigit() or ch == "_")
        if identifier is None:
            raise sc.error("Expected identifier after '#'")

    attributes: List[AttrFilter] = []
    while sc.peek() == "[":
        attributes.append(_parse_attr_filter(sc))

    if role is None and identifier is None and not attributes:
        sc.pos = start
        raise sc.error("Empty selector step")

    return SelectorStep(
        role=role.lower() if role is not None else None,
        identifier=identifier,
        attributes=tuple(attributes),
    )


def parse(raw: str) -> ParsedSelector:
    """
    Parse `raw` into a ParsedSelector.

    Raises:
        InvalidSelector on any grammar violation; the message carries the
        position and the surrounding characters.
    """
    text = raw.strip()
    if not text:
        raise InvalidSelector("Selector must not be empty")

    sc = _Scanner(text)
    steps: List[SelectorStep] = []
    while not sc.at_end:
        steps.append(_parse_step(sc))
        if sc.at_end:
            break
        if sc.skip_whitespace() == 0:
            raise sc.error("Expected whitespace between selector steps")

    return ParsedSelector(steps=tuple(steps), raw=raw)
