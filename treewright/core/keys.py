# treewright/core/keys.py
"""Key chord parsing
--------------------
``parse_key("Command+Shift+Z")`` -> ``KeyChord(key="z", modifiers={command, shift})``.
Dispatchers use this to validate the key string handed to ``press_key``.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict

from treewright.errors import InvalidKey


class Modifier(str, Enum):
    command = "command"
    shift = "shift"
    option = "option"
    control = "control"


MODIFIER_ALIASES = {
    "command": Modifier.command,
    "cmd": Modifier.command,
    "shift": Modifier.shift,
    "option": Modifier.option,
    "alt": Modifier.option,
    "control": Modifier.control,
    "ctrl": Modifier.control,
}

NAMED_KEYS = frozenset(
    {
        "return", "enter", "tab", "space", "delete", "backspace", "escape",
        "arrowleft", "arrowright", "arrowdown", "arrowup",
        "home", "end", "pageup", "pagedown",
    }
    | {f"f{n}" for n in range(1, 13)}
)


class KeyChord(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    modifiers: FrozenSet[Modifier] = frozenset()


def parse_key(raw: str) -> KeyChord:
    """
    Parse a `+`-separated key string, modifiers first or anywhere.

    Accepts named keys (Return, Tab, ArrowUp, F5, ...) and any single
    printable character; names are case-insensitive.
    """
    parts = [p.strip().lower() for p in raw.split("+") if p.strip()]
    # "Command++" means the plus key itself
    if raw.rstrip().endswith("++"):
        parts.append("+")
    if not parts:
        raise InvalidKey(raw, "Empty key string")

    modifiers = set()
    key: Optional[str] = None
    for part in parts:
        mod = MODIFIER_ALIASES.get(part)
        if mod is not None:
            modifiers.add(mod)
            continue
        if key is not None:
            raise InvalidKey(raw, f"Multiple key parts in '{raw}'")
        key = part

    if key is None:
        raise InvalidKey(raw, f"No key found in '{raw}'")
    if key not in NAMED_KEYS and not (len(key) == 1 and key.isprintable()):
        raise InvalidKey(raw, f"Unknown key '{key}'. Supported: {', '.join(sorted(NAMED_KEYS))} or a single character")

    return KeyChord(key=key, modifiers=frozenset(modifiers))
