# treewright/tree/snapshot.py
from __future__ import annotations

"""Snapshot files
-----------------
Loads a recorded element tree from YAML (JSON works too, being a YAML
subset). The top-level mapping is the root element:

    role: AXApplication
    title: TextEdit
    children:
      - role: AXWindow
        children:
          - {role: AXButton, id: save, title: Save, enabled: false}
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from treewright.tree.memory import MemoryElement

__all__ = ["SnapshotError", "load_tree", "parse_tree"]


class SnapshotError(ValueError):
    pass


def parse_tree(text: str, source: str = "<string>") -> MemoryElement:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as ye:
        raise SnapshotError(f"YAML parse error in {source}: {ye}") from ye

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot {source} must define a mapping/object at the top level.")

    try:
        return MemoryElement.model_validate(data)
    except ValidationError as ve:
        lines = [f"Invalid snapshot '{source}':"]
        for e in ve.errors():
            loc = ".".join(str(p) for p in e.get("loc", []))
            lines.append(f"  - {loc}: {e.get('msg', 'invalid value')}")
        raise SnapshotError("\n".join(lines)) from ve


def load_tree(path: Path | str) -> MemoryElement:
    snap_path = Path(path)
    if not snap_path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {snap_path}")
    return parse_tree(snap_path.read_text(encoding="utf-8"), source=str(snap_path))
