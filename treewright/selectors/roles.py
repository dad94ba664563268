# treewright/selectors/roles.py
"""Role alias table
-------------------
Human-friendly role names mapped to canonical accessibility role tags.
Built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

ROLE_ALIASES: Mapping[str, str] = MappingProxyType({
    "application": "AXApplication",
    "button": "AXButton",
    "cell": "AXCell",
    "checkbox": "AXCheckBox",
    "colorwell": "AXColorWell",
    "combobox": "AXComboBox",
    "dialog": "AXSheet",
    "disclosure": "AXDisclosureTriangle",
    "drawer": "AXDrawer",
    "group": "AXGroup",
    "growarea": "AXGrowArea",
    "handle": "AXHandle",
    "image": "AXImage",
    "incrementor": "AXIncrementor",
    "input": "AXTextField",
    "layoutarea": "AXLayoutArea",
    "layoutitem": "AXLayoutItem",
    "levelindicator": "AXLevelIndicator",
    "link": "AXLink",
    "list": "AXList",
    "menu": "AXMenu",
    "menubar": "AXMenuBar",
    "menubaritem": "AXMenuBarItem",
    "menuitem": "AXMenuItem",
    "outline": "AXOutline",
    "popupbutton": "AXPopUpButton",
    "progressindicator": "AXProgressIndicator",
    "radiobutton": "AXRadioButton",
    "radiogroup": "AXRadioGroup",
    "relevanceindicator": "AXRelevanceIndicator",
    "row": "AXRow",
    "ruler": "AXRuler",
    "rulermarker": "AXRulerMarker",
    "scrollarea": "AXScrollArea",
    "scrollbar": "AXScrollBar",
    "sheet": "AXSheet",
    "slider": "AXSlider",
    "splitgroup": "AXSplitGroup",
    "splitter": "AXSplitter",
    "statictext": "AXStaticText",
    "systemwide": "AXSystemWide",
    "tabgroup": "AXTabGroup",
    "table": "AXTable",
    "text": "AXStaticText",
    "textarea": "AXTextArea",
    "textfield": "AXTextField",
    "toolbar": "AXToolbar",
    "unknown": "AXUnknown",
    "valueindicator": "AXValueIndicator",
    "window": "AXWindow",
})


def resolve_role(name: str) -> str:
    """Return the canonical tag for `name`, or `name` unchanged if it is not an alias."""
    return ROLE_ALIASES.get(name.lower(), name)
