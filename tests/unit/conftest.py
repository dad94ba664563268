import pytest

from treewright.core.page import Page
from treewright.tree.memory import MemoryDispatcher, MemoryElement
from treewright.utils.config import Settings


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(WAIT_TIMEOUT_MS=300, POLL_INTERVAL_MS=5)


@pytest.fixture
def app() -> MemoryElement:
    """App > Window > Sheet > [Button#confirm, TextField#name, Button#cancel (disabled)]."""
    return MemoryElement(
        role="AXApplication",
        title="Demo",
        children=[
            MemoryElement(
                role="AXWindow",
                title="Main",
                children=[
                    MemoryElement(
                        role="AXSheet",
                        children=[
                            MemoryElement(role="AXButton", identifier="confirm", title="Confirm"),
                            MemoryElement(role="AXTextField", identifier="name", label="Full name", string_value="Ada"),
                            MemoryElement(role="AXButton", identifier="cancel", title="Cancel", is_enabled=False),
                        ],
                    )
                ],
            )
        ],
    )


@pytest.fixture
def page(app: MemoryElement, fast_settings: Settings) -> Page:
    return Page(app, MemoryDispatcher(app), settings=fast_settings)


class UnreachableElement:
    """Element whose provider fails as soon as the tree below it is read."""

    role = "AXApplication"
    title = None
    label = None
    identifier = None
    string_value = None
    is_enabled = True
    is_focused = False

    @property
    def children(self):
        raise OSError("provider went away")


@pytest.fixture
def unreachable_page(fast_settings) -> Page:
    return Page(UnreachableElement(), MemoryDispatcher(MemoryElement()), settings=fast_settings)
