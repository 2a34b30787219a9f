# tests/conftest.py

from typing import Any, Dict
import pytest

from focusnav.constants.key_codes import KeyCodes


def select() -> None:
    """Stand-in selectAction; only its presence matters."""
    return None


# ==============================================================================
# 1. Tree Fixtures
# ==============================================================================

@pytest.fixture
def select_action():
    return select


@pytest.fixture
def menu_tree() -> Dict[str, Any]:
    """
    A vertical menu with a horizontal sub-list:

        root
        ├── header (not focusable)
        ├── menu (vertical)
        │   ├── item-1 (index 0)
        │   ├── item-2 (index 1)
        │   └── item-3 (index 2)
        └── rail (horizontal, explicit parent on one card)
            ├── card-a (index 0)
            └── card-b (index 1, parent "menu")
    """
    return {
        "root": {
            "orientation": "vertical",
            "children": {
                "header": {"index": 0},
                "menu": {
                    "index": 1,
                    "orientation": "vertical",
                    "activeChild": "item-2",
                    "children": {
                        "item-1": {"index": 0, "selectAction": select},
                        "item-2": {"index": 1, "selectAction": select},
                        "item-3": {"index": 2, "selectAction": select},
                    },
                },
                "rail": {
                    "index": 2,
                    "orientation": "horizontal",
                    "children": {
                        "card-a": {"index": 0, "selectAction": select},
                        "card-b": {"index": 1, "selectAction": select, "parent": "menu"},
                    },
                },
            },
        }
    }


@pytest.fixture
def grid_node() -> Dict[str, Any]:
    """
    A two-row grid. Each row is index-aligned and its cells share the
    column index space 0..3.
    """
    return {
        "orientation": "vertical",
        "isIndexAlign": True,
        "activeChild": "row-1",
        "children": {
            "row-1": {
                "index": 0,
                "orientation": "horizontal",
                "activeChild": "r1-c2",
                "children": {
                    "r1-c0": {"index": 0, "selectAction": select},
                    "r1-c1": {"index": 1, "selectAction": select},
                    "r1-c2": {"index": 2, "selectAction": select},
                    "r1-c3": {"index": 3, "selectAction": select},
                },
            },
            "row-2": {
                "index": 1,
                "orientation": "horizontal",
                "children": {
                    "r2-wide": {"index": 0, "indexRange": [0, 1], "selectAction": select},
                    "r2-c2": {"index": 2, "indexRange": [2, 2], "selectAction": select},
                    "r2-c3": {"index": 3, "indexRange": [3, 3], "selectAction": select},
                },
            },
        },
    }


# ==============================================================================
# 2. Global State Fixtures
# ==============================================================================

@pytest.fixture(autouse=True)
def reset_key_codes():
    """Every test starts from the configured key-code table."""
    KeyCodes.reset()
    yield
    KeyCodes.reset()
