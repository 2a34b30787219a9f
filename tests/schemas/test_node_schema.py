# tests/schemas/test_node_schema.py

import pytest

from focusnav.core.exceptions import DuplicateNodeIdError, InvalidTreeError
from focusnav.schemas.node import FocusNode, FocusTree, validate_tree

# ==============================================================================
# 1. Valid Trees
# ==============================================================================

def test_validate_tree_accepts_well_formed_tree(menu_tree, grid_node):
    tree = validate_tree(menu_tree)
    assert isinstance(tree, FocusTree)
    menu = tree.root["root"].children["menu"]
    assert isinstance(menu, FocusNode)
    assert menu.activeChild == "item-2"
    assert menu.children["item-1"].index == 0

    grid = validate_tree({"grid": grid_node})
    assert grid.root["grid"].children["row-2"].children["r2-wide"].indexRange == [0, 1]


def test_round_trip_keeps_shape(menu_tree, select_action):
    dumped = validate_tree(menu_tree).to_dict()
    rail = dumped["root"]["children"]["rail"]
    assert rail == {
        "index": 2,
        "orientation": "horizontal",
        "children": {
            "card-a": {"index": 0, "selectAction": select_action},
            "card-b": {"index": 1, "selectAction": select_action, "parent": "menu"},
        },
    }


def test_lifecycle_callbacks_and_extra_fields():
    def on_enter():
        return "entered"

    node = FocusNode.model_validate({"onEnter": on_enter, "focusedAt": 1234})
    assert node.onEnter() == "entered"
    assert node.onLeave is None
    # Unknown engine bookkeeping survives
    assert node.to_dict()["focusedAt"] == 1234


def test_orientation_is_case_insensitive():
    assert FocusNode(orientation="Vertical").orientation == "Vertical"
    assert FocusNode(orientation="HORIZONTAL").orientation == "HORIZONTAL"

# ==============================================================================
# 2. Invariant Violations
# ==============================================================================

def test_duplicate_ids_rejected():
    tree = {"a": {"children": {"shared": {}}}, "b": {"children": {"shared": {}}}}
    with pytest.raises(DuplicateNodeIdError) as exc_info:
        validate_tree(tree)
    assert exc_info.value.node_id == "shared"


def test_duplicate_id_with_quote_reported_whole():
    tree = {"a": {"children": {"it's": {}}}, "it's": {}}
    with pytest.raises(DuplicateNodeIdError) as exc_info:
        validate_tree(tree)
    assert exc_info.value.node_id == "it's"


def test_dangling_active_child_rejected():
    with pytest.raises(InvalidTreeError, match="activeChild"):
        validate_tree({"a": {"activeChild": "ghost", "children": {"b": {}}}})

    with pytest.raises(InvalidTreeError):
        validate_tree({"a": {"activeChild": "ghost"}})


@pytest.mark.parametrize("index_range", [[3, 1], [1], [0, 1, 2]])
def test_malformed_index_range_rejected(index_range):
    with pytest.raises(InvalidTreeError, match="indexRange"):
        validate_tree({"a": {"indexRange": index_range}})


def test_single_point_index_range_allowed():
    tree = validate_tree({"a": {"indexRange": [2, 2]}})
    assert tree.root["a"].indexRange == [2, 2]


def test_unknown_orientation_rejected():
    with pytest.raises(InvalidTreeError, match="orientation"):
        validate_tree({"a": {"orientation": "diagonal"}})


def test_validation_failure_is_logged(caplog):
    with pytest.raises(InvalidTreeError):
        validate_tree({"a": {"orientation": "diagonal"}})
    assert "Focus tree rejected" in caplog.text
