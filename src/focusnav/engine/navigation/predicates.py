# src/focusnav/engine/navigation/predicates.py

from typing import Any, Mapping, Optional
from focusnav.constants.key_codes import KeyCodes, Direction
from focusnav.schemas.node import KeyEvent

def is_node_focusable(node: Mapping[str, Any]) -> bool:
    """
    An explicit isFocusable always wins; otherwise a node is focusable when
    it carries a selectAction.
    """
    if node.get("isFocusable") is not None:
        return bool(node["isFocusable"])
    return bool(node.get("selectAction"))

def get_direction_for_key_code(key_code: int, key_codes: Optional[Mapping[int, str]] = None) -> Optional[str]:
    """
    Look the key code up in the key-code table and return its direction
    upper-cased, or None when the code is not mapped.

    :param key_code: raw key code from the input event
    :param key_codes: table to consult instead of the configured KeyCodes.codes
    """
    table = KeyCodes.codes if key_codes is None else key_codes
    direction = table.get(key_code)
    if direction:
        return direction.upper()
    return None

def resolve_key_event(key_code: int, key_codes: Optional[Mapping[int, str]] = None) -> Optional[KeyEvent]:
    direction = get_direction_for_key_code(key_code, key_codes)
    if direction is None:
        return None
    return KeyEvent(keyCode=key_code, direction=direction)

def is_direction_and_orientation_matching(orientation: Optional[str], direction: Optional[str]) -> bool:
    """
    Does the direction move along the given orientation? `horizontal`
    matches `left`/`right`, `vertical` matches `up`/`down`, and the `*`
    wildcard matches any orientation. Case-insensitive.
    """
    if not orientation or not direction:
        return False

    orientation = orientation.upper()
    direction = direction.upper()

    return (
        direction == Direction.ANY.value
        or (orientation == "VERTICAL" and direction in (Direction.UP.value, Direction.DOWN.value))
        or (orientation == "HORIZONTAL" and direction in (Direction.LEFT.value, Direction.RIGHT.value))
    )
