# src/focusnav/engine/navigation/overrides.py

from typing import Any, Iterable, Mapping, Optional, Union
from focusnav.schemas.node import Override

OverrideLike = Union[Override, Mapping[str, Any]]

def _as_override(item: OverrideLike) -> Override:
    return item if isinstance(item, Override) else Override.model_validate(item)

def find_override(overrides: Iterable[OverrideLike], node_id: str, direction: str) -> Optional[Override]:
    """
    Return the first override registered for leaving `node_id` in
    `direction`. Directions compare case-insensitively.
    """
    if not node_id or not direction:
        return None

    wanted = direction.upper()
    for item in overrides:
        override = _as_override(item)
        if override.id == node_id and override.direction.upper() == wanted:
            return override
    return None

def get_override_target(overrides: Iterable[OverrideLike], node_id: str, direction: str) -> Optional[str]:
    override = find_override(overrides, node_id, direction)
    return override.target if override else None
