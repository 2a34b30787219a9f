# src/focusnav/schemas/node.py

from __future__ import annotations
import logging
from pydantic import BaseModel, Field, ConfigDict, RootModel, ValidationError, field_validator, model_validator
from typing import Any, Callable, Dict, List, Mapping, Optional, Set
from focusnav.core.exceptions import InvalidTreeError, DuplicateNodeIdError

logger = logging.getLogger(__name__)

ORIENTATIONS = {"vertical", "horizontal"}

class FocusNode(BaseModel):
    """
    A focusable UI region.

    Field names follow the camelCase node shape the navigation engine and
    tree authors exchange, so a validated node dumps back to the same dict.
    """
    id: Optional[str] = None
    parent: Optional[str] = None

    # Position among siblings
    index: Optional[int] = None
    indexRange: Optional[List[int]] = Field(None, description="Inclusive [low, high] span of sibling indices")

    # Capabilities
    selectAction: Optional[Any] = None
    isFocusable: Optional[bool] = None

    # Container behaviour
    isWrapping: Optional[bool] = None
    orientation: Optional[str] = None
    isIndexAlign: Optional[bool] = None

    # Lifecycle hooks, invoked by the navigation engine only
    onLeave: Optional[Callable[..., Any]] = None
    onEnter: Optional[Callable[..., Any]] = None

    activeChild: Optional[str] = None
    children: Optional[Dict[str, FocusNode]] = None

    # Engines attach their own bookkeeping fields; keep them on round trip
    model_config = ConfigDict(extra='allow', arbitrary_types_allowed=True)

    @field_validator("indexRange")
    @classmethod
    def _check_index_range(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        if value is None:
            return value
        if len(value) != 2:
            raise ValueError(f"indexRange must have exactly two bounds, got {len(value)}")
        if value[0] > value[1]:
            raise ValueError(f"indexRange low bound {value[0]} is greater than high bound {value[1]}")
        return value

    @field_validator("orientation")
    @classmethod
    def _check_orientation(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value.lower() not in ORIENTATIONS:
            raise ValueError(f"orientation must be one of {sorted(ORIENTATIONS)}, got '{value}'")
        return value

    @model_validator(mode="after")
    def _check_active_child(self) -> FocusNode:
        if self.activeChild is not None and self.activeChild not in (self.children or {}):
            raise ValueError(f"activeChild '{self.activeChild}' is not one of the node's children")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Dump back to the canonical dict shape, leaving out unset fields."""
        return self.model_dump(exclude_none=True)

FocusNode.model_rebuild()

class FocusTree(RootModel[Dict[str, FocusNode]]):
    """The root mapping of node id to node, recursively nested through children."""

    @model_validator(mode="after")
    def _check_unique_ids(self) -> FocusTree:
        seen: Set[str] = set()

        def _walk(level: Dict[str, FocusNode]) -> None:
            for node_id, node in level.items():
                if node_id in seen:
                    raise ValueError(f"Duplicate node id '{node_id}' in focus tree")
                seen.add(node_id)
                if node.children:
                    _walk(node.children)

        _walk(self.root)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

class Override(BaseModel):
    """Redirects focus leaving node `id` in `direction` to node `target`."""
    id: str
    direction: str
    target: str

class KeyEvent(BaseModel):
    keyCode: int
    direction: str

def _find_duplicate_id(tree: Mapping[str, Any]) -> Optional[str]:
    seen: Set[str] = set()
    pending = [tree]
    while pending:
        level = pending.pop()
        for node_id, node in level.items():
            if node_id in seen:
                return node_id
            seen.add(node_id)
            children = node.get("children") if isinstance(node, Mapping) else None
            if isinstance(children, Mapping):
                pending.append(children)
    return None

def validate_tree(tree: Mapping[str, Any]) -> FocusTree:
    """
    Validate a nested focus tree against the node invariants.

    This is the construction-time gate for trees handed to the navigation
    engine: unique ids, activeChild pointing at a real child, well-formed
    indexRange and a recognised orientation. The query functions in
    focusnav.engine.navigation never call it themselves.
    """
    duplicate = _find_duplicate_id(tree)
    if duplicate is not None:
        logger.warning(f"Focus tree rejected: duplicate node id '{duplicate}'")
        raise DuplicateNodeIdError(duplicate)

    try:
        return FocusTree.model_validate(dict(tree))
    except ValidationError as e:
        logger.warning(f"Focus tree rejected: {e.error_count()} error(s)")
        raise InvalidTreeError(f"Invalid focus tree: {e}") from e
