# src/focusnav/engine/navigation/index_resolver.py

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence
from .closest import closest
from .predicates import is_node_focusable

logger = logging.getLogger(__name__)

Node = Mapping[str, Any]

def find_child_with_index(node: Node, index: Optional[int]) -> Optional[Node]:
    """
    Return the first child of `node` whose index equals `index`.

    :param node: container node
    :param index: exact sibling index to look for
    """
    children = node.get("children")
    if not children:
        return None

    for child in children.values():
        if child.get("index") == index:
            return child
    return None

def find_child_with_matching_index_range(node: Node, index: int) -> Optional[Node]:
    """
    Return the first child of `node` whose indexRange encompasses `index`
    (both bounds inclusive).
    """
    children = node.get("children")
    if not children:
        return None

    for child in children.values():
        index_range = child.get("indexRange")
        if index_range and index_range[0] <= index <= index_range[1]:
            return child
    return None

def _is_in_range(index: Optional[int], index_range: Sequence[int]) -> bool:
    return index is not None and index_range[0] <= index <= index_range[1]

def find_child_with_closest_index(node: Node, index: int, index_range: Optional[Sequence[int]] = None) -> Optional[Node]:
    """
    Return the child of `node` whose index is numerically closest to `index`.

    When `index_range` is given and the node's activeChild is focusable and
    sits inside that range, the active child is returned as-is. This keeps
    the current lateral position (e.g. the grid column) when moving along an
    index-aligned axis.

    Otherwise only children that are focusable or are containers themselves
    (any `children` mapping, even an empty one) are candidates. Candidate
    indexes are collected in the children's iteration order, which decides
    ties (see closest()). A candidate without an index that comes first is
    never displaced, so the first index-less child is returned; one that
    comes after a numbered candidate never wins.

    :param node: container node
    :param index: target index derived from the current position
    :param index_range: inclusive [low, high] span of the current position
    """
    children: Optional[Dict[str, Node]] = node.get("children")
    if not children:
        return None

    if index_range:
        active_child = children.get(node.get("activeChild"))
        if active_child and _is_in_range(active_child.get("index"), index_range) and is_node_focusable(active_child):
            logger.debug(f"Index-aligned: keeping active child '{node.get('activeChild')}' inside range {list(index_range)}")
            return active_child

    # Index-less candidates stay in place; closest() lets a leading one win
    indexes: List[Optional[int]] = [
        child.get("index")
        for child in children.values()
        if is_node_focusable(child) or child.get("children") is not None
    ]

    if not indexes:
        return None

    resolved = closest(indexes, index)
    logger.debug(f"Closest index to {index} among {indexes} is {resolved}")
    return find_child_with_index(node, resolved)
