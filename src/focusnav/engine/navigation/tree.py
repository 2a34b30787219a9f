# src/focusnav/engine/navigation/tree.py

from typing import Any, Dict, List, Mapping, Optional

def is_node_in_tree(node_id: str, tree: Mapping[str, Any]) -> bool:
    """Depth-first search of every id in the tree, including nested children."""
    found = False

    def _walk(level: Mapping[str, Any]) -> None:
        nonlocal found
        for key, node in level.items():
            if key == node_id:
                found = True
            # Keep finishing this level, but stop descending once found
            if not found and node.get("children"):
                _walk(node["children"])

    _walk(tree)
    return found

def get_nodes_from_tree(tree: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Flatten a nested focus tree into a list of node records.

    The walk is depth-first pre-order, so every node is immediately followed
    by its own subtree. Each record is a shallow copy of the node with
    `children` removed, `id` set to its key and `parent` set to the node's
    own parent field or, failing that, the id of the node it is nested in.
    """
    nodes: List[Dict[str, Any]] = []

    def _walk(level: Mapping[str, Any], parent: Optional[str]) -> None:
        for key, node in level.items():
            record = {k: v for k, v in node.items() if k != "children"}
            record["id"] = key
            record["parent"] = node.get("parent") or parent
            nodes.append(record)

            if node.get("children"):
                _walk(node["children"], key)

    _walk(tree, None)
    return nodes
