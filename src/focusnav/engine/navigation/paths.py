# src/focusnav/engine/navigation/paths.py

from typing import Any, Iterable, Mapping, Optional, Union
from focusnav.core.exceptions import InvalidPathSegmentError

PATH_DELIMITER = "."

NodeRef = Union[str, Mapping[str, Any]]

def _node_id(node: NodeRef) -> Optional[str]:
    if isinstance(node, str):
        return node
    return node.get("id")

def is_node_in_path(path: str, node: NodeRef) -> bool:
    """
    Is the node one of the segments of a dot-delimited ancestry path?

    Matches a leading segment (`id.`), a trailing segment (`.id`) or an
    interior segment (`.id.`) by scanning for the delimited id, without
    splitting the path. Ids containing the delimiter can therefore match
    across segment boundaries; build paths with build_path() to rule that
    out.

    :param path: e.g. "root.menu.item3"
    :param node: node mapping carrying an "id", or the id itself
    """
    node_id = _node_id(node)
    if node_id is None:
        return False

    if path.startswith(node_id + PATH_DELIMITER):
        return True
    if path.endswith(PATH_DELIMITER + node_id):
        return True
    if PATH_DELIMITER + node_id + PATH_DELIMITER in path:
        return True

    return False

def is_node_in_paths(paths: Iterable[str], node: NodeRef) -> bool:
    return any(is_node_in_path(path, node) for path in paths)

def build_path(node_ids: Iterable[str]) -> str:
    """Join an ancestry chain (root first) into a dot-delimited path."""
    segments = []
    for node_id in node_ids:
        if PATH_DELIMITER in node_id:
            raise InvalidPathSegmentError(f"Node id '{node_id}' contains the path delimiter '{PATH_DELIMITER}'.")
        segments.append(node_id)
    return PATH_DELIMITER.join(segments)
