# src/focusnav/engine/navigation/arena.py

import logging
import networkx as nx
from typing import Any, Dict, List, Mapping, Optional
from focusnav.core.exceptions import DuplicateNodeIdError, InvalidTreeError, NodeNotFoundError
from .paths import build_path
from .tree import get_nodes_from_tree

logger = logging.getLogger(__name__)

class FocusTreeIndex:
    """
    Flat, id-keyed view of a nested focus tree.

    Every node is stored once as a flattened record (see get_nodes_from_tree)
    and parent -> child links live in a directed graph, so membership and
    parent lookups do not walk the tree. The index is a snapshot: mutating
    the source tree afterwards does not change it.
    """
    def __init__(self, tree: Mapping[str, Any]):
        self._records: Dict[str, Dict[str, Any]] = {}
        # Walk order, which is also the order get_nodes_from_tree produces
        self._order: List[str] = []
        self._nx_graph = nx.DiGraph()

        self._build_and_validate(tree)

    @property
    def nodes(self) -> List[Dict[str, Any]]:
        """All flattened records in depth-first pre-order."""
        return [dict(self._records[node_id]) for node_id in self._order]

    @property
    def roots(self) -> List[str]:
        return [node_id for node_id in self._order if self._records[node_id]["parent"] is None]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def get_node(self, node_id: str) -> Dict[str, Any]:
        if node_id not in self._records:
            raise NodeNotFoundError(node_id)
        return dict(self._records[node_id])

    def parent_of(self, node_id: str) -> Optional[str]:
        return self.get_node(node_id)["parent"]

    def children_of(self, node_id: str) -> List[str]:
        if node_id not in self._records:
            raise NodeNotFoundError(node_id)
        # DiGraph keeps successor insertion order, i.e. walk order
        return list(self._nx_graph.successors(node_id))

    def ancestors_of(self, node_id: str) -> List[str]:
        """Ancestor ids, nearest parent first."""
        ancestors = []
        current = self.parent_of(node_id)
        while current is not None:
            ancestors.append(current)
            current = self._records[current]["parent"]
        return ancestors

    def is_ancestor(self, ancestor_id: str, node_id: str) -> bool:
        if node_id not in self._records:
            raise NodeNotFoundError(node_id)
        if ancestor_id not in self._records:
            return False
        return ancestor_id in nx.ancestors(self._nx_graph, node_id)

    def depth_of(self, node_id: str) -> int:
        return len(self.ancestors_of(node_id))

    def path_of(self, node_id: str) -> str:
        """Dot-delimited path from the root down to `node_id`."""
        chain = list(reversed(self.ancestors_of(node_id)))
        chain.append(node_id)
        return build_path(chain)

    def _build_and_validate(self, tree: Mapping[str, Any]):
        # 1. Flatten into the arena
        for record in get_nodes_from_tree(tree):
            node_id = record["id"]
            if node_id in self._records:
                raise DuplicateNodeIdError(node_id)
            self._records[node_id] = record
            self._order.append(node_id)
            self._nx_graph.add_node(node_id)

        # 2. Parent edges, explicit parents included
        for node_id in self._order:
            parent = self._records[node_id]["parent"]
            if parent is None:
                continue
            if parent not in self._records:
                raise InvalidTreeError(f"Node '{node_id}' references unknown parent '{parent}'.")
            self._nx_graph.add_edge(parent, node_id)

        # 3. Explicit parent fields can close a loop
        if not nx.is_directed_acyclic_graph(self._nx_graph):
            raise InvalidTreeError("Focus tree parent links contain a cycle.")

        logger.info(f"Indexed focus tree with {len(self._records)} nodes and {len(self.roots)} root(s).")
