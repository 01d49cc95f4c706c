"""
graph.py — GraphStore
=====================
Single source of truth for the city graph.  Searches, the cost
accumulator and the renderer all read from this object; only the
session writes to it.

Responsibilities:
  1. Add a bidirectional weighted path       (add_path)
  2. Adjacency queries                       (neighbors, edge_weight, …)
  3. Reset                                   (reset)
  4. Read-only snapshot for the JSON API     (to_dict)

Design decisions:
  - `_adj[node_id] → [Edge, …]` in insertion order.  Order is part of
    the contract: BFS / DFS tie-breaking follows it.
  - Multigraph: adding the same path twice gives two parallel entries.
    Lookups take the first match.
  - Weights are stored as given.  Validation belongs to the input layer.
  - `_paths` remembers each user-added path once, so the renderer can
    draw undirected paths without de-duplicating adjacency pairs.
"""

from typing import Dict, Iterator, List, Tuple

from graph.edge import Edge, Weight
from graph.errors import EdgeNotFound
from graph.node import NodeId
from log import get_logger

logger = get_logger(__name__)


class GraphStore:
    """
    Attributes:
        _adj   : {node_id: [Edge, …]}
        _paths : [(from_id, to_id, weight), …] in the order they were added
    """

    def __init__(self):
        self._adj:   Dict[NodeId, List[Edge]] = {}
        self._paths: List[Tuple[NodeId, NodeId, Weight]] = []

    # ==================================================================
    # MUTATION
    # ==================================================================
    def add_path(self, from_id: NodeId, to_id: NodeId, weight: Weight) -> None:
        """Connect `from_id` and `to_id` in both directions with `weight`."""
        self._adj.setdefault(from_id, [])
        self._adj.setdefault(to_id, [])

        self._adj[from_id].append(Edge(to_id, weight))
        self._adj[to_id].append(Edge(from_id, weight))
        self._paths.append((from_id, to_id, weight))

        logger.debug("Added path %s <-> %s (w=%s)", from_id, to_id, weight)

    def reset(self) -> None:
        self._adj.clear()
        self._paths.clear()
        logger.debug("Graph store cleared")

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbors(self, node_id: NodeId) -> List[Edge]:
        """Edges out of `node_id` in insertion order; [] for an unknown node."""
        return list(self._adj.get(node_id, []))

    def edge_weight(self, from_id: NodeId, to_id: NodeId) -> Weight:
        """Weight of the first edge from `from_id` to `to_id`.

        Raises:
            EdgeNotFound: no such edge (or `from_id` is unknown).
        """
        for edge in self._adj.get(from_id, []):
            if edge.to == to_id:
                return edge.weight
        raise EdgeNotFound(from_id, to_id)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._adj

    def node_ids(self) -> List[NodeId]:
        return list(self._adj.keys())

    def paths(self) -> Iterator[Tuple[NodeId, NodeId, Weight]]:
        """Each user-added path once, as (from, to, weight)."""
        return iter(list(self._paths))

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self._adj)

    def path_count(self) -> int:
        return len(self._paths)

    def is_empty(self) -> bool:
        return not self._adj

    def has_negative_edges(self) -> bool:
        return any(w < 0 for _, _, w in self._paths)

    def to_dict(self) -> dict:
        return {
            "nodes": self.node_ids(),
            "paths": [
                {"from": a, "to": b, "distance": w} for a, b, w in self._paths
            ],
            "adjacency": {
                nid: [e.to_dict() for e in edges] for nid, edges in self._adj.items()
            },
        }

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count()}, paths={self.path_count()})"
