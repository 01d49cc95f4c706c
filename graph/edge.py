"""
edge.py — Adjacency record
==========================
One directed half of a user-added path: "from here you can reach `to`
at cost `weight`".  GraphStore always writes these in symmetric pairs,
which is what makes the graph undirected.

Design decisions:
  - `to` is a node-id string, NOT a node object.  Keeps records
    serialisable and avoids circular references.
  - The record does not know its own tail: it lives in the tail's list.
  - Equality is by value so tests can compare neighbour lists directly;
    two parallel edges with the same weight compare equal but are still
    two entries in the list.
"""

from typing import Union

from graph.node import NodeId

Weight = Union[int, float]


class Edge:
    """
    Attributes:
        to     : ID of the neighbouring node.
        weight : Distance to that neighbour (not validated here).
    """

    __slots__ = ("to", "weight")

    def __init__(self, to: NodeId, weight: Weight):
        self.to:     NodeId = to
        self.weight: Weight = weight

    def to_dict(self) -> dict:
        return {"to": self.to, "weight": self.weight}

    def __iter__(self):
        # allows `nbr, w = edge`
        yield self.to
        yield self.weight

    def __repr__(self) -> str:
        return f"Edge(→ {self.to}, w={self.weight})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Edge):
            return self.to == other.to and self.weight == other.weight
        if isinstance(other, tuple) and len(other) == 2:
            return (self.to, self.weight) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.to, self.weight))
