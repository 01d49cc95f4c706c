"""
cost.py — Route distance
========================
Adds up the distance of a route by looking each hop up in the store.
Used only to report a result; UCS keeps its own running cost.

A route with a hop the store does not know raises EdgeNotFound.  Routes
returned by a search over the same store never do, so that exception
means a caller mixed up stores or built a route by hand.
"""

from typing import Sequence

from graph import GraphStore, NodeId, Weight


def path_cost(store: GraphStore, path: Sequence[NodeId]) -> Weight:
    """Total distance along `path`; 0 for a single-city route."""
    total: Weight = 0
    for i in range(len(path) - 1):
        total += store.edge_weight(path[i], path[i + 1])
    return total
