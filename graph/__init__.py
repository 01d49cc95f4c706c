"""
graph/
------
Core data layer.  Public API:

    from graph import GraphStore, Edge, NodeId, Layout
    from graph import GraphError, EdgeNotFound, UnknownAlgorithm
"""

from graph.node   import NodeId, Layout
from graph.edge   import Edge, Weight
from graph.errors import GraphError, EdgeNotFound, UnknownAlgorithm
from graph.graph  import GraphStore

__all__ = [
    "NodeId",     "Layout",
    "Edge",       "Weight",
    "GraphError", "EdgeNotFound", "UnknownAlgorithm",
    "GraphStore",
]
