"""
algorithms/__init__.py — Search Registry
=========================================
Single source of truth for every search the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, bfs, dfs, ucs, path_cost

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, steps, pseudocode, tags, …),
        …
    }

`fn` is the plain search (store, start, end) → route or None.
`steps` is its step-generator twin used for replay.  Adding a search is:
write both, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from graph import UnknownAlgorithm

from algorithms.bfs  import bfs, bfs_steps, PSEUDOCODE as _bfs_pc
from algorithms.dfs  import dfs, dfs_steps, PSEUDOCODE as _dfs_pc
from algorithms.ucs  import ucs, ucs_steps, PSEUDOCODE as _ucs_pc
from algorithms.cost import path_cost
from algorithms.step import Step, StepBuilder, edge_key, route_keys, format_route


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each search
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # plain search
    steps:            Callable               # step generator
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    frontier:         str       = "queue"    # overlay key: "queue" or "stack"
    weighted:         bool      = False      # reads edge weights?
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs, steps=bfs_steps, pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-hops"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds the route with the fewest hops.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=dfs, steps=dfs_steps, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"], frontier="stack",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee the shortest route.",
    ),

    "ucs": AlgoInfo(
        key="ucs", label="Uniform-Cost Search", fn=ucs, steps=ucs_steps, pseudocode=_ucs_pc,
        tags=["weighted", "shortest-distance"], weighted=True,
        complexity_time="O(E² log E)", complexity_space="O(E)",
        description="Always extends the cheapest route. Finds the shortest total distance.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    """Like get_algorithm, but raises UnknownAlgorithm for a bad key."""
    info = REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithm(key)
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered searches in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "bfs", "bfs_steps",
    "dfs", "dfs_steps",
    "ucs", "ucs_steps",
    "path_cost",
    "Step", "StepBuilder",
    "edge_key", "route_keys", "format_route",
]
