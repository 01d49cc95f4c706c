"""
bfs.py — Breadth-First Search
==============================
The frontier is a FIFO queue of *partial routes*, not bare cities, so
the route comes out of the queue ready-made and no parent map is needed.

Yields a Step at every meaningful event:
  1. Dequeue the oldest partial route  →  its last city is CURRENT
  2. Target check
  3. Expand an unvisited city  →  VISITED
  4. Each neighbour  →  enqueue route + [neighbour], or skip if visited
  5. Final step  →  route highlighted, or NOT FOUND

Returns the shortest route by hop count (weights are ignored).

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.
"""

from collections import deque
from typing import Deque, Generator, List, Optional, Set

from graph import GraphStore, NodeId
from algorithms.step import Step, StepBuilder, format_route, missing_explanation


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start, end):",                       # 0
    "    queue ← [[start]]",                             # 1
    "    visited ← {}",                                  # 2
    "    while queue is not empty:",                      # 3
    "        path ← queue.dequeue()",                    # 4
    "        node ← path[-1]",                           # 5
    "        if node == end: return path",               # 6
    "        if node not in visited:",                    # 7
    "            visited.add(node)",                     # 8
    "            for neighbour in adj(node):",           # 9
    "                if neighbour not in visited:",       # 10
    "                    queue.enqueue(path + [neighbour])",  # 11
    "    return NOT FOUND",                              # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs_steps(
    store: GraphStore,
    start: NodeId,
    end: NodeId,
) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during BFS execution.

    Args:
        store : The graph to search (read only).
        start : Starting city.
        end   : Goal city.
    """
    sb = StepBuilder()

    if not store.has_node(start) or not store.has_node(end):
        sb.pseudocode_line = 12
        sb.explanation = missing_explanation(store, start, end)
        yield sb.build(is_final=True)
        return

    queue: Deque[List[NodeId]] = deque([[start]])
    visited: Set[NodeId] = set()
    order: List[NodeId] = []

    # --- initialisation step ---
    sb.set_current(start)
    sb.set_frontier(queue)
    sb.pseudocode_line = 1
    sb.explanation = (
        f"Initialise: the queue holds the one-city route [{start}]. "
        f"BFS explores layer by layer from here."
    )
    sb.overlay["queue"] = [list(p) for p in queue]
    yield sb.build()

    # --- main loop ---
    while queue:
        path = queue.popleft()
        node = path[-1]

        # -- dequeue event --
        sb.begin(order)
        sb.set_current(node)
        sb.set_frontier(queue)
        sb.pseudocode_line = 4
        sb.explanation = (
            f"Dequeue route {format_route(path)}. BFS always takes the route "
            f"that entered the queue earliest (FIFO)."
        )
        sb.overlay["queue"] = [list(p) for p in queue]
        yield sb.build()

        # -- target check --
        if node == end:
            sb.begin(order)
            sb.set_path(path)
            sb.pseudocode_line = 6
            sb.explanation = (
                f"🎯 Target '{end}' reached! Fewest hops: {len(path) - 1}. "
                f"Route: {format_route(path)}"
            )
            sb.overlay["queue"] = [list(p) for p in queue]
            yield sb.build(is_final=True)
            return

        if node in visited:
            sb.begin(order)
            sb.set_frontier(queue)
            sb.pseudocode_line = 7
            sb.explanation = f"'{node}' was already expanded — drop this route."
            sb.overlay["queue"] = [list(p) for p in queue]
            yield sb.build()
            continue

        # -- expand --
        visited.add(node)
        order.append(node)
        sb.begin(order)
        sb.expand(node)
        sb.set_current(node)
        sb.set_frontier(queue)
        sb.pseudocode_line = 8
        sb.explanation = f"Mark '{node}' visited and look at its neighbours."
        sb.overlay["queue"] = [list(p) for p in queue]
        yield sb.build()

        # -- explore neighbours in edge-list order --
        for edge in store.neighbors(node):
            nbr = edge.to
            sb.begin(order)
            sb.set_current(node)
            if nbr in visited:
                sb.examine_edge(node, nbr, skipped=True)
                sb.pseudocode_line = 10
                sb.explanation = f"Path {node}–{nbr}: '{nbr}' already visited — skip."
            else:
                queue.append(path + [nbr])
                sb.examine_edge(node, nbr)
                sb.node_states[nbr] = "frontier"
                sb.pseudocode_line = 11
                sb.explanation = (
                    f"Path {node}–{nbr}: enqueue {format_route(path + [nbr])}. "
                    f"It waits behind every route already queued."
                )
            sb.set_frontier(queue)
            sb.overlay["queue"] = [list(p) for p in queue]
            yield sb.build()

    # --- exhausted without finding target ---
    sb.begin(order)
    sb.pseudocode_line = 12
    sb.explanation = f"Queue is empty. '{end}' is NOT reachable from '{start}'."
    sb.overlay["queue"] = []
    yield sb.build(is_final=True)


# ---------------------------------------------------------------------------
# Plain search
# ---------------------------------------------------------------------------
def bfs(store: GraphStore, start: NodeId, end: NodeId) -> Optional[List[NodeId]]:
    """Fewest-hops route from start to end, or None."""
    if not store.has_node(start) or not store.has_node(end):
        return None

    queue: Deque[List[NodeId]] = deque([[start]])
    visited: Set[NodeId] = set()

    while queue:
        path = queue.popleft()
        node = path[-1]
        if node == end:
            return path
        if node not in visited:
            visited.add(node)
            for edge in store.neighbors(node):
                if edge.to not in visited:
                    queue.append(path + [edge.to])
    return None

