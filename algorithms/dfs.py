"""
dfs.py — Depth-First Search
=============================
Same loop as BFS with an explicit LIFO stack of partial routes instead of
a queue (no Python recursion limit issues).

Neighbours are pushed in edge-list order, so the one listed LAST is
popped first.  With A's paths added to B then C, DFS goes A → C before
it ever looks at B.  That ordering is part of the observable behaviour
and is kept on purpose.

Does NOT guarantee the shortest route by any metric.

The overlay exposes the full stack at every step so the UI can render
the stack panel (top of stack = last entry).
"""

from typing import Generator, List, Optional, Set

from graph import GraphStore, NodeId
from algorithms.step import Step, StepBuilder, format_route, missing_explanation


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start, end):",                       # 0
    "    stack ← [[start]]",                             # 1
    "    visited ← {}",                                  # 2
    "    while stack is not empty:",                      # 3
    "        path ← stack.pop()",                        # 4
    "        node ← path[-1]",                           # 5
    "        if node == end: return path",               # 6
    "        if node not in visited:",                    # 7
    "            visited.add(node)",                     # 8
    "            for neighbour in adj(node):",           # 9
    "                if neighbour not in visited:",       # 10
    "                    stack.push(path + [neighbour])",  # 11
    "    return NOT FOUND",                              # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs_steps(
    store: GraphStore,
    start: NodeId,
    end: NodeId,
) -> Generator[Step, None, None]:
    """Iterative DFS over partial routes, one Step per event."""
    sb = StepBuilder()

    if not store.has_node(start) or not store.has_node(end):
        sb.pseudocode_line = 12
        sb.explanation = missing_explanation(store, start, end)
        yield sb.build(is_final=True)
        return

    stack: List[List[NodeId]] = [[start]]
    visited: Set[NodeId] = set()
    order: List[NodeId] = []

    # --- init step ---
    sb.set_current(start)
    sb.set_frontier(stack)
    sb.pseudocode_line = 1
    sb.explanation = (
        f"Initialise: push the route [{start}] onto the stack. "
        f"DFS dives as deep as possible before backtracking."
    )
    sb.overlay["stack"] = [list(p) for p in stack]
    yield sb.build()

    # --- main loop ---
    while stack:
        path = stack.pop()
        node = path[-1]

        sb.begin(order)
        sb.set_current(node)
        sb.set_frontier(stack)
        sb.pseudocode_line = 4
        sb.explanation = (
            f"Pop route {format_route(path)} from the top of the stack "
            f"(the most recently pushed one)."
        )
        sb.overlay["stack"] = [list(p) for p in stack]
        yield sb.build()

        # -- target check --
        if node == end:
            sb.begin(order)
            sb.set_path(path)
            sb.pseudocode_line = 6
            sb.explanation = (
                f"🎯 Target '{end}' found! Route: {format_route(path)} "
                f"({len(path) - 1} hop(s)). DFS does not promise this is the shortest."
            )
            sb.overlay["stack"] = [list(p) for p in stack]
            yield sb.build(is_final=True)
            return

        # already visited (routes can be pushed more than once per city)
        if node in visited:
            sb.begin(order)
            sb.set_frontier(stack)
            sb.pseudocode_line = 7
            sb.explanation = f"'{node}' was already expanded — drop this route."
            sb.overlay["stack"] = [list(p) for p in stack]
            yield sb.build()
            continue

        visited.add(node)
        order.append(node)
        sb.begin(order)
        sb.expand(node)
        sb.set_current(node)
        sb.set_frontier(stack)
        sb.pseudocode_line = 8
        sb.explanation = (
            f"Mark '{node}' visited. Its neighbours go on the stack; "
            f"the last one pushed is explored first."
        )
        sb.overlay["stack"] = [list(p) for p in stack]
        yield sb.build()

        # -- explore neighbours --
        for edge in store.neighbors(node):
            nbr = edge.to
            sb.begin(order)
            sb.set_current(node)
            if nbr in visited:
                sb.examine_edge(node, nbr, skipped=True)
                sb.pseudocode_line = 10
                sb.explanation = f"Path {node}–{nbr}: '{nbr}' already visited — ignore."
            else:
                stack.append(path + [nbr])
                sb.examine_edge(node, nbr)
                sb.node_states[nbr] = "frontier"
                sb.pseudocode_line = 11
                sb.explanation = f"Path {node}–{nbr}: push {format_route(path + [nbr])}."
            sb.set_frontier(stack)
            sb.overlay["stack"] = [list(p) for p in stack]
            yield sb.build()

    # --- not found ---
    sb.begin(order)
    sb.pseudocode_line = 12
    sb.explanation = f"Stack empty. '{end}' is not reachable from '{start}'."
    sb.overlay["stack"] = []
    yield sb.build(is_final=True)


# ---------------------------------------------------------------------------
def dfs(store: GraphStore, start: NodeId, end: NodeId) -> Optional[List[NodeId]]:
    """First route to `end` in depth-first (last-neighbour-first) order, or None."""
    if not store.has_node(start) or not store.has_node(end):
        return None

    stack: List[List[NodeId]] = [[start]]
    visited: Set[NodeId] = set()

    while stack:
        path = stack.pop()
        node = path[-1]
        if node == end:
            return path
        if node not in visited:
            visited.add(node)
            for edge in store.neighbors(node):
                if edge.to not in visited:
                    stack.append(path + [edge.to])
    return None
