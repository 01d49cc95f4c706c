"""
ucs.py — Uniform-Cost Search
==============================
The frontier is a plain list of (route, cost) entries.  Before every
extraction the whole list is sorted by cost and the first entry is taken.
Python's sort is stable, so among equal costs the entry that was added
first wins; that tie-break is what makes runs reproducible.

Yields a Step at:
  1. Initialise with ([start], 0)
  2. Sort + take the cheapest entry  →  CURRENT
  3. Target check (the first time the target is taken, its cost is minimal)
  4. Expand  →  VISITED, push (route + [nbr], cost + weight) per neighbour
  5. Frontier empty  →  NOT REACHABLE

Overlay exposes:
  • "queue" – [(cost, route)] after sorting, cheapest first

Correctness note: optimal only for non-negative weights.  Distances are
validated when entered; this module does not check them again.
"""

from typing import Generator, List, Optional, Set, Tuple

from graph import GraphStore, NodeId, Weight
from algorithms.step import Step, StepBuilder, format_route, missing_explanation


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def UCS(graph, start, end):",                        # 0
    "    frontier ← [([start], 0)]",                      # 1
    "    visited ← {}",                                   # 2
    "    while frontier is not empty:",                    # 3
    "        frontier.sort(by cost)",                     # 4
    "        (path, cost) ← frontier.take_first()",       # 5
    "        if path[-1] == end: return path",            # 6
    "        if path[-1] not in visited:",                 # 7
    "            visited.add(path[-1])",                  # 8
    "            for (neighbour, w) in adj(path[-1]):",   # 9
    "                if neighbour not in visited:",        # 10
    "                    frontier.add((path + [neighbour], cost + w))",  # 11
    "    return NOT FOUND",                               # 12
]

Entry = Tuple[List[NodeId], Weight]


def _queue_view(frontier: List[Entry]) -> List[Tuple[Weight, List[NodeId]]]:
    return [(cost, list(path)) for path, cost in frontier]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def ucs_steps(
    store: GraphStore,
    start: NodeId,
    end: NodeId,
) -> Generator[Step, None, None]:
    sb = StepBuilder()

    if not store.has_node(start) or not store.has_node(end):
        sb.pseudocode_line = 12
        sb.explanation = missing_explanation(store, start, end)
        yield sb.build(is_final=True)
        return

    frontier: List[Entry] = [([start], 0)]
    visited: Set[NodeId] = set()
    order: List[NodeId] = []

    # --- init step ---
    sb.set_current(start)
    sb.set_frontier([p for p, _ in frontier])
    sb.cost = 0
    sb.pseudocode_line = 1
    sb.explanation = (
        f"Initialise: the frontier holds ([{start}], cost 0). "
        f"UCS always extends the cheapest route found so far."
    )
    sb.overlay["queue"] = _queue_view(frontier)
    yield sb.build()

    # --- main loop ---
    while frontier:
        frontier.sort(key=lambda entry: entry[1])
        path, cost = frontier.pop(0)
        node = path[-1]

        sb.begin(order)
        sb.set_current(node)
        sb.set_frontier([p for p, _ in frontier])
        sb.cost = cost
        sb.pseudocode_line = 5
        sb.explanation = (
            f"Sort the frontier by cost and take {format_route(path)} "
            f"(cost {cost}), the cheapest route waiting."
        )
        sb.overlay["queue"] = _queue_view(frontier)
        yield sb.build()

        # -- target check --
        if node == end:
            sb.begin(order)
            sb.set_path(path)
            sb.cost = cost
            sb.pseudocode_line = 6
            sb.explanation = (
                f"🎯 Target '{end}' taken with cost {cost}. No cheaper route "
                f"exists. Route: {format_route(path)}"
            )
            sb.overlay["queue"] = _queue_view(frontier)
            yield sb.build(is_final=True)
            return

        if node in visited:
            sb.begin(order)
            sb.set_frontier([p for p, _ in frontier])
            sb.cost = cost
            sb.pseudocode_line = 7
            sb.explanation = (
                f"'{node}' was already expanded by a route at least as cheap — drop this one."
            )
            sb.overlay["queue"] = _queue_view(frontier)
            yield sb.build()
            continue

        visited.add(node)
        order.append(node)
        sb.begin(order)
        sb.expand(node)
        sb.set_current(node)
        sb.set_frontier([p for p, _ in frontier])
        sb.cost = cost
        sb.pseudocode_line = 8
        sb.explanation = f"Mark '{node}' visited (cost so far {cost})."
        sb.overlay["queue"] = _queue_view(frontier)
        yield sb.build()

        # -- push neighbours --
        for edge in store.neighbors(node):
            nbr = edge.to
            sb.begin(order)
            sb.set_current(node)
            sb.cost = cost
            if nbr in visited:
                sb.examine_edge(node, nbr, skipped=True)
                sb.pseudocode_line = 10
                sb.explanation = (
                    f"Path {node}–{nbr} (w={edge.weight}): '{nbr}' already visited — skip."
                )
            else:
                new_cost = cost + edge.weight
                frontier.append((path + [nbr], new_cost))
                sb.examine_edge(node, nbr)
                sb.node_states[nbr] = "frontier"
                sb.pseudocode_line = 11
                sb.explanation = (
                    f"Path {node}–{nbr}: {cost} + {edge.weight} = {new_cost}. "
                    f"Add {format_route(path + [nbr])} to the frontier."
                )
            sb.set_frontier([p for p, _ in frontier])
            sb.overlay["queue"] = _queue_view(frontier)
            yield sb.build()

    # --- not found ---
    sb.begin(order)
    sb.pseudocode_line = 12
    sb.explanation = f"Frontier empty. '{end}' is not reachable."
    sb.overlay["queue"] = []
    yield sb.build(is_final=True)


# ---------------------------------------------------------------------------
def ucs(store: GraphStore, start: NodeId, end: NodeId) -> Optional[List[NodeId]]:
    """Minimum-total-distance route from start to end, or None."""
    if not store.has_node(start) or not store.has_node(end):
        return None

    frontier: List[Entry] = [([start], 0)]
    visited: Set[NodeId] = set()

    while frontier:
        frontier.sort(key=lambda entry: entry[1])
        path, cost = frontier.pop(0)
        node = path[-1]
        if node == end:
            return path
        if node not in visited:
            visited.add(node)
            for edge in store.neighbors(node):
                if edge.to not in visited:
                    frontier.append((path + [edge.to], cost + edge.weight))
    return None
