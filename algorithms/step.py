"""
step.py — Search Step Snapshot
==============================
Every search is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame of a run:

    • Which cities are current / frontier / visited / on the route
    • Which paths are being examined / on the route
    • The frontier itself (partial routes, with costs for UCS)
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - Step is a plain dataclass.  It is a SNAPSHOT: the generator is the
    only writer, the stepper / renderer are pure readers.
  - Path highlight keys are order-free ("A|B" == "B|A") because a path
    is undirected; see `edge_key`.
  - The last Step of every run has `is_final=True`; its `path` is the
    route found, or [] when the target is not reachable.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


def edge_key(a: str, b: str) -> str:
    """Direction-free key for the path between a and b."""
    return "|".join(sorted((a, b)))


def route_keys(route: Sequence[str]) -> List[str]:
    """edge_key of every consecutive pair along a route."""
    return [edge_key(route[i], route[i + 1]) for i in range(len(route) - 1)]


def format_route(route: Sequence[str]) -> str:
    return " → ".join(route)


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        current_node    : City being examined right now.
        current_edge    : edge_key of the path being examined (or None).
        node_states     : {node_id: state}  current / frontier / visited / path.
        edge_states     : {edge_key: state} relaxed / ignored / chosen.
        visited_set     : Cities expanded so far, in expansion order.
        frontier        : Partial routes waiting in the queue / stack.
        path            : Route found (only on the final step).
        cost            : Accumulated cost of the entry just taken (UCS), else None.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        explanation     : Human-readable "why".
        overlay         : Frontier view for the side panel:
                            • "queue" – routes (BFS) or (cost, route) pairs (UCS)
                            • "stack" – routes (DFS), top of stack last
        metrics         : Running tally: nodes_expanded, edges_examined.
        is_final        : True on the last step (route found or exhausted).
    """

    step_number:      int                      = 0
    current_node:     Optional[str]            = None
    current_edge:     Optional[str]            = None
    node_states:      Dict[str, str]           = field(default_factory=dict)
    edge_states:      Dict[str, str]           = field(default_factory=dict)
    visited_set:      List[str]                = field(default_factory=list)
    frontier:         List[List[str]]          = field(default_factory=list)
    path:             List[str]                = field(default_factory=list)
    cost:             Optional[float]          = None
    pseudocode_line:  int                      = 0
    explanation:      str                      = ""
    overlay:          Dict[str, Any]           = field(default_factory=dict)
    metrics:          Dict[str, Any]           = field(default_factory=dict)
    is_final:         bool                     = False

    def to_dict(self) -> dict:
        return {
            "step_number":     self.step_number,
            "current_node":    self.current_node,
            "current_edge":    self.current_edge,
            "node_states":     dict(self.node_states),
            "edge_states":     dict(self.edge_states),
            "visited_set":     list(self.visited_set),
            "frontier":        [list(p) for p in self.frontier],
            "path":            list(self.path),
            "cost":            self.cost,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so searches don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that searches use to construct Steps.

    The builder lives for the whole run: tallies in `metrics` and the
    step counter carry over, while `begin()` wipes the per-frame fields.

        sb = StepBuilder()
        sb.begin(visited)
        sb.set_current("A")
        sb.set_frontier(queue)
        sb.explanation = "Dequeue the oldest partial route."
        yield sb.build()
    """

    def __init__(self):
        self.step_no = 0
        self.metrics: Dict[str, Any] = {"nodes_expanded": 0, "edges_examined": 0}
        self.begin([])

    def begin(self, visited: Sequence[str]):
        self.current_node:     Optional[str]       = None
        self.current_edge:     Optional[str]       = None
        self.node_states:      Dict[str, str]      = {}
        self.edge_states:      Dict[str, str]      = {}
        self.visited_set:      List[str]           = list(visited)
        self.frontier:         List[List[str]]     = []
        self.path:             List[str]           = []
        self.cost:             Optional[float]     = None
        self.pseudocode_line:  int                 = 0
        self.explanation:      str                 = ""
        self.overlay:          Dict[str, Any]      = {}
        for n in self.visited_set:
            self.node_states[n] = "visited"

    # -- helpers --
    def set_current(self, node_id: str):
        self.current_node = node_id
        self.node_states[node_id] = "current"

    def expand(self, node_id: str):
        if node_id not in self.visited_set:
            self.visited_set.append(node_id)
        self.metrics["nodes_expanded"] = len(self.visited_set)

    def set_frontier(self, routes: Sequence[Sequence[str]]):
        self.frontier = [list(r) for r in routes]
        for r in self.frontier:
            tip = r[-1]
            if tip not in self.node_states:
                self.node_states[tip] = "frontier"

    def examine_edge(self, a: str, b: str, skipped: bool = False):
        key = edge_key(a, b)
        self.current_edge = key
        self.edge_states[key] = "ignored" if skipped else "relaxed"
        self.metrics["edges_examined"] = self.metrics.get("edges_examined", 0) + 1

    def set_path(self, route: Sequence[str]):
        self.path = list(route)
        for n in self.path:
            self.node_states[n] = "path"
        for key in route_keys(self.path):
            self.edge_states[key] = "chosen"

    def build(self, is_final: bool = False) -> Step:
        step = Step(
            step_number=self.step_no,
            current_node=self.current_node,
            current_edge=self.current_edge,
            node_states=dict(self.node_states),
            edge_states=dict(self.edge_states),
            visited_set=list(self.visited_set),
            frontier=[list(r) for r in self.frontier],
            path=list(self.path),
            cost=self.cost,
            pseudocode_line=self.pseudocode_line,
            explanation=self.explanation,
            overlay=dict(self.overlay),
            metrics=dict(self.metrics),
            is_final=is_final,
        )
        self.step_no += 1
        return step


def final_path(steps) -> Optional[List[str]]:
    """Drain a step generator; the final step's route, or None if not found."""
    last: Optional[Step] = None
    for last in steps:
        pass
    if last is None or not last.path:
        return None
    return list(last.path)


def missing_explanation(store, start: str, end: str) -> str:
    """Explanation for a run whose start or end city is not in the store."""
    missing = [n for n in dict.fromkeys((start, end)) if not store.has_node(n)]
    names = " and ".join(f"'{n}'" for n in missing)
    return f"Not on the map: {names}. There is no route to search."
