"""
recorder.py — Run Recorder & Metrics
=====================================
Runs one search to completion on a GraphStore, records every Step of its
trace, and computes the RunMetrics the result panel shows.

Usage:
    rec = Recorder()
    rec.start(algo_key="ucs", start="A", end="F", store=store)
    metrics = rec.run_to_completion()
    metrics.path, metrics.total_distance
    rec.export()                       # JSON-ready snapshot

The route itself comes from the plain search function; the trace from
its step generator.  The two must agree, and a disagreement is logged as
an error because it means the generator drifted from the search.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from graph import GraphStore, NodeId, Weight
from algorithms import AlgoInfo, path_cost, require_algorithm
from algorithms.step import Step
from engine.stepper import Stepper
from log import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the result panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str              = ""
    algo_label:      str              = ""
    start:           str              = ""
    end:             str              = ""
    path:            List[str]        = field(default_factory=list)
    path_found:      bool             = False
    path_length:     int              = 0          # hops on the route
    total_distance:  Optional[Weight] = None       # None when no route
    nodes_expanded:  int              = 0
    edges_examined:  int              = 0
    total_steps:     int              = 0
    wall_time_ms:    float            = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : RunMetrics (available after run_to_completion).
        stepper : Stepper loaded with the recorded steps, for replay.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._algo_info: Optional[AlgoInfo]   = None
        self._start:     Optional[NodeId]     = None
        self._end:       Optional[NodeId]     = None
        self._store:     Optional[GraphStore] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, start: NodeId, end: NodeId, store: GraphStore) -> None:
        """Select the search and its inputs.

        Raises:
            UnknownAlgorithm: `algo_key` is not registered.
        """
        self._algo_info = require_algorithm(algo_key)
        self._start     = start
        self._end       = end
        self._store     = store
        self.steps      = []
        self.metrics    = None
        self.stepper    = None

        if self._algo_info.weighted and store.has_negative_edges():
            logger.warning(
                "%s on a graph with negative distances: the route may not be the shortest",
                self._algo_info.label,
            )

    def run_to_completion(self) -> RunMetrics:
        """Run the search, record its trace, compute metrics."""
        if self._algo_info is None or self._store is None:
            raise RuntimeError("Call start() first.")

        info, store = self._algo_info, self._store

        t0 = time.monotonic()
        route = info.fn(store, self._start, self._end)
        wall_ms = (time.monotonic() - t0) * 1000

        self.steps = list(info.steps(store, self._start, self._end))
        self.stepper = Stepper()
        self.stepper.load(self.steps)

        traced = self.steps[-1].path if self.steps else []
        if (route or []) != traced:
            logger.error(
                "%s trace disagrees with search: %s vs %s", info.key, traced, route
            )

        self.metrics = self._compute_metrics(route, wall_ms)
        logger.info(
            "%s %s -> %s: %s",
            info.key,
            self._start,
            self._end,
            " -> ".join(route) if route else "no path",
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "start":    self._start,
            "end":      self._end,
            "metrics":  self.metrics.to_dict() if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, route: Optional[List[NodeId]], wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None
        path = list(route) if route else []

        # EdgeNotFound here would mean the search returned a route the
        # store does not contain; let it propagate.
        total = path_cost(self._store, path) if path else None

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            start=self._start,
            end=self._end,
            path=path,
            path_found=bool(path),
            path_length=len(path) - 1 if len(path) > 1 else 0,
            total_distance=total,
            nodes_expanded=last.metrics.get("nodes_expanded", 0) if last else 0,
            edges_examined=last.metrics.get("edges_examined", 0) if last else 0,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 3),
        )
