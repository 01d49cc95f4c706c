"""
session.py — Application Session
================================
One Session per browser session.  It is the only owner of a GraphStore
and its Layout, and it keeps the last search run for replay.  Nothing
about the graph is module-level state: the Flask app holds a
SessionRegistry and looks sessions up by token.

The session receives already-normalised NodeIds and validated distances;
parsing user text is the input layer's job (ui.forms).
"""

import secrets
from collections import OrderedDict
from typing import Optional

from config import VisualizerConfig
from graph import GraphStore, Layout, NodeId, Weight
from engine.recorder import Recorder, RunMetrics
from log import get_logger

logger = get_logger(__name__)


class Session:
    """
    Attributes:
        store    : The city graph.
        layout   : Canvas positions of its cities.
        recorder : Last search run (None until the first search).
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        config = config or VisualizerConfig()
        self.store:    GraphStore         = GraphStore()
        self.layout:   Layout             = Layout(
            width=config.canvas_width,
            height=config.canvas_height,
            margin=config.node_margin,
            seed=config.layout_seed,
        )
        self.recorder: Optional[Recorder] = None

    def add_path(self, from_id: NodeId, to_id: NodeId, distance: Weight) -> None:
        self.layout.place(from_id)
        self.layout.place(to_id)
        self.store.add_path(from_id, to_id, distance)
        # the old trace no longer matches the graph
        self.recorder = None

    def search(self, algo_key: str, start: NodeId, end: NodeId) -> RunMetrics:
        """Run a search and keep it for replay.

        Raises:
            UnknownAlgorithm: bad `algo_key`.
        """
        rec = Recorder()
        rec.start(algo_key, start, end, self.store)
        metrics = rec.run_to_completion()
        self.recorder = rec
        return metrics

    @property
    def metrics(self) -> Optional[RunMetrics]:
        return self.recorder.metrics if self.recorder else None

    def reset(self) -> None:
        """Forget every city, path, position and run."""
        self.store.reset()
        self.layout.clear()
        self.recorder = None
        logger.info("Session reset")


class SessionRegistry:
    """Sessions keyed by an opaque token stored in the browser cookie.

    Holds at most `config.max_sessions`; creating one more evicts the
    session used least recently.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()

    def create(self) -> str:
        token = secrets.token_urlsafe(16)
        self._sessions[token] = Session(self.config)
        while len(self._sessions) > max(self.config.max_sessions, 1):
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted idle session %s", evicted[:6])
        logger.debug("Created session %s", token[:6])
        return token

    def get(self, token: Optional[str]) -> Optional[Session]:
        if token is None or token not in self._sessions:
            return None
        self._sessions.move_to_end(token)
        return self._sessions[token]

    def discard(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __contains__(self, token: object) -> bool:
        return token in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
