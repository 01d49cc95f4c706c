"""Tests for per-browser sessions and their registry."""

from config import VisualizerConfig
from engine import Session, SessionRegistry


def test_add_path_places_both_cities(config: VisualizerConfig):
    sess = Session(config)
    sess.add_path("A", "B", 3)

    assert sess.store.node_ids() == ["A", "B"]
    assert set(sess.layout.node_ids()) == {"A", "B"}


def test_layout_follows_config():
    sess = Session(VisualizerConfig(canvas_width=400, canvas_height=300, node_margin=10))
    assert (sess.layout.width, sess.layout.height, sess.layout.margin) == (400, 300, 10)


def test_search_keeps_last_run(config: VisualizerConfig):
    sess = Session(config)
    sess.add_path("A", "B", 3)
    assert sess.metrics is None

    metrics = sess.search("bfs", "A", "B")
    assert sess.metrics is metrics
    assert metrics.path == ["A", "B"]


def test_adding_a_path_drops_the_old_run(config: VisualizerConfig):
    sess = Session(config)
    sess.add_path("A", "B", 3)
    sess.search("bfs", "A", "B")
    sess.add_path("B", "C", 1)
    assert sess.recorder is None


def test_reset_clears_everything(config: VisualizerConfig):
    sess = Session(config)
    sess.add_path("A", "B", 3)
    sess.search("ucs", "A", "B")

    sess.reset()
    sess.reset()

    assert sess.store.is_empty()
    assert len(sess.layout) == 0
    assert sess.metrics is None


def test_registry_isolates_sessions(config: VisualizerConfig):
    registry = SessionRegistry(config)
    t1, t2 = registry.create(), registry.create()
    assert t1 != t2
    assert len(registry) == 2

    registry.get(t1).add_path("A", "B", 1)
    assert registry.get(t2).store.is_empty()

    registry.discard(t1)
    assert registry.get(t1) is None
    assert registry.get(None) is None


def test_registry_evicts_least_recently_used():
    registry = SessionRegistry(VisualizerConfig(max_sessions=2))
    t1 = registry.create()
    t2 = registry.create()
    registry.get(t1)

    t3 = registry.create()

    assert len(registry) == 2
    assert t2 not in registry
    assert t1 in registry and t3 in registry
