"""Tests for the Flask routes."""

import logging

import pytest

from graph import EdgeNotFound
from main import REGISTRY_KEY, create_app


def _add(client, a, b, d):
    return client.post("/api/paths", json={"from": a, "to": b, "distance": d})


@pytest.fixture
def mapped_client(client):
    """Client whose session already holds A-B 5, B-C 5, A-C 100."""
    for a, b, d in [("a", "b", "5"), ("b", "c", "5"), ("a", "c", "100")]:
        assert _add(client, a, b, d).status_code == 200
    return client


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "City Route Visualizer" in body
    assert 'id="btn-add-path"' in body


def test_add_path_normalises_input(client):
    res = _add(client, " nyc", "Boston ", "12")
    assert res.status_code == 200
    data = res.get_json()
    assert data["nodes"] == ["NYC", "BOSTON"]
    assert data["paths"] == [{"from": "NYC", "to": "BOSTON", "distance": 12}]
    assert "<svg" in data["svg"]


@pytest.mark.parametrize("distance", ["ten", "-3", "", "1.5"])
def test_bad_distance_is_400(client, distance):
    res = _add(client, "A", "B", distance)
    assert res.status_code == 400
    assert res.get_json()["field"] == "distance"
    assert client.get("/api/graph").get_json()["nodes"] == []


def test_blank_city_is_400(client):
    res = _add(client, "  ", "B", "1")
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_ucs_search(mapped_client):
    res = mapped_client.post("/api/search", json={"start": "a", "end": "c", "algorithm": "UCS"})
    assert res.status_code == 200
    data = res.get_json()

    assert data["path"] == ["A", "B", "C"]
    assert data["total_distance"] == 10
    assert data["result"] == "Path: A → B → C\nTotal Distance: 10"
    assert data["metrics"]["algo_key"] == "ucs"
    assert 'class="edge chosen" data-key="A|B"' in data["svg"]


def test_bfs_search(mapped_client):
    data = mapped_client.post("/api/search", json={"start": "A", "end": "C", "algorithm": "bfs"}).get_json()
    assert data["path"] == ["A", "C"]
    assert data["total_distance"] == 100


def test_search_not_found(mapped_client):
    data = mapped_client.post("/api/search", json={"start": "A", "end": "Q", "algorithm": "dfs"}).get_json()
    assert data["path"] is None
    assert data["result"] == "No path found"


def test_unknown_algorithm_is_400(mapped_client):
    res = mapped_client.post("/api/search", json={"start": "A", "end": "C", "algorithm": "astar"})
    assert res.status_code == 400
    assert "astar" in res.get_json()["error"]


def test_step_navigation(mapped_client):
    assert mapped_client.post("/api/step/next").status_code == 400

    mapped_client.post("/api/search", json={"start": "A", "end": "C", "algorithm": "bfs"})

    assert mapped_client.post("/api/step/prev").status_code == 400
    data = mapped_client.post("/api/step/next").get_json()
    assert data["current_step"] == 1
    assert "code-line highlight" in data["pseudocode"]

    total = data["total_steps"]
    data = mapped_client.post("/api/step/goto", json={"index": total - 1}).get_json()
    assert data["is_finished"]
    assert mapped_client.post("/api/step/next").status_code == 400

    assert mapped_client.post("/api/step/goto", json={"index": total}).status_code == 400
    assert mapped_client.post("/api/step/goto", json={"index": "1"}).status_code == 400


def test_reset(mapped_client):
    mapped_client.post("/api/search", json={"start": "A", "end": "C", "algorithm": "ucs"})
    res = mapped_client.post("/api/reset")
    assert res.status_code == 200
    assert res.get_json()["nodes"] == []
    assert mapped_client.get("/api/graph").get_json()["paths"] == []
    assert mapped_client.post("/api/step/next").status_code == 400


def test_sessions_are_isolated(app, mapped_client):
    other = app.test_client()
    assert other.get("/api/graph").get_json()["nodes"] == []
    assert mapped_client.get("/api/graph").get_json()["nodes"] == ["A", "B", "C"]


def test_edge_not_found_is_500_and_logged(app, client, caplog, monkeypatch):
    def broken(self, algo_key, start, end):
        raise EdgeNotFound(start, end)

    monkeypatch.setattr("engine.session.Session.search", broken)
    _add(client, "A", "B", "1")

    with caplog.at_level(logging.ERROR, logger="route_visualizer"):
        res = client.post("/api/search", json={"start": "A", "end": "B", "algorithm": "bfs"})

    assert res.status_code == 500
    assert any(r.exc_info for r in caplog.records)


def test_read_only_visits_store_no_session(app):
    for _ in range(50):
        anon = app.test_client(use_cookies=False)
        assert anon.get("/api/graph").status_code == 200
        assert anon.get("/").status_code == 200
        assert anon.post("/api/step/next").status_code == 400

    assert len(app.extensions[REGISTRY_KEY]) == 0


def test_registry_is_capped(config):
    config.max_sessions = 2
    capped = create_app(config)
    for _ in range(5):
        anon = capped.test_client(use_cookies=False)
        assert _add(anon, "A", "B", "1").status_code == 200

    assert len(capped.extensions[REGISTRY_KEY]) == 2


def test_evicted_browser_starts_over(config):
    config.max_sessions = 1
    capped = create_app(config)
    first, second = capped.test_client(), capped.test_client()
    _add(first, "A", "B", "1")
    _add(second, "C", "D", "1")

    assert first.get("/api/graph").get_json()["nodes"] == []
    assert second.get("/api/graph").get_json()["nodes"] == ["C", "D"]


def test_reset_button_clears_path_inputs(client):
    body = client.get("/").get_data(as_text=True)
    handler = body[body.index("$('btn-reset')"):]
    handler = handler[:handler.index("bindSearchForm();")]
    assert "['path-from', 'path-to', 'path-distance'].forEach(id => $(id).value = '')" in handler
