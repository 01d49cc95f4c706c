"""Tests for the SVG map renderer and the HTML panels."""

from algorithms import bfs_steps, list_algorithms
from engine import RunMetrics
from graph import GraphStore, Layout
from ui import is_on_route, render_canvas, result_lines, result_panel, search_form


def _layout_for(store: GraphStore) -> Layout:
    layout = Layout(seed=11)
    for nid in store.node_ids():
        layout.place(nid)
    return layout


def test_each_path_is_drawn_once(weighted_store: GraphStore):
    svg = render_canvas(weighted_store, _layout_for(weighted_store))

    assert svg.startswith("<svg")
    assert svg.count('class="edge ') == 3
    assert svg.count('class="node ') == 3
    assert ">100</text>" in svg


def test_route_is_highlighted_in_either_direction(weighted_store: GraphStore):
    svg = render_canvas(weighted_store, _layout_for(weighted_store), path=["C", "B", "A"])

    assert 'class="edge chosen" data-key="A|B"' in svg
    assert 'class="edge chosen" data-key="B|C"' in svg
    assert 'class="edge default" data-key="A|C"' in svg
    assert svg.count('class="node path"') == 3


def test_is_on_route():
    route = ["A", "B", "C"]
    assert is_on_route("B", "A", route)
    assert is_on_route("B", "C", route)
    assert not is_on_route("A", "C", route)


def test_step_states_override_colours(chain_store: GraphStore):
    step = list(bfs_steps(chain_store, "A", "D"))[2]
    svg = render_canvas(chain_store, _layout_for(chain_store), step=step)

    assert 'class="node current" data-id="A"' in svg
    assert "Queue" in svg


def test_city_names_are_escaped(store: GraphStore):
    store.add_path("<B>", "A&B", 1)
    svg = render_canvas(store, _layout_for(store))

    assert "<B>" not in svg
    assert "&lt;B&gt;" in svg
    assert "A&amp;B" in svg


def test_unplaced_cities_are_skipped(chain_store: GraphStore):
    svg = render_canvas(chain_store, Layout(seed=0))
    assert 'class="node' not in svg


def test_result_lines():
    found = RunMetrics(path=["A", "B", "C"], path_found=True, total_distance=10)
    assert result_lines(found) == ["Path: A → B → C", "Total Distance: 10"]
    assert result_lines(RunMetrics()) == ["No path found"]
    assert result_lines(None) == []


def test_result_panel_escapes_route():
    metrics = RunMetrics(algo_label="BFS", path=["<X>", "Y"], path_found=True, total_distance=1)
    html = result_panel(metrics)
    assert "Path: &lt;X&gt; → Y" in html


def test_search_form_has_a_button_per_search():
    html = search_form(list_algorithms(), node_ids=["A", "B"])
    for key in ("bfs", "dfs", "ucs"):
        assert f'data-algo="{key}"' in html
    assert 'id="btn-reset"' in html
