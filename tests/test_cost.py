"""Tests for route cost accumulation."""

import pytest

from algorithms import bfs, dfs, path_cost, ucs
from graph import EdgeNotFound, GraphStore


def test_cost_sums_consecutive_paths(weighted_store: GraphStore):
    assert path_cost(weighted_store, ["A", "B", "C"]) == 10
    assert path_cost(weighted_store, ["C", "A"]) == 100


def test_single_city_route_costs_nothing(weighted_store: GraphStore):
    assert path_cost(weighted_store, ["A"]) == 0


def test_parallel_paths_use_the_first(store: GraphStore):
    store.add_path("A", "B", 7)
    store.add_path("A", "B", 2)
    assert path_cost(store, ["A", "B"]) == 7


def test_invalid_route_raises(weighted_store: GraphStore):
    with pytest.raises(EdgeNotFound):
        path_cost(weighted_store, ["A", "B", "Z"])


@pytest.mark.parametrize("search", [bfs, dfs, ucs])
@pytest.mark.parametrize("start, end", [("A", "C"), ("C", "A"), ("B", "B")])
def test_route_cost_is_the_sum_of_its_paths(weighted_store: GraphStore, search, start, end):
    route = search(weighted_store, start, end)
    assert route is not None
    assert route[0] == start and route[-1] == end
    expected = sum(weighted_store.edge_weight(a, b) for a, b in zip(route, route[1:]))
    assert path_cost(weighted_store, route) == expected


@pytest.mark.parametrize("search, total", [(bfs, 100), (dfs, 100), (ucs, 10)])
def test_known_route_totals(weighted_store: GraphStore, search, total):
    assert path_cost(weighted_store, search(weighted_store, "A", "C")) == total
