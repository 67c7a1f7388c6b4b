import pytest

from cvrpsolve.clarke_wright import Saving, clarke_wright, sort_savings
from cvrpsolve.costs import routes_cost
from cvrpsolve.vrplib import Instance


def make_instance(coords, demands, capacity, depot=1):
    lines = [
        "NAME : sample",
        f"DIMENSION : {len(coords)}",
        f"CAPACITY : {capacity}",
        "NODE_COORD_SECTION",
    ]
    lines += [f"{k} {x} {y}" for k, (x, y) in enumerate(coords, start=1)]
    lines.append("DEMAND_SECTION")
    lines += [f"{k} {d}" for k, d in enumerate(demands, start=1)]
    lines += ["DEPOT_SECTION", str(depot), "-1", "EOF"]
    return Instance.from_lines(lines)


COORDS = [(0, 0), (10, 0), (11, 0), (0, 10), (0, 11), (50, 50)]
DEMANDS = [0, 1, 1, 1, 1, 1]


def test_sort_savings_orders_descending():
    savings = [Saving(1, 2, 1.0), Saving(1, 3, 3.0), Saving(2, 3, 2.0)]
    sort_savings(savings)
    assert [s.value for s in savings] == [3.0, 2.0, 1.0]


def test_sort_savings_keeps_every_element():
    savings = [Saving(1, 2, 5.0), Saving(1, 3, 7.0), Saving(2, 3, 5.0), Saving(2, 4, -1.0)]
    original = list(savings)
    sort_savings(savings)
    assert sorted(savings, key=lambda s: (s.i, s.j)) == sorted(original, key=lambda s: (s.i, s.j))
    assert all(a.value >= b.value for a, b in zip(savings, savings[1:]))


def test_sort_savings_handles_empty_list():
    savings = []
    sort_savings(savings)
    assert savings == []


def test_pairs_are_merged_within_capacity():
    solution = clarke_wright(make_instance(COORDS, DEMANDS, capacity=2))
    groups = {frozenset(route[1:-1]) for route in solution.routes}
    assert groups == {frozenset({1, 2}), frozenset({3, 4})}
    assert all(load <= 2 for load in solution.loads)


def test_last_node_is_not_served():
    solution = clarke_wright(make_instance(COORDS, DEMANDS, capacity=2))
    served = sorted(c for route in solution.routes for c in route[1:-1])
    assert served == [1, 2, 3, 4]


def test_large_capacity_gives_single_route():
    solution = clarke_wright(make_instance(COORDS, DEMANDS, capacity=100))
    assert len(solution.routes) == 1
    assert sorted(solution.routes[0][1:-1]) == [1, 2, 3, 4]
    assert solution.loads == [4]


def test_route_lengths_match_node_paths():
    instance = make_instance(COORDS, DEMANDS, capacity=2)
    solution = clarke_wright(instance)
    for route, distance in zip(solution.routes, solution.distances):
        nodes = [1] + [c + 1 for c in route[1:-1]] + [1]
        assert distance == pytest.approx(routes_cost([nodes], instance.distance_matrix))


def test_no_positive_saving_keeps_single_routes():
    instance = make_instance([(0, 0), (10, 0), (-10, 0), (5, 5)], [0, 1, 1, 1], capacity=10)
    solution = clarke_wright(instance)
    assert solution.routes == [[1, 1, 1], [1, 2, 1]]