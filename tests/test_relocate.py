from cvrpsolve.costs import routes_cost
from cvrpsolve.relocate import relocate
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


COORDS = [(0, 0), (10, 0), (11, 0), (0, 10), (0, 11)]


def test_relocate_lowers_cost_and_keeps_customers():
    instance = make_instance(COORDS, [0, 1, 1, 1, 1], capacity=10)
    routes = [[1, 2, 4, 1], [1, 3, 5, 1]]
    before = routes_cost(routes, instance.distance_matrix)
    relocate(routes, instance)
    after = routes_cost(routes, instance.distance_matrix)
    assert after < before
    assert sorted(n for route in routes for n in route[1:-1]) == [2, 3, 4, 5]
    assert all(route[0] == 1 and route[-1] == 1 for route in routes)


def test_relocate_respects_capacity():
    instance = make_instance(COORDS, [0, 1, 1, 1, 1], capacity=2)
    routes = [[1, 2, 4, 1], [1, 3, 5, 1]]
    relocate(routes, instance)
    for route in routes:
        assert sum(instance.demands[n] for n in route[1:-1]) <= 2


def test_relocate_reaches_local_optimum():
    instance = make_instance(COORDS, [0, 1, 1, 1, 1], capacity=10)
    routes = [[1, 2, 4, 1], [1, 3, 5, 1]]
    relocate(routes, instance)
    settled = [list(route) for route in routes]
    relocate(routes, instance)
    assert routes == settled


def test_tight_capacity_blocks_every_move():
    instance = make_instance(COORDS, [0, 1, 1, 1, 1], capacity=1)
    routes = [[1, 2, 1], [1, 3, 1]]
    relocate(routes, instance)
    assert routes == [[1, 2, 1], [1, 3, 1]]


def test_single_route_is_left_alone():
    instance = make_instance(COORDS, [0, 1, 1, 1, 1], capacity=10)
    routes = [[1, 4, 2, 3, 5, 1]]
    relocate(routes, instance)
    assert routes == [[1, 4, 2, 3, 5, 1]]