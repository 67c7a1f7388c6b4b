from cvrpsolve.insertion import find_closest_unvisited, insertion
from cvrpsolve.vrplib import Instance


def make_instance():
    lines = [
        "NAME : sample",
        "DIMENSION : 3",
        "CAPACITY : 10",
        "NODE_COORD_SECTION",
        "1 0 0",
        "2 3 0",
        "3 0 4",
        "DEMAND_SECTION",
        "1 0",
        "2 1",
        "3 1",
        "DEPOT_SECTION",
        "1",
        "-1",
        "EOF",
    ]
    return Instance.from_lines(lines)


def test_closest_of_several():
    assert find_closest_unvisited(make_instance(), [2, 3]) == 3.0


def test_closest_of_one():
    assert find_closest_unvisited(make_instance(), [3]) == 4.0


def test_closest_of_none_is_the_sentinel():
    assert find_closest_unvisited(make_instance(), []) == 1_000_000_000


def test_insertion_starts_empty():
    solution = insertion(make_instance())
    assert solution.routes == []
    assert solution.loads == []
    assert solution.distances == []