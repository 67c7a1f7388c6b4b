"""Cost and demand totals over routes."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from .solution import Solution


def routes_cost(routes: Sequence[Sequence[int]], distances: Sequence[Sequence[float]]) -> float:
    """Sum of the distances between consecutive nodes of every route."""
    total = 0.0
    for route in routes:
        for origin, target in pairwise(route):
            total += distances[origin][target]
    return total


def total_cost(solution: Solution) -> float:
    """Total length of a solution's routes, read off the distance matrix."""
    return routes_cost(solution.routes, solution.instance.distance_matrix)


def route_demand(solution: Solution, route_index: int) -> int:
    """Sum of the demands of the nodes listed in one route."""
    demands = solution.instance.demands
    return sum(demands[node] for node in solution.routes[route_index])