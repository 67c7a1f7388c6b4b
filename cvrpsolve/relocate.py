"""Relocate local search: move single customers between routes."""

from __future__ import annotations

from typing import Iterator

from .costs import routes_cost
from .vrplib import Instance


def _moves(routes: list[list[int]], instance: Instance) -> Iterator[list[list[int]]]:
    demands = instance.demands
    for r1, source in enumerate(routes):
        for r2, target in enumerate(routes):
            if r1 == r2:
                continue
            target_load = sum(demands[node] for node in target[1:-1])
            for i in range(1, len(source) - 1):
                customer = source[i]
                if target_load + demands[customer] > instance.capacity:
                    continue
                for j in range(1, len(target)):
                    candidate = [list(route) for route in routes]
                    del candidate[r1][i]
                    candidate[r2].insert(j, customer)
                    yield candidate


def relocate(routes: list[list[int]], instance: Instance) -> None:
    """Improve ``routes`` in place by best-improvement customer relocation.

    Each route is a list of node ids that starts and ends at the depot.
    """
    distances = instance.distance_matrix
    while True:
        best_cost = routes_cost(routes, distances)
        best = None
        for candidate in _moves(routes, instance):
            cost = routes_cost(candidate, distances)
            if cost < best_cost:
                best_cost = cost
                best = candidate
        if best is None:
            return
        routes[:] = best