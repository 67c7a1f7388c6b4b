"""The Clarke & Wright savings construction heuristic."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations, pairwise
from typing import Iterable

from .solution import DEPOT, Solution
from .vrplib import Instance


@dataclass(frozen=True)
class Saving:
    """The length saved by serving node ``j`` right after node ``i``."""

    i: int
    j: int
    value: float


def sort_savings(savings: list[Saving]) -> None:
    """Order ``savings`` in place from the largest value to the smallest."""
    # A plain exchange sort: the order it leaves among ties decides which
    # routes get merged first, so it is kept rather than using list.sort.
    for i in range(len(savings)):
        for j in range(i + 1, len(savings)):
            if savings[j].value > savings[i].value:
                savings[i], savings[j] = savings[j], savings[i]


def _customers(instance: Instance) -> list[int]:
    return [node for node in range(1, instance.dimension) if node != instance.depot_id]


def _all_savings(instance: Instance, customers: list[int]) -> list[Saving]:
    depot = instance.depot_id
    dist = instance.distance_matrix
    return [
        Saving(i, j, dist[depot][i] + dist[depot][j] - dist[i][j])
        for i, j in combinations(customers, 2)
    ]


def _build_solution(instance: Instance, paths: Iterable[list[int]]) -> Solution:
    solution = Solution(instance)
    index = 0
    for path in paths:
        clients = [node - 1 for node in path[1:-1]]
        if not clients:
            continue
        solution.add_route(clients[0])
        for previous, client in pairwise(clients):
            solution.add_client(client, index, previous, DEPOT)
        index += 1
    return solution


def clarke_wright(instance: Instance) -> Solution:
    """Build a solution by merging single-customer routes in order of saving."""
    depot = instance.depot_id
    customers = _customers(instance)
    routes: dict[int, list[int]] = {node: [depot, node, depot] for node in customers}
    loads: dict[int, int] = {node: instance.demands[node] for node in customers}

    savings = _all_savings(instance, customers)
    sort_savings(savings)

    if savings and savings[0].value <= 0:
        return _build_solution(instance, routes.values())

    for saving in savings:
        head = next((k for k, path in routes.items() if path[1] == saving.i), None)
        tail = next((k for k, path in routes.items() if path[-2] == saving.j), None)
        if head is None or tail is None or head == tail:
            continue
        if loads[head] + loads[tail] > instance.capacity:
            continue
        merged = routes[tail]
        merged[-1:] = routes[head][1:-1] + [depot]
        loads[tail] += loads[head]
        del routes[head]

    return _build_solution(instance, routes.values())