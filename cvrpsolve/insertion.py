"""The insertion construction heuristic."""

from __future__ import annotations

from itertools import chain
from typing import Iterable

from .solution import Solution
from .vrplib import Instance

_FAR_AWAY = 1_000_000_000.0


def find_closest_unvisited(instance: Instance, unvisited: Iterable[int]) -> float:
    """Distance from node 1 to the nearest of the ``unvisited`` nodes."""
    row = instance.distance_matrix[1]
    return min(chain([_FAR_AWAY], (row[node] for node in unvisited)))


def insertion(instance: Instance) -> Solution:
    """The starting solution of the insertion heuristic: no routes yet."""
    return Solution(instance)