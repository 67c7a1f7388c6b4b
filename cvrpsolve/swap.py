"""Swap local search: exchange customers between two routes."""

from __future__ import annotations

from .costs import total_cost
from .solution import Solution


class Swap:
    """First-improvement exchange of one customer from each of two routes."""

    def solve(self, solution: Solution) -> Solution:
        """Return an improved copy of ``solution``; the argument is not changed."""
        current = solution.copy()
        while True:
            improved = self._first_improvement(current)
            if improved is None:
                return current
            current = improved

    @staticmethod
    def _first_improvement(solution: Solution) -> Solution | None:
        instance = solution.instance
        demands = instance.demands
        capacity = instance.capacity
        best_cost = total_cost(solution)
        routes = solution.routes
        loads = solution.loads

        for r1, first in enumerate(routes):
            for r2, second in enumerate(routes):
                if r1 == r2:
                    continue
                for i in range(1, len(first) - 1):
                    for j in range(1, len(second) - 1):
                        c1, c2 = first[i], second[j]
                        d1, d2 = demands[c1 + 1], demands[c2 + 1]
                        if loads[r1] - d1 + d2 > capacity or loads[r2] - d2 + d1 > capacity:
                            continue
                        candidate = solution.copy()
                        prev1, next1 = first[i - 1], first[i + 1]
                        prev2, next2 = second[j - 1], second[j + 1]
                        candidate.remove_client(c1, r1, prev1, next1)
                        candidate.remove_client(c2, r2, prev2, next2)
                        candidate.add_client(c2, r1, prev1, next1)
                        candidate.add_client(c1, r2, prev2, next2)
                        if total_cost(candidate) < best_cost:
                            return candidate
        return None