"""A CVRP solution built route by route.

Clients are numbered so that client ``k`` is node ``k + 1`` of the
instance; the marker ``1`` stands for the depot inside routes.
"""

from __future__ import annotations

from .vrplib import Instance

DEPOT = 1


class Solution:
    """Routes, their loads and lengths, kept up to date on every edit."""

    def __init__(self, instance: Instance) -> None:
        self._instance = instance
        self._successors: list[list[int]] = [[] for _ in range(instance.dimension)]
        self._routes: list[list[int]] = []
        self._loads: list[int] = []
        self._distances: list[float] = []

    @property
    def instance(self) -> Instance:
        return self._instance

    @property
    def routes(self) -> list[list[int]]:
        return [list(route) for route in self._routes]

    @property
    def loads(self) -> list[int]:
        return list(self._loads)

    @property
    def distances(self) -> list[float]:
        return list(self._distances)

    @property
    def successors(self) -> list[list[int]]:
        return [list(targets) for targets in self._successors]

    def _dist(self, a: int, b: int) -> float:
        return self._instance.distance_matrix[a][b]

    def _demand(self, client: int) -> int:
        return self._instance.demands[client + 1]

    def add_route(self, client: int) -> None:
        """Open a new route serving only ``client``."""
        self._routes.append([DEPOT, client, DEPOT])
        self._successors[0].append(client)
        self._successors[client].append(DEPOT)
        self._loads.append(self._demand(client))
        node = client + 1
        self._distances.append(self._dist(DEPOT, node) + self._dist(node, DEPOT))

    def add_client(self, client: int, route: int, before: int, after: int) -> None:
        """Insert ``client`` into ``route`` between ``before`` and ``after``."""
        targets = self._successors[before]
        if before != DEPOT and after in targets:
            targets.remove(after)
        targets.append(client)
        self._successors[client].append(after)
        self._loads[route] += self._demand(client)

        path = self._routes[route]
        node = client + 1
        if after == DEPOT:
            path.insert(len(path) - 1, client)
            self._distances[route] += (
                self._dist(before + 1, node) + self._dist(node, DEPOT)
                - self._dist(before + 1, DEPOT)
            )
        elif before == DEPOT:
            path.insert(1, client)
            self._distances[route] += (
                self._dist(DEPOT, node) + self._dist(node, after + 1)
                - self._dist(DEPOT, after + 1)
            )
        else:
            try:
                position = path.index(after)
            except ValueError:
                raise ValueError(f"client {after} is not in route {route}") from None
            path.insert(position, client)
            self._distances[route] += (
                self._dist(before + 1, node) + self._dist(node, after + 1)
                - self._dist(before + 1, after + 1)
            )

    def remove_client(self, client: int, route: int, before: int, after: int) -> None:
        """Take ``client`` out of ``route``, joining ``before`` to ``after``."""
        path = self._routes[route]
        try:
            position = path.index(client)
        except ValueError:
            raise ValueError(f"client {client} is not in route {route}") from None

        for targets in (self._successors[before], self._successors[client]):
            if targets:
                targets.pop()
        self._successors[before].append(after)

        del path[position]
        self._loads[route] -= self._demand(client)
        node = client + 1
        self._distances[route] += self._dist(before + 1, after + 1) - (
            self._dist(before + 1, node) + self._dist(node, after + 1)
        )

    def is_valid(self, route: int) -> bool:
        """Whether ``route`` fits the capacity and the fleet is large enough."""
        return (
            self._loads[route] <= self._instance.capacity
            and len(self._routes) <= self._instance.num_vehicles
        )

    def copy(self) -> "Solution":
        """An independent copy sharing the same instance."""
        other = Solution.__new__(Solution)
        other._instance = self._instance
        other._successors = self.successors
        other._routes = self.routes
        other._loads = self.loads
        other._distances = self.distances
        return other

    def format(self) -> str:
        """The solution as a VRPLIB-style solution report."""
        total = 0.0
        for distance in self._distances:
            total += distance
        lines = [
            f"NAME    : {self._instance.name}",
            f"ROUTES  : {len(self._routes)}",
            f"COST    : {total:g}",
            "SOLUTION_SECTION",
            " #R   SUMD        COST     LENGTH   #C     SEQUENCE",
        ]
        for number, (path, load, distance) in enumerate(
            zip(self._routes, self._loads, self._distances), start=1
        ):
            sequence = "".join(f"{client} " for client in path[1:-1])
            lines.append(
                f"{number:3d}  {load:5d}  {distance:10g}  {distance:10g}  "
                f"{len(path):4d}     {sequence}"
            )
        lines.extend(["DEPOT_SECTION", str(self._instance.depot_id), "END"])
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format()