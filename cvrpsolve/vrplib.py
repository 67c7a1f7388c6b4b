"""Reading CVRP instances in the VRPLIB text format."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Node:
    """A customer or depot with its planar coordinates."""

    id: int
    x: float
    y: float


def _header_text(rest: str) -> str:
    text = rest.strip()
    if text.startswith(":"):
        text = text[1:].lstrip()
    return text


def _header_int(rest: str) -> int:
    tokens = _header_text(rest).split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


@dataclass
class Instance:
    """A capacitated vehicle routing instance.

    Node ids are 1-based; ``demands`` and ``distance_matrix`` are indexed
    directly by node id, so index 0 is unused.
    """

    name: str = ""
    dimension: int = 0
    capacity: int = 0
    num_vehicles: int = 0
    depot_id: int = 0
    nodes: list[Node] = field(default_factory=list)
    demands: list[int] = field(default_factory=list)
    distance_matrix: list[list[float]] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "Instance":
        """Parse the instance stored at ``path``."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Instance":
        """Parse an instance from an iterable of text lines."""
        instance = cls()
        section = ""

        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            keyword = tokens[0]
            rest = line.lstrip()[len(keyword):]

            if keyword == "NAME":
                instance.name = _header_text(rest)
            elif keyword == "DIMENSION":
                instance.dimension = _header_int(rest)
            elif keyword == "CAPACITY":
                instance.capacity = _header_int(rest)
            elif keyword == "VEHICLES":
                instance.num_vehicles = _header_int(rest)
            elif keyword == "NODE_COORD_SECTION":
                section = keyword
            elif keyword == "DEMAND_SECTION":
                section = keyword
                missing = instance.dimension + 1 - len(instance.demands)
                instance.demands.extend([0] * max(0, missing))
            elif keyword == "DEPOT_SECTION":
                section = keyword
            elif keyword == "EOF":
                break
            elif keyword[0] in _DIGITS:
                instance._read_data_line(section, tokens, line)

        if instance.num_vehicles == 0:
            instance.num_vehicles = max(instance.dimension - 1, 0)

        instance.distance_matrix = instance._euclidean_matrix()
        return instance

    def _read_data_line(self, section: str, tokens: list[str], line: str) -> None:
        try:
            if section == "NODE_COORD_SECTION":
                self.nodes.append(Node(int(tokens[0]), float(tokens[1]), float(tokens[2])))
            elif section == "DEMAND_SECTION":
                node_id, demand = int(tokens[0]), int(tokens[1])
                if 1 <= node_id <= self.dimension:
                    self.demands[node_id] = demand
            elif section == "DEPOT_SECTION":
                self.depot_id = int(tokens[0])
        except (ValueError, IndexError) as exc:
            raise ValueError(f"malformed data line: {line.strip()!r}") from exc

    def _euclidean_matrix(self) -> list[list[float]]:
        if not self.nodes:
            return []
        size = self.dimension + 1
        for node in self.nodes:
            if not 0 <= node.id < size:
                raise ValueError(
                    f"node id {node.id} is outside the declared dimension {self.dimension}"
                )
        matrix = [[0.0] * size for _ in range(size)]
        for i, a in enumerate(self.nodes):
            for b in self.nodes[i:]:
                dx = a.x - b.x
                dy = a.y - b.y
                distance = math.sqrt(dx * dx + dy * dy)
                matrix[a.id][b.id] = distance
                matrix[b.id][a.id] = distance
        return matrix


def read_instance(path: str | PathLike[str]) -> Instance:
    """Read a VRPLIB instance file."""
    return Instance.from_file(path)