"""Command line entry point: show an instance and run the insertion heuristic."""

from __future__ import annotations

import sys

from .insertion import insertion
from .vrplib import read_instance


def main(argv: list[str] | None = None) -> int:
    """Print a summary of a VRPLIB file and the routes the heuristic builds."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: cvrpsolve <path_to_vrp_file>", file=sys.stderr)
        return 1

    try:
        instance = read_instance(args[0])
    except OSError as exc:
        print(f"Error: Could not open file {args[0]}: {exc}", file=sys.stderr)
        return 1

    dimension = instance.dimension
    print(f"Instance Name: {instance.name}")
    print(f"Dimension: {dimension}")
    print(f"Number of Vehicles: {instance.num_vehicles}")
    print(f"Capacity: {instance.capacity}")
    print(f"Depot ID: {instance.depot_id}")
    print(len(instance.nodes))

    print("Distance matrix")
    for row in instance.distance_matrix[1:dimension + 1]:
        print("".join(f"{value:g} " for value in row[1:dimension + 1]))

    print("\nEjecutando Heuristica de insercion...\n")
    solution = insertion(instance)
    print("Rutas generadas:")
    for number, route in enumerate(solution.routes, start=1):
        print(f"Ruta {number}: " + "".join(f"{node} " for node in route))
    return 0


if __name__ == "__main__":
    sys.exit(main())