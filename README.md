# cvrpsolve

Tools for the Capacitated Vehicle Routing Problem (CVRP), with no
dependencies beyond the standard library.

- `cvrpsolve.vrplib` reads VRPLIB instance files and builds the Euclidean
  distance matrix.
- `cvrpsolve.solution` holds a set of routes with their load and length,
  kept up to date as clients are added or removed.
- `cvrpsolve.clarke_wright` builds a solution with the Clarke & Wright
  savings algorithm.
- `cvrpsolve.relocate` and `cvrpsolve.swap` improve routes by local search.
- `cvrpsolve.costs` sums route costs and demands.
- `cvrpsolve.insertion` holds the start of an insertion heuristic.
- `cvrpsolve.cli` is the `cvrpsolve` command.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cvrpsolve path/to/instance.vrp
```

This prints the instance name, dimension, number of vehicles, capacity,
depot id, number of nodes and the distance matrix (rows and columns 1 to
`DIMENSION`), then runs `insertion` and lists the routes it returned under
`Rutas generadas:`. Without an argument it prints a usage line and exits
with status 1; a file that cannot be opened also gives status 1.

## Reading instances

```python
from cvrpsolve.vrplib import Instance, read_instance

instance = read_instance("path/to/instance.vrp")
# or, from text already in memory:
instance = Instance.from_lines(text.splitlines())
```

The reader understands `NAME`, `DIMENSION`, `CAPACITY`, the optional
`VEHICLES`, `NODE_COORD_SECTION`, `DEMAND_SECTION`, `DEPOT_SECTION` and
`EOF`. An `Instance` has the fields `name`, `dimension`, `capacity`,
`num_vehicles`, `depot_id`, `nodes` (a list of `Node(id, x, y)`),
`demands` and `distance_matrix`. Node ids are 1-based and `demands` and
`distance_matrix` are indexed directly by node id, so index 0 is unused.
If there is no `VEHICLES` entry, `num_vehicles` is `DIMENSION - 1`.
A malformed data line, or a node id beyond `DIMENSION`, raises
`ValueError`. With no coordinates the distance matrix is empty.

## Solutions

A `Solution` numbers clients so that client `k` is node `k + 1` of the
instance, and uses `1` as the depot marker inside routes.

- `add_route(client)` opens a route depot → client → depot.
- `add_client(client, route, before, after)` inserts a client between two
  neighbours of route number `route`.
- `remove_client(client, route, before, after)` takes one out, joining its
  neighbours; a client not in the route raises `ValueError`.
- `is_valid(route)` checks the route's load against the capacity and the
  number of routes against `num_vehicles`.
- `routes`, `loads`, `distances`, `successors` and `instance` read the
  current state (lists are returned as copies); `copy()` gives an
  independent copy.
- `format()` (also `str(solution)`) renders the solution in the VRPLIB
  solution layout.

## Heuristics and local search

```python
from cvrpsolve.vrplib import read_instance
from cvrpsolve.clarke_wright import clarke_wright
from cvrpsolve.swap import Swap
from cvrpsolve.costs import total_cost

instance = read_instance("path/to/instance.vrp")
solution = clarke_wright(instance)
improved = Swap().solve(solution)
print(total_cost(improved))
print(improved.format())
```

- `clarke_wright(instance)` computes the savings of every pair of
  customers, orders them with `sort_savings` (largest first) and merges
  routes while the combined demand fits the capacity. If no saving is
  positive, every customer keeps its own route.
- `Swap().solve(solution)` repeatedly applies the first exchange of one
  client from each of two routes that lowers the total cost and fits the
  capacity, and returns a new `Solution`; the argument is left unchanged.
- `relocate(routes, instance)` works on plain lists of node ids, each
  starting and ending at the depot, and improves them in place by moving
  one customer at a time to the best position in another route.
- `routes_cost(routes, distances)` sums distances along route lists;
  `total_cost(solution)` applies it to a solution's routes;
  `route_demand(solution, index)` sums `instance.demands` over the entries
  of one route.

## What it does not do

`insertion(instance)` returns a `Solution` with no routes yet, so the
`cvrpsolve` command lists no routes; `find_closest_unvisited(instance,
unvisited)` only gives the distance from node 1 to the nearest of the given
nodes. The command does not run Clarke & Wright or the local searches, and
nothing writes solution files: `format()` returns the text.