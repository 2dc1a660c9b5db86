"""Dijkstra shortest-path trace.

An edge without a weight counts as weight 1.
"""

from __future__ import annotations

import heapq
import math

from graphite.ir.graph import Graph
from graphite.simulator.algorithm import Algorithm, Param
from graphite.simulator.state import TableState, TableStateBuilder
from graphite.simulator.step import Step, StepBuilder

DEFAULT_WEIGHT = 1.0


DIJKSTRA_GUIDE = """\
**Dijkstra's algorithm** finds the shortest distance from a start vertex to
every reachable vertex when no edge weight is negative. It settles the
closest unsettled vertex, then relaxes each of its outgoing edges. An edge
without a weight counts as 1.

```
procedure Dijkstra(G, source)
    dist[source] := 0, every other dist := infinity
    Q := priority queue holding source
    while Q is not empty
        u := vertex in Q with the smallest dist
        for each edge from u to v with weight w
            if dist[u] + w < dist[v]
                dist[v] := dist[u] + w
                prev[v] := u
                add v to Q
```
source: https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm
"""


def _format_distance(value: float) -> str:
    if math.isinf(value):
        return "∞"
    return f"{value:g}"


def _distance_table(graph: Graph, dist: dict[str, float], prev: dict[str, str | None]) -> TableState:
    table = TableStateBuilder("Distances").columns("Vertex", "Distance", "Previous")
    for vertex_id in graph.vertices:
        table.row(vertex_id, _format_distance(dist[vertex_id]), prev[vertex_id] or "-")
    return table.build()


def _labels(dist: dict[str, float]) -> dict[str, str]:
    return {vertex_id: _format_distance(d) for vertex_id, d in dist.items()}


def dijkstra_steps(graph: Graph, start: str) -> list[Step]:
    steps: list[Step] = []
    dist: dict[str, float] = {vertex_id: math.inf for vertex_id in graph.vertices}
    prev: dict[str, str | None] = {vertex_id: None for vertex_id in graph.vertices}
    via: dict[str, str] = {}
    done: set[str] = set()
    dist[start] = 0.0
    heap: list[tuple[float, str]] = [(0.0, start)]

    steps.append(
        StepBuilder(f"Set distance of start vertex {start} to 0, every other distance to infinity.")
        .state([_distance_table(graph, dist, prev)])
        .vertex_highlights({start: "sky"})
        .labels(_labels(dist))
        .build()
    )

    while heap:
        d, current = heapq.heappop(heap)
        if current in done or d > dist[current]:
            continue
        done.add(current)
        relaxed: dict[str, str] = {}
        improved: dict[str, str] = {}
        for edge_id in graph.vertices[current].outs:
            edge = graph.edges[edge_id]
            neighbour = edge.other(current)
            weight = DEFAULT_WEIGHT if edge.weight is None else edge.weight
            if neighbour in done or d + weight >= dist[neighbour]:
                continue
            dist[neighbour] = d + weight
            prev[neighbour] = current
            via[neighbour] = edge_id
            heapq.heappush(heap, (dist[neighbour], neighbour))
            relaxed[edge_id] = "sky"
            improved[neighbour] = "sky"

        steps.append(
            StepBuilder(f"Visit vertex {current} at distance {_format_distance(d)} and relax its edges.")
            .state([_distance_table(graph, dist, prev)])
            .vertex_highlights({**{v: "slate" for v in done}, **improved, current: "orange"})
            .edge_highlights(relaxed)
            .labels(_labels(dist))
            .build()
        )

    steps.append(
        StepBuilder("All reachable vertices are settled. End the algorithm.")
        .state([_distance_table(graph, dist, prev)])
        .vertex_highlights({v: "slate" for v in done})
        .edge_highlights({edge_id: "orange" for edge_id in via.values()})
        .labels(_labels(dist))
        .build()
    )
    return steps


dijkstra = Algorithm(
    name="Dijkstra",
    description="Watch shortest distances from a start vertex settle one vertex at a time.",
    tags=("shortest path",),
    params=(Param("start", "vertex"),),
    step_generator=dijkstra_steps,
    guide=DIJKSTRA_GUIDE,
)
