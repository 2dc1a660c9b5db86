"""Breadth-first search trace."""

from __future__ import annotations

from collections import deque

from graphite.ir.graph import Graph
from graphite.simulator.algorithm import Algorithm, Param
from graphite.simulator.state import ArrayState, ArrayStateBuilder
from graphite.simulator.step import Step, StepBuilder


BFS_GUIDE = """\
**BFS** visits every vertex at the current depth before moving one level
deeper. The iterative version keeps a queue so vertices come out in the
order they were found.

```
procedure BFS(G, root)
    let Q be a queue
    label root as explored
    Q.enqueue(root)
    while Q is not empty
        v := Q.dequeue()
        for each edge from v to w in G
            if w is not labeled as explored
                label w as explored
                Q.enqueue(w)
```
source: https://en.wikipedia.org/wiki/Breadth-first_search
"""


def _queue_state(queue: list[str], highlighted: list[int] | None = None) -> ArrayState:
    return ArrayStateBuilder("Queue").data(queue).highlighted(highlighted or []).build()


def _visit_order_state(visited: list[str]) -> ArrayState:
    return ArrayStateBuilder("Visit Order").data(visited).build()


def _visited_highlights(visited: list[str]) -> dict[str, str]:
    return {vertex_id: "slate" for vertex_id in visited}


def bfs_steps(graph: Graph, start: str) -> list[Step]:
    steps: list[Step] = []
    visited: list[str] = []
    queue: deque[str] = deque([start])

    steps.append(
        StepBuilder(f"Push start vertex {start} to the queue.")
        .state([_queue_state(list(queue), [0]), _visit_order_state(visited)])
        .vertex_highlights({start: "sky"})
        .build()
    )

    while queue:
        current = queue.popleft()
        steps.append(
            StepBuilder(f"Get first vertex {current} from the queue.")
            .state([_queue_state([current, *queue], [0]), _visit_order_state(visited)])
            .vertex_highlights({current: "sky", **_visited_highlights(visited)})
            .build()
        )

        if current in visited:
            steps.append(
                StepBuilder(f"Vertex {current} was already visited. Continue to the next step.")
                .state([_queue_state(list(queue)), _visit_order_state(visited)])
                .vertex_highlights(_visited_highlights(visited))
                .build()
            )
            continue

        visited.append(current)
        steps.append(
            StepBuilder(f"Mark vertex {current} as visited.")
            .state([_queue_state(list(queue)), _visit_order_state(visited)])
            .vertex_highlights(_visited_highlights(visited))
            .build()
        )

        added: list[int] = []
        pushed: dict[str, str] = {}
        edges: dict[str, str] = {}
        for edge_id in graph.vertices[current].outs:
            neighbour = graph.edges[edge_id].other(current)
            if neighbour in visited:
                continue
            added.append(len(queue))
            queue.append(neighbour)
            pushed[neighbour] = "sky"
            edges[edge_id] = "sky"

        steps.append(
            StepBuilder("Push all adjacent vertices to the queue.")
            .state([_queue_state(list(queue), added), _visit_order_state(visited)])
            .vertex_highlights({**_visited_highlights(visited), **pushed, current: "orange"})
            .edge_highlights(edges)
            .build()
        )

    steps.append(
        StepBuilder("There are no more vertices in the queue. End the algorithm.")
        .state([_queue_state([]), _visit_order_state(visited)])
        .vertex_highlights(_visited_highlights(visited))
        .build()
    )
    return steps


bfs = Algorithm(
    name="Breadth First Search",
    description="See how BFS explores vertices in your graph.",
    tags=("exploration",),
    params=(Param("start", "vertex"),),
    step_generator=bfs_steps,
    guide=BFS_GUIDE,
)
