"""Algorithm registry."""

from graphite.simulator.algorithm import Algorithm
from graphite.simulator.algorithms.bfs import bfs
from graphite.simulator.algorithms.dijkstra import dijkstra

ALGORITHMS: dict[str, Algorithm] = {
    "bfs": bfs,
    "dijkstra": dijkstra,
}

__all__ = ["ALGORITHMS", "bfs", "dijkstra"]
