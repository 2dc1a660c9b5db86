"""Step-by-step algorithm traces over a compiled Graph."""

from __future__ import annotations

from typing import Any

from graphite.ir.graph import Graph
from graphite.simulator.algorithm import Algorithm, Param
from graphite.simulator.algorithms import ALGORITHMS
from graphite.simulator.state import ArrayState, ArrayStateBuilder, State, TableState, TableStateBuilder
from graphite.simulator.step import Step, StepBuilder


def run_algorithm(name: str, graph: Graph, **params: Any) -> list[Step]:
    """Run the registered algorithm ``name`` over ``graph``.

    Raises:
        ValueError: On an unknown algorithm, or parameters the graph cannot satisfy.
    """
    algorithm = ALGORITHMS.get(name)
    if algorithm is None:
        raise ValueError(f"Unknown algorithm '{name}'; use {', '.join(sorted(ALGORITHMS))}")
    return algorithm.run(graph, **params)


__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "ArrayState",
    "ArrayStateBuilder",
    "Param",
    "State",
    "Step",
    "StepBuilder",
    "TableState",
    "TableStateBuilder",
    "run_algorithm",
]
