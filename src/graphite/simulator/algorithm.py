"""Algorithm descriptor: metadata plus a step generator over a Graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from graphite.ir.graph import Graph
from graphite.simulator.step import Step


@dataclass(frozen=True)
class Param:
    name: str
    type: str
    required: bool = True


@dataclass(frozen=True)
class Algorithm:
    name: str
    description: str
    tags: tuple[str, ...]
    params: tuple[Param, ...]
    step_generator: Callable[..., list[Step]]
    guide: str = ""

    def run(self, graph: Graph, **params: Any) -> list[Step]:
        """Check parameters against the graph, then generate the steps."""
        for param in self.params:
            value = params.get(param.name)
            if value is None:
                if param.required:
                    raise ValueError(f"{self.name}: missing parameter '{param.name}'")
                continue
            if param.type == "vertex" and value not in graph.vertices:
                raise ValueError(f"{self.name}: unknown vertex '{value}' for '{param.name}'")
        unknown = set(params) - {p.name for p in self.params}
        if unknown:
            raise ValueError(f"{self.name}: unknown parameter(s) {', '.join(sorted(unknown))}")
        return self.step_generator(graph, **params)
