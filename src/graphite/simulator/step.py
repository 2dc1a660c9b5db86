"""Simulation steps: one immutable snapshot per point of algorithm progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from graphite.simulator.state import State

Highlights = Mapping[str, str]


def _frozen(mapping: Mapping[str, str] | Iterable[tuple[str, str]]) -> Highlights:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Step:
    """What a step-by-step viewer shows for one step.

    Highlight maps go from vertex or edge id to a colour name.
    """

    description: str
    states: tuple[State, ...] = ()
    vertex_highlights: Highlights = field(default_factory=lambda: _frozen({}))
    edge_highlights: Highlights = field(default_factory=lambda: _frozen({}))
    labels: Mapping[str, str] = field(default_factory=lambda: _frozen({}))

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "states": [s.to_dict() for s in self.states],
            "vertex_highlights": dict(self.vertex_highlights),
            "edge_highlights": dict(self.edge_highlights),
            "labels": dict(self.labels),
        }


class StepBuilder:
    """Collects the parts of a Step; ``build`` copies them into a frozen Step."""

    def __init__(self, description: str) -> None:
        self._description = description
        self._states: tuple[State, ...] = ()
        self._vertex_highlights: dict[str, str] = {}
        self._edge_highlights: dict[str, str] = {}
        self._labels: dict[str, str] = {}

    def state(self, states: Iterable[State]) -> StepBuilder:
        self._states = tuple(states)
        return self

    def vertex_highlights(self, highlights: Mapping[str, str]) -> StepBuilder:
        self._vertex_highlights = dict(highlights)
        return self

    def edge_highlights(self, highlights: Mapping[str, str]) -> StepBuilder:
        self._edge_highlights = dict(highlights)
        return self

    def labels(self, labels: Mapping[str, str]) -> StepBuilder:
        self._labels = dict(labels)
        return self

    def build(self) -> Step:
        return Step(
            description=self._description,
            states=self._states,
            vertex_highlights=_frozen(self._vertex_highlights),
            edge_highlights=_frozen(self._edge_highlights),
            labels=_frozen(self._labels),
        )
