"""Inspectable state snapshots attached to simulation steps.

States are frozen; builders collect the pieces and produce one snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Union


@dataclass(frozen=True)
class ArrayState:
    """A titled sequence, e.g. a queue, with some positions highlighted."""

    title: str
    data: tuple[str, ...] = ()
    highlighted: frozenset[int] = frozenset()

    type: ClassVar[str] = "array"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "title": self.title, "data": list(self.data), "highlighted": sorted(self.highlighted)}


@dataclass(frozen=True)
class TableState:
    """A titled table, e.g. a distance table."""

    title: str
    columns: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    type: ClassVar[str] = "table"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "title": self.title, "columns": list(self.columns), "rows": [list(r) for r in self.rows]}


State = Union[ArrayState, TableState]


class ArrayStateBuilder:
    def __init__(self, title: str) -> None:
        self._title = title
        self._data: tuple[str, ...] = ()
        self._highlighted: frozenset[int] = frozenset()

    def data(self, items: Iterable[object]) -> ArrayStateBuilder:
        self._data = tuple(str(item) for item in items)
        return self

    def highlighted(self, indexes: Iterable[int]) -> ArrayStateBuilder:
        self._highlighted = frozenset(indexes)
        return self

    def build(self) -> ArrayState:
        return ArrayState(title=self._title, data=self._data, highlighted=self._highlighted)


class TableStateBuilder:
    def __init__(self, title: str) -> None:
        self._title = title
        self._columns: tuple[str, ...] = ()
        self._rows: list[tuple[str, ...]] = []

    def columns(self, *names: str) -> TableStateBuilder:
        self._columns = names
        return self

    def row(self, *cells: object) -> TableStateBuilder:
        if self._columns and len(cells) != len(self._columns):
            raise ValueError(f"row has {len(cells)} cells, table has {len(self._columns)} columns")
        self._rows.append(tuple(str(c) for c in cells))
        return self

    def build(self) -> TableState:
        return TableState(title=self._title, columns=self._columns, rows=tuple(self._rows))
