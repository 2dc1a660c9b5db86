"""AST data structures for both graph languages.

Every node is a frozen dataclass. The statement variants of each language
form a closed union (``GrapheneStatement``, ``AdotStatement``) that parsers
produce and interpreters match exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from graphite.errors import Position


@dataclass(frozen=True)
class Identifier:
    name: str
    position: Position


# ─── graphene (function-call language) ───────────────────────────────────────


@dataclass(frozen=True)
class WeightLiteral:
    """Weight argument as written; converted to a number by the interpreter."""

    text: str
    position: Position


@dataclass(frozen=True)
class VertexStmt:
    """``vertex(A)`` or ``vertex([A, B, C])``."""

    ids: tuple[Identifier, ...]
    position: Position


@dataclass(frozen=True)
class EdgeStmt:
    """``edge(A, [B, C], 5)``: one undirected edge per source/target pair."""

    sources: tuple[Identifier, ...]
    targets: tuple[Identifier, ...]
    weight: WeightLiteral | None
    position: Position


@dataclass(frozen=True)
class ArcStmt:
    """``arc(A, [B, C], 5)``: one directed edge per source/target pair."""

    sources: tuple[Identifier, ...]
    targets: tuple[Identifier, ...]
    weight: WeightLiteral | None
    position: Position


GrapheneStatement = Union[VertexStmt, EdgeStmt, ArcStmt]


# ─── adot (block/attribute language) ─────────────────────────────────────────


@dataclass(frozen=True)
class Attr:
    key: str
    value: str
    position: Position


@dataclass(frozen=True)
class AttrList:
    items: tuple[Attr, ...]
    position: Position

    def get(self, key: str) -> Attr | None:
        for attr in self.items:
            if attr.key == key:
                return attr
        return None


@dataclass(frozen=True)
class VertexRef:
    """A bare identifier statement, optionally with attributes: ``c [cost=10]``."""

    id: Identifier
    attrs: AttrList | None = None

    @property
    def position(self) -> Position:
        return self.id.position


@dataclass(frozen=True)
class Relation:
    """``a -> b`` (directed) or ``a -- b`` (undirected)."""

    source: Identifier
    target: Identifier
    directed: bool
    attrs: AttrList | None = None

    @property
    def position(self) -> Position:
        return self.source.position


@dataclass(frozen=True)
class Block:
    statements: tuple[AdotStatement, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SubgraphStmt:
    name: Identifier | None
    body: Block
    position: Position


AdotStatement = Union[VertexRef, Relation, SubgraphStmt]


@dataclass(frozen=True)
class Document:
    """The whole adot source: ``graph name? { ... }``."""

    name: Identifier | None
    body: Block
    position: Position
