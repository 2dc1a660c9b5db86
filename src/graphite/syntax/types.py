"""Token definitions for both graph languages.

Each language has its own closed set of token kinds. The lexical rules
(keyword table and punctuation table) are module constants, built once and
never mutated, so any number of lexers can share them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from graphite.errors import Position


class GrapheneToken(Enum):
    Ident = "identifier"
    Number = "number"
    Vertex = "'vertex'"
    Edge = "'edge'"
    Arc = "'arc'"
    LParen = "'('"
    RParen = "')'"
    LBracket = "'['"
    RBracket = "']'"
    Comma = "','"
    Semicolon = "';'"
    Minus = "'-'"
    EOF = "end of input"


class AdotToken(Enum):
    Ident = "identifier"
    Number = "number"
    Graph = "'graph'"
    Subgraph = "'subgraph'"
    DirectedEdge = "'->'"
    Edge = "'--'"
    Minus = "'-'"
    LBrace = "'{'"
    RBrace = "'}'"
    LBracket = "'['"
    RBracket = "']'"
    Eq = "'='"
    Comma = "','"
    Semicolon = "';'"
    EOF = "end of input"


EOF_LITERAL = "<eof>"


@dataclass(frozen=True)
class Token:
    kind: Enum
    literal: str
    position: Position

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.literal == EOF_LITERAL:
            return self.kind.value
        if self.kind.name in ("Ident", "Number"):
            return f"{self.kind.value} {self.literal!r}"
        return self.kind.value


@dataclass(frozen=True)
class LexicalRules:
    """Keyword and punctuation tables for one language.

    ``kinds`` must define ``Ident``, ``Number`` and ``EOF`` members.
    ``punctuation`` is kept sorted longest-first so multi-character
    operators are never split.
    """

    kinds: type[Enum]
    keywords: Mapping[str, Enum]
    punctuation: tuple[tuple[str, Enum], ...]

    @classmethod
    def build(
        cls,
        kinds: type[Enum],
        keywords: dict[str, Enum],
        punctuation: list[tuple[str, Enum]],
    ) -> LexicalRules:
        ordered = tuple(sorted(punctuation, key=lambda pair: -len(pair[0])))
        return cls(kinds=kinds, keywords=MappingProxyType(dict(keywords)), punctuation=ordered)


GRAPHENE_RULES = LexicalRules.build(
    GrapheneToken,
    keywords={
        "vertex": GrapheneToken.Vertex,
        "edge": GrapheneToken.Edge,
        "arc": GrapheneToken.Arc,
    },
    punctuation=[
        ("(", GrapheneToken.LParen),
        (")", GrapheneToken.RParen),
        ("[", GrapheneToken.LBracket),
        ("]", GrapheneToken.RBracket),
        (",", GrapheneToken.Comma),
        (";", GrapheneToken.Semicolon),
        ("-", GrapheneToken.Minus),
    ],
)

ADOT_RULES = LexicalRules.build(
    AdotToken,
    keywords={
        "graph": AdotToken.Graph,
        "subgraph": AdotToken.Subgraph,
    },
    punctuation=[
        ("->", AdotToken.DirectedEdge),
        ("--", AdotToken.Edge),
        ("-", AdotToken.Minus),
        ("{", AdotToken.LBrace),
        ("}", AdotToken.RBrace),
        ("[", AdotToken.LBracket),
        ("]", AdotToken.RBracket),
        ("=", AdotToken.Eq),
        (",", AdotToken.Comma),
        (";", AdotToken.Semicolon),
    ],
)
