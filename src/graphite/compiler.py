"""Compile pipeline: source text to a validated Graph.

Each language is a front end: a parser and an interpreter that share
nothing but the Graph they produce. The caller names the language; there is
no detection from the source text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from graphite.config import CompileConfig
from graphite.errors import CompileError
from graphite.interpreters import evaluate_adot, evaluate_graphene
from graphite.ir.graph import Graph
from graphite.parsers import parse_adot, parse_graphene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontEnd:
    name: str
    parse: Callable[[str], Any]
    evaluate: Callable[[Any], Graph]

    def compile(self, src: str) -> Graph:
        ast = self.parse(src)
        logger.debug("%s: parsed %d top-level node(s)", self.name, len(ast) if isinstance(ast, list) else 1)
        return self.evaluate(ast)


FRONT_ENDS: dict[str, FrontEnd] = {
    "graphene": FrontEnd("graphene", parse_graphene, evaluate_graphene),
    "adot": FrontEnd("adot", parse_adot, evaluate_adot),
}


def compile_source(src: str, language: str = "graphene") -> Graph:
    """Compile source text in ``language`` into a Graph.

    Raises:
        LexError: On an unrecognized character.
        ParseError: If the text does not follow the grammar.
        SemanticError: If the statements break a graph rule.
        ValueError: If ``language`` is unknown.
    """
    config = CompileConfig(language=language).validate()
    front_end = FRONT_ENDS[config.language]
    try:
        graph = front_end.compile(src)
    except CompileError as e:
        logger.debug("%s compile failed: %s", front_end.name, e)
        raise
    logger.debug("%s compile ok: %d vertices, %d edges", front_end.name, graph.vertex_count(), graph.edge_count())
    return graph


def compile_graphene(src: str) -> Graph:
    return compile_source(src, "graphene")


def compile_adot(src: str) -> Graph:
    return compile_source(src, "adot")
