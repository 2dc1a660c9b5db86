"""Error taxonomy shared by every compile stage.

Each error carries the stage that raised it, a message, and the source
position it refers to. All of them derive from ValueError so callers that
treat malformed input as a ValueError keep working.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Stage(Enum):
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"


@dataclass(frozen=True)
class Position:
    """A location in the source text.

    line and column are 1-based; offset is the 0-based character index.
    """

    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class CompileError(ValueError):
    """Base class for all compile failures."""

    stage: Stage

    def __init__(self, message: str, position: Position) -> None:
        super().__init__(f"{self.stage.value} error at {position}: {message}")
        self.message = message
        self.position = position

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, {self.position!r})"


class LexError(CompileError):
    """An unrecognized character in the source text."""

    stage = Stage.LEXICAL


class ParseError(CompileError):
    """A token sequence that matches no production."""

    stage = Stage.SYNTAX

    @classmethod
    def expected(cls, what: str, found: str, position: Position) -> ParseError:
        return cls(f"expected {what}, found {found}", position)


class SemanticError(CompileError):
    """A well-formed statement that breaks a graph rule."""

    stage = Stage.SEMANTIC
