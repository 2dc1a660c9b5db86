"""Token cursor shared by both grammars' parsers."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator

from graphite.errors import ParseError
from graphite.syntax.types import Token


class TokenCursor:
    """One-token lookahead over a lazily produced token stream."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._current = next(self._tokens)

    @property
    def current(self) -> Token:
        return self._current

    def check(self, *kinds: Enum) -> bool:
        return self._current.kind in kinds

    def advance(self) -> Token:
        """Consume and return the current token; EOF is never consumed past."""
        token = self._current
        if token.kind.name != "EOF":
            self._current = next(self._tokens)
        return token

    def accept(self, *kinds: Enum) -> Token | None:
        if self.check(*kinds):
            return self.advance()
        return None

    def expect(self, *kinds: Enum, what: str | None = None) -> Token:
        """Consume the current token if it is one of ``kinds``.

        Raises ParseError naming the expected construct otherwise.
        """
        if self.check(*kinds):
            return self.advance()
        expected = what or " or ".join(k.value for k in kinds)
        raise ParseError.expected(expected, self._current.describe(), self._current.position)
