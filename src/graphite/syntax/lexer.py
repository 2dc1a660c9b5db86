"""Character-level lexer shared by both graph languages.

A single forward-only cursor walks the source text and hands out one token
per call. Whitespace and single-line comments (``#`` or ``//``) are skipped.
What differs between languages is only the keyword and punctuation tables,
passed in as LexicalRules.
"""

from __future__ import annotations

import re
from typing import Iterator

from graphite.errors import LexError, Position
from graphite.syntax.types import ADOT_RULES, EOF_LITERAL, GRAPHENE_RULES, LexicalRules, Token

# ─── Patterns ────────────────────────────────────────────────────────────────

_WHITESPACE_RE = re.compile(r"\s+")
_COMMENT_RE = re.compile(r"(?:#|//)[^\r\n]*")
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


class Lexer:
    """Stateful cursor over one source string."""

    def __init__(self, src: str, rules: LexicalRules) -> None:
        self.src = src
        self.rules = rules
        self.pos = 0
        self.line = 1
        self.line_start = 0

    @classmethod
    def graphene(cls, src: str) -> Lexer:
        return cls(src, GRAPHENE_RULES)

    @classmethod
    def adot(cls, src: str) -> Lexer:
        return cls(src, ADOT_RULES)

    # ── Cursor helpers ───────────────────────────────────────────────────────

    def position(self) -> Position:
        return Position(line=self.line, column=self.pos - self.line_start + 1, offset=self.pos)

    def _advance_to(self, end: int) -> None:
        """Move the cursor to ``end``, keeping line accounting in step."""
        for m in _NEWLINE_RE.finditer(self.src, self.pos, end):
            self.line += 1
            self.line_start = m.end()
        self.pos = end

    def _skip_trivia(self) -> None:
        while True:
            m = _WHITESPACE_RE.match(self.src, self.pos) or _COMMENT_RE.match(self.src, self.pos)
            if not m:
                break
            self._advance_to(m.end())

    def _emit(self, kind, end: int) -> Token:
        token = Token(kind=kind, literal=self.src[self.pos : end], position=self.position())
        self._advance_to(end)
        return token

    # ── Public API ───────────────────────────────────────────────────────────

    def next_token(self) -> Token:
        """Return the next token; returns EOF forever once the input is used up.

        Raises:
            LexError: If the next character starts no token.
        """
        self._skip_trivia()
        kinds = self.rules.kinds
        if self.pos >= len(self.src):
            return Token(kind=kinds.EOF, literal=EOF_LITERAL, position=self.position())

        m = _IDENT_RE.match(self.src, self.pos)
        if m:
            kind = self.rules.keywords.get(m.group(0), kinds.Ident)
            return self._emit(kind, m.end())

        m = _NUMBER_RE.match(self.src, self.pos)
        if m:
            return self._emit(kinds.Number, m.end())

        for text, kind in self.rules.punctuation:
            if self.src.startswith(text, self.pos):
                return self._emit(kind, self.pos + len(text))

        char = self.src[self.pos]
        raise LexError(f"unexpected character {char!r} (0x{ord(char):X})", self.position())

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is self.rules.kinds.EOF:
                return


def tokenize(src: str, rules: LexicalRules) -> list[Token]:
    """Lex the whole of ``src`` into a list ending with the EOF token."""
    return list(Lexer(src, rules).tokens())
