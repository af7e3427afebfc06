"""
Lexer for calcfold arithmetic expressions.

Converts an input line into typed tokens, one at a time, on demand.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum, auto

from calcfold.core.errors import ErrorContext, LexError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    INTEGER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token. ``value`` is set only for INTEGER tokens."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: int | None, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, pos={self.pos})"

    def __str__(self) -> str:
        if self.kind == TokenKind.INTEGER:
            return f"{self.kind.name} {self.value}"
        return self.kind.name


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# Characters allowed directly after a digit run (besides whitespace)
_NUMBER_FOLLOWERS = frozenset("+-*/)")

# ASCII only: str.isdigit() also accepts superscripts that int() rejects
_DIGITS_RE = re.compile(r"[0-9]+")


class Lexer:
    """Pull-based lexer over a single input line.

    The cursor only moves forward; tokens are never pushed back. Once the
    input is exhausted every further call returns an EOF token.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def next_token(self) -> Token:
        """Return the next token and advance past it.

        Raises:
            LexError: On a character outside the token alphabet, or a digit
                run followed by something other than an operator, ``)``,
                whitespace or end of input.
        """
        self._skip_whitespace()

        if self.at_end:
            return self._emit(Token(TokenKind.EOF, None, self.pos))

        start = self.pos
        c = self.text[start]

        m = _DIGITS_RE.match(self.text, start)
        if m:
            end = m.end()
            if end < len(self.text):
                follower = self.text[end]
                if follower not in _NUMBER_FOLLOWERS and not follower.isspace():
                    raise LexError(
                        f"malformed number: {m.group(0)!r} followed by {follower!r}",
                        char=follower,
                        pos=end,
                        context=ErrorContext(self.text, end),
                    )
            try:
                value = int(m.group(0))
            except ValueError:
                # sys.get_int_max_str_digits() limit
                raise LexError(
                    f"integer literal too long ({end - start} digits)",
                    char=c,
                    pos=start,
                ) from None
            self.pos = end
            return self._emit(Token(TokenKind.INTEGER, value, start))

        kind = _SINGLE_CHAR.get(c)
        if kind is not None:
            self.pos += 1
            return self._emit(Token(kind, None, start))

        raise LexError(
            f"invalid token: {c!r}",
            char=c,
            pos=start,
            context=ErrorContext(self.text, start),
        )

    def _skip_whitespace(self) -> None:
        while not self.at_end and self.text[self.pos].isspace():
            self.pos += 1

    @staticmethod
    def _emit(token: Token) -> Token:
        logger.debug("lexed %s at %d", token, token.pos)
        return token


def tokenize(text: str) -> list[Token]:
    """Tokenize a whole line, including the trailing EOF token."""
    lexer = Lexer(text)
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.kind == TokenKind.EOF:
            return tokens
