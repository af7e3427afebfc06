"""
Recursive descent parser for calcfold arithmetic expressions.

Grammar (precedence low to high):
    expr    → term (("+" | "-") term)*
    term    → factor (("*" | "/") factor)*
    factor  → INTEGER | "(" expr ")"

``expr`` and ``term`` fold to the left in a loop, so ``8-3-2`` is
``(8-3)-2``. The parenthesised branch of ``factor`` is the only recursion.
"""

from __future__ import annotations

import logging

from calcfold.core.errors import ErrorContext, ParseError
from calcfold.core.ir import BinaryOp, Literal, Node, OperatorKind
from calcfold.core.lexer import Lexer, Token, TokenKind

logger = logging.getLogger(__name__)

ADDITIVE_OPS: dict[TokenKind, OperatorKind] = {
    TokenKind.PLUS: OperatorKind.ADD,
    TokenKind.MINUS: OperatorKind.SUB,
}

MULTIPLICATIVE_OPS: dict[TokenKind, OperatorKind] = {
    TokenKind.STAR: OperatorKind.MUL,
    TokenKind.SLASH: OperatorKind.DIV,
}

OPERATOR_TOKENS: dict[TokenKind, OperatorKind] = {**ADDITIVE_OPS, **MULTIPLICATIVE_OPS}


class Parser:
    """Recursive descent parser pulling tokens from a Lexer.

    Holds a single lookahead token. ``eat`` is the only method that
    advances the lexer and the only place a grammar mismatch is detected.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.current: Token = lexer.next_token()

    def eat(self, kind: TokenKind) -> Token:
        """Consume the lookahead if it is ``kind``, else raise ParseError."""
        tok = self.current
        if tok.kind != kind:
            raise self.error(kind.name, tok)
        logger.debug("eating %s", tok)
        self.current = self.lexer.next_token()
        return tok

    def error(self, expected: str, tok: Token) -> ParseError:
        return ParseError(
            f"expected {expected}, got {tok.kind.name}",
            expected=expected,
            actual=tok.kind.name,
            pos=tok.pos,
            context=ErrorContext(self.lexer.text, tok.pos),
        )

    # -- Grammar rules --

    def parse_expr(self) -> Node:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in ADDITIVE_OPS:
            op = ADDITIVE_OPS[self.current.kind]
            self.eat(self.current.kind)
            right = self.parse_term()
            left = BinaryOp(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Node:
        """factor (('*' | '/') factor)*"""
        left = self.parse_factor()
        while self.current.kind in MULTIPLICATIVE_OPS:
            op = MULTIPLICATIVE_OPS[self.current.kind]
            self.eat(self.current.kind)
            right = self.parse_factor()
            left = BinaryOp(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> Node:
        """INTEGER | '(' expr ')'"""
        tok = self.current

        if tok.kind == TokenKind.INTEGER:
            self.eat(TokenKind.INTEGER)
            return Literal(value=tok.value)

        if tok.kind == TokenKind.LPAREN:
            self.eat(TokenKind.LPAREN)
            node = self.parse_expr()
            self.eat(TokenKind.RPAREN)
            return node

        raise self.error("INTEGER or LPAREN", tok)


def parse(text: str) -> Node:
    """Parse an infix expression line into an AST.

    Args:
        text: Expression line (e.g., "2 + 3 * (4 - 1)")

    Returns:
        Root node of the parsed tree.

    Raises:
        LexError: If the line contains a character outside the token alphabet.
        ParseError: If the tokens do not form exactly one expression.
    """
    parser = Parser(Lexer(text))
    node = parser.parse_expr()

    # Ensure all tokens consumed
    parser.eat(TokenKind.EOF)

    return node
