"""
Readers for the postfix and prefix renderings produced by calcfold.core.fold.

Both readers reuse the infix Lexer, so the token alphabet and lexical
errors are identical across all three notations.

    parse_postfix("2 3 4 * +")        == parse("2 + 3 * 4")
    parse_prefix("(+ 2 (* 3 4))")     == parse("2 + 3 * 4")
"""

from __future__ import annotations

from calcfold.core.errors import ErrorContext, ParseError
from calcfold.core.ir import BinaryOp, Literal, Node
from calcfold.core.lexer import Lexer, TokenKind
from calcfold.core.parser import OPERATOR_TOKENS, Parser


def parse_postfix(text: str) -> Node:
    """Build a tree from postfix text such as ``"2 3 4 * +"``.

    Raises:
        LexError: On characters outside the token alphabet.
        ParseError: On parentheses, an operator short of operands, or
            leftover operands at end of input.
    """
    lexer = Lexer(text)
    stack: list[Node] = []

    while True:
        tok = lexer.next_token()
        if tok.kind == TokenKind.EOF:
            break

        if tok.kind == TokenKind.INTEGER:
            stack.append(Literal(value=tok.value))
            continue

        op = OPERATOR_TOKENS.get(tok.kind)
        if op is None:
            raise ParseError(
                f"expected INTEGER or operator, got {tok.kind.name}",
                expected="INTEGER or operator",
                actual=tok.kind.name,
                pos=tok.pos,
                context=ErrorContext(text, tok.pos),
            )
        if len(stack) < 2:
            raise ParseError(
                f"operator {op.value} needs two operands, found {len(stack)}",
                expected="INTEGER",
                actual=tok.kind.name,
                pos=tok.pos,
                context=ErrorContext(text, tok.pos),
            )
        right = stack.pop()
        left = stack.pop()
        stack.append(BinaryOp(op=op, left=left, right=right))

    if len(stack) != 1:
        expected = "operator" if stack else "INTEGER"
        raise ParseError(
            f"expected {expected}, got EOF ({len(stack)} operands left)",
            expected=expected,
            actual=TokenKind.EOF.name,
            pos=tok.pos,
            context=ErrorContext(text, tok.pos),
        )
    return stack[0]


class _PrefixParser(Parser):
    """node → INTEGER | "(" operator node node ")" """

    def parse_node(self) -> Node:
        tok = self.current

        if tok.kind == TokenKind.INTEGER:
            self.eat(TokenKind.INTEGER)
            return Literal(value=tok.value)

        if tok.kind == TokenKind.LPAREN:
            self.eat(TokenKind.LPAREN)
            op_tok = self.current
            op = OPERATOR_TOKENS.get(op_tok.kind)
            if op is None:
                raise self.error("operator", op_tok)
            self.eat(op_tok.kind)
            left = self.parse_node()
            right = self.parse_node()
            self.eat(TokenKind.RPAREN)
            return BinaryOp(op=op, left=left, right=right)

        raise self.error("INTEGER or LPAREN", tok)


def parse_prefix(text: str) -> Node:
    """Build a tree from fully-parenthesised prefix text such as ``"(+ 2 3)"``."""
    parser = _PrefixParser(Lexer(text))
    node = parser.parse_node()
    parser.eat(TokenKind.EOF)
    return node
