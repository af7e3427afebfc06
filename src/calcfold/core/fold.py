"""
Generic post-order fold over calcfold expression trees.

``fold`` walks a tree bottom-up and hands each node, together with the
already-folded results of its children, to a caller-supplied combiner.
Swapping the combiner changes the output (an integer, a postfix string,
a prefix string) without re-parsing.

Usage:
    from calcfold.core.fold import fold, evaluate_combine, postfix_combine

    tree = parse("2 + 3 * 4")
    fold(tree, evaluate_combine)   # 14
    fold(tree, postfix_combine)    # "2 3 4 * +"
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import TypeVar

from calcfold.core.errors import DivideByZeroError
from calcfold.core.ir import BinaryOp, Literal, Node, OperatorKind

R = TypeVar("R")

# combine(node, folded_left, folded_right); children are None for leaves
Combiner = Callable[[Node, R | None, R | None], R]


def fold(node: Node, combine: Combiner[R]) -> R:
    """Reduce ``node`` to a single value of the combiner's type.

    Children are folded left then right before ``combine`` sees the node.
    Any exception raised by ``combine`` aborts the whole fold.

    Raises:
        TypeError: If ``node`` is not a Literal or BinaryOp.
    """
    if isinstance(node, Literal):
        return combine(node, None, None)

    if isinstance(node, BinaryOp):
        left = fold(node.left, combine)
        right = fold(node.right, combine)
        return combine(node, left, right)

    raise TypeError(f"Unknown node type: {type(node).__name__}")


# ---------------------------------------------------------------------------
# Arithmetic evaluation
# ---------------------------------------------------------------------------


def _divide(left: int, right: int) -> int:
    """Integer division truncating toward zero (not Python's floor)."""
    if right == 0:
        raise DivideByZeroError(left)
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_ARITHMETIC: dict[OperatorKind, Callable[[int, int], int]] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: _divide,
}


def evaluate_combine(node: Node, left: int | None, right: int | None) -> int:
    if isinstance(node, Literal):
        return node.value
    assert left is not None and right is not None
    return _ARITHMETIC[node.op](left, right)


# ---------------------------------------------------------------------------
# Renderings
# ---------------------------------------------------------------------------


def postfix_combine(node: Node, left: str | None, right: str | None) -> str:
    """``a b +``"""
    if isinstance(node, Literal):
        return str(node.value)
    return f"{left} {right} {node.op.value}"


def prefix_combine(node: Node, left: str | None, right: str | None) -> str:
    """``(+ a b)``"""
    if isinstance(node, Literal):
        return str(node.value)
    return f"({node.op.value} {left} {right})"


def evaluate(node: Node) -> int:
    """Compute the integer value of a tree.

    Raises:
        DivideByZeroError: If any division has a right operand of zero.
    """
    return fold(node, evaluate_combine)


def to_postfix(node: Node) -> str:
    return fold(node, postfix_combine)


def to_prefix(node: Node) -> str:
    return fold(node, prefix_combine)
