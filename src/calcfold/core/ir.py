"""
Arithmetic expression tree for calcfold.

The tree has exactly two node shapes:
- Literal: a non-negative integer leaf
- BinaryOp: an operator with two owned children

Nodes are frozen pydantic models, so a parsed tree can be shared between
renderers and compared structurally (``parse("1+2") == parse("1 + 2")``).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class OperatorKind(StrEnum):
    """Binary operators. The value is the operator's printed symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """An integer literal."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True, strict=True)

    def __str__(self) -> str:
        return str(self.value)


class BinaryOp(BaseModel):
    """Binary operation: left op right."""

    op: OperatorKind
    left: Node
    right: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Node = Literal | BinaryOp

# Rebuild models for recursive forward references
BinaryOp.model_rebuild()
