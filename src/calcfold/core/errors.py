"""
Error types for calcfold lexing, parsing, and evaluation.

Every error raised for bad user input derives from CalcError, so the
front end can report it and move on to the next line.
"""

from dataclasses import dataclass


class CalcError(Exception):
    """Base exception for all calcfold errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class LexError(CalcError):
    """
    Raised when the input line cannot be split into tokens.

    Examples:
    - A character outside digits, whitespace and + - * / ( )
    - A digit run followed by an unexpected character (``12abc``)
    """

    def __init__(
        self,
        message: str,
        char: str | None = None,
        pos: int = 0,
        context: "ErrorContext | None" = None,
    ):
        self.char = char
        self.pos = pos
        super().__init__(message, context)


class ParseError(CalcError):
    """
    Raised when the token stream does not match the grammar.

    Examples:
    - Missing operand (``2+``)
    - Unbalanced parenthesis (``(2+3``)
    - Trailing tokens after a complete expression (``2 3``)
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
        pos: int = 0,
        context: "ErrorContext | None" = None,
    ):
        self.expected = expected
        self.actual = actual
        self.pos = pos
        super().__init__(message, context)


class EvalError(CalcError):
    """Raised when a well-formed tree cannot be reduced to a value."""

    pass


class DivideByZeroError(EvalError):
    """Raised when the right operand of a division folds to zero."""

    def __init__(self, dividend: int):
        self.dividend = dividend
        super().__init__(f"divide by zero: {dividend} / 0")


class DepthError(CalcError):
    """
    Raised when a tree is too deep to build or walk recursively.

    Long operator chains (``1+1+...+1``) produce left-deep trees, so
    this is not limited to parenthesis nesting.
    """

    pass


class ConfigError(CalcError):
    """
    Raised when configuration values are invalid.

    Examples:
    - Unknown output mode in calcfold.toml or CALCFOLD_MODE
    - Malformed TOML
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error within a single input line.

    Attributes:
        text: The input line being processed
        column: Column of the offending character (0-indexed)
    """

    text: str
    column: int

    def format(self) -> str:
        """
        Format the input line with a caret under the error column.

        Returns:
            Two lines, e.g. ``"  2 + * 3"`` followed by ``"      ^"``
        """
        prefix = "  "
        marker_pos = len(prefix) + min(self.column, len(self.text))
        return f"{prefix}{self.text}\n{' ' * marker_pos}^"
