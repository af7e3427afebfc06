"""
calcfold: integer arithmetic evaluator with pluggable tree renderings.

Usage:
    from calcfold import OutputMode, evaluate_line

    evaluate_line("2 + 3 * 4")                      # "14"
    evaluate_line("2 + 3 * 4", OutputMode.POSTFIX)  # "2 3 4 * +"
    evaluate_line("2 + 3 * 4", OutputMode.PREFIX)   # "(+ 2 (* 3 4))"
"""

from calcfold._version import get_version
from calcfold.core.errors import (
    CalcError,
    DepthError,
    DivideByZeroError,
    EvalError,
    LexError,
    ParseError,
)
from calcfold.core.pipeline import OutputMode, evaluate_line

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcError",
    "DepthError",
    "DivideByZeroError",
    "EvalError",
    "LexError",
    "OutputMode",
    "ParseError",
    "evaluate_line",
]
