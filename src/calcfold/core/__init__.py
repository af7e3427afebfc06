"""
calcfold core: lexer, parser, tree fold, and the line pipeline built on them.

    text ──Lexer──▶ tokens ──Parser──▶ tree ──fold(combiner)──▶ int | str
"""

from calcfold.core.fold import evaluate, fold, to_postfix, to_prefix
from calcfold.core.notation import parse_postfix, parse_prefix
from calcfold.core.parser import parse
from calcfold.core.pipeline import OutputMode, evaluate_line, render_all

__all__ = [
    "OutputMode",
    "evaluate",
    "evaluate_line",
    "fold",
    "parse",
    "parse_postfix",
    "parse_prefix",
    "render_all",
    "to_postfix",
    "to_prefix",
]
