"""
Line-level entry point: text in, rendered result out.

Each call builds its own lexer, parser and tree, so calls are independent
and safe to run concurrently. Every failure leaves this module as a
CalcError subclass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import StrEnum

from calcfold.core.errors import CalcError, DepthError, EvalError
from calcfold.core.fold import evaluate, to_postfix, to_prefix
from calcfold.core.ir import Node
from calcfold.core.parser import parse

logger = logging.getLogger(__name__)


class OutputMode(StrEnum):
    """How a parsed line is rendered."""

    NUMERIC = "numeric"
    POSTFIX = "postfix"
    PREFIX = "prefix"


_RENDERERS: dict[OutputMode, Callable[[Node], str]] = {
    OutputMode.NUMERIC: lambda node: str(evaluate(node)),
    OutputMode.POSTFIX: to_postfix,
    OutputMode.PREFIX: to_prefix,
}


@contextmanager
def _request(text: str) -> Iterator[None]:
    """Translate interpreter limits into CalcErrors and log failures."""
    try:
        yield
    except RecursionError:
        # Left-deep chains recurse as much as nested parentheses
        e = DepthError("expression too deep to evaluate")
        logger.debug("failed %r: %s", text, e.message)
        raise e from None
    except ValueError:
        # Only str(int) can raise here: literals are bounded by the lexer
        e = EvalError("result too large to render")
        logger.debug("failed %r: %s", text, e.message)
        raise e from None
    except CalcError as e:
        logger.debug("failed %r: %s", text, e.message)
        raise


def evaluate_line(text: str, mode: OutputMode = OutputMode.NUMERIC) -> str:
    """Parse ``text`` and render it according to ``mode``.

    Args:
        text: One line of infix arithmetic (e.g., "(2 + 3) * 4")
        mode: numeric result, postfix rendering, or prefix rendering

    Returns:
        The rendered result as a string.

    Raises:
        LexError: On characters outside the token alphabet.
        ParseError: On grammar violations, including empty input.
        EvalError: On division by zero, or a result too long to print.
        DepthError: When the tree exceeds the interpreter's recursion limit.
    """
    render = _RENDERERS[OutputMode(mode)]
    logger.debug("evaluating %r as %s", text, mode)
    with _request(text):
        result = render(parse(text))
    logger.debug("result %r", result)
    return result


def render_all(text: str) -> dict[str, str]:
    """Parse ``text`` once and return its infix, postfix and prefix forms.

    Raises the same errors as :func:`evaluate_line`, except EvalError.
    """
    with _request(text):
        tree = parse(text)
        return {
            "infix": str(tree),
            "postfix": to_postfix(tree),
            "prefix": to_prefix(tree),
        }
