"""
calcfold CLI.

Commands:
- eval:   Evaluate or render a single expression
- repl:   Interactive read-eval-print loop
- tokens: Show the token stream for an expression
- tree:   Show infix, postfix, and prefix forms of an expression
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console

from calcfold._version import get_version
from calcfold.core.config import CalcConfig, load_config, parse_mode
from calcfold.core.errors import CalcError, ConfigError
from calcfold.core.lexer import tokenize
from calcfold.core.pipeline import OutputMode, evaluate_line, render_all

app = typer.Typer(
    help="""calcfold – integer arithmetic evaluator

Output modes:
  • numeric: computed result       2+3*4 → 14
  • postfix: Polish notation       2+3*4 → 2 3 4 * +
  • prefix:  Lisp-style notation   2+3*4 → (+ 2 (* 3 4))
""",
    no_args_is_help=True,
)

console = Console(highlight=False, soft_wrap=True)

_QUIT_COMMANDS = ("quit", "q", "exit")


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"calcfold version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def _print_error(message: str) -> None:
    console.print(f"error: {message}", style="red", markup=False, emoji=False)


def _config(ctx: typer.Context) -> CalcConfig:
    if isinstance(ctx.obj, CalcConfig):
        return ctx.obj
    return CalcConfig()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log lexer and parser activity"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: ./calcfold.toml if present)"
    ),
) -> None:
    """calcfold CLI main callback for global options."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        _print_error(str(e))
        raise typer.Exit(code=2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Infix expression, e.g. '(2 + 3) * 4'"),
    mode: OutputMode | None = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help="Output mode (default from config)"
    ),
) -> None:
    """Evaluate or render a single expression."""
    mode = mode or _config(ctx).mode
    try:
        typer.echo(evaluate_line(expression, mode))
    except CalcError as e:
        _print_error(str(e))
        raise typer.Exit(code=1)


@app.command(name="repl")
def repl_command(
    ctx: typer.Context,
    mode: OutputMode | None = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help="Initial output mode"
    ),
    prompt: str | None = typer.Option(None, "--prompt", help="Prompt text"),
) -> None:
    """Read expressions line by line until end of input.

    Blank lines are skipped. ':mode NAME' switches the output mode and
    ':quit' leaves the loop.
    """
    config = _config(ctx)
    mode = mode or config.mode
    prompt = config.prompt if prompt is None else prompt

    while True:
        typer.echo(prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            typer.echo("")
            break

        text = line.strip()
        if not text:
            continue

        if text.startswith(":"):
            command, _, arg = text[1:].partition(" ")
            if command in _QUIT_COMMANDS:
                break
            if command == "mode":
                try:
                    mode = parse_mode(arg)
                except ConfigError as e:
                    _print_error(str(e))
                    continue
                typer.echo(f"mode: {mode}")
                continue
            _print_error(f"unknown command :{command}")
            continue

        try:
            typer.echo(evaluate_line(text, mode))
        except CalcError as e:
            _print_error(str(e))


@app.command(name="tokens")
def tokens_command(
    expression: str = typer.Argument(..., help="Infix expression to tokenize"),
) -> None:
    """Show the token stream for an expression."""
    try:
        tokens = tokenize(expression)
    except CalcError as e:
        _print_error(str(e))
        raise typer.Exit(code=1)

    for tok in tokens:
        typer.echo(str(tok))


@app.command(name="tree")
def tree_command(
    expression: str = typer.Argument(..., help="Infix expression to render"),
) -> None:
    """Show infix, postfix, and prefix forms of an expression."""
    try:
        forms = render_all(expression)
    except CalcError as e:
        _print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(f"infix:   {forms['infix']}")
    typer.echo(f"postfix: {forms['postfix']}")
    typer.echo(f"prefix:  {forms['prefix']}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
