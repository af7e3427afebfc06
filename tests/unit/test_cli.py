"""Tests for the calcfold CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from calcfold.cli import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# calcfold eval
# ---------------------------------------------------------------------------


class TestEval:
    def test_numeric(self) -> None:
        result = runner.invoke(app, ["eval", "2+3*4"])
        assert result.exit_code == 0
        assert result.output.strip() == "14"

    @pytest.mark.parametrize(
        "mode, expected",
        [("postfix", "2 3 4 * +"), ("prefix", "(+ 2 (* 3 4))"), ("NUMERIC", "14")],
    )
    def test_mode_option(self, mode: str, expected: str) -> None:
        result = runner.invoke(app, ["eval", "--mode", mode, "2+3*4"])
        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_divide_by_zero(self) -> None:
        result = runner.invoke(app, ["eval", "5/(3-3)"])
        assert result.exit_code == 1
        assert "error: divide by zero" in result.output

    @pytest.mark.skipif(sys.get_int_max_str_digits() == 0, reason="no int digit limit")
    def test_result_too_large(self) -> None:
        result = runner.invoke(app, ["eval", "*".join(["9" * 1000] * 5)])
        assert result.exit_code == 1
        assert "error: result too large to render" in result.output

    def test_parse_error_shows_caret(self) -> None:
        result = runner.invoke(app, ["eval", "2 + * 3"])
        assert result.exit_code == 1
        assert "error: expected INTEGER or LPAREN, got STAR" in result.output
        assert "      ^" in result.output

    def test_invalid_mode(self) -> None:
        result = runner.invoke(app, ["eval", "--mode", "hex", "1"])
        assert result.exit_code != 0

    def test_mode_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALCFOLD_MODE", "prefix")
        result = runner.invoke(app, ["eval", "2+3"])
        assert result.exit_code == 0
        assert result.output.strip() == "(+ 2 3)"

    def test_flag_overrides_config(self, isolated_config: Path) -> None:
        (isolated_config / "calcfold.toml").write_text('[calcfold]\nmode = "prefix"\n')
        result = runner.invoke(app, ["eval", "-m", "numeric", "2+3"])
        assert result.output.strip() == "5"

    def test_bad_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALCFOLD_MODE", "roman")
        result = runner.invoke(app, ["eval", "2+3"])
        assert result.exit_code == 2
        assert "unknown output mode" in result.output


# ---------------------------------------------------------------------------
# calcfold repl
# ---------------------------------------------------------------------------


class TestRepl:
    def test_session(self) -> None:
        result = runner.invoke(
            app,
            ["repl", "--prompt", ""],
            input="2+3\n\n5/0\n(1+\n:mode prefix\n2+3\n:quit\n9\n",
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "5" in lines
        assert "error: divide by zero: 5 / 0" in lines
        assert "error: expected INTEGER or LPAREN, got EOF" in lines
        assert "mode: prefix" in lines
        assert "(+ 2 3)" in lines
        # Nothing after :quit is evaluated
        assert "9" not in lines

    def test_ends_at_eof(self) -> None:
        result = runner.invoke(app, ["repl"], input="7 * 6\n")
        assert result.exit_code == 0
        assert "calc> 42" in result.output

    def test_prompt_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALCFOLD_PROMPT", "rpn> ")
        result = runner.invoke(app, ["repl", "-m", "postfix"], input="1+2\n")
        assert "rpn> 1 2 +" in result.output

    def test_bad_mode_command(self) -> None:
        result = runner.invoke(app, ["repl", "--prompt", ""], input=":mode hex\n1+1\n")
        assert result.exit_code == 0
        assert "error: unknown output mode 'hex'" in result.output
        assert "2" in result.output.splitlines()

    def test_unknown_command(self) -> None:
        result = runner.invoke(app, ["repl", "--prompt", ""], input=":help\n")
        assert "error: unknown command :help" in result.output

    @pytest.mark.skipif(sys.get_int_max_str_digits() == 0, reason="no int digit limit")
    def test_survives_long_literal(self) -> None:
        result = runner.invoke(app, ["repl", "--prompt", ""], input="1" * 5000 + "\n2+3\n")
        assert result.exit_code == 0
        assert "error: integer literal too long (5000 digits)" in result.output
        assert "5" in result.output.splitlines()

    def test_survives_long_chain(self) -> None:
        chain = "+".join(["1"] * 3000)
        result = runner.invoke(app, ["repl", "--prompt", ""], input=f"{chain}\n2*3\n")
        assert result.exit_code == 0
        assert "error: expression too deep to evaluate" in result.output
        assert "6" in result.output.splitlines()


# ---------------------------------------------------------------------------
# calcfold tokens / tree / --version
# ---------------------------------------------------------------------------


class TestTokens:
    def test_lists_tokens(self) -> None:
        result = runner.invoke(app, ["tokens", "12 + (3)"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "INTEGER 12",
            "PLUS",
            "LPAREN",
            "INTEGER 3",
            "RPAREN",
            "EOF",
        ]

    def test_lex_error(self) -> None:
        result = runner.invoke(app, ["tokens", "12abc"])
        assert result.exit_code == 1
        assert "error: malformed number" in result.output


class TestTree:
    def test_renders_all_forms(self) -> None:
        result = runner.invoke(app, ["tree", "(2+3)*4"])
        assert result.exit_code == 0
        assert "infix:   ((2 + 3) * 4)" in result.output
        assert "postfix: 2 3 + 4 *" in result.output
        assert "prefix:  (* (+ 2 3) 4)" in result.output

    def test_parse_error(self) -> None:
        result = runner.invoke(app, ["tree", "2 3"])
        assert result.exit_code == 1
        assert "error: expected EOF, got INTEGER" in result.output

    def test_long_chain(self) -> None:
        result = runner.invoke(app, ["tree", "+".join(["1"] * 3000)])
        assert result.exit_code == 1
        assert "error: expression too deep to evaluate" in result.output


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "calcfold version" in result.output
