"""
Configuration for the calcfold front end.

Values are resolved in this order (later wins):
    1. Built-in defaults
    2. ``[calcfold]`` table in ``calcfold.toml`` (current directory)
    3. CALCFOLD_MODE / CALCFOLD_PROMPT / CALCFOLD_LOG_LEVEL environment variables

CLI flags override the resolved config at the call site.

Example calcfold.toml:
    [calcfold]
    mode = "postfix"
    prompt = "rpn> "
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from calcfold.core.errors import ConfigError
from calcfold.core.pipeline import OutputMode

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "calcfold.toml"

MODE_ENV_VAR = "CALCFOLD_MODE"
PROMPT_ENV_VAR = "CALCFOLD_PROMPT"
LOG_LEVEL_ENV_VAR = "CALCFOLD_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CalcConfig:
    """Front-end settings."""

    mode: OutputMode = OutputMode.NUMERIC
    prompt: str = "calc> "
    log_level: str = "WARNING"


def parse_mode(value: str) -> OutputMode:
    """Convert a user-supplied mode name to an OutputMode.

    Raises:
        ConfigError: If the name is not a known mode.
    """
    try:
        return OutputMode(value.lower().strip())
    except ValueError:
        choices = ", ".join(m.value for m in OutputMode)
        raise ConfigError(f"unknown output mode {value!r} (choose from {choices})") from None


def _parse_log_level(value: str) -> str:
    level = value.upper().strip()
    if level not in _LOG_LEVELS:
        logger.warning("Unknown log level '%s', falling back to WARNING", value)
        return "WARNING"
    return level


def load_config(path: Path | None = None) -> CalcConfig:
    """Load configuration from file and environment.

    Args:
        path: Explicit config file. Defaults to ./calcfold.toml if present.

    Raises:
        ConfigError: On malformed TOML or an unknown mode.
    """
    config = CalcConfig()

    config_path = path or Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid {config_path}: {e}") from e

        section = data.get("calcfold", {})
        if "mode" in section:
            config.mode = parse_mode(str(section["mode"]))
        if "prompt" in section:
            config.prompt = str(section["prompt"])
        if "log_level" in section:
            config.log_level = _parse_log_level(str(section["log_level"]))
    elif path is not None:
        raise ConfigError(f"config file not found: {path}")

    if env_mode := os.environ.get(MODE_ENV_VAR):
        config.mode = parse_mode(env_mode)
    if (env_prompt := os.environ.get(PROMPT_ENV_VAR)) is not None:
        config.prompt = env_prompt
    if env_level := os.environ.get(LOG_LEVEL_ENV_VAR):
        config.log_level = _parse_log_level(env_level)

    return config
