"""Shared pytest fixtures for calcfold tests."""

from pathlib import Path

import pytest

from calcfold.core.config import LOG_LEVEL_ENV_VAR, MODE_ENV_VAR, PROMPT_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory with no CALCFOLD_* variables set."""
    for var in (MODE_ENV_VAR, PROMPT_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
