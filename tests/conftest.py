from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from saferules.rules.model import Rule
from saferules.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Keep config discovery away from the developer's cwd, HOME and env."""
    for key in list(os.environ):
        if key.startswith("SAFERULES_"):
            monkeypatch.delenv(key)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_rules() -> list[Rule]:
    return [
        Rule("CF1", "ControlFlow", "No goto", "Mandatory"),
        Rule("MEM1", "Memory", "No heap after init", "Mandatory"),
        Rule("CF4", "ControlFlow", "Default in every switch", "Recommended"),
        Rule("STY1", "Style", "Use stdint types", "Recommended"),
    ]


@pytest.fixture
def rule_file(tmp_path: Path):
    def _write(body: str, name: str = "extra_rules.toml") -> Path:
        path = tmp_path / name
        path.write_text(body.strip() + "\n", encoding="utf-8")
        return path

    return _write
