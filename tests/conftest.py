"""Pytest configuration and fixtures."""

import textwrap
from pathlib import Path

import pytest

from dbconf import _dialects


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a YAML config file and return its path."""

    def write(content: str, name: str = "db.yml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path

    return write


@pytest.fixture
def isolated_dialects(monkeypatch: pytest.MonkeyPatch):
    """Let a test register dialects without leaking them to other tests."""
    monkeypatch.setattr(_dialects, "_DIALECTS", dict(_dialects._DIALECTS))
