"""
Shared pytest fixtures for uni2tex tests.

This module provides:
- Configuration fixtures (default, YAML files on disk)
- A CLI runner that sets ``sys.argv`` and captures the result
"""
from __future__ import annotations

import sys

import pytest


# ==============================================================================
# Configuration fixtures
# ==============================================================================

@pytest.fixture
def default_config():
    """Return default configuration."""
    from uni2tex.config import Config
    return Config()


@pytest.fixture
def write_config(tmp_path):
    """Return a factory writing YAML text to a config file and returning its path."""
    def _write(text: str, name: str = "config.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ==============================================================================
# CLI fixtures
# ==============================================================================

@pytest.fixture
def run_cli(monkeypatch, capsys):
    """Run ``uni2tex`` with the given arguments.

    Returns ``(exit_code, stdout, stderr)``; the exit code is 0 when
    ``main()`` returns normally.
    """
    from uni2tex.cli import main

    def _run(*args: str):
        monkeypatch.setattr(sys, "argv", ["uni2tex", *args])
        code = 0
        try:
            main()
        except SystemExit as exc:
            code = exc.code if isinstance(exc.code, int) else 1
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
