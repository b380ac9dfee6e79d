"""Shared pytest fixtures for safelist tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SAFELIST_* environment out of the tests."""
    monkeypatch.delenv("SAFELIST_CONFIG", raising=False)
    monkeypatch.delenv("SAFELIST_GROUPING__IGNORE_CASE", raising=False)
    monkeypatch.delenv("SAFELIST_GROUPING__SPLIT_WORDS", raising=False)
    monkeypatch.delenv("SAFELIST_WEIGHTED__PAIR_SEPARATOR", raising=False)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no safelist.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.  Tests that need the path can request ``tmp_path`` too.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``--verbose`` enables telemetry process-wide; switch it off again."""
    yield
    from safelist.services.telemetry import _current_span, disable_telemetry

    disable_telemetry()
    _current_span.set(None)
