"""Locate ``safelist.toml`` for the current invocation.

``SAFELIST_CONFIG`` wins when set; otherwise the nearest ``safelist.toml``
in the start directory or one of its ancestors is used.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "safelist.toml"
CONFIG_ENV_VAR = "SAFELIST_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    """Yield *start* and then each ancestor up to the filesystem root."""
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``SAFELIST_CONFIG`` that points at no file disables discovery.
    """
    if override := os.environ.get(CONFIG_ENV_VAR):
        pinned = Path(override)
        return pinned if pinned.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
