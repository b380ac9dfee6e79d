"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, safelist.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GroupingConfig(BaseModel):
    """[grouping] section — how ``group`` and ``stutter`` read their input."""

    model_config = {"frozen": True}

    ignore_case: bool = False
    split_words: bool = False


class WeightedConfig(BaseModel):
    """[weighted] section."""

    model_config = {"frozen": True}

    pair_separator: str = Field(default=":", min_length=1)
