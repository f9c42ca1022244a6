"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, vecmin.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_SAMPLE = [18, 5, 7, 9, 27]
DEFAULT_PROMPT = "Enter a list of numbers; one per line"
DEFAULT_NOTICE = "What did I say about numbers?"


class SampleConfig(BaseModel):
    """[sample] section — the list used by ``vecmin sample``."""

    model_config = {"frozen": True}

    values: list[int] = Field(default_factory=lambda: list(DEFAULT_SAMPLE))


class ReaderConfig(BaseModel):
    """[reader] section — messages shown by ``vecmin read``."""

    model_config = {"frozen": True}

    prompt: str = DEFAULT_PROMPT
    notice: str = DEFAULT_NOTICE
