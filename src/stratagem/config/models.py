"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, stratagem.toml only contains overrides.
An empty file (or no file at all) loads every entry-point strategy plugin.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    entry_points: bool = True
    local_dir: str | None = ".stratagem/plugins"
    blocked: list[str] = Field(default_factory=list)


class StratagemConfig(BaseModel):
    """Schema of a whole stratagem.toml file."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
