"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, padctl.toml only holds
overrides. An empty (or missing) padctl.toml is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from padctl.infrastructure.database.engine import DEFAULT_DIRNAME, DEFAULT_FILENAME


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    dirname: str = DEFAULT_DIRNAME
    filename: str = DEFAULT_FILENAME
    backup_max_count: int = 10


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    placeholder: str = "—"
    layer_label: str = "Layer {number}"

    @field_validator("layer_label")
    @classmethod
    def _check_layer_label(cls, value: str) -> str:
        if "{number}" not in value and "{index}" not in value:
            msg = "layer_label must contain {number} or {index}"
            raise ValueError(msg)
        return value

    def default_layer_label(self, layer_index: int) -> str:
        """Fallback label for zero-based *layer_index*."""
        return self.layer_label.format(number=layer_index + 1, index=layer_index)


class SeedConfig(BaseModel):
    """[seed] section."""

    model_config = {"frozen": True}

    catalog: Path | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class PadConfig(BaseModel):
    """Root configuration composing all padctl.toml sections."""

    model_config = {"frozen": True}

    store: StoreConfig = Field(default_factory=StoreConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
