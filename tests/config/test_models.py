"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from padctl.config.models import DisplayConfig, PadConfig, StoreConfig


class TestDefaults:
    def test_empty_config_is_valid(self) -> None:
        config = PadConfig()
        assert config.store == StoreConfig()
        assert config.display.placeholder == "—"
        assert config.seed.catalog is None
        assert config.plugins.enabled is True

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            PadConfig().display.placeholder = "-"  # type: ignore[misc]


class TestDisplayConfig:
    def test_default_layer_label_is_one_based(self) -> None:
        assert DisplayConfig().default_layer_label(0) == "Layer 1"

    def test_index_placeholder(self) -> None:
        assert DisplayConfig(layer_label="L{index}").default_layer_label(2) == "L2"

    def test_layer_label_needs_placeholder(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(layer_label="Layer")
