"""Tests for pipeline configuration and environment settings."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from ancestry_map.config.pipeline import PipelineConfig, load_pipeline_config
from ancestry_map.config.settings import Settings, load_default_data

from conftest import PIPELINE_YAML


class TestLoadFromYaml:
    """Test loading configuration from a YAML file."""

    def test_partial_override(self, tmp_path: Path) -> None:
        config_path = tmp_path / "pipeline.yaml"
        config_path.write_text(
            yaml.dump(
                {
                    "parsing": {"on_malformed_row": "abort"},
                    "matching": {"pair_strategy": "keyed"},
                    "gradient": {"low": [0, 0, 255]},
                }
            )
        )
        cfg = load_pipeline_config(config_path)
        assert cfg.parsing.on_malformed_row == "abort"
        assert cfg.parsing.on_degenerate_range == "zero"
        assert cfg.matching.pair_strategy == "keyed"
        assert cfg.gradient.low == (0.0, 0.0, 255.0)
        assert cfg.gradient.high == (0.0, 0.0, 0.0)

    def test_load_shipped_config(self) -> None:
        """The shipped config/pipeline.yaml matches the built-in defaults."""
        assert load_pipeline_config(PIPELINE_YAML) == PipelineConfig()

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")
        assert load_pipeline_config(config_path) == PipelineConfig()

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        assert load_pipeline_config(tmp_path / "nope.yaml") == PipelineConfig()


class TestValidation:
    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PipelineConfig(parsing={"on_malformed_row": "ignore"})

    def test_degenerate_weight_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PipelineConfig(parsing={"degenerate_weight": 2.0})


class TestSettings:
    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("ANCESTRY_MAP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ANCESTRY_MAP_LOG_JSON", "true")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_default_data_bundled(self) -> None:
        text = load_default_data(Settings())
        assert "Praha" in text
