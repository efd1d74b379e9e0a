"""Tests for config validation."""

import pytest

from resumancer.config import load_config


class TestConfigValidation:
    def test_valid_defaults(self, tmp_path):
        """Default config passes validation without raising."""
        config = load_config(tmp_path / "missing.yaml")
        assert config.llm.timeout == 60
        assert config.pipeline.default_mood == 5

    def test_invalid_category_mode(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("pipeline:\n  category_mode: mixed\n")
        with pytest.raises(ValueError, match="category_mode"):
            load_config(yaml)

    def test_invalid_default_mood(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("pipeline:\n  default_mood: 11\n")
        with pytest.raises(ValueError, match="default_mood"):
            load_config(yaml)

    def test_invalid_timeout(self, tmp_path):
        """timeout of 0 (below minimum of 1) raises ValueError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_invalid_max_attempts(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("retry:\n  max_attempts: 0\n")
        with pytest.raises(ValueError, match="max_attempts"):
            load_config(yaml)

    def test_negative_base_delay(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("retry:\n  base_delay: -1\n")
        with pytest.raises(ValueError, match="base_delay"):
            load_config(yaml)

    def test_unknown_key_rejected(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  temperature: 0.9\n")
        with pytest.raises(TypeError):
            load_config(yaml)
