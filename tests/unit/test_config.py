"""Unit tests for configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mergesplit.config import Config
from mergesplit.core.exceptions import ConfigurationError


class TestConfig:
    """Test Config defaults and environment loading."""

    def test_defaults(self):
        config = Config()

        assert config.target_column == "NOTES"
        assert config.output_suffix == "_processed"
        assert config.preview_rows == 3
        assert config.preserve_formatting is False
        assert config.warn_on_wide_merges is True
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_validation(self):
        with pytest.raises(ValidationError):
            Config(preview_rows=-1)
        with pytest.raises(ValidationError):
            Config(target_column="")

    def test_from_env_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert Config.from_env() == Config()

    def test_from_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MERGESPLIT_TARGET_COLUMN", "REMARKS")
        monkeypatch.setenv("MERGESPLIT_OUTPUT_SUFFIX", "_flat")
        monkeypatch.setenv("MERGESPLIT_PRESERVE_FORMATTING", "true")
        monkeypatch.setenv("MERGESPLIT_WARN_ON_WIDE_MERGES", "false")
        monkeypatch.setenv("MERGESPLIT_PREVIEW_ROWS", "5")
        monkeypatch.setenv("MERGESPLIT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MERGESPLIT_LOG_FILE", "run.log")

        config = Config.from_env()

        assert config.target_column == "REMARKS"
        assert config.output_suffix == "_flat"
        assert config.preserve_formatting is True
        assert config.warn_on_wide_merges is False
        assert config.preview_rows == 5
        assert config.log_level == "DEBUG"
        assert config.log_file == Path("run.log")

    def test_from_env_non_numeric_preview_rows(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MERGESPLIT_PREVIEW_ROWS", "three")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_from_env_negative_preview_rows(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MERGESPLIT_PREVIEW_ROWS", "-1")

        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_from_env_empty_target_column(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MERGESPLIT_TARGET_COLUMN", "")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()

        assert isinstance(exc_info.value.__cause__, ValidationError)
