#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading from the environment and validation.
"""

from datetime import date
from pathlib import Path

import pytest

from ledgersync.core.config import Backend, Environment, get_config, get_data_dir, reload_config


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_config_loads_test_environment(self):
        config = get_config()

        assert config.environment == Environment.TEST
        assert config.ynab.api_token == "test-token"
        assert config.sync.year_prefixes == ["2018", "2017"]
        assert config.sync.backend == Backend.API

    def test_directories_are_created(self):
        config = get_config()

        assert isinstance(config.data_dir, Path)
        assert config.cache_dir.exists()
        assert config.output_dir.exists()
        assert get_data_dir() == config.data_dir

    def test_default_years_are_current_and_previous(self, monkeypatch):
        monkeypatch.delenv("LEDGERSYNC_YEARS")

        config = reload_config()

        this_year = date.today().year
        assert config.sync.year_prefixes == [str(this_year), str(this_year - 1)]

    def test_backend_and_strict_from_environment(self, monkeypatch):
        monkeypatch.setenv("LEDGERSYNC_BACKEND", "file")
        monkeypatch.setenv("LEDGERSYNC_STRICT", "true")

        config = reload_config()

        assert config.sync.backend == Backend.FILE
        assert config.sync.strict_fingerprints is True

    def test_invalid_year_prefix_fails_validation(self, monkeypatch):
        monkeypatch.setenv("LEDGERSYNC_YEARS", "2018,last year")

        with pytest.raises(ValueError, match="Year prefix must be numeric"):
            reload_config()

    def test_production_requires_token(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LEDGERSYNC_ENV", "production")
        monkeypatch.setenv("LEDGERSYNC_DATA_DIR", str(tmp_path / "prod"))
        monkeypatch.delenv("YNAB_API_TOKEN")

        with pytest.raises(ValueError, match="YNAB_API_TOKEN is required"):
            reload_config()

    def test_to_dict_redacts_token(self):
        data = get_config().to_dict()

        assert data["ynab"]["api_token"] == "***REDACTED***"
        assert data["environment"] == "test"
        assert data["sync"]["backend"] == "api"
        assert get_config().to_dict(include_sensitive=True)["ynab"]["api_token"] == "test-token"
