# Tests for config.py
# Created: 2026-10-19

import json

import pytest
from pydantic import ValidationError

from repobrowse.config import Settings, get_config_path, get_settings


@pytest.fixture(autouse=True)
def config_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("REPOBROWSE_CONFIG_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings.load()
        assert settings.exit_row_label == "go up"
        assert settings.browse_action == "repo_browser"
        assert settings.download_action == "download"
        assert settings.filename_substitution_char == "_"
        assert settings.prefer_direct_metadata is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("REPOBROWSE_EXIT_ROW_LABEL", "..")
        monkeypatch.setenv("REPOBROWSE_PREFER_DIRECT_METADATA", "false")
        settings = Settings.load()
        assert settings.exit_row_label == ".."
        assert settings.prefer_direct_metadata is False

    def test_save_and_load(self, config_dir):
        Settings(api_port=9001, exit_row_label="up").save()
        assert get_config_path() == config_dir / "config.json"

        loaded = Settings.load()
        assert loaded.api_port == 9001
        assert loaded.exit_row_label == "up"

    def test_file_wins_over_env(self, monkeypatch, config_dir):
        (config_dir / "config.json").write_text(json.dumps({"api_port": 7000}))
        monkeypatch.setenv("REPOBROWSE_API_PORT", "7001")
        assert Settings.load().api_port == 7000

    def test_unreadable_file_ignored(self, config_dir):
        (config_dir / "config.json").write_text("{not json")
        assert Settings.load().api_port == 8890

    def test_unsafe_substitution_rejected(self):
        with pytest.raises(ValidationError):
            Settings(filename_substitution_char="/")

    def test_substitution_matched_by_pattern_rejected(self):
        with pytest.raises(ValidationError):
            Settings(filename_sanitization_pattern=r"[^a-z]", filename_substitution_char="_")

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
        get_settings.cache_clear()
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first


class TestListingDefaults:
    def test_match_binder_defaults(self):
        from repobrowse.browsing.binder import BROWSE_ACTION, DOWNLOAD_ACTION, EXIT_LABEL

        settings = Settings.load()
        assert settings.exit_row_label == EXIT_LABEL
        assert settings.browse_action == BROWSE_ACTION
        assert settings.download_action == DOWNLOAD_ACTION
