"""
Unit tests for configuration loading.
"""

import pytest

from workflowquery.config import (
    CONFIG_ENV_VAR,
    Settings,
    get_default_config_path,
    get_settings,
    load_config,
    set_settings,
)
from workflowquery.core.exceptions import ConfigurationError


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.strict_validation is False
        assert settings.log_level == "WARNING"
        assert settings.log_format is None

    def test_dict_roundtrip(self):
        settings = Settings(strict_validation=True, log_level="DEBUG")
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="strict"):
            Settings.from_dict({"strict": True})

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WORKFLOWQUERY_STRICT", "Yes")
        monkeypatch.setenv("WORKFLOWQUERY_LOG_LEVEL", "DEBUG")

        settings = Settings.from_env()

        assert settings.strict_validation is True
        assert settings.log_level == "DEBUG"

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_strict_must_be_bool(self, value):
        """Test non-boolean strictness is rejected, including quoted YAML strings."""
        with pytest.raises(ConfigurationError, match="strict_validation"):
            Settings(strict_validation=value)

    @pytest.mark.parametrize("value", ["verbose", "", 10, None])
    def test_unknown_log_level(self, value):
        with pytest.raises(ConfigurationError, match="log_level"):
            Settings(log_level=value)

    def test_log_format_must_be_string(self):
        with pytest.raises(ConfigurationError, match="log_format"):
            Settings(log_format=42)

    def test_from_env_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("WORKFLOWQUERY_LOG_LEVEL", "verbose")
        with pytest.raises(ConfigurationError):
            Settings.from_env()

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("WORKFLOWQUERY_STRICT", raising=False)
        monkeypatch.delenv("WORKFLOWQUERY_LOG_LEVEL", raising=False)
        assert Settings.from_env() == Settings()


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == Settings()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "workflowquery.yaml"
        path.write_text("strict_validation: true\nlog_level: INFO\n")

        settings = load_config(str(path))

        assert settings.strict_validation is True
        assert settings.log_level == "INFO"

    def test_quoted_boolean(self, tmp_path):
        """Test a quoted "false" does not silently enable strict mode."""
        path = tmp_path / "workflowquery.yaml"
        path.write_text('strict_validation: "false"\n')
        with pytest.raises(ConfigurationError, match="boolean"):
            load_config(path)

    def test_bad_log_level_in_file(self, tmp_path):
        path = tmp_path / "workflowquery.yaml"
        path.write_text("log_level: verbose\n")
        with pytest.raises(ConfigurationError, match="log_level"):
            load_config(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Settings()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- strict_validation\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("strict_validation: [true\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("strict_validation: true\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert get_default_config_path() == path
        assert load_config().strict_validation is True

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "workflowquery.yaml").write_text("log_level: ERROR\n")

        assert load_config().log_level == "ERROR"


class TestGlobalSettings:
    """Tests for the cached global settings."""

    def test_set_and_get(self):
        custom = Settings(strict_validation=True)
        set_settings(custom)
        assert get_settings() is custom

    def test_cached(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_settings() is get_settings()
