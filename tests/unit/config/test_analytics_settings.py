"""Unit tests for analytics settings and the YAML loader."""

import logging

import pytest
from pydantic import ValidationError

from in_app_analytics.config import AnalyticsSettings, ConfigurationLoader, load_settings
from in_app_analytics.delegates import CompositeDelegate, MemoryDelegate
from in_app_analytics.dispatch import DEFAULT_NAME, default_enabled
from in_app_analytics.exceptions import ConfigurationError


class TestAnalyticsSettings:
    def test_defaults(self):
        config = AnalyticsSettings().to_config()

        assert config.name == DEFAULT_NAME
        assert config.enabled is default_enabled()
        assert config.show_logs and config.show_success_logs and config.log_throw_enabled
        assert config.delegate is None
        assert config.platform

    def test_level_names_are_coerced(self):
        settings = AnalyticsSettings(error_log_level="critical", success_log_level=logging.DEBUG)

        assert settings.error_log_level == logging.CRITICAL
        assert settings.success_log_level == logging.DEBUG

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"error_log_level": "shouty"},
            {"error_sequence_number": -1},
            {"name": ""},
            {"unknown_option": True},
            {"delegate": {"name": "no-type"}},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            AnalyticsSettings(**kwargs)

    def test_explicit_delegate_wins_over_specification(self):
        delegate = MemoryDelegate(name="explicit")
        settings = AnalyticsSettings(delegate={"type": "logging"})

        assert settings.to_config(delegate).delegate is delegate

    def test_specification_builds_delegate(self):
        settings = AnalyticsSettings(
            enabled=True,
            platform="web",
            delegate={"type": "composite", "delegates": [{"type": "memory"}]},
        )

        config = settings.to_config()

        assert isinstance(config.delegate, CompositeDelegate)
        assert config.platform == "web"
        assert config.forwarding


class TestConfigurationLoader:
    def test_loads_top_level_settings(self, tmp_path):
        path = tmp_path / "analytics.yaml"
        path.write_text("enabled: false\nname: SHOP\nshow_log_time: true\nerror_log_level: warning\n")
        loader = ConfigurationLoader()

        settings = loader.load(path)

        assert settings.name == "SHOP"
        assert settings.show_log_time is True
        assert settings.error_log_level == logging.WARNING
        assert loader.loaded_files == [str(path)]

    def test_loads_named_section(self, tmp_path):
        path = tmp_path / "app.yaml"
        path.write_text("database:\n  url: sqlite://\nanalytics:\n  delegate:\n    type: memory\n")

        settings = load_settings(path, section="analytics")

        assert settings.delegate == {"type": "memory"}

    def test_empty_file_yields_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_settings(path).name == DEFAULT_NAME

    @pytest.mark.parametrize(
        "content, section",
        [
            ("enabled: [unclosed", None),
            ("- just\n- a list\n", None),
            ("other: {}\n", "analytics"),
            ("analytics: 5\n", "analytics"),
            ("show_logs: maybe\nbogus: 1\n", None),
        ],
    )
    def test_invalid_files(self, tmp_path, content, section):
        path = tmp_path / "bad.yaml"
        path.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationLoader(section=section).load(path)

        assert exc_info.value.source == str(path)
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "missing.yaml")
