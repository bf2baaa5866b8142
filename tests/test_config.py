"""Tests for layered settings loading."""

import pytest

from diff_insight.config import InsightSettings, default_settings, load_settings
from diff_insight.exceptions import ConfigurationError, InvalidConfigError


class TestInsightSettings:
    def test_defaults(self):
        assert default_settings.theme == "default"
        assert default_settings.color is True
        assert default_settings.output_format == "text"
        assert default_settings.verbosity == "normal"
        assert default_settings.log_file is None

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError, match="output_format"):
            InsightSettings(output_format="xml")

    def test_rejects_unknown_verbosity(self):
        with pytest.raises(ValueError, match="verbosity"):
            InsightSettings(verbosity="loud")

    def test_verbosity_properties(self):
        assert InsightSettings(verbosity="verbose").verbose
        assert InsightSettings(verbosity="quiet").quiet


class TestLoadSettings:
    def test_no_sources_gives_defaults(self, isolated_config):
        assert load_settings() == InsightSettings()

    def test_overrides(self, isolated_config):
        settings = load_settings(theme="mono", output_format="json")
        assert settings.theme == "mono"
        assert settings.output_format == "json"

    def test_none_overrides_are_ignored(self, isolated_config):
        (isolated_config / "diff-insight.toml").write_text('theme = "ocean"\n')
        assert load_settings(theme=None).theme == "ocean"

    def test_verbosity_flags(self, isolated_config):
        assert load_settings(verbose=True).verbosity == "verbose"
        assert load_settings(quiet=True).verbosity == "quiet"
        assert load_settings(verbose=False, quiet=False).verbosity == "normal"

    def test_project_config(self, isolated_config):
        (isolated_config / "diff-insight.toml").write_text('theme = "ocean"\ncolor = false\n')
        settings = load_settings()
        assert settings.theme == "ocean"
        assert settings.color is False

    def test_project_overrides_global(self, isolated_config, tmp_path):
        (tmp_path / "home" / ".diff-insight.toml").write_text(
            'theme = "mono"\noutput_format = "json"\n'
        )
        (isolated_config / "diff-insight.toml").write_text('theme = "ocean"\n')
        settings = load_settings()
        assert settings.theme == "ocean"
        assert settings.output_format == "json"

    def test_namespaced_table(self, isolated_config):
        (isolated_config / "diff-insight.toml").write_text('[diff-insight]\ntheme = "mono"\n')
        assert load_settings().theme == "mono"

    def test_explicit_file_beats_project(self, isolated_config, tmp_path):
        (isolated_config / "diff-insight.toml").write_text('theme = "ocean"\n')
        explicit = tmp_path / "custom.toml"
        explicit.write_text('theme = "mono"\n')
        assert load_settings(config_file=explicit).theme == "mono"

    def test_missing_explicit_file(self, isolated_config, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, isolated_config):
        (isolated_config / "diff-insight.toml").write_text("theme = \n")
        with pytest.raises(ConfigurationError, match="Invalid project config"):
            load_settings()

    def test_unknown_key(self, isolated_config):
        (isolated_config / "diff-insight.toml").write_text("max_findings = 3\n")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_settings()
        assert exc_info.value.key == "max_findings"

    def test_invalid_value(self, isolated_config):
        with pytest.raises(InvalidConfigError) as exc_info:
            load_settings(output_format="xml")
        assert exc_info.value.key == "output_format"


class TestEnvVars:
    def test_env_overrides_file(self, isolated_config, monkeypatch):
        (isolated_config / "diff-insight.toml").write_text('theme = "ocean"\n')
        monkeypatch.setenv("DIFF_INSIGHT_THEME", "mono")
        assert load_settings().theme == "mono"

    def test_cli_overrides_env(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DIFF_INSIGHT_THEME", "mono")
        assert load_settings(theme="ocean").theme == "ocean"

    @pytest.mark.parametrize("raw,expected", [("0", False), ("no", False), ("TRUE", True)])
    def test_bool_parsing(self, isolated_config, monkeypatch, raw, expected):
        monkeypatch.setenv("DIFF_INSIGHT_COLOR", raw)
        assert load_settings().color is expected

    def test_invalid_bool(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DIFF_INSIGHT_COLOR", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_settings()
        assert exc_info.value.key == "DIFF_INSIGHT_COLOR"

    def test_optional_string(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DIFF_INSIGHT_LOG_FILE", "insight.log")
        assert load_settings().log_file == "insight.log"
