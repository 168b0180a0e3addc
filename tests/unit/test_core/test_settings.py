"""Unit tests for configuration and error types."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.core.config.loader import ConfigLoader
from src.core.config.settings import GradleSettings, LoggingSettings, Settings
from src.core.exceptions.errors import ClasspathError, ConfigurationError, GradleNotFoundError


class TestGradleSettings:
    """Tests for GradleSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default executable names and flags."""
        for var in ("COMMAND", "WRAPPER", "WINDOWS_WRAPPER", "CONSOLE_FLAG"):
            monkeypatch.delenv(f"CLASSPATH_GRADLE_{var}", raising=False)

        settings = GradleSettings()

        assert settings.command == "gradle"
        assert settings.wrapper == "gradlew"
        assert settings.windows_wrapper == "gradlew.bat"
        assert settings.console_flag == "--console=plain"
        assert settings.temp_prefix == "classpath"
        assert settings.temp_suffix == ".gradle"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values can come from the environment."""
        monkeypatch.setenv("CLASSPATH_GRADLE_COMMAND", "gradle8")
        assert GradleSettings().command == "gradle8"

    def test_empty_name_rejected(self) -> None:
        """Test empty executable names are invalid."""
        with pytest.raises(ValidationError):
            GradleSettings(wrapper="  ")


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_level_normalized(self) -> None:
        """Test the level is upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_empty_file_is_none(self) -> None:
        """Test an empty log file setting means no file."""
        assert LoggingSettings(file="").file is None


class TestSettingsFromYaml:
    """Tests for YAML-backed settings."""

    def test_from_yaml(self, temp_dir: Path) -> None:
        """Test sections map onto the nested settings."""
        config = temp_dir / "settings.yaml"
        config.write_text(
            "logging:\n  level: warning\n  use_rich: false\n"
            "gradle:\n  command: gradle7\n  wrapper: gw\n"
        )

        settings = Settings.from_yaml(config)

        assert settings.logging.level == "WARNING"
        assert settings.logging.use_rich is False
        assert settings.gradle.command == "gradle7"
        assert settings.gradle.wrapper == "gw"

    def test_missing_sections_use_defaults(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an empty file yields default settings."""
        monkeypatch.delenv("CLASSPATH_GRADLE_COMMAND", raising=False)
        config = temp_dir / "empty.yaml"
        config.write_text("")

        assert Settings.from_yaml(config).gradle.command == "gradle"


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ConfigLoader(temp_dir / "absent.yaml").load()

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test malformed YAML raises ConfigurationError."""
        config = temp_dir / "bad.yaml"
        config.write_text("gradle: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(config).load()
        assert "error" in exc_info.value.details

    def test_non_mapping_root(self, temp_dir: Path) -> None:
        """Test a list at the top level is rejected."""
        config = temp_dir / "list.yaml"
        config.write_text("- gradle\n- maven\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(config).load()

    def test_get_section(self, temp_dir: Path) -> None:
        """Test sections are returned only when they are mappings."""
        config = temp_dir / "sections.yaml"
        config.write_text("gradle:\n  command: gradle\nlogging: verbose\n")
        loader = ConfigLoader(config)
        loader.load()

        assert loader.get_section("gradle") == {"command": "gradle"}
        assert loader.get_section("logging") == {}
        assert loader.get_section("missing") == {}

    def test_no_path(self) -> None:
        """Test loading without a path gives an empty config."""
        assert ConfigLoader().load() == {}


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_details_in_message(self) -> None:
        """Test details are rendered into the string form."""
        error = GradleNotFoundError("Could not find 'gradle' on PATH", workspace="/p")
        assert isinstance(error, ClasspathError)
        assert str(error) == "Could not find 'gradle' on PATH - Details: {'workspace': '/p'}"

    def test_plain_message(self) -> None:
        """Test an error without details renders its message only."""
        assert str(ClasspathError("boom")) == "boom"
