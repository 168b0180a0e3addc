"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.config.loader import ConfigLoader


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSPATH_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class GradleSettings(BaseSettings):
    """Gradle invocation settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSPATH_GRADLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    command: str = Field(
        default="gradle",
        description="Command searched on PATH when no wrapper is found",
    )
    wrapper: str = Field(
        default="gradlew",
        description="Wrapper script name on POSIX systems",
    )
    windows_wrapper: str = Field(
        default="gradlew.bat",
        description="Wrapper script name on Windows",
    )
    console_flag: str = Field(
        default="--console=plain",
        description="Flag disabling rich/interactive console output",
    )
    temp_prefix: str = Field(
        default="classpath",
        description="Prefix of materialized probe script files",
    )
    temp_suffix: str = Field(
        default=".gradle",
        description="Suffix of materialized probe script files",
    )

    @field_validator("command", "wrapper", "windows_wrapper", mode="before")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject empty executable names."""
        if not v or not str(v).strip():
            raise ValueError("Executable names must not be empty")
        return str(v).strip()


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    gradle: GradleSettings = Field(default_factory=GradleSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            logging=LoggingSettings(**loader.get_section("logging")),
            gradle=GradleSettings(**loader.get_section("gradle")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: Environment variables > .env > config/default.yaml > defaults

        Returns:
            Settings instance.
        """
        default_path = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"
        if default_path.exists():
            return cls.from_yaml(default_path)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
