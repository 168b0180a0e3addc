"""Classpath-related data models."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ClassPathEntry(BaseModel):
    """A single resolved artifact: a compiled jar or class directory."""

    compiled_jar: Path = Field(description="Absolute path to a jar or a directory of classes")
    source_jar: Path | None = Field(
        default=None,
        description="Absolute path to the companion sources jar, if reported",
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("compiled_jar", mode="before")
    @classmethod
    def validate_compiled_jar(cls, v: str | Path) -> str | Path:
        """Reject empty compiled artifact paths."""
        if not str(v).strip():
            raise ValueError("compiled_jar must not be empty")
        return v

    def is_jar_or_directory(self) -> bool:
        """Check whether the compiled artifact looks like something a classpath can hold."""
        return str(self.compiled_jar).lower().endswith(".jar") or self.compiled_jar.is_dir()
