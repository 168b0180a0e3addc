"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from src.core.config.settings import GradleSettings


class FakeGradle:
    """Stands in for the Gradle process.

    Records every command it receives and the content of the injected init
    scripts, read while the "process" runs.
    """

    def __init__(self, stdout: str = "", stderr: str = "") -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[tuple[list[str], Path]] = []
        self.script_paths: list[Path] = []
        self.script_contents: list[str] = []

    def __call__(self, command: list[str], cwd: Path) -> tuple[str, str]:
        self.calls.append((command, cwd))
        for i, arg in enumerate(command):
            if arg == "-I":
                script = Path(command[i + 1])
                self.script_paths.append(script)
                self.script_contents.append(script.read_text(encoding="utf-8"))
        return self.stdout, self.stderr


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def script_temp_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect temporary probe scripts into a directory the test can inspect."""
    scripts_dir = temp_dir / "tmp"
    scripts_dir.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scripts_dir))
    return scripts_dir


@pytest.fixture
def fake_gradle() -> Callable[..., FakeGradle]:
    """Factory for fake Gradle runners.

    Returns:
        Callable taking stdout and stderr text.
    """
    return FakeGradle


@pytest.fixture
def gradle_settings() -> GradleSettings:
    """Default Gradle settings."""
    return GradleSettings()


@pytest.fixture
def gradle_project(temp_dir: Path) -> Path:
    """Create a Gradle project with an executable wrapper.

    Returns:
        Path to the project's build.gradle.
    """
    project = temp_dir / "project"
    project.mkdir()
    build_file = project / "build.gradle"
    build_file.write_text("plugins { id 'java' }\n")
    wrapper = project / "gradlew"
    wrapper.write_text("#!/bin/sh\n")
    wrapper.chmod(0o755)
    return build_file


@pytest.fixture
def kotlin_gradle_project(temp_dir: Path) -> Path:
    """Create a Kotlin DSL Gradle project with an executable wrapper.

    Returns:
        Path to the project's build.gradle.kts.
    """
    project = temp_dir / "kts-project"
    project.mkdir()
    build_file = project / "build.gradle.kts"
    build_file.write_text('plugins { kotlin("jvm") version "1.9.0" }\n')
    wrapper = project / "gradlew"
    wrapper.write_text("#!/bin/sh\n")
    wrapper.chmod(0o755)
    return build_file
