"""Unit tests for OS and process helpers."""

import os
import sys
from pathlib import Path

import pytest

from src.core.utils.process import (
    exec_and_read_stdout_and_stderr,
    find_command_on_path,
    is_os_windows,
)


class TestIsOsWindows:
    """Tests for is_os_windows."""

    def test_matches_os_name(self) -> None:
        """Test the predicate follows os.name."""
        assert is_os_windows() == (os.name == "nt")


class TestFindCommandOnPath:
    """Tests for find_command_on_path."""

    def test_missing_command(self) -> None:
        """Test an unknown command returns None."""
        assert find_command_on_path("definitely-not-a-real-command-1f3a") is None

    def test_found_command(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a command in a PATH directory is found as an absolute path."""
        name = "fakegradle.bat" if os.name == "nt" else "fakegradle"
        command = temp_dir / name
        command.write_text("#!/bin/sh\n")
        command.chmod(0o755)
        monkeypatch.setenv("PATH", str(temp_dir))

        result = find_command_on_path("fakegradle")

        assert result is not None
        assert result.is_absolute()
        assert result.parent == temp_dir


class TestExecAndReadStdoutAndStderr:
    """Tests for exec_and_read_stdout_and_stderr."""

    def test_separate_streams_and_nonzero_exit(self, temp_dir: Path) -> None:
        """Test both streams are captured and a failing exit code does not raise."""
        script = "import sys; print('to stdout'); print('to stderr', file=sys.stderr); sys.exit(3)"

        stdout, stderr = exec_and_read_stdout_and_stderr([sys.executable, "-c", script], temp_dir)

        assert stdout.strip() == "to stdout"
        assert stderr.strip() == "to stderr"

    def test_working_directory(self, temp_dir: Path) -> None:
        """Test the command runs in the given directory."""
        script = "import os; print(os.getcwd())"

        stdout, _ = exec_and_read_stdout_and_stderr([sys.executable, "-c", script], temp_dir)

        assert Path(stdout.strip()).resolve() == temp_dir.resolve()

    def test_missing_executable(self, temp_dir: Path) -> None:
        """Test an executable that does not exist raises OSError."""
        with pytest.raises(OSError):
            exec_and_read_stdout_and_stderr([str(temp_dir / "no-such-gradle")], temp_dir)
