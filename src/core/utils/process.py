"""Operating system and process helpers used by the build tool resolvers."""

import os
import shutil
import subprocess
from pathlib import Path


def is_os_windows() -> bool:
    """Return True when running on Windows."""
    return os.name == "nt"


def find_command_on_path(name: str) -> Path | None:
    """Search the executable search path for a command.

    Args:
        name: Command name (e.g. 'gradle').

    Returns:
        Absolute path to the executable, or None if it is not on PATH.
    """
    found = shutil.which(name)
    if found is None:
        return None
    return Path(found).absolute()


def exec_and_read_stdout_and_stderr(command: list[str], cwd: Path) -> tuple[str, str]:
    """Run a command to completion and capture its output streams.

    The exit code is deliberately not inspected; callers decide what counts
    as a failure by looking at the captured text.

    Args:
        command: Command and arguments.
        cwd: Working directory.

    Returns:
        Tuple of (stdout, stderr).

    Raises:
        OSError: If the process cannot be started.
    """
    with subprocess.Popen(
        command,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    ) as process:
        stdout, stderr = process.communicate()

    return (
        stdout.decode("utf-8", errors="replace"),
        stderr.decode("utf-8", errors="replace"),
    )
