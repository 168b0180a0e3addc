"""Running Gradle and scanning its error stream."""

import re
from collections.abc import Callable
from pathlib import Path

from src.core.config.settings import GradleSettings, get_settings
from src.core.exceptions.errors import GradleInvocationError
from src.core.logger.logger import get_logger
from src.core.utils.process import exec_and_read_stdout_and_stderr

logger = get_logger(__name__)

BUILD_FAILED_MARKER = "FAILURE: Build failed"
ERROR_LINE_MARKER = "ERROR: "

# Location Gradle prints under "* Where:" when a build fails
GRADLE_ERROR_WHERE_PATTERN = re.compile(r"\*\s+Where:[\r\n]+(\S.*)")

Runner = Callable[[list[str], Path], tuple[str, str]]


def build_command(
    gradle: Path,
    scripts: list[Path],
    tasks: list[str],
    settings: GradleSettings | None = None,
) -> list[str]:
    """Assemble the Gradle command line.

    Args:
        gradle: Gradle executable or wrapper.
        scripts: Init scripts, each passed with its own -I flag.
        tasks: Task names to run.
        settings: Gradle settings. Uses global settings if not provided.

    Returns:
        Argument vector.
    """
    settings = settings or get_settings().gradle
    command = [str(gradle)]
    for script in scripts:
        command.extend(["-I", str(script)])
    command.extend(tasks)
    command.append(settings.console_flag)
    return command


def run_gradle(
    command: list[str],
    project_directory: Path,
    runner: Runner = exec_and_read_stdout_and_stderr,
) -> tuple[str, str]:
    """Run Gradle and return its stdout and stderr.

    A non-zero exit status is not an error here; see report_gradle_errors.

    Raises:
        GradleInvocationError: If the process could not be started.
    """
    try:
        return runner(command, project_directory)
    except OSError as e:
        raise GradleInvocationError(
            f"Failed to start Gradle: {e}",
            command=command,
            cwd=project_directory,
        ) from e


def report_gradle_errors(errors: str) -> bool:
    """Log build failures and error lines found on Gradle's stderr.

    Args:
        errors: Captured standard error.

    Returns:
        True if Gradle reported a failed build.
    """
    if BUILD_FAILED_MARKER in errors:
        where = GRADLE_ERROR_WHERE_PATTERN.search(errors)
        if where:
            logger.warning(f"Gradle task failed at {where.group(1).strip()}")
        logger.warning(f"Gradle task failed: {errors}")
        return True

    for line in errors.splitlines():
        if ERROR_LINE_MARKER in line:
            logger.warning(f"Gradle error: {line}")
    return False
