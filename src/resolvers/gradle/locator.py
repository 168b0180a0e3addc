"""Gradle executable lookup."""

import os
from collections.abc import Callable
from pathlib import Path

from src.core.config.settings import GradleSettings, get_settings
from src.core.exceptions.errors import GradleNotFoundError
from src.core.logger.logger import get_logger
from src.core.utils.process import find_command_on_path, is_os_windows

logger = get_logger(__name__)


def wrapper_name(is_windows: Callable[[], bool] = is_os_windows, settings: GradleSettings | None = None) -> str:
    """Return the platform-specific name of the Gradle wrapper script."""
    settings = settings or get_settings().gradle
    return settings.windows_wrapper if is_windows() else settings.wrapper


def find_gradle_command(
    workspace: Path,
    is_windows: Callable[[], bool] = is_os_windows,
    which: Callable[[str], Path | None] = find_command_on_path,
    settings: GradleSettings | None = None,
) -> Path:
    """Find the executable that should run the build for a workspace.

    The wrapper is looked up in the workspace and then in each parent
    directory up to the filesystem root. Only when no executable wrapper
    exists anywhere on that chain is the plain gradle command searched on
    PATH.

    Args:
        workspace: Directory to start from (usually the project directory).
        is_windows: Predicate selecting the Windows wrapper name.
        which: PATH lookup function.
        settings: Gradle settings. Uses global settings if not provided.

    Returns:
        Absolute path to the wrapper or to the gradle binary.

    Raises:
        GradleNotFoundError: If no wrapper and no gradle on PATH was found.
    """
    settings = settings or get_settings().gradle
    name = wrapper_name(is_windows, settings)

    directory: Path | None = workspace.absolute()
    while directory is not None:
        wrapper = directory / name
        if wrapper.is_file() and os.access(wrapper, os.X_OK):
            logger.debug(f"Using Gradle wrapper {wrapper}")
            return wrapper

        parent = directory.parent
        directory = parent if parent != directory else None

    command = which(settings.command)
    if command is None:
        raise GradleNotFoundError(
            f"Could not find '{settings.command}' on PATH",
            workspace=workspace,
        )

    logger.debug(f"Using {settings.command} from PATH: {command}")
    return command
