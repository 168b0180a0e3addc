"""Materialization of the embedded Gradle probe scripts."""

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from importlib import resources
from pathlib import Path

from src.core.config.settings import GradleSettings, get_settings
from src.core.exceptions.errors import ProbeScriptError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

# Embedded scripts and the task each of them registers
PROJECT_CLASSPATH_SCRIPT = "projectClassPathFinder.gradle"
PROJECT_CLASSPATH_TASK = "kotlinLSPProjectDeps"
KOTLIN_DSL_CLASSPATH_SCRIPT = "kotlinDSLClassPathFinder.gradle"
KOTLIN_DSL_CLASSPATH_TASK = "kotlinLSPKotlinDSLDeps"


def script_to_temp_file(script_name: str, settings: GradleSettings | None = None) -> Path:
    """Copy an embedded probe script into a new temporary file.

    Args:
        script_name: Resource name of the script.
        settings: Gradle settings. Uses global settings if not provided.

    Returns:
        Absolute path of the created file. The caller owns and deletes it.

    Raises:
        ProbeScriptError: If the resource cannot be read or the file written.
    """
    settings = settings or get_settings().gradle
    resource = resources.files(__package__).joinpath("resources", script_name)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            prefix=settings.temp_prefix,
            suffix=settings.temp_suffix,
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name).absolute()
            logger.debug(f"Creating temporary gradle file {temp_path}")
            with resource.open("rb") as source:
                shutil.copyfileobj(source, temp_file)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ProbeScriptError(
            f"Failed to materialize probe script: {e}",
            script_name=script_name,
        ) from e

    return temp_path


@contextmanager
def materialized_scripts(
    script_names: list[str],
    settings: GradleSettings | None = None,
) -> Iterator[list[Path]]:
    """Materialize several probe scripts for the duration of a block.

    Every file created here is deleted when the block exits, whether it
    completes or raises, including when a later script fails to materialize.

    Args:
        script_names: Resource names, in command line order.
        settings: Gradle settings. Uses global settings if not provided.

    Yields:
        Absolute paths of the temporary files, in the same order.
    """
    with ExitStack() as stack:
        paths: list[Path] = []
        for name in script_names:
            path = script_to_temp_file(name, settings)
            stack.callback(path.unlink, missing_ok=True)
            paths.append(path)
        yield paths
