"""Gradle classpath resolver.

Resolves the classpath by running Gradle with an injected init script that
prints one marker line per artifact, then parsing those lines back.
"""

from collections.abc import Callable
from pathlib import Path

from src.core.config.settings import GradleSettings, get_settings
from src.core.logger.logger import get_logger
from src.core.utils.process import (
    exec_and_read_stdout_and_stderr,
    find_command_on_path,
    is_os_windows,
)
from src.models.classpath import ClassPathEntry
from src.resolvers.base import ClassPathResolver
from src.resolvers.gradle.invoker import (
    Runner,
    build_command,
    report_gradle_errors,
    run_gradle,
)
from src.resolvers.gradle.locator import find_gradle_command
from src.resolvers.gradle.parser import parse_gradle_cli_dependencies
from src.resolvers.gradle.scripts import (
    KOTLIN_DSL_CLASSPATH_SCRIPT,
    KOTLIN_DSL_CLASSPATH_TASK,
    PROJECT_CLASSPATH_SCRIPT,
    PROJECT_CLASSPATH_TASK,
    materialized_scripts,
)

logger = get_logger(__name__)

GROOVY_BUILD_FILE = "build.gradle"
KOTLIN_BUILD_FILE = "build.gradle.kts"


class GradleClassPathResolver(ClassPathResolver):
    """Resolves classpaths of projects built with Gradle."""

    resolver_type = "Gradle"

    def __init__(
        self,
        path: Path,
        include_kotlin_dsl: bool,
        is_windows: Callable[[], bool] = is_os_windows,
        which: Callable[[str], Path | None] = find_command_on_path,
        runner: Runner = exec_and_read_stdout_and_stderr,
        settings: GradleSettings | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            path: Build file (build.gradle or build.gradle.kts).
            include_kotlin_dsl: Whether build script classpaths are resolved.
            is_windows: Predicate selecting the Windows wrapper name.
            which: PATH lookup function.
            runner: Process execution function returning (stdout, stderr).
            settings: Gradle settings. Uses global settings if not provided.
        """
        self.path = path
        self.include_kotlin_dsl = include_kotlin_dsl
        self.is_windows = is_windows
        self.which = which
        self.runner = runner
        self.settings = settings or get_settings().gradle

    @classmethod
    def maybe_create(cls, file: Path, **kwargs) -> "GradleClassPathResolver | None":
        """Create a Gradle resolver if the file is a Gradle build file.

        Args:
            file: Candidate build file.
            **kwargs: Forwarded to the constructor.

        Returns:
            A resolver, or None when the file is not a Gradle build file.
        """
        if file.name not in (GROOVY_BUILD_FILE, KOTLIN_BUILD_FILE):
            return None
        return cls(file, include_kotlin_dsl=file.name == KOTLIN_BUILD_FILE, **kwargs)

    @property
    def project_directory(self) -> Path:
        """Directory containing the build file."""
        return self.path.parent

    def classpath(self) -> set[ClassPathEntry]:
        """Resolve the project's dependencies, with sources when Gradle has them."""
        entries = self._read_dependencies_via_gradle_cli(
            [PROJECT_CLASSPATH_SCRIPT],
            [PROJECT_CLASSPATH_TASK],
        )
        if entries:
            logger.info(
                f"Successfully resolved dependencies for '{self.project_directory.name}' using Gradle"
            )
        return entries

    def build_script_classpath(self) -> set[Path]:
        """Resolve the jars visible to build.gradle.kts scripts.

        Returns:
            Compiled jars only; an empty set without running Gradle when the
            project does not use the Kotlin DSL.
        """
        if not self.include_kotlin_dsl:
            return set()

        entries = self._read_dependencies_via_gradle_cli(
            [KOTLIN_DSL_CLASSPATH_SCRIPT],
            [KOTLIN_DSL_CLASSPATH_TASK],
        )
        if entries:
            logger.info(
                f"Successfully resolved build script dependencies for '{self.project_directory.name}' using Gradle"
            )
        return {entry.compiled_jar for entry in entries}

    def current_build_file_version(self) -> int:
        """Return the build file's modification time in milliseconds, or 0 if it cannot be read."""
        try:
            return self.path.stat().st_mtime_ns // 1_000_000
        except OSError:
            return 0

    def _read_dependencies_via_gradle_cli(
        self,
        script_names: list[str],
        tasks: list[str],
    ) -> set[ClassPathEntry]:
        """Run the probe tasks and collect the reported artifacts.

        Args:
            script_names: Embedded probe scripts to inject.
            tasks: Tasks registered by those scripts.

        Returns:
            Entries whose compiled artifact is a jar or a directory.
        """
        logger.info(
            f"Resolving dependencies for '{self.project_directory.name}' "
            f"through Gradle's CLI using tasks {tasks}..."
        )

        with materialized_scripts(script_names, self.settings) as scripts:
            gradle = find_gradle_command(
                self.project_directory,
                is_windows=self.is_windows,
                which=self.which,
                settings=self.settings,
            )
            command = build_command(gradle, scripts, tasks, self.settings)
            output, errors = run_gradle(command, self.project_directory, self.runner)

        report_gradle_errors(errors)
        dependencies = parse_gradle_cli_dependencies(output)
        logger.debug(f"Classpath for tasks {tasks}: {dependencies}")

        # Some Gradle plugins make the probe report POMs and other descriptors
        return {entry for entry in dependencies if entry.is_jar_or_directory()}
