"""Gradle classpath resolution.

This module provides:
- Gradle wrapper/executable lookup
- Probe script materialization and invocation
- Parsing of the classpath marker lines Gradle prints
"""

from src.resolvers.gradle.invoker import build_command, report_gradle_errors, run_gradle
from src.resolvers.gradle.locator import find_gradle_command
from src.resolvers.gradle.parser import parse_gradle_cli_dependencies
from src.resolvers.gradle.resolver import GradleClassPathResolver
from src.resolvers.gradle.scripts import materialized_scripts, script_to_temp_file

__all__ = [
    "GradleClassPathResolver",
    "find_gradle_command",
    "script_to_temp_file",
    "materialized_scripts",
    "build_command",
    "run_gradle",
    "report_gradle_errors",
    "parse_gradle_cli_dependencies",
]
