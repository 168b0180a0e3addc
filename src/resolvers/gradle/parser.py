"""Parsing of the marker lines printed by the probe scripts."""

import re
from pathlib import Path

from src.core.logger.logger import get_logger
from src.models.classpath import ClassPathEntry

logger = get_logger(__name__)

# "kotlin-lsp-gradle <jar>" followed by a line break
ARTIFACT_WITHOUT_SOURCES_PATTERN = re.compile(r"kotlin-lsp-gradle ([^\r\n]+)(?:\r?\n)")

# "kotlin-lsp-gradle-src <jar>|<sources jar>" followed by a line break
ARTIFACT_WITH_SOURCES_PATTERN = re.compile(r"kotlin-lsp-gradle-src ([^\r\n]+)\|([^\r\n]+)(?:\r?\n)")


def parse_gradle_cli_dependencies(output: str) -> set[ClassPathEntry]:
    """Extract classpath entries from Gradle's standard output.

    Marker lines whose compiled path is blank are skipped.

    Args:
        output: Captured stdout of a probe task run.

    Returns:
        Entries with and without sources; empty if no marker line was printed.
    """
    logger.debug(output)

    without_sources = {
        ClassPathEntry(compiled_jar=Path(match.group(1)))
        for match in ARTIFACT_WITHOUT_SOURCES_PATTERN.finditer(output)
        if match.group(1).strip()
    }
    with_sources = {
        ClassPathEntry(compiled_jar=Path(match.group(1)), source_jar=Path(match.group(2)))
        for match in ARTIFACT_WITH_SOURCES_PATTERN.finditer(output)
        if match.group(1).strip()
    }
    return without_sources | with_sources
