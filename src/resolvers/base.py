"""Base classpath resolver."""

from abc import ABC, abstractmethod
from pathlib import Path

from src.models.classpath import ClassPathEntry


class ClassPathResolver(ABC):
    """A strategy that can tell which compiled artifacts a project sees.

    Picking a resolver for a given project is the caller's job; a resolver
    only answers for the build file it was created for.
    """

    resolver_type: str = "Unknown"

    @abstractmethod
    def classpath(self) -> set[ClassPathEntry]:
        """Resolve the compile classpath of the project."""
        pass

    def build_script_classpath(self) -> set[Path]:
        """Resolve the classpath of the build scripts themselves."""
        return set()

    def current_build_file_version(self) -> int:
        """Return a value that changes whenever the build file changes."""
        return 1
