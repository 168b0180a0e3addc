"""Custom exception definitions for the classpath resolver."""

from pathlib import Path
from typing import Any


class ClasspathError(Exception):
    """Base exception for all classpath resolution errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class GradleNotFoundError(ClasspathError):
    """Raised when neither a Gradle wrapper nor a gradle binary can be found."""

    def __init__(
        self,
        message: str,
        workspace: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize Gradle lookup error.

        Args:
            message: Error message.
            workspace: Directory the lookup started from.
            details: Additional error details.
        """
        details = details or {}
        if workspace:
            details["workspace"] = str(workspace)
        super().__init__(message, details)


class ProbeScriptError(ClasspathError):
    """Raised when a probe script cannot be copied to a temporary file."""

    def __init__(
        self,
        message: str,
        script_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize probe script error.

        Args:
            message: Error message.
            script_name: Name of the embedded script resource.
            details: Additional error details.
        """
        details = details or {}
        if script_name:
            details["script_name"] = script_name
        super().__init__(message, details)


class GradleInvocationError(ClasspathError):
    """Raised when the Gradle process cannot be started at all."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        cwd: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invocation error.

        Args:
            message: Error message.
            command: Command line that failed to start.
            cwd: Working directory of the attempted invocation.
            details: Additional error details.
        """
        details = details or {}
        if command:
            details["command"] = " ".join(command)
        if cwd:
            details["cwd"] = str(cwd)
        super().__init__(message, details)


class ConfigurationError(ClasspathError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
