"""Exception definitions module."""

from src.core.exceptions.errors import (
    ClasspathError,
    ConfigurationError,
    GradleInvocationError,
    GradleNotFoundError,
    ProbeScriptError,
)

__all__ = [
    "ClasspathError",
    "ConfigurationError",
    "GradleNotFoundError",
    "GradleInvocationError",
    "ProbeScriptError",
]
