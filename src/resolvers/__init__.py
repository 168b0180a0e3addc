"""Classpath resolvers."""

from src.resolvers.base import ClassPathResolver
from src.resolvers.gradle import GradleClassPathResolver

__version__ = "0.1.0"

__all__ = ["ClassPathResolver", "GradleClassPathResolver", "__version__"]
