"""Data models module."""

from src.models.classpath import ClassPathEntry

__all__ = [
    "ClassPathEntry",
]
