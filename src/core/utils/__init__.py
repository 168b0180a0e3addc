"""
Core utilities module for the classpath resolver.
"""

from src.core.utils.process import (
    exec_and_read_stdout_and_stderr,
    find_command_on_path,
    is_os_windows,
)

__all__ = [
    "exec_and_read_stdout_and_stderr",
    "find_command_on_path",
    "is_os_windows",
]
