"""Adapters — bindings to the operating system.

Public re-exports for convenient access.
"""

from lazyshim.adapters.base import CommandResolver, ProcessRunner
from lazyshim.adapters.mock import MockResolver, MockRunner
from lazyshim.adapters.shell.command import PathResolver, SubprocessRunner

__all__ = [
    "CommandResolver",
    "MockResolver",
    "MockRunner",
    "PathResolver",
    "ProcessRunner",
    "SubprocessRunner",
]
