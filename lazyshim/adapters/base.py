"""
Adapter base — the contract between wrappers and the operating system.

Wrappers never call ``shutil.which`` or ``subprocess`` themselves.
They talk to a resolver (where is this executable?) and a runner
(start it, wait, report the exit code). Both are injected so tests
can substitute fakes and count probes and spawns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class CommandResolver(ABC):
    """Locates executables by command name.

    To create a new resolver:
        1. Subclass CommandResolver
        2. Implement resolve
        3. Pass it to CommandCache or Wrapper
    """

    @abstractmethod
    def resolve(self, name: str) -> str | None:
        """Return the full path of ``name``, or None if it is not installed.

        Absence is a normal outcome. Should be fast and never raise.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class ProcessRunner(ABC):
    """Runs a resolved executable in the foreground."""

    @abstractmethod
    def run(self, argv: Sequence[str]) -> int:
        """Run ``argv`` with inherited stdio and return its exit code.

        ``argv[0]`` is the resolved executable path; the remaining
        items are passed through untouched.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
