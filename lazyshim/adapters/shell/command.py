"""
Shell adapters — PATH lookup and foreground process execution.

These are the only places that touch the real system. Everything
above them works against the CommandResolver / ProcessRunner
protocol.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence

from lazyshim.adapters.base import CommandResolver, ProcessRunner

logger = logging.getLogger(__name__)

# Shell convention: found but could not be executed
CANNOT_EXECUTE_EXIT = 126

# Shell convention: a child killed by signal N exits with 128 + N
SIGNAL_EXIT_BASE = 128


def exit_status(returncode: int) -> int:
    """Map a Popen return code to the status a shell would report.

    Popen reports a child killed by signal N as -N; shells report it
    as 128 + N (130 for Ctrl-C, 143 for SIGTERM).
    """
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


class PathResolver(CommandResolver):
    """Resolve commands against the executable search path.

    Args:
        path: Explicit search path (``os.pathsep``-separated).
            Defaults to the process ``PATH`` at lookup time.
    """

    def __init__(self, path: str | None = None):
        self._path = path

    def resolve(self, name: str) -> str | None:
        if not name:
            return None
        found = shutil.which(name, path=self._path)
        logger.debug("which %s -> %s", name, found)
        return found

    def __repr__(self) -> str:
        return f"<PathResolver path={self._path!r}>"


class SubprocessRunner(ProcessRunner):
    """Run a child process with inherited stdin/stdout/stderr.

    Output is never captured, so the child's output reaches the
    terminal unchanged. Ctrl-C is delivered by the terminal to the
    whole foreground process group; the child decides what to do
    with it and we keep waiting for its exit code. A child killed by
    a signal is reported the way a shell reports it, 128 + N.

    Args:
        cwd: Working directory for the child (default: current).
        env: Environment for the child (default: inherited).
    """

    def __init__(self, cwd: str | None = None, env: Mapping[str, str] | None = None):
        self._cwd = cwd
        self._env = dict(env) if env is not None else None

    def run(self, argv: Sequence[str]) -> int:
        argv = list(argv)
        logger.debug("Executing: %s (cwd=%s)", argv, self._cwd or os.getcwd())

        try:
            proc = subprocess.Popen(argv, cwd=self._cwd, env=self._env)
        except OSError as e:
            logger.error("Cannot execute %s: %s", argv[0], e)
            return CANNOT_EXECUTE_EXIT

        while True:
            try:
                return exit_status(proc.wait())
            except KeyboardInterrupt:
                # The child got the same SIGINT; let it finish on its own terms
                logger.debug("Interrupt received, waiting for %s", argv[0])
