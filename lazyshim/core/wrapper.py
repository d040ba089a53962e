"""
Wrappers — forwarding callables guarded by an availability check.

A wrapper is the Python counterpart of a profile function like
``docker() { command docker "$@"; }`` that first makes sure the tool
exists. Calling it either runs the tool with the caller's arguments
untouched and returns its exit code, or logs a warning and returns
``TOOL_NOT_FOUND_EXIT`` without spawning anything.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from lazyshim.adapters.base import CommandResolver, ProcessRunner
from lazyshim.adapters.shell.command import PathResolver, SubprocessRunner
from lazyshim.core.cache import CommandCache
from lazyshim.core.models.fragment import WrapperSpec

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
TOOL_NOT_FOUND_EXIT = 127


class Wrapper:
    """Availability-guarded forwarder for one tool.

    Availability is answered by ``cache`` when given. Without a cache
    every call does a direct lookup through ``resolver``, so a wrapper
    keeps working even if no cache was set up.

    Args:
        spec: What to forward to.
        cache: Shared session cache (preferred).
        resolver: Direct lookup used when there is no cache.
        runner: Process runner (default: SubprocessRunner).
    """

    def __init__(
        self,
        spec: WrapperSpec,
        cache: CommandCache | None = None,
        resolver: CommandResolver | None = None,
        runner: ProcessRunner | None = None,
    ):
        self._spec = spec
        self._cache = cache
        self._resolver = resolver
        self._runner = runner or SubprocessRunner()

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def spec(self) -> WrapperSpec:
        return self._spec

    def _lookup(self, command: str) -> str | None:
        if self._cache is not None:
            return self._cache.resolve(command)
        if self._resolver is None:
            self._resolver = PathResolver()
        return self._resolver.resolve(command)

    def locate(self) -> str | None:
        """Path of the first installed candidate, or None."""
        for command in self._spec.candidates:
            path = self._lookup(command)
            if path is not None:
                return path
        return None

    def is_available(self) -> bool:
        """Whether any candidate executable is installed."""
        return self.locate() is not None

    def __call__(self, args: Sequence[str] = ()) -> int:
        """Run the tool with ``args`` and return its exit code."""
        path = self.locate()
        if path is None:
            self._warn_missing()
            return TOOL_NOT_FOUND_EXIT

        argv = [path, *self._spec.prefix_args, *args]
        logger.debug("%s -> %s", self.name, argv)
        return self._runner.run(argv)

    def _warn_missing(self) -> None:
        candidates = self._spec.candidates
        if len(candidates) == 1:
            message = f"{candidates[0]} not found on PATH"
        else:
            message = f"{self.name}: none of {', '.join(candidates)} found on PATH"
        if self._spec.install_hint:
            message += f" (install: {self._spec.install_hint})"
        logger.warning(message)

    def __repr__(self) -> str:
        return f"<Wrapper name={self.name!r} candidates={self._spec.candidates!r}>"


def wrap(
    name: str,
    cache: CommandCache | None = None,
    resolver: CommandResolver | None = None,
    runner: ProcessRunner | None = None,
    **spec_fields: Any,
) -> Wrapper:
    """Build a wrapper that forwards to the executable ``name``.

    Extra keyword arguments are WrapperSpec fields
    (``alternatives``, ``prefix_args``, ``install_hint``...).

    Example::

        cache = CommandCache()
        git = wrap("git", cache=cache)
        exit_code = git(["status", "--short"])
    """
    spec = WrapperSpec(name=name, **spec_fields)
    return Wrapper(spec, cache=cache, resolver=resolver, runner=runner)
