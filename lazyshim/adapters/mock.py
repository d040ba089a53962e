"""
Mock adapters — test doubles for PATH lookup and process execution.

Used to exercise caching and forwarding without touching the real
system. Both doubles keep a call log so tests can assert how many
probes or spawns happened.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from lazyshim.adapters.base import CommandResolver, ProcessRunner


class MockResolver(CommandResolver):
    """Resolver backed by a fixed ``name -> path`` table.

    Names missing from the table resolve to None.
    """

    def __init__(self, commands: Mapping[str, str] | None = None):
        self._commands: dict[str, str] = dict(commands or {})
        self._probes: list[str] = []

    @property
    def probes(self) -> list[str]:
        """Every name this resolver has been asked about, in order."""
        return self._probes

    def probe_count(self, name: str | None = None) -> int:
        """Number of lookups, optionally for one name only."""
        if name is None:
            return len(self._probes)
        return self._probes.count(name)

    def install(self, name: str, path: str | None = None) -> None:
        """Make ``name`` resolvable (at ``/usr/bin/<name>`` by default)."""
        self._commands[name] = path or f"/usr/bin/{name}"

    def resolve(self, name: str) -> str | None:
        self._probes.append(name)
        return self._commands.get(name)

    def reset(self) -> None:
        """Clear the probe log."""
        self._probes.clear()


class MockRunner(ProcessRunner):
    """Runner that records argv lists instead of spawning anything."""

    def __init__(self, exit_code: int = 0):
        self._exit_code = exit_code
        self._exit_codes: dict[str, int] = {}
        self._call_log: list[list[str]] = []

    @property
    def call_log(self) -> list[list[str]]:
        """Every argv this runner has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_exit_code(self, executable: str, code: int) -> None:
        """Return ``code`` whenever ``executable`` is argv[0]."""
        self._exit_codes[executable] = code

    def run(self, argv: Sequence[str]) -> int:
        argv = list(argv)
        self._call_log.append(argv)
        return self._exit_codes.get(argv[0], self._exit_code)

    def reset(self) -> None:
        """Clear call log and custom exit codes."""
        self._call_log.clear()
        self._exit_codes.clear()
