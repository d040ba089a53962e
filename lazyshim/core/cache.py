"""
Command presence cache — memoized ``which`` for one session.

The first lookup of a name probes the resolver; every later lookup
is answered from memory. There is no eviction and no refresh: the
set of installed tools is assumed not to change mid-session.
"""

from __future__ import annotations

import logging

from lazyshim.adapters.base import CommandResolver
from lazyshim.adapters.shell.command import PathResolver
from lazyshim.core.models.command import CommandRecord

logger = logging.getLogger(__name__)


class CommandCache:
    """Session-scoped map of command name to availability.

    Args:
        resolver: Where to look commands up on a miss
            (default: PathResolver against the process PATH).
    """

    def __init__(self, resolver: CommandResolver | None = None):
        self._resolver = resolver or PathResolver()
        self._records: dict[str, CommandRecord] = {}

    @property
    def resolver(self) -> CommandResolver:
        return self._resolver

    def record(self, name: str) -> CommandRecord:
        """Return the record for ``name``, probing on first use."""
        cached = self._records.get(name)
        if cached is not None:
            return cached

        rec = CommandRecord.from_lookup(name, self._resolver.resolve(name))
        self._records[name] = rec
        logger.debug(
            "Cached %s: %s", name, rec.path if rec.available else "not found"
        )
        return rec

    def is_available(self, name: str) -> bool:
        """Whether ``name`` is installed."""
        return self.record(name).available

    def resolve(self, name: str) -> str | None:
        """Full path of ``name``, or None if it is not installed."""
        return self.record(name).path

    def records(self) -> list[CommandRecord]:
        """Every record probed so far, in lookup order."""
        return list(self._records.values())

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"<CommandCache entries={len(self._records)} resolver={self._resolver!r}>"
