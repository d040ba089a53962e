"""
Command record — the memoized outcome of one PATH probe.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class CommandRecord(BaseModel):
    """Whether a command was found, and where.

    Created on the first lookup of a name and reused for the rest of
    the session. A missing command is recorded too: absence is a
    valid, cacheable answer.
    """

    name: str
    available: bool = False
    path: str | None = None
    probed_at: str = Field(default_factory=_now_iso)

    @classmethod
    def from_lookup(cls, name: str, path: str | None) -> CommandRecord:
        """Build a record from a resolver result."""
        return cls(name=name, available=path is not None, path=path)
