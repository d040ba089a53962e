"""
Wrapper registry — central dispatch for all wrappers.

The registry is the single point of wrapper management. It handles
registration, alias lookup, availability status, and dispatch by
name. Registration is idempotent: a session can register the same
fragment any number of times.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from lazyshim.core.wrapper import TOOL_NOT_FOUND_EXIT, Wrapper

logger = logging.getLogger(__name__)


class WrapperRegistry:
    """Name and alias table for wrappers.

    Features:
        - Register/unregister wrappers by name
        - Resolve aliases to their wrapper
        - Query availability of every wrapper
        - Dispatch an argument list to a wrapper by name
    """

    def __init__(self) -> None:
        self._wrappers: dict[str, Wrapper] = {}
        self._aliases: dict[str, str] = {}

    def register(self, wrapper: Wrapper) -> bool:
        """Register a wrapper and its aliases.

        Re-registering an identical spec is a no-op. A different spec
        under an existing name replaces it.

        Returns:
            True if the registry changed.
        """
        name = wrapper.name
        existing = self._wrappers.get(name)
        if existing is not None:
            if existing.spec == wrapper.spec:
                return False
            logger.warning("Overwriting existing wrapper: %s", name)
            self.unregister(name)

        self._wrappers[name] = wrapper
        for alias in wrapper.spec.aliases:
            owner = self._aliases.get(alias)
            if owner is not None and owner != name:
                logger.warning("Alias %s moved from %s to %s", alias, owner, name)
            self._aliases[alias] = name
        logger.debug("Registered wrapper: %s", name)
        return True

    def unregister(self, name: str) -> None:
        """Remove a wrapper and the aliases pointing at it."""
        self._wrappers.pop(name, None)
        for alias in [a for a, owner in self._aliases.items() if owner == name]:
            del self._aliases[alias]

    def get(self, name: str) -> Wrapper | None:
        """Look up a wrapper by name or alias."""
        wrapper = self._wrappers.get(name)
        if wrapper is None and name in self._aliases:
            wrapper = self._wrappers.get(self._aliases[name])
        return wrapper

    def __contains__(self, name: object) -> bool:
        return name in self._wrappers or name in self._aliases

    def list_wrappers(self) -> list[str]:
        """List all registered wrapper names."""
        return list(self._wrappers.keys())

    def aliases(self) -> dict[str, str]:
        """Map of alias to wrapper name."""
        return dict(self._aliases)

    def status(self) -> dict[str, dict[str, Any]]:
        """Availability of every registered wrapper."""
        result: dict[str, dict[str, Any]] = {}
        for name, wrapper in self._wrappers.items():
            path = wrapper.locate()
            result[name] = {
                "name": name,
                "available": path is not None,
                "path": path,
                "candidates": wrapper.spec.candidates,
                "aliases": list(wrapper.spec.aliases),
            }
        return result

    def dispatch(self, name: str, args: Sequence[str] = ()) -> int:
        """Invoke the wrapper registered as ``name`` with ``args``."""
        wrapper = self.get(name)
        if wrapper is None:
            logger.warning("No wrapper registered for '%s'", name)
            return TOOL_NOT_FOUND_EXIT
        return wrapper(args)
