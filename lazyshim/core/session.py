"""
Session — one interactive lifetime of cache, runner and wrappers.

The session turns catalog fragments into registered wrappers. Eager
fragments are enabled by ``bootstrap()``; lazy fragments are enabled
the first time one of their wrappers is run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lazyshim.adapters.base import ProcessRunner
from lazyshim.adapters.shell.command import SubprocessRunner
from lazyshim.core.cache import CommandCache
from lazyshim.core.models.fragment import Catalog, Fragment
from lazyshim.core.registry import WrapperRegistry
from lazyshim.core.wrapper import Wrapper

logger = logging.getLogger(__name__)


class FragmentNotFound(KeyError):
    """Raised when enabling a fragment the catalog does not declare."""


class Session:
    """Wires a catalog to a cache, a runner and a registry.

    Args:
        catalog: Fragments available to this session.
        cache: Command presence cache (default: fresh PATH cache).
        runner: Process runner (default: SubprocessRunner).
    """

    def __init__(
        self,
        catalog: Catalog,
        cache: CommandCache | None = None,
        runner: ProcessRunner | None = None,
    ):
        self.catalog = catalog
        self.cache = cache or CommandCache()
        self.runner = runner or SubprocessRunner()
        self.registry = WrapperRegistry()
        self._enabled: set[str] = set()

    @property
    def enabled_fragments(self) -> list[str]:
        return sorted(self._enabled)

    def is_enabled(self, fragment_name: str) -> bool:
        return fragment_name in self._enabled

    def enable(self, fragment_name: str) -> Fragment:
        """Register every wrapper of a fragment. Idempotent."""
        fragment = self.catalog.get_fragment(fragment_name)
        if fragment is None:
            raise FragmentNotFound(fragment_name)
        if fragment_name in self._enabled:
            return fragment

        for spec in fragment.wrappers:
            self.registry.register(Wrapper(spec, cache=self.cache, runner=self.runner))
        self._enabled.add(fragment_name)
        logger.info(
            "Enabled fragment '%s' (%d wrappers)", fragment_name, len(fragment.wrappers)
        )
        return fragment

    def bootstrap(self) -> Session:
        """Enable every non-lazy fragment."""
        for fragment in self.catalog.eager_fragments():
            self.enable(fragment.name)
        return self

    def enable_all(self) -> Session:
        """Enable every fragment, lazy ones included."""
        for fragment in self.catalog.fragments:
            self.enable(fragment.name)
        return self

    def wrapper(self, name: str) -> Wrapper | None:
        """Look up a wrapper, enabling its lazy fragment on first use."""
        if name not in self.registry:
            fragment = self.catalog.fragment_for(name)
            if fragment is not None:
                self.enable(fragment.name)
        return self.registry.get(name)

    def run(self, name: str, args: Sequence[str] = ()) -> int:
        """Run wrapper ``name`` with ``args`` and return its exit code."""
        self.wrapper(name)
        return self.registry.dispatch(name, args)
