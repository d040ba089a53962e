"""
Fragment models — what the catalog declares.

A fragment groups the wrappers for one tool family (containers,
node package managers, python environments...). Fragments are data:
loaded from YAML, validated here, and turned into callables by the
session.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator, model_validator

# Names become shell functions or aliases in `lazyshim init` output
_NAME_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.+-]*$")


def _check_name(value: str) -> str:
    if not _NAME_RE.match(value):
        raise ValueError(f"invalid command name {value!r}")
    return value


class WrapperSpec(BaseModel):
    """One forwarding wrapper around an external executable.

    ``command`` defaults to the wrapper name. ``alternatives`` are
    tried in order when the primary command is missing, so a
    ``container`` wrapper can prefer docker and fall back to podman.
    ``prefix_args`` are inserted before the caller's arguments.
    """

    name: str
    command: str = ""
    alternatives: list[str] = Field(default_factory=list)
    prefix_args: list[str] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)
    description: str = ""
    install_hint: str = ""

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        return _check_name(value)

    @field_validator("aliases")
    @classmethod
    def _valid_aliases(cls, value: list[str]) -> list[str]:
        return [_check_name(a) for a in value]

    @property
    def executable(self) -> str:
        """The primary command this wrapper forwards to."""
        return self.command or self.name

    @property
    def candidates(self) -> list[str]:
        """Executables to try, in order of preference."""
        seen: list[str] = []
        for cmd in (self.executable, *self.alternatives):
            if cmd not in seen:
                seen.append(cmd)
        return seen

    @property
    def names(self) -> list[str]:
        """The wrapper name followed by its aliases."""
        return [self.name, *self.aliases]


class Fragment(BaseModel):
    """An independently loadable group of wrappers.

    Lazy fragments are registered the first time one of their
    wrappers is invoked instead of at startup.
    """

    name: str
    description: str = ""
    lazy: bool = False
    wrappers: list[WrapperSpec] = Field(default_factory=list)

    def get_wrapper(self, name: str) -> WrapperSpec | None:
        """Look up a wrapper by name or alias."""
        for spec in self.wrappers:
            if name in spec.names:
                return spec
        return None


class Catalog(BaseModel):
    """The full set of fragments available to a session."""

    version: int = 1
    fragments: list[Fragment] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_names(self) -> Catalog:
        fragment_names: set[str] = set()
        owners: dict[str, str] = {}
        for frag in self.fragments:
            if frag.name in fragment_names:
                raise ValueError(f"duplicate fragment {frag.name!r}")
            fragment_names.add(frag.name)
            for spec in frag.wrappers:
                for name in spec.names:
                    if name in owners:
                        raise ValueError(
                            f"{name!r} is declared by both "
                            f"{owners[name]!r} and {frag.name!r}"
                        )
                    owners[name] = frag.name
        return self

    def get_fragment(self, name: str) -> Fragment | None:
        """Look up a fragment by name."""
        for frag in self.fragments:
            if frag.name == name:
                return frag
        return None

    def fragment_for(self, name: str) -> Fragment | None:
        """Find the fragment that declares a wrapper or alias ``name``."""
        for frag in self.fragments:
            if frag.get_wrapper(name) is not None:
                return frag
        return None

    def eager_fragments(self) -> list[Fragment]:
        """Fragments registered at startup."""
        return [f for f in self.fragments if not f.lazy]
