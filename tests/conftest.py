"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from lazyshim.adapters.mock import MockResolver, MockRunner
from lazyshim.core.cache import CommandCache


@pytest.fixture(autouse=True)
def reset_lazyshim_logger():
    """Undo CLI logging setup so caplog sees every test's records."""
    yield
    logger = logging.getLogger("lazyshim")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def resolver() -> MockResolver:
    """Resolver where only git and docker are installed."""
    return MockResolver({"git": "/usr/bin/git", "docker": "/usr/bin/docker"})


@pytest.fixture
def runner() -> MockRunner:
    return MockRunner()


@pytest.fixture
def cache(resolver: MockResolver) -> CommandCache:
    return CommandCache(resolver)


@pytest.fixture
def catalog_yml(tmp_path: Path) -> Path:
    """A small catalog with one eager and one lazy fragment."""
    content = textwrap.dedent("""\
        version: 1
        fragments:
          - name: containers
            description: Container engines
            wrappers:
              - name: docker
                aliases: [d]
              - name: container
                command: docker
                alternatives: [podman]
              - name: compose
                command: docker
                alternatives: [podman]
                prefix_args: [compose]
                aliases: [dc]
          - name: kubernetes
            lazy: true
            wrappers:
              - name: kubectl
                aliases: [k]
                install_hint: https://kubernetes.io/docs/tasks/tools/
    """)
    path = tmp_path / "lazyshim.yml"
    path.write_text(content)
    return path


@pytest.fixture
def fake_tool(tmp_path: Path):
    """Factory writing an executable shell script into ``tmp_path/bin``."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)

    def _make(name: str, body: str = "exit 0") -> Path:
        path = bin_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return path

    _make.bin_dir = bin_dir
    return _make
