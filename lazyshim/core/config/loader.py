"""
Configuration loader — reads the fragment catalog into domain models.

This is the primary entry point for loading catalog configuration.
It reads YAML, validates against Pydantic schemas, and returns a
typed Catalog. The file is only ever read, never written.

Lookup order:
    explicit path  >  LAZYSHIM_CONFIG env var  >  lazyshim.yml found
    walking up from the cwd  >  bundled default catalog
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from lazyshim.core.data import BUNDLED_CATALOG
from lazyshim.core.models.fragment import Catalog

logger = logging.getLogger(__name__)

# Default config filename
CATALOG_CONFIG_FILE = "lazyshim.yml"

CONFIG_ENV_VAR = "LAZYSHIM_CONFIG"


class ConfigError(Exception):
    """Raised when the catalog is invalid or missing."""


def find_catalog_file(start_dir: Path | None = None) -> Path | None:
    """Search for lazyshim.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to lazyshim.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    # Catalogs sit at most a few levels above the working directory
    for _ in range(20):
        candidate = current / CATALOG_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_catalog_path(path: Path | None = None, start_dir: Path | None = None) -> Path:
    """Pick the catalog file to load, falling back to the bundled one."""
    if path is not None:
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return find_catalog_file(start_dir) or BUNDLED_CATALOG


def load_catalog(path: Path | None = None) -> Catalog:
    """Load and validate a fragment catalog.

    Args:
        path: Explicit path to a catalog file. If None, see
            ``resolve_catalog_path``.

    Returns:
        Validated Catalog model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    path = resolve_catalog_path(path)

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog in {path}: {e}") from e

    logger.info("Loaded %d fragments from %s", len(catalog.fragments), path)
    return catalog
