"""Configuration — catalog discovery and loading."""

from lazyshim.core.config.loader import (
    CATALOG_CONFIG_FILE,
    ConfigError,
    find_catalog_file,
    load_catalog,
)

__all__ = [
    "CATALOG_CONFIG_FILE",
    "ConfigError",
    "find_catalog_file",
    "load_catalog",
]
