"""lazyshim — lazy, cached wrappers around command-line tools."""

__version__ = "0.1.0"
