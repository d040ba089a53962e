"""
Bundled data — the default fragment catalog shipped with lazyshim.
"""

from __future__ import annotations

from pathlib import Path

_DATA_DIR = Path(__file__).parent

BUNDLED_CATALOG = _DATA_DIR / "fragments.yml"
