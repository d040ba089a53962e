"""
Domain models — Pydantic types for lazyshim.

All models are re-exported here for convenient access:

    from lazyshim.core.models import Catalog, CommandRecord, Fragment, WrapperSpec
"""

from lazyshim.core.models.command import CommandRecord
from lazyshim.core.models.fragment import Catalog, Fragment, WrapperSpec

__all__ = [
    "Catalog",
    "CommandRecord",
    "Fragment",
    "WrapperSpec",
]
