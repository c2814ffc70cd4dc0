"""modpack core: data model and error taxonomy.

This package is intentionally standalone and must not import CLI/bundle
to avoid circular dependencies.
"""

from __future__ import annotations

from .errors import (
    ArchiveCreateError,
    ArchiveWriteError,
    InfoCreateError,
    InfoWriteError,
    ManifestCopyReadError,
    ManifestCopyWriteError,
    ManifestParseError,
    ManifestReadError,
    PackError,
)
from .model import DEFAULT_LAYOUT, INFO_TIME_FORMAT, InfoRecord, ModuleRef, PackLayout

__all__ = [
    "DEFAULT_LAYOUT",
    "INFO_TIME_FORMAT",
    "InfoRecord",
    "ModuleRef",
    "PackLayout",
    "PackError",
    "ManifestReadError",
    "ManifestParseError",
    "ArchiveCreateError",
    "ArchiveWriteError",
    "InfoCreateError",
    "InfoWriteError",
    "ManifestCopyReadError",
    "ManifestCopyWriteError",
]
