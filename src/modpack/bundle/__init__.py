"""modpack bundle I/O (pack-on-disk format).

A pack is three files in one output directory:
- `source.zip`: module tree rooted under `<module>@<version>/`, `.git` excluded
- `<version>.info`: `{"Version": ..., "Time": ...}`
- `go.mod`: copy of the module manifest
"""

from __future__ import annotations

from .archive import archive_entry_name, collect_files, create_archive
from .info import create_info_file, format_info_time, read_info_file
from .manifest import copy_manifest, read_module_name
from .pack import PackResult, pack_module

__all__ = [
    "PackResult",
    "pack_module",
    "read_module_name",
    "copy_manifest",
    "collect_files",
    "archive_entry_name",
    "create_archive",
    "create_info_file",
    "format_info_time",
    "read_info_file",
]
