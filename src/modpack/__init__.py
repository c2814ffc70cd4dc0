"""modpack — package a Go-style module directory into a distributable bundle.

A pack consists of three files written into an output directory:
- `source.zip` with every entry rooted under `<module>@<version>/`
- `<version>.info` holding the version and packaging time as JSON
- a copy of the module manifest (`go.mod`)
"""

from __future__ import annotations

from modpack.bundle import PackResult, pack_module
from modpack.core import PackError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "PackError",
    "PackResult",
    "pack_module",
]
