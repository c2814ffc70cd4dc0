"""Core data model for modpack.

- `PackLayout`: fixed file names that make up a pack on disk.
- `ModuleRef`: module name + version, rendered as the archive root `name@version`.
- `InfoRecord`: the `<version>.info` sidecar.

This module must not import bundle/cli.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Literal `Z`; callers convert to UTC before formatting.
INFO_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class PackLayout:
    manifest_filename: str = "go.mod"
    archive_filename: str = "source.zip"
    info_suffix: str = ".info"
    pruned_dirs: tuple[str, ...] = (".git",)

    def info_filename(self, version: str) -> str:
        return f"{version}{self.info_suffix}"


DEFAULT_LAYOUT = PackLayout()


@dataclass(frozen=True)
class ModuleRef:
    """A module identity as it appears inside the archive.

    No validation is applied: any name and version (even empty) are accepted
    and used verbatim.
    """

    name: str
    version: str

    @property
    def archive_root(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass(frozen=True)
class InfoRecord:
    version: str
    time: str

    def to_json_dict(self) -> dict[str, Any]:
        # Capitalized keys are part of the on-disk format.
        return {"Version": self.version, "Time": self.time}

    @classmethod
    def from_json_dict(cls, obj: Any) -> "InfoRecord":
        if not isinstance(obj, dict):
            raise ValueError(f"info record: expected JSON object, got {type(obj).__name__}")
        version = obj.get("Version")
        time = obj.get("Time")
        if not isinstance(version, str) or not isinstance(time, str):
            raise ValueError("info record: 'Version' and 'Time' must be strings")
        return cls(version=version, time=time)
