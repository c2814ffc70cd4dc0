"""Pack a module directory into `source.zip` + `<version>.info` + manifest copy.

Steps run in order and the first failure aborts the pack. Files written by
earlier steps are left in place.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from modpack.core.model import DEFAULT_LAYOUT, ModuleRef, PackLayout

from .archive import create_archive
from .info import create_info_file
from .manifest import copy_manifest, read_module_name

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class PackResult:
    module: ModuleRef
    archive_path: Path
    info_path: Path
    manifest_path: Optional[Path]  # None when the manifest copy was skipped


def pack_module(
    path: PathLike,
    version: str,
    output_directory: PathLike,
    *,
    now: Optional[datetime] = None,
    layout: PackLayout = DEFAULT_LAYOUT,
) -> PackResult:
    """Pack the module at `path` as `version` into `output_directory`.

    `output_directory` must already exist. `version` is used verbatim.

    Raises:
        PackError subclasses (see `modpack.core.errors`).
    """
    module_name = read_module_name(path, layout=layout)
    archive_path = create_archive(path, module_name, version, output_directory, layout=layout)
    info_path = create_info_file(version, output_directory, now=now, layout=layout)
    manifest_path = copy_manifest(path, output_directory, layout=layout)

    ref = ModuleRef(name=module_name, version=version)
    logger.info("Packed %s into %s", ref.archive_root, output_directory)
    return PackResult(
        module=ref,
        archive_path=archive_path,
        info_path=info_path,
        manifest_path=manifest_path,
    )
