"""Source archive (`source.zip`) creation.

Every regular file under the module root is stored as
`<module>@<version>/<relative/path>`; directories are not stored as entries.
Directories named in `PackLayout.pruned_dirs` (`.git`) are not descended into.

Traversal is depth-first in lexical name order within each directory, so the
entry order does not depend on the filesystem.
"""

from __future__ import annotations

import logging
import os
import shutil
import zipfile
from pathlib import Path
from typing import Union

from modpack.core.errors import ArchiveCreateError, ArchiveWriteError, describe_os_error
from modpack.core.model import DEFAULT_LAYOUT, ModuleRef, PackLayout

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

_COPY_CHUNK_SIZE = 1024 * 1024


def collect_files(path: PathLike, *, layout: PackLayout = DEFAULT_LAYOUT) -> list[str]:
    """Return every file path under `path` to be archived, in archive order.

    Raises:
        ArchiveCreateError: a directory in the tree cannot be listed.
    """
    files: list[str] = []
    _walk(os.fspath(path), layout.pruned_dirs, files)
    return files


def _walk(dirpath: str, pruned: tuple[str, ...], out: list[str]) -> None:
    try:
        with os.scandir(dirpath) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise ArchiveCreateError(
            f"unable to get files to archive: {describe_os_error(e)}", path=dirpath
        ) from e

    for entry in entries:
        # Symlinks are archived as files (their target is read).
        if entry.is_dir(follow_symlinks=False):
            if entry.name not in pruned:
                _walk(entry.path, pruned, out)
        else:
            out.append(entry.path)


def archive_entry_name(path: PathLike, file_path: PathLike, ref: ModuleRef) -> str:
    """Return the in-archive name for `file_path`, relative to the module root.

    The relative part is computed path-aware (no leading separator regardless
    of a trailing separator on `path`) and always uses `/`.
    """
    rel = os.path.relpath(os.fspath(file_path), os.fspath(path))
    rel = rel.replace(os.sep, "/")
    return f"{ref.archive_root}/{rel}"


def create_archive(
    path: PathLike,
    module_name: str,
    version: str,
    output_directory: PathLike,
    *,
    layout: PackLayout = DEFAULT_LAYOUT,
) -> Path:
    """Write `<output_directory>/source.zip` and return its path.

    Raises:
        ArchiveCreateError: the tree cannot be walked or the archive file cannot be created.
        ArchiveWriteError: a source file cannot be read or copied into the archive.
    """
    ref = ModuleRef(name=module_name, version=version)
    out_path = Path(output_directory) / layout.archive_filename

    # An archive left in the tree by a previous run must not pack itself.
    out_real = os.path.realpath(out_path)
    files = [f for f in collect_files(path, layout=layout) if os.path.realpath(f) != out_real]

    try:
        zip_file = out_path.open("wb")
    except OSError as e:
        raise ArchiveCreateError(f"unable to create zip file: {describe_os_error(e)}", path=out_path) from e

    # ZipFile is closed (central directory written) before the file handle.
    try:
        with zip_file, zipfile.ZipFile(zip_file, mode="w", compression=zipfile.ZIP_DEFLATED) as zf:
            for file_path in files:
                entry_name = archive_entry_name(path, file_path, ref)
                _write_entry(zf, file_path, entry_name)
                logger.debug("Archived %s as %s", file_path, entry_name)
    except OSError as e:
        raise ArchiveWriteError(f"unable to finalize zip archive: {describe_os_error(e)}", path=out_path) from e

    logger.info("Wrote %s (%d files under %s/)", out_path, len(files), ref.archive_root)
    return out_path


def _write_entry(zf: zipfile.ZipFile, file_path: str, entry_name: str) -> None:
    try:
        src = open(file_path, "rb")
    except OSError as e:
        raise ArchiveWriteError(f"unable to open file: {describe_os_error(e)}", path=file_path) from e

    with src:
        try:
            info = zipfile.ZipInfo.from_file(file_path, arcname=entry_name, strict_timestamps=False)
            info.compress_type = zipfile.ZIP_DEFLATED
            with zf.open(info, mode="w") as dst:
                shutil.copyfileobj(src, dst, _COPY_CHUNK_SIZE)
        except OSError as e:
            raise ArchiveWriteError(
                f"unable to copy file contents to zip archive: {describe_os_error(e)}", path=file_path
            ) from e
