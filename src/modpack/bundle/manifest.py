"""Module manifest (`go.mod`) helpers.

The manifest is only consulted for its first line, `module <name> ...`.
Tokens are split on single spaces exactly, so tab separators or doubled
spaces are not tolerated (a doubled space yields an empty module name).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from modpack.core.errors import (
    ManifestCopyReadError,
    ManifestCopyWriteError,
    ManifestParseError,
    ManifestReadError,
    describe_os_error,
)
from modpack.core.model import DEFAULT_LAYOUT, PackLayout

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_module_header(line: str) -> str:
    """Return the module name (second space-separated token) from a header line."""
    parts = _strip_line_ending(line).split(" ")
    if len(parts) <= 1:
        raise ManifestParseError(f"unable to parse module header: {line.strip()!r}")
    return parts[1]


def read_module_name(path: PathLike, *, layout: PackLayout = DEFAULT_LAYOUT) -> str:
    """Read the module name from `<path>/<manifest>`.

    Raises:
        ManifestReadError: the manifest cannot be opened.
        ManifestParseError: the first line has fewer than two tokens.
    """
    manifest_path = Path(path) / layout.manifest_filename
    try:
        with manifest_path.open("rb") as f:
            raw_line = f.readline()
    except OSError as e:
        raise ManifestReadError(
            f"unable to open module file: {describe_os_error(e)}", path=manifest_path
        ) from e

    # Only the header line is decoded; bytes elsewhere in the file are never inspected.
    first_line = raw_line.decode("utf-8", errors="surrogateescape")

    try:
        name = parse_module_header(first_line)
    except ManifestParseError as e:
        raise ManifestParseError(e.detail, path=manifest_path) from None

    logger.debug("Resolved module name %r from %s", name, manifest_path)
    return name


def manifest_copy_paths(
    path: PathLike,
    output_directory: PathLike,
    *,
    layout: PackLayout = DEFAULT_LAYOUT,
) -> Optional[tuple[str, str]]:
    """Return (source, destination) for the manifest copy, or None when skipped.

    The copy is skipped when the output directory is literally "." or when the
    joined source and destination paths are the same string.
    """
    if os.fspath(output_directory) == ".":
        return None

    source = os.path.normpath(os.path.join(os.fspath(path), layout.manifest_filename))
    destination = os.path.normpath(os.path.join(os.fspath(output_directory), layout.manifest_filename))
    if source == destination:
        return None
    return source, destination


def copy_manifest(
    path: PathLike,
    output_directory: PathLike,
    *,
    layout: PackLayout = DEFAULT_LAYOUT,
) -> Optional[Path]:
    """Copy the manifest into `output_directory`, overwriting any existing copy.

    Returns the destination path, or None if the copy was skipped.
    """
    paths = manifest_copy_paths(path, output_directory, layout=layout)
    if paths is None:
        logger.debug("Skipping manifest copy (output directory is the module directory)")
        return None
    source, destination = paths

    try:
        contents = Path(source).read_bytes()
    except OSError as e:
        raise ManifestCopyReadError(
            f"unable to read module file: {describe_os_error(e)}", path=source
        ) from e

    try:
        Path(destination).write_bytes(contents)
    except OSError as e:
        raise ManifestCopyWriteError(
            f"unable to write module file: {describe_os_error(e)}", path=destination
        ) from e

    logger.info("Copied %s to %s", source, destination)
    return Path(destination)
