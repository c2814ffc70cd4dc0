"""Error taxonomy for the pack pipeline.

Every error names the pipeline step that failed; `str(err)` reads
`"<step>: <detail>"` so a single line is enough for a CLI message.
The original `OSError` (if any) is chained as `__cause__`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

STEP_MODULE_NAME = "could not get module name"
STEP_ARCHIVE = "could not create zip archive"
STEP_INFO = "could not create info file"
STEP_COPY_MANIFEST = "could not copy module file"


class PackError(Exception):
    """Base class for all pack failures."""

    step = "could not pack module"

    def __init__(self, detail: str, *, path: Optional[Union[str, Path]] = None):
        self.detail = detail
        self.path = None if path is None else str(path)
        super().__init__(f"{self.step}: {detail}")


class ManifestReadError(PackError):
    step = STEP_MODULE_NAME


class ManifestParseError(PackError):
    step = STEP_MODULE_NAME


class ArchiveCreateError(PackError):
    step = STEP_ARCHIVE


class ArchiveWriteError(PackError):
    step = STEP_ARCHIVE


class InfoCreateError(PackError):
    step = STEP_INFO


class InfoWriteError(PackError):
    step = STEP_INFO


class ManifestCopyReadError(PackError):
    step = STEP_COPY_MANIFEST


class ManifestCopyWriteError(PackError):
    step = STEP_COPY_MANIFEST


def describe_os_error(e: OSError) -> str:
    """Short, stable description of an OSError (no errno prefix)."""
    reason = e.strerror or e.__class__.__name__
    if e.filename is not None:
        return f"{reason}: {e.filename}"
    return reason
