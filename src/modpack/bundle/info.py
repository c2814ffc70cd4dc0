"""`<version>.info` sidecar: `{"Version": ..., "Time": "YYYY-MM-DDTHH:MM:SSZ"}`.

Written as compact UTF-8 JSON with no trailing newline.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from modpack.core.errors import InfoCreateError, InfoWriteError, describe_os_error
from modpack.core.model import DEFAULT_LAYOUT, INFO_TIME_FORMAT, InfoRecord, PackLayout

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def format_info_time(dt: datetime) -> str:
    """Format `dt` in UTC at second precision; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(INFO_TIME_FORMAT)


# Escaped as the Go toolchain escapes them in JSON strings.
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def encode_info(record: InfoRecord) -> bytes:
    text = json.dumps(record.to_json_dict(), separators=(",", ":"), ensure_ascii=False)
    for ch, escaped in _HTML_ESCAPES.items():
        text = text.replace(ch, escaped)
    return text.encode("utf-8")


def create_info_file(
    version: str,
    output_directory: PathLike,
    *,
    now: Optional[datetime] = None,
    layout: PackLayout = DEFAULT_LAYOUT,
) -> Path:
    """Write `<output_directory>/<version>.info` and return its path."""
    if now is None:
        now = datetime.now(timezone.utc)
    record = InfoRecord(version=version, time=format_info_time(now))
    payload = encode_info(record)

    info_path = Path(output_directory) / layout.info_filename(version)
    try:
        f = info_path.open("wb")
    except OSError as e:
        raise InfoCreateError(f"unable to create info file: {describe_os_error(e)}", path=info_path) from e

    try:
        with f:
            f.write(payload)
    except OSError as e:
        raise InfoWriteError(f"unable to write info file: {describe_os_error(e)}", path=info_path) from e

    logger.info("Wrote %s (Time=%s)", info_path, record.time)
    return info_path


def read_info_file(path: PathLike) -> InfoRecord:
    """Load an info sidecar written by `create_info_file()`."""
    p = Path(path)
    return InfoRecord.from_json_dict(json.loads(p.read_text(encoding="utf-8")))
