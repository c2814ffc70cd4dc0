from __future__ import annotations

import json
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from modpack.bundle.info import create_info_file, format_info_time, read_info_file
from modpack.core.errors import InfoCreateError, InfoWriteError
from modpack.core.model import InfoRecord

_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def test_info_file_is_compact_json_without_newline(out_dir: Path) -> None:
    now = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=timezone.utc)

    p = create_info_file("v1.2.3", out_dir, now=now)

    assert p == out_dir / "v1.2.3.info"
    assert p.read_bytes() == b'{"Version":"v1.2.3","Time":"2024-03-05T07:08:09Z"}'


def test_info_file_roundtrip_with_current_time(out_dir: Path) -> None:
    p = create_info_file("v0.0.1", out_dir)

    obj = json.loads(p.read_text(encoding="utf-8"))
    assert obj["Version"] == "v0.0.1"
    assert _TIME_RE.match(obj["Time"])
    assert read_info_file(p) == InfoRecord(version="v0.0.1", time=obj["Time"])


def test_format_info_time_converts_to_utc() -> None:
    plus_two = timezone(timedelta(hours=2))

    assert format_info_time(datetime(2024, 1, 1, 1, 30, 0, tzinfo=plus_two)) == "2023-12-31T23:30:00Z"
    # Naive values are taken as UTC.
    assert format_info_time(datetime(2024, 1, 1, 1, 30, 0)) == "2024-01-01T01:30:00Z"


def test_version_is_used_verbatim(out_dir: Path) -> None:
    p = create_info_file("", out_dir)

    assert p.name == ".info"
    assert read_info_file(p).version == ""


def test_missing_output_directory_is_create_error(tmp_path: Path) -> None:
    with pytest.raises(InfoCreateError, match=r"^could not create info file: unable to create info file"):
        create_info_file("v1", tmp_path / "missing")


def test_info_record_rejects_bad_shape() -> None:
    with pytest.raises(ValueError, match=r"expected JSON object"):
        InfoRecord.from_json_dict(["v1"])
    with pytest.raises(ValueError, match=r"must be strings"):
        InfoRecord.from_json_dict({"Version": "v1"})


class _FailingWriter:
    def __enter__(self) -> "_FailingWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        return None

    def write(self, data: bytes) -> int:
        raise OSError(28, "No space left on device")


def test_write_failure_is_write_error(out_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "open", lambda self, *a, **kw: _FailingWriter())

    with pytest.raises(InfoWriteError, match=r"^could not create info file: unable to write info file: No space left"):
        create_info_file("v1", out_dir)


def test_html_sensitive_characters_are_escaped(out_dir: Path) -> None:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    p = create_info_file("v1<rc>&x", out_dir, now=now)

    assert p.read_bytes() == b'{"Version":"v1\\u003crc\\u003e\\u0026x","Time":"2024-01-01T00:00:00Z"}'
    assert read_info_file(p).version == "v1<rc>&x"
