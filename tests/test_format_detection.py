"""Tests for archive format detection and compression adapters."""

import gzip
import io
from pathlib import Path

import pytest

from tartree.core.compression import (
    ArchiveFormat,
    GzipAdapter,
    NoCompressionAdapter,
    detect_archive_format,
    get_archive_extension,
    get_compression_adapter,
)


@pytest.mark.parametrize("name, expected", [
    ("a.tar", ArchiveFormat.TAR),
    ("A.TAR", ArchiveFormat.TAR),
    ("backup.tar.gz", ArchiveFormat.TAR_GZ),
    ("Backup.Tar.Gz", ArchiveFormat.TAR_GZ),
    ("nested/dir/x.tar.gz", ArchiveFormat.TAR_GZ),
    ("a.zip", ArchiveFormat.INVALID),
    ("a.gz", ArchiveFormat.INVALID),
    ("a.tgz", ArchiveFormat.INVALID),
    ("a.tar.bz2", ArchiveFormat.INVALID),
    ("tar", ArchiveFormat.TAR),
    ("noextension", ArchiveFormat.INVALID),
])
def test_detect_archive_format(name: str, expected: ArchiveFormat) -> None:
    assert detect_archive_format(name) == expected


def test_detect_archive_format_accepts_paths() -> None:
    assert detect_archive_format(Path("/tmp/some.tar.gz")) == ArchiveFormat.TAR_GZ


def test_archive_extensions() -> None:
    assert get_archive_extension(ArchiveFormat.TAR) == ".tar"
    assert get_archive_extension(ArchiveFormat.TAR_GZ) == ".tar.gz"
    assert get_archive_extension(ArchiveFormat.INVALID) == ""


def test_adapter_registry() -> None:
    assert isinstance(get_compression_adapter(ArchiveFormat.TAR), NoCompressionAdapter)
    assert isinstance(get_compression_adapter(ArchiveFormat.TAR_GZ), GzipAdapter)
    assert get_compression_adapter(ArchiveFormat.INVALID) is None
    assert get_compression_adapter(ArchiveFormat.TAR_GZ, level=9).level == 9


def test_gzip_adapter_round_trip_keeps_raw_stream_open() -> None:
    adapter = GzipAdapter(level=1)
    raw = io.BytesIO()

    with adapter.wrap_output(raw) as out:
        out.write(b"payload" * 100)

    assert not raw.closed
    assert gzip.decompress(raw.getvalue()) == b"payload" * 100

    raw.seek(0)
    with adapter.wrap_input(raw) as src:
        assert src.read() == b"payload" * 100


def test_no_compression_adapter_is_identity() -> None:
    raw = io.BytesIO(b"x")
    adapter = NoCompressionAdapter()
    assert adapter.wrap_input(raw) is raw
    assert adapter.wrap_output(raw) is raw
    assert adapter.get_extension() == ".tar"


def test_gzip_adapter_rejects_bad_level() -> None:
    with pytest.raises(ValueError):
        GzipAdapter(level=0)
