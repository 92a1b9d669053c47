"""Tests for the command line interface."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from tartree import __version__
from tartree.cli.main import cli
from tests._util import archive_names, read_tree


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    for name in ("TARTREE_CONFIG", "TARTREE_LOG_LEVEL", "TARTREE_BUFFER_SIZE",
                 "TARTREE_COMPRESSION_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_create_extract_round_trip(runner: CliRunner, sample_tree: Path, tmp_path: Path) -> None:
    archive = tmp_path / "out.tar"
    dest = tmp_path / "dest"

    created = runner.invoke(cli, ["create", str(sample_tree), str(archive)])
    extracted = runner.invoke(cli, ["extract", str(archive), str(dest)])

    assert created.exit_code == 0, created.output
    assert "Archive created" in created.output
    assert extracted.exit_code == 0, extracted.output
    assert "Extracted 5 file(s)" in extracted.output
    assert read_tree(dest) == read_tree(sample_tree)


def test_create_with_directory_entries(runner: CliRunner, sample_tree: Path, tmp_path: Path) -> None:
    archive = tmp_path / "out.tar"

    result = runner.invoke(cli, ["create", str(sample_tree), str(archive), "--include-dirs"])

    assert result.exit_code == 0, result.output
    assert "empty" in archive_names(archive)


def test_include_directories_from_config_file(runner: CliRunner, sample_tree: Path,
                                              tmp_path: Path) -> None:
    (tmp_path / ".tartree.yaml").write_text("include_directories: true\n")
    archive = tmp_path / "out.tar"

    result = runner.invoke(cli, ["create", str(sample_tree), str(archive)])

    assert result.exit_code == 0, result.output
    assert "empty" in archive_names(archive)


def test_verbose_prints_statistics(runner: CliRunner, sample_tree: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["-v", "create", str(sample_tree), str(tmp_path / "out.tar")])

    assert result.exit_code == 0, result.output
    assert "Create Result" in result.output


def test_gzip_and_list(runner: CliRunner, sample_tree: Path, tmp_path: Path) -> None:
    archive = tmp_path / "out.tar"
    compressed = tmp_path / "out.tar.gz"
    runner.invoke(cli, ["create", str(sample_tree), str(archive)])

    gzipped = runner.invoke(cli, ["gzip", str(archive), str(compressed), "--level", "9"])
    listed = runner.invoke(cli, ["list", str(compressed)])

    assert gzipped.exit_code == 0, gzipped.output
    assert compressed.exists()
    assert listed.exit_code == 0, listed.output
    assert "README.md" in listed.output


def test_gzip_rejects_invalid_level(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["gzip", "a.tar", "a.tar.gz", "--level", "12"])

    assert result.exit_code == 2


def test_gzip_refuses_existing_destination(runner: CliRunner, sample_tree: Path,
                                           tmp_path: Path) -> None:
    archive = tmp_path / "out.tar"
    compressed = tmp_path / "out.tar.gz"
    runner.invoke(cli, ["create", str(sample_tree), str(archive)])
    compressed.write_bytes(b"existing")

    result = runner.invoke(cli, ["gzip", str(archive), str(compressed)])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert compressed.read_bytes() == b"existing"


def test_create_reports_bad_archive_name(runner: CliRunner, sample_tree: Path,
                                         tmp_path: Path) -> None:
    result = runner.invoke(cli, ["create", str(sample_tree), str(tmp_path / "out.zip")])

    assert result.exit_code == 1
    assert "Archive creation failed" in result.output


def test_extract_reports_unsupported_format(runner: CliRunner, tmp_path: Path) -> None:
    source = tmp_path / "data.zip"
    source.write_bytes(b"PK")

    result = runner.invoke(cli, ["extract", str(source), str(tmp_path / "dest")])

    assert result.exit_code == 1
    assert "Extraction failed" in result.output


def test_list_reports_missing_archive(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["list", str(tmp_path / "missing.tar")])

    assert result.exit_code == 1
    assert "Cannot list archive" in result.output


def test_bad_config_file(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("compression_level: 42\n")

    result = runner.invoke(cli, ["--config", str(config), "list", "x.tar"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_gzip_reports_missing_destination_directory(runner: CliRunner, sample_tree: Path,
                                                    tmp_path: Path) -> None:
    archive = tmp_path / "out.tar"
    runner.invoke(cli, ["create", str(sample_tree), str(archive)])

    result = runner.invoke(cli, ["gzip", str(archive), str(tmp_path / "nodir" / "out.tar.gz")])

    assert result.exit_code == 1
    assert "Compression failed" in result.output


def test_quiet_does_not_disable_logging_globally(runner: CliRunner, sample_tree: Path,
                                                 tmp_path: Path) -> None:
    result = runner.invoke(cli, ["-q", "create", str(sample_tree), str(tmp_path / "out.tar")])

    assert result.exit_code == 0, result.output
    assert logging.root.manager.disable == logging.NOTSET
