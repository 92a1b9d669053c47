"""Tests for configuration loading."""

from pathlib import Path

import pytest

from tartree import ArchiveConfig, ConfigError
from tartree.services import ConfigService


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults_without_file_or_environment() -> None:
    config = ConfigService(environ={}).config

    assert config == ArchiveConfig()
    assert config.buffer_size == 1024
    assert config.compression_level == 6
    assert config.include_directories is False
    assert config.log_level == "WARNING"


def test_explicit_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text(
        "buffer_size: 4096\n"
        "compression_level: 9\n"
        "include_directories: true\n"
        "log_level: debug\n"
        "unknown_key: ignored\n"
    )

    config = ConfigService(path, environ={}).config

    assert config.buffer_size == 4096
    assert config.compression_level == 9
    assert config.include_directories is True
    assert config.log_level == "DEBUG"


def test_project_file_in_working_directory(isolated_cwd: Path) -> None:
    (isolated_cwd / ".tartree.yaml").write_text("compression_level: 2\n")

    service = ConfigService(environ={})

    assert service.config_path == isolated_cwd / ".tartree.yaml"
    assert service.config.compression_level == 2


def test_config_path_from_environment(tmp_path: Path) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("buffer_size: 512\n")

    config = ConfigService(environ={"TARTREE_CONFIG": str(path)}).config

    assert config.buffer_size == 512


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("buffer_size: 4096\ncompression_level: 3\n")
    environ = {"TARTREE_BUFFER_SIZE": "2048", "TARTREE_LOG_LEVEL": "info"}

    config = ConfigService(path, environ=environ).config

    assert config.buffer_size == 2048
    assert config.compression_level == 3
    assert config.log_level == "INFO"


def test_environment_variables_are_expanded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TT_TEST_LEVEL", "8")
    path = tmp_path / "custom.yaml"
    path.write_text("compression_level: ${TT_TEST_LEVEL}\n")

    assert ConfigService(path, environ={}).config.compression_level == 8


def test_empty_file_means_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert ConfigService(path, environ={}).config == ArchiveConfig()


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigService(tmp_path / "nope.yaml", environ={}).load_config()


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("buffer_size: [1, 2\n")

    with pytest.raises(ConfigError) as excinfo:
        ConfigService(path, environ={}).load_config()

    assert excinfo.value.__cause__ is not None


def test_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ConfigError):
        ConfigService(path, environ={}).load_config()


@pytest.mark.parametrize("environ", [
    {"TARTREE_COMPRESSION_LEVEL": "10"},
    {"TARTREE_COMPRESSION_LEVEL": "high"},
    {"TARTREE_BUFFER_SIZE": "0"},
    {"TARTREE_LOG_LEVEL": "loud"},
])
def test_invalid_values(environ) -> None:
    with pytest.raises(ConfigError):
        ConfigService(environ=environ).load_config()


def test_config_round_trips_through_dict() -> None:
    config = ArchiveConfig(buffer_size=64, include_directories=True)

    assert ArchiveConfig.from_dict(config.to_dict()) == config
