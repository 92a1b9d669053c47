"""Configuration loading service"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    ENV_BUFFER_SIZE,
    ENV_COMPRESSION_LEVEL,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    PROJECT_CONFIG_FILE,
)
from ..models.config import ArchiveConfig


class ConfigService:
    """Loads ArchiveConfig from a YAML file and environment overrides

    Lookup order for the file: explicit path, TARTREE_CONFIG, then
    .tartree.yaml in the working directory. A missing file means defaults.
    Environment variables override values from the file.
    """

    def __init__(self,
                 config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file
            environ: Environment mapping (defaults to os.environ)
        """
        self.environ = os.environ if environ is None else environ
        self.explicit_path = Path(config_path) if config_path else None
        self._config: Optional[ArchiveConfig] = None

    @property
    def config(self) -> ArchiveConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def config_path(self) -> Optional[Path]:
        """Configuration file in effect, if any"""
        if self.explicit_path:
            return self.explicit_path

        env_path = self.environ.get(ENV_CONFIG_PATH)
        if env_path:
            return Path(env_path)

        default_path = Path.cwd() / PROJECT_CONFIG_FILE
        if default_path.exists():
            return default_path

        return None

    def load_config(self) -> ArchiveConfig:
        """Load configuration from file and environment

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is unreadable, malformed or has bad values
        """
        data = self._read_file(self.config_path)
        data.update(self._read_environment())
        return ArchiveConfig.from_dict(data)

    def _read_file(self, path: Optional[Path]) -> Dict[str, Any]:
        if path is None:
            return {}

        if not path.exists():
            # Explicitly requested files must exist
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        return dict(data)

    def _read_environment(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}

        for env_name, key in ((ENV_BUFFER_SIZE, "buffer_size"),
                              (ENV_COMPRESSION_LEVEL, "compression_level")):
            value = self.environ.get(env_name)
            if value is None:
                continue
            try:
                overrides[key] = int(value)
            except ValueError as e:
                raise ConfigError(f"{env_name} must be an integer, got {value!r}") from e

        log_level = self.environ.get(ENV_LOG_LEVEL)
        if log_level:
            overrides["log_level"] = log_level

        return overrides
