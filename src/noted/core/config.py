"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config()                                  # ~/.config/noted/config.yaml
    config = Config(config_file="/tmp/noted.yaml")     # explicit file

    config.get("notes.directory")       # dot-notation access
    config.get("notes.file_rolling")    # "daily", "week", ...
"""

import json
import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from .exceptions import ConfigurationError
from .utils.file_io import safe_write

_DEFAULT_ENV_PREFIX = "NOTED_"
_CONFIG_DIR_NAME = "noted"
_CONFIG_FILE_NAME = "config.yaml"
_TEMPLATE_FILE_NAME = "noted.template"

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_FILE_ROLLING = "daily"


def default_config_dir() -> Path:
    """Return ``$XDG_CONFIG_HOME/noted``, falling back to ``~/.config/noted``."""
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join("~", ".config")
    return Path(base).expanduser() / _CONFIG_DIR_NAME


def default_config_file() -> Path:
    return default_config_dir() / _CONFIG_FILE_NAME


def initial_note_directory() -> str:
    """Default note directory: the documents folder, else home, else the current directory."""
    home = Path.home()
    documents = home / "Documents"
    if documents.is_dir():
        directory = documents
    elif home.is_dir():
        directory = home
    else:
        directory = Path.cwd()
    logger.debug(f"Initial note directory: {directory}")
    return str(directory)


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    NOTED_NOTES__FILE_ROLLING=month -> config["notes"]["file_rolling"] = "month"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
                Defaults to ``~/.config/noted/config.yaml``.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge.
        """
        self.config_file = config_file or str(default_config_file())
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)
            logger.info(f"Read existing configuration from {self.config_file}")

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        config_dir = os.path.dirname(os.path.abspath(self.config_file))
        return {
            "notes": {
                "directory": initial_note_directory(),
                "use_repository_specific": False,
                "file_rolling": DEFAULT_FILE_ROLLING,
            },
            "template": {
                "date_format": DEFAULT_DATE_FORMAT,
                "file": os.path.join(config_dir, _TEMPLATE_FILE_NAME),
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        with open(path, encoding="utf-8") as f:
            if ext in (".yaml", ".yml"):
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
            elif ext == ".json":
                data = json.load(f)
            else:
                return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if part not in current or not isinstance(current[part], dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "notes.directory", "template.date_format"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def save(self) -> str:
        """Write the current configuration to ``config_file`` as YAML."""
        content = yaml.safe_dump(self.config_data, default_flow_style=False, sort_keys=False)
        safe_write(self.config_file, content)
        logger.debug(f"Configuration written to {self.config_file}")
        return self.config_file

    def ensure_file(self) -> str:
        """Create the config file with default values if it does not exist yet.

        Environment overrides are not persisted.
        """
        if not os.path.exists(self.config_file):
            data = self._get_default_config()
            self._update_dict(data, self._extra_defaults)
            content = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
            safe_write(self.config_file, content)
            logger.info("Configuration with default values created")
        return self.config_file

