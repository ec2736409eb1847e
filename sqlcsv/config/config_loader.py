"""
Configuration loader for sqlcsv.

Settings are merged from, lowest precedence first: built-in defaults, a base
YAML file, an environment-specific YAML file next to it
(``<stem>_<env>.yaml``) and command-line flags.
"""
import argparse
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from sqlcsv.config.tool_config import ToolConfig
from sqlcsv.errors import ConfigError

# YAML key -> argparse destination
_KEYS = {
    "connection_string": "connection_string",
    "connection_string_env": "connection_string_env",
    "null_literal": "null",
    "query_timeout_seconds": "timeout",
    "ping_timeout_seconds": "ping_timeout",
    "odbc_driver": "odbc_driver",
}


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None, env: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.config_path = config_path
        self.env = env
        self.environ = os.environ if environ is None else environ

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in config file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"config file {path} must contain a mapping")

        unknown = sorted(set(data) - set(_KEYS))
        if unknown:
            raise ConfigError(f"unknown key(s) in config file {path}: {', '.join(unknown)}")
        return data

    def load_file_data(self) -> Dict[str, Any]:
        """
        Load the base YAML file and, when an env is set, merge its override.

        Returns:
            Dict[str, Any]: merged settings keyed by YAML key
        """
        if self.config_path is None:
            if self.env:
                raise ConfigError("--env requires --config")
            return {}

        data = self._read_yaml(self.config_path)

        # Load environment-specific override if specified
        if self.env:
            env_path = self.config_path.with_name(f"{self.config_path.stem}_{self.env}{self.config_path.suffix}")
            # dict.update() will overwrite existing keys
            data.update(self._read_yaml(env_path))

        return data

    def load(self, args: argparse.Namespace) -> ToolConfig:
        """
        Build the effective configuration from the YAML files and parsed flags.

        Raises:
            ConfigError: no usable connection string, or an invalid setting.
        """
        settings = self.load_file_data()
        for key, dest in _KEYS.items():
            value = getattr(args, dest, None)
            if value is not None:
                settings[key] = value

        config = ToolConfig(connection_string=self._resolve_connection_string(settings))
        # A YAML null (unquoted NULL, ~ or an empty value) leaves the default literal.
        if settings.get("null_literal") is not None:
            config.null_literal = str(settings["null_literal"])
        if "query_timeout_seconds" in settings:
            config.query_timeout_seconds = _positive_int(settings["query_timeout_seconds"], "query timeout")
        if "ping_timeout_seconds" in settings:
            config.ping_timeout_seconds = _positive_int(settings["ping_timeout_seconds"], "ping timeout")
        if settings.get("odbc_driver"):
            config.odbc_driver = str(settings["odbc_driver"])

        config.log_file = getattr(args, "log_file", None)
        config.verbose = bool(getattr(args, "verbose", False))
        return config

    def _resolve_connection_string(self, settings: Mapping[str, Any]) -> str:
        connection_string = settings.get("connection_string") or ""
        if connection_string:
            return str(connection_string)

        # fetch name of environment variable
        env_name = settings.get("connection_string_env") or ""
        if not env_name:
            raise ConfigError("missing required sql connection string via -cs or -csenv flag")

        connection_string = self.environ.get(env_name, "")
        if not connection_string:
            raise ConfigError(
                f"missing required sql connection string from environment variable '{env_name}' (via -csenv flag)"
            )
        return connection_string


def _positive_int(value: Any, what: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{what} must be an integer number of seconds, got {value!r}") from e
    if number <= 0:
        raise ConfigError(f"{what} must be positive, got {number}")
    return number
