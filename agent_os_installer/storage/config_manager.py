"""
Manages loading and validation of the optional INI configuration file.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape

from agent_os_installer.exceptions import ConfigurationError
from agent_os_installer.models.config import InstallConfig

log = logging.getLogger(__name__)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "agent-os-installer"


class ConfigManager:
    """Handles reading the installer's INI config file and merging CLI overrides."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(self, cli_options: dict[str, Any] | None = None) -> InstallConfig:
        """
        Loads configuration from the INI file (if any), applies CLI overrides, and
        validates the result.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated InstallConfig object.

        Raises:
            ConfigurationError: If the config file is unreadable or validation fails.
        """
        config_from_file: dict[str, Any] = {}
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e
            config_from_file = self._get_config_as_dict()
            log.debug(f"Loaded configuration from '{self.config_file_path}'.")
        else:
            log.debug(
                f"No configuration file at '{self.config_file_path}', using defaults."
            )

        if cli_options:
            config_from_file.update(cli_options)

        try:
            return InstallConfig(**config_from_file)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the known keys of the 'DEFAULT' section into a dictionary."""
        section = self._parser["DEFAULT"]
        unknown = set(section.keys()) - InstallConfig.get_ini_keys()
        for key in sorted(unknown):
            log.warning(
                f"[yellow]Ignoring unknown config key '{escape(key)}'.[/yellow]"
            )

        values: dict[str, Any] = {}
        if "base_url" in section:
            values["base_url"] = section.get("base_url")
        if "install_dir" in section:
            values["install_dir"] = section.get("install_dir")
        try:
            if "timeout" in section:
                values["timeout"] = section.getfloat("timeout")
            if "connect_timeout" in section:
                values["connect_timeout"] = section.getfloat("connect_timeout")
        except ValueError as e:
            raise ConfigurationError(f"Invalid number in configuration file: {e}") from e
        return values
