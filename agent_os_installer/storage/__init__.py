"""
Storage Layer.

This package handles the installer's persisted settings.
"""

from .config_manager import ConfigManager, get_config_dir

__all__ = ["ConfigManager", "get_config_dir"]
