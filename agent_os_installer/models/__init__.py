"""
Data Models Layer.

This package contains the static file manifest and the data structures shared
across the installer: configuration, per-run session state and statistics.
"""

from .config import InstallConfig
from .manifest import DIRECTORIES, MANIFEST, FileEntry, FileGroup
from .session import SessionState
from .stats import InstallStats

__all__ = [
    "DIRECTORIES",
    "MANIFEST",
    "FileEntry",
    "FileGroup",
    "InstallConfig",
    "InstallStats",
    "SessionState",
]
