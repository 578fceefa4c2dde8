"""
Dataclass for tracking installer run statistics.
"""

import time
from dataclasses import dataclass, field


@dataclass
class InstallStats:
    """Tracks which files were installed, skipped or failed during a run."""

    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    bytes_written: int = 0
    _start_time: float = field(default_factory=time.monotonic, repr=False)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self._start_time

    def record_installed(self, path: str, size: int) -> None:
        self.installed.append(path)
        self.bytes_written += size

    def record_skipped(self, path: str) -> None:
        self.skipped.append(path)

    def record_failed(self, path: str) -> None:
        self.failed.append(path)
