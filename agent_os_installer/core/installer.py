"""
The main orchestrator: creates the workspace tree and installs every manifest file.
"""

import logging
from pathlib import Path
from typing import Protocol

from rich.console import Console

from agent_os_installer.cli import formatters
from agent_os_installer.core.resolver import AskFunc, resolve_overwrite
from agent_os_installer.exceptions import CriticalFileError, FetchError
from agent_os_installer.models.manifest import (
    DIRECTORIES,
    MANIFEST,
    FileEntry,
    FileGroup,
)
from agent_os_installer.models.session import SessionState
from agent_os_installer.models.stats import InstallStats

log = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def download(self, remote_path: str, destination_path: Path) -> int: ...


class Installer:
    """Installs the manifest into `install_dir`, one file at a time."""

    def __init__(
        self,
        install_dir: Path,
        fetcher: Fetcher,
        session: SessionState,
        ask: AskFunc,
        console: Console | None = None,
        groups: tuple[FileGroup, ...] = MANIFEST,
        directories: tuple[str, ...] = DIRECTORIES,
    ):
        self.install_dir = install_dir
        self.fetcher = fetcher
        self.session = session
        self.ask = ask
        self.console = console or Console()
        self.groups = groups
        self.directories = directories
        self.stats = InstallStats()

    def _display_path(self, entry: FileEntry) -> str:
        return str(entry.target(self.install_dir))

    def create_directories(self) -> None:
        """Creates the fixed directory tree under the install directory."""
        formatters.print_info(self.console, "Creating directory structure...")
        for directory in self.directories:
            (self.install_dir / directory).mkdir(parents=True, exist_ok=True)
        log.debug(f"Ensured {len(self.directories)} directories under {self.install_dir}")

    async def install_file(self, entry: FileEntry) -> bool:
        """
        Installs one entry. Returns False if it was skipped.

        Raises:
            FetchError: If the download or the write fails.
        """
        target = entry.target(self.install_dir)
        shown = self._display_path(entry)

        if target.is_file() and not resolve_overwrite(target, self.session, self.ask):
            formatters.print_warning(self.console, f"Skipped: {shown}")
            self.stats.record_skipped(entry.local_path)
            return False

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FetchError(
                entry.remote_path, f"could not create directory: {e}"
            ) from e
        size = await self.fetcher.download(entry.remote_path, target)
        formatters.print_success(self.console, f"Installed: {shown}")
        self.stats.record_installed(entry.local_path, size)
        return True

    async def install_group(self, group: FileGroup) -> None:
        """
        Installs every entry of a group in order.

        A failure is reported and recorded; for a critical group it then aborts with
        CriticalFileError, otherwise the remaining entries are still attempted.
        """
        formatters.print_info(self.console, group.label)
        for entry in group.entries:
            try:
                await self.install_file(entry)
            except FetchError as e:
                formatters.print_error(
                    self.console, f"Failed to download: {entry.remote_path}"
                )
                log.debug(str(e))
                self.stats.record_failed(entry.local_path)
                if group.critical:
                    raise CriticalFileError(e.remote_path, e.reason) from e

    async def run(self) -> InstallStats:
        """Creates the directory tree and installs every group."""
        self.create_directories()
        for group in self.groups:
            await self.install_group(group)
        return self.stats
