"""
Handles the low-level downloading of repository files over HTTP.
"""

import asyncio
import logging
from pathlib import Path

import aiofiles
import aiohttp

from agent_os_installer import __version__
from agent_os_installer.exceptions import FetchError

log = logging.getLogger(__name__)


class HttpFetcher:
    """
    Downloads files relative to a repository base URL using one shared session.

    Use as an async context manager; the session is opened on entry and closed on
    exit.
    """

    def __init__(
        self, base_url: str, timeout: float = 60.0, connect_timeout: float = 15.0
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "HttpFetcher":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def open(self) -> None:
        if self._session and not self._session.closed:
            return
        timeout = aiohttp.ClientTimeout(
            total=self.timeout, sock_connect=self.connect_timeout
        )
        self._session = aiohttp.ClientSession(
            timeout=timeout,
            headers={"User-Agent": f"agent-os-installer/{__version__}"},
        )
        log.debug(f"Opened HTTP session for {self.base_url}")

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
            log.debug("HTTP session closed.")
        self._session = None

    def url_for(self, remote_path: str) -> str:
        """Builds the full download URL for a repository-relative path."""
        return f"{self.base_url}/{remote_path.lstrip('/')}"

    async def fetch(self, remote_path: str) -> bytes:
        """
        Fetches the full body of a repository file.

        Raises:
            FetchError: On any HTTP error status, connection failure or timeout.
        """
        if self._session is None or self._session.closed:
            raise RuntimeError("HttpFetcher used outside of its session context.")

        url = self.url_for(remote_path)
        log.debug(f"GET {url}")
        try:
            async with self._session.get(url, allow_redirects=True) as response:
                response.raise_for_status()
                body = await response.read()
        except aiohttp.ClientResponseError as e:
            raise FetchError(remote_path, f"HTTP {e.status} {e.message}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(remote_path, str(e) or type(e).__name__) from e

        log.debug(f"Fetched {len(body)} bytes from {url}")
        return body

    async def download(self, remote_path: str, destination_path: Path) -> int:
        """
        Downloads a repository file to `destination_path`, returning the byte count.

        The body is read completely before the destination is opened, so a failed
        request leaves any existing file untouched.
        """
        body = await self.fetch(remote_path)
        try:
            async with aiofiles.open(destination_path, "wb") as f:
                await f.write(body)
        except OSError as e:
            raise FetchError(remote_path, f"could not write file: {e}") from e
        return len(body)
