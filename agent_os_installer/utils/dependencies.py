"""
Checks that the HTTP client library is importable before any file is touched.
"""

import logging
from importlib.util import find_spec

from agent_os_installer.exceptions import MissingClientError

log = logging.getLogger(__name__)

HTTP_CLIENT_MODULES = ("aiohttp", "aiofiles")


def ensure_http_client() -> None:
    """
    Raises MissingClientError unless every module the downloader needs is installed.
    """
    missing = [name for name in HTTP_CLIENT_MODULES if find_spec(name) is None]
    if missing:
        raise MissingClientError(
            f"HTTP client not installed (missing: {', '.join(missing)}). "
            "Please install it and try again."
        )
    log.debug("HTTP client modules available: " + ", ".join(HTTP_CLIENT_MODULES))
