"""
Defines custom exceptions for the installer to allow for more specific error handling.
"""


class InstallerError(Exception):
    """Base exception for all installer-specific errors."""


class ConfigurationError(InstallerError):
    """Raised for issues related to configuration loading or validation."""


class MissingClientError(InstallerError):
    """Raised when the HTTP client library needed for downloads is not available."""


class FetchError(InstallerError):
    """Raised when a single file cannot be downloaded from the repository."""

    def __init__(self, remote_path: str, reason: str):
        super().__init__(f"Failed to download '{remote_path}': {reason}")
        self.remote_path = remote_path
        self.reason = reason


class CriticalFileError(FetchError):
    """
    Raised when a file from a critical group fails, which aborts the installation.
    """
