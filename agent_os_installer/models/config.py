"""
Pydantic model for installer configuration.
Provides validation for settings coming from the INI file and the command line.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from agent_os_installer.models.manifest import DEFAULT_BASE_URL


class InstallConfig(BaseModel):
    """A validated configuration model for an installer run."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Source
    base_url: str = DEFAULT_BASE_URL

    # Destination
    install_dir: str = "."

    # Behavior
    force: bool = False

    # Network
    timeout: float = 60.0
    connect_timeout: float = 15.0

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the repository URL is HTTP(S) and drops any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://.")
        v = v.rstrip("/")
        if v in ("http:", "https:"):
            raise ValueError("Base URL must include a host.")
        return v

    @field_validator("install_dir")
    @classmethod
    def validate_install_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("Install directory cannot be empty.")
        return v

    @field_validator("timeout", "connect_timeout")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be greater than zero.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns the keys that may be set in the INI file."""
        return {key for key in cls.model_fields if key != "force"}
