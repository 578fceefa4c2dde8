"""
Mutable per-run state consulted by the overwrite resolver.
"""

from dataclasses import dataclass


@dataclass
class SessionState:
    """
    Overwrite policy for one installer run.

    `force_mode` is fixed from the command line. `overwrite_all` and `skip_all`
    start unset and are latched by the first "all" / "skip all" answer; once set
    they stay set for the rest of the run.
    """

    force_mode: bool = False
    overwrite_all: bool = False
    skip_all: bool = False

    @property
    def is_sticky(self) -> bool:
        """True when no further prompts will be shown this run."""
        return self.force_mode or self.overwrite_all or self.skip_all
