"""
The static list of files the installer fetches, grouped by install policy.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE_URL = (
    "https://raw.githubusercontent.com/Tuanm/.copilot-agent-os/refs/heads/main"
)


@dataclass(frozen=True)
class FileEntry:
    """A single file to install: where it lives remotely and where it goes locally."""

    remote_path: str
    local_path: str

    @classmethod
    def mirrored(cls, path: str) -> "FileEntry":
        """Creates an entry whose local path matches its remote path."""
        return cls(remote_path=path, local_path=path)

    def target(self, install_dir: Path) -> Path:
        return install_dir / self.local_path


@dataclass(frozen=True)
class FileGroup:
    """
    An ordered set of entries sharing a failure policy.

    A download failure in a critical group aborts the whole installation, while
    failures in a best-effort group are reported and the loop moves on.
    """

    name: str
    label: str
    entries: tuple[FileEntry, ...]
    critical: bool = True

    def __len__(self) -> int:
        return len(self.entries)


def _mirror(prefix: str, names: list[str], suffix: str) -> tuple[FileEntry, ...]:
    return tuple(FileEntry.mirrored(f"{prefix}/{name}{suffix}") for name in names)


AGENT_NAMES = [
    "implementation-verifier",
    "implementer",
    "product-planner",
    "spec-initializer",
    "spec-shaper",
    "spec-verifier",
    "spec-writer",
    "tasks-list-creator",
]

PROMPT_NAMES = [
    "plan-product",
    "create-tasks",
    "orchestrate-tasks",
    "write-spec",
    "shape-spec",
    "implement-tasks",
]

STANDARDS = {
    "backend": ["api", "migrations", "models", "queries"],
    "frontend": ["accessibility", "components", "css", "responsive"],
    "global": [
        "coding-style",
        "commenting",
        "conventions",
        "error-handling",
        "tech-stack",
        "validation",
    ],
    "testing": ["test-writing"],
}

# Created before any download, including the ones that receive no files.
DIRECTORIES = (
    ".github/agents",
    ".github/prompts",
    "agent-os/standards/backend",
    "agent-os/standards/frontend",
    "agent-os/standards/global",
    "agent-os/standards/testing",
    "agent-os/product",
    "agent-os/specs",
)

MANIFEST = (
    FileGroup(
        name="core",
        label="Installing core configuration files...",
        entries=(
            FileEntry.mirrored(".github/copilot-instructions.md"),
            FileEntry.mirrored("agent-os/config.yml"),
        ),
    ),
    FileGroup(
        name="agents",
        label="Installing agent definitions...",
        entries=_mirror(".github/agents", AGENT_NAMES, ".agent.md"),
    ),
    FileGroup(
        name="prompts",
        label="Installing prompts...",
        entries=_mirror(".github/prompts", PROMPT_NAMES, ".prompt.md"),
    ),
    FileGroup(
        name="standards",
        label="Installing coding standards...",
        entries=tuple(
            entry
            for area, names in STANDARDS.items()
            for entry in _mirror(f"agent-os/standards/{area}", names, ".md")
        ),
        critical=False,
    ),
)


def get_group(name: str) -> FileGroup:
    """Looks up a manifest group by name."""
    for group in MANIFEST:
        if group.name == name:
            return group
    raise KeyError(name)
