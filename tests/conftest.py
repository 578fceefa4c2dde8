"""Shared fixtures and fakes for the installer tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from agent_os_installer.exceptions import FetchError
from agent_os_installer.models.manifest import FileEntry, FileGroup


class FakeFetcher:
    """Stands in for HttpFetcher: serves canned bodies, fails on selected paths."""

    def __init__(self, files=None, fail=()):
        self.files = dict(files or {})
        self.fail = set(fail)
        self.requested: list[str] = []

    def __call__(self, *args, **kwargs):
        # Lets the instance replace the HttpFetcher class in CLI tests.
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def download(self, remote_path: str, destination_path: Path) -> int:
        self.requested.append(remote_path)
        if remote_path in self.fail:
            raise FetchError(remote_path, "HTTP 404 Not Found")
        body = self.files.get(remote_path, f"remote {remote_path}\n".encode())
        destination_path.write_bytes(body)
        return len(body)


class ScriptedAsk:
    """Answers overwrite prompts from a fixed script and records each path asked."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.asked: list[Path] = []

    def __call__(self, path: Path) -> str:
        self.asked.append(path)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt for {path}")
        return self.answers.pop(0)


def never_ask(path: Path) -> str:
    raise AssertionError(f"Prompted for {path} when no prompt was expected")


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def small_groups() -> tuple[FileGroup, ...]:
    return (
        FileGroup(
            name="core",
            label="Installing core configuration files...",
            entries=(
                FileEntry.mirrored("conf/main.yml"),
                FileEntry.mirrored("conf/extra.yml"),
            ),
        ),
        FileGroup(
            name="docs",
            label="Installing docs...",
            entries=(
                FileEntry.mirrored("docs/a.md"),
                FileEntry.mirrored("docs/b.md"),
                FileEntry.mirrored("docs/c.md"),
            ),
            critical=False,
        ),
    )
