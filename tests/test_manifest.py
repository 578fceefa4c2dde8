"""Tests for the static install manifest."""

from pathlib import Path

from agent_os_installer.models.manifest import (
    DIRECTORIES,
    MANIFEST,
    FileEntry,
    get_group,
)


def test_group_order_and_policies():
    assert [g.name for g in MANIFEST] == ["core", "agents", "prompts", "standards"]
    assert [g.critical for g in MANIFEST] == [True, True, True, False]


def test_group_sizes():
    assert len(get_group("core")) == 2
    assert len(get_group("agents")) == 8
    assert len(get_group("prompts")) == 6
    assert len(get_group("standards")) == 15


def test_entries_are_unique_and_mirrored():
    entries = [e for g in MANIFEST for e in g.entries]
    assert len({e.local_path for e in entries}) == len(entries)
    assert all(e.remote_path == e.local_path for e in entries)


def test_known_entries_present():
    agents = [e.local_path for e in get_group("agents").entries]
    assert agents[0] == ".github/agents/implementation-verifier.agent.md"
    assert ".github/agents/tasks-list-creator.agent.md" in agents

    standards = [e.local_path for e in get_group("standards").entries]
    assert standards[0] == "agent-os/standards/backend/api.md"
    assert standards[-1] == "agent-os/standards/testing/test-writing.md"


def test_every_entry_lands_in_a_created_directory():
    parents = {str(Path(e.local_path).parent) for g in MANIFEST for e in g.entries}
    assert parents - set(DIRECTORIES) <= {".github", "agent-os"}
    assert "agent-os/product" in DIRECTORIES
    assert "agent-os/specs" in DIRECTORIES


def test_entry_target(tmp_path):
    entry = FileEntry(remote_path="x/remote.md", local_path="y/local.md")
    assert entry.target(tmp_path) == tmp_path / "y" / "local.md"
