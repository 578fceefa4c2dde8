"""Tests for the install command and the process entry point."""

import pytest
from typer.testing import CliRunner

import agent_os_installer.cli.app as cli_app
from agent_os_installer.__main__ import main
from agent_os_installer.models.manifest import DIRECTORIES, MANIFEST

from .conftest import FakeFetcher

runner = CliRunner()

ALL_PATHS = [e.local_path for g in MANIFEST for e in g.entries]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setattr(cli_app, "CONFIG_FILE", tmp_path / "no-config.ini")


@pytest.fixture
def fake_fetcher(monkeypatch):
    fetcher = FakeFetcher()
    monkeypatch.setattr("agent_os_installer.net.fetcher.HttpFetcher", fetcher)
    return fetcher


@pytest.fixture
def workspace(tmp_path):
    return tmp_path / "workspace"


def test_help():
    result = runner.invoke(cli_app.app, ["-h"])
    assert result.exit_code == 0
    assert "--force" in result.output


def test_version():
    result = runner.invoke(cli_app.app, ["--version"])
    assert result.exit_code == 0
    assert "agent-os-install" in result.output


def test_confirmed_install_writes_everything(fake_fetcher, workspace):
    result = runner.invoke(cli_app.app, ["--dir", str(workspace)], input="y\n")

    assert result.exit_code == 0, result.output
    assert "Installation Complete!" in result.output
    assert fake_fetcher.requested == ALL_PATHS
    for rel in ALL_PATHS:
        assert (workspace / rel).is_file()
    for directory in DIRECTORIES:
        assert (workspace / directory).is_dir()


def test_declined_confirmation_writes_nothing(fake_fetcher, workspace):
    result = runner.invoke(cli_app.app, ["--dir", str(workspace)], input="n\n")

    assert result.exit_code == 0
    assert "Installation cancelled by user" in result.output
    assert fake_fetcher.requested == []
    assert not workspace.exists()


def test_no_input_cancels(fake_fetcher, workspace):
    result = runner.invoke(cli_app.app, ["--dir", str(workspace)], input="")

    assert result.exit_code == 0
    assert "Installation cancelled by user" in result.output
    assert not workspace.exists()


def test_force_overwrites_without_prompts(fake_fetcher, workspace):
    existing = workspace / "agent-os" / "config.yml"
    existing.parent.mkdir(parents=True)
    existing.write_text("local")

    result = runner.invoke(cli_app.app, ["-f", "--dir", str(workspace)])

    assert result.exit_code == 0, result.output
    assert "Running in force mode" in result.output
    assert "File exists" not in result.output
    assert existing.read_text() == "remote agent-os/config.yml\n"


def test_skip_all_prompts_once(fake_fetcher, workspace):
    kept = [".github/copilot-instructions.md", ".github/agents/implementer.agent.md"]
    for rel in kept:
        path = workspace / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("local")

    result = runner.invoke(cli_app.app, ["--dir", str(workspace)], input="y\ns\n")

    assert result.exit_code == 0, result.output
    assert result.output.count("File exists") == 1
    for rel in kept:
        assert (workspace / rel).read_text() == "local"
    assert len(fake_fetcher.requested) == len(ALL_PATHS) - len(kept)


def test_best_effort_failure_still_completes(monkeypatch, workspace):
    fetcher = FakeFetcher(fail={"agent-os/standards/frontend/css.md"})
    monkeypatch.setattr("agent_os_installer.net.fetcher.HttpFetcher", fetcher)

    result = runner.invoke(cli_app.app, ["-f", "--dir", str(workspace)])

    assert result.exit_code == 0, result.output
    assert "Failed to download: agent-os/standards/frontend/css.md" in result.output
    assert fetcher.requested[-1] == "agent-os/standards/testing/test-writing.md"


def test_critical_failure_exits_with_error(monkeypatch, workspace):
    fetcher = FakeFetcher(fail={"agent-os/config.yml"})
    monkeypatch.setattr("agent_os_installer.net.fetcher.HttpFetcher", fetcher)

    result = runner.invoke(cli_app.app, ["-f", "--dir", str(workspace)])

    assert result.exit_code == 1
    assert "CriticalFileError" in result.output
    assert "Installation Complete!" not in result.output
    assert fetcher.requested == [".github/copilot-instructions.md", "agent-os/config.yml"]


def test_invalid_base_url_is_a_configuration_error(fake_fetcher, workspace):
    result = runner.invoke(
        cli_app.app, ["-f", "--dir", str(workspace), "--base-url", "ftp://nope"]
    )

    assert result.exit_code == 1
    assert "ConfigurationError" in result.output
    assert not workspace.exists()


def test_main_unknown_option_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--bogus"])

    assert exc_info.value.code == 1
    output = capsys.readouterr().out
    assert "Unknown option: --bogus" in output
    assert "Use --help for usage information" in output


def test_main_extra_argument_exits_1():
    with pytest.raises(SystemExit) as exc_info:
        main(["somewhere"])
    assert exc_info.value.code == 1


def test_main_help_exits_cleanly(capsys):
    main(["--help"])
    assert "--force" in capsys.readouterr().out


def test_main_missing_http_client_exits_before_writing(monkeypatch, workspace):
    monkeypatch.setattr(
        "agent_os_installer.utils.dependencies.find_spec",
        lambda name: None if name == "aiohttp" else object(),
    )

    with pytest.raises(SystemExit) as exc_info:
        main(["-f", "--dir", str(workspace)])

    assert exc_info.value.code == 1
    assert not workspace.exists()


def test_main_help_before_unknown_option_shows_help(capsys):
    main(["-h", "--bogus"])
    output = capsys.readouterr().out
    assert "--force" in output
    assert "Unknown option" not in output


def test_main_help_after_known_options_shows_help(capsys):
    main(["-f", "--dir", "somewhere", "-h", "--bogus"])
    assert "--force" in capsys.readouterr().out


def test_main_unknown_option_before_help_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--bogus", "-h"])

    assert exc_info.value.code == 1
    assert "Unknown option: --bogus" in capsys.readouterr().out
