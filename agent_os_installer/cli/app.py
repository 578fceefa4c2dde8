"""
Defines the command-line interface for the installer using Typer.
"""

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from agent_os_installer import __version__
from agent_os_installer.core.installer import Installer
from agent_os_installer.core.resolver import OVERWRITE_PROMPT
from agent_os_installer.exceptions import InstallerError
from agent_os_installer.models.config import InstallConfig
from agent_os_installer.models.session import SessionState
from agent_os_installer.models.stats import InstallStats
from agent_os_installer.storage.config_manager import ConfigManager, get_config_dir
from agent_os_installer.utils.dependencies import ensure_http_client

from .formatters import (
    format_error_with_suggestions,
    print_completion,
    print_header,
    print_install_plan,
    print_warning,
)

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("agent_os_installer")

PROG_NAME = "agent-os-install"
CONFIRM_PROMPT = "Do you want to continue? [y/N]: "

CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"

app = typer.Typer(
    name=PROG_NAME,
    help="Install Agent OS agent, prompt and standards files into your workspace.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def _read_answer(prompt: str) -> str:
    """Reads one line from the console; end-of-input counts as an empty answer."""
    try:
        return console.input(prompt, markup=False)
    except EOFError:
        console.print()
        return ""


def ask_overwrite(path: Path) -> str:
    console.print(f"[yellow]File exists: {escape(str(path))}[/yellow]")
    return _read_answer(OVERWRITE_PROMPT)


def confirm_install(install_dir: str) -> bool:
    """Shows the install plan and asks for a go-ahead. Only y/yes proceeds."""
    print_install_plan(console, install_dir)
    response = _read_answer(CONFIRM_PROMPT).strip().lower()
    return response in ("y", "yes")


async def run_install(config: InstallConfig, session: SessionState) -> InstallStats:
    """Opens the HTTP session and runs the installer over the whole manifest."""
    # Imported here so a missing HTTP client is reported before it is needed.
    from agent_os_installer.net.fetcher import HttpFetcher

    async with HttpFetcher(
        config.base_url,
        timeout=config.timeout,
        connect_timeout=config.connect_timeout,
    ) as fetcher:
        installer = Installer(
            Path(config.install_dir),
            fetcher,
            session,
            ask=ask_overwrite,
            console=console,
        )
        return await installer.run()


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def install(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Install without prompting (overwrite all files).",
    ),
    install_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--dir",
        "-d",
        help="Workspace directory to install into (default: current directory).",
        file_okay=False,
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Repository URL the files are downloaded from.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging."
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """Install Agent OS files into your workspace."""
    if version:
        console.print(f"[bold]{PROG_NAME}[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    logging.getLogger("agent_os_installer").setLevel("DEBUG" if verbose else "INFO")

    cli_options = {
        key: value
        for key, value in {
            "force": force or None,
            "install_dir": str(install_dir) if install_dir is not None else None,
            "base_url": base_url,
        }.items()
        if value is not None
    }

    try:
        ensure_http_client()
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
    except InstallerError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    session = SessionState(force_mode=config.force)
    log.debug(f"Installing from {config.base_url} into '{config.install_dir}'")

    print_header(console, "Installing Agent OS")

    if not session.force_mode:
        if not confirm_install(config.install_dir):
            print_warning(console, "Installation cancelled by user")
            raise typer.Exit()
        console.print()
    else:
        print_warning(
            console, "Running in force mode - all existing files will be overwritten"
        )

    try:
        stats = asyncio.run(run_install(config, session))
    except InstallerError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    print_completion(console, stats)
