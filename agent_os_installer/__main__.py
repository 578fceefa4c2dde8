"""
Main entry point for the agent-os-installer application.
This module handles top-level setup, exception handling, and CLI invocation.
"""

import logging
import os
import sys

import click
import typer
from rich.console import Console
from rich.markup import escape

from agent_os_installer.cli.app import PROG_NAME, app
from agent_os_installer.cli.formatters import format_error_with_suggestions
from agent_os_installer.exceptions import InstallerError

HELP_FLAGS = ("-h", "--help")


def _help_comes_first(args: list[str]) -> bool:
    """
    True if a help flag appears before the first token the command does not know.

    Flags are honoured left to right, so `-h --bogus` shows help while
    `--bogus -h` is a usage error.
    """
    command = typer.main.get_command(app)
    flags: set[str] = set()
    value_options: set[str] = set()
    for param in command.params:
        if not isinstance(param, click.Option):
            continue
        names = param.opts + param.secondary_opts
        if param.is_flag or param.count:
            flags.update(names)
        else:
            value_options.update(names)

    expect_value = False
    for token in args:
        if expect_value:
            expect_value = False
        elif token in HELP_FLAGS:
            return True
        elif token in flags:
            continue
        elif token in value_options:
            expect_value = True
        elif token.split("=", 1)[0] not in value_options:
            return False
    return False


def main(argv: list[str] | None = None) -> None:
    """Main entry point function."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    log = logging.getLogger("agent_os_installer")
    console = Console()

    args = sys.argv[1:] if argv is None else list(argv)
    if _help_comes_first(args):
        args = ["--help"]

    try:
        exit_code = app(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except click.NoSuchOption as e:
        console.print(f"[red]Unknown option: {escape(e.option_name)}[/red]")
        console.print("Use --help for usage information")
        sys.exit(1)
    except click.UsageError as e:
        console.print(f"[red]{escape(e.format_message())}[/red]")
        console.print("Use --help for usage information")
        sys.exit(1)
    except (KeyboardInterrupt, typer.Abort):
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        sys.exit(0)
    except InstallerError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
