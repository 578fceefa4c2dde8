"""
Functions for formatting and displaying installer output in the console using Rich.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_os_installer.models.manifest import get_group
from agent_os_installer.models.stats import InstallStats
from agent_os_installer.utils.formatting import format_duration, format_size

RULE = "================================"

NEXT_STEPS = [
    "Review and customize the standards in agent-os/standards/",
    "Run the product-planner agent to initialize your product",
    "Start building features with the agent workflow",
]


def print_header(console: Console, title: str) -> None:
    console.print(f"[blue]{RULE}[/blue]")
    console.print(f"[blue]{escape(title)}[/blue]")
    console.print(f"[blue]{RULE}[/blue]")


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]![/yellow] {escape(message)}")


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]✗[/red] {escape(message)}")


def print_info(console: Console, message: str) -> None:
    console.print(f"[blue]▸[/blue] {escape(message)}")


def print_install_plan(console: Console, install_dir: str = ".") -> None:
    """Lists what the installer is about to write into the workspace."""
    where = "your current directory" if install_dir == "." else escape(install_dir)
    console.print()
    console.print(f"This will install Agent OS files into {where}:")
    console.print(f"  - .github/agents/ ({len(get_group('agents'))} agent files)")
    console.print(f"  - .github/prompts/ ({len(get_group('prompts'))} prompt files)")
    console.print("  - .github/copilot-instructions.md")
    console.print("  - agent-os/ (configuration and standards)")
    console.print()


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "MissingClientError": [
            "• Install the HTTP dependencies: pip install aiohttp aiofiles",
        ],
        "CriticalFileError": [
            "• Check your internet connection.",
            "• Verify the repository URL with --base-url or in the config file.",
            "• Re-run the installer; files already installed can be kept with [s]kip all.",
        ],
        "ConfigurationError": [
            "• Check the values in your config.ini.",
            "• Remove the config file to fall back to the defaults.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -v for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_summary_panel(console: Console, stats: InstallStats) -> None:
    """Displays the final summary of the installer run."""
    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=14)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("✓ Installed:", f"[bold green]{len(stats.installed)}[/bold green]")
    if stats.skipped:
        stats_table.add_row("○ Skipped:", f"[yellow]{len(stats.skipped)}[/yellow]")
    if stats.failed:
        stats_table.add_row("✗ Failed:", f"[bold red]{len(stats.failed)}[/bold red]")
        for path in stats.failed:
            stats_table.add_row("", f"[dim]{escape(path)}[/dim]")

    stats_table.add_row("", "")
    stats_table.add_row("Written:", f"[cyan]{format_size(stats.bytes_written)}[/cyan]")
    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(stats.elapsed)}[/blue]")

    console.print(
        Panel(
            stats_table,
            title="[bold]Summary[/bold]",
            border_style="yellow" if stats.failed else "green",
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )


def print_completion(console: Console, stats: InstallStats) -> None:
    """Prints the closing banner, summary and next steps."""
    console.print()
    print_header(console, "Installation Complete!")
    console.print()
    if stats.failed:
        print_warning(
            console,
            f"Agent OS was installed, but {len(stats.failed)} optional file(s) "
            "could not be downloaded",
        )
    else:
        print_success(
            console, "Agent OS has been successfully installed in your workspace"
        )
    console.print()
    print_summary_panel(console, stats)
    console.print()
    print_info(console, "Next steps:")
    for i, step in enumerate(NEXT_STEPS, 1):
        console.print(f"  {i}. {step}")
    console.print()
