"""Implementation of the 'check' command.

The check command loads and validates a release configuration and
prints the commit type table in render order.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from versionrc.config import load_config
from versionrc.exceptions import VersionrcError

if TYPE_CHECKING:
    from rich.console import Console

    from versionrc.config.models import ReleaseConfig


def run_check(
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the check command.

    Args:
        path: Optional configuration file or directory to search from
        console: Console for standard output
        err_console: Console for error output
    """
    config_path = Path(path) if path else None

    try:
        config = load_config(config_path)
    except VersionrcError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(_types_table(config))

    hooks = config.scripts.defined()
    scripts = (
        "\n".join(f"  • {name}: [cyan]{escape(command)}[/]" for name, command in hooks.items())
        if hooks
        else "  [dim]none[/]"
    )
    hidden = ", ".join(config.hidden_type_names) or "none"

    console.print(
        Panel(
            f"Pre-major: [cyan]{str(config.pre_major).lower()}[/]\n"
            f"Issue URL: [cyan]{escape(config.issue_url_format)}[/]\n"
            f"Sections: {escape(', '.join(config.visible_sections))}\n"
            f"Hidden types: {escape(hidden)}\n"
            f"Scripts:\n{scripts}",
            title="[green]Configuration valid[/]",
            border_style="green",
        )
    )


def _types_table(config: ReleaseConfig) -> Table:
    table = Table(title="Commit types")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Section")
    table.add_column("Hidden")

    for index, rule in enumerate(config.types, start=1):
        table.add_row(
            str(index),
            rule.type,
            escape(rule.section) if rule.section is not None else "[dim]-[/]",
            "yes" if rule.hidden else "",
        )
    return table
