"""Implementation of the 'show' command.

The show command prints a configuration as normalized `.versionrc` JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from versionrc.config import dump_config, load_config
from versionrc.exceptions import VersionrcError
from versionrc.presets import get_preset

if TYPE_CHECKING:
    from rich.console import Console


def run_show(
    path: str | None,
    preset: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the show command.

    Args:
        path: Optional configuration file or directory to search from
        preset: Name of a built-in preset to show instead of a file
        console: Console for standard output
        err_console: Console for error output
    """
    if path and preset:
        err_console.print("[red]Error:[/] Pass either a path or [cyan]--preset[/], not both.")
        raise SystemExit(1)

    try:
        config = get_preset(preset) if preset else load_config(Path(path) if path else None)
    except VersionrcError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(
        dump_config(config),
        end="",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
