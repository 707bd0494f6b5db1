"""Implementation of the 'issue-url' command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from versionrc.config import load_config
from versionrc.core.issues import render_issue_url
from versionrc.exceptions import VersionrcError

if TYPE_CHECKING:
    from rich.console import Console


def run_issue_url(
    issue_id: str,
    config_path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the issue-url command.

    Args:
        issue_id: Issue identifier to substitute
        config_path: Optional configuration file or directory to search from
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        config = load_config(Path(config_path) if config_path else None)
    except VersionrcError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        url = render_issue_url(config, issue_id)
    except ValueError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(url, markup=False, highlight=False, emoji=False, soft_wrap=True)
