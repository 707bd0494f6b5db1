"""Typer application wiring the versionrc commands.

Command bodies live in versionrc.cli.commands; this module only parses
arguments and sets up consoles and logging.
"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from versionrc import __version__

app = typer.Typer(
    name="versionrc",
    help="Validate and inspect conventional-changelog release configuration.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"versionrc {__version__}")
        raise typer.Exit


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Validate and inspect conventional-changelog release configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def check(
    path: Annotated[
        str | None,
        typer.Argument(help="Configuration file, or directory to search from."),
    ] = None,
) -> None:
    """Load and validate a release configuration."""
    from versionrc.cli.commands.check import run_check

    run_check(path, console, err_console)


@app.command()
def show(
    path: Annotated[
        str | None,
        typer.Argument(help="Configuration file, or directory to search from."),
    ] = None,
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="Show a built-in preset instead."),
    ] = None,
) -> None:
    """Print the configuration as normalized JSON."""
    from versionrc.cli.commands.show import run_show

    run_show(path, preset, console, err_console)


@app.command("issue-url")
def issue_url(
    issue_id: Annotated[str, typer.Argument(help="Issue identifier, e.g. 42.")],
    config: Annotated[
        str | None,
        typer.Option("--config", "-c", help="Configuration file, or directory to search from."),
    ] = None,
) -> None:
    """Render the issue URL for an issue identifier."""
    from versionrc.cli.commands.issue_url import run_issue_url

    run_issue_url(issue_id, config, console, err_console)
