"""Allow running as `python -m versionrc`."""

from versionrc.cli.app import app

app()
