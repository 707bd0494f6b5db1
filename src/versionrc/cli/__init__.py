"""Command-line interface for versionrc."""

from __future__ import annotations

from versionrc.cli.app import app

__all__ = ["app"]
