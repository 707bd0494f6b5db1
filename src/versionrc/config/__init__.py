"""Configuration management for versionrc."""

from __future__ import annotations

from versionrc.config.loader import dump_config, load_config, parse_config
from versionrc.config.models import ReleaseConfig, ScriptsConfig, TypeRule

__all__ = [
    "ReleaseConfig",
    "ScriptsConfig",
    "TypeRule",
    "dump_config",
    "load_config",
    "parse_config",
]
