"""versionrc - validated release configuration for conventional changelogs."""

from __future__ import annotations

from versionrc.config import ReleaseConfig, ScriptsConfig, TypeRule, load_config

__version__ = "0.1.0"

__all__ = [
    "ReleaseConfig",
    "ScriptsConfig",
    "TypeRule",
    "__version__",
    "load_config",
]
