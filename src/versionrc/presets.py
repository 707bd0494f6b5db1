"""Ready-made release configurations for direct import.

Presets are kept as raw `.versionrc` mappings so they go through the same
validation as configurations read from disk.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from versionrc.config.loader import parse_config
from versionrc.exceptions import PresetNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from versionrc.config.models import ReleaseConfig

# conventional-changelog default type table
CONVENTIONAL_TYPES: list[dict[str, Any]] = [
    {"type": "feat", "section": "Features"},
    {"type": "fix", "section": "Bug Fixes"},
    {"type": "chore", "hidden": True},
    {"type": "docs", "hidden": True},
    {"type": "style", "hidden": True},
    {"type": "refactor", "hidden": True},
    {"type": "perf", "hidden": True},
    {"type": "test", "hidden": True},
]

KEPTN: dict[str, Any] = {
    "preMajor": True,
    "issueUrlFormat": "https://github.com/keptn/keptn/issues/{{id}}",
    "scripts": {
        "postchangelog": "./gh-actions-scripts/post-changelog-actions.sh",
    },
    "types": [
        {"type": "feat", "section": "Features"},
        {"type": "fix", "section": "Bug Fixes"},
        {"type": "chore", "section": "Other"},
        {"type": "docs", "section": "Docs"},
        {"type": "perf", "section": "Performance"},
        {"type": "build", "hidden": True},
        {"type": "ci", "hidden": True},
        {"type": "refactor", "section": "Refactoring"},
        {"type": "revert", "hidden": True},
        {"type": "style", "hidden": True},
        {"type": "test", "hidden": True},
    ],
}

PRESETS: dict[str, dict[str, Any]] = {
    "keptn": KEPTN,
}


def available_presets() -> list[str]:
    return sorted(PRESETS)


def get_preset(name: str, overrides: Mapping[str, Any] | None = None) -> ReleaseConfig:
    """Build a validated configuration from a named preset.

    Args:
        name: Preset name (see available_presets())
        overrides: Top-level `.versionrc` keys replacing the preset's values

    Raises:
        PresetNotFoundError: If the preset does not exist
        ConfigValidationError: If the overrides make the configuration invalid
    """
    try:
        raw = copy.deepcopy(PRESETS[name])
    except KeyError:
        raise PresetNotFoundError(name, available_presets()) from None

    if overrides:
        raw.update(copy.deepcopy(dict(overrides)))
    return parse_config(raw)
