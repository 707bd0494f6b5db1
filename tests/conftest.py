"""Shared test fixtures."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from versionrc.config.loader import CONFIG_PATH_ENV
from versionrc.config.models import ReleaseConfig
from versionrc.presets import KEPTN

KEPTN_TYPE_ORDER = [
    "feat",
    "fix",
    "chore",
    "docs",
    "perf",
    "build",
    "ci",
    "refactor",
    "revert",
    "style",
    "test",
]

KEPTN_TOML = """\
preMajor = true
issueUrlFormat = "https://github.com/keptn/keptn/issues/{{id}}"

[scripts]
postchangelog = "./gh-actions-scripts/post-changelog-actions.sh"

[[types]]
type = "feat"
section = "Features"

[[types]]
type = "fix"
section = "Bug Fixes"

[[types]]
type = "chore"
section = "Other"

[[types]]
type = "docs"
section = "Docs"

[[types]]
type = "perf"
section = "Performance"

[[types]]
type = "build"
hidden = true

[[types]]
type = "ci"
hidden = true

[[types]]
type = "refactor"
section = "Refactoring"

[[types]]
type = "revert"
hidden = true

[[types]]
type = "style"
hidden = true

[[types]]
type = "test"
hidden = true
"""


def _as_pyproject_table(toml_body: str) -> str:
    lines = []
    for line in toml_body.splitlines():
        if line.startswith("[[types]]"):
            line = "[[tool.versionrc.types]]"
        elif line.startswith("[scripts]"):
            line = "[tool.versionrc.scripts]"
        lines.append(line)
    header = '[project]\nname = "test-project"\nversion = "1.0.0"\n\n[tool.versionrc]\n'
    return header + "\n".join(lines) + "\n"


KEPTN_PYPROJECT = _as_pyproject_table(KEPTN_TOML)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a VERSIONRC_CONFIG from the outer environment out of the tests."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)


@pytest.fixture
def keptn_type_order() -> list[str]:
    return list(KEPTN_TYPE_ORDER)


@pytest.fixture
def keptn_toml() -> str:
    """The keptn object as a standalone .versionrc.toml document."""
    return KEPTN_TOML


@pytest.fixture
def keptn_data() -> dict[str, Any]:
    """A fresh copy of the keptn `.versionrc` object."""
    return copy.deepcopy(KEPTN)


@pytest.fixture
def keptn_config(keptn_data: dict[str, Any]) -> ReleaseConfig:
    return ReleaseConfig.model_validate(keptn_data)


@pytest.fixture
def write_json_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a JSON configuration file into tmp_path."""

    def _write(data: Any, name: str = ".versionrc.json", directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data, indent=2))
        return target

    return _write


@pytest.fixture
def keptn_json_file(write_json_config: Callable[..., Path], keptn_data: dict[str, Any]) -> Path:
    return write_json_config(keptn_data)


@pytest.fixture
def temp_project_with_pyproject(tmp_path: Path) -> Path:
    """A project directory whose pyproject.toml carries [tool.versionrc]."""
    (tmp_path / "pyproject.toml").write_text(KEPTN_PYPROJECT)
    return tmp_path
