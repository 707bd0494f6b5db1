"""Release configuration discovery and loading.

A configuration is looked up by a fixed set of file names, walking from
the working directory towards the filesystem root:

- `.versionrc` / `.versionrc.json` (JSON)
- `.versionrc.toml` (TOML)
- `pyproject.toml` with a `[tool.versionrc]` table

The `VERSIONRC_CONFIG` environment variable bypasses discovery.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from versionrc.config.models import ReleaseConfig
from versionrc.exceptions import ConfigNotFoundError, ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".versionrc", ".versionrc.json", ".versionrc.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TABLE = "versionrc"
CONFIG_PATH_ENV = "VERSIONRC_CONFIG"


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Load and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"pyproject.toml not found: {path}")

    return _load_toml(path)


def extract_versionrc_config(
    pyproject: Mapping[str, Any],
    *,
    source: Path | None = None,
) -> dict[str, Any]:
    """Get the [tool.versionrc] table, or an empty dict if there is none.

    A `tool` entry that is not a table belongs to someone else and is
    ignored.

    Raises:
        ConfigValidationError: If [tool.versionrc] exists but is not a table
    """
    tool = pyproject.get("tool", {})
    if not isinstance(tool, dict) or PYPROJECT_TABLE not in tool:
        return {}

    table = tool[PYPROJECT_TABLE]
    if not isinstance(table, dict):
        raise ConfigValidationError(
            f"[tool.{PYPROJECT_TABLE}] must be a table, got {type(table).__name__}",
            source=source,
        )
    return dict(table)


def find_config_file(start: Path | None = None) -> Path:
    """Find the release configuration by walking up from a directory.

    Within each directory the dedicated file names win over pyproject.toml.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Path to the configuration file

    Raises:
        ConfigNotFoundError: If no configuration exists in start or its parents
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                logger.debug("Found release configuration at %s", candidate)
                return candidate

        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and extract_versionrc_config(
            load_pyproject_toml(pyproject), source=pyproject
        ):
            logger.debug("Found [tool.%s] in %s", PYPROJECT_TABLE, pyproject)
            return pyproject

    raise ConfigNotFoundError(
        f"No release configuration found in {current} or any parent directory. "
        f"Expected one of {', '.join(CONFIG_FILENAMES)} "
        f"or a [tool.{PYPROJECT_TABLE}] table in {PYPROJECT_FILENAME}."
    )


def read_config_file(path: Path) -> dict[str, Any]:
    """Read the raw configuration mapping from a file.

    Raises:
        ConfigNotFoundError: If the file (or its [tool.versionrc] table) is missing
        ConfigValidationError: If the content cannot be decoded
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Release configuration not found: {path}")

    if path.name == PYPROJECT_FILENAME:
        data = extract_versionrc_config(load_pyproject_toml(path), source=path)
        if not data:
            raise ConfigNotFoundError(f"No [tool.{PYPROJECT_TABLE}] table in {path}")
        return data

    if path.suffix == ".js":
        raise ConfigValidationError(
            "JavaScript configuration files cannot be evaluated; "
            "convert the exported object to .versionrc.json",
            source=path,
        )

    if path.suffix == ".toml":
        data = _load_toml(path)
    else:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise ConfigValidationError(f"Invalid encoding: {e}", source=path) from e
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON: {e}", source=path) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Top level must be an object, got {type(data).__name__}",
            source=path,
        )
    return data


def format_validation_errors(error: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into `location: message` lines."""
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        message = detail["msg"].removeprefix("Value error, ")
        lines.append(f"{location}: {message}")
    return lines


def parse_config(data: Mapping[str, Any], *, source: Path | None = None) -> ReleaseConfig:
    """Validate a raw mapping into a ReleaseConfig.

    Keys are matched by their camelCase wire names only.

    Raises:
        ConfigValidationError: If the mapping does not match the schema
    """
    try:
        return ReleaseConfig.model_validate(dict(data), by_alias=True, by_name=False)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid release configuration ({e.error_count()} error(s))",
            errors=format_validation_errors(e),
            source=source,
        ) from e


def load_config(path: Path | None = None) -> ReleaseConfig:
    """Load and validate the release configuration.

    Args:
        path: Configuration file, or directory to search from. When omitted
            the VERSIONRC_CONFIG environment variable is used, falling back
            to discovery from the current directory.

    Returns:
        Validated, immutable ReleaseConfig

    Raises:
        ConfigNotFoundError: If no configuration can be located
        ConfigValidationError: If the configuration is malformed
    """
    if path is None:
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            config_path = Path(env_path)
            logger.debug("Using %s from %s", config_path, CONFIG_PATH_ENV)
        else:
            config_path = find_config_file()
    elif path.is_dir():
        config_path = find_config_file(path)
    else:
        config_path = path

    data = read_config_file(config_path)
    config = parse_config(data, source=config_path)
    logger.debug("Loaded %d commit types from %s", len(config.types), config_path)
    return config


def dump_config(config: ReleaseConfig) -> str:
    """Serialize a configuration to normalized `.versionrc` JSON."""
    return json.dumps(config.to_dict(), indent=2, ensure_ascii=False) + "\n"


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except UnicodeDecodeError as e:
        raise ConfigValidationError(f"Invalid encoding: {e}", source=path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML: {e}", source=path) from e
