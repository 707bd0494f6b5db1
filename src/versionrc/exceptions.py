"""Exception hierarchy for versionrc.

All errors raised by the library derive from VersionrcError so callers
can catch a single type at the application boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class VersionrcError(Exception):
    """Base class for all versionrc errors."""


class ConfigError(VersionrcError):
    """Problem locating or reading a release configuration."""


class ConfigNotFoundError(ConfigError):
    """No release configuration could be located."""


class ConfigValidationError(ConfigError):
    """A release configuration is malformed.

    Attributes:
        errors: One human readable line per problem, prefixed with the
            dotted location of the offending field
        source: File the configuration was read from, if any
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        source: Path | None = None,
    ) -> None:
        self.errors = list(errors or [])
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.source is not None:
            message = f"{self.source}: {message}"
        if not self.errors:
            return message
        details = "\n".join(f"  - {error}" for error in self.errors)
        return f"{message}\n{details}"


class PresetNotFoundError(VersionrcError):
    """Requested preset does not exist."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown preset '{name}'. Available presets: {', '.join(available)}")
