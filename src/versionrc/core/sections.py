"""Commit type to changelog section lookups.

Thin functional wrappers over ReleaseConfig for consumers that prefer
free functions, plus grouping of commit types by their section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from versionrc.config.models import ReleaseConfig


def section_order(config: ReleaseConfig) -> tuple[str, ...]:
    """Section headings in the order they are rendered."""
    return config.visible_sections


def hidden_types(config: ReleaseConfig) -> frozenset[str]:
    return config.hidden_types


def section_for(config: ReleaseConfig, commit_type: str) -> str | None:
    """Section heading for a commit type, None when hidden or unknown."""
    return config.section_for(commit_type)


def group_types_by_section(
    config: ReleaseConfig,
    commit_types: Iterable[str],
) -> dict[str, list[str]]:
    """Group commit types under their section headings.

    Hidden and unconfigured types are dropped. The result is keyed in
    render order and only contains sections that received at least one
    type; within a section, types keep their input order.

    Args:
        config: Release configuration
        commit_types: Commit types as they occur (duplicates are kept)

    Returns:
        Mapping of section heading to the commit types it collects
    """
    collected: dict[str, list[str]] = {}
    for commit_type in commit_types:
        section = config.section_for(commit_type)
        if section is not None:
            collected.setdefault(section, []).append(commit_type)

    return {
        section: collected[section]
        for section in config.visible_sections
        if section in collected
    }
