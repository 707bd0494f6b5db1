"""Read-only helpers for consumers of a release configuration.

This module contains:
- Section lookup and render order
- Issue URL and issue link rendering
"""

from __future__ import annotations

from versionrc.core.issues import format_issue_link, link_issue_references, render_issue_url
from versionrc.core.sections import (
    group_types_by_section,
    hidden_types,
    section_for,
    section_order,
)

__all__ = [
    # Issues
    "format_issue_link",
    # Sections
    "group_types_by_section",
    "hidden_types",
    "link_issue_references",
    "render_issue_url",
    "section_for",
    "section_order",
]
