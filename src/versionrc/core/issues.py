"""Issue link rendering.

The only placeholder defined for issue URLs is `{{id}}`; the configured
issue prefixes (`#` by default) mark issue references in commit text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from versionrc.config.models import ReleaseConfig


def render_issue_url(config: ReleaseConfig, issue_id: str | int) -> str:
    """Render the issue URL for an identifier.

    Args:
        config: Release configuration
        issue_id: Issue number or identifier

    Returns:
        URL with the placeholder substituted

    Raises:
        ValueError: If the identifier is empty
    """
    return config.render_issue_url(issue_id)


def format_issue_link(config: ReleaseConfig, issue_id: str | int, prefix: str | None = None) -> str:
    """Render a markdown link such as `[#42](https://.../issues/42)`."""
    label_prefix = config.issue_prefixes[0] if prefix is None else prefix
    value = str(issue_id).strip()
    return f"[{label_prefix}{value}]({render_issue_url(config, value)})"


def link_issue_references(text: str, config: ReleaseConfig) -> str:
    """Replace issue references in text with markdown links.

    A reference is one of the configured issue prefixes followed by digits,
    e.g. `#123`. References that are already part of a link are left alone.

    Args:
        text: Commit subject or body
        config: Release configuration

    Returns:
        Text with references converted to links
    """
    # Longest first so that e.g. "GH-" wins over "-"
    prefixes = sorted(config.issue_prefixes, key=len, reverse=True)
    alternatives = "|".join(re.escape(prefix) for prefix in prefixes)
    pattern = re.compile(rf"(?<![\w\[/])({alternatives})(\d+)\b")

    def replace(match: re.Match[str]) -> str:
        return format_issue_link(config, match.group(2), prefix=match.group(1))

    return pattern.sub(replace, text)
