"""Pydantic models for the release configuration.

The models mirror the `.versionrc` schema used by conventional-changelog
tooling. Keys use camelCase on the wire and snake_case in Python. Every
model is frozen: a configuration is built once at startup and never
mutated afterwards.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictStr,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

ID_PLACEHOLDER = "{{id}}"

DEFAULT_HEADER = "# Changelog\n\n"
DEFAULT_RELEASE_COMMIT_MESSAGE_FORMAT = "chore(release): {{currentTag}}"

# Order in which the consumer runs lifecycle scripts
SCRIPT_HOOKS = (
    "prerelease",
    "prebump",
    "postbump",
    "prechangelog",
    "postchangelog",
    "precommit",
    "postcommit",
    "pretag",
    "posttag",
)

_PLACEHOLDER_RE = re.compile(r"\{\{[^{}]*\}\}")
_HTTP_URL = TypeAdapter(HttpUrl)

NonEmptyStr = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]


class TypeRule(BaseModel):
    """Maps one commit type to a changelog section, or hides it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: NonEmptyStr
    section: NonEmptyStr | None = None
    hidden: StrictBool = False

    @model_validator(mode="after")
    def _check_section_or_hidden(self) -> TypeRule:
        if self.hidden and self.section is not None:
            raise ValueError(
                f"type '{self.type}' sets both 'section' and 'hidden'; a hidden type has no section"
            )
        if not self.hidden and self.section is None:
            raise ValueError(f"type '{self.type}' needs either a 'section' or 'hidden: true'")
        return self

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Hidden rules carry only the flag, visible rules only the section
        data = handler(self)
        if self.hidden:
            data.pop("section", None)
        else:
            data.pop("hidden", None)
        return data


class ScriptsConfig(BaseModel):
    """Shell commands the consumer runs around each release step."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prerelease: NonEmptyStr | None = None
    prebump: NonEmptyStr | None = None
    postbump: NonEmptyStr | None = None
    prechangelog: NonEmptyStr | None = None
    postchangelog: NonEmptyStr | None = None
    precommit: NonEmptyStr | None = None
    postcommit: NonEmptyStr | None = None
    pretag: NonEmptyStr | None = None
    posttag: NonEmptyStr | None = None

    def defined(self) -> dict[str, str]:
        """Return the configured hooks in lifecycle order."""
        hooks = {}
        for name in SCRIPT_HOOKS:
            command = getattr(self, name)
            if command is not None:
                hooks[name] = command
        return hooks


class ReleaseConfig(BaseModel):
    """Root release configuration.

    `types` is an ordered sequence rather than a mapping: its order decides
    the order of sections in the rendered changelog. Uniqueness of the
    commit types is enforced separately.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    pre_major: StrictBool = Field(alias="preMajor")
    issue_url_format: NonEmptyStr = Field(alias="issueUrlFormat")
    scripts: ScriptsConfig
    types: tuple[TypeRule, ...] = Field(min_length=1)

    header: StrictStr = DEFAULT_HEADER
    release_commit_message_format: NonEmptyStr = Field(
        default=DEFAULT_RELEASE_COMMIT_MESSAGE_FORMAT,
        alias="releaseCommitMessageFormat",
    )
    issue_prefixes: tuple[NonEmptyStr, ...] = Field(default=("#",), alias="issuePrefixes")

    @field_validator("issue_url_format")
    @classmethod
    def _check_issue_url_format(cls, value: str) -> str:
        if ID_PLACEHOLDER not in value:
            raise ValueError(f"must contain the {ID_PLACEHOLDER} placeholder")

        unknown = sorted(set(_PLACEHOLDER_RE.findall(value)) - {ID_PLACEHOLDER})
        if unknown:
            raise ValueError(
                f"unsupported placeholder(s) {', '.join(unknown)}; "
                f"only {ID_PLACEHOLDER} is substituted"
            )

        sample = value.replace(ID_PLACEHOLDER, "1")
        try:
            _HTTP_URL.validate_python(sample)
        except ValidationError as e:
            raise ValueError(f"does not render to a valid http(s) URL: {sample}") from e
        return value

    @field_validator("types")
    @classmethod
    def _check_unique_types(cls, rules: tuple[TypeRule, ...]) -> tuple[TypeRule, ...]:
        seen: set[str] = set()
        duplicates: list[str] = []
        for rule in rules:
            if rule.type in seen and rule.type not in duplicates:
                duplicates.append(rule.type)
            seen.add(rule.type)
        if duplicates:
            raise ValueError(f"duplicate commit type(s): {', '.join(duplicates)}")
        return rules

    @property
    def type_names(self) -> tuple[str, ...]:
        """Commit types in declaration order."""
        return tuple(rule.type for rule in self.types)

    @property
    def hidden_type_names(self) -> tuple[str, ...]:
        """Hidden commit types in declaration order."""
        return tuple(rule.type for rule in self.types if rule.hidden)

    @property
    def hidden_types(self) -> frozenset[str]:
        """Commit types excluded from the rendered changelog."""
        return frozenset(self.hidden_type_names)

    @property
    def visible_sections(self) -> tuple[str, ...]:
        """Section headings in render order, each listed once."""
        sections: list[str] = []
        for rule in self.types:
            if rule.section is not None and rule.section not in sections:
                sections.append(rule.section)
        return tuple(sections)

    def rule_for(self, commit_type: str) -> TypeRule | None:
        """Get the rule for a commit type, or None if it is not configured."""
        for rule in self.types:
            if rule.type == commit_type:
                return rule
        return None

    def section_for(self, commit_type: str) -> str | None:
        """Get the section heading for a commit type.

        Returns None for hidden types and for types that are not configured.
        """
        rule = self.rule_for(commit_type)
        return rule.section if rule is not None else None

    def is_hidden(self, commit_type: str) -> bool:
        return commit_type in self.hidden_types

    def render_issue_url(self, issue_id: str | int) -> str:
        """Substitute an issue identifier into issue_url_format.

        Raises:
            ValueError: If the identifier is empty
        """
        value = str(issue_id).strip()
        if not value:
            raise ValueError("Issue id cannot be empty")
        return self.issue_url_format.replace(ID_PLACEHOLDER, value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the camelCase `.versionrc` shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
