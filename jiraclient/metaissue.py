"""Create and edit metadata: the fields an issue type offers and requires."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import Client, JiraError, add_options

_CREATE_META_ENDPOINT = "rest/api/2/issue/createmeta"
_CREATE_META_EXPAND = "projects.issuetypes.fields"


def _same_text(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


@dataclass
class MetaIssueType:
    """An issue type of a project together with its field metadata.

    ``fields`` maps field ids (such as ``summary`` or ``customfield_10806``)
    to the raw metadata the server sent for them.
    """

    self_url: str = ""
    id: str = ""
    description: str = ""
    icon_url: str = ""
    name: str = ""
    subtask: bool = False
    expand: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MetaIssueType:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            id=data.get("id") or "",
            description=data.get("description") or "",
            icon_url=data.get("iconUrl") or data.get("iconurl") or "",
            name=data.get("name") or "",
            subtask=bool(data.get("subtask")),
            expand=data.get("expand") or "",
            fields=dict(data.get("fields") or {}),
        )

    def _field_attribute(self, key: str, attribute: str, kind: type) -> Any:
        entry = self.fields.get(key)
        if not isinstance(entry, Mapping) or attribute not in entry:
            raise JiraError(f'"{key}/{attribute}" not found in issue type fields')
        value = entry[attribute]
        if not isinstance(value, kind):
            raise JiraError(f'"{key}/{attribute}" is not of type {kind.__name__}')
        return value

    def get_mandatory_fields(self) -> dict[str, str]:
        """Map the display name of every required field to its field id."""
        mandatory: dict[str, str] = {}
        for key in self.fields:
            if self._field_attribute(key, "required", bool):
                mandatory[self._field_attribute(key, "name", str)] = key
        return mandatory

    def get_all_fields(self) -> dict[str, str]:
        """Map the display name of every field to its field id."""
        return {self._field_attribute(key, "name", str): key for key in self.fields}

    def check_complete_and_available(self, config: Mapping[str, Any]) -> bool:
        """Check that ``config`` names every required field and only known fields.

        Returns True, or raises JiraError naming the required or available fields.
        """
        mandatory = self.get_mandatory_fields()
        available = self.get_all_fields()
        if any(name not in config for name in mandatory):
            raise JiraError(
                "required field not found in provided jira.fields. "
                f"Required are: {sorted(mandatory)}"
            )
        if any(name not in available for name in config):
            raise JiraError(
                "fields in jira.fields are not available in jira. "
                f"Available are: {sorted(available)}"
            )
        return True


@dataclass
class MetaProject:
    """A project as described by the create metadata."""

    expand: str = ""
    self_url: str = ""
    id: str = ""
    key: str = ""
    name: str = ""
    issue_types: list[MetaIssueType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MetaProject:
        data = data or {}
        issue_types = data.get("issuetypes") or data.get("issueTypes") or []
        return cls(
            expand=data.get("expand") or "",
            self_url=data.get("self") or "",
            id=data.get("id") or "",
            key=data.get("key") or "",
            name=data.get("name") or "",
            issue_types=[MetaIssueType.from_dict(item) for item in issue_types],
        )

    def get_issue_type_with_name(self, name: str) -> MetaIssueType | None:
        """Return the issue type with this name, compared case-insensitively."""
        return next((t for t in self.issue_types if _same_text(t.name, name)), None)


@dataclass
class CreateMetaInfo:
    """The metadata needed to create issues in one or more projects."""

    expand: str = ""
    projects: list[MetaProject] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CreateMetaInfo:
        data = data or {}
        return cls(
            expand=data.get("expand") or "",
            projects=[MetaProject.from_dict(item) for item in data.get("projects") or []],
        )

    def get_project_with_name(self, name: str) -> MetaProject | None:
        """Return the project with this name, compared case-insensitively."""
        return next((p for p in self.projects if _same_text(p.name, name)), None)

    def get_project_with_key(self, key: str) -> MetaProject | None:
        """Return the project with this key, compared case-insensitively."""
        return next((p for p in self.projects if _same_text(p.key, key)), None)


@dataclass
class EditMetaInfo:
    """The metadata of the fields that can be edited on an issue."""

    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> EditMetaInfo:
        data = data or {}
        return cls(fields=dict(data.get("fields") or {}))


class MetaIssueService:
    """Access to the create and edit metadata of issues."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_create_meta(self, project_keys: str) -> CreateMetaInfo:
        """Return the create metadata, with fields, for the given project keys."""
        return self.get_create_meta_with_options(
            {"projectKeys": project_keys, "expand": _CREATE_META_EXPAND}
        )

    def get_create_meta_with_options(self, options: Any) -> CreateMetaInfo:
        """Return the create metadata selected by the given query options."""
        url = add_options(_CREATE_META_ENDPOINT, options)
        request = self._client.new_request("GET", url)
        return self._client.do(request, CreateMetaInfo.from_dict).data

    def get_edit_meta(self, issue_key: str) -> EditMetaInfo:
        """Return the edit metadata of an issue."""
        request = self._client.new_request("GET", f"/rest/api/2/issue/{issue_key}/editmeta")
        return self._client.do(request, EditMetaInfo.from_dict).data