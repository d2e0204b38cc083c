"""Jira projects, their components, categories and permission schemes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import Client, JiraError, add_options
from .permissionscheme import Permission
from .user import User
from .version import Version

_PROJECT_ENDPOINT = "rest/api/2/project"


def _user(data: Any) -> User:
    return User.from_dict(data) if isinstance(data, Mapping) else User()


@dataclass
class ProjectCategory:
    """A project category."""

    self_url: str = ""
    id: str = ""
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectCategory:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            id=data.get("id") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
        )


@dataclass
class ProjectComponent:
    """A single component of a project."""

    self_url: str = ""
    id: str = ""
    name: str = ""
    description: str = ""
    lead: User = field(default_factory=User)
    assignee_type: str = ""
    assignee: User = field(default_factory=User)
    real_assignee_type: str = ""
    real_assignee: User = field(default_factory=User)
    is_assignee_type_valid: bool = False
    project: str = ""
    project_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectComponent:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            id=data.get("id") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            lead=_user(data.get("lead")),
            assignee_type=data.get("assigneeType") or "",
            assignee=_user(data.get("assignee")),
            real_assignee_type=data.get("realAssigneeType") or "",
            real_assignee=_user(data.get("realAssignee")),
            is_assignee_type_valid=bool(data.get("isAssigneeTypeValid")),
            project=data.get("project") or "",
            project_id=int(data.get("projectId") or 0),
        )


@dataclass
class PermissionScheme:
    """The permission scheme of a project."""

    expand: str = ""
    self_url: str = ""
    id: int = 0
    name: str = ""
    description: str = ""
    permissions: list[Permission] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PermissionScheme:
        data = data or {}
        return cls(
            expand=data.get("expand") or "",
            self_url=data.get("self") or "",
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            description=data.get("description") or "",
            permissions=[Permission.from_dict(item) for item in data.get("permissions") or []],
        )


@dataclass
class Project:
    """A Jira project.

    ``issue_types`` holds the raw issue type objects the server sent.
    """

    expand: str = ""
    self_url: str = ""
    id: str = ""
    key: str = ""
    description: str = ""
    lead: User = field(default_factory=User)
    components: list[ProjectComponent] = field(default_factory=list)
    issue_types: list[dict[str, Any]] = field(default_factory=list)
    url: str = ""
    email: str = ""
    assignee_type: str = ""
    versions: list[Version] = field(default_factory=list)
    name: str = ""
    roles: dict[str, str] = field(default_factory=dict)
    avatar_urls: dict[str, str] = field(default_factory=dict)
    project_type_key: str = ""
    project_category: ProjectCategory = field(default_factory=ProjectCategory)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Project:
        data = data or {}
        return cls(
            expand=data.get("expand") or "",
            self_url=data.get("self") or "",
            id=data.get("id") or "",
            key=data.get("key") or "",
            description=data.get("description") or "",
            lead=_user(data.get("lead")),
            components=[ProjectComponent.from_dict(c) for c in data.get("components") or []],
            issue_types=[dict(t) for t in data.get("issueTypes") or []],
            url=data.get("url") or "",
            email=data.get("email") or "",
            assignee_type=data.get("assigneeType") or "",
            versions=[Version.from_dict(v) for v in data.get("versions") or []],
            name=data.get("name") or "",
            roles=dict(data.get("roles") or {}),
            avatar_urls=dict(data.get("avatarUrls") or {}),
            project_type_key=data.get("projectTypeKey") or "",
            project_category=ProjectCategory.from_dict(data.get("projectCategory")),
        )


def _project_list(payload: Any) -> list[Project]:
    if not isinstance(payload, list):
        raise JiraError("project list response is not a JSON array")
    return [Project.from_dict(item) for item in payload]


def _project(payload: Any) -> Project:
    if not isinstance(payload, Mapping):
        raise JiraError("project response is not a JSON object")
    return Project.from_dict(payload)


def _permission_scheme(payload: Any) -> PermissionScheme:
    if not isinstance(payload, Mapping):
        raise JiraError("permission scheme response is not a JSON object")
    return PermissionScheme.from_dict(payload)


class ProjectService:
    """Access to the projects of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_list(self) -> list[Project]:
        """Return all projects."""
        return self.list_with_options({})

    def list_with_options(self, options: Any) -> list[Project]:
        """Return all projects, with query options such as ``{"expand": "issueTypes"}``."""
        url = add_options(_PROJECT_ENDPOINT, options)
        request = self._client.new_request("GET", url)
        return self._client.do(request, _project_list).data

    def get(self, project_id: str) -> Project:
        """Return the project with the given id or key."""
        request = self._client.new_request("GET", f"{_PROJECT_ENDPOINT}/{project_id}")
        return self._client.do(request, _project).data

    def get_permission_scheme(self, project_id: str) -> PermissionScheme:
        """Return the permission scheme of the project with the given id or key."""
        request = self._client.new_request(
            "GET", f"/{_PROJECT_ENDPOINT}/{project_id}/permissionscheme"
        )
        return self._client.do(request, _permission_scheme).data