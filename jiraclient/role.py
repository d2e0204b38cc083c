"""Project roles and their actors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import Client, JiraError

_ROLE_ENDPOINT = "rest/api/3/role"


@dataclass
class ActorUser:
    """The account id of a user acting in a role."""

    account_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ActorUser:
        data = data or {}
        return cls(account_id=data.get("accountId") or "")


@dataclass
class Actor:
    """A user or group acting in a role."""

    id: int = 0
    display_name: str = ""
    type: str = ""
    name: str = ""
    avatar_url: str = ""
    actor_user: ActorUser | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Actor:
        data = data or {}
        actor_user = data.get("actorUser")
        return cls(
            id=int(data.get("id") or 0),
            display_name=data.get("displayName") or "",
            type=data.get("type") or "",
            name=data.get("name") or "",
            avatar_url=data.get("avatarUrl") or "",
            actor_user=ActorUser.from_dict(actor_user) if actor_user is not None else None,
        )


@dataclass
class Role:
    """A project role."""

    self_url: str = ""
    name: str = ""
    id: int = 0
    description: str = ""
    actors: list[Actor] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Role:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            name=data.get("name") or "",
            id=int(data.get("id") or 0),
            description=data.get("description") or "",
            actors=[Actor.from_dict(item) for item in data.get("actors") or []],
        )


def _role_list(payload: Any) -> list[Role]:
    if not isinstance(payload, list):
        raise JiraError("role list response is not a JSON array")
    return [Role.from_dict(item) for item in payload]


def _role(payload: Any) -> Role:
    if not isinstance(payload, Mapping):
        raise JiraError("role response is not a JSON object")
    return Role.from_dict(payload)


class RoleService:
    """Access to the project roles of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_list(self) -> list[Role]:
        """Return all project roles."""
        request = self._client.new_request("GET", _ROLE_ENDPOINT)
        return self._client.do(request, _role_list).data

    def get(self, role_id: int) -> Role:
        """Return the role with the given id."""
        request = self._client.new_request("GET", f"{_ROLE_ENDPOINT}/{role_id}")
        response = self._client.do(request, _role)
        if not response.data.self_url:
            raise JiraError(f"no role with ID {role_id} found", response)
        return response.data