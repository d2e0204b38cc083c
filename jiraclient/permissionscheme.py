"""Permission schemes and the permissions they grant."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .core import Client, JiraError

if TYPE_CHECKING:
    from .project import PermissionScheme

_PERMISSION_SCHEME_ENDPOINT = "/rest/api/3/permissionscheme"


@dataclass
class Holder:
    """Who a permission is granted to."""

    type: str = ""
    parameter: str = ""
    expand: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Holder:
        data = data or {}
        return cls(
            type=data.get("type") or "",
            parameter=data.get("parameter") or "",
            expand=data.get("expand") or "",
        )


@dataclass
class Permission:
    """One permission grant of a permission scheme."""

    id: int = 0
    expand: str = ""
    holder: Holder = field(default_factory=Holder)
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Permission:
        data = data or {}
        return cls(
            id=int(data.get("id") or 0),
            expand=data.get("expand") or "",
            holder=Holder.from_dict(data.get("holder")),
            name=data.get("permission") or "",
        )


def _scheme(payload: Any) -> PermissionScheme:
    # Imported here: the project module imports Permission from this one.
    from .project import PermissionScheme

    if not isinstance(payload, Mapping):
        raise JiraError("permission scheme response is not a JSON object")
    return PermissionScheme.from_dict(payload)


def _scheme_list(payload: Any) -> list[PermissionScheme]:
    if not isinstance(payload, Mapping):
        raise JiraError("permission scheme list response is not a JSON object")
    return [_scheme(item) for item in payload.get("permissionSchemes") or []]


class PermissionSchemeService:
    """Access to the permission schemes of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_list(self) -> list[PermissionScheme]:
        """Return all permission schemes."""
        request = self._client.new_request("GET", _PERMISSION_SCHEME_ENDPOINT)
        return self._client.do(request, _scheme_list).data

    def get(self, scheme_id: int) -> PermissionScheme:
        """Return the permission scheme with the given id."""
        request = self._client.new_request("GET", f"{_PERMISSION_SCHEME_ENDPOINT}/{scheme_id}")
        response = self._client.do(request, _scheme)
        if not response.data.self_url:
            raise JiraError(f"no permissionscheme with ID {scheme_id} found", response)
        return response.data