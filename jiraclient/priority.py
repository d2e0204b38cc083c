"""Issue priorities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core import Client, JiraError

_PRIORITY_ENDPOINT = "rest/api/2/priority"


@dataclass
class Priority:
    """A priority of a Jira issue, such as "Normal" or "Urgent"."""

    self_url: str = ""
    icon_url: str = ""
    name: str = ""
    id: str = ""
    status_color: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Priority:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            icon_url=data.get("iconUrl") or "",
            name=data.get("name") or "",
            id=data.get("id") or "",
            status_color=data.get("statusColor") or "",
            description=data.get("description") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        pairs = (
            ("self", self.self_url),
            ("iconUrl", self.icon_url),
            ("name", self.name),
            ("id", self.id),
            ("statusColor", self.status_color),
            ("description", self.description),
        )
        return {key: value for key, value in pairs if value}


def _priority_list(payload: Any) -> list[Priority]:
    if not isinstance(payload, list):
        raise JiraError("priority list response is not a JSON array")
    return [Priority.from_dict(item) for item in payload]


class PriorityService:
    """Access to the priorities of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_list(self) -> list[Priority]:
        """Return all priorities."""
        request = self._client.new_request("GET", _PRIORITY_ENDPOINT)
        return self._client.do(request, _priority_list).data