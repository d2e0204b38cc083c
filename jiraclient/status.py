"""Workflow statuses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import Client, JiraError
from .statuscategory import StatusCategory

_STATUS_ENDPOINT = "rest/api/2/status"


@dataclass
class Status:
    """The status of a Jira issue, such as "Open" or "Closed"."""

    self_url: str = ""
    description: str = ""
    icon_url: str = ""
    name: str = ""
    id: str = ""
    status_category: StatusCategory = field(default_factory=StatusCategory)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Status:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            description=data.get("description") or "",
            icon_url=data.get("iconUrl") or "",
            name=data.get("name") or "",
            id=data.get("id") or "",
            status_category=StatusCategory.from_dict(data.get("statusCategory")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self_url,
            "description": self.description,
            "iconUrl": self.icon_url,
            "name": self.name,
            "id": self.id,
            "statusCategory": self.status_category.to_dict(),
        }


def _status_list(payload: Any) -> list[Status]:
    if not isinstance(payload, list):
        raise JiraError("status list response is not a JSON array")
    return [Status.from_dict(item) for item in payload]


class StatusService:
    """Access to the workflow statuses of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_all_statuses(self) -> list[Status]:
        """Return all statuses associated with workflows."""
        request = self._client.new_request("GET", _STATUS_ENDPOINT)
        return self._client.do(request, _status_list).data