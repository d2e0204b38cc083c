"""Issue resolutions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core import Client, JiraError

_RESOLUTION_ENDPOINT = "rest/api/2/resolution"


@dataclass
class Resolution:
    """A resolution of a Jira issue, such as "Fixed" or "Won't Fix"."""

    self_url: str = ""
    id: str = ""
    description: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Resolution:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            id=data.get("id") or "",
            description=data.get("description") or "",
            name=data.get("name") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self_url,
            "id": self.id,
            "description": self.description,
            "name": self.name,
        }


def _resolution_list(payload: Any) -> list[Resolution]:
    if not isinstance(payload, list):
        raise JiraError("resolution list response is not a JSON array")
    return [Resolution.from_dict(item) for item in payload]


class ResolutionService:
    """Access to the resolutions of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_list(self) -> list[Resolution]:
        """Return all resolutions."""
        request = self._client.new_request("GET", _RESOLUTION_ENDPOINT)
        return self._client.do(request, _resolution_list).data