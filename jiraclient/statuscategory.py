"""Status categories: the groups workflow statuses belong to."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core import Client, JiraError

_STATUS_CATEGORY_ENDPOINT = "rest/api/2/statuscategory"

# Keys of the default Jira status categories.
STATUS_CATEGORY_COMPLETE = "done"
STATUS_CATEGORY_IN_PROGRESS = "indeterminate"
STATUS_CATEGORY_TO_DO = "new"
STATUS_CATEGORY_UNDEFINED = "undefined"


@dataclass
class StatusCategory:
    """The category a status belongs to."""

    self_url: str = ""
    id: int = 0
    name: str = ""
    key: str = ""
    color_name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> StatusCategory:
        data = data or {}
        return cls(
            self_url=data.get("self") or "",
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            key=data.get("key") or "",
            color_name=data.get("colorName") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self_url,
            "id": self.id,
            "name": self.name,
            "key": self.key,
            "colorName": self.color_name,
        }


def _category_list(payload: Any) -> list[StatusCategory]:
    if not isinstance(payload, list):
        raise JiraError("status category list response is not a JSON array")
    return [StatusCategory.from_dict(item) for item in payload]


class StatusCategoryService:
    """Access to the status categories of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_list(self) -> list[StatusCategory]:
        """Return all status categories."""
        request = self._client.new_request("GET", _STATUS_CATEGORY_ENDPOINT)
        return self._client.do(request, _category_list).data