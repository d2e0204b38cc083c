"""Project release versions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .core import Client, JiraError

_VERSION_ENDPOINT = "/rest/api/2/version"

_VERSION_FIELDS = (
    ("self_url", "self"),
    ("id", "id"),
    ("name", "name"),
    ("description", "description"),
    ("archived", "archived"),
    ("released", "released"),
    ("release_date", "releaseDate"),
    ("user_release_date", "userReleaseDate"),
    ("project_id", "projectId"),
    ("start_date", "startDate"),
)


@dataclass
class Version:
    """A single release version of a project."""

    self_url: str = ""
    id: str = ""
    name: str = ""
    description: str = ""
    archived: bool | None = None
    released: bool | None = None
    release_date: str = ""
    user_release_date: str = ""
    project_id: int = 0
    start_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Version:
        data = data or {}
        return cls(
            **{attr: data[key] for attr, key in _VERSION_FIELDS if data.get(key) is not None}
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for attr, key in _VERSION_FIELDS:
            value = getattr(self, attr)
            if isinstance(value, bool) or value:
                result[key] = value
        return result


class VersionService:
    """Access to the versions of Jira projects."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get(self, version_id: int) -> Version:
        """Return the version with the given id."""
        request = self._client.new_request("GET", f"{_VERSION_ENDPOINT}/{version_id}")
        return self._client.do(request, Version.from_dict).data

    def create(self, version: Version) -> Version:
        """Create a version and return the version the server reports back."""
        request = self._client.new_request("POST", _VERSION_ENDPOINT, version)
        response = self._client.do(request)
        try:
            payload = response.http_response.json()
        except ValueError as exc:
            raise JiraError("could not unmarshall the data into struct", response) from exc
        return Version.from_dict(payload)

    def update(self, version: Version) -> Version:
        """Update a version; return a copy of the version that was sent."""
        request = self._client.new_request("PUT", f"rest/api/2/version/{version.id}", version)
        self._client.do(request)
        return dataclasses.replace(version)