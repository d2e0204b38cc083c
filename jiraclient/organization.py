"""Jira Service Management organizations: listing, creation, properties and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .core import Client, Response

_ACCEPT = "application/json"
_ORGANIZATION_ENDPOINT = "rest/servicedeskapi/organization"


def _organization_url(organization_id: int) -> str:
    return f"{_ORGANIZATION_ENDPOINT}/{organization_id}"


@dataclass
class SelfLink:
    """The REST API URL of an organization."""

    self_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> SelfLink:
        data = data or {}
        return cls(self_url=data.get("self") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"self": self.self_url} if self.self_url else {}


@dataclass
class Organization:
    """A service desk organization."""

    id: str = ""
    name: str = ""
    links: SelfLink | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Organization:
        data = data or {}
        links = data.get("_links")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            links=SelfLink.from_dict(links) if links is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.id:
            result["id"] = self.id
        if self.name:
            result["name"] = self.name
        if self.links is not None:
            result["_links"] = self.links.to_dict()
        return result


@dataclass
class OrganizationUsers:
    """The account ids of users to add to or remove from an organization."""

    account_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"accountIds": list(self.account_ids)} if self.account_ids else {}


@dataclass
class PagedResult:
    """One page of a paged service desk listing."""

    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False
    values: list[Any] = field(default_factory=list)
    expands: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> PagedResult:
        data = data or {}
        return cls(
            size=int(data.get("size") or 0),
            start=int(data.get("start") or 0),
            limit=int(data.get("limit") or 0),
            is_last_page=bool(data.get("isLastPage") or False),
            values=list(data.get("values") or []),
            expands=list(data.get("_expands") or []),
        )


@dataclass
class PropertyKey:
    """The key of one entity property and its REST URL."""

    self_url: str = ""
    key: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> PropertyKey:
        data = data or {}
        return cls(self_url=data.get("self") or "", key=data.get("key") or "")


@dataclass
class PropertyKeys:
    """All property keys of an entity."""

    keys: list[PropertyKey] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> PropertyKeys:
        data = data or {}
        return cls(keys=[PropertyKey.from_dict(item) for item in data.get("keys") or []])


@dataclass
class EntityProperty:
    """A property stored against an entity: a key and an arbitrary JSON value."""

    key: str = ""
    value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EntityProperty:
        data = data or {}
        return cls(key=data.get("key") or "", value=data.get("value"))


class OrganizationService:
    """Access to the organizations of a Jira Service Management instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _send(self, method: str, url: str, body: Any = None, decode=None, accept: bool = True) -> Response:
        request = self._client.new_request(method, url, body)
        if accept:
            request.headers["Accept"] = _ACCEPT
        return self._client.do(request, decode)

    def get_all_organizations(self, start: int, limit: int, account_id: str = "") -> PagedResult:
        """Return one page of organizations, optionally those of one user."""
        url = f"{_ORGANIZATION_ENDPOINT}?start={start}&limit={limit}"
        if account_id:
            url += f"&accountId={account_id}"
        return self._send("GET", url, decode=PagedResult.from_dict).data

    def create_organization(self, name: str) -> Organization:
        """Create an organization with the given name."""
        body = {"name": name} if name else {}
        return self._send("POST", _ORGANIZATION_ENDPOINT, body, Organization.from_dict).data

    def get_organization(self, organization_id: int) -> Organization:
        """Return the details of one organization."""
        return self._send("GET", _organization_url(organization_id), decode=Organization.from_dict).data

    def delete_organization(self, organization_id: int) -> Response:
        """Delete an organization regardless of its associations."""
        return self._send("DELETE", _organization_url(organization_id), accept=False)

    def get_properties_keys(self, organization_id: int) -> PropertyKeys:
        """Return the keys of all properties of an organization."""
        url = f"{_organization_url(organization_id)}/property"
        return self._send("GET", url, decode=PropertyKeys.from_dict).data

    def get_property(self, organization_id: int, property_key: str) -> EntityProperty:
        """Return one property of an organization."""
        url = f"{_organization_url(organization_id)}/property/{property_key}"
        return self._send("GET", url, decode=EntityProperty.from_dict).data

    def set_property(self, organization_id: int, property_key: str) -> Response:
        """Set a property of an organization."""
        url = f"{_organization_url(organization_id)}/property/{property_key}"
        return self._send("PUT", url)

    def delete_property(self, organization_id: int, property_key: str) -> Response:
        """Remove a property from an organization."""
        url = f"{_organization_url(organization_id)}/property/{property_key}"
        return self._send("DELETE", url)

    def get_users(self, organization_id: int, start: int, limit: int) -> PagedResult:
        """Return one page of the users of an organization."""
        url = f"{_organization_url(organization_id)}/user?start={start}&limit={limit}"
        return self._send("GET", url, decode=PagedResult.from_dict).data

    def add_users(self, organization_id: int, users: OrganizationUsers) -> Response:
        """Add users to an organization."""
        url = f"{_organization_url(organization_id)}/user"
        return self._send("POST", url, users.to_dict(), accept=False)

    def remove_users(self, organization_id: int, users: OrganizationUsers) -> Response:
        """Remove users from an organization."""
        url = f"{_organization_url(organization_id)}/user"
        return self._send("DELETE", url)