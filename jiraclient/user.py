"""Jira users: lookup, creation, deletion, groups and search."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .core import Client, JiraError, Response

SearchParams = list[tuple[str, str]]
SearchOption = Callable[[SearchParams], SearchParams]

_USER_ENDPOINT = "/rest/api/2/user"

_USER_FIELDS = (
    ("self_url", "self"),
    ("account_id", "accountId"),
    ("account_type", "accountType"),
    ("name", "name"),
    ("key", "key"),
    ("password", "password"),
    ("email_address", "emailAddress"),
    ("avatar_urls", "avatarUrls"),
    ("display_name", "displayName"),
    ("active", "active"),
    ("time_zone", "timeZone"),
    ("locale", "locale"),
    ("application_keys", "applicationKeys"),
)


@dataclass
class User:
    """A Jira user."""

    self_url: str = ""
    account_id: str = ""
    account_type: str = ""
    name: str = ""
    key: str = ""
    password: str = ""
    email_address: str = ""
    avatar_urls: dict[str, str] = field(default_factory=dict)
    display_name: str = ""
    active: bool = False
    time_zone: str = ""
    locale: str = ""
    application_keys: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> User:
        data = data or {}
        return cls(
            **{attr: data[key] for attr, key in _USER_FIELDS if data.get(key) is not None}
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for attr, key in _USER_FIELDS:
            value = getattr(self, attr)
            # The password is always sent, every other field only when set.
            if value or key == "password":
                result[key] = value
        return result


@dataclass
class UserGroup:
    """A group a user belongs to."""

    self_url: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> UserGroup:
        data = data or {}
        return cls(self_url=data.get("self") or "", name=data.get("name") or "")


def with_max_results(max_results: int) -> SearchOption:
    """Limit the number of users a search returns."""
    return lambda params: [*params, ("maxResults", str(max_results))]


def with_start_at(start_at: int) -> SearchOption:
    """Start a search at the given offset."""
    return lambda params: [*params, ("startAt", str(start_at))]


def with_active(active: bool) -> SearchOption:
    """Include or exclude active users in a search."""
    return lambda params: [*params, ("includeActive", "true" if active else "false")]


def with_inactive(inactive: bool) -> SearchOption:
    """Include or exclude inactive users in a search."""
    return lambda params: [*params, ("includeInactive", "true" if inactive else "false")]


def _users(payload: Any) -> list[User]:
    return [User.from_dict(item) for item in payload or []]


class UserService:
    """Access to the users of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _get(self, url: str, decode) -> Any:
        request = self._client.new_request("GET", url)
        return self._client.do(request, decode).data

    def get(self, account_id: str) -> User:
        """Return the user with the given account id."""
        return self._get(f"{_USER_ENDPOINT}?accountId={account_id}", User.from_dict)

    def get_by_account_id(self, account_id: str) -> User:
        """Return the user with the given account id."""
        return self.get(account_id)

    def create(self, user: User) -> User:
        """Create a user and return the user the server reports back."""
        request = self._client.new_request("POST", _USER_ENDPOINT, user)
        response = self._client.do(request)
        try:
            payload = response.http_response.json()
        except ValueError as exc:
            raise JiraError("could not unmarshall the data into struct", response) from exc
        return User.from_dict(payload)

    def delete(self, account_id: str) -> Response:
        """Delete the user with the given account id."""
        request = self._client.new_request("DELETE", f"{_USER_ENDPOINT}?accountId={account_id}")
        return self._client.do(request)

    def get_groups(self, account_id: str) -> list[UserGroup]:
        """Return the groups the user belongs to."""
        return self._get(
            f"{_USER_ENDPOINT}/groups?accountId={account_id}",
            lambda payload: [UserGroup.from_dict(item) for item in payload or []],
        )

    def get_self(self) -> User:
        """Return the user who is currently logged in."""
        return self._get("rest/api/2/myself", User.from_dict)

    def find(self, query: str, *args: SearchOption) -> list[User]:
        """Search users by e-mail address or display name."""
        params: SearchParams = [("query", query)]
        for option in args:
            params = option(params)
        query_string = "&".join(f"{name}={value}" for name, value in params)
        return self._get(f"{_USER_ENDPOINT}/search?{query_string}", _users)