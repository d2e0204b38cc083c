"""Request building, sending and decoding shared by every API service."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote_plus, urlencode, urljoin, urlsplit, urlunsplit

import requests

JSON_CONTENT_TYPE = "application/json"


class JiraError(Exception):
    """Raised when the server rejects a request or its answer cannot be used."""

    def __init__(self, message: str, response: Response | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response


@dataclasses.dataclass
class Response:
    """An HTTP response together with decoded data and paging information."""

    http_response: requests.Response
    data: Any = None
    start_at: int = 0
    max_results: int = 0
    total: int = 0

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.http_response.headers

    @property
    def content(self) -> bytes:
        return self.http_response.content

    @property
    def text(self) -> str:
        return self.http_response.text

    @property
    def url(self) -> str:
        return self.http_response.url

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self.http_response.cookies


def check_response(response: Any) -> None:
    """Raise JiraError unless the response status lies in the 200 range."""
    code = response.status_code
    if 200 <= code <= 299:
        return
    wrapped = response if isinstance(response, Response) else None
    raise JiraError(
        "request failed. Please analyze the request body for more details. "
        f"Status code: {code}",
        wrapped,
    )


def _query_pairs(options: Any) -> list[tuple[str, str]]:
    if hasattr(options, "to_params"):
        options = options.to_params()
    if not isinstance(options, Mapping):
        raise TypeError(f"query options must be a mapping, not {type(options).__name__}")
    pairs: list[tuple[str, str]] = []
    for key in sorted(options):
        value = options[key]
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            if isinstance(item, bool):
                item = "true" if item else "false"
            pairs.append((str(key), str(item)))
    return pairs


def add_options(url: str, options: Any) -> str:
    """Replace the query of ``url`` with the encoded ``options``.

    ``options`` is a mapping, or an object with a ``to_params()`` method
    returning one. Keys are sorted, ``None`` values are left out, lists give
    repeated keys. ``None`` as options returns the URL unchanged.
    """
    if options is None:
        return url
    parts = urlsplit(url)
    query = urlencode(_query_pairs(options), quote_via=quote_plus)
    return urlunsplit(parts._replace(query=query))


def _json_default(obj: Any) -> Any:
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def _encode_json(body: Any) -> bytes:
    text = json.dumps(body, default=_json_default, separators=(",", ":"))
    return (text + "\n").encode("utf-8")


def _populate_page_values(response: Response, value: Any) -> None:
    if all(hasattr(value, name) for name in ("start_at", "max_results", "total")):
        response.start_at = value.start_at
        response.max_results = value.max_results
        response.total = value.total


class Client:
    """Builds and sends requests against one Jira instance."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        urlsplit(base_url)
        self._base_url = base_url
        self.session = session if session is not None else requests.Session()
        self.username = username
        self.password = password

    @property
    def base_url(self) -> str:
        """The base URL, always ending in a slash."""
        return self._base_url

    def _resolve(self, url: str) -> str:
        parts = urlsplit(url)
        relative = urlunsplit(parts._replace(path=parts.path.lstrip("/")))
        return urljoin(self._base_url, relative)

    def _build(self, method: str, url: str, data: Any, headers: dict[str, str]) -> requests.Request:
        request = requests.Request(method, self._resolve(url), headers=headers, data=data)
        if self.username:
            request.auth = (self.username, self.password or "")
        return request

    def new_request(self, method: str, url: str, body: Any = None) -> requests.Request:
        """Build a request whose body, if given, is JSON encoded."""
        data = _encode_json(body) if body is not None else None
        return self._build(method, url, data, {"Content-Type": JSON_CONTENT_TYPE})

    def new_raw_request(self, method: str, url: str, body: Any = None) -> requests.Request:
        """Build a request that sends ``body`` (bytes or a file object) as is."""
        return self._build(method, url, body, {"Content-Type": JSON_CONTENT_TYPE})

    def new_multipart_request(self, method: str, url: str, body: bytes | None = None) -> requests.Request:
        """Build a request carrying an already encoded multipart form."""
        return self._build(method, url, body, {"X-Atlassian-Token": "nocheck"})

    def do(
        self,
        request: requests.Request,
        decode: Callable[[Any], Any] | None = None,
    ) -> Response:
        """Send ``request``; decode the JSON body with ``decode`` if given.

        Raises JiraError for a status outside the 200 range or a body that is
        not valid JSON. Transport failures propagate as requests exceptions.
        """
        prepared = self.session.prepare_request(request)
        response = Response(self.session.send(prepared))
        check_response(response)
        if decode is None:
            return response
        try:
            payload = response.http_response.json()
        except ValueError as exc:
            raise JiraError(f"could not decode response body: {exc}", response) from exc
        response.data = decode(payload)
        _populate_page_values(response, response.data)
        return response