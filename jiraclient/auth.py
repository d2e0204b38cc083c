"""Authentication handlers for requests sessions: basic, cookie and JWT."""

from __future__ import annotations

import base64
import hashlib
import json
import time
from urllib.parse import parse_qsl, quote_plus, unquote, urlsplit

import jwt
import requests
from requests.auth import AuthBase

from .core import JSON_CONTENT_TYPE, JiraError

JWT_LIFETIME_SECONDS = 59


class BasicAuth(AuthBase):
    """Adds HTTP basic authentication to every request."""

    def __init__(self, username: str, password: str) -> None:
        self.username = username
        self.password = password

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        request.headers["Authorization"] = "Basic " + base64.b64encode(credentials).decode("ascii")
        return request


class CookieAuth(AuthBase):
    """Logs in once at ``auth_url`` and sends the session cookies it got back."""

    def __init__(
        self,
        username: str,
        password: str,
        auth_url: str,
        session_cookies: list[tuple[str, str]] | None = None,
        timeout: float = 60.0,
    ) -> None:
        self.username = username
        self.password = password
        self.auth_url = auth_url
        self.session_cookies = session_cookies
        self.timeout = timeout

    def _login(self) -> list[tuple[str, str]]:
        body = json.dumps({"username": self.username, "password": self.password}) + "\n"
        response = requests.post(
            self.auth_url,
            data=body.encode("utf-8"),
            headers={"Content-Type": JSON_CONTENT_TYPE},
            timeout=self.timeout,
        )
        return [(cookie.name, cookie.value) for cookie in response.cookies]

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        if self.session_cookies is None:
            try:
                self.session_cookies = self._login()
            except requests.RequestException as exc:
                raise JiraError(f"cookieauth: no session object has been set: {exc}") from exc
        pairs = [f"{name}={value}" for name, value in self.session_cookies if value]
        if pairs:
            existing = request.headers.get("Cookie")
            request.headers["Cookie"] = "; ".join(([existing] if existing else []) + pairs)
        return request


def _query_escape(text: str) -> str:
    return quote_plus(text, safe="")


def canonicalize_request(method: str, url: str) -> str:
    """Return the canonical request string used for a JWT query string hash."""
    parts = urlsplit(url)
    path = "/" + unquote(parts.path).strip("/").replace("&", "%26")
    grouped: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        grouped.setdefault(key, []).append(value)
    canonical = sorted(
        f"{_query_escape(key)}={_query_escape(''.join(values))}".replace("+", "%20")
        for key, values in grouped.items()
        if key != "jwt"
    )
    return f"{method.upper()}&{path}&{'&'.join(canonical)}"


def query_string_hash(method: str, url: str) -> str:
    """Return the hex SHA-256 of the canonical request."""
    return hashlib.sha256(canonicalize_request(method, url).encode("utf-8")).hexdigest()


class JWTAuth(AuthBase):
    """Signs every request with an HS256 JWT, as used by marketplace add-ons."""

    def __init__(self, secret: str | bytes, issuer: str) -> None:
        self.secret = secret
        self.issuer = issuer

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        now = int(time.time())
        claims = {
            "iss": self.issuer,
            "iat": now,
            "exp": now + JWT_LIFETIME_SECONDS,
            "qsh": query_string_hash(request.method or "GET", request.url or ""),
        }
        try:
            signed = jwt.encode(claims, self.secret, algorithm="HS256")
        except (jwt.PyJWTError, TypeError) as exc:
            raise JiraError(f"jwtAuth: error signing JWT: {exc}") from exc
        request.headers["Authorization"] = f"JWT {signed}"
        return request