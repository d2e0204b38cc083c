import base64
import json

import jwt
import pytest
import requests
import responses

from jiraclient.auth import (
    BasicAuth,
    CookieAuth,
    JWTAuth,
    canonicalize_request,
    query_string_hash,
)
from jiraclient.core import JiraError

LOGIN_URL = "https://example.com/rest/auth/1/session"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _prepared(url="https://example.com/rest/api/2/issue", method="GET"):
    return requests.Request(method, url).prepare()


def test_basic_auth_header_round_trip():
    password = "password"
    request = BasicAuth("user", password)(_prepared())
    scheme, encoded = request.headers["Authorization"].split(" ", 1)
    assert scheme == "Basic"
    assert base64.b64decode(encoded).decode() == f"user:{password}"


def test_cookie_auth_uses_preset_cookies_and_skips_empty():
    password = "password"
    auth = CookieAuth("user", password, LOGIN_URL, session_cookies=[("empty", ""), ("JSESSIONID", "token")])
    request = auth(_prepared())
    assert request.headers["Cookie"] == "JSESSIONID=token"


def test_cookie_auth_appends_to_existing_cookie():
    password = "password"
    auth = CookieAuth("user", password, LOGIN_URL, session_cookies=[("JSESSIONID", "token")])
    request = _prepared()
    request.headers["Cookie"] = "other=token"
    assert auth(request).headers["Cookie"] == "other=token; JSESSIONID=token"


def test_cookie_auth_logs_in_once(mocked):
    password = "password"
    mocked.add(responses.POST, LOGIN_URL, headers={"Set-Cookie": "JSESSIONID=token; Path=/"}, json={})
    mocked.add(responses.GET, "https://example.com/rest/api/2/myself", json={})
    session = requests.Session()
    session.auth = CookieAuth("user", password, LOGIN_URL)
    session.get("https://example.com/rest/api/2/myself")
    session.get("https://example.com/rest/api/2/myself")

    login_calls = [call for call in mocked.calls if call.request.method == "POST"]
    assert len(login_calls) == 1
    assert json.loads(login_calls[0].request.body) == {"username": "user", "password": password}
    get_call = [call for call in mocked.calls if call.request.method == "GET"][0]
    assert "JSESSIONID=token" in get_call.request.headers["Cookie"]
    assert session.auth.session_cookies == [("JSESSIONID", "token")]


def test_cookie_auth_login_failure_raises(mocked):
    password = "password"
    mocked.add(responses.POST, LOGIN_URL, body=requests.ConnectionError("down"))
    auth = CookieAuth("user", password, LOGIN_URL)
    with pytest.raises(JiraError, match="cookieauth"):
        auth(_prepared())
    assert auth.session_cookies is None


def test_canonicalize_sorts_and_drops_jwt():
    result = canonicalize_request("get", "https://example.com/rest/api/2/issue?b=2&a=1&jwt=placeholder")
    assert result == "GET&/rest/api/2/issue&a=1&b=2"


def test_canonicalize_escapes_values():
    result = canonicalize_request("post", "https://example.com/x/?q=a+b&r=c%2Bd")
    assert result == "POST&/x&q=a%20b&r=c%2Bd"


def test_canonicalize_escapes_ampersand_in_path():
    result = canonicalize_request("GET", "https://example.com/a%26b/")
    assert result.startswith("GET&/a%26b&")


def test_query_string_hash_is_hex_sha256_and_order_independent():
    first = query_string_hash("GET", "https://example.com/p?a=1&b=2")
    second = query_string_hash("GET", "https://example.com/p?b=2&a=1&jwt=placeholder")
    assert first == second
    assert len(first) == 64
    assert int(first, 16) >= 0


def test_query_string_hash_depends_on_method():
    url = "https://example.com/p?a=1"
    assert query_string_hash("GET", url) != query_string_hash("POST", url)


def test_jwt_auth_signs_request():
    secret = "secret"
    url = "https://example.com/rest/api/2/issue?expand=names"
    request = JWTAuth(secret, "my-addon")(_prepared(url))
    scheme, signed = request.headers["Authorization"].split(" ", 1)
    assert scheme == "JWT"
    claims = jwt.decode(signed, secret, algorithms=["HS256"])
    assert claims["iss"] == "my-addon"
    assert claims["qsh"] == query_string_hash("GET", url)
    assert claims["exp"] - claims["iat"] == 59


def test_jwt_auth_rejects_unusable_secret():
    with pytest.raises(JiraError, match="jwtAuth"):
        JWTAuth(12345, "my-addon")(_prepared())