import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from jiraclient.core import Client, JiraError
from jiraclient.organization import (
    Organization,
    OrganizationService,
    OrganizationUsers,
    PagedResult,
)

BASE = "https://jira.example.com/"
ORG_URL = BASE + "rest/servicedeskapi/organization"

ACCOUNT_A = "qm:00000000-0000-0000-0000-000000000001:user-a"
ACCOUNT_B = "qm:00000000-0000-0000-0000-000000000002:user-b"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return OrganizationService(Client(BASE))


def _query(url):
    return parse_qs(urlsplit(url).query)


def test_get_all_organizations(mocked, service):
    mocked.add(
        responses.GET,
        ORG_URL,
        json={
            "_expands": [],
            "size": 1,
            "start": 1,
            "limit": 1,
            "isLastPage": False,
            "values": [
                {
                    "id": "1",
                    "name": "Charlie Cakes Franchises",
                    "_links": {"self": ORG_URL + "/1"},
                }
            ],
        },
    )
    result = service.get_all_organizations(0, 50, "")
    assert result.size == 1
    assert result.limit == 1
    assert result.is_last_page is False
    assert result.values[0]["name"] == "Charlie Cakes Franchises"
    request = mocked.calls[0].request
    assert _query(request.url) == {"start": ["0"], "limit": ["50"]}
    assert request.headers["Accept"] == "application/json"


def test_get_all_organizations_with_account_id(mocked, service):
    mocked.add(responses.GET, ORG_URL, json={"size": 0})
    result = service.get_all_organizations(2, 10, "abc")
    assert result.size == 0
    assert _query(mocked.calls[0].request.url) == {
        "start": ["2"],
        "limit": ["10"],
        "accountId": ["abc"],
    }


def test_create_organization(mocked, service):
    def callback(request):
        name = json.loads(request.body)["name"]
        body = {"id": "1", "name": name, "_links": {"self": ORG_URL + "/1"}}
        return 201, {}, json.dumps(body)

    mocked.add_callback(responses.POST, ORG_URL, callback=callback)
    organization = service.create_organization("MyOrg")
    assert organization.name == "MyOrg"
    assert organization.id == "1"
    assert organization.links.self_url == ORG_URL + "/1"


def test_get_organization(mocked, service):
    mocked.add(
        responses.GET,
        ORG_URL + "/1",
        json={"id": "1", "name": "name", "_links": {"self": ORG_URL + "/1"}},
    )
    organization = service.get_organization(1)
    assert organization == Organization.from_dict(
        {"id": "1", "name": "name", "_links": {"self": ORG_URL + "/1"}}
    )
    assert organization.name == "name"


def test_get_organization_not_found_raises(mocked, service):
    mocked.add(responses.GET, ORG_URL + "/2", status=404)
    with pytest.raises(JiraError) as info:
        service.get_organization(2)
    assert info.value.response.status_code == 404


def test_delete_organization(mocked, service):
    mocked.add(responses.DELETE, ORG_URL + "/1", status=204)
    response = service.delete_organization(1)
    assert response.status_code == 204
    assert mocked.calls[0].request.method == "DELETE"


def test_get_properties_keys(mocked, service):
    mocked.add(
        responses.GET,
        ORG_URL + "/1/property",
        json={
            "keys": [
                {
                    "self": "/rest/servicedeskapi/organization/1/property/propertyKey",
                    "key": "organization.attributes",
                }
            ]
        },
    )
    keys = service.get_properties_keys(1)
    assert keys.keys[0].key == "organization.attributes"
    assert keys.keys[0].self_url.endswith("/property/propertyKey")


def test_get_property(mocked, service):
    key = "organization.attributes"
    mocked.add(
        responses.GET,
        ORG_URL + "/1/property/" + key,
        json={"key": key, "value": {"phone": "[phone]", "mail": "charlie@example.com"}},
    )
    prop = service.get_property(1, key)
    assert prop.key == key
    assert prop.value["mail"] == "charlie@example.com"


def test_set_property(mocked, service):
    key = "organization.attributes"
    mocked.add(responses.PUT, ORG_URL + "/1/property/" + key, status=200)
    response = service.set_property(1, key)
    assert response.status_code == 200
    assert mocked.calls[0].request.method == "PUT"


def test_delete_property(mocked, service):
    key = "organization.attributes"
    mocked.add(responses.DELETE, ORG_URL + "/1/property/" + key, status=200)
    response = service.delete_property(1, key)
    assert response.status_code == 200


def test_get_users(mocked, service):
    mocked.add(
        responses.GET,
        ORG_URL + "/1/user",
        json={
            "_expands": [],
            "size": 1,
            "start": 1,
            "limit": 1,
            "isLastPage": False,
            "values": [
                {
                    "accountId": ACCOUNT_A,
                    "emailAddress": "fred@example.com",
                    "displayName": "Fred F. User",
                    "active": True,
                },
                {
                    "accountId": ACCOUNT_B,
                    "emailAddress": "bob@example.com",
                    "displayName": "Bob D. Builder",
                    "active": True,
                },
            ],
        },
    )
    users = service.get_users(1, 0, 50)
    assert users.size == 1
    assert [value["emailAddress"] for value in users.values] == [
        "fred@example.com",
        "bob@example.com",
    ]
    assert _query(mocked.calls[0].request.url) == {"start": ["0"], "limit": ["50"]}


def test_add_users(mocked, service):
    mocked.add(responses.POST, ORG_URL + "/1/user", status=204)
    users = OrganizationUsers(account_ids=[ACCOUNT_A, ACCOUNT_B])
    response = service.add_users(1, users)
    assert response.status_code == 204
    assert json.loads(mocked.calls[0].request.body) == {"accountIds": [ACCOUNT_A, ACCOUNT_B]}


def test_remove_users(mocked, service):
    mocked.add(responses.DELETE, ORG_URL + "/1/user", status=204)
    users = OrganizationUsers(account_ids=[ACCOUNT_A, ACCOUNT_B])
    response = service.remove_users(1, users)
    assert response.status_code == 204
    assert mocked.calls[0].request.method == "DELETE"


def test_paged_result_from_empty():
    assert PagedResult.from_dict(None) == PagedResult()


def test_organization_to_dict_omits_empty():
    assert Organization(name="x").to_dict() == {"name": "x"}