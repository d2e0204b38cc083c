import json

import pytest
import responses

from jiraclient.core import Client, JiraError
from jiraclient.version import Version, VersionService

BASE = "https://jira.example.com/"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def service():
    return VersionService(Client(BASE))


def test_get_success(rsps, service):
    rsps.add(
        responses.GET,
        BASE + "rest/api/2/version/10002",
        json={
            "self": "http://www.example.com/jira/rest/api/2/version/10002",
            "id": "10002",
            "description": "An excellent version",
            "name": "New Version 1",
            "archived": False,
            "released": True,
            "releaseDate": "2010-07-06",
            "overdue": True,
            "userReleaseDate": "6/Jul/2010",
            "startDate": "2010-07-01",
            "projectId": 10000,
        },
    )
    version = service.get(10002)
    assert version.id == "10002"
    assert version.name == "New Version 1"
    assert version.archived is False
    assert version.released is True
    assert version.project_id == 10000
    assert version.start_date == "2010-07-01"


def test_get_missing_raises(rsps, service):
    rsps.add(responses.GET, BASE + "rest/api/2/version/1", status=404)
    with pytest.raises(JiraError):
        service.get(1)


def test_create(rsps, service):
    rsps.add(
        responses.POST,
        BASE + "rest/api/2/version",
        status=201,
        json={
            "description": "An excellent version",
            "name": "New Version 1",
            "archived": False,
            "released": True,
            "releaseDate": "2010-07-06",
            "userReleaseDate": "6/Jul/2010",
            "project": "PXA",
            "projectId": 10000,
        },
    )
    version = Version(
        name="New Version 1",
        description="An excellent version",
        project_id=10000,
        released=True,
        archived=False,
        release_date="2010-07-06",
        user_release_date="6/Jul/2010",
        start_date="2018-07-01",
    )
    created = service.create(version)
    assert created.name == "New Version 1"
    assert created.project_id == 10000
    assert json.loads(rsps.calls[0].request.body) == version.to_dict()


def test_create_with_undecodable_body_raises(rsps, service):
    rsps.add(responses.POST, BASE + "rest/api/2/version", status=201, body="not json")
    with pytest.raises(JiraError, match="could not unmarshall"):
        service.create(Version(name="New Version 1"))


def test_update(rsps, service):
    rsps.add(
        responses.PUT,
        BASE + "rest/api/2/version/10002",
        json={
            "description": "An excellent updated version",
            "name": "New Updated Version 1",
            "archived": False,
            "released": True,
        },
    )
    version = Version(
        id="10002",
        name="New Updated Version 1",
        description="An excellent updated version",
    )
    updated = service.update(version)
    assert updated == version
    assert updated is not version
    assert json.loads(rsps.calls[0].request.body)["name"] == "New Updated Version 1"


def test_update_rejected_raises(rsps, service):
    rsps.add(responses.PUT, BASE + "rest/api/2/version/10002", status=400)
    with pytest.raises(JiraError):
        service.update(Version(id="10002"))


def test_to_dict_omits_unset_but_keeps_false_flags():
    assert Version(archived=False).to_dict() == {"archived": False}
    assert Version().to_dict() == {}


def test_round_trip():
    version = Version(id="10002", name="New Version 1", released=True, project_id=10000)
    assert Version.from_dict(version.to_dict()) == version