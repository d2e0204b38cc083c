import pytest
import responses

from jiraclient.core import Client, JiraError
from jiraclient.priority import Priority, PriorityService

BASE_URL = "https://jira.example.com/"
ENDPOINT = BASE_URL + "rest/api/2/priority"

PRIORITIES = [
    {
        "self": "https://jira.example.com/rest/api/2/priority/1",
        "statusColor": "#ec1e24",
        "description": "This problem will block progress.",
        "iconUrl": "https://jira.example.com/images/icons/priorities/blocker.svg",
        "name": "Immediate",
        "id": "1",
    },
    {
        "self": "https://jira.example.com/rest/api/2/priority/2",
        "statusColor": "#ff7452",
        "description": "Serious problem that could block progress.",
        "iconUrl": "https://jira.example.com/images/icons/priorities/critical.svg",
        "name": "Urgent",
        "id": "2",
    },
]


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return PriorityService(Client(BASE_URL))


def test_get_list(mocked, service):
    mocked.add(responses.GET, ENDPOINT, json=PRIORITIES)

    priorities = service.get_list()

    assert len(priorities) == 2
    assert [p.name for p in priorities] == ["Immediate", "Urgent"]
    assert priorities[0].status_color == "#ec1e24"
    assert priorities[1].id == "2"
    assert mocked.calls[0].request.method == "GET"


def test_get_list_empty(mocked, service):
    mocked.add(responses.GET, ENDPOINT, json=[])

    assert service.get_list() == []


def test_get_list_server_error(mocked, service):
    mocked.add(responses.GET, ENDPOINT, status=500)

    with pytest.raises(JiraError):
        service.get_list()


def test_get_list_not_an_array(mocked, service):
    mocked.add(responses.GET, ENDPOINT, json={"name": "Immediate"})

    with pytest.raises(JiraError):
        service.get_list()


def test_priority_round_trip():
    priority = Priority.from_dict(PRIORITIES[0])

    assert priority.to_dict() == PRIORITIES[0]