"""Service desks and the organizations associated with them."""

from __future__ import annotations

from .core import Client, Response
from .organization import PagedResult


def _organizations_url(service_desk_id: int) -> str:
    return f"rest/servicedeskapi/servicedesk/{service_desk_id}/organization"


class ServiceDeskService:
    """Access to the organizations of service desks."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_organizations(
        self, service_desk_id: int, start: int, limit: int, account_id: str = ""
    ) -> PagedResult:
        """Return one page of the organizations associated with a service desk."""
        url = f"{_organizations_url(service_desk_id)}?start={start}&limit={limit}"
        if account_id:
            url += f"&accountId={account_id}"
        request = self._client.new_request("GET", url)
        request.headers["Accept"] = "application/json"
        return self._client.do(request, PagedResult.from_dict).data

    def add_organization(self, service_desk_id: int, organization_id: int) -> Response:
        """Associate an organization with a service desk."""
        return self._change("POST", service_desk_id, organization_id)

    def remove_organization(self, service_desk_id: int, organization_id: int) -> Response:
        """Remove an organization from a service desk."""
        return self._change("DELETE", service_desk_id, organization_id)

    def _change(self, method: str, service_desk_id: int, organization_id: int) -> Response:
        body = {"organizationId": organization_id} if organization_id else {}
        request = self._client.new_request(method, _organizations_url(service_desk_id), body)
        return self._client.do(request)