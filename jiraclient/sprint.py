"""Sprints of the Jira Agile API."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .core import Client, Response, add_options


def _sprint_issues_url(sprint_id: int) -> str:
    return f"rest/agile/1.0/sprint/{sprint_id}/issue"


class SprintService:
    """Access to sprints and the issues in them."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def move_issues_to_sprint(self, sprint_id: int, issue_ids: Iterable[str]) -> Response:
        """Move issues to an open or active sprint (at most 50 per call)."""
        body = {"issues": list(issue_ids)}
        request = self._client.new_request("POST", _sprint_issues_url(sprint_id), body)
        return self._client.do(request)

    def get_issues_for_sprint(self, sprint_id: int) -> list[dict[str, Any]]:
        """Return the issues of a sprint that the user may view, ordered by rank."""
        request = self._client.new_request("GET", _sprint_issues_url(sprint_id))
        return self._client.do(
            request, lambda payload: list((payload or {}).get("issues") or [])
        ).data

    def get_issue(self, issue_id: str, options: Any = None) -> dict[str, Any]:
        """Return the full representation of an issue, with optional query options."""
        url = add_options(f"rest/agile/1.0/issue/{issue_id}", options)
        request = self._client.new_request("GET", url)
        return self._client.do(request, lambda payload: dict(payload or {})).data