"""The entry point bundling every service of one Jira instance."""

from __future__ import annotations

import requests

from .core import Client
from .metaissue import MetaIssueService
from .organization import OrganizationService
from .permissionscheme import PermissionSchemeService
from .priority import PriorityService
from .project import ProjectService
from .resolution import ResolutionService
from .role import RoleService
from .servicedesk import ServiceDeskService
from .sprint import SprintService
from .status import StatusService
from .statuscategory import StatusCategoryService
from .user import UserService
from .version import VersionService


class Jira:
    """A Jira API client with one attribute per service.

    ``session`` may carry its own authentication (for instance one of the
    handlers in :mod:`jiraclient.auth`); ``username`` and ``password`` add
    HTTP basic authentication to every request instead.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        self.client = Client(base_url, session, username, password)
        self.issue = MetaIssueService(self.client)
        self.project = ProjectService(self.client)
        self.sprint = SprintService(self.client)
        self.user = UserService(self.client)
        self.version = VersionService(self.client)
        self.priority = PriorityService(self.client)
        self.resolution = ResolutionService(self.client)
        self.status_category = StatusCategoryService(self.client)
        self.role = RoleService(self.client)
        self.permission_scheme = PermissionSchemeService(self.client)
        self.status = StatusService(self.client)
        self.organization = OrganizationService(self.client)
        self.service_desk = ServiceDeskService(self.client)

    @property
    def base_url(self) -> str:
        """The base URL of the instance, always ending in a slash."""
        return self.client.base_url