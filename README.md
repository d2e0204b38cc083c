# jiraclient

A Python client for parts of the Jira REST API, the Jira Agile API and
the Jira Service Management (Service Desk) API. Requests are sent with
`requests`; responses are decoded into plain dataclasses.

## Installation

```
pip install jiraclient
```

To run the test suite as well:

```
pip install "jiraclient[test]"
pytest
```

## Getting started

Create a `Jira` object with the base URL of your instance. A trailing
slash is added to the URL if it is missing, and endpoints are resolved
beneath it (a leading slash on an endpoint is dropped first).

```python
from jiraclient.api import Jira

password = "password"
jira = Jira("https://jira.example.com/", username="user", password=password)

me = jira.user.get_self()
print(me.display_name)
```

Given a username, HTTP Basic authentication is attached to every request.
Instead you may pass your own `requests.Session` as `session`, for
instance one whose `auth` is a handler from `jiraclient.auth`:

- `BasicAuth(username, password)` – HTTP Basic authentication.
- `CookieAuth(username, password, auth_url)` – on the first request,
  posts the username and password as JSON to `auth_url` and from then on
  sends the cookies it got back (cookies with empty values are left out).
  A failed login raises `JiraError`.
- `JWTAuth(secret, issuer)` – signs every request with an HS256 JSON Web
  Token valid for 59 seconds, carrying a query string hash. The hash is
  computed by `query_string_hash(method, url)` from the canonical form
  given by `canonicalize_request(method, url)`.

```python
import requests
from jiraclient.api import Jira
from jiraclient.auth import JWTAuth

session = requests.Session()
session.auth = JWTAuth(secret="secret", issuer="my-addon")
jira = Jira("https://jira.example.com", session=session)
```

## Services

`Jira` holds one service object per part of the API:

| Attribute           | Class                     | Methods |
|---------------------|---------------------------|---------|
| `user`              | `UserService`             | `get`, `get_by_account_id`, `create`, `delete`, `get_groups`, `get_self`, `find` |
| `version`           | `VersionService`          | `get`, `create`, `update` |
| `sprint`            | `SprintService`           | `move_issues_to_sprint`, `get_issues_for_sprint`, `get_issue` |
| `project`           | `ProjectService`          | `get_list`, `list_with_options`, `get`, `get_permission_scheme` |
| `permission_scheme` | `PermissionSchemeService` | `get_list`, `get` |
| `role`              | `RoleService`             | `get_list`, `get` |
| `priority`          | `PriorityService`         | `get_list` |
| `resolution`        | `ResolutionService`       | `get_list` |
| `status`            | `StatusService`           | `get_all_statuses` |
| `status_category`   | `StatusCategoryService`   | `get_list` |
| `issue`             | `MetaIssueService`        | `get_create_meta`, `get_create_meta_with_options`, `get_edit_meta` |
| `organization`      | `OrganizationService`     | `get_all_organizations`, `create_organization`, `get_organization`, `delete_organization`, `get_properties_keys`, `get_property`, `set_property`, `delete_property`, `get_users`, `add_users`, `remove_users` |
| `service_desk`      | `ServiceDeskService`      | `get_organizations`, `add_organization`, `remove_organization` |

Methods that fetch something return the decoded dataclasses (for example
a `Project`, a list of `Priority`, a `PagedResult`). Methods that only
change something (deletions, `add_users`, `add_organization`,
`set_property`, `move_issues_to_sprint` and the like) return the
`Response`.

A few details worth knowing:

- `VersionService.update` returns a copy of the version that was sent,
  not what the server answered.
- `RoleService.get` and `PermissionSchemeService.get` raise `JiraError`
  when the answer has no `self` URL.
- `SprintService.get_issues_for_sprint` and `get_issue` return issues as
  plain dictionaries.
- `OrganizationService.set_property` sends its PUT without a body, and
  `remove_users` sends its DELETE without the list of account ids.

### Searching users

`UserService.find(query, *options)` takes extra search options built by
the helpers in `jiraclient.user`: `with_start_at`, `with_max_results`,
`with_active` and `with_inactive`. They are appended to the query string
in the order given, without escaping, for example
`find("fred@example.com", with_start_at(100), with_max_results(1000))`.

### Create metadata

`CreateMetaInfo` lets you look up a project by name or key
(`get_project_with_name`, `get_project_with_key`, case-insensitive), and
`MetaProject.get_issue_type_with_name` finds an issue type. A
`MetaIssueType` tells you which fields exist and which are required:

- `get_mandatory_fields()` maps the display name of every required field
  to its field id.
- `get_all_fields()` does the same for every field.
- `check_complete_and_available(config)` returns `True` when a mapping of
  field names covers every required field and names only available ones,
  and raises `JiraError` otherwise.

A field entry without a boolean `required` or a string `name` also
raises `JiraError`.

## Errors

A response whose status code lies outside the 2xx range, and a body that
cannot be decoded as expected, raise `JiraError` from `jiraclient.core`.
Where there was a response, the error keeps it as `error.response`, so
the status code and body can still be inspected. Network failures are
raised as the usual `requests` exceptions.

## Lower-level access

`jiraclient.core.Client` builds requests relative to the base URL
(`new_request` JSON-encodes the body, `new_raw_request` sends it as is,
`new_multipart_request` sends an encoded form with the
`X-Atlassian-Token: nocheck` header) and sends them with
`do(request, decode)`. `add_options(url, options)` replaces a URL's query
with encoded options (keys sorted, `None` left out, lists repeated), and
`check_response(response)` raises for non-2xx responses.

## What is not covered

The package offers no issue creation, update or search, and no services
for boards, groups, fields, components, filters or issue link types.
There is no session login service apart from the `CookieAuth` handler,
and no command-line tool.