"""Tests for the GitLab client facade.

Covers header assembly, query versus body placement, credential hiding,
sudo cloning and end-to-end calls through generated endpoint methods
answered by an ``httpx.MockTransport``.
"""

import json
from unittest.mock import MagicMock

import httpx
import pydantic
import pytest

from gitlab_api import client, config, endpoints, errors, restclient, v3, v4

URL = "https://git.example.com/api/v4"
TOKEN = "abc123"


class ThingsApi(client.GitLabClient):
    """Small client over a made-up "things" resource."""


endpoints.install_endpoints(
    ThingsApi,
    {
        "things": "things = GET things?",
        "thing": "thing = GET things/:id",
        "create_thing": "thing = POST things?",
        "delete_thing": "DELETE things/:id",
        "thing_download": "file = GET things/:id/download",
    },
)


@pytest.fixture
def requests() -> list[httpx.Request]:
    """Requests seen by the mock server, in order."""
    return []


@pytest.fixture
def responses() -> list[httpx.Response]:
    """Responses the mock server hands out, in order."""
    return []


@pytest.fixture
def api(requests, responses) -> ThingsApi:
    """ThingsApi authenticated with a private token, served by a mock transport."""

    def handler(request):
        requests.append(request)
        return responses.pop(0)

    return ThingsApi(URL, private_token=TOKEN, transport=httpx.MockTransport(handler))


@pytest.fixture
def mock_rest() -> MagicMock:
    """Mock RESTClient with no pre-configured return values."""
    return MagicMock(spec=restclient.RESTClient)


# ---------------------------------------------------------------------------
# Example scenarios
# ---------------------------------------------------------------------------


def test_get_single_item(api, requests, responses):
    """GET things/42 carries the private token and returns the decoded body."""
    responses.append(httpx.Response(200, json={"id": 42, "name": "widget"}))

    result = api.thing(42)

    assert result == {"id": 42, "name": "widget"}
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/api/v4/things/42"
    assert requests[0].headers["private-token"] == TOKEN


def test_get_missing_item_returns_none(api, responses):
    """A 404 on GET yields None rather than an exception."""
    responses.append(httpx.Response(404, json={"message": "404 Thing Not Found"}))

    assert api.thing(42) is None


def test_create_conflict_raises(api, requests, responses):
    """A 422 on POST raises with verb, path, server, status and server message."""
    responses.append(httpx.Response(422, json={"message": "name already taken"}))

    with pytest.raises(errors.GitLabAPIError) as exc_info:
        api.create_thing({"name": "x"})

    message = str(exc_info.value)
    assert "POST" in message
    assert "/things" in message
    assert URL in message
    assert "422" in message
    assert "name already taken" in message
    assert json.loads(requests[0].content) == {"name": "x"}


def test_download_returns_raw_bytes(api, responses):
    """An octet-stream response comes back as the literal bytes."""
    responses.append(
        httpx.Response(
            200,
            content=b"hello",
            headers={"content-type": "application/octet-stream"},
        ),
    )

    assert api.thing_download(42) == b"hello"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def test_get_params_go_to_query(api, requests, responses):
    """Parameters of a read call are sent as the query string."""
    responses.append(httpx.Response(200, json=[]))

    api.things({"per_page": 5, "search": "w"})

    assert dict(requests[0].url.params) == {"per_page": "5", "search": "w"}
    assert requests[0].content == b""


def test_write_params_go_to_body(mock_rest):
    """Parameters of a write call are sent as content."""
    api = ThingsApi(URL, rest_client=mock_rest)

    api._call_rest_method("PUT", "things/:id", [1], {"name": "y"}, True)

    mock_rest.put.assert_called_once_with(
        "things/1",
        headers={},
        decode=True,
        content={"name": "y"},
    )


def test_head_params_go_to_query(mock_rest):
    """HEAD is treated as a read verb."""
    api = ThingsApi(URL, rest_client=mock_rest)

    api._call_rest_method("HEAD", "things", [], {"a": 1}, True)

    mock_rest.head.assert_called_once_with("things", headers={}, decode=True, query={"a": 1})


def test_undecoded_endpoint_requests_raw_body(mock_rest):
    """Endpoints without a result ask the transport not to decode."""
    mock_rest.delete.return_value = b""
    api = ThingsApi(URL, rest_client=mock_rest)

    assert api.delete_thing(3) is None
    mock_rest.delete.assert_called_once_with("things/3", headers={}, decode=False)


def test_bad_arguments_send_nothing(mock_rest):
    """Argument errors are raised before the transport is touched."""
    api = ThingsApi(URL, rest_client=mock_rest)

    with pytest.raises(errors.ArgumentError):
        api.thing({"id": 42})
    with pytest.raises(errors.ArgumentError):
        api.thing(1, 2)

    mock_rest.get.assert_not_called()


def test_transport_errors_propagate_unchanged(mock_rest):
    """The facade does not wrap errors from the transport."""
    failure = errors.GitLabAPIError("GET", "/things/1", URL, 500, "boom")
    mock_rest.get.side_effect = failure
    api = ThingsApi(URL, rest_client=mock_rest)

    with pytest.raises(errors.GitLabAPIError) as exc_info:
        api.thing(1)

    assert exc_info.value is failure


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


def test_no_credentials_sends_no_auth_headers():
    """An anonymous client sends neither credential header."""
    api = ThingsApi(URL)
    assert api._headers() == {}


def test_access_token_is_sent_as_bearer():
    """An OAuth2 token becomes a bearer authorization header."""
    api = ThingsApi(URL, access_token="oauth")
    assert api._headers() == {"authorization": "Bearer oauth"}


def test_all_headers_combine():
    """Both credentials and sudo are attached independently."""
    api = ThingsApi(URL, access_token="oauth", private_token=TOKEN, sudo_user="fred")
    assert api._headers() == {
        "authorization": "Bearer oauth",
        "private-token": TOKEN,
        "sudo": "fred",
    }


# ---------------------------------------------------------------------------
# Configuration and credentials
# ---------------------------------------------------------------------------


def test_invalid_settings_are_rejected():
    """Empty URL and negative retries fail validation."""
    with pytest.raises(pydantic.ValidationError):
        ThingsApi("")
    with pytest.raises(pydantic.ValidationError):
        ThingsApi(URL, retries=-1)


def test_rest_client_gets_configured_settings():
    """The default transport is built from the client's settings."""
    api = ThingsApi(URL + "/", retries=3, timeout=5.0)

    assert api.rest_client.server == URL
    assert api.rest_client.retries == 3


def test_tokens_do_not_leak_into_dumps():
    """Dumping the client or its config never shows the token."""
    api = ThingsApi(URL, access_token="oauth-secret", private_token=TOKEN)

    assert TOKEN not in repr(api)
    assert TOKEN not in repr(vars(api))
    assert TOKEN not in str(api.config.model_dump())
    assert TOKEN not in api.config.model_dump_json()
    assert "oauth-secret" not in repr(vars(api))


def test_tokens_are_reachable_through_accessors():
    """The accessors return the configured secrets."""
    api = ThingsApi(URL, access_token="oauth", private_token=TOKEN)

    assert api.access_token() == "oauth"
    assert api.private_token() == TOKEN


def test_from_config_copies_settings():
    """A loaded config produces an equivalent client."""
    cfg = config.ClientConfig(url=URL, private_token=TOKEN, retries=2)

    api = ThingsApi.from_config(cfg)

    assert api.url == URL
    assert api.retries == 2
    assert api.private_token() == TOKEN
    assert api.access_token() is None


# ---------------------------------------------------------------------------
# Sudo
# ---------------------------------------------------------------------------


def test_sudo_returns_new_client(api, requests, responses):
    """sudo() sends the sudo header without touching the original client."""
    responses.extend([httpx.Response(200, json={}), httpx.Response(200, json={})])

    fred = api.sudo("fred")
    fred.thing(1)
    api.thing(1)

    assert fred is not api
    assert fred.sudo_user == "fred"
    assert api.sudo_user is None
    assert requests[0].headers["sudo"] == "fred"
    assert "sudo" not in requests[1].headers


def test_sudo_keeps_credentials_and_transport(api):
    """The clone shares tokens, settings and REST transport."""
    fred = api.sudo("fred")

    assert fred.private_token() == TOKEN
    assert fred.url == api.url
    assert fred.rest_client is api.rest_client
    assert isinstance(fred, ThingsApi)


def test_sudo_accepts_numeric_user_id(api, requests, responses):
    """A numeric user ID is sent as its decimal string."""
    responses.append(httpx.Response(200, json={}))

    api.sudo(42).thing(1)

    assert requests[0].headers["sudo"] == "42"


def test_sudo_rejects_empty_user(api):
    """An empty sudo user fails validation."""
    with pytest.raises(pydantic.ValidationError):
        api.sudo("")


# ---------------------------------------------------------------------------
# Paginator factory
# ---------------------------------------------------------------------------


def test_paginator_splits_trailing_params(api):
    """A trailing mapping becomes the paginator's params."""
    pager = api.paginator("group_members", 7, {"per_page": 50})

    assert pager.api is api
    assert pager.method == "group_members"
    assert pager.args == [7]
    assert pager.params == {"per_page": 50}


def test_paginator_without_params(api):
    """Without a trailing mapping params start empty."""
    pager = api.paginator("users")

    assert pager.args == []
    assert pager.params == {}


# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------


def test_v4_exposes_endpoint_methods():
    """GitLabV4 has a method per table entry."""
    assert set(v4.ENDPOINTS) <= set(dir(v4.GitLabV4))
    assert v4.GitLabV4.endpoints["branches"].path == "projects/:project_id/repository/branches"


def test_v4_encodes_project_paths(requests, responses):
    """Namespaced project IDs are sent as a single encoded segment."""

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=[])

    api = v4.GitLabV4(URL, transport=httpx.MockTransport(handler))
    api.branches("group/project")

    assert requests[0].url.raw_path == b"/api/v4/projects/group%2Fproject/repository/branches"


def test_v4_create_redirected_is_an_error(requests):
    """A redirected create is neither re-sent as a GET nor reported as success."""

    def handler(request):
        requests.append(request)
        if request.method == "POST":
            return httpx.Response(302, headers={"location": f"{URL}/projects"})
        return httpx.Response(200, json=[{"id": 1}])

    api = v4.GitLabV4(URL, transport=httpx.MockTransport(handler))

    with pytest.raises(errors.GitLabAPIError, match=r"HTTP 302"):
        api.create_project({"name": "x"})

    assert [(r.method, r.url.path) for r in requests] == [("POST", "/api/v4/projects")]


def test_v4_raw_snippet_is_deprecated_alias(requests):
    """raw_snippet warns and then behaves like snippet_content."""

    def handler(request):
        requests.append(request)
        return httpx.Response(200, text="print(1)\n", headers={"content-type": "text/plain"})

    api = v4.GitLabV4(URL, transport=httpx.MockTransport(handler))

    with pytest.warns(DeprecationWarning, match="snippet_content"):
        content = api.raw_snippet(7, 3)

    assert content == b"print(1)\n"
    assert requests[0].url.path == "/api/v4/projects/7/snippets/3/raw"


def test_v3_requires_token():
    """The v3 client cannot be built without a token."""
    with pytest.raises(ValueError, match="token"):
        v3.GitLabV3("https://git.example.com/api/v3")


def test_v3_sends_token_as_private_token():
    """The v3 token is sent as the private-token header."""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": 1})

    api = v3.GitLabV3(
        "https://git.example.com/api/v3",
        TOKEN,
        transport=httpx.MockTransport(handler),
    )

    assert api.current_user() == {"id": 1}
    assert seen[0].url.path == "/api/v3/user"
    assert seen[0].headers["private-token"] == TOKEN


def test_v3_from_config():
    """from_config works for v3 through its private token."""
    cfg = config.ClientConfig(url="https://git.example.com/api/v3", private_token=TOKEN)

    api = v3.GitLabV3.from_config(cfg)

    assert api.private_token() == TOKEN
