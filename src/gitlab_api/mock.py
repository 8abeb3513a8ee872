"""In-memory mock of a GitLab server for unit tests.

``MockGitLab`` is a :class:`~gitlab_api.v4.GitLabV4` whose requests never
leave the process: they are routed by :class:`MockTransport` to handlers
backed by a :class:`MockEngine`. Very little is validated; the engine
stores whatever fields it is given.

    api = MockGitLab()
    api.create_user({"username": "fred", "email": "fred@example.com"})
    assert api.user(1)["username"] == "fred"
"""

import json
import re
from collections.abc import Callable
from typing import Any

import httpx
import structlog

from .v4 import GitLabV4

logger = structlog.get_logger(__name__)

DEFAULT_URL = "https://example.com/api/v4"

Handler = Callable[["MockEngine", httpx.Request, tuple[str, ...]], tuple[int, Any]]


class MockEngine:
    """Mutable state of a mock GitLab server."""

    def __init__(self):
        self.next_ids: dict[str, int] = {}
        self.users: list[dict[str, Any]] = []

    def next_id_for(self, kind: str) -> int:
        """Return the next unused ID for an object kind."""
        next_id = self.next_ids.get(kind, 1)
        self.next_ids[kind] = next_id + 1
        return next_id

    def user(self, user_id: int) -> dict[str, Any] | None:
        for user in self.users:
            if user["id"] == user_id:
                return user
        return None

    def create_user(self, user: dict[str, Any]) -> dict[str, Any]:
        """Assign an ID to user, store it and return it."""
        user["id"] = self.next_id_for("user")
        self.users.append(user)
        return user

    def update_user(self, user_id: int, data: dict[str, Any]) -> dict[str, Any] | None:
        """Merge data into the stored user; None if there is no such user."""
        user = self.user(user_id)
        if user is None:
            return None
        user.update(data)
        return user

    def delete_user(self, user_id: int) -> dict[str, Any] | None:
        """Remove and return the user; None if there is no such user."""
        user = self.user(user_id)
        if user is None:
            return None
        self.users.remove(user)
        return user


def _list_users(engine, request, captures):
    return 200, engine.users


def _get_user(engine, request, captures):
    user = engine.user(int(captures[0]))
    if user is None:
        return 404, {"message": "404 User Not Found"}
    return 200, user


def _create_user(engine, request, captures):
    engine.create_user(json.loads(request.content))
    return 204, None


def _update_user(engine, request, captures):
    if engine.update_user(int(captures[0]), json.loads(request.content)) is None:
        return 404, {"message": "404 User Not Found"}
    return 204, None


def _delete_user(engine, request, captures):
    if engine.delete_user(int(captures[0])) is None:
        return 404, {"message": "404 User Not Found"}
    return 204, None


ENDPOINTS: list[tuple[str, re.Pattern[str], Handler]] = [
    ("GET", re.compile(r"^users$"), _list_users),
    ("GET", re.compile(r"^users/(\d+)$"), _get_user),
    ("POST", re.compile(r"^users$"), _create_user),
    ("PUT", re.compile(r"^users/(\d+)$"), _update_user),
    ("DELETE", re.compile(r"^users/(\d+)$"), _delete_user),
]


class MockTransport(httpx.MockTransport):
    """httpx transport that answers requests from a MockEngine."""

    def __init__(self, engine: MockEngine | None = None):
        self.engine = engine or MockEngine()
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        path = re.sub(r"^.*api/v4/", "", request.url.path)

        for method, path_re, handler in ENDPOINTS:
            if method != request.method:
                continue
            match = path_re.match(path)
            if match is None:
                continue

            status, content = handler(self.engine, request, match.groups())
            logger.debug("Mock request handled", method=request.method, path=path, status=status)
            if content is None:
                return httpx.Response(status)
            return httpx.Response(status, json=content)

        msg = f"No endpoint matched the {request.method} {path!r} endpoint"
        raise LookupError(msg)


class MockGitLab(GitLabV4):
    """GitLabV4 client wired to an in-memory mock server."""

    def __init__(self, url: str = DEFAULT_URL, **kwargs: Any):
        transport = MockTransport()
        super().__init__(url, transport=transport, **kwargs)
        self.engine = transport.engine
