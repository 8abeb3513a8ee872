"""Exceptions raised by the GitLab API client."""

import json
import re
from typing import Any


class GitLabError(Exception):
    """Base class for all errors raised by this package."""


class ArgumentError(GitLabError, TypeError):
    """Raised when an API method is called with the wrong arguments.

    Always raised before any request is sent.
    """


class ResponseDecodeError(GitLabError):
    """Raised when a successful response carries an undecodable JSON body."""


class GitLabAPIError(GitLabError):
    """Raised when the GitLab server answers with a failed response.

    A ``GET`` that receives a 404 never raises this; it returns ``None``
    instead.

    Attributes:
        verb: Upper-cased HTTP method of the failed request.
        path: Request path, with a leading slash.
        server: Base URL of the API the request was sent to.
        status_code: HTTP status code of the response.
        error: Error text supplied by the server, if any.
        data: Decoded (or raw) response body, if any.
    """

    def __init__(
        self,
        verb: str,
        path: str,
        server: str,
        status_code: int,
        error: str | None,
        data: Any = None,
    ):
        self.verb = verb
        self.path = path
        self.server = server
        self.status_code = status_code
        self.error = error
        self.data = data

        msg = (
            f"Error {verb}ing {path} from {server} (HTTP {status_code}): "
            f"{error if error is not None else '<undef>'} {dump_one_line(data)}"
        )
        super().__init__(msg)


def dump_one_line(value: Any) -> str:
    """Render a response body on a single line for error messages.

    Mappings and lists are serialized as compact JSON with sorted keys,
    bytes are decoded leniently, and runs of whitespace collapse to a
    single space. Empty values render as ``<undef>``.
    """
    if value is None or value in ("", b""):
        return "<undef>"

    if isinstance(value, dict | list):
        return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)

    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")

    return re.sub(r"\s+", " ", str(value))
