"""Descriptor types for GitLab API endpoints and requests.

Pydantic models describing what a single API call looks like: the
endpoint it targets and the per-request options handed to the REST
transport. Neither is persisted; both live for the length of one call.
"""

import re
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Verb = Literal["GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS"]

# "[result =] VERB path[?]", e.g. "branch = GET projects/:project_id/repository/branches/:branch_name"
_ENTRY_RE = re.compile(
    r"^(?:(?P<result>\w+) = )?"
    r"(?P<verb>GET|POST|PUT|DELETE|HEAD|OPTIONS) "
    r"(?P<path>[^/\s]\S*?)"
    r"(?P<params>\??)$"
)
PLACEHOLDER_RE = re.compile(r":([^/]+)")


class Endpoint(BaseModel):
    """A single GitLab API endpoint.

    The path template holds ``:name`` placeholders which are filled, in
    order, by the positional arguments of the generated method.
    """

    model_config = ConfigDict(frozen=True)

    verb: Verb
    path: str
    params: bool = False
    decode: bool = True

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in the order they appear in the path."""
        return tuple(PLACEHOLDER_RE.findall(self.path))

    @classmethod
    def parse(cls, entry: str) -> "Endpoint":
        """Build an endpoint from its one-line table form.

        A leading ``result =`` marks an endpoint whose decoded response is
        returned to the caller; a trailing ``?`` marks one that accepts a
        parameters mapping.

        Raises:
            ValueError: If the entry is malformed.
        """
        match = _ENTRY_RE.match(entry)
        if match is None:
            msg = f"Invalid endpoint entry: {entry!r}"
            raise ValueError(msg)
        return cls(
            verb=match["verb"],
            path=match["path"],
            params=bool(match["params"]),
            decode=match["result"] is not None,
        )


class RequestOptions(BaseModel):
    """Per-request options handed to the REST transport.

    ``query`` is used by read verbs, ``content`` by write verbs.
    """

    query: Mapping[str, Any] | None = None
    content: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    decode: bool = True
