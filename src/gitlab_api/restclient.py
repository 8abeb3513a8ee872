"""REST transport for the GitLab API.

Wraps the six HTTP verbs around a single request primitive and turns
every outcome into either returned data, ``None`` (a ``GET`` answered
with 404) or a raised :class:`~gitlab_api.errors.GitLabAPIError`.
"""

import json
import time
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx
import structlog

from .errors import GitLabAPIError, ResponseDecodeError
from .types import RequestOptions

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

# Responses whose content type matches none of these are never decoded.
DECODABLE_CONTENT_TYPES = ("json", "xml", "yaml", "x-www-form-urlencoded")


@dataclass
class Response:
    """Outcome of a single HTTP request.

    ``data`` is the decoded body, the raw body bytes when decoding was
    skipped, or ``None`` for an empty body.
    """

    code: int
    failed: bool
    error: str | None
    data: Any
    raw: httpx.Response


def is_decodable(content_type: str) -> bool:
    """Return True if a response with this content type may be decoded."""
    content_type = content_type.lower()
    return any(kind in content_type for kind in DECODABLE_CONTENT_TYPES)


def _server_error_text(data: Any, reason: str) -> str | None:
    if isinstance(data, Mapping):
        for key in ("message", "error"):
            if data.get(key) is not None:
                value = data[key]
                return value if isinstance(value, str) else json.dumps(value, sort_keys=True)
    return reason or None


class RESTClient:
    """HTTP transport bound to one GitLab API base URL.

    Owns a lazily created ``httpx.Client``. Can be used as a context
    manager for automatic cleanup.
    """

    def __init__(
        self,
        server: str,
        retries: int = 0,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            server: Base URL of the API (e.g., "https://git.example.com/api/v4").
            retries: Extra attempts made when the server answers with a 5xx.
            timeout: Request timeout in seconds (default: 30.0).
            headers: Headers sent with every request.
            transport: Optional httpx transport, mostly useful for tests.

        Raises:
            ValueError: If server is empty, retries is negative or timeout
                is not positive.
        """
        if not server:
            msg = "server cannot be empty"
            raise ValueError(msg)
        if retries < 0:
            msg = "retries cannot be negative"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        # No trailing slash, so joined URLs never carry a double slash.
        self.server = server.rstrip("/")
        self.retries = retries
        self._timeout = timeout
        self._headers = {"Accept": "application/json", **(headers or {})}
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.server,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the HTTP client if open."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()

    def _build_request_kwargs(self, verb: str, options: RequestOptions) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": dict(options.headers)}
        if options.query is not None:
            kwargs["params"] = dict(options.query)

        content = options.content
        if verb == "POST" and isinstance(content, Mapping) and content.get("file"):
            content = dict(content)
            file = Path(content.pop("file"))
            if not file.is_file():
                msg = f"File {file} is not readable"
                raise FileNotFoundError(msg)
            # Only the basename is sent, never the local directory.
            kwargs["files"] = {"file": (file.name, file.read_bytes())}
            if content:
                kwargs["data"] = {key: str(value) for key, value in content.items()}
        elif isinstance(content, Mapping | list):
            kwargs["json"] = content
        elif content is not None:
            kwargs["content"] = content

        return kwargs

    def _decode(self, verb: str, path: str, response: httpx.Response, decode: bool) -> Any:
        if not response.content:
            return None
        if not decode or not is_decodable(response.headers.get("content-type", "")):
            return response.content
        if "json" not in response.headers.get("content-type", "").lower():
            return response.text

        try:
            return response.json()
        except json.JSONDecodeError as e:
            if response.is_error:
                return response.text
            msg = f"Error decoding JSON ({verb} /{path} {response.status_code}): {e}"
            raise ResponseDecodeError(msg) from e

    def execute(self, verb: str, path: str, options: RequestOptions | None = None) -> Response:
        """Send one request, retrying on 5xx responses.

        Args:
            verb: Upper-cased HTTP method.
            path: Path relative to the server URL, without a leading slash.
            options: Query, content, headers and decode flag.

        Returns:
            Classified response with its body decoded per the decode flag
            and the response content type.

        Raises:
            httpx.HTTPError: If the request could not be sent.
            FileNotFoundError: If a file upload names an unreadable file.
            ResponseDecodeError: If a successful JSON response cannot be
                parsed.
        """
        options = options or RequestOptions()
        kwargs = self._build_request_kwargs(verb, options)
        start_time = time.time()

        try:
            attempt = 0
            while True:
                response = self.client.request(
                    verb,
                    path,
                    follow_redirects=verb in ("GET", "HEAD"),
                    **kwargs,
                )
                if not response.is_server_error or attempt >= self.retries:
                    break
                attempt += 1
                logger.warning(
                    "Request failed, retrying",
                    method=verb,
                    path=path,
                    status_code=response.status_code,
                    attempt=attempt,
                    retries=self.retries,
                )
        except httpx.HTTPError:
            duration = time.time() - start_time
            logger.exception(
                "API request failed",
                method=verb,
                path=path,
                duration_seconds=round(duration, 3),
            )
            raise

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            method=verb,
            path=path,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        data = self._decode(verb, path, response, options.decode)
        # Redirects on write verbs are not followed and count as failures.
        failed = not 200 <= response.status_code < 300
        return Response(
            code=response.status_code,
            failed=failed,
            error=_server_error_text(data, response.reason_phrase) if failed else None,
            data=data,
            raw=response,
        )

    def _call(self, verb: str, path: str, options: RequestOptions) -> Any:
        path = path.lstrip("/")
        logger.info("Making API request", method=verb, path=path)

        res = self.execute(verb, path, options)

        if verb == "GET" and res.code == 404:
            return None

        if res.failed:
            raise GitLabAPIError(
                verb=verb,
                path=f"/{path}",
                server=self.server,
                status_code=res.code,
                error=res.error,
                data=res.data,
            )

        return res.data


def _verb_method(verb: str):
    def method(
        self: RESTClient,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        content: Any = None,
        headers: Mapping[str, str] | None = None,
        decode: bool = True,
    ) -> Any:
        options = RequestOptions(
            query=query,
            content=content,
            headers=dict(headers or {}),
            decode=decode,
        )
        return self._call(verb, path, options)

    method.__name__ = verb.lower()
    method.__qualname__ = f"RESTClient.{verb.lower()}"
    method.__doc__ = (
        f"Send a ``{verb}`` request to ``path`` and return the response data.\n\n"
        f"Raises GitLabAPIError on a failed response"
        + (", except for a 404 which returns None." if verb == "GET" else ".")
    )
    return method


for _verb in ("GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS"):
    setattr(RESTClient, _verb.lower(), _verb_method(_verb))
del _verb
