"""GitLab API client facade.

Holds connection configuration and turns each endpoint method call into
exactly one request on the REST transport, attaching authentication and
impersonation headers on the way.
"""

from collections.abc import Mapping
from typing import Any

import httpx
import pydantic
import structlog

from .config import ClientConfig
from .endpoints import render_path
from .paginator import Paginator
from .restclient import DEFAULT_TIMEOUT, RESTClient
from .types import Endpoint

logger = structlog.get_logger(__name__)


def _reveal(secret: pydantic.SecretStr | None) -> str | None:
    return secret.get_secret_value() if secret is not None else None


class GitLabClient:
    """Base client shared by the v3 and v4 APIs.

    Endpoint methods are attached to subclasses from a version's endpoint
    table (see :func:`gitlab_api.endpoints.install_endpoints`). Can be used
    as a context manager for automatic cleanup.
    """

    endpoints: dict[str, Endpoint] = {}

    def __init__(
        self,
        url: str,
        *,
        access_token: str | None = None,
        private_token: str | None = None,
        retries: int = 0,
        sudo_user: str | int | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        rest_client: RESTClient | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: Base URL of the API (e.g., "https://git.example.com/api/v4").
            access_token: OAuth2 token, sent as ``authorization: Bearer``.
            private_token: Personal access token, sent as ``private-token``.
            retries: Extra attempts made when a request fails with a 5xx.
            sudo_user: Username or numeric ID of the user to execute API calls as.
            timeout: Request timeout in seconds (default: 30.0).
            rest_client: Transport to use instead of a new RESTClient.
            transport: httpx transport for a newly created RESTClient.

        Raises:
            pydantic.ValidationError: If any setting is invalid.
        """
        self.config = ClientConfig(
            url=url,
            access_token=access_token,
            private_token=private_token,
            retries=retries,
            sudo_user=sudo_user,
            timeout=timeout,
        )
        self.rest_client = rest_client or RESTClient(
            server=self.config.url,
            retries=self.config.retries,
            timeout=self.config.timeout,
            transport=transport,
        )
        logger.debug("Client created", client=type(self).__name__, url=self.config.url)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "GitLabClient":
        """Build a client from a loaded :class:`ClientConfig`."""
        args = {
            "access_token": _reveal(config.access_token),
            "private_token": _reveal(config.private_token),
            "retries": config.retries,
            "sudo_user": config.sudo_user,
            "timeout": config.timeout,
            **kwargs,
        }
        return cls(config.url, **args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r}, sudo_user={self.sudo_user!r})"

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the underlying REST transport."""
        self.rest_client.close()

    @property
    def url(self) -> str:
        return self.config.url

    @property
    def retries(self) -> int:
        return self.config.retries

    @property
    def sudo_user(self) -> str | int | None:
        return self.config.sudo_user

    def access_token(self) -> str | None:
        """Return the OAuth2 token, if one was configured."""
        return _reveal(self.config.access_token)

    def private_token(self) -> str | None:
        """Return the personal access token, if one was configured."""
        return _reveal(self.config.private_token)

    def _headers(self) -> dict[str, str]:
        headers = {}
        if (access_token := self.access_token()) is not None:
            headers["authorization"] = f"Bearer {access_token}"
        if (private_token := self.private_token()) is not None:
            headers["private-token"] = private_token
        if self.sudo_user is not None:
            headers["sudo"] = str(self.sudo_user)
        return headers

    def _call_rest_method(
        self,
        verb: str,
        path: str,
        path_vars: list[Any],
        params: Mapping[str, Any] | None,
        decode: bool,
    ) -> Any:
        """Dispatch one endpoint call to the REST transport.

        Parameters go to the query string for ``GET`` and ``HEAD`` and to
        the request body for every other verb.

        Raises:
            ArgumentError: If path_vars does not fill the path template.
            GitLabAPIError: If the server answers with a failed response.
        """
        options: dict[str, Any] = {"headers": self._headers(), "decode": decode}
        if params is not None:
            if verb in ("GET", "HEAD"):
                options["query"] = params
            else:
                options["content"] = params

        verb_method = getattr(self.rest_client, verb.lower())
        return verb_method(render_path(path, path_vars), **options)

    def _clone(self, **changes: Any) -> "GitLabClient":
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.config = ClientConfig.model_validate({**self.config.model_dump(), **changes})
        return clone

    def sudo(self, user: str | int) -> "GitLabClient":
        """Return a new client that executes API calls as user.

        The new client shares this client's settings and REST transport;
        this client is left unchanged.

            api.sudo("fred").create_issue(project_id, {"title": "..."})
        """
        return self._clone(sudo_user=user)

    def paginator(self, method: str, *args: Any) -> Paginator:
        """Return a paginator over a list-returning endpoint method.

        A trailing mapping in args is used as the method's parameters.

            for member in api.paginator("group_members", group_id):
                ...
        """
        params: Mapping[str, Any] = {}
        if args and isinstance(args[-1], Mapping):
            *args, params = args
        return Paginator(api=self, method=method, args=list(args), params=dict(params))
