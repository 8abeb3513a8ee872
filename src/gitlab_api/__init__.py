"""GitLab API client.

A one-to-one interface with the GitLab REST API (v3 and v4). Every
endpoint is a method that validates its arguments, sends one request and
returns the decoded JSON response, or None when a GET answers with 404.

Exports:
    GitLabV4: Client for the v4 API.
    GitLabV3: Client for the legacy v3 API.
    RESTClient: HTTP transport shared by both clients.
    Paginator: Page or record iterator over list endpoints.
    ClientConfig: Validated connection settings.
    GitLabError, GitLabAPIError, ArgumentError, ResponseDecodeError.
"""

from .client import GitLabClient
from .config import ClientConfig, configure_logging, load_config
from .errors import ArgumentError, GitLabAPIError, GitLabError, ResponseDecodeError
from .paginator import Paginator
from .restclient import DEFAULT_TIMEOUT, RESTClient
from .v3 import GitLabV3
from .v4 import GitLabV4

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEOUT",
    "ArgumentError",
    "ClientConfig",
    "GitLabAPIError",
    "GitLabClient",
    "GitLabError",
    "GitLabV3",
    "GitLabV4",
    "Paginator",
    "RESTClient",
    "ResponseDecodeError",
    "configure_logging",
    "load_config",
]
