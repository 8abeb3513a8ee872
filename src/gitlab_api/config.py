"""Configuration and logging setup for the GitLab API client."""

import json
import logging
import os
import pathlib
from typing import Annotated, TextIO

import pydantic
import structlog
from structlog.typing import Processor

from .restclient import DEFAULT_TIMEOUT

CONFIG_FILE_ENV_VAR = "GITLAB_API_V4_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "~/.gitlab-api-v4-config"

# Environment variables override values read from the config file.
ENV_VARS = {
    "url": "GITLAB_API_V4_URL",
    "private_token": "GITLAB_API_V4_PRIVATE_TOKEN",
    "access_token": "GITLAB_API_V4_ACCESS_TOKEN",
    "retries": "GITLAB_API_V4_RETRIES",
}


class ClientConfig(pydantic.BaseModel):
    """Connection settings for a GitLab API client.

    Tokens are stored as :class:`pydantic.SecretStr` so that ``repr()``
    and ``model_dump_json()`` of the config never reveal them. Only one
    of ``access_token`` and ``private_token`` is expected to be set; this
    is not checked.
    """

    url: str = pydantic.Field(
        min_length=1,
        description="Base URL of the API, e.g. https://git.example.com/api/v4",
    )
    access_token: pydantic.SecretStr | None = pydantic.Field(
        None,
        description="OAuth2 token, sent as a bearer authorization header",
    )
    private_token: pydantic.SecretStr | None = pydantic.Field(
        None,
        description="Personal access token, sent as a private-token header",
    )
    retries: int = pydantic.Field(
        0,
        description="Extra attempts made when a request fails with a 5xx",
        ge=0,
    )
    sudo_user: Annotated[str, pydantic.Field(min_length=1)] | int | None = pydantic.Field(
        None,
        description="Username or numeric ID of the user to execute API calls as",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )


def configure_logging(
    log_level_name: str = "INFO",
    *,
    renderer: Processor | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the client's request logs.

    The package never calls this itself; applications that do not set up
    structlog on their own can call it once at startup.

    Args:
        log_level_name: Minimum level name, case-insensitive. Unknown
            names fall back to INFO.
        renderer: Final processor turning an event dict into a line.
            Defaults to logfmt with timestamp, level and msg first.
        stream: File-like object the lines are written to. Defaults to
            standard output.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    if renderer is None:
        renderer = structlog.processors.LogfmtRenderer(key_order=("timestamp", "level", "msg"))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def _filter_args(args: dict) -> dict:
    return {key: value for key, value in args.items() if value}


def load_config(config_path: str | None = None) -> ClientConfig:
    """Load client configuration from a JSON file and the environment.

    The file is ``config_path`` if given, else the file named by
    ``GITLAB_API_V4_CONFIG_FILE``, else ``~/.gitlab-api-v4-config``.
    Environment variables (see ``ENV_VARS``) take precedence over the
    file. Empty values are ignored.

    Raises:
        FileNotFoundError: If an explicitly named file does not exist.
        pydantic.ValidationError: If the merged settings are invalid.
    """
    explicit_path = config_path or os.environ.get(CONFIG_FILE_ENV_VAR)
    path = pathlib.Path(explicit_path or DEFAULT_CONFIG_FILE).expanduser()

    file_args = {}
    if path.exists():
        with path.open("r") as f:
            file_args = _filter_args(json.load(f))
    elif explicit_path:
        msg = f"Configuration file not found: {explicit_path}"
        raise FileNotFoundError(msg)

    env_args = _filter_args({field: os.environ.get(var) for field, var in ENV_VARS.items()})

    return ClientConfig(**{**file_args, **env_args})
