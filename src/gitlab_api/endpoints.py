"""Endpoint table support.

Every GitLab API method is described by a one-line entry in a version's
endpoint table. This module turns those entries into bound methods that
check their arguments locally, fill in the path template, and hand the
call to the client's dispatcher.
"""

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

from .errors import ArgumentError
from .types import Endpoint, PLACEHOLDER_RE


def render_path(template: str, values: list[Any] | tuple[Any, ...]) -> str:
    """Replace each ``:name`` placeholder in template with the next value.

    Values are URL-encoded as single path segments, so ``"group/project"``
    becomes ``"group%2Fproject"``.

    Raises:
        ArgumentError: If the number of values does not match the number
            of placeholders.
    """
    names = PLACEHOLDER_RE.findall(template)
    if len(names) != len(values):
        msg = (
            f"Path {template!r} takes {len(names)} values "
            f"({', '.join(names) or 'none'}), got {len(values)}"
        )
        raise ArgumentError(msg)

    it = iter(values)
    return PLACEHOLDER_RE.sub(lambda _: quote(str(next(it)), safe=""), template)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, str | int | float) and not isinstance(value, bool)


def check_arguments(name: str, endpoint: Endpoint, args: tuple[Any, ...]) -> tuple[list[Any], Any]:
    """Validate the positional arguments of an endpoint method.

    Returns:
        Tuple of (path_values, params) where params is ``None`` unless the
        endpoint accepts parameters and they were passed.

    Raises:
        ArgumentError: If the argument count or any argument shape is
            wrong.
    """
    placeholders = endpoint.placeholders
    min_args = len(placeholders)
    max_args = min_args + (1 if endpoint.params else 0)

    if max_args == 0:
        if args:
            msg = f"The {name} method does not take any arguments"
            raise ArgumentError(msg)
        return [], None

    if min_args == max_args and len(args) != min_args:
        msg = f"{name} must be called with {min_args} arguments"
        raise ArgumentError(msg)
    if not min_args <= len(args) <= max_args:
        msg = f"{name} must be called with {min_args} to {max_args} arguments"
        raise ArgumentError(msg)

    for number, (placeholder, value) in enumerate(zip(placeholders, args, strict=False), start=1):
        if not _is_scalar(value):
            msg = f"The #{number} argument ({placeholder}) to {name} must be a scalar"
            raise ArgumentError(msg)

    params = args[min_args] if len(args) == max_args and endpoint.params else None
    if params is not None and not isinstance(params, Mapping):
        msg = f"The last argument (params) to {name} must be a mapping"
        raise ArgumentError(msg)

    return list(args[:min_args]), params


def make_method(name: str, endpoint: Endpoint) -> Callable[..., Any]:
    """Build the client method for one endpoint table entry."""

    def method(self, *args: Any) -> Any:
        path_values, params = check_arguments(name, endpoint, args)
        result = self._call_rest_method(
            endpoint.verb,
            endpoint.path,
            path_values,
            params,
            endpoint.decode,
        )
        return result if endpoint.decode else None

    signature = list(endpoint.placeholders)
    if endpoint.params:
        signature.append("params")
    returns = " and returns the decoded response body" if endpoint.decode else ""

    method.__name__ = name
    method.__doc__ = (
        f"{name}({', '.join(signature)})\n\n"
        f"Sends a ``{endpoint.verb}`` request to ``{endpoint.path}``{returns}."
    )
    method.endpoint = endpoint  # type: ignore[attr-defined]
    return method


def install_endpoints(cls: type, table: Mapping[str, str]) -> type:
    """Attach one method per table entry to cls and return it.

    Raises:
        ValueError: If an entry is malformed or would shadow an existing
            attribute of cls.
    """
    endpoints = {}
    for name, entry in table.items():
        if hasattr(cls, name):
            msg = f"Endpoint {name!r} would shadow {cls.__name__}.{name}"
            raise ValueError(msg)
        endpoint = Endpoint.parse(entry)
        method = make_method(name, endpoint)
        method.__qualname__ = f"{cls.__name__}.{name}"
        setattr(cls, name, method)
        endpoints[name] = endpoint

    cls.endpoints = {**getattr(cls, "endpoints", {}), **endpoints}
    return cls
