"""Iterate through paginated GitLab API records."""

from collections.abc import Iterator
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_PER_PAGE = 20


class Paginator:
    """Walk a list-returning endpoint one page or one record at a time.

    The endpoint method must accept a parameters mapping as its last
    argument, honour the ``page`` and ``per_page`` parameters and return
    a list. A page shorter than ``per_page`` is taken to be the last one.

    Rather than building one directly, use ``api.paginator(...)``.
    """

    def __init__(
        self,
        api: Any,
        method: str,
        args: list[Any] | None = None,
        params: dict[str, Any] | None = None,
    ):
        """Initialize the paginator.

        Args:
            api: Client whose method is called for each page.
            method: Name of the endpoint method to call.
            args: Positional arguments for the method, minus the params.
            params: Parameters passed with every page request.
        """
        if not method:
            msg = "method cannot be empty"
            raise ValueError(msg)
        self.api = api
        self.method = method
        self.args = list(args or [])
        self.params = dict(params or {})
        self.reset()

    def reset(self) -> None:
        """Go back to the first page with no records retrieved yet."""
        self._records: list[Any] = []
        self._page = 0
        self._last_page = False

    def next_page(self) -> list[Any] | None:
        """Return the records of the next page, or None when exhausted.

        Raises:
            TypeError: If the method returns anything but a list.
        """
        if self._last_page:
            return None

        page = self._page + 1
        per_page = int(self.params.get("per_page") or DEFAULT_PER_PAGE)
        params = {**self.params, "page": page, "per_page": per_page}

        logger.debug("Fetching page", method=self.method, page=page, per_page=per_page)
        records = getattr(self.api, self.method)(*self.args, params)

        if not isinstance(records, list):
            msg = f"The {self.method} method returned a non-list value"
            raise TypeError(msg)

        self._page = page
        if len(records) < per_page:
            self._last_page = True
        self._records = list(records)

        if not records:
            return None
        return records

    def next(self) -> Any:
        """Return the next record, fetching the next page when needed.

        Returns None once every record has been returned.
        """
        if self._records:
            return self._records.pop(0)
        if self._last_page:
            return None

        self.next_page()
        if self._records:
            return self._records.pop(0)
        return None

    def all(self) -> list[Any]:
        """Return every record, starting over from the first page."""
        self.reset()
        records = []
        while (page := self.next_page()) is not None:
            records.extend(page)
        return records

    def __iter__(self) -> Iterator[Any]:
        """Yield every record lazily, starting over from the first page."""
        self.reset()
        while (page := self.next_page()) is not None:
            self._records = []
            yield from page
