"""Tests for page-by-page and record-by-record iteration."""

from unittest.mock import MagicMock, call

import pytest

from gitlab_api import paginator


def _api_with_pages(*pages):
    api = MagicMock()
    api.users.side_effect = list(pages)
    return api


# ---------------------------------------------------------------------------
# next_page
# ---------------------------------------------------------------------------


def test_next_page_passes_page_and_per_page():
    """Each call adds page and per_page to the configured params."""
    api = _api_with_pages([1, 2], [])
    pager = paginator.Paginator(api=api, method="users", args=[7], params={"per_page": 2, "x": 1})

    assert pager.next_page() == [1, 2]
    assert pager.next_page() is None

    assert api.users.call_args_list == [
        call(7, {"per_page": 2, "x": 1, "page": 1}),
        call(7, {"per_page": 2, "x": 1, "page": 2}),
    ]


def test_per_page_defaults_to_twenty():
    """Without per_page the default page size is used."""
    api = _api_with_pages([])
    pager = paginator.Paginator(api=api, method="users")

    pager.next_page()

    api.users.assert_called_once_with({"page": 1, "per_page": paginator.DEFAULT_PER_PAGE})


def test_short_page_is_the_last_one():
    """A page with fewer than per_page records ends the walk without another call."""
    api = _api_with_pages([1, 2], [3])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": 2})

    assert pager.next_page() == [1, 2]
    assert pager.next_page() == [3]
    assert pager.next_page() is None
    assert api.users.call_count == 2


def test_string_per_page_is_coerced():
    """A per_page given as a string is compared and sent as an integer."""
    api = _api_with_pages([1, 2], [3])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": "2"})

    assert pager.next_page() == [1, 2]
    assert pager.next_page() == [3]
    assert pager.next_page() is None
    assert api.users.call_args_list == [
        call({"per_page": 2, "page": 1}),
        call({"per_page": 2, "page": 2}),
    ]


def test_non_list_result_raises():
    """A method returning anything but a list is an error."""
    api = _api_with_pages(None)
    pager = paginator.Paginator(api=api, method="users")

    with pytest.raises(TypeError, match="non-list"):
        pager.next_page()


def test_empty_method_name_rejected():
    """A paginator needs a method to call."""
    with pytest.raises(ValueError, match="method"):
        paginator.Paginator(api=MagicMock(), method="")


# ---------------------------------------------------------------------------
# next / all / iteration
# ---------------------------------------------------------------------------


def test_next_walks_records_across_pages():
    """next() returns records one at a time, fetching pages as needed."""
    api = _api_with_pages(["a", "b"], ["c"])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": 2})

    records = []
    while (record := pager.next()) is not None:
        records.append(record)

    assert records == ["a", "b", "c"]
    assert pager.next() is None


def test_all_collects_every_record():
    """all() returns every record across pages."""
    api = _api_with_pages(["a", "b"], ["c", "d"], [])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": 2})

    assert pager.all() == ["a", "b", "c", "d"]


def test_all_restarts_from_first_page():
    """all() resets before walking, even after partial consumption."""
    api = _api_with_pages(["a", "b"], ["a", "b"], ["c"])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": 2})

    pager.next_page()
    assert pager.all() == ["a", "b", "c"]
    assert api.users.call_args_list[1] == call({"per_page": 2, "page": 1})


def test_iteration_is_lazy_and_restartable():
    """Iterating yields records lazily and starts over each time."""
    api = _api_with_pages(["a", "b"], ["c"], ["a", "b"], ["c"])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": 2})

    it = iter(pager)
    assert next(it) == "a"
    assert api.users.call_count == 1

    assert list(it) == ["b", "c"]
    assert list(pager) == ["a", "b", "c"]


def test_reset_goes_back_to_first_page():
    """reset() clears buffered records and the page counter."""
    api = _api_with_pages(["a"], ["b"])
    pager = paginator.Paginator(api=api, method="users", params={"per_page": 5})

    assert pager.next() == "a"
    pager.reset()
    assert pager.next() == "b"
    assert api.users.call_args_list[1] == call({"per_page": 5, "page": 1})
