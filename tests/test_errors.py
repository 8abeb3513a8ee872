"""Tests for the one-line body dump used in API error messages."""

import pytest

from gitlab_api import errors


@pytest.mark.parametrize("value", [None, "", b""])
def test_dump_empty_values_as_undef(value):
    """Missing or empty bodies render as <undef>."""
    assert errors.dump_one_line(value) == "<undef>"


def test_dump_collapses_whitespace():
    """Runs of whitespace, newlines included, become single spaces."""
    assert errors.dump_one_line("a\n\n  b\tc") == "a b c"


def test_dump_structured_value_is_sorted_compact_json():
    """Mappings and lists render on one line with sorted keys."""
    value = {"b": [1, 2], "a": {"z": None}}
    assert errors.dump_one_line(value) == '{"a":{"z":null},"b":[1,2]}'


def test_dump_bytes_are_decoded():
    """Raw bytes are decoded leniently before collapsing."""
    assert errors.dump_one_line(b"oops\n\xff") == "oops �"


def test_api_error_message_with_missing_error_text():
    """A missing server error text is shown as <undef>."""
    err = errors.GitLabAPIError(
        verb="DELETE",
        path="/things/1",
        server="https://git.example.com/api/v4",
        status_code=500,
        error=None,
    )
    assert str(err) == (
        "Error DELETEing /things/1 from https://git.example.com/api/v4 (HTTP 500): <undef> <undef>"
    )


def test_argument_error_is_a_type_error():
    """Argument errors can be caught as TypeError or as GitLabError."""
    assert issubclass(errors.ArgumentError, TypeError)
    assert issubclass(errors.ArgumentError, errors.GitLabError)
