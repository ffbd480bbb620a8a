"""Tests for query string exceptions."""

from __future__ import annotations

from urlkit_core.primitives.exceptions import UrlKitError
from urlkit_querystring.exceptions import EntryIndexError, QueryStringError


def test_hierarchy() -> None:
    err = EntryIndexError(5, 2)
    assert isinstance(err, QueryStringError)
    assert isinstance(err, UrlKitError)
    assert isinstance(err, IndexError)


def test_message() -> None:
    err = EntryIndexError(5, 2)
    assert str(err) == "Entry index 5 out of range for query string with 2 entries"


def test_to_dict() -> None:
    assert EntryIndexError(5, 2).to_dict() == {
        "error": "ENTRY_INDEX_OUT_OF_RANGE",
        "message": "Entry index 5 out of range for query string with 2 entries",
        "index": 5,
        "size": 2,
    }


def test_base_to_dict() -> None:
    assert QueryStringError("bad").to_dict() == {
        "error": "QueryStringError",
        "message": "bad",
    }
