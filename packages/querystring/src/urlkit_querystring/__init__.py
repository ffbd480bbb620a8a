"""Chainable URL query string building — parse, mutate, serialise."""

from __future__ import annotations

from .builder import QueryStringBuilder, extract_query_part
from .encoding import decode, encode
from .exceptions import EntryIndexError, QueryStringError
from .settings import QueryStringSettings

__all__ = [
    "EntryIndexError",
    "QueryStringBuilder",
    "QueryStringError",
    "QueryStringSettings",
    "decode",
    "encode",
    "extract_query_part",
]
