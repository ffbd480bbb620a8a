"""Query string package exceptions."""

from __future__ import annotations

from typing import Any

from urlkit_core.primitives.exceptions import UrlKitError


class QueryStringError(UrlKitError):
    """Base exception for all query string errors."""


class EntryIndexError(QueryStringError, IndexError):
    """Raised when a positional lookup falls outside the stored entries."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"Entry index {index} out of range for query string with {size} entries"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ENTRY_INDEX_OUT_OF_RANGE",
            "message": str(self),
            "index": self.index,
            "size": self.size,
        }
