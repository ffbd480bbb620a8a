"""Root exceptions for urlkit-core."""

from __future__ import annotations

from typing import Any


class UrlKitError(Exception):
    """Root exception for the entire urlkit toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }
