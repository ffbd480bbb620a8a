"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import UrlKitError

__all__ = [
    "UrlKitError",
]
