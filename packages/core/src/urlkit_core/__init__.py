"""urlkit-core — Foundation package for the urlkit toolkit.

Zero infrastructure dependencies. Pydantic for value objects.
"""

from __future__ import annotations

# ── Domain ──────────────────────────────────────────────────────
from .domain import ValueObject

# ── Primitives ──────────────────────────────────────────────────
from .primitives import UrlKitError

__all__ = [
    "UrlKitError",
    "ValueObject",
]
