"""
Percent-encoding helpers for query string values and keys.

Encoding is form-style (``quote_plus``): spaces become ``+`` and
non-ASCII text goes through the configured codec into ``%XX`` escapes.

Decoding also understands the legacy ``%uXXXX`` escapes written by older
Unicode-aware encoders, so query strings produced by such systems read
back correctly::

    decode("caf%u00e9")     # → "café"
    decode("caf%C3%A9")     # → "café"
"""

from __future__ import annotations

import re
from urllib.parse import quote, quote_plus, unquote_plus

DEFAULT_SAFE = "!*()"
DEFAULT_ENCODING = "utf-8"

# One or more consecutive %uXXXX escapes; runs are decoded together so
# that surrogate pairs survive.
_LEGACY_ESCAPE_RE = re.compile(r"(?:%[uU][0-9A-Fa-f]{4})+")
_LEGACY_PREFIX_RE = re.compile(r"%[uU]")


def encode(
    value: str,
    *,
    safe: str = DEFAULT_SAFE,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Percent-encode ``value`` for use as a query string key or value."""
    if not value:
        return ""
    return quote_plus(value, safe=safe, encoding=encoding)


def decode(value: str | None, *, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Decode a percent-encoded key or value.

    ``None`` and ``""`` decode to ``""``. Byte sequences that are not valid
    in ``encoding`` are replaced with U+FFFD instead of raising.
    """
    if not value:
        return ""
    if "%u" in value or "%U" in value:
        value = _LEGACY_ESCAPE_RE.sub(
            lambda m: _expand_legacy_escapes(m.group(0), encoding), value
        )
    return unquote_plus(value, encoding=encoding, errors="replace")


def _expand_legacy_escapes(run: str, encoding: str) -> str:
    """Rewrite a run of ``%uXXXX`` escapes as standard ``%XX`` escapes."""
    units = _LEGACY_PREFIX_RE.split(run)[1:]
    raw = b"".join(bytes.fromhex(unit) for unit in units)
    text = raw.decode("utf-16-be", errors="replace")
    return quote(text, safe="", encoding=encoding, errors="replace")
