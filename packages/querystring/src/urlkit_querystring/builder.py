"""
Fluent builder for reading and writing URL query strings.

Example::

    qs = (
        QueryStringBuilder("https://example.com/search?q=boring+urls")
        .add("tag", "python")
        .add("tag", "web")
        .add("page", 2, unique=True)
        .remove("q")
    )
    qs.get("tag")       # → "python,web"
    qs.get_list("tag")  # → ["python", "web"]
    str(qs)             # → "tag=python,web&page=2"

Values are percent-encoded when they are stored and decoded when they are
read back. Keys are stored as given and only encoded by ``to_string()``.
"""

from __future__ import annotations

import logging
from typing import Any

from .encoding import decode, encode
from .exceptions import EntryIndexError
from .settings import QueryStringSettings

logger = logging.getLogger("urlkit.querystring")


def extract_query_part(text: str | None) -> str | None:
    """Return the part of ``text`` after the first ``?``, or ``text`` itself."""
    if not text:
        return text
    _, sep, query = text.partition("?")
    return query if sep else text


class QueryStringBuilder:
    """
    Ordered, chainable collection of query string parameters.

    Each key appears once, matched without regard to case; the spelling
    used when a key is first stored is the one kept for output. Adding to
    an existing key without ``unique`` accumulates values joined by the
    settings' ``value_separator``. Mutating methods return ``self``.
    """

    extract_query_part = staticmethod(extract_query_part)

    def __init__(
        self,
        query: str | None = None,
        *,
        settings: QueryStringSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else QueryStringSettings()
        # casefolded key -> (first spelling, encoded value)
        self._entries: dict[str, tuple[str, str]] = {}
        if query:
            self.parse(query)

    @property
    def settings(self) -> QueryStringSettings:
        return self._settings

    # -- parsing -------------------------------------------------------------

    def parse(self, query: str | None) -> QueryStringBuilder:
        """
        Replace all entries with the pairs found in ``query``.

        ``query`` may be a full URL or a bare query string. Each pair is
        split on the first key/value separator, so ``a=b=c`` stores
        ``b=c`` under ``a``; a pair without one stores an empty value.
        Repeated keys accumulate, whatever their case. Values are taken
        as already encoded.
        """
        self._entries.clear()
        if not query:
            return self
        skipped = 0
        kv_sep = self._settings.key_value_separator
        query_part = extract_query_part(query) or ""
        for segment in query_part.split(self._settings.pair_separator):
            if not segment:
                skipped += 1
                continue
            key, _, value = segment.partition(kv_sep)
            self._insert(key, value)
        logger.debug(
            "Parsed %d query string entries (%d empty segments skipped)",
            len(self._entries),
            skipped,
        )
        return self

    # -- mutation ------------------------------------------------------------

    def add(self, name: str, value: Any, unique: bool = False) -> QueryStringBuilder:
        """
        Add ``value`` under ``name``.

        A missing or empty entry is replaced. Otherwise ``unique`` overwrites
        the stored value and the default appends to it.
        """
        encoded = self._encode_value(value)
        existing = self._value_of(name)
        if not existing or unique:
            self._store(name, encoded)
        else:
            self._store(name, existing + self._settings.value_separator + encoded)
        return self

    def set(self, name: str, value: Any) -> QueryStringBuilder:
        """Store ``value`` under ``name``, replacing anything already there."""
        self._store(name, self._encode_value(value))
        return self

    def remove(self, name: str) -> QueryStringBuilder:
        """Remove ``name`` if it holds a non-empty value; otherwise do nothing."""
        if self._value_of(name):
            del self._entries[name.casefold()]
        return self

    def reset(self) -> QueryStringBuilder:
        """Clear all entries and return ``self`` for reuse."""
        self._entries.clear()
        return self

    # -- lookup --------------------------------------------------------------

    def get(self, name: str) -> str:
        """Decoded value for ``name``; ``""`` when it is missing."""
        return self._decode(self._value_of(name))

    def get_at(self, index: int) -> str:
        """
        Decoded value of the entry at position ``index``.

        Raises:
            EntryIndexError: If ``index`` is negative or past the last entry.
        """
        size = len(self._entries)
        if not 0 <= index < size:
            logger.debug("Rejected entry index %d (size %d)", index, size)
            raise EntryIndexError(index, size)
        _, value = list(self._entries.values())[index]
        return self._decode(value)

    def get_list(self, name: str) -> list[str]:
        """Decoded individual values accumulated under ``name``."""
        stored = self._value_of(name)
        if stored is None:
            return []
        return [
            self._decode(part)
            for part in stored.split(self._settings.value_separator)
        ]

    def contains(self, name: str) -> bool:
        """Return ``True`` if ``name`` holds a non-empty value."""
        return bool(self._value_of(name))

    def keys(self) -> list[str]:
        """Stored keys in insertion order, as first spelled."""
        return [key for key, _ in self._entries.values()]

    # -- serialisation -------------------------------------------------------

    def to_string(self) -> str:
        """Encoded query string, without a leading ``?``."""
        if not self._entries:
            return ""
        kv_sep = self._settings.key_value_separator
        return self._settings.pair_separator.join(
            f"{self._encode(key)}{kv_sep}{value}"
            for key, value in self._entries.values()
            if key
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    # -- internals -----------------------------------------------------------

    def _value_of(self, name: str) -> str | None:
        """Stored (encoded) value for ``name``, or ``None`` when absent."""
        entry = self._entries.get(name.casefold())
        return entry[1] if entry is not None else None

    def _store(self, name: str, encoded: str) -> None:
        """Assign ``encoded`` to ``name``, keeping an existing key's spelling."""
        folded = name.casefold()
        entry = self._entries.get(folded)
        self._entries[folded] = (entry[0] if entry is not None else name, encoded)

    def _insert(self, key: str, encoded: str) -> None:
        """Store an already-encoded value, accumulating onto an existing key."""
        existing = self._value_of(key)
        if existing is None:
            self._store(key, encoded)
        else:
            self._store(key, existing + self._settings.value_separator + encoded)

    def _encode_value(self, value: Any) -> str:
        if value is None:
            return ""
        return self._encode(value if isinstance(value, str) else str(value))

    def _encode(self, text: str) -> str:
        return encode(text, safe=self._settings.safe, encoding=self._settings.encoding)

    def _decode(self, text: str | None) -> str:
        return decode(text, encoding=self._settings.encoding)
