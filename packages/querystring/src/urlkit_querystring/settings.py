"""QueryStringSettings — wire-format knobs for a QueryStringBuilder."""

from __future__ import annotations

import codecs

from pydantic import Field, field_validator, model_validator

from urlkit_core.domain.value_object import ValueObject

from .encoding import DEFAULT_ENCODING, DEFAULT_SAFE, encode


class QueryStringSettings(ValueObject):
    """
    Immutable separators and encoding options.

    The defaults describe the usual ``key=value&key=value`` format with
    accumulated values joined by ``,``.

    Attributes:
        pair_separator: Separates ``key=value`` pairs.
        key_value_separator: Separates a key from its value.
        value_separator: Joins the values accumulated under one key.
        safe: Extra characters the encoder leaves unescaped.
        encoding: Codec used for percent-escapes.
    """

    pair_separator: str = Field(default="&", min_length=1)
    key_value_separator: str = Field(default="=", min_length=1)
    value_separator: str = Field(default=",", min_length=1)
    safe: str = DEFAULT_SAFE
    encoding: str = DEFAULT_ENCODING

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value!r}") from exc
        return value

    @field_validator("safe")
    @classmethod
    def _no_escape_characters(cls, value: str) -> str:
        # "%" starts an escape and "+" stands for a space once encoded
        if "%" in value or "+" in value:
            raise ValueError("'%' and '+' cannot be marked safe")
        return value

    @model_validator(mode="after")
    def _check_separators(self) -> QueryStringSettings:
        separators = (
            self.pair_separator,
            self.key_value_separator,
            self.value_separator,
        )
        if len(set(separators)) != len(separators):
            raise ValueError(f"Separators must be distinct, got {separators!r}")
        for sep in separators:
            if encode(sep, safe=self.safe, encoding=self.encoding) == sep:
                raise ValueError(
                    f"Separator {sep!r} would not be escaped inside keys or values"
                )
        return self
