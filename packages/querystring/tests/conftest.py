"""Shared fixtures for query string tests."""

from __future__ import annotations

import pytest

from urlkit_querystring import QueryStringBuilder, QueryStringSettings


@pytest.fixture
def builder() -> QueryStringBuilder:
    """Empty builder with default settings."""
    return QueryStringBuilder()


@pytest.fixture
def semicolon_settings() -> QueryStringSettings:
    """Settings for ``a=1;b=2`` style query strings."""
    return QueryStringSettings(pair_separator=";")
