from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core module should not import from the query string package.
    It is the foundation and must remain independent.
    """
    (
        archrule("core_is_independent")
        .match("urlkit_core*")
        .should_not_import("urlkit_querystring*")
        .check("urlkit_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from domain.
    """
    (
        archrule("primitives_isolation")
        .match("urlkit_core.primitives*")
        .should_not_import("urlkit_core.domain*")
        .check("urlkit_core")
    )


def test_encoding_isolation() -> None:
    """
    Encoding helpers are pure functions.
    They must not import the builder, settings, or exceptions.
    """
    (
        archrule("encoding_isolation")
        .match("urlkit_querystring.encoding")
        .should_not_import("urlkit_querystring.builder")
        .should_not_import("urlkit_querystring.settings")
        .should_not_import("urlkit_querystring.exceptions")
        .check("urlkit_querystring")
    )
