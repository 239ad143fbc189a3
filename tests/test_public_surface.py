"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- dbt_artifact_typing.api exposes every parse function
- The package root exposes the auto-detecting parsers and the error types
- Importing the package does not configure logging
"""

import logging

import pytest

EXPECTED_PINNED = {
    "manifest": 12,
    "catalog": 1,
    "run_results": 6,
    "sources": 3,
}


def test_api_exports_every_pinned_parser():
    import dbt_artifact_typing.api as api

    for category, latest in EXPECTED_PINNED.items():
        assert callable(getattr(api, f"parse_{category}"))
        for k in range(1, latest + 1):
            name = f"parse_{category}_v{k}"
            assert name in api.__all__
            assert callable(getattr(api, name))
        assert not hasattr(api, f"parse_{category}_v{latest + 1}")


def test_api_all_is_importable():
    import dbt_artifact_typing.api as api

    for name in api.__all__:
        assert hasattr(api, name), name


def test_root_exports():
    import dbt_artifact_typing

    for name in ("parse_manifest", "parse_catalog", "parse_run_results", "parse_sources"):
        assert name in dbt_artifact_typing.__all__
        assert callable(getattr(dbt_artifact_typing, name))

    # Per-version parsers stay in the api module
    assert "parse_manifest_v12" not in dbt_artifact_typing.__all__

    from dbt_artifact_typing.errors import ArtifactParseError
    assert dbt_artifact_typing.ArtifactParseError is ArtifactParseError


def test_version_attribute():
    import dbt_artifact_typing

    # "dev" when running from a source checkout without installed metadata
    assert dbt_artifact_typing.__version__ in ("1.0.0", "dev")


def test_import_does_not_configure_logging():
    import dbt_artifact_typing  # noqa: F401

    logger = logging.getLogger("dbt_artifact_typing")
    assert logger.handlers == []


def test_errors_are_value_errors():
    from dbt_artifact_typing import (
        ArtifactParseError,
        InvalidArtifact,
        MalformedVersionIdentifier,
        UnsupportedVersion,
        VersionMismatch,
    )

    for exc in (InvalidArtifact, MalformedVersionIdentifier, UnsupportedVersion, VersionMismatch):
        assert issubclass(exc, ArtifactParseError)
        assert issubclass(exc, ValueError)

    with pytest.raises(ValueError):
        from dbt_artifact_typing import parse_catalog
        parse_catalog(None)


def test_api_exports_every_version_contract():
    import dbt_artifact_typing.api as api
    from dbt_artifact_typing.manifest import MANIFEST_PARSER
    from dbt_artifact_typing.catalog import CATALOG_PARSER
    from dbt_artifact_typing.run_results import RUN_RESULTS_PARSER
    from dbt_artifact_typing.sources import SOURCES_PARSER

    prefixes = {
        "Manifest": MANIFEST_PARSER,
        "Catalog": CATALOG_PARSER,
        "RunResults": RUN_RESULTS_PARSER,
        "Sources": SOURCES_PARSER,
    }
    for prefix, parser in prefixes.items():
        for k in parser.versions:
            name = f"{prefix}V{k}"
            assert name in api.__all__
            assert getattr(api, name) is parser.table.dispatch(k)
