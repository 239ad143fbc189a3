"""Parsers for sources.json (source freshness, schema v1-v3)."""

from typing import Any, Union, cast

from dbt_artifact_typing.contracts.sources import (
    SourcesV1,
    SourcesV2,
    SourcesV3,
)
from dbt_artifact_typing.kernel.category import ArtifactCategory
from dbt_artifact_typing.kernel.parser import CategoryParser

SOURCES = ArtifactCategory(name="sources", path_segment="sources")

SOURCES_PARSER = CategoryParser(
    SOURCES,
    {
        1: SourcesV1,
        2: SourcesV2,
        3: SourcesV3,
    },
)

ParsedSources = Union[
    SourcesV1,
    SourcesV2,
    SourcesV3,
]


def parse_sources(sources: Any) -> ParsedSources:
    """Return ``sources`` typed to the sources.json version it reports.

    The object is returned as-is; only its metadata is inspected.

    Raises:
        InvalidArtifact: not a sources.json, or malformed dbt_schema_version
        UnsupportedVersion: version newer than v3 (or v0)
    """
    return cast(ParsedSources, SOURCES_PARSER.parse(sources))


def parse_sources_v1(sources: Any) -> SourcesV1:
    """Parse sources.json v1; raises VersionMismatch for any other version."""
    return cast(SourcesV1, SOURCES_PARSER.parse_version(sources, 1))


def parse_sources_v2(sources: Any) -> SourcesV2:
    return cast(SourcesV2, SOURCES_PARSER.parse_version(sources, 2))


def parse_sources_v3(sources: Any) -> SourcesV3:
    """Parse sources.json v3; raises VersionMismatch for any other version."""
    return cast(SourcesV3, SOURCES_PARSER.parse_version(sources, 3))
