"""Public API for dbt_artifact_typing.

Stable import surface for every artifact category. Prefer importing from
here (or the package root) over the category modules' internals.
"""

from dbt_artifact_typing.catalog import ParsedCatalog, parse_catalog, parse_catalog_v1
from dbt_artifact_typing.codes import ArtifactErrorKind
from dbt_artifact_typing.contracts.catalog import CatalogV1
from dbt_artifact_typing.contracts.common import ArtifactMetadata
from dbt_artifact_typing.contracts.manifest import (
    ManifestV1,
    ManifestV2,
    ManifestV3,
    ManifestV4,
    ManifestV5,
    ManifestV6,
    ManifestV7,
    ManifestV8,
    ManifestV9,
    ManifestV10,
    ManifestV11,
    ManifestV12,
)
from dbt_artifact_typing.contracts.run_results import (
    RunResultsV1,
    RunResultsV2,
    RunResultsV3,
    RunResultsV4,
    RunResultsV5,
    RunResultsV6,
)
from dbt_artifact_typing.contracts.sources import SourcesV1, SourcesV2, SourcesV3
from dbt_artifact_typing.errors import (
    ArtifactParseError,
    InvalidArtifact,
    MalformedVersionIdentifier,
    UnsupportedVersion,
    VersionMismatch,
)
from dbt_artifact_typing.manifest import (
    ParsedManifest,
    parse_manifest,
    parse_manifest_v1,
    parse_manifest_v2,
    parse_manifest_v3,
    parse_manifest_v4,
    parse_manifest_v5,
    parse_manifest_v6,
    parse_manifest_v7,
    parse_manifest_v8,
    parse_manifest_v9,
    parse_manifest_v10,
    parse_manifest_v11,
    parse_manifest_v12,
)
from dbt_artifact_typing.run_results import (
    ParsedRunResults,
    parse_run_results,
    parse_run_results_v1,
    parse_run_results_v2,
    parse_run_results_v3,
    parse_run_results_v4,
    parse_run_results_v5,
    parse_run_results_v6,
)
from dbt_artifact_typing.sources import (
    ParsedSources,
    parse_sources,
    parse_sources_v1,
    parse_sources_v2,
    parse_sources_v3,
)

__all__ = [
    # version contracts
    "ArtifactMetadata",
    "CatalogV1",
    "ManifestV1",
    "ManifestV2",
    "ManifestV3",
    "ManifestV4",
    "ManifestV5",
    "ManifestV6",
    "ManifestV7",
    "ManifestV8",
    "ManifestV9",
    "ManifestV10",
    "ManifestV11",
    "ManifestV12",
    "RunResultsV1",
    "RunResultsV2",
    "RunResultsV3",
    "RunResultsV4",
    "RunResultsV5",
    "RunResultsV6",
    "SourcesV1",
    "SourcesV2",
    "SourcesV3",
    # parsers and errors
    "ArtifactErrorKind",
    "ArtifactParseError",
    "InvalidArtifact",
    "MalformedVersionIdentifier",
    "UnsupportedVersion",
    "VersionMismatch",
    "ParsedCatalog",
    "parse_catalog",
    "parse_catalog_v1",
    "ParsedManifest",
    "parse_manifest",
    "parse_manifest_v1",
    "parse_manifest_v2",
    "parse_manifest_v3",
    "parse_manifest_v4",
    "parse_manifest_v5",
    "parse_manifest_v6",
    "parse_manifest_v7",
    "parse_manifest_v8",
    "parse_manifest_v9",
    "parse_manifest_v10",
    "parse_manifest_v11",
    "parse_manifest_v12",
    "ParsedRunResults",
    "parse_run_results",
    "parse_run_results_v1",
    "parse_run_results_v2",
    "parse_run_results_v3",
    "parse_run_results_v4",
    "parse_run_results_v5",
    "parse_run_results_v6",
    "ParsedSources",
    "parse_sources",
    "parse_sources_v1",
    "parse_sources_v2",
    "parse_sources_v3",
]
