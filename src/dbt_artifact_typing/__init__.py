"""dbt_artifact_typing: version-sniffing parsers for dbt JSON artifacts."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("dbt-artifact-typing")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Per-version parsers (parse_manifest_v12, ...) live in dbt_artifact_typing.api
from dbt_artifact_typing.api import (
    parse_manifest,
    parse_catalog,
    parse_run_results,
    parse_sources,
    ParsedManifest,
    ParsedCatalog,
    ParsedRunResults,
    ParsedSources,
)
from dbt_artifact_typing.errors import (
    ArtifactParseError,
    InvalidArtifact,
    MalformedVersionIdentifier,
    VersionMismatch,
    UnsupportedVersion,
)
from dbt_artifact_typing.codes import ArtifactErrorKind

__all__ = [
    "__version__",
    "parse_manifest",
    "parse_catalog",
    "parse_run_results",
    "parse_sources",
    "ParsedManifest",
    "ParsedCatalog",
    "ParsedRunResults",
    "ParsedSources",
    "ArtifactParseError",
    "InvalidArtifact",
    "MalformedVersionIdentifier",
    "VersionMismatch",
    "UnsupportedVersion",
    "ArtifactErrorKind",
]
