"""Parsers for catalog.json (schema v1)."""

from typing import Any, cast

from dbt_artifact_typing.contracts.catalog import CatalogV1
from dbt_artifact_typing.kernel.category import ArtifactCategory
from dbt_artifact_typing.kernel.parser import CategoryParser

CATALOG = ArtifactCategory(name="catalog", path_segment="catalog")

CATALOG_PARSER = CategoryParser(
    CATALOG,
    {1: CatalogV1},
)

ParsedCatalog = CatalogV1


def parse_catalog(catalog: Any) -> ParsedCatalog:
    """Return ``catalog`` typed to the catalog.json version it reports.

    The object is returned as-is; only its metadata is inspected.

    Raises:
        InvalidArtifact: not a catalog.json, or malformed dbt_schema_version
        UnsupportedVersion: version newer than v1 (or v0)
    """
    return cast(ParsedCatalog, CATALOG_PARSER.parse(catalog))


def parse_catalog_v1(catalog: Any) -> CatalogV1:
    """Parse catalog.json v1, the only catalog schema dbt has published."""
    return cast(CatalogV1, CATALOG_PARSER.parse_version(catalog, 1))
