"""Parsers for manifest.json (schema v1-v12)."""

from typing import Any, Union, cast

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
from dbt_artifact_typing.kernel.category import ArtifactCategory
from dbt_artifact_typing.kernel.parser import CategoryParser

MANIFEST = ArtifactCategory(name="manifest", path_segment="manifest")

MANIFEST_PARSER = CategoryParser(
    MANIFEST,
    {
        1: ManifestV1,
        2: ManifestV2,
        3: ManifestV3,
        4: ManifestV4,
        5: ManifestV5,
        6: ManifestV6,
        7: ManifestV7,
        8: ManifestV8,
        9: ManifestV9,
        10: ManifestV10,
        11: ManifestV11,
        12: ManifestV12,
    },
)

ParsedManifest = Union[
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
]


def parse_manifest(manifest: Any) -> ParsedManifest:
    """Return ``manifest`` typed to the manifest.json version it reports.

    The object is returned as-is; only its metadata is inspected.

    Raises:
        InvalidArtifact: not a manifest.json, or malformed dbt_schema_version
        UnsupportedVersion: version newer than v12 (or v0)
    """
    return cast(ParsedManifest, MANIFEST_PARSER.parse(manifest))


def parse_manifest_v1(manifest: Any) -> ManifestV1:
    """Parse manifest.json v1; raises VersionMismatch for any other version."""
    return cast(ManifestV1, MANIFEST_PARSER.parse_version(manifest, 1))


def parse_manifest_v2(manifest: Any) -> ManifestV2:
    return cast(ManifestV2, MANIFEST_PARSER.parse_version(manifest, 2))


def parse_manifest_v3(manifest: Any) -> ManifestV3:
    return cast(ManifestV3, MANIFEST_PARSER.parse_version(manifest, 3))


def parse_manifest_v4(manifest: Any) -> ManifestV4:
    return cast(ManifestV4, MANIFEST_PARSER.parse_version(manifest, 4))


def parse_manifest_v5(manifest: Any) -> ManifestV5:
    return cast(ManifestV5, MANIFEST_PARSER.parse_version(manifest, 5))


def parse_manifest_v6(manifest: Any) -> ManifestV6:
    return cast(ManifestV6, MANIFEST_PARSER.parse_version(manifest, 6))


def parse_manifest_v7(manifest: Any) -> ManifestV7:
    return cast(ManifestV7, MANIFEST_PARSER.parse_version(manifest, 7))


def parse_manifest_v8(manifest: Any) -> ManifestV8:
    return cast(ManifestV8, MANIFEST_PARSER.parse_version(manifest, 8))


def parse_manifest_v9(manifest: Any) -> ManifestV9:
    return cast(ManifestV9, MANIFEST_PARSER.parse_version(manifest, 9))


def parse_manifest_v10(manifest: Any) -> ManifestV10:
    return cast(ManifestV10, MANIFEST_PARSER.parse_version(manifest, 10))


def parse_manifest_v11(manifest: Any) -> ManifestV11:
    return cast(ManifestV11, MANIFEST_PARSER.parse_version(manifest, 11))


def parse_manifest_v12(manifest: Any) -> ManifestV12:
    """Parse manifest.json v12; raises VersionMismatch for any other version."""
    return cast(ManifestV12, MANIFEST_PARSER.parse_version(manifest, 12))
