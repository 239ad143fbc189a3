"""sources.json (source freshness) shapes."""

from typing import Any, Dict, List, TypedDict

from .common import ArtifactMetadata


class SourcesV1(TypedDict, total=False):
    """https://schemas.getdbt.com/dbt/sources/v1.json (dbt 0.19)"""
    metadata: ArtifactMetadata
    results: List[Dict[str, Any]]
    elapsed_time: float


class SourcesV2(SourcesV1, total=False):
    """sources/v2.json (dbt 0.20 - 1.0)"""


class SourcesV3(SourcesV2, total=False):
    """sources/v3.json (dbt 1.1+), a FreshnessExecutionResultArtifact."""
