"""Shapes shared by every artifact category."""

from typing import Any, Dict, TypedDict


class ArtifactMetadata(TypedDict, total=False):
    dbt_schema_version: str
    dbt_version: str
    generated_at: str
    invocation_id: str
    env: Dict[str, Any]
