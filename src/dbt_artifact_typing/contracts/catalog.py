"""catalog.json shapes."""

from typing import Any, Dict, List, Optional, TypedDict

from .common import ArtifactMetadata


class CatalogV1(TypedDict, total=False):
    """https://schemas.getdbt.com/dbt/catalog/v1.json (dbt 0.19+)"""
    metadata: ArtifactMetadata
    nodes: Dict[str, Dict[str, Any]]
    sources: Dict[str, Dict[str, Any]]
    errors: Optional[List[str]]
