"""manifest.json shapes, v1 (dbt 0.19) through v12 (dbt 1.8+).

Later versions inherit the top-level keys of earlier ones and add the
collections introduced in that release.
"""

from typing import Any, Dict, List, Optional, TypedDict

from .common import ArtifactMetadata

_Nodes = Dict[str, Dict[str, Any]]


class ManifestV1(TypedDict, total=False):
    """https://schemas.getdbt.com/dbt/manifest/v1.json"""
    metadata: ArtifactMetadata
    nodes: _Nodes
    sources: _Nodes
    macros: _Nodes
    docs: _Nodes
    exposures: _Nodes
    selectors: Dict[str, Any]
    disabled: Optional[Dict[str, List[Dict[str, Any]]]]
    parent_map: Optional[Dict[str, List[str]]]
    child_map: Optional[Dict[str, List[str]]]


class ManifestV2(ManifestV1, total=False):
    """manifest/v2.json (dbt 0.20)"""


class ManifestV3(ManifestV2, total=False):
    """manifest/v3.json (dbt 0.21)"""


class ManifestV4(ManifestV3, total=False):
    """manifest/v4.json (dbt 1.0), adds metrics."""
    metrics: _Nodes


class ManifestV5(ManifestV4, total=False):
    """manifest/v5.json (dbt 1.1)"""


class ManifestV6(ManifestV5, total=False):
    """manifest/v6.json (dbt 1.2)"""


class ManifestV7(ManifestV6, total=False):
    """manifest/v7.json (dbt 1.3)"""


class ManifestV8(ManifestV7, total=False):
    """manifest/v8.json (dbt 1.4)"""


class ManifestV9(ManifestV8, total=False):
    """manifest/v9.json (dbt 1.5), adds groups."""
    groups: _Nodes
    group_map: Optional[Dict[str, List[str]]]


class ManifestV10(ManifestV9, total=False):
    """manifest/v10.json (dbt 1.6), adds semantic models."""
    semantic_models: _Nodes


class ManifestV11(ManifestV10, total=False):
    """manifest/v11.json (dbt 1.7), adds saved queries."""
    saved_queries: _Nodes


class ManifestV12(ManifestV11, total=False):
    """manifest/v12.json (dbt 1.8+), adds unit tests."""
    unit_tests: _Nodes
