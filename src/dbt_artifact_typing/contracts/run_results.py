"""run_results.json shapes.

The wire identifier uses ``run-results``; the Python side uses ``run_results``.
"""

from typing import Any, Dict, List, TypedDict

from .common import ArtifactMetadata


class RunResultsV1(TypedDict, total=False):
    """https://schemas.getdbt.com/dbt/run-results/v1.json (dbt 0.19)"""
    metadata: ArtifactMetadata
    results: List[Dict[str, Any]]
    elapsed_time: float
    args: Dict[str, Any]


class RunResultsV2(RunResultsV1, total=False):
    """run-results/v2.json (dbt 0.20)"""


class RunResultsV3(RunResultsV2, total=False):
    """run-results/v3.json (dbt 0.21)"""


class RunResultsV4(RunResultsV3, total=False):
    """run-results/v4.json (dbt 1.0 - 1.2)"""


class RunResultsV5(RunResultsV4, total=False):
    """run-results/v5.json (dbt 1.5 - 1.7)"""


class RunResultsV6(RunResultsV5, total=False):
    """run-results/v6.json (dbt 1.8+)"""
