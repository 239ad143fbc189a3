"""Parsers for run-results.json (schema v1-v6)."""

from typing import Any, Union, cast

from dbt_artifact_typing.contracts.run_results import (
    RunResultsV1,
    RunResultsV2,
    RunResultsV3,
    RunResultsV4,
    RunResultsV5,
    RunResultsV6,
)
from dbt_artifact_typing.kernel.category import ArtifactCategory
from dbt_artifact_typing.kernel.parser import CategoryParser

RUN_RESULTS = ArtifactCategory(name="run_results", path_segment="run-results")

RUN_RESULTS_PARSER = CategoryParser(
    RUN_RESULTS,
    {
        1: RunResultsV1,
        2: RunResultsV2,
        3: RunResultsV3,
        4: RunResultsV4,
        5: RunResultsV5,
        6: RunResultsV6,
    },
)

ParsedRunResults = Union[
    RunResultsV1,
    RunResultsV2,
    RunResultsV3,
    RunResultsV4,
    RunResultsV5,
    RunResultsV6,
]


def parse_run_results(run_results: Any) -> ParsedRunResults:
    """Return ``run_results`` typed to the run-results.json version it reports.

    The object is returned as-is; only its metadata is inspected.

    Raises:
        InvalidArtifact: not a run-results.json, or malformed dbt_schema_version
        UnsupportedVersion: version newer than v6 (or v0)
    """
    return cast(ParsedRunResults, RUN_RESULTS_PARSER.parse(run_results))


def parse_run_results_v1(run_results: Any) -> RunResultsV1:
    """Parse run-results.json v1; raises VersionMismatch for any other version."""
    return cast(RunResultsV1, RUN_RESULTS_PARSER.parse_version(run_results, 1))


def parse_run_results_v2(run_results: Any) -> RunResultsV2:
    return cast(RunResultsV2, RUN_RESULTS_PARSER.parse_version(run_results, 2))


def parse_run_results_v3(run_results: Any) -> RunResultsV3:
    return cast(RunResultsV3, RUN_RESULTS_PARSER.parse_version(run_results, 3))


def parse_run_results_v4(run_results: Any) -> RunResultsV4:
    return cast(RunResultsV4, RUN_RESULTS_PARSER.parse_version(run_results, 4))


def parse_run_results_v5(run_results: Any) -> RunResultsV5:
    return cast(RunResultsV5, RUN_RESULTS_PARSER.parse_version(run_results, 5))


def parse_run_results_v6(run_results: Any) -> RunResultsV6:
    """Parse run-results.json v6; raises VersionMismatch for any other version."""
    return cast(RunResultsV6, RUN_RESULTS_PARSER.parse_version(run_results, 6))
