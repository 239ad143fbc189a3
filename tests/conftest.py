"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed dbt_artifact_typing package.
"""

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"

SCHEMA_URL = "https://schemas.getdbt.com/dbt/{segment}/v{version}.json"


def schema_version(segment: str, version) -> str:
    return SCHEMA_URL.format(segment=segment, version=version)


@pytest.fixture
def load_fixture():
    """Load a decoded artifact from fixtures/<category>/v<N>/<file>."""
    def _load(category: str, version: int, filename: str) -> dict:
        path = FIXTURES / category / f"v{version}" / filename
        return json.loads(path.read_text(encoding="utf-8"))
    return _load


@pytest.fixture
def make_artifact():
    """Build a minimal artifact dict reporting the given schema version."""
    def _make(segment: str, version, **body) -> dict:
        artifact = {"metadata": {"dbt_schema_version": schema_version(segment, version)}}
        artifact.update(body)
        return artifact
    return _make
