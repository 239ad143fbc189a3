"""Tests for version -> contract dispatch tables."""

from typing import TypedDict

import pytest

from dbt_artifact_typing.codes import ArtifactErrorKind
from dbt_artifact_typing.errors import UnsupportedVersion
from dbt_artifact_typing.kernel.category import ArtifactCategory
from dbt_artifact_typing.kernel.dispatch import DispatchTable


CATEGORY = ArtifactCategory(name="sources", path_segment="sources")


class A(TypedDict):
    a: int


class B(TypedDict):
    b: int


class C(TypedDict):
    c: int


def _table():
    return DispatchTable(CATEGORY, {1: A, 2: B, 3: C})


def test_dispatch_is_total_over_supported_range():
    table = _table()
    assert table.dispatch(1) is A
    assert table.dispatch(2) is B
    assert table.dispatch(3) is C


@pytest.mark.parametrize("version", [0, -1, 4, 99, 10**9])
def test_dispatch_rejects_outside_range(version):
    with pytest.raises(UnsupportedVersion) as excinfo:
        _table().dispatch(version)
    assert excinfo.value.version == version
    assert excinfo.value.kind == ArtifactErrorKind.UNSUPPORTED_VERSION
    assert str(excinfo.value) == f"Unsupported sources version: {version}"


def test_table_metadata():
    table = _table()
    assert table.versions == (1, 2, 3)
    assert table.latest == 3
    assert len(table) == 3
    assert 2 in table
    assert 4 not in table
    assert table.category == CATEGORY


def test_declaration_order_does_not_matter():
    table = DispatchTable(CATEGORY, {3: C, 1: A, 2: B})
    assert table.versions == (1, 2, 3)
    assert table.dispatch(3) is C


@pytest.mark.parametrize(
    "contracts",
    [
        {},
        {2: A},
        {1: A, 3: C},
        {0: A, 1: B},
        {1: A, "2": B},
    ],
)
def test_table_must_be_dense_from_one(contracts):
    with pytest.raises(ValueError) as excinfo:
        DispatchTable(CATEGORY, contracts)
    assert "sources dispatch table" in str(excinfo.value)


def test_bool_keys_are_rejected():
    with pytest.raises(ValueError):
        DispatchTable(CATEGORY, {True: A})


def test_table_is_not_affected_by_later_mutation_of_source_mapping():
    contracts = {1: A, 2: B}
    table = DispatchTable(CATEGORY, contracts)
    contracts[3] = C
    del contracts[1]
    assert table.dispatch(1) is A
    with pytest.raises(UnsupportedVersion):
        table.dispatch(3)
