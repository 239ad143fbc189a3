"""Version -> contract dispatch tables."""

from types import MappingProxyType
from typing import Any, Mapping, Tuple

from dbt_artifact_typing.errors import UnsupportedVersion
from dbt_artifact_typing.kernel.category import ArtifactCategory


class DispatchTable:
    """Read-only mapping from schema version to its version contract.

    Supported versions must form the dense range ``1..N``. Supporting a new
    artifact version means adding its contract here and nowhere else.
    """

    def __init__(self, category: ArtifactCategory, contracts: Mapping[int, Any]):
        if any(type(v) is not int for v in contracts):
            raise ValueError(f"{category.name} dispatch table keys must be ints, got {list(contracts)}")
        versions = sorted(contracts)
        if not versions or versions != list(range(1, len(versions) + 1)):
            raise ValueError(
                f"{category.name} dispatch table must cover versions 1..N without gaps, got {versions}"
            )
        self._category = category
        self._contracts = MappingProxyType(dict(contracts))
        self._versions = tuple(versions)

    @property
    def category(self) -> ArtifactCategory:
        return self._category

    @property
    def versions(self) -> Tuple[int, ...]:
        return self._versions

    @property
    def latest(self) -> int:
        return self._versions[-1]

    def dispatch(self, version: int) -> Any:
        """Return the contract for ``version``.

        Raises:
            UnsupportedVersion: if ``version`` is outside ``1..N``
        """
        contract = self._contracts.get(version)
        if contract is None:
            raise UnsupportedVersion(self._category.path_segment, version)
        return contract

    def __contains__(self, version: object) -> bool:
        return version in self._contracts

    def __len__(self) -> int:
        return len(self._versions)

    def __repr__(self) -> str:
        return f"DispatchTable({self._category.name!r}, versions=1..{self.latest})"
