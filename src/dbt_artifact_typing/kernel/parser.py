"""Category parser: structural guard -> version extraction -> dispatch.

The returned object is always the input object itself. Typing is a trusted
relabel based on the self-reported version; fields beyond
``metadata.dbt_schema_version`` are never validated.
"""

import logging
from typing import Any, Dict, Mapping

from dbt_artifact_typing.errors import VersionMismatch
from dbt_artifact_typing.kernel.category import ArtifactCategory
from dbt_artifact_typing.kernel.dispatch import DispatchTable
from dbt_artifact_typing.kernel.guard import guard_artifact
from dbt_artifact_typing.kernel.version import compile_version_pattern, extract_version

logger = logging.getLogger(__name__)

RawArtifact = Dict[str, Any]


class CategoryParser:
    """Version-sniffing parser for one artifact category.

    Instances hold only read-only state, so one instance can be shared by
    any number of threads.
    """

    def __init__(self, category: ArtifactCategory, contracts: Mapping[int, Any]):
        self.category = category
        self.table = DispatchTable(category, contracts)
        self._pattern = compile_version_pattern(category.path_segment)

    @property
    def versions(self):
        return self.table.versions

    @property
    def latest(self) -> int:
        return self.table.latest

    def detect_version(self, raw: Any) -> int:
        """Return the version ``raw`` reports, without checking it is supported."""
        identifier = guard_artifact(raw, self.category)
        return extract_version(identifier, self._pattern, self.category.path_segment)

    def contract_for(self, raw: Any) -> Any:
        """Return the version contract ``raw`` dispatches to.

        This is the only way to tell apart versions whose contracts share
        the same keys; the ``Parsed*`` unions do not narrow on their own.
        """
        return self.table.dispatch(self.detect_version(raw))

    def parse(self, raw: Any) -> RawArtifact:
        """Identify the version of ``raw`` and return ``raw`` unchanged.

        Raises:
            InvalidArtifact: not an artifact shell, or malformed version identifier
            UnsupportedVersion: version outside the dispatch table
        """
        version = self.detect_version(raw)
        contract = self.table.dispatch(version)
        logger.debug("%s: dispatched v%d -> %s", self.category.artifact_file, version, contract.__name__)
        return raw

    def parse_version(self, raw: Any, expected: int) -> RawArtifact:
        """Like ``parse``, but ``raw`` must report exactly ``expected``.

        Raises:
            InvalidArtifact: not an artifact shell, or malformed version identifier
            VersionMismatch: ``raw`` reports a different version
            UnsupportedVersion: ``expected`` itself is outside the dispatch table
        """
        version = self.detect_version(raw)
        if version != expected:
            logger.debug("%s: expected v%d, found v%d", self.category.artifact_file, expected, version)
            raise VersionMismatch(self.category.path_segment, expected, version)
        self.table.dispatch(version)
        return raw

    def __repr__(self) -> str:
        return f"CategoryParser({self.category.name!r}, versions=1..{self.latest})"
