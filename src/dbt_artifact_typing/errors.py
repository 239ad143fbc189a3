"""Exceptions raised by the artifact parsers.

Every exception carries the exact human-readable message dbt tooling
has always matched on, plus a ``kind`` for programmatic handling.
"""

from typing import Optional, Union

from dbt_artifact_typing.codes import ArtifactErrorKind


class ArtifactParseError(ValueError):
    """Base class for all artifact parse failures."""

    kind: ArtifactErrorKind

    def __init__(self, artifact: str, message: str):
        super().__init__(message)
        self.artifact = artifact  # wire path segment, e.g. "run-results"
        self.message = message


class InvalidArtifact(ArtifactParseError):
    """Raised when the input is not a recognizable artifact shell."""

    kind = ArtifactErrorKind.STRUCTURALLY_INVALID

    def __init__(self, artifact: str, message: Optional[str] = None):
        super().__init__(artifact, message or f"Not a {artifact}.json")


class MalformedVersionIdentifier(InvalidArtifact):
    """Raised when dbt_schema_version does not end in /<artifact>/v<N>.json."""

    def __init__(self, artifact: str, identifier: str):
        super().__init__(artifact, f"Invalid dbt schema version format: {identifier}")
        self.identifier = identifier


class VersionMismatch(ArtifactParseError):
    """Raised by version-pinned parsers when the artifact reports another version."""

    kind = ArtifactErrorKind.VERSION_MISMATCH

    def __init__(self, artifact: str, expected: int, found: int):
        super().__init__(artifact, f"Not a {artifact}.json v{expected}")
        self.expected = expected
        self.found = found


class UnsupportedVersion(ArtifactParseError):
    """Raised when the version number has no entry in the dispatch table.

    ``version`` is the int, or its digit string (leading zeros stripped) when
    it is too long to convert.
    """

    kind = ArtifactErrorKind.UNSUPPORTED_VERSION

    def __init__(self, artifact: str, version: Union[int, str]):
        super().__init__(artifact, f"Unsupported {artifact} version: {version}")
        self.version = version
