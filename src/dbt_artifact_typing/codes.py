"""Error kind constants for artifact parsing.

These constants let callers branch on the kind of a parse failure
without matching on message text.
"""

from enum import Enum


class ArtifactErrorKind(str, Enum):
    """Closed set of parse failure kinds."""

    # Not an artifact shell at all (missing/malformed metadata or version identifier)
    STRUCTURALLY_INVALID = "STRUCTURALLY_INVALID"
    # Known version, but not the one a version-pinned parser asked for
    VERSION_MISMATCH = "VERSION_MISMATCH"
    # Well-formed version number outside the dispatch table
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
