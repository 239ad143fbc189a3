"""Version identifier parsing.

dbt artifacts self-report their schema as a URL such as
``https://schemas.getdbt.com/dbt/<segment>/v12.json``. Only the tail
``/<segment>/v<N>.json`` matters; whatever precedes it is ignored.
"""

import re
from typing import Pattern

from dbt_artifact_typing.errors import MalformedVersionIdentifier, UnsupportedVersion


# Longer digit runs are never a real schema version and are not converted
# (int() refuses strings past sys.get_int_max_str_digits()).
_MAX_VERSION_DIGITS = 64


def compile_version_pattern(path_segment: str) -> Pattern[str]:
    """Build the end-anchored identifier pattern for one category.

    ``\\Z`` rather than ``$`` so a trailing newline does not match, and
    ``[0-9]`` rather than ``\\d`` so only ASCII digits count.
    """
    return re.compile(r"/" + re.escape(path_segment) + r"/v([0-9]+)\.json\Z")


def extract_version(identifier: str, pattern: Pattern[str], artifact: str) -> int:
    """Return the integer version embedded in ``identifier``.

    Leading zeros are accepted (``v01`` is 1). Range checks belong to the
    dispatch table, except for numbers too long to convert at all.

    Raises:
        MalformedVersionIdentifier: if the identifier does not end in /<segment>/v<N>.json
        UnsupportedVersion: if the number has more than _MAX_VERSION_DIGITS digits
    """
    match = pattern.search(identifier)
    if match is None:
        raise MalformedVersionIdentifier(artifact, identifier)
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > _MAX_VERSION_DIGITS:
        raise UnsupportedVersion(artifact, digits)
    return int(digits)
