"""Structural guard: is this object shaped like an artifact at all?"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from dbt_artifact_typing.errors import InvalidArtifact
from dbt_artifact_typing.kernel.category import ArtifactCategory


class _ArtifactMetadata(BaseModel):
    dbt_schema_version: StrictStr

    model_config = ConfigDict(extra="ignore")


class _ArtifactEnvelope(BaseModel):
    """Only ``metadata.dbt_schema_version`` is looked at; every other field is ignored."""
    metadata: _ArtifactMetadata

    model_config = ConfigDict(extra="ignore")


def guard_artifact(raw: Any, category: ArtifactCategory) -> str:
    """Check the artifact shell and return its ``dbt_schema_version``.

    Raises:
        InvalidArtifact: if ``raw`` is not an object, has no ``metadata`` object,
            or ``metadata.dbt_schema_version`` is missing or not a string
    """
    try:
        envelope = _ArtifactEnvelope.model_validate(raw)
    except ValidationError as e:
        raise InvalidArtifact(category.path_segment) from e
    return envelope.metadata.dbt_schema_version
