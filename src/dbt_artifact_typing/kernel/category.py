"""Artifact category definitions."""

from pydantic import BaseModel, ConfigDict, Field


class ArtifactCategory(BaseModel):
    """One family of dbt artifacts sharing a version identifier layout.

    ``path_segment`` is the literal used inside ``dbt_schema_version``
    (``.../dbt/<segment>/v6.json``) and in every error message.
    ``name`` is the Python-side name and may differ from it.
    """
    name: str = Field(pattern=r"^[a-z][a-z_]*$")
    path_segment: str = Field(pattern=r"^[a-z][a-z_-]*$")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def artifact_file(self) -> str:
        return f"{self.path_segment}.json"
