"""Generated artifact models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from formcraft.typing.enums import ArtifactStatus, ArtifactType


class GeneratedArtifact(BaseModel):
    """Text produced by one code generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    artifact_type: ArtifactType
    status: ArtifactStatus = ArtifactStatus.OK
    text: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return whether the artifact was generated successfully."""
        return self.status == ArtifactStatus.OK
