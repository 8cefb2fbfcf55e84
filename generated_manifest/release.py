"""Release identifier model and the manifest location derived from it."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

MANIFEST_DIRECTORY = "META-INF/kie"
MANIFEST_FILENAME = "generated-class-names"


class ReleaseId(BaseModel):
    """Coordinates identifying one build module (``group:artifact:version``).

    Accepts either the three fields or a single ``g:a:v`` string, so a context
    file may record ``release_id: acme:rules:1.0``.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str

    @model_validator(mode="before")
    @classmethod
    def _from_coordinates(cls, data: Any) -> Any:
        if isinstance(data, str):
            parts = data.strip().split(":")
            if len(parts) != 3:
                raise ValueError(
                    f"Release id must look like 'group:artifact:version', got {data!r}"
                )
            return dict(zip(("group_id", "artifact_id", "version"), parts))
        return data

    @field_validator("group_id", "artifact_id", "version")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Release id components must be non-empty")
        return v

    @classmethod
    def parse(cls, coordinates: str) -> ReleaseId:
        return cls.model_validate(coordinates)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


def manifest_logical_path(release_id: ReleaseId) -> str:
    """Return the '/'-separated manifest location for ``release_id``.

    The version is not part of the path: rebuilding the same module replaces
    its manifest instead of accumulating one file per version.
    """
    return (
        f"{MANIFEST_DIRECTORY}/{release_id.group_id}/"
        f"{release_id.artifact_id}/{MANIFEST_FILENAME}"
    )


__all__ = ["ReleaseId", "manifest_logical_path", "MANIFEST_FILENAME"]
