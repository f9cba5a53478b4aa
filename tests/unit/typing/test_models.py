from __future__ import annotations

import pytest
from pydantic import ValidationError

from formcraft.typing.enums import ArtifactStatus, ArtifactType
from formcraft.typing.models import FieldInstance, FormDefinitionSnapshot, GeneratedArtifact


def _field(field_id: str, name: str) -> FieldInstance:
    return FieldInstance(id=field_id, name=name, kind="text", props={"required": True})


def test_field_instance_is_frozen() -> None:
    instance = _field("a", "first_name")

    with pytest.raises(ValidationError):
        instance.name = "other"  # type: ignore[misc]


def test_field_instance_required_reads_props() -> None:
    assert _field("a", "first_name").required is True
    assert FieldInstance(id="b", name="x", kind="text").required is False


def test_snapshot_rejects_duplicate_ids() -> None:
    with pytest.raises(ValidationError, match="unique"):
        FormDefinitionSnapshot(name="demo", fields=[_field("a", "x"), _field("a", "y")])


def test_snapshot_rejects_dangling_selection() -> None:
    with pytest.raises(ValidationError, match="Selected id"):
        FormDefinitionSnapshot(name="demo", fields=[_field("a", "x")], selected_id="missing")


def test_generated_artifact_ok_reflects_status() -> None:
    ok = GeneratedArtifact(artifact_type=ArtifactType.SCHEMA, text="x")
    failed = GeneratedArtifact(
        artifact_type=ArtifactType.MARKUP,
        status=ArtifactStatus.ERROR,
        text="// Error",
        error="boom",
    )

    assert ok.ok is True
    assert failed.ok is False
