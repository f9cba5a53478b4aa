"""Serializable form definition models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from formcraft.typing.models.field import FieldInstance


class FormDefinitionSnapshot(BaseModel):
    """Point-in-time copy of a form definition, suitable for persistence."""

    model_config = ConfigDict(extra="forbid")

    name: str
    fields: list[FieldInstance] = Field(default_factory=list)
    selected_id: str | None = None

    @model_validator(mode="after")
    def _check_ids(self) -> FormDefinitionSnapshot:
        """Ensure ids are unique and the selection references a field.

        Raises:
            ValueError: If ids repeat or the selection is dangling.

        Returns:
            FormDefinitionSnapshot: Validated snapshot.
        """
        ids = [field.id for field in self.fields]
        if len(ids) != len(set(ids)):
            raise ValueError("Field ids must be unique")  # noqa: TRY003
        if self.selected_id is not None and self.selected_id not in ids:
            raise ValueError("Selected id does not reference a field")  # noqa: TRY003
        return self
