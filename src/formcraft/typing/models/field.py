"""Field-centric domain models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BaseFieldProps(BaseModel):
    """Visual configuration shared by every field kind."""

    model_config = ConfigDict(extra="forbid")

    label: str = ""
    required: bool = False
    helper_text: str = ""
    class_name: str = ""


class PlaceholderFieldProps(BaseFieldProps):
    """Visual configuration for fields rendering a placeholder."""

    placeholder: str = ""


class NoCustomOptions(BaseModel):
    """Custom options of field kinds without validation settings."""

    model_config = ConfigDict(extra="forbid")


class FieldInstance(BaseModel):
    """One placed, user-configured occurrence of a field kind."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    kind: str
    props: dict[str, Any] = Field(default_factory=dict)
    custom_options: dict[str, Any] = Field(default_factory=dict)

    @property
    def required(self) -> bool:
        """Return the raw `required` flag stored in props."""
        return bool(self.props.get("required", False))
