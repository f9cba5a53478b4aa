"""Core domain model exports."""

from formcraft.typing.models.artifact import GeneratedArtifact
from formcraft.typing.models.definition import FormDefinitionSnapshot
from formcraft.typing.models.field import (
    BaseFieldProps,
    FieldInstance,
    NoCustomOptions,
    PlaceholderFieldProps,
)

__all__ = [
    "BaseFieldProps",
    "FieldInstance",
    "FormDefinitionSnapshot",
    "GeneratedArtifact",
    "NoCustomOptions",
    "PlaceholderFieldProps",
]
