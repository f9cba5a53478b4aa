"""Typing-centric domain modules."""

from formcraft.typing.enums import ArtifactStatus, ArtifactType, FieldKindId, PasswordStrength, PhoneFormat
from formcraft.typing.models import (
    BaseFieldProps,
    FieldInstance,
    FormDefinitionSnapshot,
    GeneratedArtifact,
    NoCustomOptions,
    PlaceholderFieldProps,
)
from formcraft.typing.protocol import FieldKindDescriptor

__all__ = [
    "ArtifactStatus",
    "ArtifactType",
    "BaseFieldProps",
    "FieldInstance",
    "FieldKindDescriptor",
    "FieldKindId",
    "FormDefinitionSnapshot",
    "GeneratedArtifact",
    "NoCustomOptions",
    "PasswordStrength",
    "PhoneFormat",
    "PlaceholderFieldProps",
]
