"""Single-line text field."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from formcraft.codegen.literals import ts_string
from formcraft.kinds.base import InputFieldKind, message, optional_string, subject
from formcraft.typing.enums import FieldKindId

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class TextOptions(BaseModel):
    """Length and pattern constraints for text fields."""

    model_config = ConfigDict(extra="forbid")

    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    pattern: str | None = None

    @field_validator("pattern")
    @classmethod
    def _validate_pattern(cls, value: str | None) -> str | None:
        """Reject patterns that do not compile."""
        if value:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid regular expression: {exc}") from exc  # noqa: TRY003
        return value


def length_constraints(
    *,
    label: str,
    required: bool,
    min_length: int | None,
    max_length: int | None,
) -> str:
    """Render `.min()`/`.max()` length checks shared by text-like kinds.

    The required check already enforces one character, so a minimum of 1 is
    only emitted for optional fields.

    Args:
        label (str): Noun used in messages.
        required (bool): Whether the field is required.
        min_length (int | None): Minimum length.
        max_length (int | None): Maximum length.

    Raises:
        ValueError: If the minimum exceeds the maximum.

    Returns:
        str: Chained zod calls.
    """
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ValueError(f"min_length {min_length} exceeds max_length {max_length}")  # noqa: TRY003

    code = ""
    if min_length is not None and min_length > (1 if required else 0):
        code += f".min({min_length}, {message(f'{label} must be at least {min_length} characters')})"
    if max_length is not None:
        code += f".max({max_length}, {message(f'{label} must not exceed {max_length} characters')})"
    return code


class TextFieldKind(InputFieldKind):
    """Simple text input field."""

    kind = FieldKindId.TEXT.value
    display_name = "Text"
    description = "Simple text input field"
    options_model = TextOptions
    props_defaults = {
        "label": "Name",
        "required": False,
        "helper_text": "Enter your name",
        "placeholder": "Enter your name",
    }

    __slots__ = ()

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        label = subject(props, "This field")

        base = f"{instance.name}: z.string()"
        code = base
        if props.required:
            code += f".min(1, {message(f'{label} is required')})"
        try:
            code += length_constraints(
                label=label,
                required=props.required,
                min_length=options.min_length,
                max_length=options.max_length,
            )
        except ValueError as exc:
            raise self._fail(instance, str(exc)) from exc
        if options.pattern:
            code += f".regex(new RegExp({ts_string(options.pattern)}), {message(f'{label} format is invalid')})"
        if not props.required:
            return optional_string(base, code)
        return code
