"""Phone number field with format validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from formcraft.codegen.literals import ts_string
from formcraft.kinds.base import InputFieldKind, message, optional_string, subject
from formcraft.typing.enums import FieldKindId, PhoneFormat

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance

_FORMAT_RULES: dict[PhoneFormat, tuple[str, str]] = {
    PhoneFormat.INTERNATIONAL: (
        r"^\+?[1-9]\d{1,14}$",
        "Please enter a valid international phone number",
    ),
    PhoneFormat.NATIONAL: (
        r"^[0-9]{3}[-. ]?[0-9]{3}[-. ]?[0-9]{4}$",
        "Please enter a valid phone number (e.g. 555-123-4567)",
    ),
    PhoneFormat.ANY: (
        r"^[0-9+\-() ]{6,}$",
        "Please enter a valid phone number",
    ),
}


class PhoneOptions(BaseModel):
    """Accepted phone number format."""

    model_config = ConfigDict(extra="forbid")

    format: PhoneFormat = PhoneFormat.ANY


class PhoneFieldKind(InputFieldKind):
    """Phone number input with format validation."""

    kind = FieldKindId.PHONE.value
    display_name = "Phone"
    description = "Phone number input with format validation"
    options_model = PhoneOptions
    input_type = "tel"
    props_defaults = {
        "label": "Phone Number",
        "required": False,
        "helper_text": "Enter your phone number",
        "placeholder": "Enter phone number",
    }

    __slots__ = ()

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        pattern, error_message = _FORMAT_RULES[options.format]
        label = subject(props, "Phone")

        base = f"{instance.name}: z.string()"
        code = base
        if props.required:
            code += f".min(1, {message(f'{label} is required')})"
        code += f".regex(new RegExp({ts_string(pattern)}), {message(error_message)})"
        if not props.required:
            return optional_string(base, code)
        return code
