"""Password field with complexity levels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from formcraft.kinds.base import InputFieldKind, message, optional_string, subject
from formcraft.typing.enums import FieldKindId, PasswordStrength

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance

_STRENGTH_RULES: dict[PasswordStrength, tuple[str, str]] = {
    PasswordStrength.MEDIUM: (
        "/(?=.*[a-z])(?=.*[A-Z])/",
        "must contain at least one uppercase and one lowercase letter",
    ),
    PasswordStrength.STRICT: (
        "/(?=.*[a-z])(?=.*[A-Z])(?=.*[!@#$%^&*])/",
        "must contain uppercase, lowercase, and special characters",
    ),
}


class PasswordOptions(BaseModel):
    """Complexity level enforced by the schema."""

    model_config = ConfigDict(extra="forbid")

    validation_level: PasswordStrength = PasswordStrength.NONE


class PasswordFieldKind(InputFieldKind):
    """Password input field with validation options."""

    kind = FieldKindId.PASSWORD.value
    display_name = "Password"
    description = "Password input field with validation options"
    options_model = PasswordOptions
    input_type = "password"
    props_defaults = {
        "label": "Password",
        "required": True,
        "helper_text": "Enter your password",
        "placeholder": "Enter password",
    }

    __slots__ = ()

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        label = subject(props, "Password")

        base = f"{instance.name}: z.string()"
        code = base
        if props.required:
            code += f".min(1, {message(f'{label} is required')})"
        rule = _STRENGTH_RULES.get(options.validation_level)
        if rule is not None:
            pattern, requirement = rule
            code += f".regex({pattern}, {message(f'{label} {requirement}')})"
        if not props.required:
            return optional_string(base, code)
        return code
