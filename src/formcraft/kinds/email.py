"""Email field with optional domain allow-list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from formcraft.codegen.literals import ts_string
from formcraft.kinds.base import InputFieldKind, message, optional_string, subject
from formcraft.typing.enums import FieldKindId

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class EmailOptions(BaseModel):
    """Domain restrictions for email fields."""

    model_config = ConfigDict(extra="forbid")

    allowed_domains: str = ""

    def domains(self) -> list[str]:
        """Return normalized domains from the comma-separated allow-list."""
        parsed: list[str] = []
        for raw in self.allowed_domains.split(","):
            domain = raw.strip().removeprefix("@").lower()
            if domain and domain not in parsed:
                parsed.append(domain)
        return parsed


class EmailFieldKind(InputFieldKind):
    """Email input field with validation."""

    kind = FieldKindId.EMAIL.value
    display_name = "Email"
    description = "Email input field with validation"
    options_model = EmailOptions
    input_type = "email"
    props_defaults = {
        "label": "Email",
        "required": True,
        "helper_text": "Enter your email address",
        "placeholder": "user@example.com",
    }

    __slots__ = ()

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        label = subject(props, "Email")

        base = f"{instance.name}: z.string()"
        code = base
        if props.required:
            code += f".min(1, {message(f'{label} is required')})"
        code += f".email({message('Please enter a valid email address')})"

        domains = options.domains()
        if domains:
            allowed = ", ".join(ts_string(domain) for domain in domains)
            empty_result = "false" if props.required else "true"
            code += "\n".join(
                [
                    "",
                    "  .refine((email) => {",
                    f"    if (!email) return {empty_result};",
                    '    const domain = email.split("@")[1]?.toLowerCase();',
                    f"    return [{allowed}].includes(domain);",
                    f"  }}, {message('Email domain not allowed. Use: ' + ', '.join(domains))})",
                ],
            )
        if not props.required:
            return optional_string(base, code)
        return code
