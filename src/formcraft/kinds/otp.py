"""One-time password field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from formcraft.codegen.literals import indent_block
from formcraft.kinds.base import FieldKindBase, message, optional_string, render_form_field, render_form_item
from formcraft.typing.enums import FieldKindId
from formcraft.typing.models import BaseFieldProps

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class OtpProps(BaseFieldProps):
    """Visual configuration for OTP inputs."""

    length: int = Field(default=6, ge=1, le=12)
    is_numeric: bool = True
    show_groups: bool = True
    group_size: int = Field(default=3, ge=1)
    auto_focus: bool = False


class OtpFieldKind(FieldKindBase):
    """One-time password input field."""

    kind = FieldKindId.OTP.value
    display_name = "OTP"
    description = "One-time password input field"
    props_model = OtpProps
    props_defaults = {
        "label": "OTP Code",
        "required": True,
        "helper_text": "Enter the verification code",
        "length": 6,
        "is_numeric": True,
        "show_groups": True,
        "group_size": 3,
        "auto_focus": False,
    }

    __slots__ = ()

    def emit_markup(self, instance: FieldInstance) -> str:
        props = self._checked_props(instance)
        attributes = [f"maxLength={{{props.length}}}"]
        if props.is_numeric:
            attributes.append('pattern="^[0-9]+$"')
        if props.auto_focus:
            attributes.append("autoFocus")
        attributes.append("{...field}")

        lines = ["<InputOTP", *(f"  {attribute}" for attribute in attributes), ">"]
        lines.extend([indent_block("\n".join(_slot_groups(props)), 2), "</InputOTP>"])
        return render_form_field(instance.name, render_form_item(props, "\n".join(lines)))

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self._checked_props(instance)
        base = f"{instance.name}: z.string()"
        code = base
        if props.required:
            code += f".length({props.length}, {message('Please enter a valid OTP code')})"
        if props.is_numeric:
            code += f".regex(/^\\d+$/, {message('OTP must contain only digits')})"
        if not props.required:
            return optional_string(base, code)
        return code

    def emit_imports(self) -> str:
        return (
            "import {\n"
            "  InputOTP,\n"
            "  InputOTPGroup,\n"
            "  InputOTPSeparator,\n"
            "  InputOTPSlot,\n"
            '} from "@/components/ui/input-otp";'
        )

    def emit_default_value(self, instance: FieldInstance) -> str | None:  # noqa: ARG002
        return '""'

    def _checked_props(self, instance: FieldInstance) -> OtpProps:
        props = self.validate_props(instance.props)
        if props.show_groups and props.group_size > props.length:
            raise self._fail(instance, f"group_size {props.group_size} exceeds length {props.length}")
        return props


def _slot_groups(props: OtpProps) -> list[str]:
    """Render slot groups, separated when grouping is enabled."""
    group_size = props.group_size if props.show_groups else props.length
    lines: list[str] = []
    for start in range(0, props.length, group_size):
        if start:
            lines.append("<InputOTPSeparator />")
        slots = "\n".join(
            f"<InputOTPSlot index={{{index}}} />" for index in range(start, min(start + group_size, props.length))
        )
        lines.extend(["<InputOTPGroup>", indent_block(slots, 2), "</InputOTPGroup>"])
    return lines
