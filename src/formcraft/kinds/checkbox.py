"""Boolean checkbox field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from formcraft.codegen.literals import indent_block, jsx_attr
from formcraft.kinds.base import (
    FieldKindBase,
    message,
    render_description,
    render_element,
    render_form_field,
    render_label,
    subject,
)
from formcraft.typing.enums import FieldKindId

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class CheckboxOptions(BaseModel):
    """Initial state of the checkbox."""

    model_config = ConfigDict(extra="forbid")

    default_checked: bool = False


class CheckboxFieldKind(FieldKindBase):
    """Simple checkbox input field."""

    kind = FieldKindId.CHECKBOX.value
    display_name = "Checkbox"
    description = "Simple checkbox input field"
    options_model = CheckboxOptions
    props_defaults = {
        "label": "Accept terms and conditions",
        "required": False,
        "helper_text": "",
    }

    __slots__ = ()

    def emit_markup(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        control = render_element(
            "Checkbox",
            [
                f"className={jsx_attr(props.class_name)}",
                "checked={field.value}",
                "onCheckedChange={field.onChange}",
            ],
        )
        lines = [
            '<FormItem className="flex flex-row items-start space-x-3 space-y-0">',
            "  <FormControl>",
            indent_block(control, 4),
            "  </FormControl>",
            '  <div className="space-y-1 leading-none">',
            f"    {render_label(props)}",
            *(f"    {line}" for line in render_description(props)),
            "    <FormMessage />",
            "  </div>",
            "</FormItem>",
        ]
        return render_form_field(instance.name, "\n".join(lines))

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        if props.required:
            must_check = message(f"{subject(props, 'This field')} must be checked")
            return f"{instance.name}: z.boolean().refine((value) => value, {must_check})"
        return f"{instance.name}: z.boolean().optional()"

    def emit_imports(self) -> str:
        return 'import { Checkbox } from "@/components/ui/checkbox";'

    def emit_default_value(self, instance: FieldInstance) -> str | None:
        options = self.validate_custom_options(instance.custom_options)
        return "true" if options.default_checked else "false"
