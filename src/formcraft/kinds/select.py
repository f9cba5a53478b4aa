"""Dropdown select field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from formcraft.codegen.literals import indent_block, jsx_attr, jsx_text, ts_string
from formcraft.kinds.base import FieldKindBase, render_description, render_form_field, render_label, subject
from formcraft.typing.enums import FieldKindId
from formcraft.typing.models import PlaceholderFieldProps

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class SelectOption(BaseModel):
    """One selectable entry."""

    model_config = ConfigDict(extra="forbid")

    label: str
    value: str = Field(min_length=1)


class SelectOptions(BaseModel):
    """Enumerated values accepted by a select field."""

    model_config = ConfigDict(extra="forbid")

    options: list[SelectOption] = Field(default_factory=list)


class SelectFieldKind(FieldKindBase):
    """Dropdown select field."""

    kind = FieldKindId.SELECT.value
    display_name = "Select"
    description = "Dropdown select field"
    props_model = PlaceholderFieldProps
    options_model = SelectOptions
    props_defaults = {
        "label": "Select Option",
        "required": False,
        "helper_text": "Select an option from the dropdown",
        "placeholder": "Select an option",
    }
    options_defaults = {
        "options": [
            {"label": "Option 1", "value": "option1"},
            {"label": "Option 2", "value": "option2"},
            {"label": "Option 3", "value": "option3"},
        ],
    }

    __slots__ = ()

    def emit_markup(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self._checked_options(instance)
        items = "\n".join(
            f"<SelectItem value={jsx_attr(option.value)}>{jsx_text(option.label)}</SelectItem>" for option in options
        )
        lines = [
            "<FormItem>",
            f"  {render_label(props)}",
            "  <Select onValueChange={field.onChange} defaultValue={field.value}>",
            "    <FormControl>",
            f"      <SelectTrigger className={jsx_attr(props.class_name)}>",
            f"        <SelectValue placeholder={jsx_attr(props.placeholder or 'Select an option')} />",
            "      </SelectTrigger>",
            "    </FormControl>",
            "    <SelectContent>",
            indent_block(items, 6),
            "    </SelectContent>",
            "  </Select>",
            *(f"  {line}" for line in render_description(props)),
            "  <FormMessage />",
            "</FormItem>",
        ]
        return render_form_field(instance.name, "\n".join(lines))

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        values = ", ".join(ts_string(option.value) for option in self._checked_options(instance))
        if props.required:
            required_error = ts_string(f"{subject(props, 'This field')} is required")
            return f"{instance.name}: z.enum([{values}], {{ required_error: {required_error} }})"
        return f"{instance.name}: z.enum([{values}]).optional()"

    def emit_imports(self) -> str:
        return (
            "import {\n"
            "  Select,\n"
            "  SelectContent,\n"
            "  SelectItem,\n"
            "  SelectTrigger,\n"
            "  SelectValue,\n"
            '} from "@/components/ui/select";'
        )

    def _checked_options(self, instance: FieldInstance) -> list[SelectOption]:
        options = self.validate_custom_options(instance.custom_options).options
        if not options:
            raise self._fail(instance, "a select field needs at least one option")
        values = [option.value for option in options]
        duplicates = sorted({value for value in values if values.count(value) > 1})
        if duplicates:
            raise self._fail(instance, f"duplicate option values: {', '.join(duplicates)}")
        return options
