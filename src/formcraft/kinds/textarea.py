"""Multi-line text field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from formcraft.codegen.literals import jsx_attr
from formcraft.kinds.base import (
    FieldKindBase,
    message,
    optional_string,
    render_element,
    render_form_field,
    render_form_item,
    subject,
)
from formcraft.kinds.text import length_constraints
from formcraft.typing.enums import FieldKindId
from formcraft.typing.models import PlaceholderFieldProps

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class TextareaProps(PlaceholderFieldProps):
    """Visual configuration for textareas."""

    rows: int = Field(default=3, ge=1)


class TextareaOptions(BaseModel):
    """Length constraints for textareas."""

    model_config = ConfigDict(extra="forbid")

    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)


class TextareaFieldKind(FieldKindBase):
    """Multi-line text input field."""

    kind = FieldKindId.TEXTAREA.value
    display_name = "Textarea"
    description = "Multi-line text input field"
    props_model = TextareaProps
    options_model = TextareaOptions
    props_defaults = {
        "label": "Description",
        "required": False,
        "helper_text": "Enter your details",
        "placeholder": "Type your description here",
        "rows": 3,
    }

    __slots__ = ()

    def emit_markup(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        control = render_element(
            "Textarea",
            [
                f"placeholder={jsx_attr(props.placeholder)}",
                f"rows={{{props.rows}}}",
                f"className={jsx_attr(props.class_name)}",
                "{...field}",
            ],
        )
        return render_form_field(instance.name, render_form_item(props, control))

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        label = subject(props, "Text")

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
        if not props.required:
            return optional_string(base, code)
        return code

    def emit_imports(self) -> str:
        return 'import { Textarea } from "@/components/ui/textarea";'

    def emit_default_value(self, instance: FieldInstance) -> str | None:  # noqa: ARG002
        return '""'
