"""Numeric field with range validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from formcraft.codegen.literals import jsx_attr, ts_number
from formcraft.kinds.base import InputFieldKind, message, subject
from formcraft.typing.enums import FieldKindId

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance


class NumberOptions(BaseModel):
    """Range and step constraints for number fields."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    min: float | None = None
    max: float | None = None
    step: float | None = Field(default=None, gt=0)


class NumberFieldKind(InputFieldKind):
    """Number input field with min/max validation."""

    kind = FieldKindId.NUMBER.value
    display_name = "Number"
    description = "Number input field with min/max validation"
    options_model = NumberOptions
    input_type = "number"
    props_defaults = {
        "label": "Number",
        "required": False,
        "helper_text": "Enter a number",
        "placeholder": "Enter a number",
    }

    __slots__ = ()

    def emit_schema_field(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        label = subject(props, "Number")

        if options.min is not None and options.max is not None and options.min > options.max:
            raise self._fail(
                instance,
                f"min {ts_number(options.min)} exceeds max {ts_number(options.max)}",
            )

        code = f"{instance.name}: z.coerce.number()"
        if options.min is not None:
            bound = ts_number(options.min)
            code += f".min({bound}, {message(f'{label} must be at least {bound}')})"
        if options.max is not None:
            bound = ts_number(options.max)
            code += f".max({bound}, {message(f'{label} must be at most {bound}')})"
        if not props.required:
            code += ".optional()"
        return code

    def emit_default_value(self, instance: FieldInstance) -> str | None:  # noqa: ARG002
        return None

    def _extra_attributes(self, options: BaseModel) -> list[str]:
        attributes = []
        for key in ("min", "max", "step"):
            value = getattr(options, key)
            if value is not None:
                attributes.append(f"{key}={jsx_attr(ts_number(value))}")
        return attributes

    def _trailing_attributes(self) -> list[str]:
        return ["onChange={(event) => field.onChange(event.target.valueAsNumber)}"]
