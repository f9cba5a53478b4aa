"""Shared machinery for field kind descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ValidationError

from formcraft.codegen.literals import indent_block, jsx_attr, jsx_text, ts_string
from formcraft.exceptions import EmissionError, InvalidConfigurationError
from formcraft.typing.models import BaseFieldProps, NoCustomOptions, PlaceholderFieldProps

if TYPE_CHECKING:
    from formcraft.typing.models import FieldInstance

INPUT_IMPORT = 'import { Input } from "@/components/ui/input";'


class FieldKindBase:
    """Base descriptor: typed defaults, payload validation and markup helpers.

    Subclasses set the class-level identity (`kind`, `display_name`,
    `description`), the pydantic models for props and custom options, and
    the default overrides. Descriptors hold no per-instance state.
    """

    kind: ClassVar[str]
    display_name: ClassVar[str]
    description: ClassVar[str] = ""

    props_model: ClassVar[type[BaseFieldProps]] = BaseFieldProps
    options_model: ClassVar[type[BaseModel]] = NoCustomOptions
    props_defaults: ClassVar[dict[str, Any]] = {}
    options_defaults: ClassVar[dict[str, Any]] = {}

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"

    @property
    def default_props(self) -> dict[str, Any]:
        """Return a fresh copy of the baseline visual configuration."""
        return self.props_model.model_validate(self.props_defaults).model_dump(mode="json")

    @property
    def default_custom_options(self) -> dict[str, Any]:
        """Return a fresh copy of the baseline validation configuration."""
        return self.options_model.model_validate(self.options_defaults).model_dump(mode="json")

    def validate_props(self, payload: dict[str, Any]) -> BaseFieldProps:
        """Validate a full props payload.

        Args:
            payload (dict[str, Any]): Props payload.

        Raises:
            InvalidConfigurationError: If the payload does not fit this kind.

        Returns:
            BaseFieldProps: Typed props.
        """
        try:
            return self.props_model.model_validate(payload)
        except ValidationError as exc:
            raise InvalidConfigurationError(kind=self.kind, message=_summarize(exc)) from exc

    def validate_custom_options(self, payload: dict[str, Any]) -> BaseModel:
        """Validate a full custom options payload.

        Args:
            payload (dict[str, Any]): Custom options payload.

        Raises:
            InvalidConfigurationError: If the payload does not fit this kind.

        Returns:
            BaseModel: Typed custom options.
        """
        try:
            return self.options_model.model_validate(payload)
        except ValidationError as exc:
            raise InvalidConfigurationError(kind=self.kind, message=_summarize(exc)) from exc

    def emit_markup(self, instance: FieldInstance) -> str:
        raise NotImplementedError

    def emit_schema_field(self, instance: FieldInstance) -> str:
        raise NotImplementedError

    def emit_imports(self) -> str:
        raise NotImplementedError

    def emit_default_value(self, instance: FieldInstance) -> str | None:  # noqa: ARG002
        return None

    def _fail(self, instance: FieldInstance, message: str) -> EmissionError:
        """Build an emission error for `instance`."""
        return EmissionError(kind=self.kind, field_name=instance.name, message=message)


class InputFieldKind(FieldKindBase):
    """Single-line `<Input>` based kinds (text, email, password, phone, number)."""

    props_model = PlaceholderFieldProps
    input_type: ClassVar[str | None] = None

    __slots__ = ()

    def emit_markup(self, instance: FieldInstance) -> str:
        props = self.validate_props(instance.props)
        options = self.validate_custom_options(instance.custom_options)
        attributes = [f"type={jsx_attr(self.input_type)}"] if self.input_type else []
        attributes.extend(self._extra_attributes(options))
        attributes.extend(
            [
                f"placeholder={jsx_attr(props.placeholder)}",
                f"className={jsx_attr(props.class_name)}",
                "{...field}",
            ],
        )
        attributes.extend(self._trailing_attributes())
        control = render_element("Input", attributes)
        return render_form_field(instance.name, render_form_item(props, control))

    def emit_imports(self) -> str:
        return INPUT_IMPORT

    def emit_default_value(self, instance: FieldInstance) -> str | None:  # noqa: ARG002
        return '""'

    def _extra_attributes(self, options: BaseModel) -> list[str]:  # noqa: ARG002
        """Return kind-specific attributes placed after `type`."""
        return []

    def _trailing_attributes(self) -> list[str]:
        """Return attributes placed after the field spread."""
        return []


def render_element(tag: str, attributes: list[str]) -> str:
    """Render a self-closing JSX element with one attribute per line.

    Args:
        tag (str): Element name.
        attributes (list[str]): Rendered `name=value` attributes.

    Returns:
        str: JSX element.
    """
    if not attributes:
        return f"<{tag} />"
    return "\n".join([f"<{tag}", *(f"  {attribute}" for attribute in attributes), "/>"])


def render_label(props: BaseFieldProps) -> str:
    """Render the field label, with ` *` marking required fields."""
    marker = " *" if props.required else ""
    return f"<FormLabel>{jsx_text(props.label)}{marker}</FormLabel>"


def render_description(props: BaseFieldProps) -> list[str]:
    """Render the helper text line, or nothing when helper text is empty."""
    if not props.helper_text:
        return []
    return [f"<FormDescription>{jsx_text(props.helper_text)}</FormDescription>"]


def render_form_item(props: BaseFieldProps, control: str) -> str:
    """Render the standard label / control / description / message layout.

    Args:
        props (BaseFieldProps): Field props.
        control (str): JSX placed inside `<FormControl>`.

    Returns:
        str: `<FormItem>` block.
    """
    lines = [
        "<FormItem>",
        f"  {render_label(props)}",
        "  <FormControl>",
        indent_block(control, 4),
        "  </FormControl>",
        *(f"  {line}" for line in render_description(props)),
        "  <FormMessage />",
        "</FormItem>",
    ]
    return "\n".join(lines)


def render_form_field(name: str, item: str) -> str:
    """Wrap a form item into a react-hook-form `<FormField>` bound to `name`.

    Args:
        name (str): Field key shared with the schema.
        item (str): Rendered `<FormItem>` block.

    Returns:
        str: `<FormField>` element.
    """
    return "\n".join(
        [
            "<FormField",
            "  control={form.control}",
            f"  name={jsx_attr(name)}",
            "  render={({ field }) => (",
            indent_block(item, 4),
            "  )}",
            "/>",
        ],
    )


def message(text: str) -> str:
    """Render a zod `{ message: ... }` argument."""
    return f"{{ message: {ts_string(text)} }}"


def optional_string(base: str, code: str) -> str:
    """Make a string entry optional, accepting the empty default when checks follow `base`.

    Args:
        base (str): Entry before any check, e.g. `name: z.string()`.
        code (str): Entry with its checks.

    Returns:
        str: Optional entry.
    """
    if code != base:
        code += '.or(z.literal(""))'
    return code + ".optional()"


def subject(props: BaseFieldProps, fallback: str) -> str:
    """Return the noun used in validation messages."""
    return props.label or fallback


def _summarize(exc: ValidationError) -> str:
    """Flatten pydantic errors into one line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
