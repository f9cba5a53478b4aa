"""Field kind interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from pydantic import BaseModel

    from formcraft.typing.models import BaseFieldProps, FieldInstance


class FieldKindDescriptor(Protocol):
    """Immutable definition of one field kind: defaults plus code emitters."""

    kind: str
    display_name: str
    description: str

    @property
    def default_props(self) -> dict[str, Any]:
        """Return a fresh copy of the baseline visual configuration."""

    @property
    def default_custom_options(self) -> dict[str, Any]:
        """Return a fresh copy of the baseline validation configuration."""

    def validate_props(self, payload: dict[str, Any]) -> BaseFieldProps:
        """Validate a full props payload.

        Args:
            payload: Props payload.

        Returns:
            BaseFieldProps: Typed props for this kind.
        """

    def validate_custom_options(self, payload: dict[str, Any]) -> BaseModel:
        """Validate a full custom options payload.

        Args:
            payload: Custom options payload.

        Returns:
            BaseModel: Typed custom options for this kind.
        """

    def emit_markup(self, instance: FieldInstance) -> str:
        """Emit the TSX fragment rendering one instance.

        Args:
            instance: Field instance bound to this kind.

        Returns:
            str: Markup fragment.
        """

    def emit_schema_field(self, instance: FieldInstance) -> str:
        """Emit one zod schema entry for an instance.

        Args:
            instance: Field instance bound to this kind.

        Returns:
            str: Schema entry, without trailing separator.
        """

    def emit_imports(self) -> str:
        """Emit the import statements the markup of this kind needs.

        Returns:
            str: Import statements.
        """

    def emit_default_value(self, instance: FieldInstance) -> str | None:
        """Emit the TS literal used as the form default value, if any.

        Args:
            instance: Field instance bound to this kind.

        Returns:
            str | None: Literal, or None to leave the value undefined.
        """
