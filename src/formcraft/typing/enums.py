"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldKindId(_EnumMixin):
    """Identifiers of the built-in field kinds."""

    TEXT = "text"
    PASSWORD = "password"  # noqa: S105
    EMAIL = "email"
    NUMBER = "number"
    PHONE = "phone"
    TEXTAREA = "textarea"
    OTP = "otp"
    SELECT = "select"
    CHECKBOX = "checkbox"


class PasswordStrength(_EnumMixin):
    """Password complexity enforced by the generated schema."""

    NONE = "none"
    MEDIUM = "medium"
    STRICT = "strict"


class PhoneFormat(_EnumMixin):
    """Phone number format accepted by the generated schema."""

    INTERNATIONAL = "international"
    NATIONAL = "national"
    ANY = "any"


class ArtifactType(_EnumMixin):
    """Generated artifact flavour."""

    MARKUP = "markup"
    SCHEMA = "schema"


class ArtifactStatus(_EnumMixin):
    """Outcome of one artifact generation."""

    OK = "ok"
    ERROR = "error"
