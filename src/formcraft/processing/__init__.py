"""Form definition processing helpers."""

from formcraft.processing.naming import (
    generate_default_name,
    is_valid_field_name,
    sanitize_field_name,
    validate_field_name,
)

__all__ = [
    "generate_default_name",
    "is_valid_field_name",
    "sanitize_field_name",
    "validate_field_name",
]
