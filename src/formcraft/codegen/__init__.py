"""Code generation for form markup and validation schemas."""

from formcraft.codegen.pipeline import (
    ERROR_PREFIX,
    generate_artifacts,
    generate_markup_artifact,
    generate_schema_artifact,
    render_markup,
    render_schema,
)

__all__ = [
    "ERROR_PREFIX",
    "generate_artifacts",
    "generate_markup_artifact",
    "generate_schema_artifact",
    "render_markup",
    "render_schema",
]
