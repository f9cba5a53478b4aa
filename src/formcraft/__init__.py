"""formcraft package."""

from formcraft.exceptions import (
    DefinitionStoreError,
    DuplicateKindError,
    DuplicateNameError,
    EmissionError,
    InvalidConfigurationError,
    InvalidNameError,
    PackageError,
    RegistryFrozenError,
    SettingsError,
    UnknownInstanceError,
    UnknownKindError,
)
from formcraft.logging import configure_logging, get_logger
from formcraft.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("formcraft")

from formcraft.codegen import generate_artifacts, generate_markup_artifact, generate_schema_artifact  # noqa: E402
from formcraft.definition import FormDefinition  # noqa: E402
from formcraft.registry import ComponentRegistry, FieldCategory, default_registry  # noqa: E402

__all__ = [
    "ComponentRegistry",
    "DefinitionStoreError",
    "DuplicateKindError",
    "DuplicateNameError",
    "EmissionError",
    "FieldCategory",
    "FormDefinition",
    "InvalidConfigurationError",
    "InvalidNameError",
    "PackageError",
    "RegistryFrozenError",
    "Settings",
    "SettingsError",
    "UnknownInstanceError",
    "UnknownKindError",
    "__version__",
    "configure_logging",
    "default_registry",
    "generate_artifacts",
    "generate_markup_artifact",
    "generate_schema_artifact",
    "get_logger",
    "get_settings",
    "logger",
]
