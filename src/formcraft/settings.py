"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from formcraft.exceptions import SettingsError

logger = logging.getLogger(__name__)

_COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = "formcraft"
    app_env: str = Field(
        default="dev",
        validation_alias="APP_ENV",
        description="Application environment, e.g. 'dev', 'prod'.",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="File path for log output.",
    )

    enforce_unique_names: bool = Field(
        default=True,
        validation_alias="ENFORCE_UNIQUE_NAMES",
        description="Reject renames that reuse the name of another field.",
    )
    markup_indent: int = Field(
        default=6,
        ge=0,
        le=32,
        validation_alias="MARKUP_INDENT",
        description="Number of spaces used to indent field fragments inside the form markup.",
    )
    component_name: str = Field(
        default="ExampleForm",
        validation_alias="COMPONENT_NAME",
        description="Name of the generated React form component.",
    )
    schema_module: str = Field(
        default="./form-schema",
        validation_alias="SCHEMA_MODULE",
        description="Module path the generated markup imports `formSchema` from.",
    )

    definitions_dir: str = Field(
        default="definitions",
        validation_alias="DEFINITIONS_DIR",
        description="Directory to store form definitions.",
    )
    output_dir: str = Field(
        default="generated",
        validation_alias="OUTPUT_DIR",
        description="Directory to write generated artifacts.",
    )

    @field_validator("component_name")
    @classmethod
    def _validate_component_name(cls, value: str) -> str:
        """Ensure the component name is a PascalCase identifier.

        Args:
            value (str): Raw component name.

        Raises:
            ValueError: If the name cannot be used as a React component name.

        Returns:
            str: Validated component name.
        """
        if not _COMPONENT_NAME_PATTERN.fullmatch(value):
            raise ValueError("Component name must be PascalCase, e.g. 'SignupForm'")  # noqa: TRY003
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except Exception as exc:
        if _is_missing_settings_error(exc):
            ensure_env_file_exists()
            try:
                return Settings()
            except Exception as retry_exc:
                raise SettingsError(exc=retry_exc) from retry_exc
        raise SettingsError(exc=exc) from exc


def ensure_env_file_exists(
    *,
    env_path: Path = Path(".env"),
    template_path: Path = Path(".env.template"),
) -> None:
    """Create `.env` from template when missing.

    Args:
        env_path (Path): Target environment file path.
        template_path (Path): Template file path.
    """
    if env_path.exists() or not template_path.exists():
        return
    env_path.write_text(template_path.read_text(encoding="utf-8"), encoding="utf-8")
    logger.info(
        "Created environment file from template",
        extra={"env_path": str(env_path), "template_path": str(template_path)},
    )


def _is_missing_settings_error(exc: Exception) -> bool:
    """Return whether the settings failure is due to missing values.

    Args:
        exc (Exception): Caught settings initialization error.

    Returns:
        bool: True when the error represents missing settings values.
    """
    if not isinstance(exc, ValidationError):
        return False
    return any(error.get("type") == "missing" for error in exc.errors())
