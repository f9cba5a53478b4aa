"""Filesystem persistence for form definitions."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from formcraft.exceptions import DefinitionStoreError
from formcraft.logging import get_logger
from formcraft.typing.models import FormDefinitionSnapshot

logger = get_logger(__name__)

_DEFINITION_FILE_VERSION = 1
_DEFINITION_SUFFIX = ".form.json"


class DefinitionStore(BaseModel):
    """Directory of `*.form.json` definition files."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    root: Path = Field(description="Definitions directory root.")

    def model_post_init(self, __context: object, /) -> None:
        """Ensure the definitions directory exists after model initialization.

        Args:
            __context (object): Pydantic model context.
        """
        self.root.mkdir(parents=True, exist_ok=True)

    def definition_path(self, name: str) -> Path:
        """Build the file path for a definition name.

        Args:
            name (str): Form name.

        Returns:
            Path: Definition path.
        """
        return self.root / f"{safe_file_stem(name)}{_DEFINITION_SUFFIX}"

    @staticmethod
    def load(path: Path) -> FormDefinitionSnapshot:
        """Load a definition snapshot from path.

        Args:
            path (Path): Definition file path.

        Raises:
            DefinitionStoreError: If the file is missing, unreadable, not JSON or not a valid definition.

        Returns:
            FormDefinitionSnapshot: Loaded snapshot.
        """
        _validate_definition_file_path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DefinitionStoreError(message=f"Cannot read definition file {path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DefinitionStoreError(message=f"Definition file is not valid JSON: {path}") from exc

        try:
            return FormDefinitionSnapshot.model_validate(_unwrap_definition_payload(payload))
        except ValidationError as exc:
            raise DefinitionStoreError(message=f"Invalid form definition in {path}: {exc}") from exc

    def save(self, snapshot: FormDefinitionSnapshot) -> Path:
        """Persist a snapshot to the store.

        Args:
            snapshot (FormDefinitionSnapshot): Definition snapshot.

        Returns:
            Path: Written file path.
        """
        path = self.definition_path(snapshot.name)
        return write_definition(snapshot, path)

    def list_definitions(self) -> list[Path]:
        """List stored definition files.

        Returns:
            list[Path]: Definition files.
        """
        return sorted(self.root.glob(f"*{_DEFINITION_SUFFIX}"))


def write_definition(snapshot: FormDefinitionSnapshot, path: Path) -> Path:
    """Write a snapshot inside a versioned envelope.

    Args:
        snapshot (FormDefinitionSnapshot): Definition snapshot.
        path (Path): Target file, must end with `.form.json`.

    Raises:
        DefinitionStoreError: If the path does not use the definition suffix.

    Returns:
        Path: Written file path.
    """
    if not path.name.endswith(_DEFINITION_SUFFIX):
        raise DefinitionStoreError(message=f"Definition path must end with '{_DEFINITION_SUFFIX}': {path}")
    envelope = {
        "definition_file_version": _DEFINITION_FILE_VERSION,
        "definition": snapshot.model_dump(mode="json"),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(envelope, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Form definition saved", extra={"definition_path": str(path), "fields": len(snapshot.fields)})
    return path


def safe_file_stem(name: str) -> str:
    """Return a filesystem-friendly stem for a form name."""
    stem = re.sub(r"[^a-z0-9._-]+", "-", name.lower()).strip("-.")
    return stem or "form"


def _unwrap_definition_payload(payload: object) -> dict[str, object]:
    """Extract the definition object from a file payload.

    Bare definition objects written without an envelope are accepted as-is.

    Args:
        payload (object): Raw JSON payload.

    Raises:
        DefinitionStoreError: If the payload is not a JSON object or the file version is unsupported.

    Returns:
        dict[str, object]: Definition object payload.
    """
    if not isinstance(payload, dict):
        raise DefinitionStoreError(message="Definition payload must be a JSON object")

    payload_obj = cast("dict[str, object]", payload)
    version = payload_obj.get("definition_file_version")
    if version is not None and version != _DEFINITION_FILE_VERSION:
        raise DefinitionStoreError(message=f"Unsupported definition file version: {version}")

    embedded = payload_obj.get("definition")
    if isinstance(embedded, dict):
        return cast("dict[str, object]", embedded)
    return payload_obj


def _validate_definition_file_path(path: Path) -> None:
    """Validate definition file path before loading.

    Args:
        path (Path): Definition file path.

    Raises:
        DefinitionStoreError: If path is not a `pathlib.Path` or not a readable definition file.
    """
    if not isinstance(path, Path):
        raise DefinitionStoreError(message=f"Definition path must be a pathlib.Path instance, got: {type(path)!r}")
    if not path.is_file():
        raise DefinitionStoreError(message=f"Definition path is not a file: {path}")
    if not path.name.endswith(_DEFINITION_SUFFIX):
        raise DefinitionStoreError(message=f"Definition path must end with '{_DEFINITION_SUFFIX}': {path}")
