"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class UnknownKindError(PackageError):
    """Raised when a field kind is not registered."""

    kind: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unknown field kind '{self.kind}'"


@dataclass(frozen=True)
class DuplicateKindError(PackageError):
    """Raised when registering a field kind twice."""

    kind: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Field kind '{self.kind}' is already registered"


@dataclass(frozen=True)
class RegistryFrozenError(PackageError):
    """Raised when registering into a frozen registry."""

    kind: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot register '{self.kind}': registry is frozen"


@dataclass(frozen=True)
class UnknownInstanceError(PackageError):
    """Raised when an operation targets a field instance that does not exist."""

    instance_id: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unknown field instance '{self.instance_id}'"


@dataclass(frozen=True)
class InvalidNameError(PackageError):
    """Raised when a field name is not a valid identifier."""

    name: str
    reason: str = "must start with a letter or underscore and contain only letters, digits and underscores"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Invalid field name '{self.name}': {self.reason}"


@dataclass(frozen=True)
class DuplicateNameError(InvalidNameError):
    """Raised when a field name is already used by another instance."""

    reason: str = "already used by another field"


@dataclass(frozen=True)
class InvalidConfigurationError(PackageError):
    """Raised when props or custom options fail validation for a field kind."""

    kind: str
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Invalid configuration for '{self.kind}': {self.message}"


@dataclass(frozen=True)
class EmissionError(PackageError):
    """Raised when a field kind cannot emit code for an instance."""

    kind: str
    field_name: str
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot emit '{self.field_name}' ({self.kind}): {self.message}"


@dataclass
class DefinitionStoreError(PackageError):
    """Raised when form definition loading/saving constraints are violated."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message
