"""Component registry mapping field kind identifiers to descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from formcraft.exceptions import DuplicateKindError, RegistryFrozenError, UnknownKindError
from formcraft.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from formcraft.typing.protocol import FieldKindDescriptor

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldCategory:
    """Read-only palette group."""

    name: str
    descriptors: tuple[FieldKindDescriptor, ...]

    @property
    def kinds(self) -> tuple[str, ...]:
        """Return kind identifiers in palette order."""
        return tuple(descriptor.kind for descriptor in self.descriptors)


class ComponentRegistry:
    """Kind-indexed descriptor table grouped into ordered categories."""

    def __init__(self) -> None:
        self._by_kind: dict[str, FieldKindDescriptor] = {}
        self._categories: dict[str, list[FieldKindDescriptor]] = {}
        self._frozen = False

    @classmethod
    def from_categories(
        cls,
        categories: Iterable[tuple[str, Iterable[FieldKindDescriptor]]],
        *,
        freeze: bool = True,
    ) -> ComponentRegistry:
        """Build a registry from `(category name, descriptors)` pairs.

        Args:
            categories (Iterable[tuple[str, Iterable[FieldKindDescriptor]]]): Bootstrap list.
            freeze (bool): Freeze the registry once loaded.

        Returns:
            ComponentRegistry: Populated registry.
        """
        registry = cls()
        for category, descriptors in categories:
            for descriptor in descriptors:
                registry.register(descriptor, category=category)
        if freeze:
            registry.freeze()
        return registry

    @property
    def frozen(self) -> bool:
        """Return whether registration is closed."""
        return self._frozen

    def freeze(self) -> None:
        """Close the registry to further registration."""
        self._frozen = True

    def register(self, descriptor: FieldKindDescriptor, *, category: str) -> None:
        """Register a descriptor under a palette category.

        Args:
            descriptor (FieldKindDescriptor): Field kind definition.
            category (str): Palette category, created on first use.

        Raises:
            RegistryFrozenError: If the registry is frozen.
            DuplicateKindError: If the kind is already registered in any category.
        """
        if self._frozen:
            raise RegistryFrozenError(kind=descriptor.kind)
        if descriptor.kind in self._by_kind:
            raise DuplicateKindError(kind=descriptor.kind)

        self._by_kind[descriptor.kind] = descriptor
        self._categories.setdefault(category, []).append(descriptor)
        logger.debug("Field kind registered", extra={"kind": descriptor.kind, "category": category})

    def lookup(self, kind: str) -> FieldKindDescriptor:
        """Return the descriptor registered for `kind`.

        Args:
            kind (str): Field kind identifier.

        Raises:
            UnknownKindError: If no descriptor is registered for the kind.

        Returns:
            FieldKindDescriptor: Registered descriptor.
        """
        try:
            return self._by_kind[kind]
        except KeyError as exc:
            raise UnknownKindError(kind=kind) from exc

    def list_categories(self) -> tuple[FieldCategory, ...]:
        """Return palette categories in registration order."""
        return tuple(FieldCategory(name=name, descriptors=tuple(items)) for name, items in self._categories.items())

    def kinds(self) -> tuple[str, ...]:
        """Return all registered kind identifiers in registration order."""
        return tuple(self._by_kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._by_kind

    def __len__(self) -> int:
        return len(self._by_kind)


@lru_cache(maxsize=1)
def default_registry() -> ComponentRegistry:
    """Return the frozen registry of built-in field kinds."""
    from formcraft.kinds import DEFAULT_CATEGORIES  # noqa: PLC0415

    return ComponentRegistry.from_categories(DEFAULT_CATEGORIES)
