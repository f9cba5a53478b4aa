"""Editable form definition: ordered field instances plus the current selection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from formcraft.exceptions import DuplicateNameError, UnknownInstanceError
from formcraft.logging import get_logger
from formcraft.processing.naming import generate_default_name, validate_field_name
from formcraft.registry import default_registry
from formcraft.typing.models import FieldInstance, FormDefinitionSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from formcraft.registry import ComponentRegistry

logger = get_logger(__name__)


def _new_instance_id() -> str:
    return uuid4().hex


class FormDefinition:
    """Single-owner form document.

    Every mutating operation validates first and commits with one assignment,
    so a failing call leaves the definition untouched. Instances are frozen
    models; updates replace them.
    """

    def __init__(
        self,
        registry: ComponentRegistry | None = None,
        *,
        enforce_unique_names: bool = True,
        id_factory: Callable[[], str] = _new_instance_id,
    ) -> None:
        """Initialize an empty definition.

        Args:
            registry (ComponentRegistry | None): Registry resolving field kinds. Defaults to built-in kinds.
            enforce_unique_names (bool): Reject renames colliding with another field's name.
            id_factory (Callable[[], str]): Instance id generator.
        """
        self._registry = registry or default_registry()
        self._enforce_unique_names = enforce_unique_names
        self._id_factory = id_factory
        self._instances: list[FieldInstance] = []
        self._selected_id: str | None = None

    @property
    def registry(self) -> ComponentRegistry:
        """Return the registry used to resolve field kinds."""
        return self._registry

    @property
    def instances(self) -> tuple[FieldInstance, ...]:
        """Return field instances in rendering order."""
        return tuple(self._instances)

    @property
    def selected_id(self) -> str | None:
        """Return the selected instance id, if any."""
        return self._selected_id

    @property
    def selected_instance(self) -> FieldInstance | None:
        """Return the selected instance, if any."""
        if self._selected_id is None:
            return None
        return self.get_field(self._selected_id)

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[FieldInstance]:
        return iter(tuple(self._instances))

    def get_field(self, instance_id: str) -> FieldInstance:
        """Return the instance with `instance_id`.

        Args:
            instance_id (str): Instance id.

        Raises:
            UnknownInstanceError: If no instance has this id.

        Returns:
            FieldInstance: Matching instance.
        """
        return self._instances[self._index_of(instance_id)]

    def field_names(self) -> list[str]:
        """Return field names in rendering order."""
        return [instance.name for instance in self._instances]

    def add_field(self, kind: str) -> str:
        """Append a new field of `kind` seeded with the kind defaults and select it.

        Args:
            kind (str): Registered field kind.

        Raises:
            UnknownKindError: If the kind is not registered.

        Returns:
            str: Id of the new instance.
        """
        descriptor = self._registry.lookup(kind)
        existing_ids = {instance.id for instance in self._instances}
        instance_id = self._id_factory()
        while instance_id in existing_ids:
            instance_id = self._id_factory()

        instance = FieldInstance(
            id=instance_id,
            name=generate_default_name(descriptor.kind, set(self.field_names())),
            kind=descriptor.kind,
            props=descriptor.default_props,
            custom_options=descriptor.default_custom_options,
        )
        self._instances = [*self._instances, instance]
        self._selected_id = instance.id
        logger.debug("Field added", extra={"id": instance.id, "kind": kind, "name": instance.name})
        return instance.id

    def remove_field(self, instance_id: str) -> None:
        """Remove an instance; unknown ids are ignored.

        Args:
            instance_id (str): Instance id.
        """
        remaining = [instance for instance in self._instances if instance.id != instance_id]
        if len(remaining) == len(self._instances):
            return
        self._instances = remaining
        if self._selected_id == instance_id:
            self._selected_id = None
        logger.debug("Field removed", extra={"id": instance_id})

    def rename_field(self, instance_id: str, new_name: str) -> None:
        """Change the field key of an instance.

        Args:
            instance_id (str): Instance id.
            new_name (str): New identifier.

        Raises:
            UnknownInstanceError: If no instance has this id.
            InvalidNameError: If the name is empty or not an identifier.
            DuplicateNameError: If another instance already uses the name and uniqueness is enforced.
        """
        index = self._index_of(instance_id)
        validate_field_name(new_name)
        if self._enforce_unique_names and any(
            instance.name == new_name and instance.id != instance_id for instance in self._instances
        ):
            raise DuplicateNameError(name=new_name)

        self._replace(index, self._instances[index].model_copy(update={"name": new_name}))
        logger.debug("Field renamed", extra={"id": instance_id, "name": new_name})

    def update_props(self, instance_id: str, partial: Mapping[str, Any]) -> None:
        """Shallow-merge `partial` into the instance props.

        Args:
            instance_id (str): Instance id.
            partial (Mapping[str, Any]): Props to overwrite; other props are kept.

        Raises:
            UnknownInstanceError: If no instance has this id.
            InvalidConfigurationError: If the merged props are invalid for the kind.
        """
        index = self._index_of(instance_id)
        instance = self._instances[index]
        descriptor = self._registry.lookup(instance.kind)
        props = descriptor.validate_props({**instance.props, **partial}).model_dump(mode="json")
        self._replace(index, instance.model_copy(update={"props": props}))
        logger.debug("Field props updated", extra={"id": instance_id, "keys": sorted(partial)})

    def update_custom_options(self, instance_id: str, partial: Mapping[str, Any]) -> None:
        """Shallow-merge `partial` into the instance custom options.

        Args:
            instance_id (str): Instance id.
            partial (Mapping[str, Any]): Options to overwrite; other options are kept.

        Raises:
            UnknownInstanceError: If no instance has this id.
            InvalidConfigurationError: If the merged options are invalid for the kind.
        """
        index = self._index_of(instance_id)
        instance = self._instances[index]
        descriptor = self._registry.lookup(instance.kind)
        options = descriptor.validate_custom_options({**instance.custom_options, **partial}).model_dump(mode="json")
        self._replace(index, instance.model_copy(update={"custom_options": options}))
        logger.debug("Field custom options updated", extra={"id": instance_id, "keys": sorted(partial)})

    def move_field(self, active_id: str, over_id: str) -> None:
        """Move `active_id` to the current position of `over_id`.

        Intervening instances shift by one; unknown or identical ids are a no-op.

        Args:
            active_id (str): Instance being dragged.
            over_id (str): Instance whose position is taken.
        """
        if active_id == over_id:
            return
        old_index = self._find(active_id)
        new_index = self._find(over_id)
        if old_index is None or new_index is None:
            return

        reordered = list(self._instances)
        moved = reordered.pop(old_index)
        reordered.insert(new_index, moved)
        self._instances = reordered
        logger.debug("Field moved", extra={"id": active_id, "from": old_index, "to": new_index})

    def select_field(self, instance_id: str | None) -> None:
        """Select an instance, or clear the selection with None.

        Args:
            instance_id (str | None): Instance id or None.

        Raises:
            UnknownInstanceError: If a non-empty id matches no instance.
        """
        if instance_id:
            self._index_of(instance_id)
        self._selected_id = instance_id or None

    def reset(self) -> None:
        """Remove every instance and clear the selection."""
        self._instances = []
        self._selected_id = None
        logger.debug("Form definition reset")

    def to_snapshot(self, name: str) -> FormDefinitionSnapshot:
        """Return a serializable copy of the definition.

        Args:
            name (str): Form name stored with the snapshot.

        Returns:
            FormDefinitionSnapshot: Snapshot.
        """
        return FormDefinitionSnapshot(name=name, fields=list(self._instances), selected_id=self._selected_id)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: FormDefinitionSnapshot,
        registry: ComponentRegistry | None = None,
        *,
        enforce_unique_names: bool = True,
    ) -> FormDefinition:
        """Rebuild a definition from a snapshot, validating every field against the registry.

        Args:
            snapshot (FormDefinitionSnapshot): Stored snapshot.
            registry (ComponentRegistry | None): Registry resolving field kinds.
            enforce_unique_names (bool): Reject snapshots with repeated names.

        Raises:
            UnknownKindError: If a field references an unregistered kind.
            InvalidNameError: If a field name is not an identifier.
            DuplicateNameError: If names repeat and uniqueness is enforced.
            InvalidConfigurationError: If stored props or options do not fit their kind.

        Returns:
            FormDefinition: Restored definition.
        """
        definition = cls(registry, enforce_unique_names=enforce_unique_names)
        seen: set[str] = set()
        instances: list[FieldInstance] = []
        for field in snapshot.fields:
            descriptor = definition.registry.lookup(field.kind)
            validate_field_name(field.name)
            if enforce_unique_names and field.name in seen:
                raise DuplicateNameError(name=field.name)
            seen.add(field.name)
            instances.append(
                field.model_copy(
                    update={
                        "props": descriptor.validate_props(field.props).model_dump(mode="json"),
                        "custom_options": descriptor.validate_custom_options(field.custom_options).model_dump(
                            mode="json",
                        ),
                    },
                ),
            )
        definition._instances = instances
        definition._selected_id = snapshot.selected_id
        return definition

    def _find(self, instance_id: str) -> int | None:
        for index, instance in enumerate(self._instances):
            if instance.id == instance_id:
                return index
        return None

    def _index_of(self, instance_id: str) -> int:
        index = self._find(instance_id)
        if index is None:
            raise UnknownInstanceError(instance_id=instance_id)
        return index

    def _replace(self, index: int, instance: FieldInstance) -> None:
        updated = list(self._instances)
        updated[index] = instance
        self._instances = updated
