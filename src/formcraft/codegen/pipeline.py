"""Markup and schema artifact generation over an ordered list of field instances."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from formcraft.codegen.literals import indent_block
from formcraft.codegen.templates import (
    EMPTY_MARKUP,
    render_default_values,
    render_markup_document,
    render_schema_document,
)
from formcraft.exceptions import EmissionError
from formcraft.logging import get_logger
from formcraft.registry import default_registry
from formcraft.settings import get_settings
from formcraft.typing.enums import ArtifactStatus, ArtifactType
from formcraft.typing.models import GeneratedArtifact

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from formcraft.registry import ComponentRegistry
    from formcraft.settings import Settings
    from formcraft.typing.models import FieldInstance
    from formcraft.typing.protocol import FieldKindDescriptor

logger = get_logger(__name__)

_T = TypeVar("_T")

ERROR_PREFIX = "// Error generating code"


def render_markup(
    instances: Sequence[FieldInstance],
    *,
    registry: ComponentRegistry,
    settings: Settings,
) -> str:
    """Render the form component source.

    Args:
        instances (Sequence[FieldInstance]): Fields in on-screen order.
        registry (ComponentRegistry): Registry resolving field kinds.
        settings (Settings): Runtime settings (indent, component name, schema module).

    Raises:
        UnknownKindError: If an instance references an unregistered kind.
        EmissionError: If a field kind cannot emit code for an instance.

    Returns:
        str: TSX source.
    """
    if not instances:
        return EMPTY_MARKUP

    resolved = [(instance, registry.lookup(instance.kind)) for instance in instances]

    imports: list[str] = []
    for instance, descriptor in resolved:
        statement = _emit(instance, descriptor, lambda d, _i: d.emit_imports())
        if statement not in imports:
            imports.append(statement)

    fragments = [_emit(instance, descriptor, lambda d, i: d.emit_markup(i)) for instance, descriptor in resolved]
    defaults: list[tuple[str, str]] = []
    for instance, descriptor in resolved:
        literal = _emit(instance, descriptor, lambda d, i: d.emit_default_value(i))
        if literal is not None:
            defaults.append((instance.name, literal))

    return render_markup_document(
        imports=imports,
        fields=indent_block("\n\n".join(fragments), settings.markup_indent),
        default_values=render_default_values(defaults),
        component_name=settings.component_name,
        schema_module=settings.schema_module,
    )


def render_schema(instances: Sequence[FieldInstance], *, registry: ComponentRegistry) -> str:
    """Render the zod schema source.

    Args:
        instances (Sequence[FieldInstance]): Fields in on-screen order.
        registry (ComponentRegistry): Registry resolving field kinds.

    Raises:
        UnknownKindError: If an instance references an unregistered kind.
        EmissionError: If a field kind cannot emit code for an instance.

    Returns:
        str: TypeScript source.
    """
    entries = [
        _emit(instance, registry.lookup(instance.kind), lambda d, i: d.emit_schema_field(i)) for instance in instances
    ]
    return render_schema_document(entries)


def generate_markup_artifact(
    instances: Sequence[FieldInstance],
    *,
    registry: ComponentRegistry | None = None,
    settings: Settings | None = None,
) -> GeneratedArtifact:
    """Generate the markup artifact, reporting failures as an error artifact.

    Args:
        instances (Sequence[FieldInstance]): Fields in on-screen order.
        registry (ComponentRegistry | None): Registry resolving field kinds.
        settings (Settings | None): Runtime settings.

    Returns:
        GeneratedArtifact: Markup artifact.
    """
    config = settings or get_settings()
    return _generate(
        ArtifactType.MARKUP,
        lambda: render_markup(instances, registry=registry or default_registry(), settings=config),
    )


def generate_schema_artifact(
    instances: Sequence[FieldInstance],
    *,
    registry: ComponentRegistry | None = None,
) -> GeneratedArtifact:
    """Generate the schema artifact, reporting failures as an error artifact.

    Args:
        instances (Sequence[FieldInstance]): Fields in on-screen order.
        registry (ComponentRegistry | None): Registry resolving field kinds.

    Returns:
        GeneratedArtifact: Schema artifact.
    """
    return _generate(
        ArtifactType.SCHEMA,
        lambda: render_schema(instances, registry=registry or default_registry()),
    )


def generate_artifacts(
    instances: Sequence[FieldInstance],
    *,
    registry: ComponentRegistry | None = None,
    settings: Settings | None = None,
) -> tuple[GeneratedArtifact, GeneratedArtifact]:
    """Generate markup and schema independently.

    Args:
        instances (Sequence[FieldInstance]): Fields in on-screen order.
        registry (ComponentRegistry | None): Registry resolving field kinds.
        settings (Settings | None): Runtime settings.

    Returns:
        tuple[GeneratedArtifact, GeneratedArtifact]: Markup and schema artifacts.
    """
    return (
        generate_markup_artifact(instances, registry=registry, settings=settings),
        generate_schema_artifact(instances, registry=registry),
    )


def _emit(
    instance: FieldInstance,
    descriptor: FieldKindDescriptor,
    emitter: Callable[[FieldKindDescriptor, FieldInstance], _T],
) -> _T:
    """Run one descriptor emitter, normalizing failures to `EmissionError`."""
    try:
        return emitter(descriptor, instance)
    except EmissionError:
        raise
    except Exception as exc:
        raise EmissionError(kind=instance.kind, field_name=instance.name, message=str(exc)) from exc


def _generate(artifact_type: ArtifactType, render: Callable[[], str]) -> GeneratedArtifact:
    """Render one artifact, isolating its failure from the other artifact."""
    try:
        text = render()
    except Exception as exc:
        logger.exception("Artifact generation failed", extra={"artifact": artifact_type.to_str()})
        return GeneratedArtifact(
            artifact_type=artifact_type,
            status=ArtifactStatus.ERROR,
            text=f"{ERROR_PREFIX}: {exc}\n// Please fix the field configuration and retry.",
            error=str(exc),
        )
    return GeneratedArtifact(artifact_type=artifact_type, text=text)
