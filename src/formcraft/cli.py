"""CLI entry point for formcraft."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from formcraft import __version__, logger
from formcraft.codegen import generate_artifacts
from formcraft.definition import FormDefinition
from formcraft.definition_store import DefinitionStore, write_definition
from formcraft.exceptions import PackageError
from formcraft.logging import bind_form_context, clear_form_context, configure_logging
from formcraft.registry import default_registry
from formcraft.settings import Settings, get_settings
from formcraft.typing.models import FormDefinitionSnapshot

MARKUP_FILENAME = "form.tsx"
SCHEMA_FILENAME = "form-schema.ts"


def _field_kind_from_cli(value: str) -> str:
    """Validate a `--field` CLI value against the built-in registry.

    Args:
        value (str): CLI value.

    Raises:
        argparse.ArgumentTypeError: If the kind is not registered.

    Returns:
        str: Field kind identifier.
    """
    registry = default_registry()
    if value not in registry:
        supported = ", ".join(registry.kinds())
        raise argparse.ArgumentTypeError(f"unknown field kind '{value}' (expected one of: {supported})")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="formcraft")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("kinds", help="List available field kinds by category")

    new_parser = subparsers.add_parser("new", help="Create a form definition from a list of field kinds")
    new_parser.add_argument("--name", required=True)
    new_parser.add_argument(
        "--field",
        action="append",
        default=[],
        type=_field_kind_from_cli,
        dest="fields",
        help="Field kind to append; repeat to add several fields",
    )
    new_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    generate_parser = subparsers.add_parser("generate", help="Generate form markup and schema from a definition")
    generate_parser.add_argument("--definition", required=True, type=Path, dest="definition_path")
    generate_parser.add_argument("--output-dir", type=Path, default=None, dest="output_dir")

    return parser


def _render_kinds() -> str:
    """Render the registry palette as text."""
    lines: list[str] = []
    for category in default_registry().list_categories():
        lines.append(f"{category.name}:")
        lines.extend(f"  {descriptor.kind:<10} {descriptor.description}" for descriptor in category.descriptors)
    return "\n".join(lines) + "\n"


def _run_new(args: argparse.Namespace, settings: Settings) -> Path:
    """Create and persist a definition holding the requested fields.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.

    Returns:
        Path: Written definition path.
    """
    definition = FormDefinition(enforce_unique_names=settings.enforce_unique_names)
    for kind in args.fields:
        definition.add_field(kind)
    definition.select_field(None)

    snapshot = definition.to_snapshot(args.name)
    if args.output_path is not None:
        return write_definition(snapshot, args.output_path)
    return DefinitionStore(root=Path(settings.definitions_dir)).save(snapshot)


def _run_generate(args: argparse.Namespace, settings: Settings) -> bool:
    """Generate both artifacts for a stored definition.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.

    Returns:
        bool: True when both artifacts were generated.
    """
    snapshot = DefinitionStore.load(args.definition_path)
    bind_form_context(form=snapshot.name)
    try:
        return _write_artifacts(snapshot, args, settings)
    finally:
        clear_form_context()


def _write_artifacts(snapshot: FormDefinitionSnapshot, args: argparse.Namespace, settings: Settings) -> bool:
    definition = FormDefinition.from_snapshot(snapshot, enforce_unique_names=settings.enforce_unique_names)

    output_dir = args.output_dir or Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    succeeded = True
    artifacts = generate_artifacts(definition.instances, settings=settings)
    for artifact, filename in zip(artifacts, (MARKUP_FILENAME, SCHEMA_FILENAME), strict=True):
        if not artifact.ok:
            logger.error(
                "Artifact not written",
                extra={"artifact": artifact.artifact_type.to_str(), "error": artifact.error},
            )
            succeeded = False
            (output_dir / filename).unlink(missing_ok=True)
            continue
        target = output_dir / filename
        target.write_text(artifact.text, encoding="utf-8")
        logger.info("Artifact written", extra={"artifact": artifact.artifact_type.to_str(), "path": str(target)})
    return succeeded


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments, defaults to `sys.argv[1:]`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "kinds":
        sys.stdout.write(_render_kinds())
        return 0

    try:
        if args.command == "new":
            path = _run_new(args, settings)
            logger.info("Form definition created", extra={"definition_path": str(path)})
            return 0
        return 0 if _run_generate(args, settings) else 1
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Command aborted by user")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
