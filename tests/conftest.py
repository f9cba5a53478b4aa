"""Pytest marker auto-assignment by folder and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from formcraft import logger
from formcraft.definition import FormDefinition
from formcraft.registry import ComponentRegistry, default_registry
from formcraft.settings import Settings
from formcraft.typing.models import FieldInstance


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def registry() -> ComponentRegistry:
    return default_registry()


@pytest.fixture
def definition(registry: ComponentRegistry) -> FormDefinition:
    return FormDefinition(registry)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_instance(registry: ComponentRegistry):
    """Build a field instance seeded with kind defaults plus overrides."""

    def _make(
        kind: str,
        name: str = "field",
        *,
        props: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> FieldInstance:
        descriptor = registry.lookup(kind)
        return FieldInstance(
            id=f"id-{name}",
            name=name,
            kind=kind,
            props={**descriptor.default_props, **(props or {})},
            custom_options={**descriptor.default_custom_options, **(options or {})},
        )

    return _make
