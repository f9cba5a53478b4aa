from __future__ import annotations

import pytest

from formcraft.definition import FormDefinition
from formcraft.exceptions import (
    DuplicateNameError,
    InvalidConfigurationError,
    InvalidNameError,
    UnknownInstanceError,
    UnknownKindError,
)
from formcraft.typing.models import FieldInstance, FormDefinitionSnapshot


def _ids(definition: FormDefinition) -> list[str]:
    return [instance.id for instance in definition.instances]


def _selection_is_consistent(definition: FormDefinition) -> bool:
    return definition.selected_id is None or definition.selected_id in _ids(definition)


def test_add_field_seeds_defaults_and_selects(definition: FormDefinition) -> None:
    field_id = definition.add_field("email")

    instance = definition.get_field(field_id)
    assert instance.kind == "email"
    assert instance.name.startswith("email_")
    assert instance.props["label"] == "Email"
    assert instance.props["required"] is True
    assert instance.custom_options == {"allowed_domains": ""}
    assert definition.selected_id == field_id


def test_add_field_appends_in_order(definition: FormDefinition) -> None:
    first = definition.add_field("text")
    second = definition.add_field("number")

    assert _ids(definition) == [first, second]
    assert definition.selected_id == second


def test_add_field_rejects_unknown_kind_without_changes(definition: FormDefinition) -> None:
    definition.add_field("text")

    with pytest.raises(UnknownKindError):
        definition.add_field("slider")

    assert len(definition) == 1


def test_add_field_ids_are_unique(definition: FormDefinition) -> None:
    ids = {definition.add_field("checkbox") for _ in range(50)}

    assert len(ids) == 50
    assert len(set(definition.field_names())) == 50


def test_add_field_retries_colliding_ids(registry) -> None:
    generated = iter(["a", "a", "b"])
    definition = FormDefinition(registry, id_factory=lambda: next(generated))

    assert definition.add_field("text") == "a"
    assert definition.add_field("text") == "b"


def test_defaults_are_independent_per_instance(definition: FormDefinition) -> None:
    first = definition.add_field("select")
    second = definition.add_field("select")

    definition.update_custom_options(first, {"options": [{"label": "Red", "value": "red"}]})

    assert len(definition.get_field(second).custom_options["options"]) == 3


def test_remove_field_is_idempotent(definition: FormDefinition) -> None:
    keep = definition.add_field("text")
    drop = definition.add_field("text")

    definition.remove_field(drop)
    after_first = (definition.instances, definition.selected_id)
    definition.remove_field(drop)

    assert (definition.instances, definition.selected_id) == after_first
    assert _ids(definition) == [keep]


def test_remove_selected_field_clears_selection(definition: FormDefinition) -> None:
    first = definition.add_field("text")
    second = definition.add_field("text")

    definition.remove_field(second)
    assert definition.selected_id is None

    definition.select_field(first)
    definition.remove_field("unknown")
    assert definition.selected_id == first


def test_rename_field(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")

    definition.rename_field(field_id, "first_name")

    assert definition.get_field(field_id).name == "first_name"


def test_rename_field_to_its_own_name_is_allowed(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")
    current = definition.get_field(field_id).name

    definition.rename_field(field_id, current)

    assert definition.get_field(field_id).name == current


@pytest.mark.parametrize("bad_name", ["", "1st", "first name", "e-mail"])
def test_rename_field_rejects_invalid_identifiers(definition: FormDefinition, bad_name: str) -> None:
    field_id = definition.add_field("text")
    before = definition.get_field(field_id)

    with pytest.raises(InvalidNameError):
        definition.rename_field(field_id, bad_name)

    assert definition.get_field(field_id) == before


def test_rename_field_rejects_duplicates(definition: FormDefinition) -> None:
    first = definition.add_field("text")
    second = definition.add_field("text")
    definition.rename_field(first, "name")

    with pytest.raises(DuplicateNameError):
        definition.rename_field(second, "name")


def test_rename_field_allows_duplicates_when_not_enforced(registry) -> None:
    definition = FormDefinition(registry, enforce_unique_names=False)
    first = definition.add_field("text")
    second = definition.add_field("text")
    definition.rename_field(first, "name")

    definition.rename_field(second, "name")

    assert definition.field_names() == ["name", "name"]


def test_rename_unknown_field_raises(definition: FormDefinition) -> None:
    with pytest.raises(UnknownInstanceError):
        definition.rename_field("missing", "name")


def test_update_props_merges_shallowly(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")

    definition.update_props(field_id, {"label": "Full name", "required": True})

    props = definition.get_field(field_id).props
    assert props["label"] == "Full name"
    assert props["required"] is True
    assert props["placeholder"] == "Enter your name"


def test_update_props_rejects_unknown_keys_atomically(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")
    before = definition.get_field(field_id)

    with pytest.raises(InvalidConfigurationError, match="rows"):
        definition.update_props(field_id, {"label": "Changed", "rows": 4})

    assert definition.get_field(field_id) == before


def test_update_custom_options(definition: FormDefinition) -> None:
    field_id = definition.add_field("number")

    definition.update_custom_options(field_id, {"min": 5})
    definition.update_custom_options(field_id, {"max": 10})

    assert definition.get_field(field_id).custom_options == {"min": 5.0, "max": 10.0, "step": None}


def test_update_custom_options_rejects_invalid_values(definition: FormDefinition) -> None:
    field_id = definition.add_field("password")

    with pytest.raises(InvalidConfigurationError):
        definition.update_custom_options(field_id, {"validation_level": "extreme"})

    assert definition.get_field(field_id).custom_options == {"validation_level": "none"}


def test_update_unknown_field_raises(definition: FormDefinition) -> None:
    with pytest.raises(UnknownInstanceError):
        definition.update_props("missing", {"label": "x"})
    with pytest.raises(UnknownInstanceError):
        definition.update_custom_options("missing", {})


@pytest.mark.parametrize(
    ("active", "over", "expected"),
    [
        (0, 3, [1, 2, 3, 0, 4]),
        (3, 0, [3, 0, 1, 2, 4]),
        (1, 2, [0, 2, 1, 3, 4]),
        (4, 1, [0, 4, 1, 2, 3]),
    ],
)
def test_move_field_relocates_and_shifts(
    definition: FormDefinition,
    active: int,
    over: int,
    expected: list[int],
) -> None:
    ids = [definition.add_field("text") for _ in range(5)]

    definition.move_field(ids[active], ids[over])

    assert _ids(definition) == [ids[index] for index in expected]


def test_move_field_inverse_move_restores_order(definition: FormDefinition) -> None:
    ids = [definition.add_field("text") for _ in range(4)]

    definition.move_field(ids[0], ids[2])
    assert _ids(definition) == [ids[1], ids[2], ids[0], ids[3]]

    definition.move_field(ids[0], ids[1])
    assert _ids(definition) == ids


@pytest.mark.parametrize(("active", "over"), [("missing", None), (None, "missing"), (None, None)])
def test_move_field_noop_cases(definition: FormDefinition, active, over) -> None:
    ids = [definition.add_field("text") for _ in range(3)]
    before = definition.instances

    definition.move_field(active or ids[0], over or ids[0])

    assert definition.instances == before


def test_select_field(definition: FormDefinition) -> None:
    first = definition.add_field("text")
    definition.add_field("text")

    definition.select_field(first)
    assert definition.selected_instance == definition.get_field(first)

    definition.select_field(None)
    assert definition.selected_id is None
    assert definition.selected_instance is None


def test_select_unknown_field_raises_and_keeps_selection(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")

    with pytest.raises(UnknownInstanceError):
        definition.select_field("missing")

    assert definition.selected_id == field_id


def test_reset_clears_everything(definition: FormDefinition) -> None:
    definition.add_field("text")
    definition.add_field("email")

    definition.reset()

    assert definition.instances == ()
    assert definition.selected_id is None


def test_selection_invariant_holds_across_operations(definition: FormDefinition) -> None:
    a = definition.add_field("text")
    b = definition.add_field("email")
    c = definition.add_field("number")
    operations = [
        lambda: definition.move_field(c, a),
        lambda: definition.select_field(b),
        lambda: definition.remove_field(b),
        lambda: definition.rename_field(a, "first"),
        lambda: definition.remove_field(b),
        lambda: definition.select_field(c),
        lambda: definition.remove_field(c),
        lambda: definition.add_field("select"),
        lambda: definition.reset(),
    ]

    for operation in operations:
        operation()
        assert _selection_is_consistent(definition)


def test_instances_accessor_is_a_copy(definition: FormDefinition) -> None:
    definition.add_field("text")

    snapshot = definition.instances
    definition.add_field("text")

    assert len(snapshot) == 1


def test_snapshot_round_trip(definition: FormDefinition, registry) -> None:
    field_id = definition.add_field("number")
    definition.update_custom_options(field_id, {"min": 1})
    definition.rename_field(field_id, "age")

    restored = FormDefinition.from_snapshot(definition.to_snapshot("demo"), registry)

    assert restored.instances == definition.instances
    assert restored.selected_id == field_id


def test_from_snapshot_rejects_unknown_kind(registry) -> None:
    snapshot = FormDefinitionSnapshot(
        name="demo",
        fields=[FieldInstance(id="a", name="x", kind="slider")],
    )

    with pytest.raises(UnknownKindError):
        FormDefinition.from_snapshot(snapshot, registry)


def test_from_snapshot_rejects_duplicate_names(registry) -> None:
    snapshot = FormDefinitionSnapshot(
        name="demo",
        fields=[
            FieldInstance(id="a", name="x", kind="text"),
            FieldInstance(id="b", name="x", kind="text"),
        ],
    )

    with pytest.raises(DuplicateNameError):
        FormDefinition.from_snapshot(snapshot, registry)


def test_from_snapshot_fills_missing_defaults_from_models(registry) -> None:
    snapshot = FormDefinitionSnapshot(
        name="demo",
        fields=[FieldInstance(id="a", name="agree", kind="checkbox", props={"label": "Agree"})],
    )

    restored = FormDefinition.from_snapshot(snapshot, registry)

    assert restored.get_field("a").props == {"label": "Agree", "required": False, "helper_text": "", "class_name": ""}
    assert restored.get_field("a").custom_options == {"default_checked": False}


def test_rename_field_rejects_proto_key(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")

    with pytest.raises(InvalidNameError, match="reserved"):
        definition.rename_field(field_id, "__proto__")


def test_update_custom_options_rejects_uncompilable_pattern(definition: FormDefinition) -> None:
    field_id = definition.add_field("text")

    with pytest.raises(InvalidConfigurationError, match="pattern"):
        definition.update_custom_options(field_id, {"pattern": "([a-z]+"})

    assert definition.get_field(field_id).custom_options["pattern"] is None


@pytest.mark.parametrize("bound", [float("inf"), float("-inf"), float("nan")])
def test_update_custom_options_rejects_non_finite_numbers(definition: FormDefinition, bound: float) -> None:
    field_id = definition.add_field("number")

    with pytest.raises(InvalidConfigurationError):
        definition.update_custom_options(field_id, {"min": bound})

    assert definition.get_field(field_id).custom_options["min"] is None
