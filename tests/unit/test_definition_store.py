from __future__ import annotations

import json
from pathlib import Path

import pytest

from formcraft.definition_store import DefinitionStore, safe_file_stem, write_definition
from formcraft.exceptions import DefinitionStoreError
from formcraft.typing.models import FieldInstance, FormDefinitionSnapshot


def _snapshot(name: str = "Signup Form") -> FormDefinitionSnapshot:
    return FormDefinitionSnapshot(
        name=name,
        fields=[FieldInstance(id="a", name="email", kind="email", props={"label": "Email"})],
        selected_id="a",
    )


def test_save_load_and_list(tmp_path) -> None:
    store = DefinitionStore(root=tmp_path / "definitions")

    path = store.save(_snapshot())
    loaded = store.load(path)

    assert path.name == "signup-form.form.json"
    assert loaded == _snapshot()
    assert store.list_definitions() == [path]


def test_save_uses_versioned_envelope(tmp_path) -> None:
    path = DefinitionStore(root=tmp_path).save(_snapshot())

    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload["definition_file_version"] == 1
    assert payload["definition"]["name"] == "Signup Form"
    assert path.read_text(encoding="utf-8").endswith("}\n")


def test_load_accepts_bare_definition_payload(tmp_path) -> None:
    path = tmp_path / "bare.form.json"
    path.write_text(_snapshot().model_dump_json(), encoding="utf-8")

    assert DefinitionStore.load(path).name == "Signup Form"


def test_load_rejects_unsupported_version(tmp_path) -> None:
    path = tmp_path / "future.form.json"
    path.write_text(json.dumps({"definition_file_version": 2, "definition": {"name": "x"}}), encoding="utf-8")

    with pytest.raises(DefinitionStoreError, match="Unsupported definition file version: 2"):
        DefinitionStore.load(path)


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("{not json", "not valid JSON"),
        ("[]", "must be a JSON object"),
        ('{"name": "x", "fields": [], "selected_id": "ghost"}', "Invalid form definition"),
    ],
)
def test_load_rejects_bad_content(tmp_path, content: str, match: str) -> None:
    path = tmp_path / "bad.form.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(DefinitionStoreError, match=match):
        DefinitionStore.load(path)


def test_load_rejects_missing_or_misnamed_files(tmp_path) -> None:
    misnamed = tmp_path / "definition.json"
    misnamed.write_text("{}", encoding="utf-8")

    with pytest.raises(DefinitionStoreError, match="not a file"):
        DefinitionStore.load(tmp_path / "missing.form.json")
    with pytest.raises(DefinitionStoreError, match="must end with"):
        DefinitionStore.load(misnamed)


def test_load_wraps_undecodable_file(tmp_path) -> None:
    path = tmp_path / "latin.form.json"
    path.write_bytes(b'{"name": "caf\xe9"}')

    with pytest.raises(DefinitionStoreError, match="Cannot read definition file"):
        DefinitionStore.load(path)


def test_load_wraps_os_errors(tmp_path, mocker) -> None:
    path = DefinitionStore(root=tmp_path).save(_snapshot())
    mocker.patch.object(Path, "read_text", side_effect=PermissionError("denied"))

    with pytest.raises(DefinitionStoreError, match="denied"):
        DefinitionStore.load(path)


def test_write_definition_requires_suffix(tmp_path) -> None:
    with pytest.raises(DefinitionStoreError, match="must end with"):
        write_definition(_snapshot(), tmp_path / "out.json")


@pytest.mark.parametrize(
    ("name", "expected"),
    [("Signup Form", "signup-form"), ("  ", "form"), ("a/b\\c", "a-b-c"), ("v1.2", "v1.2")],
)
def test_safe_file_stem(name: str, expected: str) -> None:
    assert safe_file_stem(name) == expected
