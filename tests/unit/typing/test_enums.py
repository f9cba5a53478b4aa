from __future__ import annotations

import pytest

from formcraft.typing.enums import ArtifactStatus, FieldKindId, PasswordStrength, PhoneFormat


def test_field_kind_id_from_str() -> None:
    assert FieldKindId.from_str("email") == FieldKindId.EMAIL


def test_field_kind_id_from_str_raises_on_invalid_value() -> None:
    with pytest.raises(ValueError, match="Unsupported FieldKindId value"):
        FieldKindId.from_str("slider")


def test_option_enums_round_trip_to_str() -> None:
    assert PasswordStrength.STRICT.to_str() == "strict"
    assert PhoneFormat.from_str("national") == PhoneFormat.NATIONAL
    assert ArtifactStatus.ERROR.to_str() == "error"
