from formcraft.exceptions import (
    DefinitionStoreError,
    DuplicateKindError,
    DuplicateNameError,
    EmissionError,
    InvalidConfigurationError,
    InvalidNameError,
    PackageError,
    RegistryFrozenError,
    SettingsError,
    UnknownInstanceError,
    UnknownKindError,
)


def test_root_exception_hierarchy() -> None:
    for error_type in (
        SettingsError,
        UnknownKindError,
        DuplicateKindError,
        RegistryFrozenError,
        UnknownInstanceError,
        InvalidNameError,
        InvalidConfigurationError,
        EmissionError,
        DefinitionStoreError,
    ):
        assert issubclass(error_type, PackageError)


def test_duplicate_name_is_an_invalid_name() -> None:
    error = DuplicateNameError(name="email")

    assert isinstance(error, InvalidNameError)
    assert str(error) == "Invalid field name 'email': already used by another field"


def test_error_messages_name_the_offending_value() -> None:
    assert str(UnknownKindError(kind="slider")) == "Unknown field kind 'slider'"
    assert str(UnknownInstanceError(instance_id="abc")) == "Unknown field instance 'abc'"
    assert str(EmissionError(kind="select", field_name="color", message="boom")) == (
        "Cannot emit 'color' (select): boom"
    )
