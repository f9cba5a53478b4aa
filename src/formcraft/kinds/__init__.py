"""Built-in field kinds and their palette grouping."""

from formcraft.kinds.base import FieldKindBase, InputFieldKind
from formcraft.kinds.checkbox import CheckboxFieldKind
from formcraft.kinds.email import EmailFieldKind
from formcraft.kinds.number import NumberFieldKind
from formcraft.kinds.otp import OtpFieldKind
from formcraft.kinds.password import PasswordFieldKind
from formcraft.kinds.phone import PhoneFieldKind
from formcraft.kinds.select import SelectFieldKind
from formcraft.kinds.text import TextFieldKind
from formcraft.kinds.textarea import TextareaFieldKind
from formcraft.typing.protocol import FieldKindDescriptor

DEFAULT_CATEGORIES: tuple[tuple[str, tuple[FieldKindDescriptor, ...]], ...] = (
    (
        "Inputs",
        (
            TextFieldKind(),
            PasswordFieldKind(),
            EmailFieldKind(),
            NumberFieldKind(),
            PhoneFieldKind(),
            TextareaFieldKind(),
            OtpFieldKind(),
        ),
    ),
    (
        "Selectors",
        (
            SelectFieldKind(),
            CheckboxFieldKind(),
        ),
    ),
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "CheckboxFieldKind",
    "EmailFieldKind",
    "FieldKindBase",
    "InputFieldKind",
    "NumberFieldKind",
    "OtpFieldKind",
    "PasswordFieldKind",
    "PhoneFieldKind",
    "SelectFieldKind",
    "TextFieldKind",
    "TextareaFieldKind",
]
