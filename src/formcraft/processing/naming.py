"""Field name sanitizing, validation and default name generation."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from uuid import uuid4

from formcraft.exceptions import InvalidNameError

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_NON_WORD = re.compile(r"[^A-Za-z0-9_]")
_SUFFIX_LENGTH = 3
_MAX_ATTEMPTS = 32
_MAX_SUFFIX_LENGTH = 12
_RESERVED_NAMES = frozenset({"__proto__"})


def sanitize_field_name(raw: str) -> str:
    """Turn free text typed by a user into a candidate field name.

    Non-word characters are dropped, then leading digits.

    Args:
        raw (str): User input.

    Returns:
        str: Sanitized name, possibly empty.
    """
    return _NON_WORD.sub("", raw).lstrip("0123456789")


def is_valid_field_name(name: str) -> bool:
    """Return whether `name` is a valid field identifier."""
    return bool(_IDENTIFIER.fullmatch(name)) and name not in _RESERVED_NAMES


def validate_field_name(name: str) -> str:
    """Validate a field identifier.

    Args:
        name (str): Candidate name.

    Raises:
        InvalidNameError: If the name is empty, reserved or not an identifier.

    Returns:
        str: The unchanged name.
    """
    if not name:
        raise InvalidNameError(name=name, reason="must not be empty")
    if name in _RESERVED_NAMES:
        raise InvalidNameError(name=name, reason="is reserved in JavaScript object literals")
    if not is_valid_field_name(name):
        raise InvalidNameError(name=name)
    return name


def _random_suffix(length: int) -> str:
    return uuid4().hex[:length]


def generate_default_name(
    kind: str,
    taken: Collection[str] = (),
    *,
    suffix_factory: Callable[[int], str] = _random_suffix,
) -> str:
    """Build `<kind>_<suffix>` avoiding names already in use.

    The suffix grows by one character each time all attempts at the current
    length collide.

    Args:
        kind (str): Field kind identifier.
        taken (Collection[str]): Names already used in the form.
        suffix_factory (Callable[[int], str]): Returns a random alphanumeric suffix of the given length.

    Raises:
        InvalidNameError: If every candidate collides.

    Returns:
        str: Unused, valid field name.
    """
    prefix = sanitize_field_name(kind.lower()) or "field"
    length = _SUFFIX_LENGTH
    while length <= _MAX_SUFFIX_LENGTH:
        for _ in range(_MAX_ATTEMPTS):
            candidate = f"{prefix}_{suffix_factory(length)}"
            if candidate not in taken:
                return candidate
        length += 1
    raise InvalidNameError(name=prefix, reason="no unused name could be generated")
