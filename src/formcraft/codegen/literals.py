"""Helpers turning Python values into TypeScript and JSX source text."""

from __future__ import annotations

import html
import json
import textwrap


def ts_string(value: str) -> str:
    """Return a double-quoted TypeScript string literal.

    Args:
        value (str): Raw text.

    Returns:
        str: Escaped literal, quotes included.
    """
    return json.dumps(value, ensure_ascii=False)


def ts_number(value: float) -> str:
    """Return a TypeScript number literal, dropping a redundant `.0`.

    Args:
        value (float): Numeric value.

    Returns:
        str: Number literal.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def jsx_text(value: str) -> str:
    """Escape text placed between JSX tags.

    Args:
        value (str): Raw text.

    Returns:
        str: Text safe to embed as a JSX child.
    """
    escaped = html.escape(value, quote=False)
    return escaped.replace("{", "&#123;").replace("}", "&#125;")


def jsx_attr(value: str) -> str:
    """Return a double-quoted JSX attribute value.

    Args:
        value (str): Raw attribute text.

    Returns:
        str: Quoted attribute value.
    """
    return f'"{html.escape(value, quote=True)}"'


def indent_block(text: str, width: int) -> str:
    """Indent every non-blank line of `text` by `width` spaces.

    Args:
        text (str): Source block.
        width (int): Number of spaces.

    Returns:
        str: Indented block; blank lines stay empty.
    """
    return textwrap.indent(text, " " * width, predicate=lambda line: bool(line.strip()))
