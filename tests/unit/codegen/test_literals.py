from __future__ import annotations

import pytest

from formcraft.codegen.literals import indent_block, jsx_attr, jsx_text, ts_number, ts_string


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", '"plain"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("line\nbreak", '"line\\nbreak"'),
        ("café", '"café"'),
    ],
)
def test_ts_string_escapes(value: str, expected: str) -> None:
    assert ts_string(value) == expected


@pytest.mark.parametrize(("value", "expected"), [(5.0, "5"), (0.5, "0.5"), (-3.0, "-3"), (7, "7")])
def test_ts_number(value: float, expected: str) -> None:
    assert ts_number(value) == expected


def test_jsx_text_escapes_markup_and_braces() -> None:
    assert jsx_text('<a> & {b} "c"') == '&lt;a&gt; &amp; &#123;b&#125; "c"'


def test_jsx_attr_quotes_value() -> None:
    assert jsx_attr('a "b" <c>') == '"a &quot;b&quot; &lt;c&gt;"'


def test_indent_block_keeps_blank_lines_empty() -> None:
    assert indent_block("a\n\n  b", 2) == "  a\n\n    b"
