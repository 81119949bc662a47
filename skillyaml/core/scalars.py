"""
Scalar coercion shared by the parser and the serializer.

Raw value text is turned into a typed scalar by a fixed precedence:

1. Quoted text stays a string, whatever it looks like.
2. Numeric text matching ``-?digits`` becomes an int.
3. Any other numeric text (``2.5``, ``1e3``, ``1e-05``) becomes a float.
4. ``true``/``false`` become booleans; anything else is a string.

Numeric text is a decimal number with optional sign, fraction and
exponent; surrounding spaces are allowed, ``inf``/``nan`` are not.
Blank text counts as numeric and becomes ``0``. The game server has
always read it that way and existing files rely on it.
"""

from __future__ import annotations

import json
import re
from typing import Union

from skillyaml.core.lines import is_quoted, strip_quotes, unescape_first_quote


Scalar = Union[int, float, bool, str]

_INT_RE = re.compile(r"^-?[0-9]+$")
_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def is_loose_numeric(text: str) -> bool:
    """Lenient numeric test: blank text or a decimal number, spaces allowed."""
    text = text.strip()
    return not text or _NUMBER_RE.match(text) is not None


def coerce(text: str) -> Scalar:
    """
    Convert raw value text into a typed scalar.

    Args:
        text: Value text as it appears after ``key: ``

    Returns:
        int, float, bool or str
    """
    if is_quoted(text):
        return unescape_first_quote(strip_quotes(text))

    if is_loose_numeric(text):
        number = text.strip()
        if not number:
            return 0
        if _INT_RE.match(number):
            return int(number)
        return float(number)

    if text == "true":
        return True
    if text == "false":
        return False
    return unescape_first_quote(text)


def encode(value: Scalar) -> str:
    """
    Generic textual encoding used before the quoting post-pass.

    Numbers and booleans are bare, strings are double-quoted with
    internal double quotes escaped. Floats may come out in exponent
    form (``1e-05``), which reads back as a float.
    """
    return json.dumps(value, ensure_ascii=False)
