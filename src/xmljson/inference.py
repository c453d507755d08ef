"""Scalar type inference for XML text and attribute values.

``parse_text()`` turns raw text into a JSON scalar (``int``, ``float``,
``bool`` or ``str``) according to a ``JsonType`` policy.  The checks under
``JsonTypeKind.INFER`` run in a fixed order: integer, float, boolean and
finally string.  Only a decimal point is recognised; there is no locale
handling, no thousands separators and only ASCII digits.
"""

from __future__ import annotations

import math
import re

from xmljson.models import JsonType, JsonTypeKind

_LEADING_ZERO_RE = re.compile(r"0\d+", re.ASCII)
_INT_RE = re.compile(r"-?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_BOOL_LITERALS = {"true": True, "false": False}


def parse_text(
    text: str,
    json_type: JsonType,
    leading_zero_as_string: bool = False,
) -> str | int | float | bool:
    """Convert *text* into a JSON scalar.

    Surrounding whitespace is stripped before any policy applies.

    Parameters
    ----------
    text:
        Raw element text or attribute value.
    json_type:
        The policy for the path the text was found at.
    leading_zero_as_string:
        Keep all-digit values with a leading zero (``"007"``) as strings.
        ``"0"`` on its own is always the integer ``0``.

    Returns
    -------
    str | int | float | bool
        The inferred scalar.
    """
    text = text.strip()

    if json_type.kind is JsonTypeKind.ALWAYS_STRING:
        return text

    if json_type.kind is JsonTypeKind.BOOL:
        return text in json_type.true_values

    if leading_zero_as_string and _LEADING_ZERO_RE.fullmatch(text):
        return text

    if _INT_RE.fullmatch(text):
        return int(text)

    if _FLOAT_RE.fullmatch(text):
        # "01.5" and friends look like mangled identifiers, not numbers
        if text.startswith("0") and not text.startswith("0."):
            return text
        value = float(text)
        if not math.isinf(value):
            return value

    if text in _BOOL_LITERALS:
        return _BOOL_LITERALS[text]

    return text
