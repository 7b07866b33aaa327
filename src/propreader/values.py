"""Typed property values and the text-to-value coercion rules."""

from __future__ import annotations

import re
from typing import Any, Union

__all__ = ["Value", "is_numeric", "parse_number", "coerce_value"]

Value = Union[int, float, bool, str]

_DECIMAL_INT = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY = re.compile(r"[+-]?Infinity")
# Prefixed literals are unsigned.
_PREFIXED_INT = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_number(text: str) -> int | float | None:
    """Parse ``text`` as a numeric literal, or return None if it is not one.

    Surrounding whitespace is ignored. Accepted forms are signed decimal
    integers and fractions with an optional exponent, ``Infinity`` with an
    optional sign, and unsigned ``0x``/``0o``/``0b`` integers. Empty and
    whitespace-only strings are not numbers, and neither is ``NaN``.
    """
    candidate = text.strip()
    if not candidate:
        return None
    if _DECIMAL_INT.fullmatch(candidate):
        return int(candidate)
    if _PREFIXED_INT.fullmatch(candidate):
        return int(candidate, 0)
    if _DECIMAL_FLOAT.fullmatch(candidate):
        return float(candidate)
    if _INFINITY.fullmatch(candidate):
        return float("-inf") if candidate.startswith("-") else float("inf")
    return None


def is_numeric(text: str) -> bool:
    """Return True if ``text`` is wholly a numeric literal."""
    return parse_number(text) is not None


def coerce_value(raw: Any) -> Value:
    """Convert a raw property value into its typed form.

    Strings are tried as a number first, then as the exact literals
    ``true``/``false``, and otherwise kept as the stripped string. Values that
    are already typed pass through unchanged so that replaying stored values
    is lossless.
    """
    if isinstance(raw, (bool, int, float)):
        return raw
    text = "" if raw is None else str(raw)
    number = parse_number(text)
    if number is not None:
        return number
    if text == "true" or text == "false":
        return text == "true"
    return text.strip()
