"""
Text → value parsers for positional arguments.

Each parser takes the field name (for error messages), the raw string and a
bit width, and either returns the value or raises a `FieldError`.
"""

from __future__ import annotations

import re

from ..errors import FormatError, RangeError

_DIGITS = re.compile(r"[0-9]+")

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def max_uint(width: int) -> int:
    return (1 << width) - 1


def parse_uint(field: str, raw: str, width: int | None = 64) -> int:
    """Unsigned decimal that must fit in `width` bits.

    Only ASCII digits are accepted; signs, whitespace and separators are a
    syntax error. Leading zeros are fine.
    """
    if not isinstance(raw, str) or _DIGITS.fullmatch(raw) is None:
        raise FormatError(field, str(raw))
    digits = raw.lstrip("0") or "0"
    if len(digits) > len(str(max_uint(64))):
        raise RangeError(field, raw)
    value = int(digits)
    if value > max_uint(width or 64):
        raise RangeError(field, raw)
    return value


def parse_bool(field: str, raw: str, width: int | None = None) -> bool:
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise FormatError(field, str(raw))
