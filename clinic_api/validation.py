"""
clinic_api/validation.py — Identifier and query parameter helpers.

Pure functions, no side effects. Path ids are strict; visit query filters
use lenient prefix parsing and never reject a request.
"""
from __future__ import annotations

import re

MAX_ID = 2**31 - 1
MAX_ID_DIGITS = len(str(MAX_ID))

_ID_PATTERN = re.compile(r"[0-9]+")
_INT_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")


def is_invalid_id(value: str | None) -> bool:
    """True unless ``value`` is a run of ASCII digits naming an id in 1..MAX_ID."""
    if not value or _ID_PATTERN.fullmatch(value) is None:
        return True
    # Checked before int() so huge tokens never reach the conversion.
    digits = value.lstrip("0")
    if not digits or len(digits) > MAX_ID_DIGITS:
        return True
    return int(digits) > MAX_ID


def parse_id(value: str) -> int:
    """Normalize a path id to the collections' native ``int`` ids."""
    if is_invalid_id(value):
        raise ValueError(f"Invalid id: {value!r}")
    return int(value.lstrip("0"))


def parse_int(value: str) -> int | None:
    """
    Parse the leading base-10 integer of ``value``.

    Leading whitespace and a single sign are allowed and trailing garbage is
    ignored, so ``"12abc"`` gives 12. Returns None when no digits are found,
    and for digit runs longer than any id, which can match no record.
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_ID_DIGITS:
        return None
    return int(sign + digits)
