"""Scalar checks and loose equality for enumeration values.

Enumeration values are strings or real numbers.  Comparisons between them
are *loose*: a number and its textual form are the same value, so ``1``,
``1.0``, ``"1"`` and ``" 1e0 "`` all compare equal.  Anything that does not
read as a finite number is compared as a string.
"""

from __future__ import annotations

import numbers
from decimal import Decimal, InvalidOperation
from typing import Any, Union

Scalar = Union[str, int, float, Decimal]


def is_scalar(value: Any) -> bool:
    """Return ``True`` if *value* is a string or a real number (not a bool)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return True
    return isinstance(value, (numbers.Real, Decimal))


def _as_decimal(text: str) -> Decimal | None:
    # Decimal accepts "2_00"; digit separators are not part of a numeric string
    if "_" in text:
        return None
    try:
        number = Decimal(text.strip())
    except InvalidOperation:
        return None
    # "nan", "inf" and friends are words, not numbers
    return number if number.is_finite() else None


def normalize(value: Scalar) -> Decimal | str:
    """Return the canonical comparable form of a scalar.

    Numbers and numeric strings become :class:`~decimal.Decimal`; other
    strings are returned unchanged.
    """
    if isinstance(value, str):
        number = _as_decimal(value)
        return value if number is None else number
    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    # repr of a float is the shortest round-tripping text, so 0.1 -> "0.1"
    return Decimal(repr(float(value)))


def loose_equals(left: Any, right: Any) -> bool:
    """Compare two scalars loosely.

    Returns ``False`` when either side is not a scalar, when either side is
    NaN, or when a number meets a string that does not read as a number.
    """
    if not (is_scalar(left) and is_scalar(right)):
        return False
    a = normalize(left)
    b = normalize(right)
    if isinstance(a, Decimal) and isinstance(b, Decimal):
        # NaN equals nothing; comparing a signaling NaN would raise
        if a.is_nan() or b.is_nan():
            return False
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    # a number never equals a non-numeric string
    return False
