"""Exact and approximate conversion between numeric domains.

A numeric domain is a numpy integer or floating-point dtype. Converted
values are handed back as plain Python ``int``/``float`` so that later
arithmetic never wraps; the dtype only constrains which values are legal.
"""

from __future__ import annotations

import math
from typing import Any, Union

import numpy as np

from .errors import ConversionError

Number = Union[int, float]
DTypeLike = Any


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """Normalize a dtype spec and check that it names a numeric domain."""
    if dtype is int:
        resolved = np.dtype(np.int64)
    elif dtype is float:
        resolved = np.dtype(np.float64)
    else:
        try:
            resolved = np.dtype(dtype)
        except TypeError:
            raise TypeError(f"Not a numeric domain: {dtype!r}") from None
    if resolved.kind not in "iuf":
        raise TypeError(
            f"Numeric domain must be an integer or floating-point dtype, "
            f"got '{resolved}'."
        )
    return resolved


def _as_number(value: Any) -> Number:
    """Unwrap numpy scalars and reject anything that is not a real number."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"Expected an integer or float, got {type(value).__name__}."
        )
    return value


def _check_integer_range(original: Any, number: int, dtype: np.dtype) -> int:
    info = np.iinfo(dtype)
    if not int(info.min) <= number <= int(info.max):
        raise ConversionError(original)
    return number


def _cast_float(original: Any, number: Number, dtype: np.dtype) -> float:
    try:
        with np.errstate(over="ignore"):
            return float(dtype.type(number))
    except OverflowError:
        raise ConversionError(original) from None


def convert(value: Any, dtype: DTypeLike) -> Number:
    """Convert ``value`` into ``dtype`` without losing information.

    Raises
    ------
    ConversionError
        If the exact value is not representable in ``dtype`` (out of range,
        fractional value for an integer domain, or precision loss).
    """
    target = resolve_dtype(dtype)
    number = _as_number(value)

    if target.kind in "iu":
        if isinstance(number, float):
            if not math.isfinite(number) or not number.is_integer():
                raise ConversionError(value)
            number = int(number)
        return _check_integer_range(value, number, target)

    if isinstance(number, float) and math.isnan(number):
        return number
    result = _cast_float(value, number, target)
    # int == float comparison is exact
    if result != number:
        raise ConversionError(value)
    return result


def approx_convert(value: Any, dtype: DTypeLike) -> Number:
    """Convert ``value`` into ``dtype``, accepting loss of fractional precision.

    Floats convert to integers by truncation toward zero, so a fractional
    pixel position maps to the pixel that contains it. Genuine overflow and
    non-finite values still raise ``ConversionError``.
    """
    target = resolve_dtype(dtype)
    number = _as_number(value)

    if target.kind in "iu":
        if isinstance(number, float):
            if not math.isfinite(number):
                raise ConversionError(value)
            number = math.trunc(number)
        return _check_integer_range(value, number, target)

    if isinstance(number, float) and not math.isfinite(number):
        return number
    result = _cast_float(value, number, target)
    if math.isinf(result):
        raise ConversionError(value)
    return result
