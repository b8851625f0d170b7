"""Numeric precision reduction."""

import math
from typing import Any

from .document import REQUIRED_FIELDS
from .walk import deep_copy, is_number, map_scalars

# Floats at or above this magnitude print in exponent form, which is
# shorter than the equivalent integer literal.
_INT_LITERAL_LIMIT = 1e16


def round_number(value: Any, precision: int) -> Any:
    """Round half up to precision decimals, the way JavaScript's Math.round does.

    Integers are returned unchanged. A float that rounds to a whole number
    becomes an int so it serializes without a trailing ``.0``. When the
    rounded literal would be longer than the original (``5e-05`` becoming
    ``0.0001``), the original value is kept.
    Non-numbers and non-finite floats are returned unchanged.
    """
    if not is_number(value) or isinstance(value, int):
        return value
    multiplier = 10 ** precision
    scaled = value * multiplier
    if not math.isfinite(scaled):
        return value
    rounded = math.floor(scaled + 0.5) / multiplier
    if rounded.is_integer() and abs(rounded) < _INT_LITERAL_LIMIT:
        rounded = int(rounded)
    if len(repr(rounded)) > len(repr(value)):
        return value
    return rounded


def round_decimals(document: Any, precision: int) -> Any:
    """Round every numeric leaf of the document to precision decimals.

    The required top-level fields keep their exact values.
    """
    if not isinstance(document, dict):
        return map_scalars(document, lambda leaf: round_number(leaf, precision))
    return {
        key: deep_copy(value) if key in REQUIRED_FIELDS
        else map_scalars(value, lambda leaf: round_number(leaf, precision))
        for key, value in document.items()
    }
