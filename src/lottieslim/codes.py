"""Validation code constants for lottieslim.api.check().

These constants prevent stringly-typed error codes and ensure
client code uses the correct validation codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation error codes."""

    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    MISSING_FIELD = "MISSING_FIELD"
    WRONG_TYPE = "WRONG_TYPE"
