"""Opt-in lossy passes.

These change what the renderer draws (expressions, effects) or rely on
renderer defaults for omitted transform properties, so they are off
unless explicitly enabled.
"""

from typing import Any

from .properties import StaticProperty, recognize_property
from .walk import drop_entries, is_number

EXPRESSION_KEY = "x"
EFFECTS_KEY = "ef"
TRANSFORM_KEY = "ks"


def remove_expressions(document: Any) -> Any:
    """Drop attached expression scripts at every level."""
    return drop_entries(
        document,
        lambda key, value: key == EXPRESSION_KEY and isinstance(value, str),
    )


def remove_effects(document: Any) -> Any:
    """Drop whole effect stacks at every level."""
    return drop_entries(
        document,
        lambda key, value: key == EFFECTS_KEY and isinstance(value, list),
    )


def _is_scalar_or_single(value: Any, expected: float) -> bool:
    if is_number(value):
        return value == expected
    return (
        isinstance(value, list)
        and len(value) == 1
        and is_number(value[0])
        and value[0] == expected
    )


def _is_uniform_list(value: Any, expected: float) -> bool:
    return isinstance(value, list) and all(
        is_number(item) and item == expected for item in value
    )


def is_identity_value(name: str, value: Any) -> bool:
    """True when value is the renderer default for transform property name."""
    if name == "o":
        return _is_scalar_or_single(value, 100)
    if name == "r":
        return _is_scalar_or_single(value, 0)
    if name in ("p", "a"):
        return _is_uniform_list(value, 0)
    if name == "s":
        return _is_uniform_list(value, 100)
    return False


def _collapse_transform(transform: dict) -> dict:
    result = {}
    for name, prop in transform.items():
        recognized = recognize_property(prop)
        if isinstance(recognized, StaticProperty) and is_identity_value(name, recognized.value):
            continue
        result[name] = collapse_transforms(prop)
    return result


def collapse_transforms(value: Any) -> Any:
    """Drop static transform properties that hold the renderer default."""
    if isinstance(value, list):
        return [collapse_transforms(item) for item in value]
    if not isinstance(value, dict):
        return value
    result = {}
    for key, item in value.items():
        if key == TRANSFORM_KEY and isinstance(item, dict):
            result[key] = _collapse_transform(item)
        else:
            result[key] = collapse_transforms(item)
    return result

