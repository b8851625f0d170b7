"""Keyframe passes: easing handle simplification and constant-sequence collapse."""

from typing import Any

from lottieslim._internal.canonical_json import canonical_dumps

from .properties import AnimatedProperty, handle_component, is_keyframe_sequence, recognize_property
from .walk import deep_copy, map_scalars

HANDLE_KEYS = ("i", "o")
LINEAR_HANDLE = 0.5
HANDLE_TOLERANCE = 0.01


def is_linear_handle(handle: Any) -> bool:
    """True if both control values of a bezier handle sit within tolerance of 0.5."""
    if not isinstance(handle, dict):
        return False
    x = handle_component(handle, "x")
    y = handle_component(handle, "y")
    if x is None or y is None:
        return False
    return abs(x - LINEAR_HANDLE) < HANDLE_TOLERANCE and abs(y - LINEAR_HANDLE) < HANDLE_TOLERANCE


def _simplify_keyframe(keyframe: Any) -> Any:
    if not isinstance(keyframe, dict):
        return deep_copy(keyframe)
    return {
        key: deep_copy(value)
        for key, value in keyframe.items()
        if not (key in HANDLE_KEYS and is_linear_handle(value))
    }


def simplify_keyframes(value: Any) -> Any:
    """Drop redundant linear easing handles from every keyframe sequence."""
    if isinstance(value, list):
        return [simplify_keyframes(item) for item in value]
    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if key == "k" and is_keyframe_sequence(item):
                result[key] = [_simplify_keyframe(keyframe) for keyframe in item]
            else:
                result[key] = simplify_keyframes(item)
        return result
    return value


def _comparable(value: Any) -> str:
    """Canonical text of value with whole floats written as ints (1.0 == 1, never true)."""
    return canonical_dumps(map_scalars(
        value,
        lambda leaf: int(leaf) if isinstance(leaf, float) and leaf.is_integer() else leaf,
    ))


def _constant_start_value(prop: AnimatedProperty):
    """Return (True, value) if every keyframe with a start value shares it."""
    starts = [kf["s"] for kf in prop.keyframes if isinstance(kf, dict) and "s" in kf]
    if not starts:
        return False, None
    first = _comparable(starts[0])
    if all(_comparable(start) == first for start in starts[1:]):
        return True, starts[0]
    return False, None


def collapse_duplicate_keyframes(value: Any) -> Any:
    """Replace animated properties whose keyframes never change value with static ones.

    Start values are compared by deep value equality: 1 and 1.0 are equal,
    while 1 and true are not.
    """
    if isinstance(value, list):
        return [collapse_duplicate_keyframes(item) for item in value]
    if not isinstance(value, dict):
        return value

    result = {key: collapse_duplicate_keyframes(item) for key, item in value.items()}
    prop = recognize_property(result)
    if isinstance(prop, AnimatedProperty):
        constant, start = _constant_start_value(prop)
        if constant:
            return {"a": 0, "k": start}
    return result
