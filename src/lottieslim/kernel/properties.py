"""Recognition of animatable properties.

An animatable property is a dict with an animated flag ``a`` and a value
``k``. When ``a`` is 1 the value is a keyframe sequence; otherwise it is a
literal value.

Keyframe sequences are recognized heuristically: a non-empty list whose
first element is a dict carrying a time field ``t``. This is not a schema
guarantee. An unrelated list whose first element happens to have a ``t``
key is treated as keyframes too; values that do not fit simply pass
through the passes unchanged.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Union

from .walk import is_number

TIME_KEY = "t"


@dataclass(frozen=True)
class StaticProperty:
    """A property holding one literal value (animated flag 0 or absent)."""
    value: Any


@dataclass(frozen=True)
class AnimatedProperty:
    """A property driven by a keyframe sequence (animated flag 1)."""
    keyframes: List[dict]


Property = Union[StaticProperty, AnimatedProperty]


def is_keyframe_sequence(value: Any) -> bool:
    """True if value looks like a keyframe list (first element has a time field)."""
    return (
        isinstance(value, list)
        and len(value) > 0
        and isinstance(value[0], dict)
        and TIME_KEY in value[0]
    )


def _flag(prop: dict) -> Optional[Any]:
    flag = prop.get("a")
    return flag if is_number(flag) else None


def recognize_property(value: Any) -> Optional[Property]:
    """Classify value as a static or animated property.

    Returns None when value does not have a recognizable property shape.
    """
    if not isinstance(value, dict):
        return None
    flag = _flag(value)
    if flag == 1 and is_keyframe_sequence(value.get("k")):
        return AnimatedProperty(keyframes=value["k"])
    if ("a" not in value or flag == 0) and "k" in value:
        return StaticProperty(value=value["k"])
    return None


def handle_component(handle: dict, axis: str) -> Optional[float]:
    """Return the first numeric control value of a bezier handle axis.

    Handles store ``x``/``y`` either as a number or as a per-dimension list;
    only the first dimension is inspected. Returns None when absent or not
    numeric.
    """
    component = handle.get(axis)
    if isinstance(component, list):
        component = component[0] if component else None
    return component if is_number(component) else None
