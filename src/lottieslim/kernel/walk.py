"""Tree walker primitives over JSON-like values.

Every pass is built from these helpers. They never mutate their input:
each returns a freshly built value (scalars are immutable and are shared).

A JSON-like value is a dict with string keys, a list, or a scalar
(int, float, str, bool, None).
"""

from typing import Any, Callable, Iterator

JsonValue = Any
KeyPredicate = Callable[[str, JsonValue], bool]


def is_number(value: Any) -> bool:
    """True for int and float values; bool is not a number in JSON."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def deep_copy(value: JsonValue) -> JsonValue:
    """Build a new owned copy of a JSON-like value."""
    if isinstance(value, dict):
        return {key: deep_copy(item) for key, item in value.items()}
    if isinstance(value, list):
        return [deep_copy(item) for item in value]
    return value


def map_scalars(value: JsonValue, func: Callable[[JsonValue], JsonValue]) -> JsonValue:
    """Apply func to every scalar leaf, rebuilding containers around the results."""
    if isinstance(value, dict):
        return {key: map_scalars(item, func) for key, item in value.items()}
    if isinstance(value, list):
        return [map_scalars(item, func) for item in value]
    return func(value)


def drop_entries(value: JsonValue, should_drop: KeyPredicate) -> JsonValue:
    """Remove dict entries matching should_drop(key, value) at every nesting level.

    The predicate sees the original (unprocessed) entry value; dropped
    entries are not recursed into.
    """
    if isinstance(value, dict):
        return {
            key: drop_entries(item, should_drop)
            for key, item in value.items()
            if not should_drop(key, item)
        }
    if isinstance(value, list):
        return [drop_entries(item, should_drop) for item in value]
    return value


def filter_lists(value: JsonValue, keep: Callable[[JsonValue], bool]) -> JsonValue:
    """Filter every list in the tree, bottom-up.

    Children are processed before the keep predicate is evaluated, so the
    predicate sees already-filtered items.
    """
    if isinstance(value, dict):
        return {key: filter_lists(item, keep) for key, item in value.items()}
    if isinstance(value, list):
        processed = (filter_lists(item, keep) for item in value)
        return [item for item in processed if keep(item)]
    return value


def iter_dicts(value: JsonValue) -> Iterator[dict]:
    """Yield every dict in the tree, parents before children."""
    stack = [value]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            yield current
            stack.extend(reversed(list(current.values())))
        elif isinstance(current, list):
            stack.extend(reversed(current))
