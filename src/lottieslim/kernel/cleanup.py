"""Lossless cleanup passes: metadata, hidden layers, empty groups, defaults."""

from typing import Any, Optional

from .walk import deep_copy, drop_entries, filter_lists, is_number

# Top-level bookkeeping that never affects rendering.
METADATA_KEYS = frozenset({
    "meta",
    "markers",
    "fonts",
    "chars",
    "__typename",
    "created",
    "modified",
    "author",
    "description",
})

NULL_LAYER_TYPE = 3
GROUP_TYPE = "gr"

# Keys dropped whatever their value (editor-only names and classes).
COSMETIC_KEYS = frozenset({"mn", "ln", "cl"})

# Keys dropped when they hold the renderer's numeric default.
NUMERIC_DEFAULTS = {
    "bm": 0,   # blend mode: normal
    "ddd": 0,  # 3-D layer flag
    "ao": 0,   # auto-orient
    "sr": 1,   # time stretch
}

# Index hints, dropped when numeric.
INDEX_KEYS = frozenset({"ix", "cix"})


def remove_metadata(document: Any) -> Any:
    """Return a copy of the document without top-level metadata fields."""
    if not isinstance(document, dict):
        return deep_copy(document)
    return {
        key: deep_copy(value)
        for key, value in document.items()
        if key not in METADATA_KEYS
    }


def is_hidden_layer(layer: Any) -> bool:
    """True for layers flagged hidden and for null (placeholder) layers."""
    if not isinstance(layer, dict):
        return False
    if layer.get("hd") is True:
        return True
    layer_type = layer.get("ty")
    return is_number(layer_type) and layer_type == NULL_LAYER_TYPE


def _filter_layers(layers: Optional[Any]) -> Optional[Any]:
    if not isinstance(layers, list):
        return deep_copy(layers)
    return [deep_copy(layer) for layer in layers if not is_hidden_layer(layer)]


def remove_hidden_layers(document: Any) -> Any:
    """Drop hidden and null layers from the top-level and every asset's layer list.

    Surviving layers keep their relative order.
    """
    if not isinstance(document, dict):
        return deep_copy(document)

    result = {}
    for key, value in document.items():
        if key == "layers":
            result[key] = _filter_layers(value)
        elif key == "assets" and isinstance(value, list):
            assets = []
            for asset in value:
                if isinstance(asset, dict) and "layers" in asset:
                    asset = {
                        asset_key: _filter_layers(asset_value) if asset_key == "layers" else deep_copy(asset_value)
                        for asset_key, asset_value in asset.items()
                    }
                else:
                    asset = deep_copy(asset)
                assets.append(asset)
            result[key] = assets
        else:
            result[key] = deep_copy(value)
    return result


def is_empty_group(item: Any) -> bool:
    """True for shape groups holding at most one item.

    A group's item list normally ends with its transform, so one item
    means nothing is drawn.
    """
    if not isinstance(item, dict) or item.get("ty") != GROUP_TYPE:
        return False
    items = item.get("it")
    return isinstance(items, list) and len(items) <= 1


def remove_empty_groups(document: Any) -> Any:
    """Drop degenerate shape groups from every list, innermost first."""
    return filter_lists(document, lambda item: not is_empty_group(item))


def is_default_entry(key: str, value: Any) -> bool:
    """True when the key/value pair is a no-op for the renderer."""
    if value is None:
        return True
    if key in COSMETIC_KEYS:
        return True
    if key == "nm" and isinstance(value, str):
        return True
    if key in INDEX_KEYS and is_number(value):
        return True
    if key in NUMERIC_DEFAULTS and is_number(value) and value == NUMERIC_DEFAULTS[key]:
        return True
    if key == "hd" and value is False:
        return True
    return False


def remove_default_values(document: Any) -> Any:
    """Drop default-valued and purely cosmetic entries at every level."""
    return drop_entries(document, is_default_entry)
