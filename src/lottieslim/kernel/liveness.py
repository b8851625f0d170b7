"""Unused asset elimination.

Assets are live when a surviving layer references them through ``refId``,
directly or through the layers of another live asset (precompositions
nesting precompositions). Everything else in the asset list is dead and
can be dropped without changing what is rendered.
"""

import logging
from typing import Any, Dict, List, Set

from .walk import deep_copy, iter_dicts

logger = logging.getLogger(__name__)

REFERENCE_KEY = "refId"


def collect_references(value: Any) -> Set[str]:
    """Return every string refId found anywhere inside value."""
    return {
        node[REFERENCE_KEY]
        for node in iter_dicts(value)
        if isinstance(node.get(REFERENCE_KEY), str)
    }


def _index_assets(assets: List[Any]) -> Dict[str, dict]:
    index: Dict[str, dict] = {}
    for asset in assets:
        if isinstance(asset, dict) and isinstance(asset.get("id"), str):
            index.setdefault(asset["id"], asset)
    return index


def find_live_assets(document: dict) -> Set[str]:
    """Compute the identifiers reachable from the top-level layer tree.

    Liveness propagates through the nested layers of live assets until a
    fixed point is reached. Identifiers that name no asset are included;
    they are harmless since only existing assets are filtered.
    """
    assets = document.get("assets")
    index = _index_assets(assets if isinstance(assets, list) else [])

    live: Set[str] = set()
    stack = sorted(collect_references(document.get("layers")))
    while stack:
        current = stack.pop()
        if current in live:
            continue
        live.add(current)
        asset = index.get(current)
        if asset is None:
            continue
        for ref in sorted(collect_references(asset.get("layers"))):
            if ref not in live:
                stack.append(ref)
    return live


def is_dead_asset(asset: Any, live: Set[str]) -> bool:
    """True for identifiable assets no live layer reaches.

    Entries without a string identifier cannot be referenced and are
    never considered dead.
    """
    return (
        isinstance(asset, dict)
        and isinstance(asset.get("id"), str)
        and asset["id"] not in live
    )


def remove_unused_assets(document: Any) -> Any:
    """Return a copy of the document keeping only assets reachable from its layers."""
    if not isinstance(document, dict) or not isinstance(document.get("assets"), list):
        return deep_copy(document)

    live = find_live_assets(document)
    result = {}
    for key, value in document.items():
        if key == "assets":
            kept = [deep_copy(asset) for asset in value if not is_dead_asset(asset, live)]
            dropped = len(value) - len(kept)
            if dropped:
                logger.debug("Dropped %d unreferenced asset(s)", dropped)
            result[key] = kept
        else:
            result[key] = deep_copy(value)
    return result
