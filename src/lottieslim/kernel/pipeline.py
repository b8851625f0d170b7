"""Pass registry and sequencing.

The order of PIPELINE is a contract: later passes assume the cleanup done
by earlier ones (defaults are stripped from the layers that survived
hidden-layer removal, assets are pruned against surviving layers only).
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .aggressive import collapse_transforms, remove_effects, remove_expressions
from .cleanup import remove_default_values, remove_empty_groups, remove_hidden_layers, remove_metadata
from .keyframes import collapse_duplicate_keyframes, simplify_keyframes
from .liveness import remove_unused_assets
from .numeric import round_decimals
from .options import OptimizationOptions
from .walk import deep_copy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassEntry:
    """A named pass and the option flag that enables it.

    option is None for passes that always run.
    """
    name: str
    option: Optional[str]
    func: Callable[[Any, OptimizationOptions], Any]
    lossy: bool = False

    def enabled(self, options: OptimizationOptions) -> bool:
        return self.option is None or bool(getattr(options, self.option))


def _plain(func: Callable[[Any], Any]) -> Callable[[Any, OptimizationOptions], Any]:
    return lambda document, options: func(document)


PIPELINE: Tuple[PassEntry, ...] = (
    PassEntry("remove_metadata", "remove_metadata", _plain(remove_metadata)),
    PassEntry("remove_hidden_layers", "remove_hidden_layers", _plain(remove_hidden_layers)),
    PassEntry("remove_unused_assets", None, _plain(remove_unused_assets)),
    PassEntry("remove_empty_groups", "remove_empty_groups", _plain(remove_empty_groups)),
    PassEntry("simplify_keyframes", "simplify_keyframes", _plain(simplify_keyframes)),
    PassEntry("remove_default_values", "remove_default_values", _plain(remove_default_values)),
    PassEntry(
        "round_decimals",
        "round_decimals",
        lambda document, options: round_decimals(document, options.decimal_precision),
    ),
    PassEntry("remove_expressions", "remove_expressions", _plain(remove_expressions), lossy=True),
    PassEntry("remove_effects", "remove_effects", _plain(remove_effects), lossy=True),
    PassEntry("collapse_transforms", "collapse_transforms", _plain(collapse_transforms), lossy=True),
    PassEntry(
        "collapse_duplicate_keyframes",
        "collapse_duplicate_keyframes",
        _plain(collapse_duplicate_keyframes),
        lossy=True,
    ),
)


def enabled_passes(options: OptimizationOptions) -> Tuple[PassEntry, ...]:
    """Return the passes options enable, in pipeline order."""
    return tuple(entry for entry in PIPELINE if entry.enabled(options))


def run_pipeline(document: Any, options: OptimizationOptions) -> Any:
    """Apply every enabled pass in order to a copy of document."""
    current = deep_copy(document)
    for entry in enabled_passes(options):
        logger.debug("Applying pass %s", entry.name)
        current = entry.func(current, options)
    return current
