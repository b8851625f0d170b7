"""Animation document I/O helpers (internal)."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from lottieslim._internal.canonical_json import ENCODING_ERRORS, canonical_bytes
from lottieslim.api import ValidationIssue, ValidationResult, check

OPTIMIZED_SUFFIX = "-optimized"


class InvalidAnimationError(ValueError):
    """Raised when a file does not hold an optimizable animation document."""
    def __init__(self, path: Path, message: str, validation: Optional[ValidationResult] = None):
        self.path = path
        self.validation = validation
        super().__init__(f"{path}: {message}")

    @property
    def issues(self) -> List[ValidationIssue]:
        """Validation issues behind the rejection; empty when the file was not JSON."""
        return self.validation.errors if self.validation is not None else []


def load_animation(path: Union[str, Path]) -> Dict[str, Any]:
    """Load and validate an animation document from a JSON file.

    Raises:
        FileNotFoundError: If path does not exist
        InvalidAnimationError: If the file is not JSON or fails validation
    """
    animation_path = Path(path)
    try:
        data = json.loads(animation_path.read_bytes().decode("utf-8", errors=ENCODING_ERRORS))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidAnimationError(animation_path, f"invalid JSON ({e})") from e

    result = check(data)
    if not result.ok:
        details = "; ".join(issue.message for issue in result.errors)
        raise InvalidAnimationError(animation_path, f"not a valid animation: {details}", result)
    return data


def optimized_path(source: Union[str, Path], output_dir: Optional[Path] = None) -> Path:
    """Destination for an optimized copy: <stem>-optimized.json beside source or in output_dir."""
    source_path = Path(source)
    name = f"{source_path.stem}{OPTIMIZED_SUFFIX}.json"
    return (output_dir if output_dir is not None else source_path.parent) / name


def write_animation(document: Any, path: Union[str, Path]) -> int:
    """Write document in canonical form and return the number of bytes written.

    The byte count equals the optimized size reported for the document.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    data = canonical_bytes(document)
    out_path.write_bytes(data)
    return len(data)
