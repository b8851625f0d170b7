"""Public API for the lottieslim package.

High-level functions that return complete, structured results.
Callers should use these functions instead of importing from kernel or _internal.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from lottieslim._internal.canonical_json import canonical_size
from lottieslim.codes import ValidationCode
from lottieslim.kernel.document import REQUIRED_FIELDS
from lottieslim.kernel.options import OptimizationOptions
from lottieslim.kernel.pipeline import run_pipeline
from lottieslim.kernel.walk import is_number

logger = logging.getLogger(__name__)

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_SIZE_STEP = 1000


class ValidationIssue(BaseModel):
    """A single failed requirement of the document gate."""
    code: ValidationCode
    message: str
    field: Optional[str] = None  # Required top-level field concerned, if any


class ValidationResult(BaseModel):
    """Result of the structural document check."""
    ok: bool
    errors: List[ValidationIssue] = Field(default_factory=list)


class OptimizationResult(BaseModel):
    """Sizes before and after optimization plus the rewritten document."""
    original_size: int  # Canonical UTF-8 bytes of the input
    optimized_size: int  # Canonical UTF-8 bytes of optimized_animation
    savings: int
    savings_percentage: float
    optimized_animation: Dict[str, Any]


def _has_type(value: Any, expected: str) -> bool:
    if expected == "string":
        return isinstance(value, str)
    return is_number(value)


def check(document: Any) -> ValidationResult:
    """Check the minimum structure every optimizable document must have.

    Reports every missing or mistyped required top-level field. Does not
    look at layers or assets.
    """
    if not isinstance(document, dict):
        issue = ValidationIssue(
            code=ValidationCode.NOT_AN_OBJECT,
            message=f"Document must be a JSON object, got {type(document).__name__}",
        )
        return ValidationResult(ok=False, errors=[issue])

    errors: List[ValidationIssue] = []
    for field_name, expected in REQUIRED_FIELDS.items():
        if field_name not in document:
            errors.append(ValidationIssue(
                code=ValidationCode.MISSING_FIELD,
                message=f"Missing required field '{field_name}' ({expected})",
                field=field_name,
            ))
        elif not _has_type(document[field_name], expected):
            errors.append(ValidationIssue(
                code=ValidationCode.WRONG_TYPE,
                message=(
                    f"Field '{field_name}' must be a {expected}, "
                    f"got {type(document[field_name]).__name__}"
                ),
                field=field_name,
            ))
    return ValidationResult(ok=not errors, errors=errors)


def validate(document: Any) -> bool:
    """Return True if document can enter the optimization pipeline."""
    return check(document).ok


def byte_size(document: Any) -> int:
    """UTF-8 byte length of the document's canonical serialization."""
    return canonical_size(document)


def savings_percentage(original_size: int, optimized_size: int) -> float:
    """Percentage of original_size saved; 0 when original_size is 0."""
    if original_size == 0:
        return 0.0
    return (original_size - optimized_size) / original_size * 100


def optimize(
    document: Dict[str, Any],
    options: Optional[OptimizationOptions] = None,
) -> OptimizationResult:
    """Run the optimization pipeline over a validated document.

    The input is never modified. Unused asset removal always runs; every
    other pass runs when its option flag is set.

    Args:
        document: Parsed animation document (should pass validate())
        options: Pass selection; defaults to OptimizationOptions()

    Returns:
        OptimizationResult with both canonical sizes and the new document
    """
    if options is None:
        options = OptimizationOptions()

    original_size = byte_size(document)
    optimized = run_pipeline(document, options)
    optimized_size = byte_size(optimized)

    savings = original_size - optimized_size
    percentage = savings_percentage(original_size, optimized_size)
    logger.debug(
        "Optimized %d -> %d bytes (%.2f%% saved)",
        original_size, optimized_size, percentage,
    )

    return OptimizationResult(
        original_size=original_size,
        optimized_size=optimized_size,
        savings=savings,
        savings_percentage=percentage,
        optimized_animation=optimized,
    )


def format_bytes(size: int) -> str:
    """Human readable size using decimal units, e.g. 1500 -> '1.5 KB'."""
    if size == 0:
        return "0 Bytes"
    unit = 0
    while unit < len(_SIZE_UNITS) - 1 and abs(size) >= _SIZE_STEP ** (unit + 1):
        unit += 1
    scaled = f"{size / _SIZE_STEP ** unit:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {_SIZE_UNITS[unit]}"
